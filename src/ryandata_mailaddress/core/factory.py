"""Generic plugin factory base class.

Provides a reusable factory pattern for creating instances from a registry
of registered types. Subclasses specify the protocol type, default type,
and how to register defaults.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

T = TypeVar("T")


class PluginFactory(ABC, Generic[T]):
    """Generic factory for creating plugin instances from a registry.

    Subclasses define ``_registry``, ``_entity_name`` and
    ``_ensure_defaults_registered()``, and either a fixed ``_default_type``
    or an override of ``default_type()``.

    Example subclass:
        class ParserFactory(PluginFactory[HeaderParserProtocol]):
            _registry: ClassVar[dict[str, type[HeaderParserProtocol]]] = {}
            _default_type: ClassVar[str] = "header"
            _entity_name: ClassVar[str] = "parser"

            @classmethod
            def _ensure_defaults_registered(cls) -> None:
                if "header" not in cls._registry:
                    from ... import HeaderParser
                    cls._registry["header"] = HeaderParser
    """

    _registry: ClassVar[dict[str, type[Any]]]
    _default_type: ClassVar[str]
    _entity_name: ClassVar[str]

    @classmethod
    @abstractmethod
    def _ensure_defaults_registered(cls) -> None:
        """Lazily register the default implementations.

        Called before every registry access.
        """
        ...

    @classmethod
    def default_type(cls) -> str:
        """Type name used when ``create()`` is called without one."""
        return cls._default_type

    @classmethod
    def register(cls, name: str, impl_class: type[T]) -> None:
        """Register an implementation type under a name."""
        cls._registry[name] = impl_class

    @classmethod
    def unregister(cls, name: str) -> None:
        """Unregister an implementation type; unknown names are ignored."""
        cls._registry.pop(name, None)

    @classmethod
    def create(cls, name: str | None = None, **kwargs: Any) -> T:
        """Create an instance of the specified type.

        Args:
            name: Type name to create. If None, uses ``default_type()``.
            **kwargs: Arguments to pass to the constructor.

        Returns:
            Instance of the requested type.

        Raises:
            ValueError: If the type name is not registered.
        """
        cls._ensure_defaults_registered()

        type_name = name if name is not None else cls.default_type()

        if type_name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys()))
            raise ValueError(
                f"Unknown {cls._entity_name} type: {type_name}. Available types: {available}"
            )

        return cls._registry[type_name](**kwargs)  # type: ignore[no-any-return]

    @classmethod
    def available_types(cls) -> list[str]:
        """Get the sorted list of registered type names."""
        cls._ensure_defaults_registered()
        return sorted(cls._registry.keys())

    @classmethod
    def clear_registry(cls) -> None:
        """Clear the registry (mainly for testing)."""
        cls._registry.clear()
