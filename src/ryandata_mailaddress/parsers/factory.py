from __future__ import annotations

from typing import Any, ClassVar

from ryandata_mailaddress.core.factory import PluginFactory
from ryandata_mailaddress.protocols import HeaderParserProtocol


class ParserFactory(PluginFactory[HeaderParserProtocol]):
    """Factory for creating header parser instances.

    Supports registration of custom parser types and creation
    of parsers by type name.

    Example:
        >>> parser = ParserFactory.create("header", converter_type="native")

        # Register custom parser
        >>> ParserFactory.register("strict", StrictHeaderParser)
        >>> parser = ParserFactory.create("strict")
    """

    _registry: ClassVar[dict[str, type[HeaderParserProtocol]]] = {}
    _default_type: ClassVar[str] = "header"
    _entity_name: ClassVar[str] = "parser"

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        """Ensure default parsers are registered."""
        if "header" not in cls._registry:
            from ryandata_mailaddress.parsers.header_parser import HeaderParser

            cls._registry["header"] = HeaderParser

    @classmethod
    def create(  # type: ignore[override]
        cls,
        parser_type: str | None = None,
        **kwargs: Any,
    ) -> HeaderParserProtocol:
        """Create a parser instance.

        Args:
            parser_type: Type of parser to create. Defaults to "header".
            **kwargs: Arguments to pass to the parser constructor.

        Returns:
            Parser instance.

        Raises:
            ValueError: If the parser type is not registered.
        """
        return super().create(parser_type, **kwargs)
