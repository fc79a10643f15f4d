"""Address list model.

An AddressList is the ordered result of parsing a header. It never enforces
uniqueness on construction; rendering and the valid-address views work on
the deduplicated entries, while error aggregation and the containment
queries look at every entry.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from operator import attrgetter
from typing import Any

from abstract_validation_base import ValidationResult
from pydantic import Field, RootModel, ValidationError, model_validator
from pydantic_core import PydanticCustomError, PydanticUndefined

from ryandata_mailaddress.models.address import Address
from ryandata_mailaddress.models.enums import SortKey
from ryandata_mailaddress.models.errors import AddressListError, MailAddressValidationError


class AddressList(RootModel[list[Address]]):
    """Ordered list of parsed addresses.

    Accepts three serialized shapes, tried in order:

    1. A list of ``{"name": ..., "address": ...}`` mappings (or Address
       instances), which is also what ``model_dump()`` produces.
    2. A list of bare address strings.
    3. A single header string, parsed with the header parser.

    Example:
        >>> addresses = AddressList.model_validate(["a@example.com", "b@example.com"])
        >>> addresses.render()
        'a@example.com, b@example.com'
    """

    root: list[Address] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _coerce_shape(cls, data: Any) -> Any:
        if data is None or data is PydanticUndefined:
            return []
        if isinstance(data, AddressList):
            return data.root
        if isinstance(data, str):
            from ryandata_mailaddress.service import parse_list

            addresses, _ = parse_list(data)
            return addresses.root
        if isinstance(data, (list, tuple)):
            if all(isinstance(item, (Mapping, Address)) for item in data):
                return list(data)
            if all(isinstance(item, str) for item in data):
                return cls.from_strings(data).root
        raise PydanticCustomError(
            "list_format",
            "Expected a list of name/address objects, a list of address "
            "strings, or a comma-separated address string; got {input_type}",
            {"input_type": type(data).__name__},
        )

    # Construction helpers

    @classmethod
    def new(cls, name: str, address: str) -> AddressList:
        """Create a list holding a single address."""
        return cls([Address.create(name, address)])

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> AddressList:
        """Create a list from a ``{name: address}`` mapping."""
        addresses = cls([])
        for name, address in mapping.items():
            addresses.append(name, address)
        return addresses

    @classmethod
    def from_strings(cls, strings: Iterable[str]) -> AddressList:
        """Create a list from address strings; names are left empty."""
        addresses = cls([])
        for address in strings:
            addresses.append("", address)
        return addresses

    @classmethod
    def from_structured(cls, data: Any) -> AddressList:
        """Create a list from any of the accepted serialized shapes.

        Args:
            data: Decoded structured value (list of mappings, list of
                strings, or a header string).

        Returns:
            New AddressList.

        Raises:
            MailAddressValidationError: If the value matches none of the
                accepted shapes.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise MailAddressValidationError.from_validation_error(
                e, {"input_type": type(data).__name__}
            ) from e

    @classmethod
    def from_json(cls, data: str | bytes) -> AddressList:
        """Create a list from a JSON document in any of the accepted shapes.

        Raises:
            MailAddressValidationError: If the document is not valid JSON or
                matches none of the accepted shapes.
        """
        try:
            return cls.model_validate_json(data)
        except ValidationError as e:
            raise MailAddressValidationError.from_validation_error(e) from e

    # Container protocol

    def __iter__(self) -> Iterator[Address]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, item: int) -> Address:
        return self.root[item]

    def append(self, name: str, address: str) -> None:
        """Parse ``address`` and add it to the list with the given name."""
        self.root.append(Address.create(name, address))

    # Views

    def dedup(self) -> AddressList:
        """Get a copy without duplicate addresses.

        Addresses are compared case-insensitively; the first occurrence is
        kept and the order is preserved.
        """
        seen: set[str] = set()
        unique: list[Address] = []
        for address in self.root:
            key = address.address.casefold()
            if key in seen:
                continue
            seen.add(key)
            unique.append(address)
        return AddressList(unique)

    def filter_valid(self) -> AddressList:
        """Get a copy holding only the valid, deduplicated entries."""
        return AddressList([a for a in self.dedup() if a.is_valid()])

    def to_string_slice(self) -> list[str]:
        """Get the addresses of the valid, deduplicated entries; names are dropped."""
        return [a.address for a in self.dedup() if a.is_valid()]

    def aggregate_errors(self) -> AddressListError | None:
        """Collect the error of every invalid entry.

        Every entry is checked, duplicates included.

        Returns:
            AddressListError holding the errors in list order, or None if all
            entries are valid.
        """
        errors = [a.error for a in self.root if not a.is_valid() and a.error is not None]
        if not errors:
            return None
        return AddressListError(errors)

    def contains_address(self, address: str) -> bool:
        """Report if any entry has this address, ignoring case."""
        wanted = address.casefold()
        return any(a.address.casefold() == wanted for a in self.root)

    def contains_domain(self, domain: str) -> bool:
        """Report if any entry has an address in this domain, ignoring case."""
        wanted = domain.casefold()
        return any(a.domain.casefold() == wanted for a in self.root)

    def sort_by(self, key: SortKey | str) -> None:
        """Sort the list in place on the address or the name.

        Args:
            key: ``SortKey.ADDRESS`` or ``SortKey.NAME``.

        Raises:
            ValueError: For any other key.
        """
        try:
            sort_key = SortKey(key)
        except ValueError:
            raise ValueError(f"invalid sort key: {key!r}") from None
        self.root.sort(key=attrgetter(sort_key.value))

    # Formatting

    def render(self) -> str:
        """Join the deduplicated entries with ``", "``; not RFC 2047 encoded."""
        return ", ".join(a.render() for a in self.dedup())

    def render_encoded(self) -> str:
        """Join the deduplicated entries for direct use in a mail header."""
        return ", ".join(a.render_encoded() for a in self.dedup())

    def __str__(self) -> str:
        return self.render()

    # Validation and auditing

    def validate_entries(self) -> ValidationResult:
        """Run the default validation pipeline over every entry.

        Error fields are prefixed with the entry index, e.g. ``"1.address"``.
        """
        from ryandata_mailaddress.service import get_default_service

        return get_default_service().validate(self)

    def audit_log(self) -> list[dict[str, Any]]:
        """Export the process log entries of every address.

        Returns:
            List of dicts sorted by timestamp, each with the ``index`` of the
            address it belongs to and ``source`` set to ``"address"``.
        """
        entries: list[dict[str, Any]] = []
        for index, address in enumerate(self.root):
            for entry in address.audit_log(source="address"):
                entry["index"] = index
                entries.append(entry)
        return sorted(entries, key=lambda x: str(x.get("timestamp", "")))
