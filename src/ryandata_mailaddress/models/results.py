"""Result classes for header parsing operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from abstract_validation_base import ProcessLog, ValidationResult

from ryandata_mailaddress.validation.base import error_entry

if TYPE_CHECKING:
    from ryandata_mailaddress.models.address import Address


@dataclass
class ParseResult:
    """Result of parsing a header that must hold exactly one address.

    ``address`` is the parsed entry when there was exactly one, or an empty
    Address when there were none or too many. ``error`` is the entry's own
    error or the function-level ``no_email`` / ``too_many_emails`` error.
    """

    raw_input: str
    address: Address | None = None
    error: Exception | None = None
    validation: ValidationResult | None = None
    # Process-level log (for operations before model exists)
    process_log: ProcessLog = field(default_factory=ProcessLog)

    @property
    def is_valid(self) -> bool:
        """Check if parsing succeeded and the address passes validation."""
        if not self.is_parsed or self.address is None:
            return False
        if self.validation is not None:
            return self.validation.is_valid
        return self.address.is_valid()

    @property
    def is_parsed(self) -> bool:
        """Check if exactly one entry was parsed without error."""
        return self.error is None and self.address is not None and not self.address.is_empty

    def raise_for_error(self) -> Address:
        """Return the parsed address, raising the parse error if there is one.

        Raises:
            MailAddressError: If parsing failed.
        """
        if self.error is not None:
            raise self.error
        assert self.address is not None
        return self.address

    def to_dict(self) -> dict[str, str | None]:
        """Convert to dictionary of address fields."""
        from ryandata_mailaddress.models.enums import ADDRESS_FIELDS

        if self.address is not None and not self.address.is_empty:
            return self.address.model_dump()
        return {f: None for f in ADDRESS_FIELDS}

    def add_process_error(
        self,
        field: str,
        message: str,
        value: Any = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Track process-level errors (before or instead of a model).

        Args:
            field: Name of the field with the error.
            message: Error message describing the issue.
            value: The problematic value (optional).
            context: Additional context dict (optional).
        """
        self.process_log.errors.append(error_entry(field, message, value, context))

    def aggregate_logs(self) -> list[dict[str, Any]]:
        """Combine logs from self and the parsed address.

        Returns:
            List of dicts sorted by timestamp. Each entry includes a 'source'
            field: "parse_result" for process-level operations and "address"
            for operations recorded while finalizing the entry.
        """
        all_entries: list[dict[str, Any]] = []

        for entry in [*self.process_log.cleaning, *self.process_log.errors]:
            all_entries.append({**entry.model_dump(), "source": "parse_result"})

        if self.address is not None:
            all_entries.extend(self.address.audit_log(source="address"))

        return sorted(all_entries, key=lambda x: str(x.get("timestamp", "")))
