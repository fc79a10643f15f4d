"""Validation base classes.

Re-exports the generic BaseValidator and provides ValidationBase, a Pydantic
base model with built-in process logging for cleaning operations and errors.
"""

from __future__ import annotations

from typing import Any

from abstract_validation_base import BaseValidator, ProcessEntry, ProcessLog
from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import PydanticCustomError

__all__ = ["BaseValidator", "ValidationBase", "MailValidationBase"]


def cleaning_entry(
    field: str,
    original_value: Any,
    new_value: Any,
    reason: str,
    operation_type: str = "cleaning",
) -> ProcessEntry:
    """Build a cleaning ProcessEntry.

    Shared by models and by the scanner's per-entry state, which logs
    transformations before the Address model exists.
    """
    return ProcessEntry(
        entry_type="cleaning",
        field=field,
        message=reason,
        original_value=str(original_value) if original_value is not None else None,
        new_value=str(new_value) if new_value is not None else None,
        context={"operation_type": operation_type},
    )


def error_entry(
    field: str,
    message: str,
    value: Any = None,
    context: dict[str, Any] | None = None,
) -> ProcessEntry:
    """Build an error ProcessEntry."""
    return ProcessEntry(
        entry_type="error",
        field=field,
        message=message,
        original_value=str(value) if value is not None else None,
        context=context or {},
    )


class ValidationBase(BaseModel):
    """Base model with built-in process logging for cleaning and errors.

    All models inheriting from this class automatically get:
    - process_log: ProcessLog field (excluded from serialization)
    - add_error(): Log an error and optionally raise it
    - add_cleaning_process(): Log a cleaning/transformation operation
    - audit_log(): Export combined entries for analysis
    """

    model_config = ConfigDict(
        # Subclasses can override this
        extra="ignore",
    )

    process_log: ProcessLog = Field(default_factory=ProcessLog, exclude=True)

    def _create_error(
        self,
        error_type: str,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> Exception:
        """Create an error to raise. Override in subclasses for custom error types."""
        return PydanticCustomError(
            error_type,
            message,
            context or {},
        )

    def add_error(
        self,
        field: str,
        message: str,
        value: Any = None,
        context: dict[str, Any] | None = None,
        raise_exception: bool = False,
    ) -> None:
        """Log an error and optionally raise an exception.

        Args:
            field: Name of the field with the error.
            message: Error message describing the issue.
            value: The problematic value (optional).
            context: Additional context dict (optional).
            raise_exception: If True, raise an exception after logging.
        """
        self.process_log.errors.append(error_entry(field, message, value, context))

        if raise_exception:
            raise self._create_error(
                error_type="validation_error",
                message=f"{field}: {message}",
                context={"field": field, "value": value, **(context or {})},
            )

    def add_cleaning_process(
        self,
        field: str,
        original_value: Any,
        new_value: Any,
        reason: str,
        operation_type: str = "cleaning",
    ) -> None:
        """Log a cleaning/transformation operation.

        Args:
            field: Name of the field that was cleaned.
            original_value: The original value before transformation.
            new_value: The value after transformation.
            reason: Explanation of why the cleaning was performed.
            operation_type: Category of operation (cleaning, decoding, etc.).
        """
        self.process_log.cleaning.append(
            cleaning_entry(field, original_value, new_value, reason, operation_type)
        )

    def audit_log(self, source: str | None = None) -> list[dict[str, Any]]:
        """Export combined cleaning and error entries.

        Args:
            source: Optional source identifier to add to each entry.

        Returns:
            List of dicts sorted by timestamp.
        """
        entries: list[dict[str, Any]] = []
        for entry in [*self.process_log.cleaning, *self.process_log.errors]:
            d = entry.model_dump()
            if source:
                d["source"] = source
            entries.append(d)
        return sorted(entries, key=lambda x: str(x.get("timestamp", "")))


class MailValidationBase(ValidationBase):
    """ValidationBase that raises MailAddressError instead of PydanticCustomError."""

    model_config = ConfigDict(
        extra="ignore",
        arbitrary_types_allowed=True,
    )

    def _create_error(
        self,
        error_type: str,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> Exception:
        # Late import to avoid circular dependency with models
        from ryandata_mailaddress.models.errors import PACKAGE_NAME, MailAddressError

        return MailAddressError(
            error_type,
            message,
            {"package": PACKAGE_NAME, **(context or {})},
        )
