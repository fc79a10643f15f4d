"""Mail address error classes.

These classes provide package-specific error handling for header parsing,
per-entry address validation, and structured list deserialization.
"""

from __future__ import annotations

from typing import Any

from pydantic_core import PydanticCustomError

from ryandata_mailaddress.models.enums import MailAddressErrorType

# Package identifier for error context
PACKAGE_NAME = "ryandata_mailaddress"

_MESSAGES: dict[MailAddressErrorType, str] = {
    MailAddressErrorType.INVALID_ENCODING: "invalid or incomplete multibyte or wide character",
    MailAddressErrorType.INVALID_CHARACTER: "invalid character",
    MailAddressErrorType.NO_EMAIL: "unable to find an email address",
    MailAddressErrorType.TOO_MANY_EMAILS: "only one address expected",
}


class MailAddressError(PydanticCustomError):
    """Classified failure of a single address entry.

    Inherits from PydanticCustomError so it can be raised from Pydantic
    validators unchanged. The ``type`` is one of the values of
    :class:`MailAddressErrorType`; use the classmethod constructors rather
    than building instances by hand.
    """

    @classmethod
    def of(
        cls, error_type: MailAddressErrorType, context: dict[str, Any] | None = None
    ) -> MailAddressError:
        """Build an error of the given type with the standard message.

        Args:
            error_type: Classification of the failure.
            context: Additional context merged into the error context.

        Returns:
            MailAddressError instance.
        """
        return cls(
            error_type.value,
            _MESSAGES[error_type],
            {"package": PACKAGE_NAME, **(context or {})},
        )

    @classmethod
    def invalid_encoding(cls, **context: Any) -> MailAddressError:
        return cls.of(MailAddressErrorType.INVALID_ENCODING, context)

    @classmethod
    def invalid_character(cls, **context: Any) -> MailAddressError:
        return cls.of(MailAddressErrorType.INVALID_CHARACTER, context)

    @classmethod
    def no_email(cls, **context: Any) -> MailAddressError:
        return cls.of(MailAddressErrorType.NO_EMAIL, context)

    @classmethod
    def too_many_emails(cls, **context: Any) -> MailAddressError:
        return cls.of(MailAddressErrorType.TOO_MANY_EMAILS, context)

    @property
    def error_type(self) -> MailAddressErrorType | None:
        """The error type as an enum member, or None for foreign types."""
        try:
            return MailAddressErrorType(self.type)
        except ValueError:
            return None

    def is_type(self, error_type: MailAddressErrorType) -> bool:
        """Check whether this error has the given classification."""
        return self.type == error_type.value


class AddressListError(Exception):
    """Aggregate of the errors of every invalid entry in an address list.

    The message follows the "N errors occurred" convention so it can be shown
    to users as is; the individual errors stay available through ``errors()``.
    """

    def __init__(self, errors: list[Exception]):
        """Initialize AddressListError.

        Args:
            errors: The collected per-entry errors, in list order.
        """
        self.errors_list = list(errors)
        count = len(self.errors_list)
        header = "1 error occurred:" if count == 1 else f"{count} errors occurred:"
        details = "".join(f"\n\t* {e}" for e in self.errors_list)
        super().__init__(header + details)

    def errors(self) -> list[Exception]:
        """Get the list of collected errors.

        Returns:
            List of per-entry errors in list order.
        """
        return self.errors_list

    def __len__(self) -> int:
        return len(self.errors_list)

    def __repr__(self) -> str:
        return f"AddressListError({self.errors_list!r})"


class MailAddressValidationError(Exception):
    """Custom exception that wraps pydantic.ValidationError with package identification.

    Raised when a serialized address list matches none of the accepted
    shapes. This is a structural error, distinct from the per-entry
    :class:`MailAddressError`.
    """

    def __init__(self, validation_error: Exception, context: dict | None = None):
        """Initialize MailAddressValidationError.

        Args:
            validation_error: The pydantic.ValidationError to wrap.
            context: Optional additional context to include.
        """
        from pydantic import ValidationError as PydanticValidationError

        self.original_error = validation_error
        self.context = {"package": PACKAGE_NAME, **(context or {})}

        if isinstance(validation_error, PydanticValidationError):
            self.errors_list = validation_error.errors()
            error_messages = "; ".join(e.get("msg", str(e)) for e in self.errors_list)
        else:
            self.errors_list = []
            error_messages = str(validation_error)

        super().__init__(error_messages)

    @classmethod
    def from_validation_error(
        cls, error: Exception, context: dict | None = None
    ) -> MailAddressValidationError:
        """Wrap a pydantic.ValidationError with package context.

        Args:
            error: The ValidationError to wrap.
            context: Optional additional context to include.

        Returns:
            MailAddressValidationError instance wrapping the original error.
        """
        return cls(error, context)

    def errors(self) -> list:
        """Get the list of validation errors.

        Returns:
            List of error dictionaries from the original ValidationError.
        """
        return self.errors_list

    def __repr__(self) -> str:
        return f"MailAddressValidationError({self.original_error!r}, context={self.context})"
