from __future__ import annotations

import re
from typing import TYPE_CHECKING

from abstract_validation_base import (
    BaseValidator,
    CompositeValidator,
    ValidationResult,
    ValidatorPipelineBuilder,
)

from ryandata_mailaddress.models.enums import AddressField

if TYPE_CHECKING:
    from ryandata_mailaddress.models import Address

# One domain label: 1-63 Unicode letters, ASCII digits or hyphens. The label
# length is counted in characters, not bytes. Python's \w also takes in
# non-letter numerics ("²", "Ⅳ"); _is_label_char rules those out.
_LABEL = r"(?:[^\W\d_]|[0-9-]){1,63}"

VALID_EMAIL_RE = re.compile(
    # Local part; allow almost everything but ASCII whitespace
    r"[^\t\n\f\r <>@;]+"
    r"@"
    # Domain part; at least two labels
    rf"{_LABEL}(?:\.{_LABEL})+"
)

_ASCII_LABEL_CHARS = frozenset("0123456789-.")


def _is_label_char(char: str) -> bool:
    return char in _ASCII_LABEL_CHARS or char.isalpha()


def is_valid_email(address: str) -> bool:
    """Check an address against the mail address grammar.

    This is stricter than RFC 5322 in the "something we can send mail to"
    sense: ``martin@localhost`` and IP-literal domains are rejected.

    Args:
        address: Address string to check.

    Returns:
        True if the whole string matches the grammar.
    """
    if not address or VALID_EMAIL_RE.fullmatch(address) is None:
        return False
    domain = address.rpartition("@")[2]
    return all(_is_label_char(c) for c in domain)


class EmailSyntaxValidator(BaseValidator["Address"]):
    """Validates the address grammar of an entry.

    A fast format validator: no lookups, only the pattern match.
    """

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "email_syntax"

    def validate(self, address: Address) -> ValidationResult:
        """Validate the address part of an entry.

        Args:
            address: Address entry to validate.

        Returns:
            ValidationResult with any syntax errors.
        """
        result = ValidationResult(is_valid=True)
        if not is_valid_email(address.address):
            result.add_error(
                field=AddressField.ADDRESS.value,
                message=f"Invalid email address: {address.address!r}",
                value=address.address,
            )
        return result


class EntryErrorValidator(BaseValidator["Address"]):
    """Reports the error the parser attached to an entry, if any."""

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "entry_error"

    def validate(self, address: Address) -> ValidationResult:
        """Validate that the entry carries no parse error.

        Args:
            address: Address entry to validate.

        Returns:
            ValidationResult with the attached error, if any.
        """
        result = ValidationResult(is_valid=True)
        if address.error is not None:
            result.add_error(
                field=AddressField.RAW.value,
                message=str(address.error),
                value=address.raw or address.address,
            )
        return result


def create_default_validators() -> CompositeValidator[Address]:
    """Create the default entry validation pipeline.

    Returns:
        CompositeValidator running the syntax and entry-error validators.
    """
    builder: ValidatorPipelineBuilder[Address] = ValidatorPipelineBuilder("address_validation")
    builder.add(EmailSyntaxValidator())
    builder.add(EntryErrorValidator())
    return builder.build()
