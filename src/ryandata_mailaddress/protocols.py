from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from abstract_validation_base import ValidationResult

    from ryandata_mailaddress.models import Address, AddressList, ParseResult


@runtime_checkable
class HeaderParserProtocol(Protocol):
    """Protocol for mail header parsing implementations.

    Implementations turn a free-form header value into an address list and
    never fail on malformed input; failures are recorded per entry.
    """

    def parse_list(self, header: str | bytes) -> tuple[AddressList, bool]:
        """Parse a header value holding zero or more addresses.

        Args:
            header: Raw header value.

        Returns:
            Tuple of (address list, whether any entry carries an error).
        """
        ...

    def parse_one(self, header: str | bytes) -> ParseResult:
        """Parse a header value that must hold exactly one address.

        Args:
            header: Raw header value.

        Returns:
            ParseResult containing the address or error information.
        """
        ...

    def parse_batch(self, headers: Sequence[str | bytes]) -> list[tuple[AddressList, bool]]:
        """Parse multiple header values.

        Args:
            headers: Sequence of raw header values.

        Returns:
            One (address list, had error) tuple per header.
        """
        ...


@runtime_checkable
class CharsetConverterProtocol(Protocol):
    """Protocol for charset-to-Unicode conversion.

    Used when an encoded word declares a charset other than UTF-8.
    """

    def convert(self, charset: str, data: bytes) -> str:
        """Convert bytes in ``charset`` to text.

        Args:
            charset: Charset name as declared in the encoded word.
            data: Raw bytes.

        Returns:
            The decoded text.

        Raises:
            MailAddressError: If the charset is unknown or the bytes are
                invalid in it.
        """
        ...

    @property
    def name(self) -> str:
        """Name of this converter."""
        ...


@runtime_checkable
class ValidatorProtocol(Protocol):
    """Protocol for address entry validation implementations.

    Implementations check one aspect of a parsed entry and return
    validation results.
    """

    def validate(self, address: Address) -> ValidationResult:
        """Validate an address entry.

        Args:
            address: Address entry to validate.

        Returns:
            ValidationResult containing validation status and any errors.
        """
        ...

    @property
    def name(self) -> str:
        """Name of this validator for error reporting."""
        ...
