from __future__ import annotations

from collections.abc import Sequence

from ryandata_mailaddress.models import AddressList, ParseResult, ValidationResult
from ryandata_mailaddress.parsers import ParserFactory
from ryandata_mailaddress.protocols import HeaderParserProtocol, ValidatorProtocol
from ryandata_mailaddress.validation.validators import create_default_validators


class MailAddressService:
    """High-level facade for mail header parsing.

    Orchestrates the header parser and the entry validators to provide
    a simple API for common tasks.

    Example:
        >>> service = MailAddressService()
        >>> addresses, had_error = service.parse_list("Martin <martin@example.com>, bob@example.com")
        >>> addresses.to_string_slice()
        ['martin@example.com', 'bob@example.com']

        # Only decode UTF-8, US-ASCII and ISO-8859-1 encoded words
        >>> service = MailAddressService(converter_type="native")
    """

    def __init__(
        self,
        parser: HeaderParserProtocol | None = None,
        validator: ValidatorProtocol | None = None,
        parser_type: str | None = None,
        converter_type: str | None = None,
    ) -> None:
        """Initialize the mail address service.

        Args:
            parser: Parser implementation. Defaults to one created by
                ParserFactory from ``parser_type``.
            validator: Validator implementation. Defaults to the composite
                entry validator.
            parser_type: Registered parser type, used when ``parser`` is not
                given. Defaults to "header".
            converter_type: Registered charset converter type passed to the
                default parser. Defaults to the ``MAILADDRESS_CHARSET_CONVERTER``
                environment variable, then "codecs".
        """
        if parser is not None:
            self._parser = parser
        elif converter_type is not None:
            self._parser = ParserFactory.create(parser_type, converter_type=converter_type)
        else:
            self._parser = ParserFactory.create(parser_type)
        self._validator = validator or create_default_validators()

    @property
    def parser(self) -> HeaderParserProtocol:
        """Get the parser instance."""
        return self._parser

    @property
    def validator(self) -> ValidatorProtocol:
        """Get the validator instance."""
        return self._validator

    def parse_list(self, header: str | bytes) -> tuple[AddressList, bool]:
        """Parse a header value holding zero or more addresses.

        Args:
            header: Raw header value.

        Returns:
            Tuple of (address list, whether any entry carries an error).
        """
        return self._parser.parse_list(header)

    def parse_one(self, header: str | bytes, *, validate: bool = False) -> ParseResult:
        """Parse a header value that must hold exactly one address.

        Args:
            header: Raw header value.
            validate: If True, run the validator on the parsed entry.

        Returns:
            ParseResult containing the address, validation results, or error
            information.
        """
        result = self._parser.parse_one(header)
        if validate and result.is_parsed and result.address is not None:
            result.validation = self._validator.validate(result.address)
        return result

    def parse_batch(self, headers: Sequence[str | bytes]) -> list[tuple[AddressList, bool]]:
        """Parse multiple header values.

        Args:
            headers: Sequence of raw header values.

        Returns:
            One (address list, had error) tuple per header.
        """
        return self._parser.parse_batch(headers)

    def validate(self, addresses: AddressList) -> ValidationResult:
        """Validate every entry of an address list.

        Args:
            addresses: List to validate.

        Returns:
            Combined ValidationResult; error fields are prefixed with the
            entry index, e.g. ``"0.address"``.
        """
        result = ValidationResult(is_valid=True)
        for index, address in enumerate(addresses):
            for error in self._validator.validate(address).errors:
                result.add_error(f"{index}.{error.field}", error.message, error.value)
        return result


# Module-level convenience function
_default_service: MailAddressService | None = None


def get_default_service() -> MailAddressService:
    """Get the default MailAddressService singleton.

    Returns:
        Shared MailAddressService instance with default configuration.
    """
    global _default_service
    if _default_service is None:
        _default_service = MailAddressService()
    return _default_service


def parse_list(header: str | bytes) -> tuple[AddressList, bool]:
    """Parse one or more addresses using the default service.

    Never fails on malformed input: every entry that cannot be parsed is
    kept with its error attached, and the flag reports whether there was one.

    Args:
        header: Raw header value.

    Returns:
        Tuple of (address list, whether any entry carries an error).
    """
    return get_default_service().parse_list(header)


def parse_one(header: str | bytes) -> ParseResult:
    """Parse exactly one address using the default service.

    More than one address is an error (``too_many_emails``), as is none at
    all (``no_email``).

    Args:
        header: Raw header value.

    Returns:
        ParseResult containing the address or error information.
    """
    return get_default_service().parse_one(header)
