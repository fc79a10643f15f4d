"""ryandata-mailaddress: a lenient mail header address parser.

This package parses ``From``, ``To`` and ``Cc`` style header values into
display-name/address pairs with:
- Per-entry error recovery (one bad entry never fails the whole header)
- RFC 2047 encoded-word decoding and encoding
- Pluggable charset converters and parsers
- Composable entry validators and process logging

Quick Start:
    >>> from ryandata_mailaddress import parse_list, parse_one
    >>> addresses, had_error = parse_list("Martin <martin@example.com>, invalid")
    >>> had_error
    True
    >>> addresses.to_string_slice()
    ['martin@example.com']
    >>> len(addresses.aggregate_errors())
    1

    # Exactly one address
    >>> result = parse_one("MAILER-DAEMON@example.org (Mail Delivery System)")
    >>> result.address.address
    'MAILER-DAEMON@example.org'

    # Wire-safe rendering
    >>> from ryandata_mailaddress import Address
    >>> Address(name="m€rtin", address="martin@example.com").render_encoded()
    '=?utf-8?q?m=E2=82=ACrtin?= <martin@example.com>'
"""

from __future__ import annotations  # noqa: I001

# Import order is intentional to avoid circular imports - do not auto-fix
from ryandata_mailaddress.models import (
    ADDRESS_FIELDS,
    PACKAGE_NAME,
    Address,
    AddressField,
    AddressList,
    AddressListError,
    MailAddressError,
    MailAddressErrorType,
    MailAddressValidationError,
    ParseResult,
    SortKey,
)
from ryandata_mailaddress.core import (
    BaseCharsetConverter,
    CharsetConverterFactory,
    CodecsCharsetConverter,
    NativeCharsetConverter,
    PluginFactory,
    ProcessEntry,
    ProcessLog,
    ValidationError,
    ValidationResult,
    decode_header,
    encode_word,
)
from ryandata_mailaddress.parsers import BaseHeaderParser, HeaderParser, ParserFactory
from ryandata_mailaddress.protocols import (
    CharsetConverterProtocol,
    HeaderParserProtocol,
    ValidatorProtocol,
)
from ryandata_mailaddress.service import (
    MailAddressService,
    get_default_service,
    parse_list,
    parse_one,
)
from ryandata_mailaddress.validation import (
    BaseValidator,
    EmailSyntaxValidator,
    EntryErrorValidator,
    is_valid_email,
)
from ryandata_mailaddress.validation.base import MailValidationBase, ValidationBase

__version__ = "0.1.0"
__package_name__ = "ryandata-mailaddress"

__all__ = [
    # Version
    "__version__",
    # Primary interface
    "MailAddressService",
    "get_default_service",
    "parse_list",
    "parse_one",
    # Models
    "Address",
    "AddressList",
    "ParseResult",
    "ADDRESS_FIELDS",
    "AddressField",
    "SortKey",
    # Errors
    "PACKAGE_NAME",
    "AddressListError",
    "MailAddressError",
    "MailAddressErrorType",
    "MailAddressValidationError",
    # Encoding
    "decode_header",
    "encode_word",
    "BaseCharsetConverter",
    "CharsetConverterFactory",
    "CodecsCharsetConverter",
    "NativeCharsetConverter",
    # Parsers
    "BaseHeaderParser",
    "HeaderParser",
    "ParserFactory",
    "PluginFactory",
    # Protocols
    "CharsetConverterProtocol",
    "HeaderParserProtocol",
    "ValidatorProtocol",
    # Validation
    "BaseValidator",
    "EmailSyntaxValidator",
    "EntryErrorValidator",
    "MailValidationBase",
    "ValidationBase",
    "ValidationError",
    "ValidationResult",
    "is_valid_email",
    # Process logging
    "ProcessEntry",
    "ProcessLog",
]
