"""Mail address models package.

This package contains the address models, result dataclasses, enums and
error types.
"""

from __future__ import annotations

from abstract_validation_base import ValidationResult

# Import from submodules - order matters for avoiding circular imports
from ryandata_mailaddress.models.errors import (
    PACKAGE_NAME,
    AddressListError,
    MailAddressError,
    MailAddressValidationError,
)
from ryandata_mailaddress.models.enums import (
    ADDRESS_FIELDS,
    AddressField,
    MailAddressErrorType,
    SortKey,
)
from ryandata_mailaddress.models.address import Address
from ryandata_mailaddress.models.address_list import AddressList
from ryandata_mailaddress.models.results import ParseResult

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "AddressListError",
    "MailAddressError",
    "MailAddressValidationError",
    # Enums and constants
    "ADDRESS_FIELDS",
    "AddressField",
    "MailAddressErrorType",
    "SortKey",
    # Address models
    "Address",
    "AddressList",
    # Results
    "ParseResult",
    # Re-exported from abstract_validation_base
    "ValidationResult",
]
