"""Mail address enumerations and constants."""

from __future__ import annotations

from enum import Enum


class MailAddressErrorType(str, Enum):
    """Classification of per-entry parse failures."""

    INVALID_ENCODING = "invalid_encoding"
    INVALID_CHARACTER = "invalid_character"
    NO_EMAIL = "no_email"
    TOO_MANY_EMAILS = "too_many_emails"


class SortKey(str, Enum):
    """Fields an address list can be sorted on."""

    ADDRESS = "address"
    NAME = "name"


class AddressField(str, Enum):
    """Fields of an address entry, as used in process log entries."""

    NAME = "name"
    ADDRESS = "address"
    RAW = "raw"


# Serialized field names (raw and error are never serialized)
ADDRESS_FIELDS: list[str] = [AddressField.NAME.value, AddressField.ADDRESS.value]
