"""Per-entry finalization.

The scanner hands every entry it collected to :class:`EntryFinalizer` when it
reaches a separator or the end of the input. The finalizer cleans the name,
decodes RFC 2047 encoded words, recovers bare and comment-style addresses and
validates the address.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from abstract_validation_base import ProcessLog

from ryandata_mailaddress.core.encoded_words import ConvertFunc, decode_header
from ryandata_mailaddress.models.address import Address
from ryandata_mailaddress.models.enums import AddressField
from ryandata_mailaddress.models.errors import MailAddressError
from ryandata_mailaddress.validation.base import cleaning_entry, error_entry
from ryandata_mailaddress.validation.validators import is_valid_email

logger = logging.getLogger(__name__)

# Header whitespace; deliberately not Unicode whitespace.
_WS = r"\t\n\f\r "

# Trailing comment: "daemon@foo.org (Mailer Daemon)".
COMMENT_RE = re.compile(rf"[{_WS}]+\(.*?\)\Z")

# Something that looks like an address anywhere in the text.
FIND_EMAIL_RE = re.compile(rf"[^{_WS}<>]+@[^{_WS}<>]+\.[^{_WS}<>]+")


@dataclass
class Entry:
    """Mutable scan state of the entry currently being collected."""

    name: str = ""
    address: str = ""
    raw: str = ""
    error: Exception | None = None
    process_log: ProcessLog = field(default_factory=ProcessLog)

    @property
    def is_empty(self) -> bool:
        return self.name == "" and self.address == "" and self.error is None

    def set_error(self, error: MailAddressError, field_name: str, value: str | None = None) -> None:
        """Attach an error to the entry and record it in the process log."""
        self.error = error
        self.process_log.errors.append(
            error_entry(field_name, str(error), value, {"error_type": error.type})
        )

    def log_cleaning(
        self, field_name: str, original: str, new: str, reason: str, operation_type: str
    ) -> None:
        self.process_log.cleaning.append(
            cleaning_entry(field_name, original, new, reason, operation_type)
        )

    def to_address(self) -> Address:
        return Address(
            name=self.name,
            address=self.address,
            raw=self.raw,
            error=self.error,
            process_log=self.process_log,
        )


class EntryFinalizer:
    """Turns collected scan state into a clean entry.

    Args:
        convert: Charset conversion for encoded words in charsets other than
            UTF-8.
    """

    def __init__(self, convert: ConvertFunc) -> None:
        self._convert = convert

    def finalize(self, entry: Entry) -> bool:
        """Finalize ``entry`` in place.

        Returns:
            True if an error was attached to the entry.
        """
        entry.name = entry.name.strip()
        entry.raw = entry.raw.strip()

        self._strip_single_quotes(entry)

        if not self._decode_name(entry):
            return True

        had_error = False
        if entry.address == "" and entry.name != "":
            had_error = self._extract_bare_address(entry)

        if entry.address != "" and not is_valid_email(entry.address):
            if entry.error is None:
                entry.set_error(
                    MailAddressError.no_email(value=entry.address),
                    AddressField.ADDRESS.value,
                    entry.address,
                )
            had_error = True

        return had_error or entry.error is not None

    def _strip_single_quotes(self, entry: Entry) -> None:
        name = entry.name
        if len(name) > 2 and name[0] == name[-1] == "'" and "'" not in name[1:-1]:
            entry.name = name[1:-1]
            entry.log_cleaning(
                AddressField.NAME.value,
                name,
                entry.name,
                "Removed single quotes around display name",
                "cleaning",
            )

    def _decode_name(self, entry: Entry) -> bool:
        """Decode encoded words in the name; False if decoding failed."""
        try:
            decoded = decode_header(entry.name, self._convert)
        except MailAddressError as e:
            logger.debug("Cannot decode display name %r: %s", entry.name[:50], e)
            entry.set_error(e, AddressField.NAME.value, entry.name)
            entry.name = ""
            return False

        if decoded != entry.name:
            entry.log_cleaning(
                AddressField.NAME.value,
                entry.name,
                decoded,
                "Decoded RFC 2047 encoded words",
                "decoding",
            )
            entry.name = decoded
        return True

    def _extract_bare_address(self, entry: Entry) -> bool:
        """Recover the address of an entry without angle brackets.

        Returns:
            True if an error was attached to the entry.
        """
        had_error = False
        text = COMMENT_RE.sub("", entry.name, count=1)
        if text != entry.name:
            entry.log_cleaning(
                AddressField.NAME.value,
                entry.name,
                text,
                "Removed trailing comment",
                "cleaning",
            )

        match = FIND_EMAIL_RE.search(text)
        if match is None:
            entry.set_error(MailAddressError.no_email(value=text), AddressField.NAME.value, text)
            had_error = True
        else:
            entry.address = match.group()
            entry.log_cleaning(
                AddressField.ADDRESS.value,
                text,
                entry.address,
                "Promoted bare address from display name",
                "extraction",
            )
            if len(entry.address) != len(text):
                entry.set_error(
                    MailAddressError.invalid_character(value=text),
                    AddressField.NAME.value,
                    text,
                )
                had_error = True

        entry.name = ""
        return had_error
