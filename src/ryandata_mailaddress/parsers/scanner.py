"""Character-level header scanner.

The scanner walks the header once, tracking whether it is inside a quoted
string or an angle address, and cuts the input into entries at every
separator. Each entry is passed to the finalizer; malformed entries get an
error attached and scanning continues with the next one.
"""

from __future__ import annotations

import re

from ryandata_mailaddress.models.address import Address
from ryandata_mailaddress.models.enums import AddressField, MailAddressErrorType
from ryandata_mailaddress.models.errors import MailAddressError
from ryandata_mailaddress.parsers.finalizer import Entry, EntryFinalizer
from ryandata_mailaddress.validation.validators import is_valid_email

# Header folding and runs of blanks collapse to a single space.
FOLD_RE = re.compile(r"[\t\n\f\r ]+")

REPLACEMENT_CHAR = "\ufffd"
SEPARATORS = frozenset(",;")


def _is_undecodable(char: str) -> bool:
    # Lone surrogates come from bytes decoded with "surrogateescape".
    return char == REPLACEMENT_CHAR or "\ud800" <= char <= "\udfff"


def _is_control(char: str) -> bool:
    return char < "\t" or "\x0b" <= char < " "


def scan(header: str, finalizer: EntryFinalizer) -> tuple[list[Address], bool]:
    """Split a header value into finalized entries.

    Args:
        header: Header value, possibly folded.
        finalizer: Finalizer run on every entry.

    Returns:
        Tuple of (entries in source order, whether any entry has an error).
    """
    text = FOLD_RE.sub(" ", header)
    last = len(text) - 1

    addresses: list[Address] = []
    had_error = False
    in_quote = False
    in_angle = False
    entry = Entry()

    def flush() -> None:
        nonlocal entry, had_error
        had_error = finalizer.finalize(entry) or had_error
        if not entry.is_empty:
            addresses.append(entry.to_address())
        entry = Entry()

    for i, char in enumerate(text):
        if _is_undecodable(char):
            entry.raw += char
            entry.set_error(
                MailAddressError.invalid_encoding(position=i), AddressField.RAW.value, char
            )
            had_error = True

        elif _is_control(char):
            entry.raw += char
            entry.set_error(
                MailAddressError.invalid_character(position=i), AddressField.RAW.value, char
            )
            had_error = True

        elif char == "\\":
            entry.raw += char

        elif char == '"':
            entry.raw += char
            if in_quote and i > 0 and text[i - 1] == "\\":
                if in_angle:
                    entry.address += char
                else:
                    entry.name += char
                continue
            in_quote = not in_quote

        elif not in_quote and char == "<":
            entry.raw += char
            in_angle = True

        elif not in_quote and char == ">":
            entry.raw += char
            in_angle = False
            # "Martin Tour<noij> <martin.t@example.com>"; the bracketed text
            # was part of the name.
            if i != last and not is_valid_email(entry.address):
                entry.name = f"{entry.name} {entry.address}"
                entry.address = ""
                if isinstance(entry.error, MailAddressError) and entry.error.is_type(
                    MailAddressErrorType.NO_EMAIL
                ):
                    entry.error = None

        elif not in_quote and (char in SEPARATORS or (in_angle and char.isspace())):
            flush()

        elif not in_quote and not in_angle and entry.address != "" and not char.isspace():
            # More text after "<addr>"; read over it.
            entry.raw += char
            if entry.error is None:
                entry.set_error(
                    MailAddressError.invalid_character(position=i),
                    AddressField.RAW.value,
                    char,
                )
                had_error = True

        elif in_angle:
            entry.raw += char
            entry.address += char

        else:
            entry.raw += char
            entry.name += char

    flush()
    return addresses, had_error
