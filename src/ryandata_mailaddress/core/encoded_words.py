"""RFC 2047 encoded-word decoding and Q-encoding.

Decoding accepts Q and B encoded words in any charset. Words that cannot be
decoded structurally (bad base64, bad hex escapes) are left in the text as
literals; a charset that cannot be converted is an error.

Encoding always produces UTF-8 Q-encoded words and leaves printable ASCII
text untouched.
"""

from __future__ import annotations

import base64
import binascii
import re
import string
from collections.abc import Callable

from ryandata_mailaddress.models.errors import MailAddressError

ENCODED_WORD_RE = re.compile(
    r"""
    =\?                 # literal =?
    (?P<charset>[^?]*)  # charset, up to the next ?
    \?
    (?P<encoding>[qQbB])
    \?
    (?P<text>.*?)       # non-greedy up to the next ?=
    \?=
    """,
    re.VERBOSE,
)

UTF8_CHARSETS = frozenset({"utf-8", "utf8"})

# Longest encoded word allowed by RFC 2047, section 2.
MAX_ENCODED_WORD_LEN = 75
_PREFIX = "=?utf-8?q?"
_SUFFIX = "?="
MAX_CONTENT_LEN = MAX_ENCODED_WORD_LEN - len(_PREFIX) - len(_SUFFIX)

ConvertFunc = Callable[[str, bytes], str]


def _q_decode(text: str) -> bytes:
    out = bytearray()
    i = 0
    while i < len(text):
        c = text[i]
        if c == "_":
            out.append(0x20)
        elif c == "=":
            pair = text[i + 1 : i + 3]
            if len(pair) != 2 or not all(h in string.hexdigits for h in pair):
                raise ValueError(f"invalid escape sequence in Q-encoded text: {pair!r}")
            out.append(int(pair, 16))
            i += 2
        elif " " <= c <= "~" or c in "\n\r\t":
            out.append(ord(c))
        else:
            raise ValueError(f"invalid character in Q-encoded text: {c!r}")
        i += 1
    return bytes(out)


def _decode_text(encoding: str, text: str) -> bytes:
    if encoding in "bB":
        return base64.b64decode(text, validate=True)
    return _q_decode(text)


def _to_unicode(charset: str, content: bytes, convert: ConvertFunc) -> str:
    if charset.strip().lower() in UTF8_CHARSETS:
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MailAddressError.invalid_encoding(charset=charset) from e
    return convert(charset, content)


def decode_header(header: str, convert: ConvertFunc) -> str:
    """Decode all RFC 2047 encoded words in a header value.

    Whitespace between two adjacent encoded words is removed; any other text
    is kept as is.

    Args:
        header: Header text that may contain encoded words.
        convert: Charset conversion used for every charset except UTF-8.

    Returns:
        The decoded text.

    Raises:
        MailAddressError: ``invalid_encoding`` if an encoded word's bytes
            cannot be converted from its declared charset.
    """
    if "=?" not in header:
        return header

    parts: list[str] = []
    pos = 0
    between_words = False
    while True:
        match = ENCODED_WORD_RE.search(header, pos)
        if match is None:
            break

        try:
            content = _decode_text(match["encoding"], match["text"])
        except (ValueError, binascii.Error):
            # Not an encoded word after all; keep "=?" and rescan after it.
            parts.append(header[pos : match.start() + 2])
            pos = match.start() + 2
            between_words = False
            continue

        gap = header[pos : match.start()]
        if gap and (not between_words or not gap.isspace()):
            parts.append(gap)
        parts.append(_to_unicode(match["charset"], content, convert))
        pos = match.end()
        between_words = True

    parts.append(header[pos:])
    return "".join(parts)


def needs_encoding(text: str) -> bool:
    """Report whether text has characters outside printable ASCII (tab excepted)."""
    return any((c < " " or c > "~") and c != "\t" for c in text)


def encode_word(text: str) -> str:
    """Q-encode text as one or more UTF-8 encoded words.

    Text that is entirely printable ASCII is returned unchanged. Otherwise
    the result is a space-separated run of encoded words, each at most 75
    characters long; a character's bytes are never split across words.

    Args:
        text: Text to encode.

    Returns:
        Header-safe text.
    """
    if not needs_encoding(text):
        return text

    words: list[str] = []
    current: list[str] = []
    current_len = 0
    for c in text:
        if " " <= c <= "~" and c not in "=?_":
            enc = "_" if c == " " else c
        else:
            enc = "".join(f"={b:02X}" for b in c.encode("utf-8", "surrogatepass"))

        if current_len + len(enc) > MAX_CONTENT_LEN:
            words.append("".join(current))
            current = []
            current_len = 0
        current.append(enc)
        current_len += len(enc)
    words.append("".join(current))

    return " ".join(f"{_PREFIX}{w}{_SUFFIX}" for w in words)
