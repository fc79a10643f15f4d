from __future__ import annotations

from ryandata_mailaddress.core.charset import CharsetConverterFactory
from ryandata_mailaddress.models import Address
from ryandata_mailaddress.parsers.base import BaseHeaderParser
from ryandata_mailaddress.parsers.finalizer import EntryFinalizer
from ryandata_mailaddress.parsers.scanner import scan
from ryandata_mailaddress.protocols import CharsetConverterProtocol


class HeaderParser(BaseHeaderParser):
    """Lenient parser for ``From``, ``To`` and ``Cc`` style header values.

    Accepts comma and semicolon separated lists of bare addresses,
    ``Name <address>`` pairs and legacy ``address (Comment)`` entries, with
    display names in RFC 2047 encoded words.

    Args:
        converter: Charset converter for encoded words that are not UTF-8.
            Created from ``converter_type`` when not given.
        converter_type: Registered converter type name; defaults to the
            factory default.
    """

    def __init__(
        self,
        converter: CharsetConverterProtocol | None = None,
        converter_type: str | None = None,
    ) -> None:
        super().__init__()
        self._converter = converter or CharsetConverterFactory.create(converter_type)
        self._finalizer = EntryFinalizer(self._converter.convert)

    @property
    def name(self) -> str:
        return "header"

    @property
    def converter(self) -> CharsetConverterProtocol:
        """Get the charset converter instance."""
        return self._converter

    def _parse_impl(self, header: str) -> tuple[list[Address], bool]:
        return scan(header, self._finalizer)
