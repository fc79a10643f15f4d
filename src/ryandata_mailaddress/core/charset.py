"""Charset conversion for RFC 2047 encoded words.

Encoded words may declare any charset. UTF-8 is decoded directly by the
encoded-word decoder; everything else goes through a charset converter.
"""

from __future__ import annotations

import codecs
import logging
import os
from abc import ABC, abstractmethod
from typing import ClassVar

from ryandata_mailaddress.core.factory import PluginFactory
from ryandata_mailaddress.models.errors import MailAddressError
from ryandata_mailaddress.protocols import CharsetConverterProtocol

logger = logging.getLogger(__name__)

CONVERTER_ENV = "MAILADDRESS_CHARSET_CONVERTER"


class BaseCharsetConverter(ABC):
    """Abstract base class for charset converters.

    A decoder is acquired for every conversion and reset once the conversion
    is done, whether it succeeded or not; converters hold no state between
    calls.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of this converter implementation."""
        ...

    @abstractmethod
    def _open(self, charset: str) -> codecs.IncrementalDecoder:
        """Acquire a strict incremental decoder for ``charset``.

        Raises:
            LookupError: If the charset is not supported.
        """
        ...

    def convert(self, charset: str, data: bytes) -> str:
        """Convert bytes in ``charset`` to text.

        Args:
            charset: Charset name as declared in the encoded word.
            data: Raw bytes of the encoded word.

        Returns:
            The decoded text.

        Raises:
            MailAddressError: ``invalid_encoding`` if the charset is unknown or
                the bytes are not valid in it.
        """
        try:
            decoder = self._open(charset)
        except (LookupError, ValueError) as e:
            logger.debug("Unsupported charset %r: %s", charset, e)
            raise MailAddressError.invalid_encoding(charset=charset) from e

        try:
            text = decoder.decode(data, final=True)
        except (ValueError, TypeError) as e:
            raise MailAddressError.invalid_encoding(charset=charset) from e
        finally:
            decoder.reset()

        # bytes-to-bytes codecs such as "base64" are not charsets
        if not isinstance(text, str):
            raise MailAddressError.invalid_encoding(charset=charset)
        return text


class CodecsCharsetConverter(BaseCharsetConverter):
    """Converter backed by every codec the Python runtime knows about."""

    @property
    def name(self) -> str:
        return "codecs"

    def _open(self, charset: str) -> codecs.IncrementalDecoder:
        return codecs.getincrementaldecoder(charset.strip())(errors="strict")


class NativeCharsetConverter(BaseCharsetConverter):
    """Converter limited to the charsets mail software is required to know.

    Anything outside UTF-8, US-ASCII and ISO-8859-1 is reported as an
    invalid encoding instead of being converted.
    """

    SUPPORTED: ClassVar[frozenset[str]] = frozenset({"utf-8", "ascii", "iso8859-1"})

    @property
    def name(self) -> str:
        return "native"

    def _open(self, charset: str) -> codecs.IncrementalDecoder:
        info = codecs.lookup(charset.strip())
        if info.name not in self.SUPPORTED:
            raise LookupError(f"charset not supported natively: {charset}")
        return info.incrementaldecoder(errors="strict")


class CharsetConverterFactory(PluginFactory[CharsetConverterProtocol]):
    """Factory for creating charset converter instances.

    The default type comes from the ``MAILADDRESS_CHARSET_CONVERTER``
    environment variable and falls back to ``"codecs"``.

    Example:
        >>> converter = CharsetConverterFactory.create("native")
        >>> converter.convert("iso-8859-1", b"J\\xf6rg")
        'Jörg'
    """

    _registry: ClassVar[dict[str, type[CharsetConverterProtocol]]] = {}
    _default_type: ClassVar[str] = "codecs"
    _entity_name: ClassVar[str] = "charset converter"

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        """Ensure default converters are registered."""
        cls._registry.setdefault("codecs", CodecsCharsetConverter)
        cls._registry.setdefault("native", NativeCharsetConverter)

    @classmethod
    def default_type(cls) -> str:
        return os.getenv(CONVERTER_ENV) or cls._default_type
