"""RyanData Mail Address Core - encoding, charset and plugin utilities.

This module contains the domain-agnostic building blocks the parser and the
models depend on.

Usage:
    from ryandata_mailaddress.core import (
        # Process logging (from abstract_validation_base)
        ProcessEntry,
        ProcessLog,
        # RFC 2047
        decode_header,
        encode_word,
        # Charset conversion
        CharsetConverterFactory,
        # Factory
        PluginFactory,
    )
"""

from __future__ import annotations

from abstract_validation_base import (
    ProcessEntry,
    ProcessLog,
    ValidationError,
    ValidationResult,
)

from ryandata_mailaddress.core.charset import (
    BaseCharsetConverter,
    CharsetConverterFactory,
    CodecsCharsetConverter,
    NativeCharsetConverter,
)
from ryandata_mailaddress.core.encoded_words import (
    decode_header,
    encode_word,
    needs_encoding,
)
from ryandata_mailaddress.core.factory import PluginFactory

__all__ = [
    # Results (from abstract_validation_base)
    "ValidationError",
    "ValidationResult",
    # Process logging (from abstract_validation_base)
    "ProcessEntry",
    "ProcessLog",
    # RFC 2047
    "decode_header",
    "encode_word",
    "needs_encoding",
    # Charset conversion
    "BaseCharsetConverter",
    "CharsetConverterFactory",
    "CodecsCharsetConverter",
    "NativeCharsetConverter",
    # Factory
    "PluginFactory",
]
