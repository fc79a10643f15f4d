from ryandata_mailaddress.parsers.base import BaseHeaderParser, normalize_header
from ryandata_mailaddress.parsers.factory import ParserFactory
from ryandata_mailaddress.parsers.finalizer import EntryFinalizer
from ryandata_mailaddress.parsers.header_parser import HeaderParser
from ryandata_mailaddress.parsers.scanner import scan

__all__ = [
    "BaseHeaderParser",
    "EntryFinalizer",
    "HeaderParser",
    "ParserFactory",
    "normalize_header",
    "scan",
]
