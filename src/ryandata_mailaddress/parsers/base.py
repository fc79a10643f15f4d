from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from ryandata_mailaddress.models import Address, AddressList, MailAddressError, ParseResult

logger = logging.getLogger(__name__)


def normalize_header(header: str | bytes) -> str:
    """Get header text; undecodable UTF-8 bytes become U+FFFD."""
    if isinstance(header, bytes):
        return header.decode("utf-8", errors="replace")
    return header


class BaseHeaderParser(ABC):
    """Abstract base class for header parsers.

    Provides common logging, statistics and the single-address and batch
    entry points. Subclasses must implement the _parse_impl method.
    """

    def __init__(self) -> None:
        """Initialize the parser."""
        self._parse_count = 0
        self._error_count = 0

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of this parser implementation."""
        ...

    @abstractmethod
    def _parse_impl(self, header: str) -> tuple[list[Address], bool]:
        """Internal implementation of header parsing.

        Must not raise for malformed input; failures are attached to the
        entries.

        Args:
            header: Header value to parse.

        Returns:
            Tuple of (entries in source order, whether any entry has an error).
        """
        ...

    def parse_list(self, header: str | bytes) -> tuple[AddressList, bool]:
        """Parse a header value holding zero or more addresses.

        Args:
            header: Raw header value. Bytes are decoded as UTF-8.

        Returns:
            Tuple of (address list, whether any entry carries an error).
        """
        self._parse_count += 1
        text = normalize_header(header)

        addresses, had_error = self._parse_impl(text)
        if had_error:
            self._error_count += 1
            logger.warning(
                "Failed to parse %d of %d addresses: %s",
                sum(1 for a in addresses if a.error is not None),
                len(addresses),
                text[:50],
            )
        else:
            logger.debug("Successfully parsed header: %s", text[:50])

        return AddressList(addresses), had_error

    def parse_one(self, header: str | bytes) -> ParseResult:
        """Parse a header value that must hold exactly one address.

        Args:
            header: Raw header value. Bytes are decoded as UTF-8.

        Returns:
            ParseResult with the single entry; ``error`` is ``no_email`` when
            there is no entry, ``too_many_emails`` when there is more than
            one, and otherwise the entry's own error.
        """
        text = normalize_header(header)
        addresses, _ = self.parse_list(text)

        if len(addresses) == 1:
            return ParseResult(raw_input=text, address=addresses[0], error=addresses[0].error)

        error = (
            MailAddressError.no_email(value=text[:50])
            if len(addresses) == 0
            else MailAddressError.too_many_emails(count=len(addresses))
        )
        result = ParseResult(raw_input=text, address=Address(), error=error)
        result.add_process_error("raw_input", str(error), text, {"entries": len(addresses)})
        return result

    def parse_batch(self, headers: Sequence[str | bytes]) -> list[tuple[AddressList, bool]]:
        """Parse multiple header values.

        Default implementation processes headers sequentially.

        Args:
            headers: Sequence of raw header values.

        Returns:
            One (address list, had error) tuple per header.
        """
        return [self.parse_list(header) for header in headers]

    @property
    def stats(self) -> dict[str, int]:
        """Get parsing statistics.

        Returns:
            Dict with parse_count and error_count, where error_count counts
            headers with at least one failing entry.
        """
        return {
            "parse_count": self._parse_count,
            "error_count": self._error_count,
        }

    def reset_stats(self) -> None:
        """Reset parsing statistics."""
        self._parse_count = 0
        self._error_count = 0
