"""Address model.

This module contains the Address Pydantic model, a single display-name and
mail-address pair as produced by the header parser.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import ConfigDict, Field, PrivateAttr

from ryandata_mailaddress.core.encoded_words import encode_word
from ryandata_mailaddress.models.errors import MailAddressError
from ryandata_mailaddress.validation.base import MailValidationBase
from ryandata_mailaddress.validation.validators import is_valid_email

if TYPE_CHECKING:
    from ryandata_mailaddress.models.address_list import AddressList

# Characters that force a display name into a quoted string.
NAME_SPECIALS = '",;@<>()'


def _escape_quotes(text: str) -> str:
    return text.replace('"', '\\"')


class Address(MailValidationBase):
    """A single mail address with an optional display name.

    Instances are normally created by the header parser; ``raw`` and
    ``error`` are filled in there and are never serialized. An Address that
    is built by hand is checked lazily: the first call to :meth:`is_valid`
    runs the address grammar and may set ``error``.

    Inherits from MailValidationBase, providing:
    - process_log: ProcessLog field (excluded from serialization)
    - add_error(): Log an error and optionally raise MailAddressError
    - add_cleaning_process(): Log a cleaning/transformation operation
    - audit_log(): Export combined entries for analysis
    """

    model_config = ConfigDict(
        extra="ignore",
        arbitrary_types_allowed=True,
    )

    name: str = Field(default="", description="Decoded display name")
    address: str = Field(default="", description="The mail address proper")
    raw: str = Field(
        default="",
        exclude=True,
        description="Trimmed source text this entry was parsed from",
    )
    error: Exception | None = Field(
        default=None,
        exclude=True,
        description="Classified failure of this entry, if any",
    )

    # Address value the grammar was last checked against
    _checked_address: str | None = PrivateAttr(default=None)

    @classmethod
    def create(cls, name: str, address: str) -> Address:
        """Build an Address from a display name and an address string.

        The address string is parsed as a single address, so
        ``"Martin <martin@example.com>"`` is accepted and only the address
        part is kept. If parsing fails the result has no address and carries
        the parse error.

        Args:
            name: Display name, used as is.
            address: Text holding exactly one address.

        Returns:
            New Address instance.
        """
        from ryandata_mailaddress.service import parse_one

        result = parse_one(address)
        if result.error is not None:
            return cls(name=name, address="", error=result.error)
        return cls(name=name, address=result.address.address if result.address else "")

    @property
    def is_empty(self) -> bool:
        """True when the parser produced nothing for this entry."""
        return self.name == "" and self.address == "" and self.error is None

    def is_valid(self) -> bool:
        """Report whether this entry holds a usable address.

        An entry is valid when the address is non-empty, matches the address
        grammar and no error is attached. A grammar failure sets ``error`` to
        ``no_email`` unless an error is already present.
        """
        if self._checked_address != self.address:
            self._checked_address = self.address
            if not is_valid_email(self.address) and self.error is None:
                self.error = MailAddressError.no_email(value=self.address)
        return self.error is None

    @property
    def local(self) -> str:
        """Everything before the first ``@``."""
        return self.address.partition("@")[0]

    @property
    def domain(self) -> str:
        """Everything after the first ``@``, or the whole address without one."""
        local, at, domain = self.address.partition("@")
        return domain if at else local

    def without_tag(self) -> str:
        """Get the address with the ``+tag`` part of the local part removed.

        Returns an empty string for invalid addresses.

        Example:
            >>> Address(address="martin+news@example.com").without_tag()
            'martin@example.com'
        """
        if not self.is_valid():
            return ""
        plus = self.address.find("+")
        at = self.address.find("@")
        if plus != -1 and at != -1 and plus < at:
            return self.address[:plus] + self.address[at:]
        return self.address

    def render(self) -> str:
        """Format as ``"name" <address>``, without RFC 2047 encoding.

        Not safe for mail headers when the name has non-ASCII characters.
        """
        if not self.name:
            return self.address
        return f'"{_escape_quotes(self.name)}" <{self.address}>'

    def name_encoded(self) -> str:
        """Display name quoted where needed and RFC 2047 encoded."""
        if not self.name:
            return ""
        name = self.name
        if any(c in NAME_SPECIALS for c in name):
            name = f'"{_escape_quotes(name)}"'
        return encode_word(name)

    def address_encoded(self) -> str:
        """Address RFC 2047 encoded; unchanged for ASCII addresses."""
        if not self.address:
            return ""
        return encode_word(self.address)

    def render_encoded(self) -> str:
        """Format for direct use in a mail header."""
        if not self.name:
            return self.address
        return f"{self.name_encoded()} <{self.address_encoded()}>"

    def to_list(self) -> AddressList:
        """Put this address in a new AddressList."""
        from ryandata_mailaddress.models.address_list import AddressList

        return AddressList([self])

    def __str__(self) -> str:
        return self.render()
