from __future__ import annotations

import pytest

from ryandata_mailaddress import (
    Address,
    EmailSyntaxValidator,
    EntryErrorValidator,
    MailAddressError,
    ValidatorProtocol,
    is_valid_email,
    parse_one,
)
from ryandata_mailaddress.validation import create_default_validators


class TestIsValidEmail:
    """Tests for the address grammar."""

    @pytest.mark.parametrize(
        "address",
        [
            "martin@example.com",
            "a@b.c",
            "dot.in.local.part@example.com",
            "tagged+tag@example.com",
            "dashed-dash@ex-ample.com",
            "MAILER-DAEMON@example.org",
            "123@456.789",
            "µ@example.com",
            "micro@µ.example.com",
            "f€@ü.русские",
            "\"quoted\"@example.com",
            "x@" + "a" * 63 + ".com",
        ],
    )
    def test_valid(self, address: str) -> None:
        assert is_valid_email(address)

    @pytest.mark.parametrize(
        "address",
        [
            "",
            "martin",
            "martin@",
            "@example.com",
            "martin@localhost",
            "martin@example..com",
            "martin@.example.com",
            "martin@example.com.",
            "mar tin@example.com",
            "mar\ttin@example.com",
            "a@b@example.com",
            "a;b@example.com",
            "<a@example.com>",
            "a@ex_ample.com",
            "a@exa mple.com",
            "user@[IPv6:2001:DB8::1]",
            "x@" + "a" * 64 + ".com",
            "user@a².com",
            "user@Ⅳ.example.com",
            "user@example.١٢",
            " martin@example.com",
        ],
    )
    def test_invalid(self, address: str) -> None:
        assert not is_valid_email(address)


class TestEmailSyntaxValidator:
    """Tests for EmailSyntaxValidator."""

    def test_valid(self) -> None:
        result = EmailSyntaxValidator().validate(Address(address="martin@example.com"))

        assert result.is_valid

    def test_invalid(self) -> None:
        result = EmailSyntaxValidator().validate(Address(address="martin@localhost"))

        assert not result.is_valid
        assert len(result.errors) == 1
        assert result.errors[0].field == "address"
        assert result.errors[0].value == "martin@localhost"

    def test_name(self) -> None:
        assert EmailSyntaxValidator().name == "email_syntax"


class TestEntryErrorValidator:
    """Tests for EntryErrorValidator."""

    def test_clean_entry(self) -> None:
        address = parse_one("martin@example.com").raise_for_error()

        assert EntryErrorValidator().validate(address).is_valid

    def test_entry_with_parse_error(self) -> None:
        address = parse_one("foo <foo@example.com> huh").address
        assert address is not None

        result = EntryErrorValidator().validate(address)

        assert not result.is_valid
        assert result.errors[0].field == "raw"
        assert result.errors[0].message == "invalid character"
        assert result.errors[0].value == "foo <foo@example.com> huh"

    def test_hand_built_entry_uses_address(self) -> None:
        address = Address(address="martin@example.com", error=MailAddressError.invalid_encoding())

        result = EntryErrorValidator().validate(address)

        assert result.errors[0].value == "martin@example.com"

    def test_name(self) -> None:
        assert EntryErrorValidator().name == "entry_error"


class TestDefaultValidators:
    """Tests for the default validation pipeline."""

    def test_valid_entry(self) -> None:
        validator = create_default_validators()

        assert validator.validate(Address(address="martin@example.com")).is_valid

    def test_syntax_failure(self) -> None:
        validator = create_default_validators()

        result = validator.validate(Address(address="martin@localhost"))

        assert not result.is_valid
        assert "address" in [e.field for e in result.errors]

    def test_parse_error_with_valid_syntax(self) -> None:
        validator = create_default_validators()
        address = parse_one("foo <foo@example.com> huh").address
        assert address is not None

        result = validator.validate(address)

        assert not result.is_valid
        assert [e.field for e in result.errors] == ["raw"]

    @pytest.mark.parametrize(
        "validator",
        [EmailSyntaxValidator(), EntryErrorValidator(), create_default_validators()],
    )
    def test_validators_satisfy_protocol(self, validator: object) -> None:
        assert isinstance(validator, ValidatorProtocol)
