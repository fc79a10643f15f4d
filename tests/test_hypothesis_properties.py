"""Property-based tests using Hypothesis for core components.

This module contains property tests that verify invariants of the header
scanner, the address model and address lists using Hypothesis strategies.
"""

from __future__ import annotations

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from ryandata_mailaddress import (
    Address,
    AddressList,
    MailAddressError,
    ParseResult,
    is_valid_email,
    parse_list,
    parse_one,
)
from tests.strategies import (
    display_name_strategy,
    email_strategy,
    header_strategy,
    messy_header_strategy,
    name_address_strategy,
)

# =============================================================================
# Scanner Property Tests
# =============================================================================


class TestScannerProperties:
    """Property tests for parsing arbitrary input."""

    @given(st.one_of(st.text(), messy_header_strategy()))
    @settings(max_examples=300, suppress_health_check=[HealthCheck.too_slow])
    def test_parse_list_never_raises(self, header: str) -> None:
        """Any text parses; failures are attached to entries."""
        addresses, had_error = parse_list(header)

        assert isinstance(addresses, AddressList)
        assert had_error == any(a.error is not None for a in addresses)
        for address in addresses:
            assert not address.is_empty
            assert address.error is None or isinstance(address.error, MailAddressError)

    @given(st.binary(max_size=80))
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_parse_list_accepts_any_bytes(self, header: bytes) -> None:
        addresses, had_error = parse_list(header)

        assert had_error == any(a.error is not None for a in addresses)

    @given(st.one_of(st.text(), messy_header_strategy()))
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_parse_one_never_raises(self, header: str) -> None:
        result = parse_one(header)

        assert isinstance(result, ParseResult)
        assert result.address is not None
        assert (result.error is None) == result.is_parsed

    @given(messy_header_strategy())
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_entries_without_error_are_valid(self, header: str) -> None:
        """An entry the parser accepted always has a grammatical address."""
        addresses, _ = parse_list(header)

        for address in addresses:
            if address.error is None:
                assert is_valid_email(address.address)

    @given(header_strategy())
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_well_formed_headers_parse_exactly(
        self, generated: tuple[str, list[tuple[str, str]]]
    ) -> None:
        """Well-formed headers yield the expected entries in order."""
        header, expected = generated

        addresses, had_error = parse_list(header)

        assert had_error is False
        assert [(a.name, a.address) for a in addresses] == expected


# =============================================================================
# Address Property Tests
# =============================================================================


class TestAddressProperties:
    """Property tests for rendering and validity."""

    @given(name_address_strategy())
    @settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
    def test_render_encoded_reparses(self, pair: tuple[str, str]) -> None:
        """Header-safe rendering parses back to the same name and address."""
        name, address = pair

        rendered = Address(name=name, address=address).render_encoded()
        parsed = parse_one(rendered).raise_for_error()

        assert rendered.isascii()
        assert (parsed.name, parsed.address) == (name, address)

    @given(display_name_strategy(), email_strategy())
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_render_reparses(self, name: str, address: str) -> None:
        rendered = Address(name=name, address=address).render()

        parsed = parse_one(rendered).raise_for_error()

        assert (parsed.name, parsed.address) == (name, address)

    @given(email_strategy())
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_generated_addresses_are_valid(self, address: str) -> None:
        assert Address(address=address).is_valid()

    @given(email_strategy(), st.text(alphabet="abc123", min_size=1, max_size=8))
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_without_tag_drops_tag(self, address: str, tag: str) -> None:
        local, _, domain = address.partition("@")
        untagged = local.split("+", 1)[0]

        tagged = Address(address=f"{untagged}+{tag}@{domain}")

        assert tagged.without_tag() == f"{untagged}@{domain}"
        assert tagged.domain == domain


# =============================================================================
# AddressList Property Tests
# =============================================================================


class TestAddressListProperties:
    """Property tests for list views."""

    @given(st.lists(email_strategy(), max_size=8))
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_dedup_is_idempotent(self, emails: list[str]) -> None:
        addresses = AddressList([Address(address=e) for e in emails])

        once = addresses.dedup()
        twice = once.dedup()

        assert [a.address for a in twice] == [a.address for a in once]
        assert len({a.address.casefold() for a in once}) == len(once)

    @given(st.lists(email_strategy(), min_size=1, max_size=8))
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_contains_ignores_case(self, emails: list[str]) -> None:
        addresses = AddressList([Address(address=e) for e in emails])

        for email in emails:
            assert addresses.contains_address(email.upper())
            assert addresses.contains_domain(email.partition("@")[2].upper())

    @given(st.lists(name_address_strategy(), max_size=6))
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_render_encoded_list_reparses(self, pairs: list[tuple[str, str]]) -> None:
        addresses = AddressList([Address(name=n, address=a) for n, a in pairs])

        reparsed, had_error = parse_list(addresses.render_encoded())

        assert had_error is False
        assert [(a.name, a.address) for a in reparsed] == [
            (a.name, a.address) for a in addresses.dedup()
        ]

    @given(st.lists(name_address_strategy(), max_size=6))
    @settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
    def test_json_round_trip(self, pairs: list[tuple[str, str]]) -> None:
        addresses = AddressList([Address(name=n, address=a) for n, a in pairs])

        again = AddressList.from_json(addresses.model_dump_json())

        assert [(a.name, a.address) for a in again] == pairs
