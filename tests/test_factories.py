import pytest

from ryandata_mailaddress import (
    Address,
    AddressList,
    BaseHeaderParser,
    HeaderParser,
    HeaderParserProtocol,
    NativeCharsetConverter,
    ParserFactory,
)


class SingleEntryParser(BaseHeaderParser):
    """Parser that treats the whole header as one bare address."""

    @property
    def name(self) -> str:
        return "single"

    def _parse_impl(self, header: str) -> tuple[list[Address], bool]:
        return [Address(address=header.strip())], False


def test_parser_factory_default_and_error() -> None:
    """ParserFactory should provide the header parser by default and raise on unknown."""
    parser = ParserFactory.create()
    assert isinstance(parser, HeaderParser)
    assert isinstance(parser, HeaderParserProtocol)
    with pytest.raises(ValueError, match="Unknown parser type: unknown-type"):
        ParserFactory.create("unknown-type")


def test_parser_factory_passes_converter_type() -> None:
    """Constructor arguments should reach the parser."""
    parser = ParserFactory.create("header", converter_type="native")
    assert isinstance(parser, HeaderParser)
    assert isinstance(parser.converter, NativeCharsetConverter)


def test_parser_factory_register_and_unregister() -> None:
    """Custom parsers should be creatable by name once registered."""
    ParserFactory.register("single", SingleEntryParser)
    try:
        assert "single" in ParserFactory.available_types()
        parser = ParserFactory.create("single")
        addresses, had_error = parser.parse_list(" a@example.com ")
        assert isinstance(addresses, AddressList)
        assert had_error is False
        assert addresses.to_string_slice() == ["a@example.com"]
    finally:
        ParserFactory.unregister("single")

    assert "single" not in ParserFactory.available_types()
    with pytest.raises(ValueError):
        ParserFactory.create("single")


def test_parser_factory_defaults_survive_clear() -> None:
    """Default parsers should be registered again after the registry is cleared."""
    ParserFactory.clear_registry()
    assert ParserFactory.available_types() == ["header"]
    assert isinstance(ParserFactory.create(), HeaderParser)


def test_unregister_unknown_is_ignored() -> None:
    ParserFactory.unregister("never-registered")
    assert "header" in ParserFactory.available_types()
