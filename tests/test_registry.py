import gc

import pytest

from luatp.diagnostics import PreprocessError
from luatp.lexer import Token, TokenKind
from luatp.macros import BlockHandle, MacroRegistry, MarkedBlockRegistry, parse_parameter_specs
from luatp.text import SourceLocation


def callback() -> None:
    pass


def test_define_parses_parameters() -> None:
    registry = MacroRegistry()

    definition = registry.define("m", ["raw", "raw*"], callback)

    assert definition.parameters == ("raw", "raw")
    assert definition.variadic is True
    assert definition.arity == 2
    assert registry.get("m") is definition
    assert "m" in registry


def test_define_without_parameters() -> None:
    definition = MacroRegistry().define("m", [], callback)

    assert definition.parameters == ()
    assert definition.variadic is False


def test_duplicate_macro_keeps_existing_entries() -> None:
    registry = MacroRegistry()
    first = registry.define("m", ["raw"], callback)
    other = registry.define("n", [], callback)

    with pytest.raises(PreprocessError) as excinfo:
        registry.define("m", [], lambda: None, SourceLocation("f.txt", 4))

    assert excinfo.value.code == "MACRO_DUPLICATE_NAME"
    assert excinfo.value.location == SourceLocation("f.txt", 4)
    assert "[m]" in str(excinfo.value)
    assert registry.get("m") is first
    assert registry.get("n") is other
    assert len(registry) == 2


def test_variadic_must_be_last() -> None:
    with pytest.raises(PreprocessError) as excinfo:
        parse_parameter_specs("m", ["raw*", "raw"])

    assert excinfo.value.code == "MACRO_VARIADIC_NOT_LAST"


def test_unknown_parameter_kind_is_rejected() -> None:
    with pytest.raises(PreprocessError) as excinfo:
        MacroRegistry().define("m", ["raw", "int"], callback)

    assert excinfo.value.code == "MACRO_INVALID_PARAMETER_KIND"
    assert "[int]" in str(excinfo.value)


def test_failed_definition_registers_nothing() -> None:
    registry = MacroRegistry()

    with pytest.raises(PreprocessError):
        registry.define("m", ["bad"], callback)

    assert "m" not in registry


def test_empty_macro_name_is_rejected() -> None:
    with pytest.raises(PreprocessError) as excinfo:
        MacroRegistry().define("", [], callback)

    assert excinfo.value.code == "MACRO_INVALID_NAME"


def test_block_handle_writes_into_token() -> None:
    token = Token(TokenKind.SYMBOL, "", 2, "f.txt")
    handle = BlockHandle(token)

    handle.write("one")
    handle.write("two")

    assert token.value == "onetwo"
    assert handle.location == SourceLocation("f.txt", 2)


def test_block_handle_does_not_keep_token_alive() -> None:
    token = Token(TokenKind.SYMBOL, "", 0, "f.txt")
    handle = BlockHandle(token)
    del token
    gc.collect()

    assert handle.is_alive is False
    handle.write("x")
    assert handle.token is None


def test_marked_blocks_are_unique() -> None:
    token = Token(TokenKind.SYMBOL, "", 0, "f.txt")
    other = Token(TokenKind.SYMBOL, "", 1, "f.txt")
    registry = MarkedBlockRegistry()
    handle = BlockHandle(token)
    registry.mark("header", handle)

    with pytest.raises(PreprocessError) as excinfo:
        registry.mark("header", BlockHandle(other))

    assert excinfo.value.code == "BLOCK_DUPLICATE_NAME"
    assert registry.get("header") is handle


def test_missing_marked_block_is_fatal() -> None:
    with pytest.raises(PreprocessError) as excinfo:
        MarkedBlockRegistry().get("nope", SourceLocation("f.txt", 0))

    assert excinfo.value.code == "BLOCK_NOT_FOUND"
    assert excinfo.value.location == SourceLocation("f.txt", 0)


def test_expired_marked_block_is_still_returned() -> None:
    registry = MarkedBlockRegistry()
    token = Token(TokenKind.SYMBOL, "", 0, "f.txt")
    handle = BlockHandle(token)
    registry.mark("gone", handle)
    del token
    gc.collect()

    assert registry.get("gone") is handle
    assert handle.is_alive is False
