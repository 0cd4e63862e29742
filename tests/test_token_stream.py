import pytest

from luatp.lexer import Token, TokenKind
from luatp.stream import TokenStream


def make_stream(*values: str) -> TokenStream:
    return TokenStream(Token(TokenKind.SYMBOL, value, 0, "") for value in values)


def values(stream: TokenStream) -> list[str]:
    return [token.value for token in stream]


def test_stream_preserves_order() -> None:
    stream = make_stream("a", "b", "c")

    assert len(stream) == 3
    assert values(stream) == ["a", "b", "c"]
    assert stream.head is not None and stream.head.text == "a"
    assert stream.tail is not None and stream.tail.text == "c"


def test_remove_returns_successor_and_relinks() -> None:
    stream = make_stream("a", "b", "c")
    middle = stream.head.next

    following = stream.remove(middle)

    assert following is stream.tail
    assert values(stream) == ["a", "c"]
    assert stream.head.next is stream.tail
    assert stream.tail.prev is stream.head
    assert middle.is_linked is False


def test_remove_head_and_tail() -> None:
    stream = make_stream("a", "b", "c")

    stream.remove(stream.head)
    assert stream.remove(stream.tail) is None

    assert values(stream) == ["b"]
    assert stream.head is stream.tail


def test_remove_last_node_empties_stream() -> None:
    stream = make_stream("only")

    stream.remove(stream.head)

    assert len(stream) == 0
    assert stream.head is None
    assert stream.tail is None


def test_walk_survives_removal_of_upcoming_nodes() -> None:
    stream = make_stream("a", "b", "c", "d")
    seen: list[str] = []

    for node in stream.nodes():
        seen.append(node.text)
        if node.text == "a":
            stream.remove(node.next)
            stream.remove(node.next)

    assert seen == ["a", "d"]
    assert values(stream) == ["a", "d"]


def test_walk_survives_removal_of_current_node() -> None:
    stream = make_stream("a", "b", "c")
    seen: list[str] = []

    for node in stream.nodes():
        seen.append(node.text)
        if node.text == "b":
            stream.remove(node)

    assert seen == ["a", "b", "c"]
    assert values(stream) == ["a", "c"]


def test_removing_foreign_node_is_rejected() -> None:
    stream = make_stream("a")
    other = make_stream("b")

    with pytest.raises(ValueError, match="does not belong"):
        stream.remove(other.head)


def test_clear_unlinks_everything() -> None:
    stream = make_stream("a", "b")
    first = stream.head

    stream.clear()

    assert len(stream) == 0
    assert list(stream) == []
    assert first.next is None
    assert first.is_linked is False


def test_token_mutation_is_visible_in_text() -> None:
    stream = make_stream("a", "", "c")
    stream.head.next.token.append("B")

    assert stream.text() == "aBc"
