from luatp.lexer import CharStack, PushbackCursor


def test_peek_does_not_consume() -> None:
    cursor = PushbackCursor("ab")

    assert cursor.peek() == "a"
    assert cursor.peek() == "a"
    assert cursor.advance() == "a"
    assert cursor.advance() == "b"
    assert cursor.advance() is None
    assert cursor.peek() is None
    assert cursor.at_end is True


def test_empty_source_is_at_end() -> None:
    cursor = PushbackCursor("")

    assert cursor.at_end is True
    assert cursor.peek() is None


def test_advance_counts_newlines() -> None:
    cursor = PushbackCursor("a\nb\n")

    cursor.skip(2)
    assert cursor.line == 1
    cursor.skip(2)
    assert cursor.line == 2


def test_push_back_is_served_before_source_and_rolls_back_lines() -> None:
    cursor = PushbackCursor("x\ny")
    assert cursor.advance() == "x"
    assert cursor.advance() == "\n"
    assert cursor.line == 1

    cursor.push_back("\n")
    assert cursor.line == 0
    assert cursor.at_end is False
    assert cursor.peek() == "\n"

    assert cursor.advance() == "\n"
    assert cursor.line == 1
    assert cursor.advance() == "y"


def test_pushed_back_characters_keep_cursor_alive_past_source_end() -> None:
    cursor = PushbackCursor("z")
    cursor.advance()
    assert cursor.at_end is True

    cursor.push_back("z")

    assert cursor.at_end is False
    assert cursor.advance() == "z"
    assert cursor.at_end is True


def test_matches_ahead_restores_position_and_line_on_mismatch() -> None:
    cursor = PushbackCursor("<?lu\nx")

    assert cursor.matches_ahead("<?lua") is False
    assert cursor.line == 0
    assert "".join(iter(cursor.advance, None)) == "<?lu\nx"
    assert cursor.line == 1


def test_matches_ahead_restores_position_on_match() -> None:
    cursor = PushbackCursor("lua?>rest")

    assert cursor.matches_ahead("lua?>") is True
    assert cursor.peek() == "l"
    cursor.skip(5)
    assert cursor.peek() == "r"


def test_matches_ahead_fails_at_end_of_input() -> None:
    cursor = PushbackCursor("<?l")

    assert cursor.matches_ahead("<?lua") is False
    assert cursor.advance() == "<"


def test_char_stack_is_lifo() -> None:
    stack = CharStack()
    stack.push("a")
    stack.push("b")

    assert stack.is_empty is False
    assert stack.peek() == "b"
    assert stack.pop() == "b"
    assert stack.pop() == "a"
    assert stack.is_empty
