import pytest
from rdcalc import (evaluate, RdcalcError, ExpectedCharError,
                    UnexpectedCharError, UnexpectedEndError, ExpectedEndError)


def test_unbalanced_paren():
    with pytest.raises(ExpectedCharError) as e:
        evaluate("(1+1")

    assert e.value.expected == ')'
    assert e.value.position == 4


def test_wrong_closing_char():
    with pytest.raises(ExpectedCharError) as e:
        evaluate("(1+1]")

    assert e.value.expected == ')'
    assert e.value.position == 4
    assert "found ']'" in e.value.message


def test_missing_operand():
    with pytest.raises(UnexpectedCharError) as e:
        evaluate("1+")

    assert isinstance(e.value, UnexpectedEndError)
    assert e.value.char is None
    assert e.value.position == 2


def test_missing_operand_trailing_whitespace():
    with pytest.raises(UnexpectedEndError):
        evaluate("1 *   ")


@pytest.mark.parametrize("input_str, char, position", [
    ("x", 'x', 0),
    ("1+x", 'x', 2),
    ("*2", '*', 0),
    ("()", ')', 1),
    ("1+ )", ')', 3),
])
def test_unexpected_char(input_str, char, position):
    with pytest.raises(UnexpectedCharError) as e:
        evaluate(input_str)

    assert not isinstance(e.value, UnexpectedEndError)
    assert e.value.char == char
    assert e.value.position == position


@pytest.mark.parametrize("input_str, position", [
    ("1 2", 2),
    ("1)", 1),
    ("(1))", 3),
    ("2 * 3 x", 6),
])
def test_trailing_input(input_str, position):
    with pytest.raises(ExpectedEndError) as e:
        evaluate(input_str)

    assert e.value.position == position


def test_decimal_point_is_trailing_input():
    with pytest.raises(ExpectedEndError) as e:
        evaluate("1.5")

    assert e.value.position == 1


def test_trailing_whitespace_is_not_trailing_input():
    assert evaluate("1 + 1 \t \n") == 2.0


def test_common_base_class():
    for input_str in ["(1", "1+", "x", "1 1"]:
        with pytest.raises(RdcalcError):
            evaluate(input_str)


def test_error_message_context():
    with pytest.raises(RdcalcError) as e:
        evaluate("1 + 2 * x")

    message = str(e.value)
    assert message.startswith('1:8:')
    assert "unexpected 'x'" in message
    assert "    1 | 1 + 2 * x" in message
    assert "^^^" in message


def test_error_location_line_column():
    with pytest.raises(ExpectedEndError) as e:
        evaluate("1 +\n 2\n 3", file_name="expr.txt")

    loc = e.value.location
    assert loc.start_position == 8
    assert loc.line == 3
    assert loc.column == 1
    assert str(loc).startswith("expr.txt:3:1:")


def test_error_hint():
    with pytest.raises(UnexpectedEndError) as e:
        evaluate("(1 -")

    assert e.value.hint
    assert "hint:" in str(e.value)


def test_no_state_between_evaluations():
    with pytest.raises(RdcalcError):
        evaluate("(1 + 2")
    assert evaluate("(1 + 2)") == 3.0


def test_error_first_line_offset():
    with pytest.raises(ExpectedEndError) as e:
        evaluate("1 +\n 2 3", file_name="exprs.txt", first_line=7)

    loc = e.value.location
    assert loc.line == 8
    assert loc.column == 3
    assert str(e.value).startswith("exprs.txt:8:3:")
    assert "    8 |  2 3" in str(e.value)


def test_error_messages_are_not_styled():
    with pytest.raises(RdcalcError) as e:
        evaluate("1 +", debug_colors=True)

    assert "\x1b[" not in str(e.value)


def test_error_context_vertical_tab():
    with pytest.raises(UnexpectedCharError) as e:
        evaluate("1 +\v x")

    assert e.value.location.line == 1
    assert e.value.location.column == 5
    assert "    1 | 1 +\v x" in str(e.value)
