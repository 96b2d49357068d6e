from typing import Optional, Tuple

from rdcalc.common import Location


class RdcalcError(Exception):
    def __init__(self, location: Location,
                 message: str,
                 context_message: Optional[str] = None,
                 hint: Optional[str] = None):

        self.location = location
        self.hint = hint
        self.message = message
        self.context_message = context_message

        context = get_context(location, context_message) \
            if context_message else None
        hint = f"  hint: {hint}" if hint else None

        self.full_message = "\n".join(
            filter(None, [f"syntax error: {message}", context, hint]))
        super().__init__(self.full_message)

    @property
    def position(self):
        return self.location.start_position

    def __str__(self):
        return f"{self.location}: {self.full_message}"


def get_line_col_at_position(text: str, pos: int) -> Tuple[Optional[int],
                                                           Optional[int],
                                                           Optional[str]]:
    """
    Returns the zero-based line index, the column and the content of the line
    holding `pos`. Lines are split on '\\n' only, the same way
    `pos_to_line_col` counts them.
    """
    if pos > len(text):
        # Position out of range
        return None, None, None

    line_start = text.rfind('\n', 0, pos) + 1
    line_end = text.find('\n', pos)
    if line_end == -1:
        line_end = len(text)
    return (text.count('\n', 0, pos), pos - line_start,
            text[line_start:line_end].rstrip('\r'))


def get_indented_message(message: str, indent: int,
                         prefix: Optional[str] = None,
                         marker: Optional[str] = None) -> str:
    """
    Returns message where all lines are indented by `indent`.

    If optional `prefix` is given it is prepended to every line.
    """
    indent_str = (prefix if prefix is not None else "") + " " * indent
    first_indent_str = (indent_str[:-len(marker) + 1] + marker) \
        if marker is not None else None
    return "\n".join([f"{first_indent_str}{line}"
                      if marker is not None and lineidx == 0
                      else f"{indent_str}{line}"
                      for lineidx, line in enumerate(message.splitlines())])


def get_context(location: Location, message: str) -> Optional[str]:
    lineidx, colidx, line = get_line_col_at_position(
        location.input_str, location.start_position)
    if lineidx is None:
        return None

    line_no = lineidx + location.first_line
    return f"{line_no:>5} | {line}\n" \
        + get_indented_message(message, colidx + 4, "      |", "^^^ ")


def char_repr(char):
    return "end of input" if char is None else repr(char)


class ExpectedCharError(RdcalcError):
    """
    A specific character is required at the location but was not found.
    """
    def __init__(self, location: Location, expected: str):
        self.expected = expected
        position, input = location.start_position, location.input_str
        found = input[position] if position < len(input) else None
        super().__init__(location,
                         f"expected {expected!r} but found {char_repr(found)}",
                         context_message=f"expected: {expected}")


class UnexpectedCharError(RdcalcError):
    """
    No term alternative matches the character at the location.
    """
    def __init__(self, location: Location, char: Optional[str],
                 hint: Optional[str] = None):
        self.char = char
        super().__init__(location, f"unexpected {char_repr(char)}",
                         context_message="expected: + - ( digit",
                         hint=hint)


class UnexpectedEndError(UnexpectedCharError):
    """
    Input ended where a term was required.
    """
    def __init__(self, location: Location):
        super().__init__(location, None,
                         hint="the expression is incomplete")


class ExpectedEndError(RdcalcError):
    """
    Trailing input remains after a complete expression.
    """
    def __init__(self, location: Location):
        super().__init__(location, "expected end of input",
                         context_message="trailing input starts here")
