class Location:
    """
    Represents a location (point) in the evaluated expression.

    Args:
    input_str(str): The expression being evaluated.
    start_position(int): The position in the input string.
    file_name(str): The name (path) of the file the expression came from,
        if any.
    first_line(int): The line number of the first line of input_str. Used
        when the expression is one line taken from a larger file.

    Attributes:
    line, column (int): The line/column calculated from the start position and
        input_str.
    """

    __slots__ = ['start_position', 'input_str', 'file_name', 'first_line',
                 '_line', '_column']

    def __init__(self, input_str, start_position, file_name=None,
                 first_line=1):
        self.input_str = input_str
        self.start_position = start_position
        self.file_name = file_name
        self.first_line = first_line

        # Evaluate this only when string representation is needed.
        # E.g. during error reporting
        self._line = None
        self._column = None

    @property
    def line(self):
        if self._line is None:
            self.evaluate_line_col()
        return self._line

    @property
    def column(self):
        if self._column is None:
            self.evaluate_line_col()
        return self._column

    def evaluate_line_col(self):
        line, self._column = pos_to_line_col(
            self.input_str, self.start_position)
        self._line = line + self.first_line - 1

    def __str__(self):
        return '{}{}:{}:"{}"'.format(
            f"{self.file_name}:" if self.file_name else "",
            self.line, self.column,
            position_context(self.input_str, self.start_position))

    def __repr__(self):
        return str(self)


def position_context(input_str, position):
    """
    Returns position context string.
    """
    start = max(position-10, 0)
    c = input_str[start:position] + " **> " \
        + input_str[position:position+10]
    return replace_newlines(c)


def replace_newlines(in_str):
    return in_str.replace("\n", "\\n")


def pos_to_line_col(input_str, position):
    """
    Returns position in the (line,column) form.
    """
    line = input_str[: position].count('\n') + 1
    line_start_pos = input_str.rfind('\n', 0, position)
    column = position - line_start_pos - 1

    return line, column
