from rdcalc.common import Location
from rdcalc.exceptions import (ExpectedCharError, ExpectedEndError,
                               UnexpectedEndError)

# The characters C isspace accepts.
WHITESPACE = '\n\r\t\v\f '


class Cursor:
    """
    A forward-only scan position over the input string.

    When whitespace skipping is on, the cursor always rests on a significant
    character or at the end of input: leading whitespace is skipped on
    construction and every advance skips the whitespace that follows.

    Args:
    input_str(str): The string to scan.
    ws(str): Characters treated as whitespace.
    skip_ws(bool): Should whitespace be skipped.
    file_name(str): Used in error reporting.
    first_line(int): Line number of the first line of input_str, used in
        error reporting.
    """

    __slots__ = ['input_str', 'position', 'ws', 'skip_ws', 'file_name',
                 'first_line']

    def __init__(self, input_str, ws=WHITESPACE, skip_ws=True, file_name=None,
                 first_line=1):
        self.input_str = input_str
        self.ws = ws
        self.skip_ws = skip_ws
        self.file_name = file_name
        self.first_line = first_line
        self.position = self._skipws(0)

    def _skipws(self, position):
        if self.skip_ws:
            input_str, ws = self.input_str, self.ws
            while position < len(input_str) and input_str[position] in ws:
                position += 1
        return position

    @property
    def location(self):
        return Location(self.input_str, self.position, self.file_name,
                        self.first_line)

    def current(self):
        """
        Returns the character at the current position.
        Raises UnexpectedEndError if there is none.
        """
        if self.position >= len(self.input_str):
            raise UnexpectedEndError(self.location)
        return self.input_str[self.position]

    def next(self):
        """
        Returns the significant character after the current one without moving
        the cursor, or None if there is no such character.
        """
        position = self._skipws(self.position + 1)
        if position < len(self.input_str):
            return self.input_str[position]
        return None

    def at_end(self):
        """
        True if nothing but whitespace is left.
        """
        return self._skipws(self.position) >= len(self.input_str)

    def advance(self):
        if self.position < len(self.input_str):
            self.position = self._skipws(self.position + 1)

    def maybe_expect(self, expected):
        """
        Consumes `expected` if it is the current character.
        Returns True if consumed.
        """
        if self.position < len(self.input_str) \
                and self.input_str[self.position] == expected:
            self.advance()
            return True
        return False

    def expect(self, expected):
        if not self.maybe_expect(expected):
            raise ExpectedCharError(self.location, expected)

    def expect_end(self):
        if not self.at_end():
            raise ExpectedEndError(self.location)

    def take_while(self, predicate):
        """
        Consumes the run of consecutive characters, starting at the current
        position, for which `predicate` holds. Whitespace is not skipped
        inside the run, only after it. Returns the consumed run.
        """
        input_str = self.input_str
        end = self.position
        while end < len(input_str) and predicate(input_str[end]):
            end += 1
        run = input_str[self.position:end]
        if run:
            self.position = self._skipws(end)
        return run
