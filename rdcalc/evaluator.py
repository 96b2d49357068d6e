import logging
import math
from rdcalc.common import position_context
from rdcalc.cursor import Cursor, WHITESPACE
from rdcalc.exceptions import UnexpectedCharError
from rdcalc.termui import h_print, a_print


logger = logging.getLogger(__name__)

DIGITS = '0123456789'


class ExpressionEvaluator(object):
    """Evaluates an arithmetic expression while parsing it by recursive
    descent. No tree is built, the value is accumulated as the recursion
    unwinds. The grammar is:

        expression := sum
        sum        := product { ('+' | '-') product }
        product    := term { ('*' | '/') term }
        term       := ('+' | '-') term | digit+ | '(' sum ')'

    The result is available as `result` or by converting the evaluator to
    float. Empty or all-whitespace input evaluates to 0.0.
    """
    def __init__(self, input_str, ws=WHITESPACE, skip_ws=True, file_name=None,
                 first_line=1, debug=False, debug_colors=False):
        self.input_str = input_str
        self.debug = debug
        self.debug_colors = debug_colors

        self.cursor = Cursor(input_str, ws=ws, skip_ws=skip_ws,
                             file_name=file_name, first_line=first_line)
        self.result = .0

        if debug:
            a_print("*** EVALUATION STARTED", colors=debug_colors)

        if not self.cursor.at_end():
            self.result = self._parse_sum(0)
            self.cursor.expect_end()

        if debug:
            a_print("*** EVALUATION FINISHED", colors=debug_colors)
            h_print("Result:", self.result, colors=debug_colors)

        logger.debug("Evaluated %r to %s", input_str, self.result)

    def __float__(self):
        return self.result

    def _trace(self, rule, depth):
        if self.debug:
            cursor = self.cursor
            h_print(f"{rule}:", position_context(cursor.input_str,
                                                 cursor.position),
                    level=depth + 1, colors=self.debug_colors)

    def _parse_sum(self, depth):
        self._trace("sum", depth)
        cursor = self.cursor
        result = self._parse_product(depth + 1)
        while not cursor.at_end():
            if cursor.maybe_expect('+'):
                result += self._parse_product(depth + 1)
            elif cursor.maybe_expect('-'):
                result -= self._parse_product(depth + 1)
            else:
                break
        return result

    def _parse_product(self, depth):
        self._trace("product", depth)
        cursor = self.cursor
        result = self._parse_term(depth + 1)
        while not cursor.at_end():
            if cursor.maybe_expect('*'):
                result *= self._parse_term(depth + 1)
            elif cursor.maybe_expect('/'):
                result = divide(result, self._parse_term(depth + 1))
            else:
                break
        return result

    def _parse_term(self, depth):
        self._trace("term", depth)
        cursor = self.cursor
        char = cursor.current()

        if char in '-+':
            negative = cursor.maybe_expect('-')
            if not negative:
                cursor.maybe_expect('+')
            value = self._parse_term(depth + 1)
            return -value if negative else value

        elif char in DIGITS:
            return literal_to_float(cursor.take_while(DIGITS.__contains__))

        elif cursor.maybe_expect('('):
            value = self._parse_sum(depth + 1)
            cursor.expect(')')
            return value

        raise UnexpectedCharError(cursor.location, char)


def literal_to_float(literal):
    value = float(literal)
    if math.isinf(value):
        logger.warning("Literal %s... does not fit in a float, "
                       "using infinity", literal[:20])
    return value


def divide(dividend, divisor):
    """
    Float division where a zero divisor gives a signed infinity, or nan for
    0/0 and nan/0, instead of raising ZeroDivisionError.
    """
    if divisor == 0:
        if dividend == 0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1., divisor)
    return dividend / divisor


def evaluate(input_str, **kwargs):
    """
    Evaluates the given expression string and returns the float result.
    Keyword arguments are passed to :class:`ExpressionEvaluator`.
    """
    return ExpressionEvaluator(input_str, **kwargs).result
