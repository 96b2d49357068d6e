# -*- coding: utf-8 -*-
# flake8: NOQA
from rdcalc.evaluator import ExpressionEvaluator, evaluate
from rdcalc.cursor import Cursor
from rdcalc.common import Location, pos_to_line_col
from rdcalc.exceptions import RdcalcError, ExpectedCharError, \
    UnexpectedCharError, UnexpectedEndError, ExpectedEndError

from .version import __version__
