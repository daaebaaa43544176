# MathEngine.py
"""""
Calculation session for the engine.

Pipeline
--------
1) Lexer: raw input string -> flat list of token strings.
2) Preprocessor: sign normalization and parenthesis padding.
3) Parser: operator-precedence parse into an expression tree.
4) Evaluator: post-order walk of the tree against the session's VariableTable.
5) Formatter: fixed-precision string with trailing zeros removed.

Calculation.calculate never raises: every failure is logged and the
result becomes "Error".
"""""

import logging

from . import config_manager as config_manager
from . import error as E
from . import Lexer
from . import Parser
from .VariableTable import VariableTable

logger = logging.getLogger(__name__)

ERROR_RESULT = "Error"


# -----------------------------
# Result formatting
# -----------------------------

def cleanup(ergebnis, decimal_places=None):
    """Render a float with fixed precision, then drop trailing zeros and a trailing '.'.

    decimal_places defaults to the "decimal_places" setting.
    """
    if decimal_places is None:
        decimal_places = config_manager.load_decimal_places()
    decimal_places = max(int(decimal_places), 0)

    ausgabe_string = f"{ergebnis:.{decimal_places}f}"

    if '.' in ausgabe_string:
        ausgabe_string = ausgabe_string.rstrip('0')
        if ausgabe_string.endswith('.'):
            ausgabe_string = ausgabe_string[:-1]

    if not ausgabe_string:
        ausgabe_string = "0"
    return ausgabe_string


# -----------------------------
# Session
# -----------------------------

class Calculation:
    """One engine instance: owns the variable table and the last result."""

    def __init__(self, decimal_places=None):
        self.variables = VariableTable()
        # Settings are read once per session, not per calculation
        if decimal_places is None:
            decimal_places = config_manager.load_decimal_places()
        self.decimal_places = decimal_places
        self.result = ""

    def evaluate(self, expression):
        """Run the pipeline and return the raw float. Errors propagate."""
        tokens = Lexer.scan(expression)
        if not tokens:
            return 0.0
        finaler_baum = Parser.parse(tokens)
        return finaler_baum.calculate(self.variables)

    def calculate(self, expression):
        """Main API: scan -> parse -> evaluate -> format. Returns "Error" on any failure."""
        try:
            ergebnis = self.evaluate(expression)
            self.result = cleanup(ergebnis, self.decimal_places)

        # Known engine errors: attach the source expression
        except E.MathError as e:
            e.equation = expression
            logger.warning("%s (expression: %r)", E.describe(e), expression)
            self.result = ERROR_RESULT

        # Anything else (e.g. RecursionError on very deep trees)
        except Exception as e:
            error = E.MathError(message=str(e).strip() or type(e).__name__, code="9999", equation=expression)
            logger.warning("%s (expression: %r)", E.describe(error), expression)
            self.result = ERROR_RESULT

        return self.result


def create_session(decimal_places=None):
    return Calculation(decimal_places=decimal_places)
