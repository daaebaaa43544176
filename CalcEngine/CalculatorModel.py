# CalculatorModel.py
"""""
Host-side model of the calculator display.

A display string is combined with one key operation:
    "="   evaluate the display (after mapping display symbols to operators)
    "AC"  clear the display
    "←"   remove the last character
Anything else, or an empty outcome, shows "0".
"""""

import logging

from . import config_manager as config_manager
from .MathEngine import create_session

logger = logging.getLogger(__name__)

EMPTY_DISPLAY = "0"


def trim_last_character(expression):
    return expression[:-1]


class CalculatorModel:

    def __init__(self, session=None, replacements=None):
        self.session = session if session is not None else create_session()
        if replacements is None:
            replacements = config_manager.load_setting_value("symbol_replacements") or {}
        self.replacements = dict(replacements)

        self.operations = {
            "=": self.calculate,
            "AC": lambda _: EMPTY_DISPLAY,
            "←": trim_last_character,
        }

    def translate(self, expression):
        """Map display symbols (×, ÷, −) to the operators the engine understands."""
        translated_expression = expression
        for symbol, operator in self.replacements.items():
            translated_expression = translated_expression.replace(symbol, operator)
        return translated_expression

    def calculate(self, expression):
        return self.session.calculate(self.translate(expression))

    def operate(self, expression, operation):
        op = self.operations.get(operation)
        if op is None:
            logger.debug("Unknown operation %r", operation)
            return EMPTY_DISPLAY

        result = op(expression)
        if result != "":
            return result
        return EMPTY_DISPLAY
