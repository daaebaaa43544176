# Preprocessor.py
"""""
Sign normalization between the lexer and the parser.

After this pass every '-' is a unary marker: binary minus is rewritten as
'+' followed by '-', repeated signs collapse, and missing closing
parentheses at the end are padded.

Rules for '+' / '-':
    - -            => +
    <operator> +   => <operator>
    <expr-head> +  => <expr-head>
    -              => -
    <operand> -    => <operand> + -
"""""

import logging

from . import error as E
from .Lexer import is_identifier, is_number, is_operator

logger = logging.getLogger(__name__)


def simplify_operators(processed, op):
    """Append the sign `op` to `processed`, folding it into the previous token where possible."""
    if not processed:
        # A leading '+' is redundant
        if op != "+":
            processed.append(op)
        return

    if op == "+":
        if not is_operator(processed[-1]) or processed[-1] == ")":
            processed.append("+")

    elif op == "-":
        if processed[-1] == "-":
            processed.pop()
            simplify_operators(processed, "+")
        elif is_identifier(processed[-1]) or is_number(processed[-1]):
            simplify_operators(processed, "+")
            processed.append("-")
        else:
            processed.append("-")


def balance_parentheses(processed):
    """Check parenthesis depth and close whatever is still open at the end."""
    open_parentheses = 0
    for token in processed:
        if token == "(":
            open_parentheses += 1
        elif token == ")":
            open_parentheses -= 1
            if open_parentheses < 0:
                raise E.SyntaxError("Failed to balance parentheses.", code="3010")

    if open_parentheses:
        logger.debug("Closing %d open parentheses", open_parentheses)
    processed.extend([")"] * open_parentheses)
    return processed


def preprocess(tokens):
    """Return the normalized copy of `tokens`; the input list is left untouched."""
    processed = []

    for token in tokens:
        if token in ("+", "-"):
            simplify_operators(processed, token)
        else:
            processed.append(token)

    balance_parentheses(processed)

    logger.debug("Normalized tokens: %s", processed)
    return processed
