# Lexer.py
"""""
Lexer for the calculation engine.

Turns a raw input string into a flat list of token strings. Tokens carry no
type tag: the predicates below (is_identifier / is_number / is_operator) are
used again by the preprocessor and the parser to classify them.

The scan is a small finite-state automaton:

    BLANK ──letter/_──> IDENTIFIER
      │ ──digit/.────> NUMBER
      │ ──operator───> OPERATOR
      └ ──anything───> UNEXPECTED  (the next character raises LexError)
"""""

import logging
import string
from enum import Enum, auto

from . import error as E

logger = logging.getLogger(__name__)

# Supported operators (kept as simple collections for quick membership checks)
Operations = ["+", "-", "*", "/", "=", "(", ")"]
Operator_Chars = "+-*/()"
Blank_Chars = " \t\n\r"

_Identifier_Prefix = string.ascii_letters + "_"
_Identifier_Chars = string.ascii_letters + string.digits + "_"
_Number_Prefix = string.digits + "."
_Number_Chars = string.ascii_letters + string.digits + "."


class State(Enum):
    SCANNING_IDENTIFIER = auto()
    SCANNING_NUMBER = auto()
    SCANNING_OPERATOR = auto()
    SCANNING_BLANK = auto()
    SCANNING_UNEXPECTED = auto()


# -----------------------------
# Character classes
# -----------------------------

def is_identifier_prefix_char(c):
    return c in _Identifier_Prefix


def is_identifier_char(c):
    return c in _Identifier_Chars


def is_number_prefix_char(c):
    return c in _Number_Prefix


def is_number_char(c):
    return c in _Number_Chars


def is_operator_char(c):
    return c in Operator_Chars


def is_blank_char(c):
    return c in Blank_Chars


# -----------------------------
# Token classification
# -----------------------------

def is_operator(token):
    """Return True if the token is exactly one known operator."""
    return token in Operations


def is_identifier(token):
    """Return True for '_' or a letter followed by letters, digits or '_'."""
    if not token:
        return False
    if not is_identifier_prefix_char(token[0]):
        return False
    return all(is_identifier_char(c) for c in token[1:])


def is_number(token):
    """Return True if the token starts like a number and the whole token is a float literal.

    '1a2' or '1.2.3' are scanned as one token by the lexer; they fail here.
    """
    if not token or not is_number_prefix_char(token[0]):
        return False
    # float() accepts digit separators, a literal never does
    if "_" in token:
        return False
    try:
        float(token)
        return True
    except ValueError:
        return False


# -----------------------------
# Scanner
# -----------------------------

def scan(buffer):
    """Split the buffer into token strings.

    Raises:
        E.LexError: when a character follows one that no state accepts.
    """
    scanning = ""
    tokens = []
    state = State.SCANNING_BLANK

    for ch in buffer:

        if state == State.SCANNING_BLANK:
            if is_identifier_prefix_char(ch):
                state = State.SCANNING_IDENTIFIER
                scanning += ch
            elif is_number_prefix_char(ch):
                state = State.SCANNING_NUMBER
                scanning += ch
            elif is_operator_char(ch):
                state = State.SCANNING_OPERATOR
                scanning += ch
            elif not is_blank_char(ch):
                state = State.SCANNING_UNEXPECTED
                scanning += ch

        elif state == State.SCANNING_IDENTIFIER:
            if is_identifier_char(ch):
                scanning += ch
            elif is_blank_char(ch):
                tokens.append(scanning)
                scanning = ""
                state = State.SCANNING_BLANK
            elif is_operator_char(ch):
                tokens.append(scanning)
                scanning = ch
                state = State.SCANNING_OPERATOR
            else:
                state = State.SCANNING_UNEXPECTED
                scanning += ch

        elif state == State.SCANNING_NUMBER:
            if is_number_char(ch):
                scanning += ch
            elif is_operator_char(ch):
                tokens.append(scanning)
                scanning = ch
                state = State.SCANNING_OPERATOR
            elif is_blank_char(ch):
                tokens.append(scanning)
                scanning = ""
                state = State.SCANNING_BLANK
            else:
                state = State.SCANNING_UNEXPECTED
                scanning += ch

        elif state == State.SCANNING_OPERATOR:
            if is_operator_char(ch):
                # Only single-character operators exist, so this always flushes
                if not is_operator(scanning + ch):
                    tokens.append(scanning)
                    scanning = ""
                scanning += ch
            elif is_number_prefix_char(ch):
                tokens.append(scanning)
                scanning = ch
                state = State.SCANNING_NUMBER
            elif is_identifier_prefix_char(ch):
                tokens.append(scanning)
                scanning = ch
                state = State.SCANNING_IDENTIFIER
            elif is_blank_char(ch):
                tokens.append(scanning)
                scanning = ""
                state = State.SCANNING_BLANK
            else:
                state = State.SCANNING_UNEXPECTED
                scanning += ch

        else:
            raise E.LexError(
                f"Last token being scanned: {scanning}",
                equation=buffer,
                token=scanning,
                character=ch,
            )

    if scanning:
        tokens.append(scanning)

    logger.debug("Tokens: %s", tokens)
    return tokens
