# Parser.py
"""""
Operator-precedence parser (two stacks: operands and operators).

The token list is normalized by Preprocessor.preprocess first, so every '-'
reaching the parser is a unary marker. It reduces to BinOp(Number(0), '-', x)
and has the highest precedence of all operators:

    '+'        10
    '*', '/'   20
    '-'        30

Unbalanced input is handled leniently: a ')' without a matching '(' and a
'(' left on the stack at the end both stop the reduction silently.
"""""

import logging

from . import error as E
from .Expression import Number, Variable, BinOp
from .Lexer import is_identifier, is_number, is_operator
from .Preprocessor import preprocess

logger = logging.getLogger(__name__)

Precedence = {
    "+": 10,
    "*": 20,
    "/": 20,
    "-": 30,
}


def get_precedence(op):
    """Return the precedence of `op`; operators outside the table rank 0."""
    return Precedence.get(op, 0)


def create_binary_expression_with_top(operator_stack, expression_stack):
    """Pop one operator and its operand(s) and push the combined BinOp."""
    if not operator_stack:
        raise E.SyntaxError("insufficient operators", code="3028")

    top = operator_stack.pop()

    if not expression_stack:
        raise E.SyntaxError(f"insufficient operands for '{top}'", code="3027")
    rhs = expression_stack.pop()

    if top == "-":
        lhs = Number(0)
    else:
        if not expression_stack:
            raise E.SyntaxError(f"insufficient operands for '{top}'", code="3027")
        lhs = expression_stack.pop()

    expression_stack.append(BinOp(lhs, top, rhs))


def _build(tokens, expression_stack):
    operator_stack = []

    for token in tokens:
        if is_number(token):
            expression_stack.append(Number(token))

        elif is_identifier(token):
            expression_stack.append(Variable(token))

        elif is_operator(token):
            if token == "(":
                operator_stack.append(token)

            elif token == ")":
                while operator_stack:
                    if operator_stack[-1] == "(":
                        operator_stack.pop()
                        break
                    create_binary_expression_with_top(operator_stack, expression_stack)

            else:
                token_precedence = get_precedence(token)
                while operator_stack:
                    if operator_stack[-1] == "(" or token_precedence > get_precedence(operator_stack[-1]):
                        break
                    create_binary_expression_with_top(operator_stack, expression_stack)
                operator_stack.append(token)

        else:
            raise E.SyntaxError(f"{token}", code="3011")

    while operator_stack:
        if operator_stack[-1] == "(":
            break
        create_binary_expression_with_top(operator_stack, expression_stack)

    if len(expression_stack) != 1:
        raise E.SyntaxError(
            f"Failed to create expression tree ({len(expression_stack)} operands left)",
            code="3012",
        )
    return expression_stack[0]


def parse(tokens):
    """Normalize `tokens` and build the expression tree.

    Returns:
        The root node of the tree.
    Raises:
        E.SyntaxError: on unbalanced ')' , unknown tokens or operand/operator mismatch.
    """
    simplified_tokens = preprocess(tokens)
    expression_stack = []
    try:
        root = _build(simplified_tokens, expression_stack)
    except E.MathError:
        # Drop partially built subtrees before the error leaves the parser
        expression_stack.clear()
        raise

    logger.debug("Final tree: %s", root)
    return root
