"""Unit tests for the operator-precedence parser."""
import pytest

from CalcEngine import error as E
from CalcEngine.Expression import Number, Variable, BinOp
from CalcEngine.Parser import parse, get_precedence, create_binary_expression_with_top
from CalcEngine.VariableTable import VariableTable


def test_precedence_table():
    """Unary minus binds tighter than '*' and '/', which bind tighter than '+'."""
    assert get_precedence("+") == 10
    assert get_precedence("*") == 20
    assert get_precedence("/") == 20
    assert get_precedence("-") == 30
    assert get_precedence("=") == 0


def test_parse_single_operand():
    root = parse(["42"])
    assert isinstance(root, Number)
    assert root.value == 42.0

    root = parse(["x"])
    assert isinstance(root, Variable)
    assert root.name == "x"


def test_parse_addition():
    root = parse(["1", "+", "2"])
    assert isinstance(root, BinOp)
    assert root.operator == "+"
    assert root.left.value == 1.0
    assert root.right.value == 2.0


def test_unary_minus_gets_zero_left_operand():
    root = parse(["-", "3"])
    assert root.operator == "-"
    assert isinstance(root.left, Number)
    assert root.left.value == 0.0
    assert root.right.value == 3.0


def test_binary_minus_tree_shape():
    """'2 * 3 - 1' normalizes to '2 * 3 + - 1': the product is reduced before '+'."""
    root = parse(["2", "*", "3", "-", "1"])
    assert root.operator == "+"
    assert root.left.operator == "*"
    assert root.right.operator == "-"
    assert root.right.left.value == 0.0
    assert root.calculate(VariableTable()) == 5.0


def test_multiplication_before_addition():
    root = parse(["1", "+", "2", "*", "3"])
    assert root.operator == "+"
    assert root.right.operator == "*"


def test_parentheses_group():
    root = parse(["(", "1", "+", "2", ")", "*", "3"])
    assert root.operator == "*"
    assert root.left.operator == "+"


def test_missing_closing_parenthesis_is_padded():
    root = parse(["1", "+", "(", "2"])
    assert root.calculate(VariableTable()) == 3.0


def test_equals_parses_but_cannot_be_evaluated():
    """'=' has no precedence entry; the tree is built and evaluation rejects it."""
    root = parse(["x", "=", "3"])
    assert root.operator == "="
    with pytest.raises(E.UnknownOperator):
        root.calculate(VariableTable())


def test_insufficient_operands():
    with pytest.raises(E.SyntaxError, match="insufficient operands"):
        parse(["1", "+"])
    with pytest.raises(E.SyntaxError, match="insufficient operands"):
        parse(["*"])


def test_insufficient_operators():
    with pytest.raises(E.SyntaxError, match="insufficient operators"):
        create_binary_expression_with_top([], [Number(1)])


def test_too_many_operands():
    with pytest.raises(E.SyntaxError, match="expression tree") as excinfo:
        parse(["1", "2"])
    assert excinfo.value.code == "3012"


def test_empty_token_list():
    with pytest.raises(E.SyntaxError):
        parse([])


def test_unexpected_token():
    with pytest.raises(E.SyntaxError) as excinfo:
        parse(["1", "+", "1a2"])
    assert excinfo.value.code == "3011"


def test_unbalanced_closing_parenthesis():
    with pytest.raises(E.SyntaxError):
        parse(["1", ")"])
