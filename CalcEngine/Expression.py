# Expression.py
"""""
Expression tree node types.

Every node answers calculate(var_table) -> float. Evaluation is a plain
post-order walk: a BinOp evaluates its left subtree, then its right subtree,
then applies its operator.
"""""

from . import error as E


class Number:
    """Tree node for a numeric literal."""
    def __init__(self, value=0.0):
        self.value = float(value)

    def calculate(self, var_table):
        return self.value

    def __repr__(self):
        return f"Number({self.value!r})"


class Variable:
    """Tree node referring to an identifier in the variable table."""
    def __init__(self, name):
        self.name = name

    def calculate(self, var_table):
        """Unset identifiers read as 0, never as an error."""
        return var_table.get(self.name)

    def __repr__(self):
        return f"Variable('{self.name}')"


class BinOp:
    """Tree node for a binary operation: left <operator> right.

    The node owns both subtrees; they are never shared between nodes.
    """
    def __init__(self, left, operator, right):
        if left is None or right is None:
            raise E.SyntaxError(f"Missing operand for '{operator}'", code="3027")
        self.left = left
        self.operator = operator
        self.right = right

    def calculate(self, var_table):
        """Evaluate both subtrees and apply the binary operator."""
        left_value = self.left.calculate(var_table)
        right_value = self.right.calculate(var_table)

        if self.operator == '+':
            return left_value + right_value
        elif self.operator == '-':
            return left_value - right_value
        elif self.operator == '*':
            return left_value * right_value
        elif self.operator == '/':
            if right_value == 0:
                raise E.DivisionByZero("Divisors cannot be zero.", code="3003")
            return left_value / right_value
        else:
            raise E.UnknownOperator(f"{self.operator}", code="3004")

    def __repr__(self):
        return f"BinOp({self.operator!r}, left={self.left}, right={self.right})"
