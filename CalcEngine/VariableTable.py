# VariableTable.py


class VariableTable:
    """Identifier -> float mapping consulted while evaluating an expression tree.

    Reading an identifier that was never set yields 0.
    """

    def __init__(self):
        self._table = {}

    def reset(self):
        self._table.clear()

    def set(self, identifier, value):
        self._table[identifier] = float(value)

    def get(self, identifier):
        return self._table.get(identifier, 0.0)

    def items(self):
        return sorted(self._table.items())

    def __contains__(self, identifier):
        return identifier in self._table

    def __len__(self):
        return len(self._table)

    def __repr__(self):
        return f"VariableTable({self._table!r})"
