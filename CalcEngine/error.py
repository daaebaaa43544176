

class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation

class LexError(MathError):
    def __init__(self, message, code="3101", equation=None, token=None, character=None):
        super().__init__(message, code=code, equation=equation)
        self.token = token
        self.character = character

class SyntaxError(MathError):
    pass

class CalculationError(MathError):
    pass

class DivisionByZero(CalculationError):
    pass

class UnknownOperator(CalculationError):
    pass



Error_Dictionary= {

    "3" : "Calculator Error",
    "9" : "Runtime Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification (1 = Lexer, 0 = Parser / Evaluator)
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "3003" : "Division by Zero",
    "3004" : "Invalid Operator: ", # + operator
    "3010" : "Missing '('. ",
    "3011" : "Unexpected Token: ", # + Token
    "3012" : "Invalid equation: ", # + Equation
    "3027" : "Missing Number.",
    "3028" : "Missing Operator.",

    "3101" : "Unexpected character: ", # + partial token

    "9999" : "Unexpected Error: " #+error
}


def describe(error):
    """Return the error code's text followed by the error's own message."""
    category = Error_Dictionary.get(error.code[:1], Error_Dictionary["9"])
    prefix = ERROR_MESSAGES.get(error.code, ERROR_MESSAGES["9999"])
    return f"[{error.code}] {category}: {prefix}{error.message}"
