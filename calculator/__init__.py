from calculator.config import CalculatorConfig
from calculator.runtime import (
    CalcRuntimeError,
    DivisionByZeroError,
    MalformedExpressionError,
    UndefinedOperationError,
    calculate,
    evaluate,
)
from calculator.tokenizer import (
    InvalidNumberError,
    NestingTooDeepError,
    TokenizerError,
    UnbalancedParenthesesError,
    UnexpectedCharacterError,
    tokenize,
    untokenize,
)
from calculator.utils import CalculatorError, format_number

__all__ = [
    "CalcRuntimeError",
    "CalculatorConfig",
    "CalculatorError",
    "DivisionByZeroError",
    "InvalidNumberError",
    "MalformedExpressionError",
    "NestingTooDeepError",
    "TokenizerError",
    "UnbalancedParenthesesError",
    "UndefinedOperationError",
    "UnexpectedCharacterError",
    "calculate",
    "evaluate",
    "format_number",
    "tokenize",
    "untokenize",
]
