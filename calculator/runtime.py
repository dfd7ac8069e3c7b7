import decimal
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Sequence

from calculator.config import CalculatorConfig
from calculator.tokenizer import OPERATOR_LEXEMES, Group, Literal, Operator, OperatorKind, Token, tokenize, untokenize
from calculator.utils import CalculatorError

logger = logging.getLogger(__name__)


@dataclass
class CalcRuntimeError(CalculatorError):
    errmsg: str

    def __str__(self) -> str:
        return f"[Runtime error] {self.errmsg}"


class MalformedExpressionError(CalcRuntimeError):
    pass


class DivisionByZeroError(CalcRuntimeError):
    pass


class UndefinedOperationError(CalcRuntimeError):
    pass


def calculate(code: str, config: CalculatorConfig | None = None) -> Decimal:
    """Tokenize and evaluate a single expression.

    Arithmetic runs in a local decimal context built from ``config``, so the caller's
    context is left untouched and calls on different threads don't interfere.
    """
    config = config or CalculatorConfig()
    tokens = tokenize(code)
    debug = logger.isEnabledFor(logging.DEBUG)
    if debug:
        logger.debug("Tokens: %s", " ".join(str(t) for t in tokens))
    with decimal.localcontext(config.decimal_context()):
        result = evaluate(tokens)
    if debug:
        logger.debug("%s = %s", untokenize(tokens), result)
    return result


def get_op_precedence(op: OperatorKind) -> int:
    return {
        OperatorKind.POW: 3,
        OperatorKind.MUL: 2,
        OperatorKind.DIV: 2,
        OperatorKind.ADD: 1,
        OperatorKind.SUB: 1,
    }[op]


PRECEDENCE_TIERS = (3, 2, 1)


def evaluate(tokens: Sequence[Token]) -> Decimal:
    operands, operators = _split_operands([_resolve_group(t) for t in tokens])

    for tier in PRECEDENCE_TIERS:
        i = 0
        while i < len(operators):
            if get_op_precedence(operators[i]) == tier:
                op = operators.pop(i)
                left, right = operands[i], operands[i + 1]
                operands[i : i + 2] = [operate(left, op, right)]
                # not advancing: the new operand may be the left side of the next same-tier operator
            else:
                i += 1

    return operands[0]


def _resolve_group(token: Token) -> Token:
    if not isinstance(token, Group):
        return token
    if not token.children:
        raise MalformedExpressionError("Empty parentheses")
    return Literal(value=evaluate(token.children), idx=token.idx)


def _split_operands(tokens: list[Token]) -> tuple[list[Decimal], list[OperatorKind]]:
    """Checks that operands and operators alternate, starting and ending with an operand"""
    if not tokens:
        raise MalformedExpressionError("Empty expression")

    operands: list[Decimal] = []
    operators: list[OperatorKind] = []
    for i, token in enumerate(tokens):
        if i % 2 == 0:
            if not isinstance(token, Literal):
                raise MalformedExpressionError(f"Operand expected, found {_describe(token)} in {untokenize(tokens)!r}")
            operands.append(token.value)
        else:
            if not isinstance(token, Operator):
                raise MalformedExpressionError(f"Operator expected, found {_describe(token)} in {untokenize(tokens)!r}")
            operators.append(token.kind)

    if len(operands) == len(operators):
        raise MalformedExpressionError(f"Right operand expected after {untokenize(tokens)!r}")
    return operands, operators


def _describe(token: Token) -> str:
    return repr(untokenize([token]))


BinaryOperationImpl = Callable[[Decimal, Decimal], Decimal]


def _power(a: Decimal, b: Decimal) -> Decimal:
    if b.is_zero():
        return Decimal(1)
    if a.is_zero() and b < 0:
        raise DivisionByZeroError(f"Zero raised to a negative power: 0^{b}")
    return a**b


binary_operation_impls: dict[OperatorKind, BinaryOperationImpl] = {
    OperatorKind.ADD: lambda a, b: a + b,
    OperatorKind.SUB: lambda a, b: a - b,
    OperatorKind.MUL: lambda a, b: a * b,
    OperatorKind.DIV: lambda a, b: a / b,
    OperatorKind.POW: _power,
}


def operate(a: Decimal, op: OperatorKind, b: Decimal) -> Decimal:
    if op is OperatorKind.DIV and b.is_zero():
        raise DivisionByZeroError(f"Division by zero: {a} / {b}")
    try:
        return binary_operation_impls[op](a, b)
    except decimal.DivisionByZero:
        raise DivisionByZeroError(f"Division by zero: {a} {OPERATOR_LEXEMES[op]} {b}") from None
    except decimal.Overflow:
        raise UndefinedOperationError(f"Result is too large: {a} {OPERATOR_LEXEMES[op]} {b}") from None
    except decimal.InvalidOperation:
        raise UndefinedOperationError(f"Undefined result: {a} {OPERATOR_LEXEMES[op]} {b}") from None
