import enum
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from calculator.utils import CalculatorError, PrintableEnum


@dataclass
class TokenizerError(CalculatorError):
    errmsg: str
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        print_start_idx = max(0, self.error_char_idx - 10)
        print_ellipsis_pre = print_start_idx > 0
        print_end_idx = min(len(self.code), self.error_char_idx + 10)
        print_ellipsis_post = print_end_idx < len(self.code)
        return "\n".join(
            [
                f"[Tokenizer error] {self.errmsg}",
                (
                    ("..." if print_ellipsis_pre else "")
                    + f"{self.code[print_start_idx:print_end_idx]}"
                    + ("..." if print_ellipsis_post else "")
                ),
                " " * (self.error_char_idx - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
            ]
        )


class UnexpectedCharacterError(TokenizerError):
    pass


class InvalidNumberError(TokenizerError):
    pass


class UnbalancedParenthesesError(TokenizerError):
    pass


class NestingTooDeepError(TokenizerError):
    pass


class OperatorKind(PrintableEnum):
    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()
    POW = enum.auto()


OPERATOR_SYMBOLS = {
    "+": OperatorKind.ADD,
    "-": OperatorKind.SUB,
    "*": OperatorKind.MUL,
    "/": OperatorKind.DIV,
    "^": OperatorKind.POW,
}

OPERATOR_LEXEMES = {kind: symbol for symbol, kind in OPERATOR_SYMBOLS.items()}


@dataclass
class Literal:
    value: Decimal
    idx: int = -1

    def __str__(self) -> str:
        return f"<NUMBER>{self.value}"


@dataclass
class Operator:
    kind: OperatorKind
    idx: int = -1

    def __str__(self) -> str:
        return f"<{self.kind}>{OPERATOR_LEXEMES[self.kind]}"


@dataclass
class Group:
    children: list["Token"]
    idx: int = -1

    def __str__(self) -> str:
        return "<GROUP>(" + " ".join(str(t) for t in self.children) + ")"


Token = Literal | Operator | Group

_NUMBER_CHARS = "0123456789."

# bounds the recursion depth of evaluate() and untokenize()
MAX_NESTING_DEPTH = 100


def tokenize(code: str) -> list[Token]:
    # one token list per open nesting level, innermost last
    levels: list[list[Token]] = [[]]
    open_bracket_idxs: list[int] = []
    number_start_idx: int | None = None

    def flush_number(end_idx: int) -> None:
        nonlocal number_start_idx
        if number_start_idx is None:
            return
        lexeme = code[number_start_idx:end_idx]
        value: Decimal | None
        try:
            value = Decimal(lexeme)
        except InvalidOperation:
            value = None
        # a context without the InvalidOperation trap returns NaN instead of raising
        if value is None or value.is_nan():
            raise InvalidNumberError(f"Invalid number: {lexeme!r}", code=code, error_char_idx=number_start_idx)
        levels[-1].append(Literal(value=value, idx=number_start_idx))
        number_start_idx = None

    for i, char in enumerate(code):
        if char in _NUMBER_CHARS:
            if number_start_idx is None:
                number_start_idx = i
            continue

        flush_number(i)
        if char in OPERATOR_SYMBOLS:
            levels[-1].append(Operator(kind=OPERATOR_SYMBOLS[char], idx=i))
        elif char == "(":
            if len(open_bracket_idxs) >= MAX_NESTING_DEPTH:
                raise NestingTooDeepError(
                    f"Parentheses nested deeper than {MAX_NESTING_DEPTH} levels", code=code, error_char_idx=i
                )
            levels.append([])
            open_bracket_idxs.append(i)
        elif char == ")":
            if not open_bracket_idxs:
                raise UnbalancedParenthesesError("Unmatched ')'", code=code, error_char_idx=i)
            children = levels.pop()
            levels[-1].append(Group(children=children, idx=open_bracket_idxs.pop()))
        elif char.isspace():
            pass
        else:
            raise UnexpectedCharacterError(f"Unexpected character: {char!r}", code=code, error_char_idx=i)

    flush_number(len(code))
    if open_bracket_idxs:
        raise UnbalancedParenthesesError("Expected ')'", code=code, error_char_idx=open_bracket_idxs[-1])

    return levels[0]


def untokenize(tokens: list[Token]) -> str:
    parts: list[str] = []
    for t in tokens:
        if isinstance(t, Literal):
            parts.append(str(t.value))
        elif isinstance(t, Operator):
            parts.append(OPERATOR_LEXEMES[t.kind])
        else:
            parts.append("(" + untokenize(t.children) + ")")
    result = " ".join(parts)

    # 4 ^ 5 => 4^5
    result = re.sub(r"\s+\^\s+", "^", result)
    return result
