import enum
from decimal import Decimal


class CalculatorError(Exception):
    """Base class for everything ``calculate`` may raise on bad input"""


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def format_number(value: Decimal) -> str:
    # 1E+2 => 100, 0.30 => 0.3
    normalized = value.normalize()
    if normalized.is_zero():
        return "0"
    return f"{normalized:f}"
