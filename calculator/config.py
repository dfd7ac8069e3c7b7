import decimal
from dataclasses import dataclass


@dataclass(frozen=True)
class CalculatorConfig:
    precision: int = 28
    rounding: str = decimal.ROUND_HALF_EVEN

    def __post_init__(self) -> None:
        if self.precision < 1:
            raise ValueError(f"Precision must be a positive number of digits, got {self.precision}")

    def decimal_context(self) -> decimal.Context:
        return decimal.Context(
            prec=self.precision,
            rounding=self.rounding,
            traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
        )
