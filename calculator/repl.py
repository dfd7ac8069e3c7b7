import argparse
import logging
import sys
from typing import Sequence

from calculator.config import CalculatorConfig
from calculator.runtime import calculate
from calculator.utils import CalculatorError, format_number

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="calculator", description="Evaluate arithmetic expressions with decimal precision")
    ap.add_argument("expression", nargs="?", help="expression to evaluate; starts an interactive prompt if omitted")
    ap.add_argument("--precision", type=int, default=28, help="significant decimal digits (default: %(default)s)")
    ap.add_argument("-v", "--verbose", action="store_true", help="log tokens and intermediate results")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = CalculatorConfig(precision=args.precision)
    except ValueError as e:
        print(e, file=sys.stderr)
        return 2

    if args.expression is not None:
        try:
            print(format_number(calculate(args.expression, config)))
        except CalculatorError as e:
            print(e, file=sys.stderr)
            return 1
        return 0

    logger.debug("Starting interactive prompt, precision=%d", config.precision)
    while True:
        try:
            code = input("> ")
        except EOFError:
            break
        if not code.strip():
            break

        try:
            result = calculate(code, config)
        except CalculatorError as e:
            print(e)
            continue

        print(format_number(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
