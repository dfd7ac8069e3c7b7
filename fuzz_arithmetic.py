import math
import random
import re
import string
import warnings

from calculator import CalculatorError, calculate

warnings.filterwarnings("ignore")


def eval_py(code: str) -> float | str:
    try:
        return eval(code.replace("^", "**"))
    except Exception as e:
        return str(e)


def eval_my(code: str) -> float | str:
    try:
        return float(calculate(code))
    except CalculatorError as e:
        return str(e)


if __name__ == "__main__":
    alphabet = string.digits + ".()+-*/^ "

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)

        if re.findall(r"[*/^]\s*[*/^]", code):
            continue  # avoid generating python-only operators (10**4, 10 // 3)

        if re.search(r"(^|[(+\-*/^])\s*[-+]", code):
            continue  # unary minus and plus are python-only

        if code.count("^") > 1:
            continue  # python's ** is right-associative

        if re.findall(r"\(\s*\)", code):
            continue  # () is an empty tuple in python

        if re.findall(r"\d\s*\(|\)\s*[\d(]", code):
            continue  # python treats 2(3) as a call

        res_py = eval_py(code)
        res_my = eval_my(code)
        if isinstance(res_py, (int, float)) and isinstance(res_my, float) and math.isclose(float(res_py), res_my):
            continue
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue
        if isinstance(res_py, str) and res_py.startswith("leading zeros in decimal integer literals are not permitted"):
            continue
        if isinstance(res_py, complex) or isinstance(res_py, float) and math.isinf(res_py):
            continue
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
