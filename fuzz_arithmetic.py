import math
import random
import re
import string
import warnings

from numbux.runtime import evaluate

warnings.filterwarnings("ignore")


def eval_py(code: str) -> float | str:
    try:
        return eval(code)
    except ZeroDivisionError:
        return "Error"
    except Exception as e:
        return str(e)


def eval_my(code: str) -> float | str:
    res = evaluate(code)
    try:
        return float(res)
    except ValueError:
        return res


if __name__ == "__main__":
    alphabet = string.digits + ".()+-*/"

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)

        if re.findall(r"\*\*", code):
            continue  # avoid generating powers (10**4)

        if re.findall(r"//", code):
            continue  # avoid generating int devision (10 // 3)

        if re.findall(r"^\+|[-+*/(]\+|[-+*/]-", code):
            continue  # unary minus only after "(" or at the start, no unary plus

        res_py = eval_py(code)
        if not isinstance(res_py, (int, float, str)) or (isinstance(res_py, str) and res_py != "Error"):
            continue  # the calculator is lenient where python fails or yields a tuple

        res_my = eval_my(code)
        if isinstance(res_py, (int, float)) and isinstance(res_my, float) and math.isclose(float(res_py), res_my):
            continue
        if res_py == res_my:
            continue
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
