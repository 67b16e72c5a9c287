import logging
import math
from typing import Callable

logger = logging.getLogger(__name__)

UnaryFunc = Callable[[float], float]

BUILTIN_FUNCS: dict[str, UnaryFunc] = dict()

BUILTIN_CONSTANTS: dict[str, float] = {
    "π": math.pi,
    "e": math.e,
}


def register_builtin_func(name: str):
    """Registers a one-argument function; math domain errors turn into NaN instead of raising"""

    def decorator(fn: UnaryFunc) -> UnaryFunc:
        def decorated(arg: float) -> float:
            try:
                return fn(arg)
            except (ValueError, OverflowError) as e:
                logger.debug("%s(%r) is undefined: %s", name, arg, e)
                return math.nan

        BUILTIN_FUNCS[name] = decorated
        return decorated

    return decorator


@register_builtin_func("sin")
def sin_(arg: float) -> float:
    return math.sin(arg)


@register_builtin_func("cos")
def cos_(arg: float) -> float:
    return math.cos(arg)


@register_builtin_func("tan")
def tan_(arg: float) -> float:
    return math.tan(arg)


@register_builtin_func("log")
def log_(arg: float) -> float:
    return math.log10(arg)


@register_builtin_func("ln")
def ln_(arg: float) -> float:
    return math.log(arg)


@register_builtin_func("sqrt")
def sqrt_(arg: float) -> float:
    return math.sqrt(arg)
