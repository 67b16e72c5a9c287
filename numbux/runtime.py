import logging
import math
from decimal import Decimal
from typing import Callable

from numbux import config
from numbux.builtins import BUILTIN_CONSTANTS, BUILTIN_FUNCS
from numbux.parser import to_postfix
from numbux.tokenizer import Token, TokenType, balance_parentheses, normalize, tokenize

logger = logging.getLogger(__name__)

BinaryOperationImpl = Callable[[float, float], float]
UnaryOperationImpl = Callable[[float], float]


def evaluate(display_text: str) -> str:
    """Evaluates calculator display contents into the text that replaces them.

    Returns either a formatted number or the error marker, never raises.
    """
    code = balance_parentheses(normalize(display_text))
    postfix = to_postfix(tokenize(code))
    return format_result(evaluate_postfix(postfix))


def evaluate_postfix(tokens: list[Token]) -> float:
    stack: list[float] = []
    for token in tokens:
        if token.type is TokenType.NUMBER:
            stack.append(float(token.lexeme))
        elif token.type is TokenType.CONSTANT:
            stack.append(BUILTIN_CONSTANTS[token.lexeme])
        elif token.type is TokenType.UNARY_MINUS:
            eval_unary_operation(stack, impl=negate, op_name="Negation")
        elif token.type is TokenType.FUNCTION:
            eval_unary_operation(stack, impl=BUILTIN_FUNCS[token.lexeme], op_name=token.lexeme)
        elif token.type is TokenType.OPERATOR and token.lexeme in unary_impls:
            eval_unary_operation(stack, impl=unary_impls[token.lexeme], op_name=token.lexeme)
        elif token.type is TokenType.OPERATOR:
            eval_binary_operation(stack, impl=binary_impls[token.lexeme], op_name=token.lexeme)
        else:
            logger.debug("Ignoring %s in postfix sequence", token)

    if not stack:
        return 0.0
    return stack[-1]


def eval_binary_operation(stack: list[float], impl: BinaryOperationImpl, op_name: str) -> None:
    if len(stack) < 2:
        logger.debug("%s skipped, not enough operands: %s", op_name, stack)
        return
    b = stack.pop()
    a = stack.pop()
    stack.append(impl(a, b))


def eval_unary_operation(stack: list[float], impl: UnaryOperationImpl, op_name: str) -> None:
    if not stack:
        logger.debug("%s skipped, no operand", op_name)
        return
    stack.append(impl(stack.pop()))


def negate(a: float) -> float:
    return -a


def divide(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def power(a: float, b: float) -> float:
    # math.pow raises where IEEE pow returns inf or nan
    try:
        return math.pow(a, b)
    except OverflowError:
        return math.inf
    except ValueError:
        return math.nan


binary_impls: dict[str, BinaryOperationImpl] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": divide,
    "^": power,
}

unary_impls: dict[str, UnaryOperationImpl] = {
    "%": lambda a: a / config.PERCENT_DIVISOR,
}


def format_result(value: float) -> str:
    if math.isinf(value) or math.isnan(value):
        return config.ERROR_MARKER
    if value.is_integer():
        return "%.0f" % (value + 0.0)  # + 0.0 turns -0.0 into 0.0
    text = repr(value)
    if "e" in text:
        # keep the result re-enterable on the keypad, where "e" is a constant
        text = format(Decimal(text), "f")
    return text
