import enum
import logging
import re
from dataclasses import dataclass

from numbux import config
from numbux.utils import PrintableEnum, count_unclosed

logger = logging.getLogger(__name__)


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    OPERATOR = enum.auto()
    UNARY_MINUS = enum.auto()
    FUNCTION = enum.auto()
    CONSTANT = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()


@dataclass
class Token:
    type: TokenType
    lexeme: str

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


FUNCTIONS = frozenset(["sin", "cos", "tan", "log", "ln", "sqrt"])
CONSTANTS = frozenset(["π", "e"])
OPERATORS = frozenset(["+", "-", "*", "/", "^", "%"])

UNARY_MINUS_LEXEME = "u-"

NUMBER_LITERAL_PATT = re.compile(r"\d+\.?\d*|\.\d+", flags=re.ASCII)


def normalize(text: str) -> str:
    for glyph, replacement in config.GLYPH_REPLACEMENTS:
        text = text.replace(glyph, replacement)
    return text.strip()


def balance_parentheses(text: str) -> str:
    unclosed = count_unclosed(text)
    return text + ")" * unclosed if unclosed > 0 else text


def _is_valid_in_number(s: str) -> bool:
    return s.isdigit() or s == "."


def _is_unary_minus(code: str, i: int) -> bool:
    return code[i] == "-" and (i == 0 or code[i - 1] == "(")


def tokenize(code: str) -> list[Token]:
    """Splits normalized calculator input into tokens.

    Never fails: malformed number literals, unknown words and stray characters
    are dropped, the keypad can produce almost anything.
    """
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        if _is_valid_in_number(code[i]):
            number_end_idx = i + 1
            while number_end_idx < len(code) and _is_valid_in_number(code[number_end_idx]):
                number_end_idx += 1
            lexeme = code[i:number_end_idx]
            if NUMBER_LITERAL_PATT.fullmatch(lexeme):
                tokens.append(Token(type=TokenType.NUMBER, lexeme=lexeme))
            else:
                logger.debug("Dropping malformed number %r at %d", lexeme, i)
            i = number_end_idx - 1  # to account for += 1 later
        elif code[i].isalpha():
            word_end_idx = i + 1
            while word_end_idx < len(code) and code[word_end_idx].isalpha():
                word_end_idx += 1
            word = code[i:word_end_idx]
            if word in CONSTANTS:
                tokens.append(Token(type=TokenType.CONSTANT, lexeme=word))
            elif word in FUNCTIONS:
                tokens.append(Token(type=TokenType.FUNCTION, lexeme=word))
            else:
                logger.debug("Dropping unknown word %r at %d", word, i)
            i = word_end_idx - 1  # to account for += 1 later
        elif _is_unary_minus(code, i):
            tokens.append(Token(type=TokenType.UNARY_MINUS, lexeme=UNARY_MINUS_LEXEME))
        elif code[i] in OPERATORS:
            tokens.append(Token(type=TokenType.OPERATOR, lexeme=code[i]))
        elif code[i] == "(":
            tokens.append(Token(type=TokenType.BRACKET_OPEN, lexeme="("))
        elif code[i] == ")":
            tokens.append(Token(type=TokenType.BRACKET_CLOSE, lexeme=")"))
        elif not code[i].isspace():
            logger.debug("Skipping unexpected character %r at %d", code[i], i)
        i += 1

    return tokens
