import pytest

from numbux.tokenizer import Token, TokenType, balance_parentheses, normalize, tokenize


@pytest.mark.parametrize(
    "text, expected",
    [
        pytest.param("6×7", "6*7"),
        pytest.param("8÷2", "8/2"),
        pytest.param("9−1", "9-1"),
        pytest.param("√9", "sqrt9"),
        pytest.param("2xʸ3", "2^3"),
        pytest.param("5%", "5/100"),
        pytest.param(" 1 + 2 \n", "1 + 2"),
        pytest.param("−√(4)×50%", "-sqrt(4)*50/100"),
    ],
)
def test_normalize(text: str, expected: str) -> None:
    assert normalize(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        pytest.param("(1+2", "(1+2)"),
        pytest.param("((1", "((1))"),
        pytest.param("(1)", "(1)"),
        pytest.param("1)", "1)"),
        pytest.param("", ""),
    ],
)
def test_balance_parentheses(text: str, expected: str) -> None:
    assert balance_parentheses(text) == expected


@pytest.mark.parametrize(
    "code, expected_tokens",
    [
        pytest.param(
            "12.5+3",
            [
                Token(TokenType.NUMBER, "12.5"),
                Token(TokenType.OPERATOR, "+"),
                Token(TokenType.NUMBER, "3"),
            ],
        ),
        pytest.param(
            "-2-1",
            [
                Token(TokenType.UNARY_MINUS, "u-"),
                Token(TokenType.NUMBER, "2"),
                Token(TokenType.OPERATOR, "-"),
                Token(TokenType.NUMBER, "1"),
            ],
        ),
        pytest.param(
            "(-π)",
            [
                Token(TokenType.BRACKET_OPEN, "("),
                Token(TokenType.UNARY_MINUS, "u-"),
                Token(TokenType.CONSTANT, "π"),
                Token(TokenType.BRACKET_CLOSE, ")"),
            ],
        ),
        pytest.param(
            "ln(e)",
            [
                Token(TokenType.FUNCTION, "ln"),
                Token(TokenType.BRACKET_OPEN, "("),
                Token(TokenType.CONSTANT, "e"),
                Token(TokenType.BRACKET_CLOSE, ")"),
            ],
        ),
        pytest.param(
            "( -1)",
            [
                Token(TokenType.BRACKET_OPEN, "("),
                Token(TokenType.OPERATOR, "-"),
                Token(TokenType.NUMBER, "1"),
                Token(TokenType.BRACKET_CLOSE, ")"),
            ],
        ),
        pytest.param("1.2.3", []),
        pytest.param(".", []),
        pytest.param("foo", []),
        pytest.param("#@!", []),
        pytest.param("  ", []),
        pytest.param("²", []),
    ],
)
def test_tokenize(code: str, expected_tokens: list[Token]) -> None:
    assert tokenize(code) == expected_tokens


def test_token_str() -> None:
    assert str(Token(TokenType.FUNCTION, "sqrt")) == "<FUNCTION>sqrt"
