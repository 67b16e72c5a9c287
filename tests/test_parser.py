import pytest

from numbux.parser import to_postfix
from numbux.tokenizer import tokenize


def postfix_of(code: str) -> str:
    return " ".join(t.lexeme for t in to_postfix(tokenize(code)))


@pytest.mark.parametrize(
    "code, expected_postfix",
    [
        pytest.param("1+2*3", "1 2 3 * +"),
        pytest.param("(1+2)*3", "1 2 + 3 *"),
        pytest.param("1-2-3", "1 2 - 3 -"),
        pytest.param("8/4/2", "8 4 / 2 /"),
        pytest.param("2^3^2", "2 3 2 ^ ^"),
        pytest.param("2*3^2", "2 3 2 ^ *"),
        pytest.param("-5+3", "5 u- 3 +"),
        pytest.param("-2^2", "2 u- 2 ^"),
        pytest.param("2*(-3)", "2 3 u- *"),
        pytest.param("sqrt(9)+1", "9 sqrt 1 +"),
        pytest.param("sin(π/2)", "π 2 / sin"),
        pytest.param("log(ln(e))", "e ln log"),
        pytest.param("sqrt16", "16 sqrt"),
        pytest.param("2+π", "2 π +"),
        pytest.param("3+50%", "3 50 % +"),
        # unbalanced brackets never make it into the output
        pytest.param("(1+2", "1 2 +"),
        pytest.param("1+2)", "1 2 +"),
        pytest.param(")(", ""),
        pytest.param("", ""),
    ],
)
def test_to_postfix(code: str, expected_postfix: str) -> None:
    assert postfix_of(code) == expected_postfix
