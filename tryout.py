from numbux.parser import to_postfix
from numbux.runtime import evaluate_postfix, format_result
from numbux.tokenizer import balance_parentheses, normalize, tokenize

for code in [
    "5",
    "−1",
    "1 + 1",
    "-1 + 1",
    "4 + 6 × 3",
    "(4 + 6",
    "(4+6) × 3",
    "7÷6÷2000",
    "5xʸ2",
    "2^3^2",
    "50+5%",
    "√16 + sin(π÷2)",
    "log(1000) - ln(e)",
    "-(2+3",
    "1÷0",
    "1.2.3 + 4",
    "",
]:
    print("=" * 10)
    print(f"code: {code!r}")

    normalized = balance_parentheses(normalize(code))
    print(f"normalized: {normalized!r}")

    tokens = tokenize(normalized)
    print(f"tokens: {' '.join(str(t) for t in tokens)}")

    postfix = to_postfix(tokens)
    print(f"postfix: {' '.join(t.lexeme for t in postfix)}")

    result = evaluate_postfix(postfix)
    print(f"result: {result!r} -> {format_result(result)!r}")
