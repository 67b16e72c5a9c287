"""Settings shared by the evaluator, the keypad and the REPL.

Values that make sense to tweak at runtime can be overridden with
environment variables prefixed with NUMBUX_.
"""

import os

LOG_LEVEL = os.getenv("NUMBUX_LOG_LEVEL", "WARNING").upper()

# shown in place of the buffer when the result is infinite or NaN
ERROR_MARKER = "Error"

PERCENT_DIVISOR = 100.0

# display glyph -> evaluator syntax, applied in this order ("%" must stay last)
GLYPH_REPLACEMENTS: list[tuple[str, str]] = [
    ("×", "*"),
    ("÷", "/"),
    ("−", "-"),
    ("√", "sqrt"),
    ("xʸ", "^"),
    ("%", "/100"),
]

DIGIT_KEYS = ("0", "1", "2", "3", "4", "5", "6", "7", "8", "9", ".")

BASIC_KEYS = frozenset(DIGIT_KEYS + ("C", "⌫", "( )", "%", "÷", "×", "−", "+", "+/-", "="))

# "π–e" on the scientific keypad only opens a menu, its entries are the keys
SCIENTIFIC_KEYS = BASIC_KEYS | frozenset(("xʸ", "√", "log", "π", "e", "ln(", "sin(", "cos(", "tan("))

# the scientific keypad writes ASCII operators into the buffer, the basic one writes glyphs
SCIENTIFIC_KEY_MAPPING = {
    "×": "*",
    "÷": "/",
    "−": "-",
    "xʸ": "^",
}
