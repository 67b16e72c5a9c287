import enum
from dataclasses import dataclass

from numbux import config
from numbux.runtime import evaluate
from numbux.utils import PrintableEnum, count_unclosed


class KeypadMode(PrintableEnum):
    BASIC = enum.auto()
    SCIENTIFIC = enum.auto()


@dataclass
class KeypadError(Exception):
    errmsg: str
    label: str
    mode: KeypadMode

    def __str__(self) -> str:
        return f"[Keypad error] {self.errmsg}: {self.label!r} ({self.mode} keypad)"


@dataclass
class Keypad:
    """Calculator buffer driven by key presses.

    Each calculator screen owns one instance; ``text`` is what the display shows.
    """

    mode: KeypadMode = KeypadMode.SCIENTIFIC
    text: str = ""

    @property
    def keys(self) -> frozenset[str]:
        return config.SCIENTIFIC_KEYS if self.mode is KeypadMode.SCIENTIFIC else config.BASIC_KEYS

    def press(self, label: str) -> str:
        if label not in self.keys:
            raise KeypadError("Unknown key", label=label, mode=self.mode)

        if label == "C":
            self.clear()
        elif label == "⌫":
            self.backspace()
        elif label == "+/-":
            self.toggle_sign()
        elif label == "=":
            self.text = evaluate(self.text)
        elif label == "( )":
            self.insert_parenthesis()
        elif self.mode is KeypadMode.SCIENTIFIC:
            self.insert(config.SCIENTIFIC_KEY_MAPPING.get(label, label))
        else:
            self.insert(label)
        return self.text

    def insert(self, s: str) -> None:
        self.text += s

    def clear(self) -> None:
        self.text = ""

    def backspace(self) -> None:
        self.text = self.text[:-1]

    def toggle_sign(self) -> None:
        if self.text.startswith("-"):
            self.text = self.text[1:]
        else:
            self.text = "-" + self.text

    def insert_parenthesis(self) -> None:
        # close the innermost group if one is open, otherwise open a new one
        self.insert(")" if count_unclosed(self.text) > 0 else "(")
