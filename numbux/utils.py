import enum


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def count_unclosed(text: str, open_char: str = "(", close_char: str = ")") -> int:
    """Number of opening chars without a matching closing one; negative when closes outnumber opens"""
    return text.count(open_char) - text.count(close_char)
