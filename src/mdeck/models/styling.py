"""Model classes describing colors and the semantic slots they are resolved from."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Self


@dataclass(frozen=True)
class Rgb:
    """24-bit color."""

    red: int
    green: int
    blue: int

    @classmethod
    def from_hex(cls, value: str) -> Self:
        """Build a color from a `#rrggbb` constant.

        Only meant for compiled-in palettes: a malformed constant is a programming \
        error and surfaces when the module defining it is imported.

        Args:
            value: Hexadecimal color, with its leading `#`.

        Raises:
            ValueError: Raised if `value` is not a `#` followed by 6 hex digits.

        Returns:
            The parsed color.
        """
        if len(value) != 7 or not value.startswith("#"):
            msg = f"expected a #rrggbb color, got {value!r}"
            raise ValueError(msg)
        return cls(int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16))


@dataclass(frozen=True)
class DefaultColor:
    """The terminal's own foreground color."""


Paint = Rgb | DefaultColor
"""Either an explicit color or the terminal default, written by the same code path."""


class Role(StrEnum):
    """Logical color slots that every theme resolves."""

    TEXT = "text"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    ACCENT = "accent"


class TokenKind(StrEnum):
    """Closed set of syntax classes that code tokens are mapped onto."""

    KEYWORD = "keyword"
    FUNCTION = "function"
    TYPE = "type"
    STRING = "string"
    NUMBER = "number"
    COMMENT = "comment"
    VARIABLE = "variable"
    PARAMETER = "parameter"
    OPERATOR = "operator"
    CONSTANT = "constant"
    CONDITIONAL = "conditional"
    REPEAT = "repeat"
    BRACKET = "bracket"
    DELIMITER = "delimiter"
    DEFAULT = "default"
