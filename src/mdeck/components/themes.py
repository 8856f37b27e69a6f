"""Compiled-in color themes."""

from collections.abc import Iterator
from dataclasses import dataclass

from ..exceptions import UnknownThemeError
from ..models import Rgb, Role


@dataclass(frozen=True)
class _Palette:
    text: Rgb
    teal: Rgb
    sky: Rgb
    peach: Rgb
    red: Rgb
    green: Rgb


def _palette(
    text: str, teal: str, sky: str, peach: str, red: str, green: str
) -> _Palette:
    return _Palette(
        text=Rgb.from_hex(text),
        teal=Rgb.from_hex(teal),
        sky=Rgb.from_hex(sky),
        peach=Rgb.from_hex(peach),
        red=Rgb.from_hex(red),
        green=Rgb.from_hex(green),
    )


@dataclass(frozen=True)
class Theme:
    """Named palette able to resolve every [`Role`][mdeck.models.Role]."""

    name: str
    _palette: _Palette

    def get_name(self) -> str:
        return self.name

    def resolve(self, role: Role) -> Rgb:
        match role:
            case Role.TEXT:
                return self._palette.text
            case Role.PRIMARY:
                return self._palette.teal
            case Role.SECONDARY:
                return self._palette.sky
            case Role.TERTIARY | Role.ACCENT:
                return self._palette.green


class ThemeCatalog:
    """Fixed, ordered set of themes. Theme indices used for cycling refer to it."""

    _themes: tuple[Theme, ...] = (
        Theme(
            "Catppuccin Latte",
            _palette("#4c4f69", "#179299", "#04a5e5", "#fe640b", "#d20f39", "#40a02b"),
        ),
        Theme(
            "Catppuccin Mocha",
            _palette("#cdd6f4", "#94e2d5", "#94e2d5", "#fab387", "#f38ba8", "#a6e3a1"),
        ),
        Theme(
            "One Dark",
            _palette("#abb2bf", "#56b6c2", "#61afef", "#e5c07b", "#e06c75", "#98c379"),
        ),
    )

    def __len__(self) -> int:
        return len(self._themes)

    def __iter__(self) -> Iterator[Theme]:
        return iter(self._themes)

    def __getitem__(self, index: int) -> Theme:
        return self._themes[index % len(self._themes)]

    def names(self) -> list[str]:
        return [theme.name for theme in self._themes]

    def index_of(self, name: str) -> int:
        """Find the position of a theme from its name, ignoring case.

        Args:
            name: Display name of the theme.

        Raises:
            UnknownThemeError: Raised if no theme has this name.

        Returns:
            Index of the theme in the catalog.
        """
        for i, theme in enumerate(self._themes):
            if theme.name.casefold() == name.casefold():
                return i
        msg = f"unknown theme {name!r}, available themes: {', '.join(self.names())}"
        raise UnknownThemeError(msg)

    def by_name(self, name: str) -> Theme:
        return self._themes[self.index_of(name)]
