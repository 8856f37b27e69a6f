from pytest import mark, raises

from mdeck.components.themes import Theme, ThemeCatalog
from mdeck.exceptions import UnknownThemeError
from mdeck.models import Rgb, Role


def test_catalog_order() -> None:
    assert ThemeCatalog().names() == [
        "Catppuccin Latte",
        "Catppuccin Mocha",
        "One Dark",
    ]


@mark.parametrize("theme", list(ThemeCatalog()), ids=ThemeCatalog().names())
def test_every_theme_resolves_every_role(theme: Theme) -> None:
    for role in Role:
        assert isinstance(theme.resolve(role), Rgb)


def test_resolve_one_dark() -> None:
    one_dark = ThemeCatalog().by_name("one dark")

    assert one_dark.get_name() == "One Dark"
    assert one_dark.resolve(Role.TEXT) == Rgb(0xAB, 0xB2, 0xBF)
    assert one_dark.resolve(Role.PRIMARY) == Rgb(0x56, 0xB6, 0xC2)
    assert one_dark.resolve(Role.SECONDARY) == Rgb(0x61, 0xAF, 0xEF)
    assert one_dark.resolve(Role.TERTIARY) == Rgb(0x98, 0xC3, 0x79)
    assert one_dark.resolve(Role.ACCENT) == one_dark.resolve(Role.TERTIARY)


def test_catalog_indexing_wraps() -> None:
    catalog = ThemeCatalog()

    assert catalog[len(catalog)] == catalog[0]


def test_unknown_theme() -> None:
    with raises(UnknownThemeError):
        ThemeCatalog().by_name("Solarized")


@mark.parametrize("value", ["4c4f69", "#4c4f6", "#4c4f699", "#zzzzzz"])
def test_from_hex_rejects_malformed_constants(value: str) -> None:
    with raises(ValueError):
        Rgb.from_hex(value)


def test_from_hex() -> None:
    assert Rgb.from_hex("#d20f39") == Rgb(210, 15, 57)
