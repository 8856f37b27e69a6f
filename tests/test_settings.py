from pathlib import Path

from pytest import raises

from mdeck.configuring.settings import Settings
from mdeck.exceptions import SettingsError


def test_defaults(tmp_path: Path) -> None:
    settings = Settings.from_yaml(tmp_path, user_config_dir=tmp_path / "user")

    assert settings == Settings()
    assert settings.notification_delay == 3.0
    assert settings.slide_delimiter == "<!-- end_slide -->"


def test_workdir_overrides_user_config(tmp_path: Path) -> None:
    user_dir = tmp_path / "user"
    user_dir.mkdir()
    (user_dir / "mdeck.yml").write_text(
        "theme: one dark\nbody_row: 5\n", encoding="utf8"
    )
    workdir = tmp_path / "talk"
    workdir.mkdir()
    (workdir / "mdeck.yml").write_text("body_row: 6\n", encoding="utf8")

    settings = Settings.from_yaml(workdir, user_config_dir=user_dir)

    assert settings.theme == "One Dark"
    assert settings.body_row == 6


def test_empty_settings_file(tmp_path: Path) -> None:
    (tmp_path / "mdeck.yml").write_text("", encoding="utf8")

    assert Settings.from_yaml(tmp_path, user_config_dir=tmp_path) == Settings()


def test_unknown_theme(tmp_path: Path) -> None:
    (tmp_path / "mdeck.yml").write_text("theme: Solarized\n", encoding="utf8")

    with raises(SettingsError, match="Solarized"):
        Settings.from_yaml(tmp_path, user_config_dir=tmp_path / "user")


def test_invalid_values(tmp_path: Path) -> None:
    (tmp_path / "mdeck.yml").write_text(
        "notification_delay: 0\nprogress_glyph: '=='\n", encoding="utf8"
    )

    with raises(SettingsError):
        Settings.from_yaml(tmp_path, user_config_dir=tmp_path / "user")


def test_unknown_key(tmp_path: Path) -> None:
    (tmp_path / "mdeck.yml").write_text("colour: red\n", encoding="utf8")

    with raises(SettingsError):
        Settings.from_yaml(tmp_path, user_config_dir=tmp_path / "user")
