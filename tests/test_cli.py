from pathlib import Path
from unittest.mock import patch

from pytest import CaptureFixture, LogCaptureFixture, MonkeyPatch, fixture

from mdeck.cli import main

from .fakes import FakeTerminal


@fixture(autouse=True)
def wide_console(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("COLUMNS", "200")


@fixture(autouse=True)
def user_config_dir(monkeypatch: MonkeyPatch, tmp_path: Path) -> Path:
    path = tmp_path / "user"
    path.mkdir()
    monkeypatch.setattr("mdeck.configuring.settings._user_config_dir", path)
    return path


def run_mdeck(*args: str) -> int:
    with patch("sys.argv", ["mdeck", *args]):
        try:
            main()
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else 0
    return 0


def test_present(document: Path, tmp_path: Path) -> None:
    terminal = FakeTerminal(keys="lq")
    with patch(
        "mdeck.components.terminal.AnsiTerminal", return_value=terminal
    ) as terminal_class:
        code = run_mdeck("present", str(document), "--workdir", str(tmp_path))

    assert code == 0
    terminal_class.assert_called_once()
    assert terminal.sessions == 1
    assert len(terminal.batches) == 2
    assert "Demo" in terminal.written(0)
    assert "2/2 slides" in terminal.written(1)


def test_present_from_given_slide_and_theme(document: Path, tmp_path: Path) -> None:
    terminal = FakeTerminal(keys="q")
    with patch("mdeck.components.terminal.AnsiTerminal", return_value=terminal):
        code = run_mdeck(
            "present",
            str(document),
            "--slide",
            "2",
            "--theme",
            "one dark",
            "--workdir",
            str(tmp_path),
        )

    assert code == 0
    assert "2/2 slides" in terminal.written(0)


def test_present_missing_file(tmp_path: Path, caplog: LogCaptureFixture) -> None:
    missing = tmp_path / "missing.md"

    code = run_mdeck("present", str(missing), "--workdir", str(tmp_path))

    assert code == 1
    assert "does not exist" in caplog.text


def test_present_unknown_theme(document: Path, tmp_path: Path) -> None:
    code = run_mdeck(
        "present", str(document), "--theme", "Solarized", "--workdir", str(tmp_path)
    )

    assert code == 1


def test_info(document: Path, tmp_path: Path, capsys: CaptureFixture[str]) -> None:
    code = run_mdeck("info", str(document), "--workdir", str(tmp_path))

    out = capsys.readouterr().out
    assert code == 0
    assert "Demo" in out
    assert "Anonymous" in out
    assert "Slide1" in out
    assert "rust" in out


def test_themes(capsys: CaptureFixture[str]) -> None:
    code = run_mdeck("themes")

    out = capsys.readouterr().out
    assert code == 0
    assert "Catppuccin Latte" in out
    assert "One Dark" in out
    assert "#56b6c2" in out


def test_print_settings(tmp_path: Path, capsys: CaptureFixture[str]) -> None:
    code = run_mdeck("print-settings", "--workdir", str(tmp_path))

    assert code == 0
    assert "notification_delay" in capsys.readouterr().out


def test_print_settings_reads_user_config_dir(
    user_config_dir: Path, tmp_path: Path, capsys: CaptureFixture[str]
) -> None:
    (user_config_dir / "mdeck.yml").write_text(
        "title_placeholder: Nameless\n", encoding="utf8"
    )

    code = run_mdeck("print-settings", "--workdir", str(tmp_path))

    assert code == 0
    assert "Nameless" in capsys.readouterr().out
