from pathlib import Path

from pytest import fixture

from mdeck.configuring.settings import Settings


@fixture
def settings() -> Settings:
    return Settings()


@fixture
def document(tmp_path: Path) -> Path:
    path = tmp_path / "talk.md"
    path.write_text(
        "---\ntitle: Demo\n---\n"
        "Slide1\n"
        "<!-- end_slide -->\n"
        "# Code\n"
        "```rust\n"
        "fn main() {\n"
        "    let answer = 42;\n"
        "}\n"
        "```\n",
        encoding="utf8",
    )
    return path
