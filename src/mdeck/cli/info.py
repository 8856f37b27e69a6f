from pathlib import Path
from typing import TYPE_CHECKING

from . import app

if TYPE_CHECKING:
    from rich.table import Table

    from ..components.classifying import LineClassifier
    from ..models import Presentation


@app.command()
def info(file: Path, /, *, workdir: Path = Path()) -> None:
    """Display the metadata and an outline of FILE.

    Args:
        file: Markdown document to describe
        workdir: Directory to look for an mdeck.yml settings file in

    """
    from rich.console import Console
    from rich.padding import Padding
    from rich.table import Table

    from ..components.classifying import LineClassifier
    from ..components.themes import ThemeCatalog
    from ..configuring.settings import Settings
    from ..presenting import load_presentation

    console = Console()
    settings = Settings.from_yaml(workdir)
    presentation = load_presentation(file, settings, ThemeCatalog())
    metadata = presentation.metadata

    console.rule("[bold]Metadata", align="left")
    console.print()
    content = Table("Field", "Value")
    content.add_row("title", metadata.title or f"[dim]{settings.title_placeholder}")
    content.add_row(
        "subtitle", metadata.subtitle or f"[dim]{settings.subtitle_placeholder}"
    )
    content.add_row("author", metadata.author or f"[dim]{settings.author_placeholder}")
    console.print(Padding(content, (0, 0, 0, 2)))
    console.print()

    console.rule("[bold]Slides", align="left")
    console.print()
    console.print(
        Padding(
            _outline(presentation, LineClassifier(presentation.base_dir)),
            (0, 0, 0, 2),
        )
    )


def _outline(presentation: "Presentation", classifier: "LineClassifier") -> "Table":
    from rich.table import Table

    from ..models import CodeFence, Heading, ImageDirective, PlainText

    table = Table("#", "Title", "Code blocks", "Images")
    for i, slide in enumerate(presentation.slides, start=1):
        elements = classifier.classify(slide)
        title = next(
            (e.text for e in elements if isinstance(e, Heading)),
            next((e.text for e in elements if isinstance(e, PlainText)), ""),
        )
        languages = [
            e.block.language or "?" for e in elements if isinstance(e, CodeFence)
        ]
        images = sum(isinstance(e, ImageDirective) for e in elements)
        table.add_row(str(i), title, " ".join(languages), str(images))
    return table
