from pathlib import Path

from . import app


@app.command()
def present(
    file: Path,
    /,
    *,
    theme: str | None = None,
    slide: int = 1,
    workdir: Path = Path(),
) -> None:
    """Present FILE in the terminal.

    Keys: h for the previous slide, l for the next one, t to cycle themes and q to \
    quit.

    Args:
        file: Markdown document to present
        theme: Theme to start with, overriding the settings
        slide: Slide to start on, counting from 1
        workdir: Directory to look for an mdeck.yml settings file in

    """
    from ..components.images import HalfBlockImagePrinter
    from ..components.pygments_oracle import PygmentsOracle
    from ..components.terminal import AnsiTerminal
    from ..components.themes import ThemeCatalog
    from ..configuring.settings import Settings
    from ..presenting import Presenter, load_presentation

    catalog = ThemeCatalog()
    settings = Settings.from_yaml(workdir)
    if theme is not None:
        settings = settings.model_copy(update={"theme": catalog.by_name(theme).name})
    presentation = load_presentation(file, settings, catalog, slide_index=slide - 1)
    Presenter(
        presentation=presentation,
        terminal=AnsiTerminal(HalfBlockImagePrinter()),
        settings=settings,
        oracle=PygmentsOracle(),
        catalog=catalog,
    ).run()
