from logging import INFO, basicConfig, getLogger

from cyclopts import App
from rich.console import Console
from rich.logging import RichHandler

app = App(help="Present markdown documents as terminal slides.")


def main() -> None:
    basicConfig(
        level=INFO,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                rich_tracebacks=True,
                tracebacks_show_locals=False,
            )
        ],
    )
    from ..exceptions import MdeckError
    from ..utils import import_module_and_submodules

    import_module_and_submodules(__name__)
    try:
        app()
    except MdeckError as e:
        getLogger(__name__).error(str(e))
        raise SystemExit(1) from e
