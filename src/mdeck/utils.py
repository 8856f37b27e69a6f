"""Provide general utility functions that would not fit in other modules."""

from collections.abc import Iterable, Iterator
from contextlib import suppress
from pathlib import Path
from typing import Any

from rich.cells import cell_len


def load_yaml(path: Path) -> Any:
    from yaml import safe_load

    return safe_load(path.read_text(encoding="utf8"))


def load_all_yamls(paths: Iterable[Path]) -> Iterator[Any]:
    for path in paths:
        with suppress(FileNotFoundError):
            yield load_yaml(path)


def centering_padding(text: str, width: int) -> int:
    """Number of spaces to put before `text` to center it in `width` cells.

    Args:
        text: Text to center. Its width is measured in terminal cells, so that wide \
            characters count double.
        width: Width available.

    Returns:
        The padding, never negative: text wider than `width` is not padded.
    """
    return max((width - cell_len(text)) // 2, 0)


def import_module_and_submodules(package_name: str) -> None:
    """Import a package and, recursively, all of its submodules.

    Importing the modules of [`mdeck.cli`][mdeck.cli] is what registers their \
    commands on the application.

    Args:
        package_name: Name of the package to fully import.
    """
    from importlib import import_module
    from pkgutil import iter_modules

    module = import_module(package_name)
    for _, name, is_package in iter_modules(getattr(module, "__path__", [])):
        subpackage = f"{package_name}.{name}"
        if is_package:
            import_module_and_submodules(subpackage)
        else:
            import_module(subpackage)
