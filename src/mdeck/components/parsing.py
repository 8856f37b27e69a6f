"""Turn the raw text of a document into metadata and slides."""

from logging import getLogger
from pathlib import Path

from ..exceptions import DocumentNotFoundError, DocumentReadError
from ..models import Metadata

_logger = getLogger(__name__)

SLIDE_DELIMITER = "<!-- end_slide -->"
_FRONT_MATTER_DELIMITER = "---"
_METADATA_KEYS = frozenset(("author", "title", "subtitle"))


def parse_metadata(content: str) -> tuple[Metadata, str]:
    """Extract the front matter of a document.

    The front matter is only recognized when the very first line is `---` and a \
    later line is `---` too. Anything else, including an opener that is never \
    closed, means that the document has no front matter.

    Args:
        content: Whole text of the document.

    Returns:
        The metadata found, and the document without its front matter.
    """
    lines = content.splitlines(keepends=True)
    if not lines or lines[0].rstrip("\r\n") != _FRONT_MATTER_DELIMITER:
        return Metadata(), content
    for closing, line in enumerate(lines[1:], start=1):
        if line.rstrip("\r\n") == _FRONT_MATTER_DELIMITER:
            break
    else:
        _logger.debug("Front matter opened but never closed, ignoring it")
        return Metadata(), content

    values: dict[str, str] = {}
    for line in lines[1:closing]:
        key, colon, value = line.partition(":")
        key = key.strip()
        if colon and key in _METADATA_KEYS:
            values[key] = value.strip()
    return Metadata(**values), "".join(lines[closing + 1 :])


def split_into_slides(body: str, delimiter: str = SLIDE_DELIMITER) -> list[str]:
    """Split a document body on the slide delimiter.

    Args:
        body: Document without its front matter.
        delimiter: Marker separating two slides. It is dropped from the output.

    Returns:
        Texts of the slides, never empty: an empty body gives one empty slide.
    """
    return body.split(delimiter)


def read_document(path: Path) -> str:
    """Read a document as UTF-8 text.

    Args:
        path: Path to the markdown document.

    Raises:
        DocumentNotFoundError: Raised if there is no file at `path`.
        DocumentReadError: Raised if the file cannot be read or is not UTF-8 text.

    Returns:
        Content of the document.
    """
    if not path.is_file():
        msg = f"the file {path} does not exist"
        raise DocumentNotFoundError(msg)
    try:
        return path.read_text(encoding="utf8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"error reading {path}: {e}"
        raise DocumentReadError(msg) from e
