"""Classify the lines of a slide into headings, code blocks, images and text."""

from collections.abc import Iterator
from pathlib import Path
from re import compile as re_compile

from ..models import (
    ClassifiedLine,
    CodeBlock,
    CodeFence,
    Heading,
    ImageDirective,
    PlainText,
)

FENCE = "```"
MAX_HEADING_LEVEL = 4

_image_pattern = re_compile(r"!\[[^\]]*\]\((?P<path>[^)]+)\)")


def extract_prefix(line: str) -> tuple[str, str]:
    """Split a line into its leading run of `#` and the stripped remainder.

    Args:
        line: Line to split.

    Returns:
        The `#` characters (possibly none) and the rest of the line.
    """
    rest = line.lstrip("#")
    return line[: len(line) - len(rest)], rest.strip()


def heading_level(line: str) -> int | None:
    """Level of a heading line, or None if the line is not a heading.

    Runs of more than four `#` are not headings, they are shown as they are.
    """
    prefix, _ = extract_prefix(line)
    if not 1 <= len(prefix) <= MAX_HEADING_LEVEL:
        return None
    remainder = line[len(prefix) :]
    if not remainder[:1].isspace():
        return None
    return len(prefix)


def is_fence(line: str) -> bool:
    return line.lstrip().startswith(FENCE)


class LineClassifier:
    def __init__(self, base_dir: Path) -> None:
        """Initialize a classifier for the slides of one document.

        Args:
            base_dir: Directory against which relative image paths are resolved. \
                Usually the directory containing the document.
        """
        self._base_dir = base_dir

    def classify(self, slide: str) -> list[ClassifiedLine]:
        return list(self.iter_classify(slide))

    def iter_classify(self, slide: str) -> Iterator[ClassifiedLine]:
        lines = slide.splitlines()
        start = 0
        while start < len(lines) and not lines[start].strip():
            start += 1
        lines = lines[start:]

        cursor = 0
        while cursor < len(lines):
            line = lines[cursor]
            if (match := _image_pattern.fullmatch(line.strip())) is not None:
                yield ImageDirective(cursor, self._resolve(match["path"].strip()))
                cursor += 1
            elif is_fence(line):
                content_lines = []
                for content_line in lines[cursor + 1 :]:
                    if is_fence(content_line):
                        break
                    content_lines.append(content_line)
                language = line.lstrip()[len(FENCE) :].strip()
                block = CodeBlock(language=language, content="\n".join(content_lines))
                yield CodeFence(cursor, block)
                cursor += len(content_lines) + 2
            elif (level := heading_level(line)) is not None:
                yield Heading(cursor, level, extract_prefix(line)[1])
                cursor += 1
            else:
                yield PlainText(cursor, line)
                cursor += 1

    def _resolve(self, path: str) -> Path:
        image_path = Path(path).expanduser()
        if image_path.is_absolute():
            return image_path
        return self._base_dir / image_path
