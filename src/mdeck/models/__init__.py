"""Modules containing model classes for the different parts of mdeck.

- [`document`][mdeck.models.document] contains models for parsed documents and \
    classified slide lines
- [`presentation`][mdeck.models.presentation] contains the loaded presentation and \
    its navigation state
- [`operations`][mdeck.models.operations] contains the positioned writes fed to the \
    terminal
- [`styling`][mdeck.models.styling] contains colors, roles and token kinds
"""

from .document import (
    ClassifiedLine,
    CodeBlock,
    CodeFence,
    Heading,
    ImageDirective,
    Metadata,
    PlainText,
    SyntaxToken,
)
from .operations import (
    ClearScreen,
    DrawImage,
    MoveTo,
    Operation,
    ResetStyle,
    SetBold,
    SetPaint,
    Write,
)
from .presentation import Presentation
from .styling import DefaultColor, Paint, Rgb, Role, TokenKind

__all__ = [
    "ClassifiedLine",
    "ClearScreen",
    "CodeBlock",
    "CodeFence",
    "DefaultColor",
    "DrawImage",
    "Heading",
    "ImageDirective",
    "Metadata",
    "MoveTo",
    "Operation",
    "Paint",
    "PlainText",
    "Presentation",
    "ResetStyle",
    "Rgb",
    "Role",
    "SetBold",
    "SetPaint",
    "SyntaxToken",
    "TokenKind",
    "Write",
]
