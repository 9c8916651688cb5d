"""yas_to_vscode -- convert yasnippet templates into VS Code snippets."""

import logging

# Version - reads from package metadata (set in pyproject.toml)
try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("yas-to-vscode")
except PackageNotFoundError:
    __version__ = "0.0.0+dev"

logger = logging.getLogger(__name__)

from .errors import (BodyParseError, ConversionWarning, MissingFieldError,
                     ParseError, SnippetError)
from .parsing import BodyParser, parse_body
from .rendering import render
from .results import Converted
from .snippet import Snippet, is_separator, split_header
from .tokens import Choice, Inline, Lines, Raw, Tabstop, Token
from .validation import contains_elisp, convert_body, validate
from .conversion import (ConversionReport, convert_directory, convert_file,
                         convert_tree, mode_language, write_snippets)

__all__ = [
    "BodyParseError",
    "BodyParser",
    "Choice",
    "ConversionReport",
    "ConversionWarning",
    "Converted",
    "Inline",
    "Lines",
    "MissingFieldError",
    "ParseError",
    "Raw",
    "Snippet",
    "SnippetError",
    "Tabstop",
    "Token",
    "contains_elisp",
    "convert_body",
    "convert_directory",
    "convert_file",
    "convert_tree",
    "is_separator",
    "mode_language",
    "parse_body",
    "render",
    "split_header",
    "validate",
    "write_snippets",
]
