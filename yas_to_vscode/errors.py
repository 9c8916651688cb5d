"""Exception classes and conversion warnings for yas_to_vscode."""

from enum import Enum
from typing import Optional


class ConversionWarning(Enum):
    """Advisory problems found while converting a snippet body.

    Warnings never stop a snippet from being written; they are reported
    alongside the result so the caller can tell a human about them.
    """

    ELISP_CODE_FOUND = "elisp_code_found"
    SNIPPET_BODY_PARSE_FAILED = "snippet_body_parse_failed"

    def describe(self) -> str:
        match self:
            case ConversionWarning.ELISP_CODE_FOUND:
                return "might have some uninterpreted code"
            case ConversionWarning.SNIPPET_BODY_PARSE_FAILED:
                return "body could not be parsed and was copied verbatim"


class SnippetError(Exception):
    """A snippet file that cannot be converted at all."""

    def __init__(self, message: str, name: Optional[str] = None):
        self.name = name
        super().__init__(message)

    def __str__(self):
        if self.name:
            return f"{self.name}: {self.args[0]}"
        return self.args[0]


class ParseError(SnippetError):
    """The metadata header could not be separated from the body."""


class MissingFieldError(SnippetError):
    """A metadata field required in strict mode is absent."""

    def __init__(self, field: str, name: Optional[str] = None):
        self.field = field
        super().__init__(f"missing required field '{field}'", name=name)


class BodyParseError(Exception):
    """The body grammar did not match.

    Raised by the parser and caught by `validate`, which falls back to the
    verbatim body.
    """

    def __init__(self, message: str, position: int):
        self.position = position
        super().__init__(f"{message} at offset {position}")
