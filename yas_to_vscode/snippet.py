"""Reading yasnippet files: header metadata and the converted snippet record.

A yasnippet file starts with comment lines of `key: value` metadata, ended
by a line of just `# --`; everything after that line is the body:

    # -*- mode: snippet -*-
    # name: assert!
    # key: ass
    # --
    assert!(${1:true});
"""

import logging
from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict

from .errors import MissingFieldError, ParseError
from .results import Converted
from .validation import convert_body

logger = logging.getLogger(__name__)

COMMENT_MARKER = "#"


def is_separator(line: str) -> bool:
    """True for a comment line holding nothing but dashes."""
    if not line.startswith(COMMENT_MARKER):
        return False
    return all(c == "-" for c in line[len(COMMENT_MARKER) :].strip())


def _source_lines(src: str) -> List[str]:
    lines = src.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def split_header(name: str, src: str) -> Tuple[Dict[str, str], str]:
    """Split a snippet file into its metadata and its body.

    Raises:
        ParseError: if there is no separator line.
    """
    lines = _source_lines(src)
    index = next((i for i, line in enumerate(lines) if is_separator(line)), None)
    if index is None:
        raise ParseError("No metadata separator found", name=name)

    metadata: Dict[str, str] = {}
    for line in lines[:index]:
        if not line.startswith(COMMENT_MARKER):
            logger.debug(f"{name}: ignoring header line {line!r}")
            continue
        key, _, value = line[len(COMMENT_MARKER) :].partition(":")
        metadata[key.strip()] = value.strip()
    return metadata, "\n".join(lines[index + 1 :])


class Snippet(BaseModel):
    """One VS Code snippet, as written to the language's JSON file."""

    model_config = ConfigDict(frozen=True)

    description: str = ""
    prefix: str
    body: List[str]

    @classmethod
    def parse(cls, name: str, src: str, strict: bool = False) -> Converted["Snippet"]:
        """Convert the text of a yasnippet file.

        Args:
            name: Snippet identifier, usually the file name.
            src: Full file contents, header included.
            strict: Require a `key` header instead of falling back to `name`.

        Raises:
            ParseError: if the header has no separator.
            MissingFieldError: in strict mode, if `key` is missing.
        """
        metadata, body = split_header(name, src)

        prefix = metadata.get("key")
        if prefix is None:
            if strict:
                raise MissingFieldError("key", name=name)
            prefix = name

        description = metadata.get("description", metadata.get("name", ""))

        converted = convert_body(body)
        snippet = cls(description=description, prefix=prefix, body=converted.result)
        return Converted(snippet, converted.warnings)
