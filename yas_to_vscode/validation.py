"""Fallback policy for snippet bodies and detection of untranslated elisp."""

import logging
import re
from typing import Iterable, List, Tuple

from .errors import BodyParseError, ConversionWarning
from .parsing import parse_body
from .rendering import render
from .results import Converted

logger = logging.getLogger(__name__)

# backquoted lisp forms, `$$(...)` and `$(` hooks; yas-choose-value has
# already been turned into a choice field by the time this runs
ELISP_PATTERN = re.compile(r"(^|[^\\])`\(|\$\$\(.+\)|\$\(")


def validate(body: str) -> Tuple[List[str], List[ConversionWarning]]:
    """Parse and render `body`, never failing.

    When the grammar does not match, the body is returned unchanged as a
    single line together with `SNIPPET_BODY_PARSE_FAILED`.
    """
    try:
        token = parse_body(body)
    except BodyParseError as e:
        logger.debug(f"Body did not parse ({e}), keeping it verbatim")
        return [body], [ConversionWarning.SNIPPET_BODY_PARSE_FAILED]
    return render(token), []


def contains_elisp(lines: Iterable[str]) -> bool:
    """Check rendered lines for embedded elisp that was left untranslated."""
    return any(ELISP_PATTERN.search(line) for line in lines)


def convert_body(body: str) -> Converted[List[str]]:
    lines, warnings = validate(body)
    if contains_elisp(lines):
        warnings.append(ConversionWarning.ELISP_CODE_FOUND)
    return Converted(lines, warnings)
