"""Recursive-descent parser for yasnippet template bodies.

The grammar, with `inside` set only while parsing the default text of a
brace-delimited field (where `}` closes the field):

    snippet   := lines(false) END
    lines     := line (NEWLINE line)*
    line      := (raw | primitive)*
    raw       := "$" not followed by "{" or a digit
               | one or more chars other than NEWLINE, "$" (and "}" if inside)
    primitive := choice | tabstop
    choice    := "${" number ":" "$$(" "yas-choose-value" "'(" string* ")" ")" "}"
    tabstop   := "${" number ":" lines(true) "}" | "$" number

`lines` and `line` collapse to their only child when they have exactly one.

Every parsing method either returns a token and leaves the cursor after it,
or returns None and leaves the cursor where it was. Once a `$` has committed
to a field, any further mismatch raises `BodyParseError` and the whole body
is rejected.
"""

import re
from typing import List, Optional

from .errors import BodyParseError
from .tokens import Choice, Raw, Tabstop, Token, inline_of, lines_of

# fields are unsigned 64-bit numbers in the destination format
MAX_FIELD_NUMBER = 2**64 - 1

# deeper nesting than this is treated as malformed
MAX_NESTING = 100

CHOOSE_VALUE = "yas-choose-value"

DIGITS = frozenset("0123456789")

_RAW_OUTSIDE = re.compile(r"[^\r\n$]+")
_RAW_INSIDE = re.compile(r"[^}\r\n$]+")
_NUMBER = re.compile(r"[0-9]+")


class BodyParser:
    """Cursor over the text of one snippet body."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.depth = 0

    # lexical primitives

    def peek(self, offset: int = 0) -> str:
        i = self.pos + offset
        return self.text[i] if i < len(self.text) else ""

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def fail(self, message: str):
        raise BodyParseError(message, self.pos)

    def skip_spaces(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def literal(self, s: str) -> bool:
        if self.text.startswith(s, self.pos):
            self.pos += len(s)
            return True
        return False

    def symbol(self, s: str) -> bool:
        """Match `s` after optional whitespace."""
        start = self.pos
        self.skip_spaces()
        if self.literal(s):
            return True
        self.pos = start
        return False

    def reserved(self, word: str) -> bool:
        """Match keyword `word` after optional whitespace.

        Fails when the keyword is only the prefix of a longer word.
        """
        start = self.pos
        self.skip_spaces()
        if self.literal(word) and not self.peek().isalnum():
            return True
        self.pos = start
        return False

    def number(self) -> Optional[int]:
        match = _NUMBER.match(self.text, self.pos)
        if match is None:
            return None
        value = int(match.group())
        if value > MAX_FIELD_NUMBER:
            self.fail(f"field number {match.group()} is too large")
        self.pos = match.end()
        return value

    def string_literal(self) -> Optional[str]:
        if self.peek() != '"':
            return None
        end = self.text.find('"', self.pos + 1)
        if end < 0:
            return None
        value = self.text[self.pos + 1 : end]
        self.pos = end + 1
        return value

    def newline(self) -> bool:
        return self.literal("\n") or self.literal("\r\n")

    # grammar

    def parse(self) -> Token:
        token = self.lines(inside=False)
        if not self.at_end():
            self.fail(f"unexpected {self.peek()!r}")
        return token

    def lines(self, inside: bool) -> Token:
        rows = [self.line(inside)]
        while self.newline():
            rows.append(self.line(inside))
        return lines_of(rows)

    def line(self, inside: bool) -> Token:
        fragments: List[Token] = []
        while True:
            token = self.raw(inside)
            if token is None:
                token = self.primitive()
            if token is None:
                break
            fragments.append(token)
        return inline_of(fragments)

    def raw(self, inside: bool) -> Optional[Raw]:
        if self.peek() == "$":
            following = self.peek(1)
            if following == "{" or following in DIGITS:
                return None
            self.pos += 1
            return Raw("$")
        pattern = _RAW_INSIDE if inside else _RAW_OUTSIDE
        match = pattern.match(self.text, self.pos)
        if match is None:
            return None
        self.pos = match.end()
        return Raw(match.group())

    def primitive(self) -> Optional[Token]:
        token = self.choice()
        if token is None:
            token = self.tabstop()
        return token

    def choice(self) -> Optional[Choice]:
        """Try a `yas-choose-value` field, restoring the cursor on failure."""
        start = self.pos
        try:
            token = self._choice()
        except BodyParseError:
            token = None
        if token is None:
            self.pos = start
        return token

    def _choice(self) -> Optional[Choice]:
        if not self.literal("${"):
            return None
        number = self.number()
        if number is None:
            return None
        if not (
            self.symbol(":")
            and self.literal("$$(")
            and self.reserved(CHOOSE_VALUE)
            and self.symbol("'(")
        ):
            return None
        self.skip_spaces()
        alternatives = []
        while True:
            value = self.string_literal()
            if value is None:
                break
            alternatives.append(value)
            self.skip_spaces()
        if not (self.literal(")") and self.symbol(")") and self.symbol("}")):
            return None
        return Choice(number, tuple(alternatives))

    def tabstop(self) -> Optional[Tabstop]:
        if not self.literal("$"):
            return None
        if not self.literal("{"):
            number = self.number()
            if number is None:
                self.fail("'$' must be followed by a tabstop/placeholder")
            return Tabstop(number)

        number = self.number()
        if number is None:
            self.fail("expected a tabstop number")
        if not self.symbol(":"):
            self.fail("expected ':' after tabstop number")
        if self.depth >= MAX_NESTING:
            self.fail("fields nested too deeply")
        self.depth += 1
        contents = self.lines(inside=True)
        self.depth -= 1
        # raw text has already taken any whitespace before the brace
        if not self.literal("}"):
            self.fail("expected closing '}'")
        return Tabstop(number, contents)


def parse_body(text: str) -> Token:
    """Parse a whole snippet body.

    Raises:
        BodyParseError: if the grammar does not match all of `text`.
    """
    return BodyParser(text).parse()
