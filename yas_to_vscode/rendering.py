"""Render a parsed snippet body as the lines of a VS Code snippet body."""

from typing import List

from .tokens import Choice, Inline, Lines, Raw, Tabstop, Token

CHOICE_DELIMITER = ","

# characters with a meaning inside a VS Code ${N|a,b|} choice
_CHOICE_ESCAPES = str.maketrans({"\\": "\\\\", ",": "\\,", "|": "\\|"})


def render(token: Token) -> List[str]:
    """Render `token` to a list of lines.

    `Lines` children stack vertically. `Inline` children are joined onto a
    single line, so a multi-line child keeps its newlines inside that line.
    """
    match token:
        case Raw(text=text):
            return [text]
        case Lines(children=children):
            return [line for child in children for line in render(child)]
        case Inline(children=children):
            return ["".join("\n".join(render(child)) for child in children)]
        case Tabstop(number=number, contents=contents):
            body = "" if contents is None else "\n".join(render(contents))
            # an empty default is the same as none
            if not body:
                return [f"${number}"]
            return [f"${{{number}:{body}}}"]
        case Choice(number=number, alternatives=alternatives):
            options = CHOICE_DELIMITER.join(
                a.translate(_CHOICE_ESCAPES) for a in alternatives
            )
            return [f"${{{number}|{options}|}}"]
    raise TypeError(f"Not a snippet token: {token!r}")
