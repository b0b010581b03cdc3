"""In-place rewrite of a single assignment in dotenv text."""

from __future__ import annotations

import re

from dotenv_cli.errors import InvalidVariableName
from dotenv_cli.log import get_logger
from dotenv_cli.parser import Quote, scan

logger = get_logger("editor")

_NON_WORD_RE = re.compile(r"\W", re.ASCII)
_TRAILING_WS_RE = re.compile(r"\s+$")


def encode(value: str) -> str:
    """Quote *value* so that :func:`dotenv_cli.parser.parse` reads it back.

    - multi-line values go in double quotes with newlines written as ``\\n``
      and ``$`` as ``\\$``
    - anything else with a non-word character goes in single quotes
    - plain ``[A-Za-z0-9_]`` values (and the empty string) stay bare

    Backslashes are doubled in both quoted forms.
    """
    if "\n" in value:
        quote = '"'
        value = value.replace("\\", "\\\\").replace("$", "\\$").replace("\n", "\\n")
    elif _NON_WORD_RE.search(value):
        quote = "'"
        value = value.replace("\\", "\\\\")
    else:
        return value
    value = value.replace(quote, f"\\{quote}")
    return f"{quote}{value}{quote}"


def update(text: str, name: str, value: str) -> str:
    """Return *text* with the first assignment of *name* set to *value*.

    Everything outside that assignment (comments, blank lines, other
    variables, unrecognised lines) is copied through untouched, as are
    the assignment's own indentation and inline comment.  When *name* is
    not assigned anywhere, ``\\nNAME=value\\n`` is appended instead.
    """
    if "#" in name:
        raise InvalidVariableName(name)

    new_line = f"{name}={encode(value)}"
    parts: list[str] = []
    progress = 0
    found = False

    for assignment in scan(text):
        if assignment.key != name:
            continue
        # Non-matching assignments between progress and here copy verbatim.
        parts.append(text[progress:assignment.start])
        padding = ""
        if assignment.quote is Quote.NONE:
            m = _TRAILING_WS_RE.search(assignment.body)
            if m:
                padding = m.group()
        parts.append(f"{assignment.prefix}{new_line}{padding}{assignment.postfix}")
        progress = assignment.end
        found = True
        logger.debug("Replaced assignment of %s at offset %d", name, assignment.start)
        break

    parts.append(text[progress:])
    if not found:
        logger.debug("%s not assigned, appending a new line", name)
        parts.append(f"\n{new_line}\n")
    return "".join(parts)
