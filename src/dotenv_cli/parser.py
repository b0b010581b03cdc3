"""Dotenv grammar: scanning assignments and resolving their values.

The same scanner feeds both :func:`parse` (``get``/``run``) and the
in-place rewrite in :mod:`dotenv_cli.editor` (``set``), so the two always
agree on what counts as an assignment.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

_NAME = r"[A-Za-z_][A-Za-z0-9_]*"

# One assignment.  Quoted bodies may run over several lines; the postfix
# (inline comment, stray text) always ends at the end of the line.
_ASSIGNMENT_RE = re.compile(
    rf"""
    ^(?P<prefix>[ \t]*)
    (?:export[ \t]+)?
    (?P<key>{_NAME})
    [ \t]*=[ \t]*
    (?:
        '(?P<single>(?:\\[\s\S]|[^'\\])*)'
      | "(?P<double>(?:\\[\s\S]|[^"\\])*)"
      | (?P<unquoted>[^\n#]*)
    )
    (?P<postfix>[^\n]*)$
    """,
    re.MULTILINE | re.VERBOSE,
)

_NAME_RE = re.compile(_NAME)
_BRACED_RE = re.compile(rf"(?P<name>{_NAME})(?::-(?P<default>.*))?", re.DOTALL)

# Backslash escapes honoured in double-quoted and unquoted values.
_ESCAPES = {
    "n": "\n",
    '"': '"',
    "'": "'",
    "$": "$",
    "\\": "\\",
}

# Single-quoted values only unescape the quote and the backslash itself.
_SINGLE_ESCAPE_RE = re.compile(r"\\([\\'])")


class Quote(Enum):
    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"


@dataclass(frozen=True)
class RawAssignment:
    """One ``[export ]KEY=VALUE`` occurrence as it appears in the source."""

    prefix: str
    key: str
    quote: Quote
    body: str  # between the quotes, or the unquoted run up to ``#``
    postfix: str
    start: int
    end: int


def scan(text: str) -> Iterator[RawAssignment]:
    """Yield every recognised assignment in *text*, in file order."""
    for m in _ASSIGNMENT_RE.finditer(text):
        if m.group("single") is not None:
            quote, body = Quote.SINGLE, m.group("single")
        elif m.group("double") is not None:
            quote, body = Quote.DOUBLE, m.group("double")
        else:
            quote, body = Quote.NONE, m.group("unquoted")
        yield RawAssignment(
            prefix=m.group("prefix"),
            key=m.group("key"),
            quote=quote,
            body=body,
            postfix=m.group("postfix"),
            start=m.start(),
            end=m.end(),
        )


def parse(text: str) -> dict[str, str]:
    """Parse dotenv *text* into an ordered name -> value mapping.

    - ``'single'`` values are literal (only ``\\'`` and ``\\\\`` are unescaped)
    - ``"double"`` and unquoted values get ``\\n``/quote/``\\$``/``\\\\``
      escapes and
      ``$VAR``, ``${VAR}``, ``$VAR:-default``, ``${VAR:-default}`` expansion
    - expansion only sees variables defined earlier in the file
    - a later assignment of the same name wins
    - lines that are not assignments are skipped
    """
    variables: dict[str, str] = {}
    for assignment in scan(text):
        variables[assignment.key] = resolve_value(assignment, variables)
    return variables


def resolve_value(assignment: RawAssignment, variables: dict[str, str]) -> str:
    """Return the final value of *assignment* given the *variables* so far."""
    if assignment.quote is Quote.NONE:
        return _resolve(assignment.body.rstrip(), variables)
    body = _strip_edge_newlines(assignment.body)
    if assignment.quote is Quote.SINGLE:
        return _SINGLE_ESCAPE_RE.sub(r"\1", body)
    return _resolve(body, variables)


def _strip_edge_newlines(body: str) -> str:
    if body.startswith("\n"):
        body = body[1:]
    if body.endswith("\n"):
        body = body[:-1]
    return body


def _resolve(raw: str, variables: dict[str, str]) -> str:
    """Apply escapes and variable expansion to *raw* in one left-to-right pass."""
    out: list[str] = []
    i = 0
    n = len(raw)
    while i < n:
        ch = raw[i]
        if ch == "\\" and i + 1 < n and raw[i + 1] in _ESCAPES:
            out.append(_ESCAPES[raw[i + 1]])
            i += 2
            continue
        if ch == "$":
            ref = _reference_at(raw, i)
            if ref is not None:
                name, default, i = ref
                out.append(_lookup(name, default, variables))
                continue
        out.append(ch)
        i += 1
    return "".join(out)


def _reference_at(raw: str, pos: int) -> tuple[str, str | None, int] | None:
    """Parse a ``$`` reference starting at *pos*.

    Returns ``(name, default, end)`` or None when the ``$`` is literal.
    A braced default runs to the matching ``}``; an unbraced one runs to
    the end of the line.
    """
    if raw.startswith("{", pos + 1):
        close = _matching_brace(raw, pos + 1)
        if close < 0:
            return None
        m = _BRACED_RE.fullmatch(raw, pos + 2, close)
        if m is None:
            return None
        return m.group("name"), m.group("default"), close + 1

    m = _NAME_RE.match(raw, pos + 1)
    if m is None:
        return None
    end = m.end()
    if not raw.startswith(":-", end):
        return m.group(), None, end
    line_end = raw.find("\n", end)
    if line_end < 0:
        line_end = len(raw)
    return m.group(), raw[end + 2:line_end], line_end


def _matching_brace(raw: str, open_pos: int) -> int:
    depth = 0
    for i in range(open_pos, len(raw)):
        if raw[i] == "{":
            depth += 1
        elif raw[i] == "}":
            depth -= 1
            if depth == 0:
                return i
    return -1


def _lookup(name: str, default: str | None, variables: dict[str, str]) -> str:
    value = variables.get(name, "")
    if value:
        return value
    if default is not None:
        return _resolve(default, variables)
    return ""
