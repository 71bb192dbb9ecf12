"""Comma-delimited codec — quote-aware line tokenizer, document parser, serializer.

Pure functions, no I/O. Nothing here raises: malformed rows degrade to
empty-string fields instead of failing the document.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from flashdeck.l1_entities.entry import Card, Entry, Separator

_LINE_BREAK = re.compile(r'\r?\n')
_NEEDS_QUOTING = (',', '"', '\n')


def tokenize_line(line: str) -> list[str]:
    """Split one line into fields, honouring double quotes and ``""`` escapes.

    An unterminated quote is tolerated: the rest of the line lands in the
    current field.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch == '"':
            if in_quotes and i + 1 < n and line[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif ch == ',' and not in_quotes:
            fields.append(''.join(current))
            current = []
        else:
            current.append(ch)
        i += 1
    fields.append(''.join(current))
    return fields


def parse_document(text: str) -> list[tuple[str, str]]:
    """Parse headerless two-column text into ordered (prompt, response) pairs.

    Blank lines are skipped, columns past the second are ignored, and rows
    whose two columns are both empty after trimming are dropped.
    """
    pairs: list[tuple[str, str]] = []
    for raw in _LINE_BREAK.split(text):
        line = raw.strip()
        if not line:
            continue
        cols = tokenize_line(line)
        prompt = cols[0].strip()
        response = cols[1].strip() if len(cols) > 1 else ''
        if prompt or response:
            pairs.append((prompt, response))
    return pairs


def quote_field(value: str) -> str:
    if any(token in value for token in _NEEDS_QUOTING):
        return '"' + value.replace('"', '""') + '"'
    return value


def serialize(entries: Iterable[Entry]) -> str:
    """Render entries back to delimited text.

    Separators become single-field ``#title`` rows. Re-importing such a row
    yields a card with prompt ``#title`` and an empty response, not a
    separator.
    """
    rows: list[str] = []
    for entry in entries:
        match entry:
            case Separator(title=title):
                rows.append(quote_field(f'#{title}'))
            case Card(prompt=prompt, response=response):
                rows.append(f'{quote_field(prompt)},{quote_field(response)}')
            case _:
                raise TypeError(f'Unknown entry type: {type(entry).__name__}')
    return '\n'.join(rows)
