"""Inline markup: turns one line of text into styled ADF text runs.

Supported forms, in the order they are tried at each position::

    [label](target)   link
    `code`            inline code
    **text** __text__ strong
    ~~text~~          strike
    *text* _text_     emphasis

The first matcher that succeeds at a position wins and the scan resumes right
after its span. Runs carry at most one mark, so ``***x***`` is not bold+italic.
"""

from __future__ import annotations

import re
from typing import Callable

from jira_mcp_server.adf.nodes import Mark, MarkType, Text

_Builder = Callable[[re.Match[str]], Text]


def _marked(mark_type: MarkType) -> _Builder:
    mark = Mark(type=mark_type)
    return lambda m: Text(content=m.group(1), marks=(mark,))


def _link(m: re.Match[str]) -> Text:
    return Text(content=m.group(1), marks=(Mark.link(m.group(2)),))


MATCHERS: tuple[tuple[re.Pattern[str], _Builder], ...] = (
    (re.compile(r"\[([^\]]+)\]\(([^)]+)\)"), _link),
    (re.compile(r"`([^`]+)`"), _marked(MarkType.CODE)),
    (re.compile(r"\*\*([^*]+)\*\*"), _marked(MarkType.STRONG)),
    (re.compile(r"__([^_]+)__"), _marked(MarkType.STRONG)),
    (re.compile(r"~~([^~]+)~~"), _marked(MarkType.STRIKE)),
    (re.compile(r"\*([^*]+)\*"), _marked(MarkType.EMPHASIS)),
    (re.compile(r"_([^_]+)_"), _marked(MarkType.EMPHASIS)),
)

# Every matcher opens with one of these characters
_OPENERS = frozenset("[`*_~")


def match_at(line: str, pos: int) -> tuple[Text, int] | None:
    """Return the run produced by the first matcher at ``pos`` and the end of its span."""
    if line[pos] not in _OPENERS:
        return None
    for pattern, build in MATCHERS:
        m = pattern.match(line, pos)
        if m:
            return build(m), m.end()
    return None


def format_inline(line: str) -> list[Text]:
    """Split a line into plain and marked text runs. Never returns an empty list."""
    runs: list[Text] = []
    plain_start = 0
    pos = 0
    while pos < len(line):
        found = match_at(line, pos)
        if found is None:
            pos += 1
            continue
        run, end = found
        if plain_start < pos:
            runs.append(Text(content=line[plain_start:pos]))
        runs.append(run)
        pos = plain_start = end

    if plain_start < len(line):
        runs.append(Text(content=line[plain_start:]))
    return runs or [Text(content=line)]
