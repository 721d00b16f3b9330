"""Signature scanner for top-level JavaScript function declarations.

Recognizes two shapes:

    export async function name(a, b): Type {
    export const name = async (a, b): Type => {

This is pattern matching, not parsing: bodies are never inspected and
parameter lists may not contain ``)``.
"""

from __future__ import annotations

import heapq
import re
from typing import Iterable, Iterator

from .models import CandidateDeclaration

FUNCTION_PATTERN = re.compile(
    r"\b(?:export\s+)?(?P<async>async\s+)?function\s+(?P<name>\w+)\s*"
    r"\((?P<params>[^)]*)\)\s*(?::\s*(?P<returns>[^{]+))?\s*\{",
    re.MULTILINE,
)
ARROW_PATTERN = re.compile(
    r"\b(?:export\s+)?(?:const|let|var)\s+(?P<name>\w+)\s*=\s*(?P<async>async\s+)?"
    r"\((?P<params>[^)]*)\)\s*(?::\s*(?P<returns>[^=]+))?\s*=>\s*\{?",
    re.MULTILINE,
)

# Characters before a match searched for a stray async keyword
ASYNC_WINDOW = 50

_ASYNC_WORD = re.compile(r"\basync\b")


def _is_async(text: str, match: re.Match) -> bool:
    if match.group("async"):
        return True
    window = text[max(0, match.start() - ASYNC_WINDOW) : match.start()]
    return bool(_ASYNC_WORD.search(window))


def _scan(
    text: str, pattern: re.Pattern, kind: str
) -> Iterator[CandidateDeclaration]:
    for match in pattern.finditer(text):
        yield CandidateDeclaration(
            name=match.group("name"),
            raw_parameters=match.group("params"),
            raw_return_type=(match.group("returns") or "").strip(),
            offset=match.start(),
            end=match.end(),
            is_async=_is_async(text, match),
            kind=kind,
        )


def drop_overlaps(
    candidates: Iterable[CandidateDeclaration],
) -> Iterator[CandidateDeclaration]:
    """Skip candidates whose span overlaps one already yielded.

    ``candidates`` must be ordered by offset.
    """
    last_end = -1
    for candidate in candidates:
        if candidate.offset < last_end:
            continue
        last_end = candidate.end
        yield candidate


def scan_declarations(text: str) -> Iterator[CandidateDeclaration]:
    """Yield candidate declarations in source order.

    Both shapes are matched independently and merged by offset, then
    overlapping matches are dropped so a declaration is never reported twice.
    """
    merged = heapq.merge(
        _scan(text, FUNCTION_PATTERN, "function"),
        _scan(text, ARROW_PATTERN, "arrow"),
        key=lambda c: c.offset,
    )
    yield from drop_overlaps(merged)
