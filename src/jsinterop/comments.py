"""Comment and JSDoc extraction for a declaration offset."""

from __future__ import annotations

import re

from .models import DocumentationBlock

_PARAM_TAG = re.compile(r"@param\s+\{([^}]+)\}\s+(\w+)")
_RETURN_TAG = re.compile(r"@returns?\s+\{([^}]+)\}")


def _preceding_lines(text: str, offset: int) -> list[str]:
    """Lines above ``offset``, including the non-blank part of its own line."""
    lines = text[:offset].split("\n")
    if not lines[-1].strip():
        lines.pop()
    return lines


def _is_comment_line(line: str, in_block: bool) -> bool:
    """Walking upward, a line is a comment if it starts with a marker, closes a
    block without opening one, or sits inside a block already entered."""
    if line.startswith(("//", "/*", "*")) or in_block:
        return True
    return line.endswith("*/") and "/*" not in line


def _strip_markers(line: str) -> str:
    if line.startswith("//"):
        return line[2:].strip()
    line = line.lstrip("/*")
    if line.endswith("*/"):
        line = line[:-2]
    return line.strip()


def extract_comments(text: str, offset: int) -> list[str]:
    """Collect the comment lines directly above a declaration.

    Walks backward from ``offset`` and stops at the first blank or code line.
    Comment markers (``//``, ``/**``, ``*``, ``*/``) are stripped, and lines
    left empty are dropped.
    """
    comments: list[str] = []
    in_block = False
    for line in reversed(_preceding_lines(text, offset)):
        stripped = line.strip()
        if not stripped or not _is_comment_line(stripped, in_block):
            break
        if stripped.endswith("*/") and not stripped.startswith("//"):
            in_block = True
        if stripped.startswith("/*"):
            in_block = False
        content = _strip_markers(stripped)
        if content:
            comments.append(content)
    comments.reverse()
    return comments


def _find_doc_lines(text: str, offset: int) -> list[str]:
    """Return the lines of the /** */ block adjacent to ``offset``, top-down."""
    lines = _preceding_lines(text, offset)
    i = len(lines) - 1

    # Line comments may sit between the block and the declaration
    while i >= 0 and lines[i].strip().startswith("//"):
        i -= 1
    if i < 0 or not lines[i].strip().endswith("*/"):
        return []

    block: list[str] = []
    while i >= 0:
        stripped = lines[i].strip()
        start = stripped.rfind("/*")
        if start >= 0:
            block.append(stripped[start:])
            break
        block.append(stripped)
        i -= 1
    else:
        return []

    if not block[-1].startswith("/**"):
        return []
    block.reverse()
    return block


def parse_doc_block(content: str) -> DocumentationBlock:
    """Parse @param and @returns type tags out of JSDoc text."""
    parameter_types = {
        match.group(2): match.group(1).strip()
        for match in _PARAM_TAG.finditer(content)
    }
    return_match = _RETURN_TAG.search(content)
    return DocumentationBlock(
        parameter_types=parameter_types,
        return_type=return_match.group(1).strip() if return_match else None,
    )


def extract_doc_block(text: str, offset: int) -> DocumentationBlock:
    """Recover the structured JSDoc block immediately preceding ``offset``.

    Blank or code lines between the block and the declaration break the
    association, and so does a block opened with plain ``/*``.
    """
    doc_lines = _find_doc_lines(text, offset)
    if not doc_lines:
        return DocumentationBlock()
    return parse_doc_block("\n".join(doc_lines))
