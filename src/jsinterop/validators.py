"""Declaration building and the JSDoc completeness gate."""

from __future__ import annotations

import logging
from pathlib import PurePath

from .comments import extract_comments, extract_doc_block
from .models import (
    Accepted,
    CandidateDeclaration,
    DocumentationBlock,
    ExtractionResult,
    FunctionDescriptor,
    ModuleDescriptor,
    Outcome,
    Rejected,
)
from .naming import to_pascal_case
from .params import parse_parameters
from .scanner import scan_declarations
from .types import map_type

log = logging.getLogger(__name__)

MISSING_JSDOC = "missing required JSDoc comments (@param or @returns type tag)"


def has_valid_jsdoc(doc: DocumentationBlock) -> bool:
    """A declaration is documented when it has a @param or @returns type tag.

    Plain comments, however long, do not count.
    """
    return doc.has_tags


def build_declaration(candidate: CandidateDeclaration, text: str) -> Outcome:
    """Turn a scanner candidate into an Accepted or Rejected outcome."""
    doc = extract_doc_block(text, candidate.offset)
    comments = extract_comments(text, candidate.offset)

    if not has_valid_jsdoc(doc):
        return Rejected(candidate.name, MISSING_JSDOC, candidate.offset)

    parameters = parse_parameters(candidate.raw_parameters, doc)
    names = [p.name for p in parameters]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        return Rejected(
            candidate.name,
            f"duplicate parameter names: {', '.join(duplicates)}",
            candidate.offset,
        )

    if not candidate.raw_return_type and doc.return_type:
        return_type = map_type(doc.return_type)
    else:
        return_type = map_type(candidate.raw_return_type)

    return Accepted(
        FunctionDescriptor(
            name=candidate.name,
            parameters=tuple(parameters),
            return_type=return_type,
            is_async=candidate.is_async,
            documentation_lines=tuple(comments),
        )
    )


def module_name_for(source_path: str) -> str:
    """``src/user-profile.js`` -> ``UserProfile``."""
    return to_pascal_case(PurePath(source_path).stem)


def parse_module(text: str, source_path: str) -> ExtractionResult:
    """Extract every documented function from one JavaScript source.

    Undocumented declarations are logged and reported in ``rejected``; they
    never stop the rest of the file from being processed.
    """
    functions: list[FunctionDescriptor] = []
    rejected: list[Rejected] = []

    for candidate in scan_declarations(text):
        outcome = build_declaration(candidate, text)
        if isinstance(outcome, Rejected):
            log.error(
                "Function '%s' in %s rejected: %s",
                outcome.name,
                source_path,
                outcome.reason,
            )
            rejected.append(outcome)
            continue
        log.debug(
            "Accepted %s '%s' (%d params) -> %s",
            candidate.kind,
            candidate.name,
            len(outcome.function.parameters),
            outcome.function.return_type,
        )
        functions.append(outcome.function)

    module = ModuleDescriptor(
        module_name=module_name_for(source_path),
        source_path=source_path,
        functions=tuple(functions),
    )
    return ExtractionResult(module=module, rejected=rejected)
