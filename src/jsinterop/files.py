"""File discovery, output writing and the watch loop."""

from __future__ import annotations

import logging
from pathlib import Path, PurePath
from typing import Iterable

from watchfiles import Change, DefaultFilter, watch

from .config import GeneratorConfig
from .errors import JsInteropError, OutputWriteError, SourceReadError
from .generators import generate_wrapper
from .validators import parse_module

log = logging.getLogger(__name__)

_GLOB_CHARS = frozenset("*?[")


def _split_pattern(pattern: str, cwd: Path) -> tuple[Path, str]:
    """Split ``/a/b/**/*.js`` into a base directory and a relative glob."""
    parts = PurePath(pattern).parts
    for i, part in enumerate(parts):
        if _GLOB_CHARS & set(part):
            return cwd.joinpath(*parts[:i]), "/".join(parts[i:])
    return cwd.joinpath(*parts[:-1]), parts[-1] if parts else ""


def find_files(pattern: str, cwd: Path | str | None = None) -> list[Path]:
    """Return the sorted absolute paths of files matching a glob pattern.

    Relative patterns are resolved against ``cwd`` (default: the current
    directory). ``**`` matches any number of directories.
    """
    root = Path(cwd) if cwd is not None else Path.cwd()
    base, relative = _split_pattern(pattern, root)
    if not relative or not base.is_dir():
        return []
    return sorted(p.resolve() for p in base.glob(relative) if p.is_file())


def output_path_for(source: Path, config: GeneratorConfig) -> Path:
    return source.with_suffix(config.output_suffix)


def generate_file(source: Path | str, config: GeneratorConfig) -> Path:
    """Generate the wrapper for one JavaScript file, beside the input.

    Raises:
        SourceReadError: If the file cannot be read.
        OutputWriteError: If the generated file cannot be written.
    """
    source = Path(source)
    log.info("Processing: %s", source)

    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(f"Cannot read {source}: {e}", str(source)) from e

    result = parse_module(text, str(source))
    log.info(
        "  Found %d functions in '%s'",
        len(result.module.functions),
        result.module.module_name,
    )
    if result.rejected:
        log.warning(
            "  Skipped %d undocumented or invalid functions", len(result.rejected)
        )

    code = generate_wrapper(result.module, config)
    output = output_path_for(source, config)
    try:
        output.write_text(code, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(f"Cannot write {output}: {e}", str(output)) from e

    log.info("  Generated: %s", output)
    return output


def generate_files(files: Iterable[Path], config: GeneratorConfig) -> int:
    """Generate wrappers for each file; return the number of failures."""
    failures = 0
    for source in files:
        try:
            generate_file(source, config)
        except JsInteropError as e:
            log.error("  Error processing %s: %s", source, e)
            failures += 1
    return failures


def generate_all(
    pattern: str, config: GeneratorConfig, cwd: Path | str | None = None
) -> int:
    """Generate wrappers for every file matching ``pattern``.

    Returns:
        The number of files that failed. A pattern matching nothing is not
        a failure.
    """
    files = find_files(pattern, cwd)
    if not files:
        log.warning("No files found matching pattern: %s", pattern)
        return 0

    log.info("Found %d JavaScript files to process", len(files))
    failures = generate_files(files, config)
    if failures:
        log.error("Generation finished with %d failed files", failures)
    else:
        log.info("Generation completed successfully!")
    return failures


class JsFilter(DefaultFilter):
    """Pass create/modify events for .js files, outside ignored directories."""

    def __call__(self, change: Change, path: str) -> bool:
        if change == Change.deleted:
            return False
        return path.endswith(".js") and super().__call__(change, path)


def regenerate_changes(
    changes: Iterable[tuple[Change, str]],
    pattern: str,
    config: GeneratorConfig,
    cwd: Path | str | None = None,
) -> list[Path]:
    """Regenerate changed files that still match the active pattern."""
    matching = set(find_files(pattern, cwd))
    changed = sorted({Path(p).resolve() for change, p in changes})

    regenerated = []
    for source in changed:
        if source not in matching:
            log.debug("Ignoring change outside pattern: %s", source)
            continue
        log.info("File changed: %s", source)
        if generate_files([source], config) == 0:
            regenerated.append(source)
    return regenerated


def watch_and_generate(
    pattern: str,
    config: GeneratorConfig,
    cwd: Path | str | None = None,
    stop_event=None,
) -> int:
    """Generate all matching files, then regenerate them as they change.

    Blocks until interrupted (Ctrl+C) or ``stop_event`` is set.
    """
    files = find_files(pattern, cwd)
    if not files:
        log.warning("No files found matching pattern: %s", pattern)
        return 0

    failures = generate_files(files, config)

    directories = sorted({str(f.parent) for f in files})
    log.info("Watching %d JavaScript files for changes...", len(files))
    log.info("Press Ctrl+C to stop watching.")

    for changes in watch(
        *directories,
        watch_filter=JsFilter(),
        stop_event=stop_event,
        raise_interrupt=False,
    ):
        regenerate_changes(changes, pattern, config, cwd)

    log.info("Stopped watching files.")
    return failures
