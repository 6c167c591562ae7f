from __future__ import annotations

from enum import Enum
from pathlib import Path

from .core.context import RunContext
from .core.logging import log_event
from .errors import ScriptError
from .exit_codes import ERR_NOT_FOUND
from .shebang import create_shebang, has_shebang, strip_first_line

EXECUTABLE_MODE = 0o755


class Outcome(str, Enum):
    ADDED = "added"
    SKIPPED = "skipped"
    WOULD_ADD = "would-add"
    WOULD_SKIP = "would-skip"
    WOULD_REPLACE = "would-replace"


def render_outcome(outcome: Outcome, path: str, shebang: str) -> str:
    if outcome is Outcome.ADDED:
        return f"Added shebang '{shebang}' to '{path}' and made it executable"
    if outcome is Outcome.SKIPPED:
        return f"File '{path}' already has a shebang, skipping"
    if outcome is Outcome.WOULD_ADD:
        return f"Would add shebang '{shebang}' to '{path}'"
    if outcome is Outcome.WOULD_SKIP:
        return f"Would skip file '{path}'. It already has a shebang."
    return f"Would replace shebang in '{path}' with '{shebang}'"


def decide(existing: bool, force: bool, dry_run: bool) -> Outcome:
    if existing and not force:
        return Outcome.WOULD_SKIP if dry_run else Outcome.SKIPPED
    if dry_run:
        return Outcome.WOULD_REPLACE if existing else Outcome.WOULD_ADD
    return Outcome.ADDED


def _read_text(path: Path) -> str:
    with path.open("r", encoding="utf-8", newline="", errors="surrogateescape") as handle:
        return handle.read()


def _write_text(path: Path, content: str) -> None:
    with path.open("w", encoding="utf-8", newline="", errors="surrogateescape") as handle:
        handle.write(content)


def add_shebang(ctx: RunContext, file_path: str, executable: str) -> Outcome:
    """Apply the shebang for ``executable`` to ``file_path`` and report the outcome.

    A missing file raises ``ScriptError``; the caller is expected to stop the
    batch there.
    """
    target = ctx.resolve(file_path)
    if not target.exists():
        raise ScriptError(f"File '{file_path}' does not exist", ERR_NOT_FOUND, kind="file_not_found")
    if not target.is_file():
        raise ScriptError(f"File '{file_path}' is not a regular file", ERR_NOT_FOUND, kind="not_a_file")

    content = _read_text(target)
    shebang = create_shebang(executable)
    existing = has_shebang(content)
    outcome = decide(existing, ctx.options.force, ctx.options.dry_run)
    log_event(ctx, "debug", "apply", "decide", path=file_path, existing=existing, outcome=outcome.value)

    if outcome is Outcome.ADDED:
        if existing:
            content = strip_first_line(content)
        _write_text(target, f"{shebang}\n{content}")
        target.chmod(EXECUTABLE_MODE)
        log_event(ctx, "info", "apply", "write", path=str(target), mode=oct(EXECUTABLE_MODE))

    print(render_outcome(outcome, file_path, shebang))
    return outcome
