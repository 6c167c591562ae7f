from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .env import env_flag, getenv


@dataclass(frozen=True)
class Options:
    force: bool = False
    dry_run: bool = False


@dataclass(frozen=True)
class RunContext:
    cwd: Path
    options: Options
    manifest_path: Path | None = None
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_env(
        cls,
        force: bool = False,
        dry_run: bool = False,
        cwd: str | Path | None = None,
    ) -> "RunContext":
        root = Path(cwd) if cwd is not None else Path.cwd()
        manifest = getenv("BANG_MANIFEST")
        return cls(
            cwd=root,
            options=Options(force=force, dry_run=dry_run),
            manifest_path=Path(manifest) if manifest else None,
            verbose=env_flag("BANG_VERBOSE"),
            log_json=env_flag("BANG_LOG_JSON"),
        )

    def resolve(self, path: str | Path) -> Path:
        candidate = Path(path)
        return candidate if candidate.is_absolute() else self.cwd / candidate
