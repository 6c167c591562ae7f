from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

from bang.core.context import Options, RunContext

ROOT = Path(__file__).resolve().parents[1]
GOLDENS_ROOT = ROOT / "tests/goldens"


def run_bang(*args: str, cwd: Path, env: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
    run_env = {k: v for k, v in os.environ.items() if not k.startswith("BANG_")}
    run_env["PYTHONPATH"] = str(ROOT / "src")
    run_env.update(env or {})
    return subprocess.run(
        [sys.executable, "-m", "bang", *args],
        cwd=cwd,
        env=run_env,
        text=True,
        capture_output=True,
        check=False,
    )


def make_ctx(cwd: Path, force: bool = False, dry_run: bool = False, manifest: Path | None = None) -> RunContext:
    return RunContext(cwd=cwd, options=Options(force=force, dry_run=dry_run), manifest_path=manifest)


def golden_text(name: str) -> str:
    return (GOLDENS_ROOT / name).read_text(encoding="utf-8").strip()
