from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path

from . import __version__
from .apply import add_shebang
from .core.context import RunContext
from .core.logging import log_event
from .errors import ScriptError
from .exit_codes import ERR_INTERNAL, ERR_USAGE, OK
from .manifest import resolve_targets

USAGE = "bang [OPTIONS] <filename> <executable>\n       bang [OPTIONS]"
DESCRIPTION = (
    "Add a shebang to a specific file, or to every file listed in the "
    '"bang" field of package.json when no arguments are given.'
)
KNOWN_OPTIONS = frozenset({"--help", "-h", "--version", "-v", "--force", "-f", "--dry-run", "-n"})
_OPTION_LIKE = re.compile(r"^--?\w+$")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="bang", usage=USAGE, description=DESCRIPTION, add_help=False)
    p.add_argument("-h", "--help", action="store_true", help="print this usage information")
    p.add_argument("-v", "--version", action="store_true", help="print the version number")
    p.add_argument("-f", "--force", action="store_true", help="overwrite an existing shebang")
    p.add_argument("-n", "--dry-run", action="store_true", help="preview changes without modifying files")
    return p


def split_args(argv: list[str]) -> tuple[list[str], list[str]]:
    """Separate known flags from positional values.

    Only tokens shaped like ``-x``/``--word`` count as options; anything else,
    ``-x.js`` or ``--out=1`` included, is a positional value.
    """
    flags: list[str] = []
    positional: list[str] = []
    for arg in argv:
        if arg in KNOWN_OPTIONS:
            flags.append(arg)
        elif _OPTION_LIKE.match(arg):
            raise ScriptError(f"Unknown option '{arg}'", ERR_USAGE, kind="usage")
        else:
            positional.append(arg)
    return flags, positional


def parse_args(argv: list[str]) -> argparse.Namespace:
    flags, positional = split_args(argv)
    if len(positional) not in (0, 2):
        raise ScriptError("Invalid number of arguments", ERR_USAGE, kind="usage")
    ns = build_parser().parse_args(flags)
    ns.positional = positional
    return ns


def run(ctx: RunContext, positional: list[str]) -> int:
    targets = resolve_targets(ctx, positional)
    log_event(ctx, "info", "cli", "start", targets=len(targets), force=ctx.options.force, dry_run=ctx.options.dry_run)
    for target in targets:
        add_shebang(ctx, target.path, target.command)
    return OK


def main(argv: list[str] | None = None, cwd: str | Path | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        ns = parse_args(args)
        if ns.help:
            build_parser().print_help(sys.stdout)
            return OK
        if ns.version:
            print(__version__)
            return OK
        ctx = RunContext.from_env(force=ns.force, dry_run=ns.dry_run, cwd=cwd)
        return run(ctx, ns.positional)
    except ScriptError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        if exc.kind == "usage":
            build_parser().print_usage(sys.stderr)
        return exc.code
    except Exception as exc:
        print(f"Error: internal error: {exc}", file=sys.stderr)
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
