"""Interpreter line synthesis and detection."""

from __future__ import annotations

import re

ENV_PREFIX = "#!/usr/bin/env"
SHEBANG_MARKER = "#!"

_SPLIT_FLAG = re.compile(r"^-S\s+")


def create_shebang(executable: str) -> str:
    """Return the ``#!/usr/bin/env`` line for ``executable``, without a newline.

    A leading ``-S`` supplied by the caller is dropped. Commands that still
    carry arguments get ``env -S`` so the kernel passes them through as one
    split string.
    """
    command = _SPLIT_FLAG.sub("", executable)
    if " " in command:
        return f"{ENV_PREFIX} -S {command}"
    return f"{ENV_PREFIX} {command}"


def has_shebang(content: str) -> bool:
    return content.startswith(SHEBANG_MARKER)


def strip_first_line(content: str) -> str:
    # the first line is assumed to be the old interpreter line; it is not parsed
    return "\n".join(content.split("\n")[1:])
