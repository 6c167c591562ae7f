from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from bang.shebang import create_shebang, has_shebang, strip_first_line

_WORD = st.from_regex(r"[a-z0-9_./][a-z0-9_./=-]{0,11}", fullmatch=True)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("node", "#!/usr/bin/env node"),
        ("python3", "#!/usr/bin/env python3"),
        ("node --experimental-modules", "#!/usr/bin/env -S node --experimental-modules"),
        ("uv run --script", "#!/usr/bin/env -S uv run --script"),
        ("python3 -u -W ignore", "#!/usr/bin/env -S python3 -u -W ignore"),
        ("-S node", "#!/usr/bin/env node"),
        ("-S uv run --script", "#!/usr/bin/env -S uv run --script"),
        ("-S   deno run", "#!/usr/bin/env -S deno run"),
    ],
)
def test_create_shebang_known_commands(raw: str, expected: str) -> None:
    assert create_shebang(raw) == expected


@pytest.mark.unit
@given(_WORD)
def test_single_token_commands_use_plain_env(command: str) -> None:
    assert create_shebang(command) == f"#!/usr/bin/env {command}"


@pytest.mark.unit
@given(st.lists(_WORD, min_size=2, max_size=5))
def test_commands_with_arguments_use_split_string(words: list[str]) -> None:
    command = " ".join(words)
    assert create_shebang(command) == f"#!/usr/bin/env -S {command}"
    assert create_shebang(f"-S {command}") == f"#!/usr/bin/env -S {command}"


@pytest.mark.unit
def test_minus_s_without_whitespace_is_kept() -> None:
    assert create_shebang("-Snode") == "#!/usr/bin/env -Snode"


@pytest.mark.unit
def test_has_shebang_is_a_prefix_check() -> None:
    assert has_shebang("#!/bin/bash\necho hi")
    assert has_shebang("#! not really an interpreter")
    assert not has_shebang(" #!/bin/bash")
    assert not has_shebang("")


@pytest.mark.unit
def test_strip_first_line_keeps_the_rest_verbatim() -> None:
    assert strip_first_line("#!/bin/bash\necho a\n\necho b\n") == "echo a\n\necho b\n"
    assert strip_first_line("#!/bin/bash") == ""
