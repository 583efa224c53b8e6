"""Tests for idempotent rc file writes."""
from pathlib import Path

import pytest

from locali.core.exceptions import NotFoundError
from locali.core.settings import LocalSettings
from locali.domain.rcfile import (
    AppendResult,
    ConfigBlock,
    contains_content,
    home_relpathed,
    localrc,
    require_content,
    require_file,
)


def test_block_renders_label_line_then_body() -> None:
    block = ConfigBlock(label="fzf", body="source ~/.fzf.bash")

    assert block.render() == "# fzf\nsource ~/.fzf.bash"


def test_contains_content_is_literal_and_whitespace_sensitive() -> None:
    assert contains_content("a\nexport X=1\nb", "export X=1")
    assert not contains_content("export X=1\n", "export X=1 ")
    assert not contains_content("export X=*", "export X=.")


def test_second_append_is_skipped(tmp_path: Path, notifier) -> None:
    rc = tmp_path / "rc"
    rc.touch()
    block = ConfigBlock("path", 'export PATH="$HOME/bin:$PATH"').render()

    assert require_content(rc, block, notifier) is AppendResult.APPENDED
    assert require_content(rc, block, notifier) is AppendResult.SKIPPED

    assert rc.read_text().count(block) == 1
    assert notifier.lines == [
        f"- Append to '{rc}'",
        f"- Content already in '{rc}'. skipped.",
    ]


def test_append_adds_blank_line_and_keeps_existing_text(tmp_path: Path, notifier) -> None:
    rc = tmp_path / "rc"
    rc.write_text("# existing\nalias ll='ls -l'\n")

    require_content(rc, "export A=1", notifier)

    assert rc.read_text() == "# existing\nalias ll='ls -l'\nexport A=1\n\n"


def test_content_inside_larger_text_counts_as_present(tmp_path: Path, notifier) -> None:
    rc = tmp_path / "rc"
    rc.write_text("before\nexport A=1\nafter\n")

    assert require_content(rc, "export A=1", notifier) is AppendResult.SKIPPED
    assert rc.read_text() == "before\nexport A=1\nafter\n"


def test_trailing_whitespace_difference_appends_again(tmp_path: Path, notifier) -> None:
    rc = tmp_path / "rc"
    rc.touch()

    require_content(rc, "export A=1", notifier)
    result = require_content(rc, "export A=1 \n# other", notifier)

    assert result is AppendResult.APPENDED


def test_missing_target_raises_not_found(tmp_path: Path, notifier) -> None:
    with pytest.raises(NotFoundError):
        require_content(tmp_path / "missing", "x", notifier)

    assert not (tmp_path / "missing").exists()


def test_require_file_overwrites(tmp_path: Path, notifier) -> None:
    target = tmp_path / "conf" / "tool.conf"

    require_file(target, "a = 1", notifier)
    require_file(target, "a = 2", notifier)

    assert target.read_text() == "a = 2\n"
    assert notifier.lines[-1] == f"- Write to '{target}'"


def test_home_relpathed_rewrites_local_root(settings: LocalSettings) -> None:
    text = f'export PATH="{settings.local_bin}:$PATH"\nsource {settings.local_repo}/z/z.sh'

    assert home_relpathed(text, settings) == (
        'export PATH="${HOME}/.local/bin:$PATH"\nsource ${HOME}/.local/repo/z/z.sh'
    )


def test_home_relpathed_leaves_other_paths(settings: LocalSettings) -> None:
    assert home_relpathed("/usr/local/bin", settings) == "/usr/local/bin"


def test_home_relpathed_ignores_root_outside_home(tmp_path: Path, home: Path) -> None:
    s = LocalSettings.from_config({"local_root": str(tmp_path / "opt")}, home=home)
    text = f"{tmp_path}/opt/bin"

    assert home_relpathed(text, s) == text


def test_localrc_appends_labeled_portable_block_once(settings: LocalSettings, notifier) -> None:
    body = f'export PATH="{settings.local_bin}:$PATH"'

    assert localrc(settings, "local bin", body, notifier) is AppendResult.APPENDED
    assert localrc(settings, "local bin", body, notifier) is AppendResult.SKIPPED

    assert settings.localrc.read_text() == (
        '# local bin\nexport PATH="${HOME}/.local/bin:$PATH"\n\n'
    )


def test_rc_file_with_non_utf8_bytes_is_appended_once(tmp_path: Path, notifier) -> None:
    rc = tmp_path / "rc"
    rc.write_bytes(b"# caf\xe9\nexport A=1\n")

    assert require_content(rc, "export B=2", notifier) is AppendResult.APPENDED
    assert require_content(rc, "export B=2", notifier) is AppendResult.SKIPPED
    assert require_content(rc, "export A=1", notifier) is AppendResult.SKIPPED

    assert rc.read_bytes() == b"# caf\xe9\nexport A=1\nexport B=2\n\n"
