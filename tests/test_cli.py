"""Tests for the command line interface."""
import os
from pathlib import Path

import pytest
from typer.testing import CliRunner

from locali.adapters.cli.app import app

runner = CliRunner()


@pytest.fixture
def cli_home(tmp_path: Path, monkeypatch) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for key in ("LOCALI_HOME", "LOCALI_ROOT", "LOCALI_REPO", "LOCALI_BIN", "LOCALI_RC", "LOCALI_RECIPES"):
        monkeypatch.delenv(key, raising=False)
    return home


def test_callback_creates_layout(cli_home: Path) -> None:
    result = runner.invoke(app, ["recipes"])

    assert result.exit_code == 0
    assert (cli_home / ".local" / "bin").is_dir()
    assert (cli_home / ".local" / "repo").is_dir()
    assert (cli_home / ".localrc").is_file()
    assert "No recipes found" in result.output


def test_rc_appends_once(cli_home: Path) -> None:
    body = f'export PATH="{cli_home}/.local/bin:$PATH"\n'

    first = runner.invoke(app, ["rc", "local bin"], input=body)
    second = runner.invoke(app, ["rc", "local bin"], input=body)

    assert first.exit_code == 0, first.output
    assert second.exit_code == 0
    assert f"- Append to '{cli_home / '.localrc'}'" in first.output
    assert "skipped" in second.output
    assert (cli_home / ".localrc").read_text() == (
        '# local bin\nexport PATH="${HOME}/.local/bin:$PATH"\n\n'
    )


def test_append_requires_existing_file(cli_home: Path) -> None:
    result = runner.invoke(app, ["append", str(cli_home / "missing"), "x"])

    assert result.exit_code == 1
    assert not (cli_home / "missing").exists()


def test_append_content_argument(cli_home: Path) -> None:
    target = cli_home / ".bashrc"
    target.write_text("")

    result = runner.invoke(app, ["append", str(target), "source ~/.localrc"])

    assert result.exit_code == 0
    assert target.read_text() == "source ~/.localrc\n\n"


def test_link_replace_confirmed(cli_home: Path) -> None:
    src = cli_home / "vimrc"
    src.write_text("new")
    dst = cli_home / ".vimrc"
    dst.write_text("old")

    result = runner.invoke(app, ["link", str(src), str(dst)], input="y")

    assert result.exit_code == 0, result.output
    assert f"? Path '{dst}' already exists. Replace it? (y/n)" in result.output
    assert os.readlink(dst) == str(src)
    assert (cli_home / ".vimrc.bk").read_text() == "old"


def test_link_replace_declined_exits_nonzero(cli_home: Path) -> None:
    src = cli_home / "vimrc"
    src.write_text("new")
    dst = cli_home / ".vimrc"
    dst.write_text("old")

    result = runner.invoke(app, ["link", str(src), str(dst)], input="n")

    assert result.exit_code == 1
    assert dst.read_text() == "old"
    assert not dst.is_symlink()


def test_link_missing_source_exits_nonzero(cli_home: Path) -> None:
    result = runner.invoke(app, ["link", str(cli_home / "nope"), str(cli_home / "dst")])

    assert result.exit_code == 1
    assert not os.path.lexists(cli_home / "dst")


def test_backup_name(cli_home: Path) -> None:
    (cli_home / "f.bk").write_text("")

    result = runner.invoke(app, ["backup-name", str(cli_home / "f.bk")])

    assert result.exit_code == 0
    assert result.output.strip() == str(cli_home / "f.bk.0")


def test_realdir_follows_links(cli_home: Path) -> None:
    real = cli_home / "real"
    real.mkdir()
    (real / "tool").write_text("")
    os.symlink(real / "tool", cli_home / "tool")

    result = runner.invoke(app, ["realdir", str(cli_home / "tool")])

    assert result.exit_code == 0
    assert result.output.strip() == str(real)


def test_run_and_list_recipes(cli_home: Path) -> None:
    recipes = cli_home / ".config" / "locali" / "recipes"
    recipes.mkdir(parents=True)
    (recipes / "hello.toml").write_text(
        'description = "Say hello"\n'
        '[[step]]\nkind = "rc"\nlabel = "hello"\nbody = "export HELLO=1"\n'
    )
    (recipes / "broken.sh").write_text("# Always fails\nexit 1\n")

    listing = runner.invoke(app, ["recipes", "--plain"])
    ok = runner.invoke(app, ["run", "hello"])
    failed = runner.invoke(app, ["run", "hello", "broken", "hello"])

    assert listing.output.splitlines() == ["broken:Always fails", "hello:Say hello"]
    assert ok.exit_code == 0
    assert "* Done: 'hello'" in ok.output
    assert failed.exit_code == 1
    assert "* Abort: 'broken'" in failed.output
    assert failed.output.count("* Run: 'hello'") == 1
    assert (cli_home / ".localrc").read_text().count("# hello\nexport HELLO=1") == 1


def test_config_option_moves_root(cli_home: Path, tmp_path: Path) -> None:
    config = tmp_path / "locali.toml"
    config.write_text(f'local_root = "{tmp_path / "opt"}"\n')

    result = runner.invoke(app, ["--config", str(config), "recipes"])

    assert result.exit_code == 0
    assert (tmp_path / "opt" / "bin").is_dir()


def test_missing_config_file_is_an_error(cli_home: Path, tmp_path: Path) -> None:
    result = runner.invoke(app, ["--config", str(tmp_path / "nope.toml"), "recipes"])

    assert result.exit_code == 1
