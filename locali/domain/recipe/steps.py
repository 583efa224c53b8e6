"""
TOML recipe step execution
"""
import subprocess
from typing import Any, Callable, Dict, Optional, Tuple

from ...core.constants import DEFAULT_SHELL
from ...core.exceptions import RecipeError
from ...core.logging import get_logger
from ..link import repo_bin, repo_sym, symlink
from ..rcfile import localrc, require_content, require_file
from ..repo import repo_get, repo_git, repo_run, repo_zip
from .models import RecipeContext, RecipeStep

logger = get_logger(__name__)

# kind -> (required params, optional params)
STEP_PARAMS: Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {
    "git": (("url",), ("name",)),
    "zip": (("url", "name"), ()),
    "get": (("url", "name"), ()),
    "bin": (("path",), ()),
    "sym": (("path", "dest"), ()),
    "link": (("src", "dest"), ()),
    "rc": (("label", "body"), ()),
    "content": (("path", "content"), ()),
    "file": (("path", "content"), ()),
    "run": (("path",), ("args",)),
    "shell": (("command",), ()),
}

# params holding a list; every other param is a string
LIST_PARAMS = frozenset({"args"})


def validate_step(step: RecipeStep) -> None:
    """
    Check a step's kind and parameters.

    Raises:
        RecipeError: If the kind is unknown or parameters are missing, unexpected or mistyped
    """
    if step.kind not in STEP_PARAMS:
        raise RecipeError(f"Unknown step kind: {step.kind}")

    required, optional = STEP_PARAMS[step.kind]
    missing = [p for p in required if p not in step.params]
    if missing:
        raise RecipeError(f"Step '{step.kind}' is missing: {', '.join(missing)}")

    unexpected = set(step.params) - set(required) - set(optional)
    if unexpected:
        raise RecipeError(f"Step '{step.kind}' got unexpected: {', '.join(sorted(unexpected))}")

    for key, value in step.params.items():
        expected = list if key in LIST_PARAMS else str
        if not isinstance(value, expected):
            raise RecipeError(
                f"Step '{step.kind}' parameter '{key}' must be a {expected.__name__}, "
                f"got: {value!r}"
            )


def _expand(ctx: RecipeContext, path: str) -> str:
    if path == "~" or path.startswith("~/"):
        return str(ctx.settings.home / path[2:])
    return path


def _git(ctx: RecipeContext, p: Dict[str, Any]) -> Optional[str]:
    repo_git(ctx.settings, p["url"], ctx.notifier, name=p.get("name"))
    return None


def _zip(ctx: RecipeContext, p: Dict[str, Any]) -> Optional[str]:
    repo_zip(ctx.settings, p["url"], p["name"], ctx.notifier)
    return None


def _get(ctx: RecipeContext, p: Dict[str, Any]) -> Optional[str]:
    repo_get(ctx.settings, p["url"], p["name"], ctx.notifier)
    return None


def _bin(ctx: RecipeContext, p: Dict[str, Any]) -> Optional[str]:
    outcome = repo_bin(ctx.settings, p["path"], ctx.prompt, ctx.notifier)
    return None if outcome.ok else f"link {outcome.value}: {p['path']}"


def _sym(ctx: RecipeContext, p: Dict[str, Any]) -> Optional[str]:
    outcome = repo_sym(ctx.settings, p["path"], _expand(ctx, p["dest"]), ctx.prompt, ctx.notifier)
    return None if outcome.ok else f"link {outcome.value}: {p['dest']}"


def _link(ctx: RecipeContext, p: Dict[str, Any]) -> Optional[str]:
    outcome = symlink(_expand(ctx, p["src"]), _expand(ctx, p["dest"]), ctx.prompt, ctx.notifier)
    return None if outcome.ok else f"link {outcome.value}: {p['dest']}"


def _rc(ctx: RecipeContext, p: Dict[str, Any]) -> Optional[str]:
    localrc(ctx.settings, p["label"], p["body"].rstrip("\n"), ctx.notifier)
    return None


def _content(ctx: RecipeContext, p: Dict[str, Any]) -> Optional[str]:
    require_content(_expand(ctx, p["path"]), p["content"], ctx.notifier)
    return None


def _file(ctx: RecipeContext, p: Dict[str, Any]) -> Optional[str]:
    require_file(_expand(ctx, p["path"]), p["content"], ctx.notifier)
    return None


def _run(ctx: RecipeContext, p: Dict[str, Any]) -> Optional[str]:
    repo_run(ctx.settings, p["path"], ctx.notifier, args=[str(a) for a in p.get("args", [])])
    return None


def _shell(ctx: RecipeContext, p: Dict[str, Any]) -> Optional[str]:
    ctx.notifier.info(f"Shell '{p['command']}'")
    code = subprocess.run([DEFAULT_SHELL, "-c", p["command"]], env=ctx.settings.environ()).returncode
    return None if code == 0 else f"shell exited with {code}"


STEP_HANDLERS: Dict[str, Callable[[RecipeContext, Dict[str, Any]], Optional[str]]] = {
    "git": _git,
    "zip": _zip,
    "get": _get,
    "bin": _bin,
    "sym": _sym,
    "link": _link,
    "rc": _rc,
    "content": _content,
    "file": _file,
    "run": _run,
    "shell": _shell,
}


def run_step(step: RecipeStep, context: RecipeContext) -> Optional[str]:
    """
    Execute one step.

    Returns:
        None on success, otherwise a failure message

    Raises:
        LocaliError / OSError: Propagated from the underlying operation
    """
    logger.debug(f"[step] {step.describe()}")
    return STEP_HANDLERS[step.kind](context, step.params)
