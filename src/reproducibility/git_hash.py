"""Git hash capture with dirty-tree detection.

Stores the short git SHA with each result.json so a cycle search can be
traced back to the code version that produced it.
"""

import subprocess
from pathlib import Path


def _git(args: list[str], cwd: str | Path | None) -> str:
    return subprocess.check_output(
        ["git", *args],
        cwd=cwd,
        stderr=subprocess.DEVNULL,
    ).decode().strip()


def get_git_hash(cwd: str | Path | None = None) -> str:
    """Get the short git SHA of HEAD, flagged when the tree has changes.

    Tracked files with staged or unstaged modifications append '-dirty'.
    Untracked files are ignored.

    Args:
        cwd: Directory inside the repository; defaults to the process cwd.

    Returns:
        "a3f9c1d", "a3f9c1d-dirty", or "unknown" outside a repository or
        when git is not installed.
    """
    try:
        sha = _git(["rev-parse", "--short", "HEAD"], cwd)
        status = _git(["status", "--porcelain", "--untracked-files=no"], cwd)
    except (subprocess.CalledProcessError, FileNotFoundError, NotADirectoryError):
        return "unknown"

    return f"{sha}-dirty" if status else sha
