"""
Git operations on the zsh config directory.

Status, log, diff, commit, pull, push and init for the directory that
holds the shared zsh files (``~/.zsh`` by default).  Results follow the
service convention: dicts, with an ``error`` key on failure.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from zshdeck.core.models.paths import ShellPaths

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  Low-level runner
# ═══════════════════════════════════════════════════════════════════


def run_git(
    *args: str,
    cwd: Path,
    timeout: int = 15,
) -> subprocess.CompletedProcess[str]:
    """Run a git command and return the result."""
    return subprocess.run(
        ["git", *args],
        cwd=str(cwd),
        capture_output=True,
        text=True,
        timeout=timeout,
    )


def _repo_dir(paths: ShellPaths) -> Path | dict:
    """The config directory, or an error dict if git can't run there."""
    if shutil.which("git") is None:
        return {"error": "git is not installed"}
    if paths.config_dir is None:
        return {"error": "No config directory configured"}
    if not paths.config_dir.is_dir():
        return {"error": f"Config directory not found: {paths.config_dir}"}
    return paths.config_dir


def _run_guarded(
    root: Path, *args: str, timeout: int = 15,
) -> subprocess.CompletedProcess[str] | dict:
    """Run git; the completed process, or an error dict if it could not run."""
    try:
        return run_git(*args, cwd=root, timeout=timeout)
    except subprocess.TimeoutExpired:
        return {"error": f"git {args[0]} timed out after {timeout}s"}
    except OSError as e:
        return {"error": f"Failed to execute git: {e}"}


def _run_checked(root: Path, *args: str, timeout: int = 15) -> str | dict:
    """Run git; stdout on success, error dict on failure."""
    r = _run_guarded(root, *args, timeout=timeout)
    if isinstance(r, dict):
        return r
    if r.returncode != 0:
        return {"error": f"git {args[0]} failed: {r.stderr.strip()}"}
    return r.stdout


# ═══════════════════════════════════════════════════════════════════
#  Operations
# ═══════════════════════════════════════════════════════════════════


def git_status(paths: ShellPaths) -> dict:
    """Branch, clean state, ahead/behind, modified and untracked files."""
    root = _repo_dir(paths)
    if isinstance(root, dict):
        return root

    branch = _run_checked(root, "rev-parse", "--abbrev-ref", "HEAD")
    if isinstance(branch, dict):
        return {"error": "Not a git repository", "available": False}

    porcelain = _run_checked(root, "status", "--porcelain")
    if isinstance(porcelain, dict):
        return porcelain

    modified: list[str] = []
    untracked: list[str] = []
    for line in porcelain.splitlines():
        if len(line) < 3:
            continue
        code, fname = line[:2], line[3:].strip()
        if code == "??":
            untracked.append(fname)
        elif code.strip():
            modified.append(fname)

    # Ahead/behind the upstream, when one is configured
    ahead = behind = 0
    counts = _run_checked(root, "rev-list", "--left-right", "--count", "HEAD...@{u}")
    if isinstance(counts, str):
        parts = counts.split()
        if len(parts) == 2:
            ahead, behind = int(parts[0]), int(parts[1])

    return {
        "available": True,
        "branch": branch.strip(),
        "clean": not modified and not untracked,
        "ahead": ahead,
        "behind": behind,
        "modified": modified,
        "untracked": untracked,
    }


def git_log(paths: ShellPaths, *, n: int = 10) -> dict:
    """Recent commit history."""
    root = _repo_dir(paths)
    if isinstance(root, dict):
        return root

    out = _run_checked(root, "log", f"-{max(1, min(n, 100))}", "--format=%H%n%s%n%an%n%aI%n---")
    if isinstance(out, dict):
        return {**out, "commits": []}

    commits = []
    for entry in out.split("---\n"):
        lines = entry.strip().splitlines()
        if len(lines) >= 4:
            commits.append({
                "hash": lines[0],
                "message": lines[1],
                "author": lines[2],
                "date": lines[3],
            })
    return {"commits": commits}


def git_diff(paths: ShellPaths) -> dict:
    """Unstaged diff of the config directory."""
    root = _repo_dir(paths)
    if isinstance(root, dict):
        return root

    out = _run_checked(root, "diff")
    if isinstance(out, dict):
        return out
    return {"diff": out}


def git_commit(paths: ShellPaths, message: str) -> dict:
    """Stage everything and commit."""
    if not message.strip():
        return {"error": "Commit message is required"}

    root = _repo_dir(paths)
    if isinstance(root, dict):
        return root

    staged = _run_checked(root, "add", "-A")
    if isinstance(staged, dict):
        return staged

    r_diff = _run_guarded(root, "diff", "--cached", "--quiet")
    if isinstance(r_diff, dict):
        return r_diff
    if r_diff.returncode == 0:
        return {"error": "Nothing to commit (no staged changes)"}

    out = _run_checked(root, "commit", "-m", message, timeout=30)
    if isinstance(out, dict):
        return out

    short = _run_checked(root, "rev-parse", "--short", "HEAD")
    new_hash = short.strip() if isinstance(short, str) else "?"

    logger.info("Committed %s in %s", new_hash, root)
    return {"ok": True, "hash": new_hash, "message": message}


def git_pull(paths: ShellPaths, *, rebase: bool = True) -> dict:
    """Pull from the remote (rebase by default)."""
    root = _repo_dir(paths)
    if isinstance(root, dict):
        return root

    args = ["pull", "--rebase"] if rebase else ["pull"]
    out = _run_checked(root, *args, timeout=60)
    if isinstance(out, dict):
        return out
    return {"ok": True, "output": out.strip()}


def git_push(paths: ShellPaths) -> dict:
    """Push to the remote."""
    root = _repo_dir(paths)
    if isinstance(root, dict):
        return root

    out = _run_checked(root, "push", timeout=60)
    if isinstance(out, dict):
        return out
    return {"ok": True, "output": out.strip()}


def git_init(paths: ShellPaths) -> dict:
    """Initialize a repository in the config directory (created if needed)."""
    if paths.config_dir is None:
        return {"error": "No config directory configured"}
    if shutil.which("git") is None:
        return {"error": "git is not installed"}

    paths.config_dir.mkdir(parents=True, exist_ok=True)
    out = _run_checked(paths.config_dir, "init")
    if isinstance(out, dict):
        return out

    logger.info("Initialized git repository in %s", paths.config_dir)
    return {"ok": True, "output": out.strip()}
