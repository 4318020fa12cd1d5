import subprocess
from pathlib import Path

from .version import is_valid

# field / record separators for `git log --format`
FIELD_SEP = "\x01"
RECORD_SEP = "\x02"


def run_git(args: list[str], cwd: Path) -> str:
    """Run a read-only git command and return its stdout.

    Raises ``subprocess.CalledProcessError`` (with stderr captured) or
    ``OSError`` when git itself cannot be started.
    """
    return subprocess.run(
        ["git", *args], cwd=cwd, check=True, capture_output=True, text=True
    ).stdout


def last_release_tag(repo_root: Path, tag_prefix: str = "") -> str | None:
    """Most recent semver tag reachable from HEAD, walking history in date order."""
    out = run_git(
        ["log", "--decorate=short", "--no-color", "--date-order", "--simplify-by-decoration", "--format=%D"],
        repo_root,
    )
    for line in out.splitlines():
        for ref in line.split(","):
            ref = ref.strip()
            if not ref.startswith("tag: "):
                continue
            name = ref[len("tag: "):]
            if tag_prefix:
                if not name.startswith(tag_prefix):
                    continue
                candidate = name[len(tag_prefix):]
            else:
                candidate = name
            if is_valid(candidate):
                return name
    return None


def commit_messages(repo_root: Path, since: str | None = None, path: str | None = None) -> list[tuple[str, str]]:
    """(hash, full message) pairs for commits after ``since`` up to HEAD, newest first."""
    rev_range = f"{since}..HEAD" if since else "HEAD"
    args = ["log", f"--format=%H{FIELD_SEP}%B{RECORD_SEP}", rev_range]
    if path:
        args += ["--", path]
    out = run_git(args, repo_root)
    entries = []
    for block in out.split(RECORD_SEP):
        block = block.strip()
        if not block:
            continue
        commit_hash, _, message = block.partition(FIELD_SEP)
        entries.append((commit_hash.strip(), message))
    return entries
