import logging
import subprocess
from pathlib import Path

from pydantic import BaseModel

from . import git
from .commits import Commit, filter_reverted, parse_commit
from .version import RELEASE_TYPES, ReleaseType

logger = logging.getLogger("nextver")

PRESET = "conventionalcommits"
FEATURE_TYPES = {"feat", "feature"}


class BumpResult(BaseModel):
    ok: bool
    release_type: ReleaseType | None = None  # None: no qualifying commits
    level: int | None = None  # 0 major, 1 minor, 2 patch
    reason: str | None = None
    error: str | None = None
    since_tag: str | None = None
    commit_count: int = 0


def what_bump(commits: list[Commit], pre_major: bool = False) -> tuple[int | None, str]:
    """Bump level for ``commits`` and a human readable reason.

    Returns ``(None, reason)`` when there is nothing to release.
    """
    if not commits:
        return None, "No commits since last release"
    level = 2
    breakings = 0
    features = 0
    for commit in commits:
        if commit.notes:
            breakings += len(commit.notes)
            level = 0
        elif commit.type in FEATURE_TYPES:
            features += 1
            if level == 2:
                level = 1
    if pre_major and level < 2:
        level += 1
    verb = "is" if breakings == 1 else "are"
    plural = "" if breakings == 1 else "S"
    return level, f"There {verb} {breakings} BREAKING CHANGE{plural} and {features} features"


def _git_failure(e: Exception) -> str:
    if isinstance(e, subprocess.CalledProcessError):
        detail = (e.stderr or "").strip() or f"exit status {e.returncode}"
        return f"git {' '.join(e.cmd[1:2])} failed: {detail}"
    return f"git unavailable: {e}"


def recommend_bump(
    repo_root: Path,
    tag_prefix: str = "",
    path: str | None = None,
    ignore_reverted: bool = True,
    pre_major: bool = False,
) -> BumpResult:
    """Recommend a release type from commits since the last release tag.

    Git failures are reported in the result (``ok=False``), never raised.
    """
    try:
        tag = git.last_release_tag(repo_root, tag_prefix)
        raw = git.commit_messages(repo_root, since=tag, path=path)
    except (subprocess.CalledProcessError, OSError) as e:
        return BumpResult(ok=False, error=_git_failure(e))

    commits = [parse_commit(message, commit_hash) for commit_hash, message in raw]
    if ignore_reverted:
        commits = filter_reverted(commits)
    level, reason = what_bump(commits, pre_major=pre_major)
    result = BumpResult(
        ok=True,
        release_type=RELEASE_TYPES[level] if level is not None else None,
        level=level,
        reason=reason,
        since_tag=tag,
        commit_count=len(commits),
    )
    logger.debug(
        "%s: %d commit(s) since %s -> %s (%s)",
        PRESET,
        result.commit_count,
        tag or "start of history",
        result.release_type,
        reason,
    )
    return result
