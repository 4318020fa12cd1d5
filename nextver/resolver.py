from pydantic import BaseModel

from . import bump as B
from . import version as V
from .config import Settings
from .errors import AnalysisError, ConfigurationError


class Resolution(BaseModel):
    current_version: str
    next_version: str
    release_type: str | None = None
    reason: str | None = None


def read_current_version(settings: Settings) -> str:
    path = settings.version_path
    if not path.is_file():
        raise ConfigurationError("VERSION file not found")
    try:
        # undecodable bytes surface later as an increment failure
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ConfigurationError(f"VERSION file unreadable: {e}") from e
    return text.strip()


def resolve(settings: Settings) -> Resolution:
    """Compute the next version from the VERSION file and unreleased commits.

    The current version is not validated up front; a malformed value only
    fails when it has to be incremented.
    """
    current = read_current_version(settings)

    rec = B.recommend_bump(
        settings.repo_root,
        tag_prefix=settings.tag_prefix,
        path=settings.path,
        ignore_reverted=settings.ignore_reverted,
        pre_major=settings.pre_major,
    )
    if not rec.ok:
        raise AnalysisError(rec.error or "unknown error")
    if rec.release_type is None:
        # nothing releasable since the last tag
        return Resolution(current_version=current, next_version=current, reason=rec.reason)

    nxt = V.increment(current, rec.release_type)
    return Resolution(
        current_version=current, next_version=nxt, release_type=rec.release_type, reason=rec.reason
    )
