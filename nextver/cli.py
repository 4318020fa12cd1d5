import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .config import load_settings
from .errors import AnalysisError, NextVersionError, VersionComputationError
from .resolver import resolve

logger = logging.getLogger("nextver")
if not logger.handlers:
    handler = logging.StreamHandler()  # stderr; stdout carries only the version
    logger.addHandler(handler)
logger.setLevel(logging.WARNING)


def _diagnostic(err: NextVersionError) -> str:
    if isinstance(err, AnalysisError):
        return f"Error determining recommended bump: {err}"
    if isinstance(err, VersionComputationError):
        return f"Failed to increment version: {err}"
    return str(err)


def main(root: Path | None = None) -> int:
    """Print the next version and return the process exit status.

    ``root`` is the repository the VERSION file and git history belong to;
    NEXTVER_REPO_ROOT overrides it, the working directory is the fallback.
    """
    root = root or Path.cwd()
    # values already in the environment win over the repository .env
    load_dotenv(root / ".env")
    try:
        settings = load_settings(root)
    except NextVersionError as e:
        print(_diagnostic(e), file=sys.stderr)
        return 1
    logger.setLevel(settings.log_level)

    try:
        res = resolve(settings)
    except NextVersionError as e:
        print(_diagnostic(e), file=sys.stderr)
        return 1

    if settings.structured_logging:
        logger.info(json.dumps({"event": "version_resolved", **res.model_dump()}))
    else:
        logger.info("%s -> %s (%s)", res.current_version, res.next_version, res.reason)
    print(res.next_version)
    return 0


def run() -> None:
    # console script entrypoint: `nextver`
    raise SystemExit(main())
