from typing import Literal

import semver

from .errors import VersionComputationError

ReleaseType = Literal["major", "minor", "patch"]
RELEASE_TYPES: tuple[ReleaseType, ...] = ("major", "minor", "patch")


def _parse(version: str) -> semver.Version:
    # tags and VERSION files are often written as v1.2.3
    return semver.Version.parse(version.strip().removeprefix("v"))


def is_valid(version: str) -> bool:
    try:
        _parse(version)
    except (TypeError, ValueError):
        return False
    return True


def increment(current: str, release_type: str) -> str:
    """Return ``current`` advanced by one ``release_type`` step.

    A prerelease of the target version is promoted rather than skipped
    (``1.3.0-rc.1`` + minor -> ``1.3.0``); build metadata is dropped.
    """
    if release_type not in RELEASE_TYPES:
        raise VersionComputationError(f"unknown release type: {release_type!r}")
    try:
        version = _parse(current).replace(build=None)
    except (TypeError, ValueError) as e:
        raise VersionComputationError(f"invalid version {current!r}: {e}") from e
    return str(version.next_version(release_type))
