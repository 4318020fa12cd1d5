import os
from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator

from .errors import ConfigurationError


class Settings(BaseModel):
    # inputs
    repo_root: Path
    version_file: Path = Path("VERSION")  # NEXTVER_VERSION_FILE, relative to repo_root

    # commit analysis
    tag_prefix: str = ""  # NEXTVER_TAG_PREFIX
    path: str | None = None  # NEXTVER_PATH (limit commits to a subdirectory)
    ignore_reverted: bool = True  # NEXTVER_IGNORE_REVERTED
    pre_major: bool = False  # NEXTVER_PRE_MAJOR (0.x projects: breaking -> minor)

    # logging
    structured_logging: bool = True  # NEXTVER_STRUCT_LOG ("0" to disable)
    log_level: str = "WARNING"  # NEXTVER_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {v!r}")
        return v

    @property
    def version_path(self) -> Path:
        if self.version_file.is_absolute():
            return self.version_file
        return self.repo_root / self.version_file


def load_settings(default_root: Path) -> Settings:
    """Build Settings from NEXTVER_* environment variables.

    ``default_root`` is used when NEXTVER_REPO_ROOT is not set.
    """
    try:
        return Settings(
            repo_root=os.getenv("NEXTVER_REPO_ROOT") or default_root,
            version_file=os.getenv("NEXTVER_VERSION_FILE") or "VERSION",
            tag_prefix=os.getenv("NEXTVER_TAG_PREFIX", ""),
            path=os.getenv("NEXTVER_PATH") or None,
            ignore_reverted=os.getenv("NEXTVER_IGNORE_REVERTED", "1"),
            pre_major=os.getenv("NEXTVER_PRE_MAJOR", "0"),
            structured_logging=os.getenv("NEXTVER_STRUCT_LOG", "1") != "0",
            log_level=(os.getenv("NEXTVER_LOG_LEVEL") or "WARNING").upper(),
        )
    except ValidationError as e:
        raise ConfigurationError(f"invalid configuration: {e}") from e
