class NextVersionError(Exception):
    """Base class for failures that stop version resolution."""


class ConfigurationError(NextVersionError):
    """Required input is missing or a setting is invalid."""


class AnalysisError(NextVersionError):
    """Commit history could not be classified."""


class VersionComputationError(NextVersionError):
    """The current version could not be incremented."""
