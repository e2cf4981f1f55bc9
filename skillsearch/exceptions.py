"""Exception classes for skillsearch.

The query engine itself never raises; these cover loading skills from
disk and reading configuration.
"""


class SkillSearchError(Exception):
    """Base exception for skillsearch errors."""

    pass


class SkillLoadError(SkillSearchError):
    """Raised when a skill file or skill directory cannot be read."""

    def __init__(self, path: str, details: str = ""):
        """Initialize with path and details."""
        self.path = path
        message = f"Failed to load skill at {path}"
        if details:
            message += f": {details}"
        super().__init__(message)


class ConfigError(SkillSearchError, ValueError):
    """Raised when a configuration file is invalid."""

    def __init__(self, path: str, message: str):
        """Initialize with path and message."""
        self.path = path
        super().__init__(f"Invalid configuration in {path}: {message}")
