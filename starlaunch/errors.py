"""Unified exception hierarchy for starlaunch."""


class StarlaunchError(Exception):
    """Base class for launcher errors."""


class ConfigurationError(StarlaunchError):
    """Launch parameters are missing or malformed."""


class ResourceError(ConfigurationError):
    """Classpath resource lookup failures."""


class ResourceNotFoundError(ResourceError):
    """Named resource is not present on the classpath."""


class ResourceReadError(ResourceError):
    """Resource exists but cannot be read or decoded."""


class MissingConfigFileError(ConfigurationError):
    """No server config file after resolution."""


class ArgumentBuildError(StarlaunchError):
    """Command-line arguments could not be assembled."""


class InvalidStartupLoggingError(ArgumentBuildError):
    """Startup logging is not one of ERROR/WARN/INFO/DEBUG."""


class LaunchError(StarlaunchError):
    """Process launch failures."""


__all__ = [
    "StarlaunchError",
    "ConfigurationError",
    "ResourceError",
    "ResourceNotFoundError",
    "ResourceReadError",
    "MissingConfigFileError",
    "ArgumentBuildError",
    "InvalidStartupLoggingError",
    "LaunchError",
]
