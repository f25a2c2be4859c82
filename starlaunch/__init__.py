"""
Launcher for JVM component servers.

:mod:`starlaunch.configuration` resolves caller parameters (optionally
overridden by a ``starling-maven-plugin.properties`` resource on the
classpath) into a :class:`ServerLaunchConfig`; :mod:`starlaunch.arguments`
turns it into JVM and application argument strings; :mod:`starlaunch.launcher`
forks the JVM attached or detached. Everything re-exports here.
"""

from . import arguments, configuration, core
from .arguments import (
    COMMAND_MONITOR_SECRET,
    build_application_arguments,
    build_launch_command,
    build_vm_arguments,
    compose_argument_line,
)
from .configuration import (
    ClasspathResourceLoader,
    load_parameters_file,
    resolve_config,
    resolve_runtime_classpath,
)
from .core import (
    LaunchCommand,
    LaunchParameters,
    LaunchResult,
    LogLevel,
    ProcessLauncher,
    PropertiesLoader,
    ServerLaunchConfig,
)
from .errors import (
    ArgumentBuildError,
    ConfigurationError,
    InvalidStartupLoggingError,
    LaunchError,
    MissingConfigFileError,
    ResourceNotFoundError,
    ResourceReadError,
    StarlaunchError,
)
from .launcher import SubprocessLauncher
from .logging import configure_logging
from .runner import execute, prepare, run_server, start_server

__all__ = [
    "COMMAND_MONITOR_SECRET",
    "ArgumentBuildError",
    "ClasspathResourceLoader",
    "ConfigurationError",
    "InvalidStartupLoggingError",
    "LaunchCommand",
    "LaunchError",
    "LaunchParameters",
    "LaunchResult",
    "LogLevel",
    "MissingConfigFileError",
    "ProcessLauncher",
    "PropertiesLoader",
    "ResourceNotFoundError",
    "ResourceReadError",
    "ServerLaunchConfig",
    "StarlaunchError",
    "SubprocessLauncher",
    "build_application_arguments",
    "build_launch_command",
    "build_vm_arguments",
    "compose_argument_line",
    "configure_logging",
    "execute",
    "prepare",
    "load_parameters_file",
    "resolve_config",
    "resolve_runtime_classpath",
    "run_server",
    "start_server",
    "arguments",
    "configuration",
    "core",
]
