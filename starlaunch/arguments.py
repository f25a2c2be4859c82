"""Assemble JVM and application argument strings for the component server."""

import logging
from typing import Dict, Optional

from starlaunch.core.enums import LogLevel
from starlaunch.core.models import LaunchCommand, ServerLaunchConfig
from starlaunch.errors import InvalidStartupLoggingError

logger = logging.getLogger(__name__)

# Pre-shared token checked by the spawned server's command monitor.
COMMAND_MONITOR_SECRET = "-Dcommandmonitor.secret=OpenGammaMojo"

STARTUP_FLAGS: Dict[LogLevel, Optional[str]] = {
    LogLevel.ERROR: "-q",
    LogLevel.WARN: None,
    LogLevel.INFO: None,
    LogLevel.DEBUG: "-v",
}

LOGBACK_RESOURCES: Dict[LogLevel, str] = {
    LogLevel.ERROR: "com/opengamma/util/error-logback.xml",
    LogLevel.WARN: "com/opengamma/util/warn-logback.xml",
    LogLevel.INFO: "com/opengamma/util/info-logback.xml",
    LogLevel.DEBUG: "com/opengamma/util/debug-logback.xml",
}


def build_application_arguments(config: ServerLaunchConfig) -> str:
    level = LogLevel.parse(config.startup_logging)
    if level is None:
        raise InvalidStartupLoggingError(
            f"Invalid value for startupLogging: {config.startup_logging}"
        )
    flag = STARTUP_FLAGS[level]
    return f"{flag} {config.config_file}" if flag else config.config_file


def logback_configuration(server_logging: str) -> str:
    """Built-in logback resource for a level name, else the value as a file path."""
    level = LogLevel.parse(server_logging)
    return LOGBACK_RESOURCES[level] if level is not None else server_logging


def build_vm_arguments(config: ServerLaunchConfig) -> str:
    # Order matters: later flags override earlier memory defaults in the JVM.
    parts = [f"-Dlogback.configurationFile={logback_configuration(config.server_logging)}"]
    if config.vm_memory_args:
        parts.append(config.vm_memory_args)
    if config.vm_args:
        parts.append(config.vm_args)
    return " ".join(parts)


def compose_argument_line(vm_arguments: str, class_name: str, application_arguments: str) -> str:
    return f"{vm_arguments} {class_name} {application_arguments}"


def build_launch_command(
    config: ServerLaunchConfig, classpath: str, *, spawn: bool
) -> LaunchCommand:
    app_args = build_application_arguments(config)
    vm_args = build_vm_arguments(config)
    logger.info(
        "Running component server: %s",
        compose_argument_line(vm_args, config.class_name, app_args),
    )
    if spawn:
        vm_args = f"{vm_args} {COMMAND_MONITOR_SECRET}"
    return LaunchCommand(
        classpath=classpath,
        class_name=config.class_name,
        vm_arguments=vm_args,
        application_arguments=app_args,
        spawn=spawn,
    )


__all__ = [
    "COMMAND_MONITOR_SECRET",
    "LOGBACK_RESOURCES",
    "STARTUP_FLAGS",
    "build_application_arguments",
    "build_launch_command",
    "build_vm_arguments",
    "compose_argument_line",
    "logback_configuration",
]
