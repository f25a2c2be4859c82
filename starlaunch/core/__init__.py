"""Core types shared by the resolver, argument builders and launcher."""

from .enums import LogLevel
from .interfaces import ProcessLauncher, PropertiesLoader
from .models import (
    DEFAULT_CLASS_NAME,
    DEFAULT_VM_MEMORY_ARGS,
    LaunchCommand,
    LaunchParameters,
    LaunchResult,
    ServerLaunchConfig,
)

__all__ = [
    "DEFAULT_CLASS_NAME",
    "DEFAULT_VM_MEMORY_ARGS",
    "LaunchCommand",
    "LaunchParameters",
    "LaunchResult",
    "LogLevel",
    "ProcessLauncher",
    "PropertiesLoader",
    "ServerLaunchConfig",
]
