"""Run/start entry points: resolve parameters, build arguments, launch.

``run_server`` keeps the server attached to the caller and returns its exit
code; ``start_server`` spawns it detached and returns immediately.
"""

import logging
import os
from typing import Callable, Optional

from starlaunch.arguments import build_launch_command
from starlaunch.configuration.classpath import ClasspathResourceLoader, resolve_runtime_classpath
from starlaunch.configuration.loader import resolve_config
from starlaunch.core.interfaces import ProcessLauncher, PropertiesLoader
from starlaunch.core.models import LaunchCommand, LaunchParameters, LaunchResult
from starlaunch.launcher import SubprocessLauncher

logger = logging.getLogger(__name__)


def prepare(
    params: LaunchParameters,
    *,
    spawn: bool,
    classpath: Optional[str] = None,
    loader: Optional[PropertiesLoader] = None,
    exists: Callable[[str], bool] = os.path.exists,
) -> LaunchCommand:
    """Resolve parameters and build the launch command without starting anything."""
    cp = resolve_runtime_classpath(classpath)
    if loader is None:
        loader = ClasspathResourceLoader.from_classpath(cp)
    config = resolve_config(params, loader, exists=exists)
    return build_launch_command(config, cp, spawn=spawn)


def execute(
    params: LaunchParameters,
    *,
    spawn: bool,
    launcher: Optional[ProcessLauncher] = None,
    **kwargs,
) -> LaunchResult:
    command = prepare(params, spawn=spawn, **kwargs)
    return (launcher or SubprocessLauncher()).launch(command)


def run_server(params: LaunchParameters, **kwargs) -> int:
    result = execute(params, spawn=False, **kwargs)
    return result.returncode if result.returncode is not None else 0


def start_server(params: LaunchParameters, **kwargs) -> Optional[int]:
    result = execute(params, spawn=True, **kwargs)
    logger.info("Component server spawned with pid %s", result.pid)
    return result.pid


__all__ = ["execute", "prepare", "run_server", "start_server"]
