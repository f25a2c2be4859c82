from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import List, Mapping, Optional

from starlaunch.core.interfaces import ProcessLauncher
from starlaunch.core.models import LaunchCommand, LaunchResult
from starlaunch.errors import LaunchError

logger = logging.getLogger(__name__)


def find_java(
    explicit: Optional[str] = None, environ: Optional[Mapping[str, str]] = None
) -> str:
    """Locate the java executable: explicit path, then $JAVA_HOME, then PATH."""
    if explicit:
        return explicit
    env = os.environ if environ is None else environ
    java_home = env.get("JAVA_HOME")
    if java_home:
        candidate = Path(java_home) / "bin" / ("java.exe" if os.name == "nt" else "java")
        if candidate.is_file():
            return str(candidate)
    found = shutil.which("java")
    if found is None:
        raise LaunchError("Unable to find a java executable; set JAVA_HOME or pass --java")
    return found


class SubprocessLauncher(ProcessLauncher):
    """Forks the JVM with :mod:`subprocess`.

    Attached launches inherit stdio and block until the server exits.
    Spawned launches run in their own session with stdio detached and are
    never waited on. Their handles stay in ``spawned`` so the caller can poll
    them; nothing here terminates them.
    """

    def __init__(self, java: Optional[str] = None, *, cwd: Optional[Path] = None) -> None:
        self.java = java
        self.cwd = cwd
        self.spawned: List[subprocess.Popen] = []

    def launch(self, command: LaunchCommand) -> LaunchResult:
        argv = command.argv(find_java(self.java))
        logger.debug("exec %s", argv)
        try:
            if command.spawn:
                proc = subprocess.Popen(
                    argv,
                    cwd=self.cwd,
                    stdin=subprocess.DEVNULL,
                    stdout=subprocess.DEVNULL,
                    stderr=subprocess.DEVNULL,
                    start_new_session=True,
                )
            else:
                proc = subprocess.Popen(argv, cwd=self.cwd)
        except OSError as exc:
            raise LaunchError(f"Unable to start {argv[0]}: {exc}") from exc

        logger.info("Server starting... (pid=%s)", proc.pid)
        if command.spawn:
            self.spawned.append(proc)
            return LaunchResult(pid=proc.pid, spawned=True)

        try:
            returncode = proc.wait()
        except KeyboardInterrupt:
            proc.terminate()
            proc.wait()
            raise
        if returncode != 0:
            logger.warning("Component server exited with code %s", returncode)
        return LaunchResult(pid=proc.pid, returncode=returncode)


__all__ = ["SubprocessLauncher", "find_java"]
