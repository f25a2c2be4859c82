from __future__ import annotations

import shlex
from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from starlaunch.errors import ArgumentBuildError

DEFAULT_CLASS_NAME = "com.opengamma.component.OpenGammaComponentServer"
DEFAULT_VM_MEMORY_ARGS = "-Xms512m -Xmx1536m -XX:MaxPermSize=512M"


class LaunchParameters(BaseModel):
    """Raw launch parameters as supplied by the caller.

    Accepts the camelCase parameter names used in build files
    (``className``, ``configFile``...) as well as the snake_case field names.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    config_dir: Optional[str] = Field(None, alias="config")
    class_name: str = Field(DEFAULT_CLASS_NAME, alias="className")
    config_file: Optional[str] = Field(None, alias="configFile")
    startup_logging: str = Field("WARN", alias="startupLogging")
    server_logging: str = Field("WARN", alias="serverLogging")
    vm_memory_args: Optional[str] = Field(DEFAULT_VM_MEMORY_ARGS, alias="vmMemoryArgs")
    vm_args: Optional[str] = Field(None, alias="vmArgs")


@dataclass(frozen=True)
class ServerLaunchConfig:
    """Fully resolved launch settings; read-only once built."""

    class_name: str
    config_file: str
    startup_logging: str = "WARN"
    server_logging: str = "WARN"
    vm_memory_args: Optional[str] = DEFAULT_VM_MEMORY_ARGS
    vm_args: Optional[str] = None
    config_dir: Optional[str] = None


def _split(line: str, *, field_name: str) -> List[str]:
    """Split on whitespace honouring only ' and " quotes; backslashes are kept."""
    lexer = shlex.shlex(line, posix=True)
    lexer.whitespace_split = True
    lexer.commenters = ""
    lexer.escape = ""
    try:
        return list(lexer)
    except ValueError as exc:
        raise ArgumentBuildError(f"Unable to parse {field_name}: {line!r}") from exc


@dataclass(frozen=True)
class LaunchCommand:
    classpath: str
    class_name: str
    vm_arguments: str
    application_arguments: str
    spawn: bool = False

    def argv(self, java: str) -> List[str]:
        return [
            java,
            *_split(self.vm_arguments, field_name="VM arguments"),
            "-cp",
            self.classpath,
            self.class_name,
            *_split(self.application_arguments, field_name="application arguments"),
        ]


@dataclass(frozen=True)
class LaunchResult:
    pid: Optional[int]
    returncode: Optional[int] = None
    spawned: bool = False
