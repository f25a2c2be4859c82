"""Classpath resolution and resource lookup.

A classpath is an ``os.pathsep``-separated list of directories and jar/zip
archives. Resources are looked up by their slash-separated name, first match
wins, the same way a Java class loader resolves ``getResource``.
"""

from __future__ import annotations

import logging
import os
import zipfile
from pathlib import Path
from typing import Dict, Mapping, Optional, Sequence

from starlaunch.core.interfaces import PropertiesLoader
from starlaunch.errors import ResourceNotFoundError, ResourceReadError

from .properties import load_properties

logger = logging.getLogger(__name__)

CLASSPATH_ENV = "STARLAUNCH_CLASSPATH"
_ARCHIVE_SUFFIXES = {".jar", ".zip"}


def resolve_runtime_classpath(
    explicit: Optional[str] = None, environ: Optional[Mapping[str, str]] = None
) -> str:
    if explicit:
        return explicit
    env = os.environ if environ is None else environ
    return env.get(CLASSPATH_ENV) or env.get("CLASSPATH") or "."


class ClasspathResourceLoader(PropertiesLoader):
    def __init__(self, entries: Sequence[str | Path]) -> None:
        self.entries = [Path(entry) for entry in entries if str(entry)]

    @classmethod
    def from_classpath(cls, classpath: str) -> "ClasspathResourceLoader":
        return cls(classpath.split(os.pathsep))

    def _archive_has(self, archive: Path, name: str) -> bool:
        try:
            with zipfile.ZipFile(archive) as zf:
                return name in zf.namelist()
        except (OSError, zipfile.BadZipFile) as exc:
            logger.warning("Skipping unreadable classpath archive %s: %s", archive, exc)
            return False

    def _locate(self, name: str) -> Optional[tuple[Path, Optional[str]]]:
        # (directory file, None) or (archive, member)
        name = name.lstrip("/")
        for entry in self.entries:
            if entry.is_dir():
                if (entry / name).is_file():
                    return entry / name, None
            elif entry.suffix.lower() in _ARCHIVE_SUFFIXES and entry.is_file():
                if self._archive_has(entry, name):
                    return entry, name
        return None

    def find(self, name: str) -> Optional[str]:
        """Return a description of where ``name`` lives, or None."""
        located = self._locate(name)
        if located is None:
            return None
        path, member = located
        return str(path) if member is None else f"{path}!/{member}"

    def read_bytes(self, name: str) -> bytes:
        located = self._locate(name)
        if located is None:
            raise ResourceNotFoundError(f"Unable to find classpath resource: {name}")
        path, member = located
        try:
            if member is None:
                return path.read_bytes()
            with zipfile.ZipFile(path) as zf:
                return zf.read(member)
        except (OSError, zipfile.BadZipFile, KeyError) as exc:
            raise ResourceReadError(f"Unable to read classpath resource: {name}") from exc

    def load_properties(self, name: str) -> Dict[str, str]:
        data = self.read_bytes(name)
        try:
            return load_properties(data)
        except ValueError as exc:
            raise ResourceReadError(f"Unable to read classpath resource: {name}") from exc


__all__ = ["CLASSPATH_ENV", "ClasspathResourceLoader", "resolve_runtime_classpath"]
