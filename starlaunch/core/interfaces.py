from abc import ABC, abstractmethod
from typing import Dict

from .models import LaunchCommand, LaunchResult

__all__ = ["PropertiesLoader", "ProcessLauncher"]


class PropertiesLoader(ABC):
    """
    Source of named properties resources.
    """

    @abstractmethod
    def load_properties(self, name: str) -> Dict[str, str]:
        """
        Return the key/value pairs of resource ``name``.

        Raises ResourceNotFoundError when absent, ResourceReadError when unreadable.
        """


class ProcessLauncher(ABC):
    """
    Forks the server JVM described by a launch command.
    """

    @abstractmethod
    def launch(self, command: LaunchCommand) -> LaunchResult:
        """
        Start the process; wait for it unless ``command.spawn`` is set.
        """
