"""Resolve caller parameters into a ServerLaunchConfig.

Optional override file, found on the classpath under ``<config>/``::

    # starling-maven-plugin.properties
    server.main.class=com.example.MyServer
    server.main.configFile=myserver/server.ini
    server.main.startupLogging=INFO
    server.main.serverLogging=DEBUG
    server.main.vmMemoryArgs=-Xmx2g
    server.main.vmArgs=-Dfoo=bar
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Union

from pydantic import ValidationError

from starlaunch.core.interfaces import PropertiesLoader
from starlaunch.core.models import LaunchParameters, ServerLaunchConfig
from starlaunch.errors import ConfigurationError, MissingConfigFileError

logger = logging.getLogger(__name__)

PROPERTIES_RESOURCE = "starling-maven-plugin.properties"

# properties key -> LaunchParameters field
PROPERTY_KEYS = {
    "server.main.class": "class_name",
    "server.main.configFile": "config_file",
    "server.main.startupLogging": "startup_logging",
    "server.main.serverLogging": "server_logging",
    "server.main.vmMemoryArgs": "vm_memory_args",
    "server.main.vmArgs": "vm_args",
}

_CONFIG_FILE_PREFIXES = ("file:", "classpath:")


def load_parameters_dict(raw: Any) -> LaunchParameters:
    if not isinstance(raw, Mapping):
        raise ConfigurationError("Launch parameters must be an object")
    try:
        return LaunchParameters.model_validate(dict(raw))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid launch parameters: {exc}") from exc


def load_parameters_file(path: Union[Path, str]) -> LaunchParameters:
    """Load LaunchParameters from a JSON file using the build-file parameter names."""

    params_path = Path(path)
    try:
        raw = json.loads(params_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"Unable to read parameters file: {params_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid JSON in parameters file {params_path}: {exc}") from exc
    return load_parameters_dict(raw)


def merge_parameters(base: LaunchParameters, overrides: Mapping[str, Any]) -> LaunchParameters:
    """Apply non-None overrides keyed by field name (``class_name``, ``vm_args``...)."""

    update = {key: value for key, value in overrides.items() if value is not None}
    unknown = set(update) - set(LaunchParameters.model_fields)
    if unknown:
        raise ConfigurationError(f"Unknown launch parameters: {sorted(unknown)}")
    return base.model_copy(update=update)


def _apply_properties(
    params: LaunchParameters, loader: PropertiesLoader
) -> LaunchParameters:
    resource = f"{params.config_dir}/{PROPERTIES_RESOURCE}"
    properties = loader.load_properties(resource)
    update = {field: properties[key] for key, field in PROPERTY_KEYS.items() if key in properties}
    logger.debug("Loaded %s: overriding %s", resource, sorted(update))
    return params.model_copy(update=update)


def normalize_config_file(
    config_file: str, exists: Callable[[str], bool] = os.path.exists
) -> str:
    if config_file.startswith(_CONFIG_FILE_PREFIXES):
        return config_file
    if exists(config_file):
        return "file:" + config_file
    return "classpath:" + config_file


def resolve_config(
    params: LaunchParameters,
    loader: Optional[PropertiesLoader] = None,
    *,
    exists: Callable[[str], bool] = os.path.exists,
) -> ServerLaunchConfig:
    if params.config_dir is not None:
        if loader is None:
            raise ConfigurationError("A properties loader is required when 'config' is set")
        params = _apply_properties(params, loader)

    if not params.config_file:
        raise MissingConfigFileError("Unable to run server, no configFile set")

    return ServerLaunchConfig(
        class_name=params.class_name,
        config_file=normalize_config_file(params.config_file, exists),
        startup_logging=params.startup_logging,
        server_logging=params.server_logging,
        vm_memory_args=params.vm_memory_args,
        vm_args=params.vm_args,
        config_dir=params.config_dir,
    )


__all__ = [
    "PROPERTIES_RESOURCE",
    "PROPERTY_KEYS",
    "load_parameters_dict",
    "load_parameters_file",
    "merge_parameters",
    "normalize_config_file",
    "resolve_config",
]
