"""Parameter loading, classpath resources and config resolution."""

from .classpath import CLASSPATH_ENV, ClasspathResourceLoader, resolve_runtime_classpath
from .loader import (
    PROPERTIES_RESOURCE,
    load_parameters_dict,
    load_parameters_file,
    merge_parameters,
    normalize_config_file,
    resolve_config,
)
from .properties import load_properties, parse_properties

__all__ = [
    "CLASSPATH_ENV",
    "ClasspathResourceLoader",
    "PROPERTIES_RESOURCE",
    "load_parameters_dict",
    "load_parameters_file",
    "load_properties",
    "merge_parameters",
    "normalize_config_file",
    "parse_properties",
    "resolve_config",
    "resolve_runtime_classpath",
]
