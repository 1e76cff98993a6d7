"""Resolver settings parsing and YAML key definitions."""

from .settings_yaml_parser import ResolverSettings, SettingsYAMLParser, YAMLFileParser, BaseFileParser
from . import yaml_keys as _yk

# Re-export everything defined in yaml_keys.__all__
globals().update({k: getattr(_yk, k) for k in _yk.__all__})

__all__ = [
    "ResolverSettings",
    "SettingsYAMLParser",
    "YAMLFileParser",
    "BaseFileParser",
    *_yk.__all__,
]
