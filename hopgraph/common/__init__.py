"""
Common module exports
"""

from hopgraph.common.defaults import ConfigOverride, GraphConfig, ResourceLimits, apply_config_overrides
from hopgraph.common.input_validation import InputValidator, ValidationError
from hopgraph.common.utils import Logger

__all__ = [
    "Logger",
    "GraphConfig",
    "ResourceLimits",
    "apply_config_overrides",
    "ConfigOverride",
    "InputValidator",
    "ValidationError",
]
