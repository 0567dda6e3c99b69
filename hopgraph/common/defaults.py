"""
Default parameter values used by the graph core, edge list ingestion and reporting
"""


class GraphConfig:
    """
    Parameters for graph construction and report output

    Node id validation guards `Graph.add_edge`; the remaining values control
    how edge list files are tokenised and how CLI reports are serialized
    """

    # Reject negative, non-integer or oversized node ids on insertion
    VALIDATE_NODE_IDS = True

    # Edge list parsing
    EDGE_DELIMITER = ""  # Empty means any run of whitespace
    COMMENT_PREFIX = "#"

    # Report serialization
    SERIALIZE_SORT_KEYS = True
    JSON_INDENT = 2


class ResourceLimits:
    """
    Resource limits for robustness on large or hostile inputs

    These are set to very large values (or None for no limit) by default and should be tuned to
    the environment the analysis runs in
    """

    # Largest accepted node identifier
    # None means no upper bound is applied
    MAX_NODE_ID = None
    MAX_EDGES = 50000000  # Maximum edges loaded from a single edge list
    MAX_LINE_LENGTH = 4096  # Maximum characters in one edge list line


_CONFIG_CLASSES = {
    "GraphConfig": GraphConfig,
    "ResourceLimits": ResourceLimits,
}


def apply_config_overrides(overrides, logger=None):
    """
    Apply configuration overrides from an external source

    Searches through all configuration classes to find matching parameters
    and casts each value to the type of the current default

    Args:
        overrides (dict): Dictionary mapping parameter names to override values
        logger (Logger): Optional logger for reporting applied overrides

    Example:
        apply_config_overrides({
            'MAX_EDGES': 1000,
            'COMMENT_PREFIX': '%'
        })
    """
    if not overrides:
        return

    for key, value in overrides.items():
        applied = False
        for class_name, config_class in _CONFIG_CLASSES.items():
            if hasattr(config_class, key):
                try:
                    old_value = getattr(config_class, key)
                    setattr(config_class, key, _cast_like(old_value, value))

                    if logger:
                        logger.debug(f"Config override: {class_name}.{key} = {value} (was {old_value})")
                except (ValueError, TypeError) as e:
                    if logger:
                        logger.warning(f"Could not apply override for {key}={value}: {e}")
                applied = True
                break

        if not applied and logger:
            logger.warning(f"Config override ignored: Unknown parameter {key}")


def _cast_like(old_value, value):
    # Unset defaults have no type to cast to
    if old_value is None:
        return value
    # bool("false") is True, so booleans get an explicit parse
    if isinstance(old_value, bool):
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in ("1", "true", "yes", "on"):
                return True
            if lowered in ("0", "false", "no", "off"):
                return False
            raise ValueError(f"not a boolean: {value!r}")
        return bool(value)
    return type(old_value)(value)


class ConfigOverride:
    """
    Context manager to temporarily override configuration values

    Supports GraphConfig and ResourceLimits. Overrides are reverted when the
    context exits so tests do not leak settings into each other

    Args:
        overrides (dict): Mapping of attribute name to new value
        logger (Logger): Optional logger for debug messages
    """

    def __init__(self, overrides=None, logger=None):
        self.overrides = overrides or {}
        self.logger = logger
        self._originals = []  # list of (cls, key, old_value)

    def __enter__(self):
        if not self.overrides:
            return self
        for key, value in self.overrides.items():
            applied = False
            for class_name, cls in _CONFIG_CLASSES.items():
                if hasattr(cls, key):
                    old_value = getattr(cls, key)
                    try:
                        casted = _cast_like(old_value, value)
                    except (ValueError, TypeError):
                        casted = value
                    self._originals.append((cls, key, old_value))
                    setattr(cls, key, casted)
                    if self.logger:
                        self.logger.debug(f"ConfigOverride: {class_name}.{key} = {casted} (was {old_value})")
                    applied = True
                    break
            if not applied and self.logger:
                self.logger.warning(f"ConfigOverride ignored unknown parameter: {key}")
        return self

    def __exit__(self, exc_type, exc, tb):
        # Restore in reverse order
        for cls, key, old_value in reversed(self._originals):
            setattr(cls, key, old_value)
            if self.logger:
                self.logger.debug(f"ConfigOverride: restored {cls.__name__}.{key} -> {old_value}")
        self._originals.clear()
        return False
