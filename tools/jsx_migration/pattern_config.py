# CUI // SP-CTI
"""Pattern Config Loader - naming conventions for JSX idiom detection.

Detection rules never hard-code React names. The wrapper prefix, memo and
ref-forwarding aliases, callback prop names, fragment names and the fallback
placeholders all come from a PatternConfig, loaded from
args/jsx_pattern_config.yaml under the ``jsx_patterns`` key and merged over
the builtin defaults below (missing file or missing keys fall back to builtin).
"""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

BASE_DIR = Path(__file__).resolve().parent.parent.parent
CONFIG_PATH = BASE_DIR / "args" / "jsx_pattern_config.yaml"

logger = logging.getLogger("jsxport.jsx_migration.pattern_config")

# ---------------------------------------------------------------------------
# Built-in defaults (fallback when config not available)
# ---------------------------------------------------------------------------
BUILTIN_PATTERN_CONFIG = {
    "wrapper_prefix": "with",
    "wrapper_suffix": "Mixin",
    "memo_alias": "memo",
    "ref_forwarding_alias": "forwardRef",
    "iteration_method": "map",
    "callback_prop_names": ["render", "children"],
    "callback_prop_prefix": "render",
    "callback_fallback_name": "children",
    "fragment_names": ["Fragment", "React.Fragment"],
    "component_placeholder": "Component",
    "memo_default_name": "MemoizedComponent",
    "collection_placeholder": "expression",
    "host_placeholder": "Component",
}

_SEQUENCE_KEYS = ("callback_prop_names", "fragment_names")


class PatternConfigError(ValueError):
    """Raised when a pattern config file is malformed."""


@dataclass(frozen=True)
class PatternConfig:
    """Naming conventions consulted by the pattern detector."""

    wrapper_prefix: str = "with"
    wrapper_suffix: str = "Mixin"
    memo_alias: str = "memo"
    ref_forwarding_alias: str = "forwardRef"
    iteration_method: str = "map"
    callback_prop_names: Tuple[str, ...] = ("render", "children")
    callback_prop_prefix: str = "render"
    callback_fallback_name: str = "children"
    fragment_names: Tuple[str, ...] = ("Fragment", "React.Fragment")
    component_placeholder: str = "Component"
    memo_default_name: str = "MemoizedComponent"
    collection_placeholder: str = "expression"
    host_placeholder: str = "Component"

    def is_wrapper_name(self, name: str) -> bool:
        """True for ``withAuth``-style names: prefix followed by an uppercase letter."""
        prefix = self.wrapper_prefix
        if not prefix or not name.startswith(prefix) or len(name) == len(prefix):
            return False
        return name[len(prefix)].isupper()

    def wrapper_generated_name(self, wrapper_name: str) -> str:
        return wrapper_name[len(self.wrapper_prefix):] + self.wrapper_suffix

    def is_callback_prop(self, prop_name: str) -> bool:
        if prop_name in self.callback_prop_names:
            return True
        return bool(self.callback_prop_prefix) and prop_name.startswith(self.callback_prop_prefix)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PatternConfig":
        """Build a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise PatternConfigError(f"Unknown jsx_patterns keys: {', '.join(unknown)}")

        values = {}
        for key, value in data.items():
            if key in _SEQUENCE_KEYS:
                if isinstance(value, str) or not isinstance(value, (list, tuple)):
                    raise PatternConfigError(f"jsx_patterns.{key} must be a list of strings")
                values[key] = tuple(str(v) for v in value)
            else:
                if not isinstance(value, str):
                    raise PatternConfigError(f"jsx_patterns.{key} must be a string")
                values[key] = value
        return cls(**values)

    def to_dict(self) -> dict:
        return {
            f.name: list(getattr(self, f.name)) if f.name in _SEQUENCE_KEYS else getattr(self, f.name)
            for f in fields(self)
        }


DEFAULT_PATTERN_CONFIG = PatternConfig.from_dict(BUILTIN_PATTERN_CONFIG)


def load_pattern_config(config_path: Optional[Path] = None) -> PatternConfig:
    """Load pattern config from YAML, falling back to built-in values."""
    path = Path(config_path) if config_path else CONFIG_PATH
    merged = dict(BUILTIN_PATTERN_CONFIG)

    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                cfg = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise PatternConfigError(f"Invalid YAML in {path}: {e}") from e
        if not isinstance(cfg, dict):
            raise PatternConfigError(f"{path} must contain a mapping")
        section = cfg.get("jsx_patterns") or {}
        if not isinstance(section, dict):
            raise PatternConfigError(f"{path}: jsx_patterns must be a mapping")
        merged.update(section)
        logger.debug("Loaded jsx_patterns overrides from %s", path)
    else:
        logger.debug("No pattern config at %s; using built-in defaults", path)

    return PatternConfig.from_dict(merged)
