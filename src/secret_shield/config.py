"""YAML/dict config loader for secret-shield.

Supports loading from a YAML file or a plain dict (for embedding in a
larger settings file).  Keys may be snake_case or camelCase.

Example YAML:

    secret_shield:
      redaction_style: labeled     # partial | full | placeholder | labeled
      sensitivity: strict          # strict | balanced | lenient
      show_diff: true
      show_confirmation: false
      intercept_all_copy: true
      allow_list:
        - sk_test_*
      deny_list:
        - "*prod*"

Unknown style/sensitivity names fall back to partial/balanced.
Wrongly typed values raise InvalidConfiguration.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Any

from .scrubber import ShieldConfig
from .types import InvalidConfiguration, RedactionStyle, Sensitivity

logger = logging.getLogger(__name__)

_SECTION_KEYS = ("secret_shield", "secretshield")

# snake_case field -> accepted spellings
_ALIASES: dict[str, tuple[str, ...]] = {
    "redaction_style": ("redaction_style", "redactionStyle"),
    "sensitivity": ("sensitivity",),
    "show_diff": ("show_diff", "showDiff"),
    "show_confirmation": ("show_confirmation", "showConfirmation"),
    "allow_list": ("allow_list", "allowList"),
    "deny_list": ("deny_list", "denyList"),
    "intercept_all_copy": ("intercept_all_copy", "interceptAllCopy"),
}


def _lookup(data: dict[str, Any], name: str, default: Any) -> Any:
    for key in _ALIASES[name]:
        if key in data:
            return data[key]
    return default


def _as_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    raise InvalidConfiguration(f"{name} must be true or false, got {value!r}")


def _as_globs(name: str, value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise InvalidConfiguration(f"{name} must be a list of strings, got {value!r}")
    for item in value:
        if not isinstance(item, str):
            raise InvalidConfiguration(f"{name} entries must be strings, got {item!r}")
    return tuple(value)


def load_config(data: dict[str, Any] | None) -> ShieldConfig:
    """Build a ShieldConfig from a settings dict (from YAML or inline)."""
    if data is None:
        return ShieldConfig()
    if not isinstance(data, dict):
        raise InvalidConfiguration(f"config must be a mapping, got {type(data).__name__}")

    # Support nested under "secret_shield" key or flat
    for section in _SECTION_KEYS:
        if section in data:
            data = data[section] or {}
            if not isinstance(data, dict):
                raise InvalidConfiguration(f"{section} must be a mapping")
            break

    return ShieldConfig(
        redaction_style=_lookup(data, "redaction_style", RedactionStyle.PARTIAL),
        sensitivity=_lookup(data, "sensitivity", Sensitivity.BALANCED),
        show_diff=_as_bool("show_diff", _lookup(data, "show_diff", False)),
        show_confirmation=_as_bool("show_confirmation", _lookup(data, "show_confirmation", False)),
        allow_list=_as_globs("allow_list", _lookup(data, "allow_list", None)),
        deny_list=_as_globs("deny_list", _lookup(data, "deny_list", None)),
        intercept_all_copy=_as_bool("intercept_all_copy", _lookup(data, "intercept_all_copy", True)),
    )


def load_from_yaml(path: str | Path) -> ShieldConfig:
    """Load config from a YAML file.  An empty file gives the defaults."""
    import yaml
    path = Path(path).expanduser()
    logger.debug("loading config from %s", path)
    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidConfiguration(f"{path}: {e}") from e
    return load_config(data)
