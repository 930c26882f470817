"""
TOML-based configuration for fracfmt consumers.

Loads display settings from a TOML file and/or environment variables.
Environment variables take precedence over file values.  The result is a
plain value handed back to the caller; nothing is stored globally.

Usage:
    from fracfmt_core.config import load_config
    cfg = load_config("fracfmt.toml")
    opts = cfg.format.to_options()

Example file::

    [format]
    preset = "de"
    mantissa-digits = 6

    [logging]
    level = "DEBUG"
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .options import PRESETS, FormatOptions, with_preset

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}

# Expected type of each FormatConfig override, as read from TOML.
_OVERRIDE_TYPES: dict[str, type] = {
    "group_sep": str,
    "decimal_sep": str,
    "use_subscript": bool,
    "mantissa_digits": int,
    "max_frac_digits": int,
}


@dataclass
class FormatConfig:
    """Display settings.  Unset fields fall back to the preset."""
    preset: str = "en"
    group_sep: str | None = None
    decimal_sep: str | None = None
    use_subscript: bool | None = None
    mantissa_digits: int | None = None
    max_frac_digits: int | None = None

    def to_options(self) -> FormatOptions:
        if not isinstance(self.preset, str) or self.preset.lower() not in PRESETS:
            raise ValueError(
                f"Unknown preset {self.preset!r} (expected one of {', '.join(PRESETS)})"
            )
        base = PRESETS[self.preset.lower()]
        overrides = {}
        for name, expected in _OVERRIDE_TYPES.items():
            value = getattr(self, name)
            if value is None:
                continue
            # bool is an int subclass; digit counts must not accept it.
            if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
                raise ValueError(
                    f"format.{name} must be {expected.__name__}, got {type(value).__name__}"
                )
            overrides[name] = value
        return with_preset(base, **overrides)


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "INFO"
    format: str = "human"   # "human" or "json"
    file: str | None = None


@dataclass
class FracFmtConfig:
    """Top-level configuration container."""
    format: FormatConfig = field(default_factory=FormatConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _merge(dc: Any, raw: dict[str, Any]) -> None:
    """Merge a raw dict into a dataclass instance (in-place)."""
    for key, value in raw.items():
        key_under = key.replace("-", "_")
        if hasattr(dc, key_under):
            setattr(dc, key_under, value)


def _parse_bool(name: str, value: str) -> bool:
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def load_config(path: str | None = None) -> FracFmtConfig:
    """
    Load configuration from a TOML file, then overlay environment variables.

    Env-var mapping:
        FRACFMT_PRESET           -> format.preset
        FRACFMT_GROUP_SEP        -> format.group_sep
        FRACFMT_DECIMAL_SEP      -> format.decimal_sep
        FRACFMT_USE_SUBSCRIPT    -> format.use_subscript  (true/false)
        FRACFMT_MANTISSA_DIGITS  -> format.mantissa_digits
        FRACFMT_MAX_FRAC_DIGITS  -> format.max_frac_digits
        FRACFMT_LOG_LEVEL        -> logging.level
        FRACFMT_LOG_FMT          -> logging.format
    """
    cfg = FracFmtConfig()

    # ── TOML file ────────────────────────────────────────────────
    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p, "rb") as f:
                data = tomllib.load(f)
            for section_name, section_dc in [
                ("format", cfg.format),
                ("logging", cfg.logging),
            ]:
                if section_name in data:
                    _merge(section_dc, data[section_name])

    # ── Environment variable overrides ───────────────────────────
    if v := os.environ.get("FRACFMT_PRESET"):
        cfg.format.preset = v.lower()
    # Separators may legitimately be a single space, so only unset skips.
    if (v := os.environ.get("FRACFMT_GROUP_SEP")) is not None:
        cfg.format.group_sep = v
    if v := os.environ.get("FRACFMT_DECIMAL_SEP"):
        cfg.format.decimal_sep = v
    if v := os.environ.get("FRACFMT_USE_SUBSCRIPT"):
        cfg.format.use_subscript = _parse_bool("FRACFMT_USE_SUBSCRIPT", v)
    if v := os.environ.get("FRACFMT_MANTISSA_DIGITS"):
        cfg.format.mantissa_digits = int(v)
    if v := os.environ.get("FRACFMT_MAX_FRAC_DIGITS"):
        cfg.format.max_frac_digits = int(v)
    if v := os.environ.get("FRACFMT_LOG_LEVEL"):
        cfg.logging.level = v.upper()
    if v := os.environ.get("FRACFMT_LOG_FMT"):
        cfg.logging.format = v

    return cfg
