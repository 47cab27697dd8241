"""Lint selection from configuration documents.

The caller owns reading the document from disk or git config; this module
only turns its text into a :class:`~mitlint.lints.Lints` set and back.
Two layouts are understood, in YAML or TOML::

    mit:
      lint:
        duplicated-trailers: true
        jira-issue-key-missing: false

    lints:
      enabled: [jira-issue-key-missing]
      disabled: [duplicated-trailers]

Top-level git-config style keys such as ``mit.lint.not-emoji-log: true`` are
accepted as well.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import tomli_w
import yaml

from .lints import CONFIG_KEY_PREFIX, Lints
from .logging import get_logger

_LOGGER = get_logger("config")

SUPPORTED_FORMATS = ("yaml", "toml")


class ConfigError(RuntimeError):
    """Raised when a lint configuration document cannot be used."""


@dataclass
class LintConfig:
    """Lint names switched on or off by a configuration document."""

    enabled: List[str] = field(default_factory=list)
    disabled: List[str] = field(default_factory=list)

    def resolve(self, defaults: Optional[Lints] = None, *, strict: bool = True) -> Lints:
        """Apply this configuration on top of ``defaults``.

        Disabled lints are removed first, then enabled lints are added, so a
        lint named in both lists ends up enabled.
        """
        base = Lints.defaults() if defaults is None else defaults
        enabled, enabled_errors = Lints.from_names(self.enabled)
        disabled, disabled_errors = Lints.from_names(self.disabled)
        unknown = sorted({error.name for error in enabled_errors + disabled_errors})
        if unknown:
            if strict:
                raise ConfigError(f"Unknown lints in configuration: {', '.join(unknown)}")
            _LOGGER.warning("Ignoring unknown lints in configuration: %s", ", ".join(unknown))
        resolved = base.subtract(disabled).merge(enabled)
        _LOGGER.debug("Resolved lint configuration to %s", resolved.names())
        return resolved


def parse_document(text: str, format: str = "yaml") -> LintConfig:
    """Parse a YAML or TOML document into a :class:`LintConfig`."""
    data = _read_document(text, format)
    if not isinstance(data, dict):
        raise ConfigError("Lint configuration must contain a mapping at the root")

    config = LintConfig()

    mit_data = _as_dict(data.get("mit"), "mit")
    lint_table = _as_dict(mit_data.get("lint"), "mit.lint")
    for name, value in lint_table.items():
        _add_switch(config, str(name), value, key=f"{CONFIG_KEY_PREFIX}.{name}")

    prefix = f"{CONFIG_KEY_PREFIX}."
    for key, value in data.items():
        if isinstance(key, str) and key.startswith(prefix):
            _add_switch(config, key[len(prefix) :], value, key=key)

    lists_data = _as_dict(data.get("lints"), "lints")
    if lists_data:
        config.enabled.extend(_as_str_list(lists_data.get("enabled"), "lints.enabled"))
        config.disabled.extend(_as_str_list(lists_data.get("disabled"), "lints.disabled"))

    return config


def lints_from_document(
    text: str,
    format: str = "yaml",
    *,
    defaults: Optional[Lints] = None,
    strict: bool = True,
) -> Lints:
    return parse_document(text, format).resolve(defaults, strict=strict)


def dump_document(lints: Lints, format: str = "yaml") -> str:
    """Serialize ``lints`` as a ``mit.lint`` mapping covering every lint.

    TOML output is the flat ``[mit.lint]`` table git-mit reads. Keys are
    sorted by name so the output is stable under version control.
    """
    _check_format(format)
    document = {"mit": {"lint": dict(sorted(lints.to_config().items()))}}
    if format == "toml":
        return tomli_w.dumps(document)
    return yaml.safe_dump(document, default_flow_style=False, sort_keys=False)


def _check_format(format: str) -> None:
    if format not in SUPPORTED_FORMATS:
        raise ConfigError(
            f"Unsupported configuration format '{format}', expected one of: "
            f"{', '.join(SUPPORTED_FORMATS)}"
        )


def _read_document(text: str, format: str) -> Any:
    _check_format(format)
    if not text.strip():
        return {}
    try:
        if format == "toml":
            return tomllib.loads(text)
        loaded = yaml.safe_load(text)
    except (tomllib.TOMLDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to parse lint configuration: {exc}") from exc
    return loaded if loaded is not None else {}


def _add_switch(config: LintConfig, name: str, value: Any, *, key: str) -> None:
    flag = _as_bool(value)
    if flag is None:
        raise ConfigError(f"{key} must be true or false, got {value!r}")
    if flag:
        config.enabled.append(name)
    else:
        config.disabled.append(name)


def _as_dict(value: Any, key: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{key} must be a mapping")
    return value


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "on", "1"}:
            return True
        if lowered in {"false", "no", "off", "0"}:
            return False
    return None


def _as_str_list(value: Any, key: str) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence) and all(isinstance(item, str) for item in value):
        return list(value)
    raise ConfigError(f"{key} must be a list of lint names")


__all__ = [
    "ConfigError",
    "LintConfig",
    "SUPPORTED_FORMATS",
    "dump_document",
    "lints_from_document",
    "parse_document",
]
