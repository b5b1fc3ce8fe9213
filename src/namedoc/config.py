"""Configuration loading for the documentation builder.

Settings live in ``namedoc.toml``::

    extra_verbs = ["Upsert", "Hydrate"]
    extra_acronyms = ["GRPC"]
    bool_method_summaries = false
    lifecycle_method_summaries = false
    cross_reference_format = '<see cref="{name}"/>'

    [irregular_verbs]
    undo = "undoes"

The lexicon derived from these settings is built once, when a configuration
is constructed, and never mutated afterwards.
"""

from __future__ import annotations

import hashlib
import json
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from string import Formatter
from typing import cast

from namedoc.errors import ConfigurationError
from namedoc.lexicon import DEFAULT_LEXICON, Lexicon
from namedoc.logging import get_logger
from namedoc.phrases import DEFAULT_CROSS_REFERENCE_FORMAT

LOGGER = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path("namedoc.toml")
_ENV_CONFIG = "NAMEDOC_CONFIG"

_KNOWN_KEYS = frozenset(
    {
        "extra_verbs",
        "extra_acronyms",
        "irregular_verbs",
        "bool_method_summaries",
        "lifecycle_method_summaries",
        "cross_reference_format",
    }
)


@dataclass(slots=True, frozen=True)
class ConfigSelection:
    """Selected configuration path and its provenance."""

    path: Path
    source: str


@dataclass(slots=True, frozen=True)
class BuilderConfig:
    """Runtime configuration resolved from ``namedoc.toml``."""

    extra_verbs: tuple[str, ...] = ()
    extra_acronyms: tuple[str, ...] = ()
    irregular_verbs: Mapping[str, str] = field(default_factory=dict, hash=False)
    bool_method_summaries: bool = False
    lifecycle_method_summaries: bool = False
    cross_reference_format: str = DEFAULT_CROSS_REFERENCE_FORMAT
    lexicon: Lexicon = field(init=False, compare=False, hash=False, repr=False)

    def __post_init__(self) -> None:
        _check_cross_reference_format(self.cross_reference_format)
        object.__setattr__(self, "extra_verbs", tuple(self.extra_verbs))
        object.__setattr__(self, "extra_acronyms", tuple(self.extra_acronyms))
        object.__setattr__(self, "irregular_verbs", dict(self.irregular_verbs))
        lexicon = DEFAULT_LEXICON
        if self.extra_verbs or self.extra_acronyms or self.irregular_verbs:
            lexicon = DEFAULT_LEXICON.extended(
                verbs=self.extra_verbs,
                acronyms=self.extra_acronyms,
                irregular_verbs=self.irregular_verbs,
            )
        object.__setattr__(self, "lexicon", lexicon)

    @property
    def config_hash(self) -> str:
        """Return a stable hash representing the config values."""
        payload = {
            "extra_verbs": sorted(self.extra_verbs),
            "extra_acronyms": sorted(self.extra_acronyms),
            "irregular_verbs": dict(sorted(self.irregular_verbs.items())),
            "bool_method_summaries": self.bool_method_summaries,
            "lifecycle_method_summaries": self.lifecycle_method_summaries,
            "cross_reference_format": self.cross_reference_format,
        }
        blob = json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")
        return hashlib.sha256(blob).hexdigest()


def _check_cross_reference_format(template: str) -> None:
    """Reject formats that cannot be filled with ``name`` alone."""
    hint = 'Use a format such as \'<see cref="{name}"/>\''
    try:
        fields = {
            field_name
            for _, field_name, _, _ in Formatter().parse(template)
            if field_name is not None
        }
        template.format(name="T")
    except (KeyError, IndexError, ValueError) as exc:
        raise ConfigurationError.with_details(
            field="cross_reference_format",
            issue=f"Invalid format string: {exc}",
            hint=hint,
        ) from exc
    if fields != {"name"}:
        raise ConfigurationError.with_details(
            field="cross_reference_format",
            issue="Must contain the '{name}' placeholder and no other fields",
            hint=hint,
        )


DEFAULT_CONFIG = BuilderConfig()

TomlMapping = dict[str, object]


def _load_toml(path: Path) -> TomlMapping:
    if not path.exists():
        LOGGER.debug("namedoc config missing at %s", path, extra={"operation": "load_config"})
        return {}
    LOGGER.debug("Loading namedoc config from %s", path, extra={"operation": "load_config"})
    try:
        with path.open("rb") as stream:
            return cast(TomlMapping, tomllib.load(stream))
    except tomllib.TOMLDecodeError as exc:
        message = f"Invalid TOML in {path}"
        raise ConfigurationError(message, cause=exc, context={"path": str(path)}) from exc


def _string_list(data: Mapping[str, object], key: str) -> tuple[str, ...]:
    value = data.get(key)
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list | tuple) and all(isinstance(item, str) for item in value):
        return tuple(value)
    raise ConfigurationError.with_details(field=key, issue="Must be a list of strings")


def _string_mapping(data: Mapping[str, object], key: str) -> dict[str, str]:
    value = data.get(key)
    if value is None:
        return {}
    if isinstance(value, Mapping) and all(
        isinstance(base, str) and isinstance(form, str) for base, form in value.items()
    ):
        return dict(cast("Mapping[str, str]", value))
    raise ConfigurationError.with_details(
        field=key, issue="Must be a table of string values", hint='Use entries like undo = "undoes"'
    )


def _bool_option(data: Mapping[str, object], key: str, default: bool = False) -> bool:
    raw_value = data.get(key, default)
    if not isinstance(raw_value, bool):
        raise ConfigurationError.with_details(field=key, issue="Must be true or false")
    return raw_value


def config_from_mapping(data: Mapping[str, object]) -> BuilderConfig:
    """Build a :class:`BuilderConfig` from already-parsed settings.

    Raises
    ------
    ConfigurationError
        When a key is unknown or a value has the wrong type.
    """
    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError.with_details(
            field=unknown[0],
            issue="Unknown configuration key",
            hint=f"Supported keys: {', '.join(sorted(_KNOWN_KEYS))}",
        )
    extra_verbs = _string_list(data, "extra_verbs")
    extra_acronyms = _string_list(data, "extra_acronyms")
    irregular_verbs = _string_mapping(data, "irregular_verbs")
    cross_reference_format = data.get("cross_reference_format", DEFAULT_CROSS_REFERENCE_FORMAT)
    if not isinstance(cross_reference_format, str):
        raise ConfigurationError.with_details(
            field="cross_reference_format", issue="Must be a string"
        )

    return BuilderConfig(
        extra_verbs=extra_verbs,
        extra_acronyms=extra_acronyms,
        irregular_verbs=irregular_verbs,
        bool_method_summaries=_bool_option(data, "bool_method_summaries"),
        lifecycle_method_summaries=_bool_option(data, "lifecycle_method_summaries"),
        cross_reference_format=cross_reference_format,
    )


def load_config(path: Path | None = None) -> BuilderConfig:
    """Load configuration from the provided path or the default location."""
    config_path = path or DEFAULT_CONFIG_PATH
    data = _load_toml(config_path)
    config = config_from_mapping(data)
    LOGGER.debug(
        "Loaded namedoc config: extra_verbs=%s extra_acronyms=%s",
        config.extra_verbs,
        config.extra_acronyms,
        extra={"operation": "load_config", "config_hash": config.config_hash},
    )
    return config


def resolve_config_path(start: Path | None = None) -> Path:
    """Find the configuration file by walking up the directory tree."""
    current = start or Path.cwd()
    for directory in [current, *current.parents]:
        candidate = directory / DEFAULT_CONFIG_PATH
        if candidate.exists():
            return candidate
    return DEFAULT_CONFIG_PATH


def select_config_path(override: str | Path | None = None) -> ConfigSelection:
    """Determine the configuration path honouring explicit and environment overrides."""
    if override:
        return ConfigSelection(path=Path(override).expanduser(), source="override")

    env_override = os.environ.get(_ENV_CONFIG)
    if env_override:
        return ConfigSelection(path=Path(env_override).expanduser(), source=f"env:{_ENV_CONFIG}")

    return ConfigSelection(path=resolve_config_path(), source="default")


def load_config_with_selection(
    override: str | Path | None = None,
) -> tuple[BuilderConfig, ConfigSelection]:
    """Load configuration while also returning metadata about the selection."""
    selection = select_config_path(override)
    config = load_config(selection.path)
    return config, selection


__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_CONFIG_PATH",
    "BuilderConfig",
    "ConfigSelection",
    "config_from_mapping",
    "load_config",
    "load_config_with_selection",
    "resolve_config_path",
    "select_config_path",
]
