"""Configuration model and loaders for Grammarify.

Responsibilities:
- Define engine configuration as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `GrammarifyConfig`: caller shorthand overrides and extra disconnected words.
- `ConfigLoader`: static construction helpers for `GrammarifyConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

SUBSTITUTIONS_ENV = "GRAMMARIFY_SUBSTITUTIONS"
DISCONNECTED_WORDS_ENV = "GRAMMARIFY_DISCONNECTED_WORDS"


@dataclass(slots=True)
class GrammarifyConfig:
    """Engine configuration.

    Attributes:
        substitutions: Shorthand entries merged over the built-in table.
        disconnected_words: Extra words appended to the disconnected-word list.
    """

    substitutions: Mapping[str, str] = field(default_factory=dict)
    disconnected_words: tuple[str, ...] = ()

    def validate(self) -> None:
        """Validate substitution entries and disconnected words."""

        for key, expansion in self.substitutions.items():
            if not isinstance(key, str) or not key.strip():
                raise ValueError("`substitutions` keys must be non-empty strings.")
            if any(character.isspace() for character in key):
                raise ValueError(f"`substitutions` key `{key}` must be a single token.")
            if not isinstance(expansion, str) or not expansion.strip():
                raise ValueError(f"`substitutions` entry `{key}` must be a non-empty string.")
        for word in self.disconnected_words:
            if not isinstance(word, str) or not word.strip():
                raise ValueError("`disconnected_words` must contain non-empty strings.")
            if any(character.isspace() for character in word):
                raise ValueError(f"`disconnected_words` entry `{word}` must be a single word.")

    def with_substitutions(self, overrides: Mapping[str, str]) -> GrammarifyConfig:
        """Return a copy whose substitutions are updated with `overrides`."""

        merged = dict(self.substitutions)
        merged.update(overrides)
        return GrammarifyConfig(
            substitutions=merged,
            disconnected_words=self.disconnected_words,
        )


class ConfigLoader:
    """Factory methods for creating `GrammarifyConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"substitutions", "disconnected_words"})

    @staticmethod
    def from_yaml(path: Path) -> GrammarifyConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)

        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> GrammarifyConfig:
        """Create a validated config from environment variables.

        `GRAMMARIFY_SUBSTITUTIONS` holds `key=value` pairs separated by `;`.
        `GRAMMARIFY_DISCONNECTED_WORDS` holds comma-separated words.
        """

        env_map: Mapping[str, str] = os.environ if env is None else env

        substitutions = ConfigLoader.parse_substitution_pairs(
            [
                pair
                for pair in env_map.get(SUBSTITUTIONS_ENV, "").split(";")
                if pair.strip()
            ],
            source_label=f"`{SUBSTITUTIONS_ENV}`",
        )
        disconnected_words = tuple(
            word.strip()
            for word in env_map.get(DISCONNECTED_WORDS_ENV, "").split(",")
            if word.strip()
        )

        config = GrammarifyConfig(
            substitutions=substitutions,
            disconnected_words=disconnected_words,
        )
        config.validate()
        return config

    @staticmethod
    def parse_substitution_pairs(
        pairs: list[str], source_label: str = "substitutions"
    ) -> dict[str, str]:
        """Parse `key=value` pairs; the value may itself contain `=`."""

        parsed: dict[str, str] = {}
        for pair in pairs:
            key, separator, value = pair.partition("=")
            key = key.strip()
            value = value.strip()
            if not separator or not key or not value:
                raise ValueError(
                    f"{source_label} entry `{pair.strip()}` must use the form `key=value`."
                )
            parsed[key] = value
        return parsed

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> GrammarifyConfig:
        """Build a validated config from a normalized mapping payload."""

        ConfigLoader._validate_yaml_keys(payload, source_label)

        config = GrammarifyConfig(
            substitutions=ConfigLoader._optional_string_map(
                payload, "substitutions", source_label
            ),
            disconnected_words=ConfigLoader._optional_string_list(
                payload, "disconnected_words", source_label
            ),
        )
        config.validate()
        return config

    @staticmethod
    def _validate_yaml_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Reject keys the loader does not understand."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

    @staticmethod
    def _optional_string_map(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> dict[str, str]:
        """Read an optional mapping of strings, stripping keys and values."""

        value = payload.get(key)
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise ValueError(f"{source_label} field `{key}` must be a mapping/object.")

        normalized: dict[str, str] = {}
        for raw_key, raw_value in value.items():
            if not isinstance(raw_value, (str, int, float)) or isinstance(raw_value, bool):
                raise ValueError(
                    f"{source_label} field `{key}.{raw_key}` must be a string value."
                )
            normalized[str(raw_key).strip()] = str(raw_value).strip()
        return normalized

    @staticmethod
    def _optional_string_list(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> tuple[str, ...]:
        """Read an optional list of strings, stripping each entry."""

        value = payload.get(key)
        if value is None:
            return ()
        if not isinstance(value, list):
            raise ValueError(f"{source_label} field `{key}` must be a list.")
        if not all(isinstance(item, str) for item in value):
            raise ValueError(f"{source_label} field `{key}` must contain only strings.")
        return tuple(item.strip() for item in value)
