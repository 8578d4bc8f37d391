"""Settings dataclass and persistence helpers."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping

from .errors import SettingsError

__all__ = [
    "Settings",
    "SettingsStore",
    "get_settings",
    "configure",
    "reset_settings",
]

LOGGER = logging.getLogger(__name__)
_SETTINGS_DIR = Path.home() / ".textslice"
_DEFAULT_SETTINGS_PATH = _SETTINGS_DIR / "settings.json"
_SETTINGS_VERSION = 1
_ENV_OVERRIDES: Mapping[str, str] = {
    "TEXTSLICE_LOG_DIR": "log_dir",
}
_BOOL_ENV_OVERRIDES: Mapping[str, str] = {
    "TEXTSLICE_STRICT_UTF8": "strict_utf8",
    "TEXTSLICE_DEBUG_LOGGING": "debug_logging",
}
_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(slots=True, frozen=True)
class Settings:
    """Library-wide behaviour toggles."""

    strict_utf8: bool = True
    debug_logging: bool = False
    log_dir: str | None = None

    def __post_init__(self) -> None:
        for name in ("strict_utf8", "debug_logging"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise SettingsError(
                    message=f"Setting '{name}' must be a boolean",
                    setting=name,
                    details={"value": repr(value)},
                )
        if self.log_dir is not None and not isinstance(self.log_dir, str):
            raise SettingsError(
                message="Setting 'log_dir' must be a string path",
                setting="log_dir",
                details={"value": repr(self.log_dir)},
            )


class SettingsStore:
    """Persistence adapter for :class:`Settings`."""

    def __init__(self, path: Path | str | None = None) -> None:
        self._path = Path(path) if path is not None else _DEFAULT_SETTINGS_PATH

    @property
    def path(self) -> Path:
        """Return the resolved path backing this store."""

        return self._path

    def load(self, *, overrides: Mapping[str, Any] | None = None) -> Settings:
        """Load settings from disk, applying explicit and environment overrides."""

        payload = self._read_payload()
        settings = Settings()
        if payload:
            data = _filter_fields(payload)
            try:
                settings = Settings(**data)
            except SettingsError as exc:
                LOGGER.warning("Settings file %s rejected: %s", self._path, exc)
                settings = Settings()
            LOGGER.debug("Settings loaded from %s: %s", self._path, sorted(data))

        if overrides:
            settings = apply_overrides(settings, overrides, source="runtime")

        return apply_env_overrides(settings)

    def save(self, settings: Settings) -> Path:
        """Persist settings to disk with an atomic file write."""

        payload = asdict(settings)
        payload["version"] = _SETTINGS_VERSION
        body = json.dumps(payload, indent=2, sort_keys=True)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(".tmp")
        tmp_path.write_text(body, encoding="utf-8")
        tmp_path.replace(self._path)
        LOGGER.debug("Settings saved to %s", self._path)
        return self._path

    def _read_payload(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            text = self._path.read_text(encoding="utf-8")
            payload = json.loads(text)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as exc:
            LOGGER.warning("Settings file %s is not valid JSON: %s", self._path, exc)
            return {}
        if not isinstance(payload, dict):
            LOGGER.warning("Settings file %s does not contain an object", self._path)
            return {}
        return payload


def apply_overrides(
    settings: Settings,
    overrides: Mapping[str, Any],
    *,
    source: str = "runtime",
) -> Settings:
    """Return ``settings`` with the known, non-``None`` ``overrides`` applied."""

    filtered = {key: value for key, value in _filter_fields(overrides).items() if value is not None}
    if filtered:
        LOGGER.debug("Applying %s settings overrides: %s", source, sorted(filtered))
        settings = replace(settings, **filtered)
    return settings


def apply_env_overrides(settings: Settings) -> Settings:
    """Return ``settings`` with ``TEXTSLICE_*`` environment values applied."""

    overrides: Dict[str, Any] = {}
    for env_name, field_name in _ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value is not None:
            overrides[field_name] = value
    for env_name, field_name in _BOOL_ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value is not None:
            overrides[field_name] = value.strip().lower() in _TRUE_VALUES
    if overrides:
        settings = apply_overrides(settings, overrides, source="environment")
    return settings


_ACTIVE: Settings | None = None


def get_settings() -> Settings:
    """Return the active settings, deriving them from the environment on first use."""

    global _ACTIVE
    if _ACTIVE is None:
        _ACTIVE = apply_env_overrides(Settings())
    return _ACTIVE


def configure(settings: Settings | None = None, **overrides: Any) -> Settings:
    """Replace the active settings and return them.

    ``overrides`` are applied on top of ``settings`` (or of the currently
    active settings when ``settings`` is omitted).
    """

    global _ACTIVE
    base = settings if settings is not None else get_settings()
    if overrides:
        unknown = set(overrides) - {field.name for field in fields(Settings)}
        if unknown:
            raise SettingsError(
                message=f"Unknown settings: {', '.join(sorted(unknown))}",
                details={"unknown": sorted(unknown)},
            )
        base = apply_overrides(base, overrides, source="configure")
    _ACTIVE = base
    return base


def reset_settings() -> None:
    """Forget the active settings so the next access re-reads the environment."""

    global _ACTIVE
    _ACTIVE = None


def _filter_fields(payload: Mapping[str, Any]) -> Dict[str, Any]:
    allowed = {field.name for field in fields(Settings)}
    result: Dict[str, Any] = {}
    for key, value in payload.items():
        if key not in allowed:
            continue
        result[key] = value
    return result
