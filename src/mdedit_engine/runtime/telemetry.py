"""telelog wiring for the markdown editing engine.

Engine code logs through ``record_event`` for discrete state changes (menu
open/close, buffer writes) and ``span`` around each capture, restore,
transform and toolbar press. ``configure`` swaps the active telelog config,
either from a named preset or from ``MDEDIT_*`` environment variables.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "MDEDIT_"
LOGGER_NAME = "mdedit_engine"

# Each preset is a sequence of ``Config.with_*`` calls applied in order.
_PRESET_OPTIONS: Dict[str, Tuple[Tuple[str, Any], ...]] = {
    "development": (
        ("with_min_level", "DEBUG"),
        ("with_console_output", True),
        ("with_colored_output", True),
        ("with_json_format", False),
    ),
    "production": (
        ("with_min_level", "WARNING"),
        ("with_console_output", False),
        ("with_buffering", True),
    ),
    "performance": (
        ("with_min_level", "DEBUG"),
        ("with_console_output", False),
        ("with_json_format", True),
        ("with_profiling", True),
    ),
}
_PRESET_LOG_FILES = {
    "production": "mdedit.log",
    "performance": "mdedit-performance.log",
}
PRESETS = tuple(_PRESET_OPTIONS)

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    return value if isinstance(value, str) else repr(value)


def _preset_config(preset: str) -> Any:
    key = preset.lower()
    if key not in _PRESET_OPTIONS:
        raise ValueError(f"Unknown preset '{preset}', expected one of {PRESETS}.")

    config = tl.Config()
    for method, value in _PRESET_OPTIONS[key]:
        getattr(config, method)(value)
    if key in _PRESET_LOG_FILES:
        config.with_file_output(_env("LOG_FILE") or _PRESET_LOG_FILES[key])
    return config


def _env_config() -> Any:
    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or "WARNING").upper())
    config.with_console_output(not _env_flag("DISABLE_CONSOLE"))
    if not _env_flag("DISABLE_CONSOLE"):
        config.with_colored_output(not _env_flag("NO_COLOR"))
    if _env_flag("LOG_JSON"):
        config.with_json_format(True)
    if _env("LOG_FILE"):
        config.with_file_output(_env("LOG_FILE"))
    if _env_flag("LOG_BUFFERED"):
        config.with_buffering(True)
        config.with_buffer_size(int(_env("LOG_BUFFER_SIZE") or "2048"))
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active telelog configuration.

    ``preset`` names one of ``PRESETS``; ``config`` is a ready ``tl.Config``.
    With neither, the configuration is rebuilt from ``MDEDIT_*`` variables.
    """

    global _ACTIVE_CONFIG
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        config = _preset_config(preset)
    elif config is None:
        config = _env_config()

    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` bound to the active config."""

    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = _env_config()
    logger_name = name or LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def _log(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    level = level.lower()
    with_data = getattr(logger, f"{level}_with", None)
    if with_data is not None:
        with_data(message, [(key, _stringify(val)) for key, val in payload.items()])
        return

    plain = getattr(logger, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str, *, level: str = "info", data: Optional[Dict[str, Any]] = None
) -> None:
    """Emit ``event::<name>`` with ``data`` attached as key/value pairs."""

    _log(get_logger(), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Yielded by ``span``; metadata added here is reported when it closes."""

    logger: Any
    name: str
    component: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def _report(self, level: str, message: str, **extra: str) -> None:
        payload: Dict[str, Any] = {"span": self.name, **self.metadata, **extra}
        if self.component:
            payload["component"] = self.component
        _log(self.logger, level, message, payload)

    def done(self) -> None:
        self._report("debug", "span::done")

    def fail(self, reason: str) -> None:
        self._report("error", "span::fail", reason=reason)


@contextmanager
def span(
    name: str,
    *,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block, tracking it under ``component`` when one is given.

    ``metadata`` is pushed as logger context while the block runs. An
    exception raised inside the block is reported as ``span::fail`` and
    propagates unchanged.
    """

    log = get_logger()
    handle = SpanHandle(
        logger=log,
        name=name,
        component=component,
        metadata={key: _stringify(val) for key, val in (metadata or {}).items()},
    )
    context_keys = tuple(handle.metadata)
    for key in context_keys:
        log.add_context(key, handle.metadata[key])

    try:
        with ExitStack() as stack:
            if component:
                stack.enter_context(log.track_component(component))
            stack.enter_context(log.profile(name))
            try:
                yield handle
            except Exception as exc:
                handle.fail(str(exc))
                raise
            handle.done()
    finally:
        for key in context_keys:
            log.remove_context(key)


configure()

__all__ = [
    "PRESETS",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
