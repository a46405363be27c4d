"""Logging and profiling for the style engine, backed by telelog.

Callers use ``get_logger``, ``record_event`` and ``span``; hosts pick the
output with ``configure`` or the ``SMART_STYLES_*`` environment variables.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, List, Mapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "SMART_STYLES_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "smart_styles")

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class TelemetrySettings:
    """Output options translated into a ``telelog.Config``."""

    level: str = "INFO"
    console: bool = True
    colored: bool = True
    json: bool = False
    log_file: Optional[str] = None
    buffered: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> "TelemetrySettings":
        def flag(name: str) -> bool:
            return environ.get(f"{ENV_PREFIX}{name}", "").lower() in _TRUTHY

        return cls(
            level=environ.get(f"{ENV_PREFIX}LOG_LEVEL", "INFO").upper(),
            console=not flag("DISABLE_CONSOLE"),
            colored=not flag("NO_COLOR"),
            json=flag("LOG_JSON"),
            log_file=environ.get(f"{ENV_PREFIX}LOG_FILE") or None,
        )

    def to_config(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.colored)
        if self.json:
            config.with_json_format(True)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffered:
            config.with_buffering(True)
        return config


PRESETS: Dict[str, TelemetrySettings] = {
    "development": TelemetrySettings(level="DEBUG"),
    "production": TelemetrySettings(
        console=False, log_file="smart_styles.log", buffered=True
    ),
    # Full-screen hosts own the terminal.
    "quiet": TelemetrySettings(level="ERROR", console=False),
}

_loggers: Dict[str, Any] = {}
_active_config: Optional[Any] = None


def _preset_settings(preset: str) -> TelemetrySettings:
    try:
        settings = PRESETS[preset.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown preset '{preset}', expected one of {sorted(PRESETS)}."
        ) from None
    log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE")
    if log_file and settings.log_file:
        settings = replace(settings, log_file=log_file)
    return settings


def configure(
    *,
    config: Optional[Any] = None,
    preset: Optional[str] = None,
    settings: Optional[TelemetrySettings] = None,
) -> None:
    """Swap the active telelog configuration and drop cached loggers.

    Pass at most one of ``config`` (a ready ``telelog.Config``), ``preset``
    (a key of ``PRESETS``) or ``settings``. With none of them the
    configuration is read from the environment.
    """

    global _active_config
    chosen = [value for value in (config, preset, settings) if value is not None]
    if len(chosen) > 1:
        raise ValueError("Pass only one of `config`, `preset` or `settings`.")

    if preset is not None:
        config = _preset_settings(preset).to_config()
    elif settings is not None:
        config = settings.to_config()
    elif config is None:
        config = TelemetrySettings.from_env().to_config()

    _active_config = config
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return the cached ``telelog.Logger`` for ``name``."""

    global _active_config
    if _active_config is None:
        _active_config = TelemetrySettings.from_env().to_config()
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _loggers:
        _loggers[logger_name] = tl.Logger.with_config(logger_name, _active_config)
    return _loggers[logger_name]


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _emit(log: Any, level: str, message: str, payload: Mapping[str, Any]) -> None:
    """Log ``message`` with ``payload``, as pairs when the level supports it."""

    name = level.lower()
    structured = getattr(log, f"{name}_with", None)
    if structured is not None:
        pairs = [(str(key), _text(value)) for key, value in payload.items()]
        structured(message, pairs)
        return

    plain = getattr(log, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {dict(payload)}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Mapping[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` attached."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Yielded by ``span``; collects metadata reported if the block fails."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, str] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload["reason"] = reason
        _emit(self.logger, "error", "span::fail", payload)


def _pop_context(log: Any, keys: List[str]) -> None:
    for key in keys:
        log.remove_context(key)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Mapping[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block as ``name``.

    ``component=True`` also tracks it as a component called ``name``; a string
    names the component. ``metadata`` is pushed onto the logger context for
    the duration of the block. Exceptions are logged and re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    handle = SpanHandle(log, name, component_name)
    pushed: List[str] = []

    with ExitStack() as stack:
        stack.callback(_pop_context, log, pushed)
        for key, value in (metadata or {}).items():
            handle.add_metadata(key, value)
            log.add_context(key, handle.metadata[key])
            pushed.append(key)
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))

        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "PRESETS",
    "SpanHandle",
    "TelemetrySettings",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
