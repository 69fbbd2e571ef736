"""telelog wiring for the editing core.

Action dispatch and buffer mutations run inside :func:`span`, which profiles
the block and tags log lines with the buffer and action involved. One-off
facts such as a file reload go through :func:`record_event`.

Logging is configured from ``EDITCORE_*`` variables unless a preset is
chosen. The terminal app uses ``quiet`` so log lines never draw over the
editor.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "EDITCORE_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "editcore")


@dataclass(frozen=True)
class LogOptions:
    """The handful of telelog switches editcore cares about."""

    level: str = "INFO"
    console: bool = True
    colored: bool = True
    json: bool = False
    log_file: Optional[str] = None
    buffered: bool = False

    def build(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_profiling(True)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.colored)
        config.with_json_format(self.json)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffered:
            config.with_buffering(True)
        return config


PRESET_OPTIONS: Dict[str, LogOptions] = {
    "development": LogOptions(level="DEBUG"),
    "production": LogOptions(console=False, log_file="editcore.log", buffered=True),
    "quiet": LogOptions(level="WARNING", console=False),
}
PRESETS = tuple(PRESET_OPTIONS)

_loggers: Dict[str, Any] = {}
_config: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    return (_env(name) or "").strip().lower() in {"1", "true", "yes", "on"}


def options_from_env() -> LogOptions:
    return LogOptions(
        level=(_env("LOG_LEVEL") or "INFO").upper(),
        console=not _env_flag("DISABLE_CONSOLE"),
        colored=not _env_flag("NO_COLOR"),
        json=_env_flag("LOG_JSON"),
        log_file=_env("LOG_FILE"),
    )


def preset_options(preset: str) -> LogOptions:
    """Options for a named preset; ``EDITCORE_LOG_FILE`` overrides the file."""

    try:
        options = PRESET_OPTIONS[preset.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown preset '{preset}'. Expected one of {PRESETS}."
        ) from None
    log_file = _env("LOG_FILE")
    if log_file:
        options = replace(options, log_file=log_file)
    return options


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active telelog configuration and drop cached loggers.

    Pass an explicit ``telelog.Config`` or a preset name, not both; with
    neither the configuration is rebuilt from the environment.
    """

    global _config
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")
    if preset:
        config = preset_options(preset).build()
    elif config is None:
        config = options_from_env().build()
    _config = config
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _loggers:
        if _config is None:
            configure()
        _loggers[logger_name] = tl.Logger.with_config(logger_name, _config)
    return _loggers[logger_name]


def _text(value: Any) -> str:
    return value if isinstance(value, str) else repr(value)


def _emit(logger: Any, level: str, message: str, data: Dict[str, Any]) -> None:
    write = getattr(logger, f"{level.lower()}_with")
    write(message, [(key, _text(value)) for key, value in data.items()])


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` as structured fields."""

    _emit(get_logger(logger_name), level, f"event::{name}", data or {})


@dataclass
class SpanHandle:
    """Yielded by :func:`span`; metadata added here is logged on failure."""

    logger: Any
    name: str
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        _emit(
            self.logger,
            "error",
            "span::fail",
            {"span": self.name, **self.metadata, "reason": reason},
        )


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block, optionally tracked as a telelog component.

    ``component=True`` names the component after the span. ``metadata`` is
    pushed as logger context while the block runs. Exceptions are logged
    and re-raised.
    """

    log = get_logger(logger_name)
    context = {key: _text(value) for key, value in (metadata or {}).items()}
    handle = SpanHandle(logger=log, name=name, metadata=dict(context))
    for key, value in context.items():
        log.add_context(key, value)
    try:
        with ExitStack() as stack:
            if component:
                stack.enter_context(
                    log.track_component(name if component is True else component)
                )
            stack.enter_context(log.profile(name))
            try:
                yield handle
            except Exception as exc:
                handle.fail(str(exc))
                raise
    finally:
        for key in context:
            log.remove_context(key)


__all__ = [
    "LogOptions",
    "PRESETS",
    "SpanHandle",
    "configure",
    "get_logger",
    "options_from_env",
    "preset_options",
    "record_event",
    "span",
]
