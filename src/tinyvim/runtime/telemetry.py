"""telelog-backed logging for the editor.

The editor draws on the terminal itself, so console output stays off unless
``TINYVIM_LOG_CONSOLE`` asks for it; records go to ``TINYVIM_LOG_FILE`` (or
``--log-file``) when one is given and are dropped otherwise.

Entry points:

* ``configure`` picks the active ``tl.Config`` (explicit, preset, or default)
* ``get_logger`` hands out cached ``tl.Logger`` instances
* ``record_event`` writes one ``event::<name>`` record with key/value data
* ``span`` profiles a block and can track it as a telelog component
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "TINYVIM_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "tinyvim")

# preset -> (min level, default log file or None)
PRESETS: Dict[str, tuple[str, Optional[str]]] = {
    "development": ("DEBUG", "tinyvim-dev.log"),
    "production": ("INFO", None),
    "quiet": ("ERROR", None),
}

_loggers: Dict[str, Any] = {}
_config: Optional[Any] = None


def _setting(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _enabled(name: str) -> bool:
    return (_setting(name) or "").lower() in {"1", "true", "yes", "on"}


def _text(value: Any) -> str:
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _new_config(level: str, log_file: Optional[str]) -> Any:
    config = tl.Config()
    config.with_min_level(level.upper())
    config.with_console_output(_enabled("LOG_CONSOLE"))
    if _enabled("LOG_JSON"):
        config.with_json_format(True)
    if log_file:
        config.with_file_output(log_file)
    config.with_profiling(True)
    return config


def _preset_config(preset: str, log_file: Optional[str]) -> Any:
    try:
        level, preset_file = PRESETS[preset.lower()]
    except KeyError:
        raise ValueError(f"Unknown preset '{preset}'.") from None
    config = _new_config(level, log_file or _setting("LOG_FILE") or preset_file)
    if preset.lower() == "production":
        config.with_buffering(True)
    return config


def configure(
    *,
    config: Optional[Any] = None,
    preset: Optional[str] = None,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> None:
    """Replace the active configuration and drop cached loggers.

    ``config`` adopts a ready ``tl.Config``; ``preset`` names one of
    ``PRESETS``. The two are mutually exclusive. Otherwise a default config
    is built from ``level``/``log_file`` (usually command-line values) with
    the ``TINYVIM_LOG_*`` variables as fallback.
    """

    global _config
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")
    if preset:
        config = _preset_config(preset, log_file)
    elif config is None:
        config = _new_config(
            level or _setting("LOG_LEVEL") or "INFO", log_file or _setting("LOG_FILE")
        )
    _config = config
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    if _config is None:
        configure()
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _loggers:
        _loggers[logger_name] = tl.Logger.with_config(logger_name, _config)
    return _loggers[logger_name]


def _emit(log: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    name = level.lower()
    structured = getattr(log, f"{name}_with", None)
    if structured is not None:
        structured(message, [(str(k), _text(v)) for k, v in payload.items()])
        return
    plain = getattr(log, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


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
        payload: Dict[str, Any] = {"span": self.span_name, "reason": reason}
        payload.update(self.metadata)
        if self.component_name:
            payload["component"] = self.component_name
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block under ``name``.

    ``component=True`` also tracks the block as a component called ``name``;
    a string gives the component its own name. ``metadata`` is pushed as
    logger context while the block runs. Exceptions are logged and re-raised.
    """

    log = get_logger(logger_name)
    if component is True:
        component_name: Optional[str] = name
    else:
        component_name = component or None
    context = {key: _text(value) for key, value in (metadata or {}).items()}
    handle = SpanHandle(log, name, component_name, dict(context))

    with ExitStack() as stack:
        for key, value in context.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
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
    "configure",
    "get_logger",
    "record_event",
    "span",
]
