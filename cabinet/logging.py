"""
Console logging and session records for the cabinet.

Every module asks for a logger by name and gets `[name] LEVEL: message`
lines printed at or above that module's level. Levels are read from the
environment when this module is imported and can be changed later with
configure_logging():

    CABINET_LOG_LEVEL=DEBUG          # every module
    CABINET_LOG_FLAPPYBIRD=TRACE     # one module
    CABINET_LOG_DIR=~/arcade-logs    # where record files go

Records are JSON objects that outlive the window, in practice one summary
per finished session. The host registers a sink for the 'sessions' module
at startup: a FileSink when CABINET_LOGGING_SESSIONS_ENABLED is true, a
NullSink otherwise. A record emitted for a module with no sink is dropped.

Usage:
    from cabinet.logging import get_logger, emit_record

    log = get_logger('brickbreaker')
    log.info("Bricks cleared in %d frames", frames)

    emit_record('sessions', summary.model_dump())
"""

import json
import os
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Protocol, Set, TextIO

LEVEL_PREFIX = 'CABINET_LOG_'
RECORDS_PREFIX = 'CABINET_LOGGING_'


class LogLevel(IntEnum):
    """Console levels. Values line up with the stdlib logging module."""
    TRACE = 5      # per-frame detail
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100

    @classmethod
    def parse(cls, name: str) -> 'LogLevel':
        """Level from its name. WARN is accepted, anything unknown is INFO."""
        name = name.strip().upper()
        if name == 'WARN':
            return cls.WARNING
        return cls.__members__.get(name, cls.INFO)


def _module_key(module: str) -> str:
    return module.lower().replace('.', '_').replace('/', '_')


@dataclass
class LogConfig:
    """Console levels and record settings for the whole process."""
    default_level: LogLevel = LogLevel.INFO
    module_levels: Dict[str, LogLevel] = field(default_factory=dict)
    log_dir: Optional[Path] = None
    recorded_modules: Set[str] = field(default_factory=set)

    def level_for(self, module_key: str) -> LogLevel:
        return self.module_levels.get(module_key, self.default_level)

    def records_enabled(self, module: str) -> bool:
        return _module_key(module) in self.recorded_modules

    def records_dir(self) -> Path:
        """CABINET_LOG_DIR, else cabinet/logs under the XDG data home."""
        if self.log_dir is not None:
            return self.log_dir
        data_home = os.environ.get('XDG_DATA_HOME') or Path.home() / '.local' / 'share'
        return Path(data_home) / 'cabinet' / 'logs'


def load_env_config(environ: Mapping[str, str] = os.environ) -> LogConfig:
    """Build a LogConfig from CABINET_LOG_* and CABINET_LOGGING_*_ENABLED."""
    config = LogConfig()
    for key, value in environ.items():
        if key == 'CABINET_LOG_LEVEL':
            config.default_level = LogLevel.parse(value)
        elif key == 'CABINET_LOG_DIR':
            config.log_dir = Path(value).expanduser()
        elif key.startswith(LEVEL_PREFIX):
            config.module_levels[_module_key(key[len(LEVEL_PREFIX):])] = LogLevel.parse(value)
        elif key.startswith(RECORDS_PREFIX) and key.endswith('_ENABLED'):
            module = _module_key(key[len(RECORDS_PREFIX):-len('_ENABLED')])
            if value.strip().lower() in ('1', 'true', 'yes', 'on'):
                config.recorded_modules.add(module)
    return config


_config = load_env_config()


def configure_logging(
    level: Optional[str] = None,
    modules: Optional[Dict[str, str]] = None,
) -> None:
    """Override levels after import, e.g. from the launcher's --log-level.

    Args:
        level: New default level for every module
        modules: Module name -> level, for per-module overrides
    """
    if level is not None:
        _config.default_level = LogLevel.parse(level)
    for module, module_level in (modules or {}).items():
        _config.module_levels[_module_key(module)] = LogLevel.parse(module_level)


# =============================================================================
# Console loggers
# =============================================================================

class CabinetLogger:
    """Level-filtered console logger for one module.

    Messages use %-style arguments, formatted only when the line is printed.
    """

    def __init__(self, module: str):
        self.module = module
        self._key = _module_key(module)

    @property
    def level(self) -> LogLevel:
        return _config.level_for(self._key)

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def log(self, level: LogLevel, msg: str, *args) -> None:
        if level < self.level:
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {level.name}: {msg}")

    def trace(self, msg: str, *args) -> None:
        self.log(LogLevel.TRACE, msg, *args)

    def debug(self, msg: str, *args) -> None:
        self.log(LogLevel.DEBUG, msg, *args)

    def info(self, msg: str, *args) -> None:
        self.log(LogLevel.INFO, msg, *args)

    def warning(self, msg: str, *args) -> None:
        self.log(LogLevel.WARNING, msg, *args)

    def error(self, msg: str, *args) -> None:
        self.log(LogLevel.ERROR, msg, *args)

    def critical(self, msg: str, *args) -> None:
        self.log(LogLevel.CRITICAL, msg, *args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> CabinetLogger:
    """Logger for a module name such as 'loop' or 'flappybird'. Cached."""
    return CabinetLogger(module)


# =============================================================================
# Records
# =============================================================================

class RecordSink(Protocol):
    def emit(self, module: str, record: Dict[str, Any]) -> None: ...

    def close(self) -> None: ...


class NullSink:
    """Drops every record. Used when a module's records are switched off."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def close(self) -> None:
        pass


class FileSink:
    """Appends records to one JSONL file per module.

    Files are named <session_name>_<module>.jsonl and opened on the first
    record, so a run that ends no session leaves no file behind. Each file
    starts with a header line; close() appends a footer line.
    """

    def __init__(self, log_dir: Path, session_name: Optional[str] = None):
        self.log_dir = Path(log_dir)
        self.session_name = session_name or datetime.now().strftime("%Y%m%d_%H%M%S")
        self._files: Dict[str, TextIO] = {}

    def path_for(self, module: str) -> Path:
        return self.log_dir / f"{self.session_name}_{module}.jsonl"

    def _open(self, module: str) -> TextIO:
        self.log_dir.mkdir(parents=True, exist_ok=True)
        f = open(self.path_for(module), 'a')
        self._write_line(f, {'type': 'header', 'module': module,
                             'session_name': self.session_name,
                             'started': datetime.now().isoformat()})
        return f

    @staticmethod
    def _write_line(f: TextIO, record: Dict[str, Any]) -> None:
        f.write(json.dumps(record) + "\n")

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        if module not in self._files:
            self._files[module] = self._open(module)
        self._write_line(self._files[module],
                         {'recorded_at': datetime.now().isoformat(), **record})

    def close(self) -> None:
        for module, f in self._files.items():
            self._write_line(f, {'type': 'footer', 'module': module,
                                 'ended': datetime.now().isoformat()})
            f.close()
        self._files.clear()


_sinks: Dict[str, RecordSink] = {}


def register_sink(module: str, sink: RecordSink) -> None:
    _sinks[module] = sink


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """Send a JSON-serialisable record to the module's sink.

    Returns:
        False if no sink is registered for the module
    """
    sink = _sinks.get(module)
    if sink is None:
        return False
    sink.emit(module, record)
    return True


def close_all_sinks() -> None:
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()


def open_record_sink(module: str, session_name: Optional[str] = None) -> RecordSink:
    """FileSink if CABINET_LOGGING_<MODULE>_ENABLED is on, else NullSink."""
    if not _config.records_enabled(module):
        return NullSink()
    return FileSink(_config.records_dir(), session_name=session_name)
