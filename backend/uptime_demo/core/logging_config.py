"""
Logging configuration with optional JSON output and run context support
"""
import json
import logging
import sys
from contextvars import ContextVar
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from uptime_demo.core.config import get_settings

# Context variables attached to every record (run_id, variant, ...)
log_context: ContextVar[Dict[str, Any]] = ContextVar('log_context', default={})

# LogRecord attributes that are not user-supplied extras
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord('', logging.INFO, '', 0, '', None, None)).keys()
) | {'message', 'asctime', 'taskName'}


class ContextualFormatter(logging.Formatter):
    """JSON formatter with context support"""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON"""
        log_dict = {
            'timestamp': self.formatTime(record, self.datefmt),
            'level': record.levelname,
            'logger': record.name,
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
            'message': record.getMessage(),
        }

        ctx = log_context.get()
        if ctx:
            log_dict.update(ctx)

        if getattr(record, 'taskName', None):
            log_dict['taskName'] = record.taskName

        if record.exc_info:
            log_dict['exception'] = self.formatException(record.exc_info)

        # Fields passed through extra=
        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS:
                continue
            try:
                json.dumps(value)
                log_dict[key] = value
            except (TypeError, ValueError):
                log_dict[key] = str(value)

        return json.dumps(log_dict, ensure_ascii=False, default=str)


class ContextFilter(logging.Filter):
    """Copy the current log context onto the record so text formats can use it"""

    def filter(self, record: logging.LogRecord) -> bool:
        ctx = log_context.get()
        record.run_id = ctx.get('run_id', '-')
        return True


class LoggingConfig:
    """Centralized logging configuration"""

    _configured = False
    _handlers: list = []
    _module_levels: Dict[str, str] = {}

    @classmethod
    def configure(cls, module_levels: Optional[Dict[str, str]] = None, stream=None, settings=None):
        """Configure logging for the application"""
        if cls._configured:
            return

        settings = settings or get_settings()

        default_levels = {
            "uptime_demo": settings.log_level,
            "root": settings.log_level,
        }
        # Already validated by Settings
        default_levels.update(settings.module_levels)

        if module_levels:
            default_levels.update(module_levels)

        cls._module_levels = default_levels

        if settings.log_format == "json":
            formatter = ContextualFormatter(datefmt='%Y-%m-%d %H:%M:%S')
        else:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - [%(run_id)s] %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )

        handlers = []

        # Console handler on stderr; stdout carries the program output
        console_handler = logging.StreamHandler(stream or sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(ContextFilter())
        handlers.append(console_handler)

        if settings.log_file_enabled:
            log_path = Path(settings.log_file_path)
            if not log_path.is_absolute():
                _project_root = Path(__file__).resolve().parent.parent.parent.parent
                log_path = _project_root / log_path
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = TimedRotatingFileHandler(
                filename=str(log_path),
                when='midnight',
                interval=1,
                backupCount=settings.log_file_retention,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            file_handler.addFilter(ContextFilter())
            handlers.append(file_handler)

        root_logger = logging.getLogger()
        root_logger.setLevel(default_levels.get("root", "INFO").upper())
        for handler in handlers:
            root_logger.addHandler(handler)
        cls._handlers = handlers

        for module, level in default_levels.items():
            if module != "root":
                logging.getLogger(module).setLevel(level.upper())

        cls._configured = True

    @classmethod
    def reset(cls):
        """Remove installed handlers so configure() can run again"""
        root_logger = logging.getLogger()
        for handler in cls._handlers:
            root_logger.removeHandler(handler)
            handler.close()
        cls._handlers = []
        cls._module_levels = {}
        cls._configured = False

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger for a module"""
        if not cls._configured:
            cls.configure()
        return logging.getLogger(name)

    @classmethod
    def set_module_level(cls, module: str, level: str):
        """Set logging level for a specific module"""
        logging.getLogger(module).setLevel(level.upper())
        cls._module_levels[module] = level

    @classmethod
    def get_module_level(cls, module: str) -> str:
        """Get logging level for a specific module"""
        return logging.getLevelName(logging.getLogger(module).level)

    @classmethod
    def set_context(cls, **kwargs):
        """Set context variables for logging"""
        ctx = log_context.get().copy()
        ctx.update(kwargs)
        log_context.set(ctx)

    @classmethod
    def clear_context(cls):
        """Clear context variables"""
        log_context.set({})
