"""
Logging utilities for the calendar invite application.
"""

import logging
import traceback
from collections.abc import Callable
from datetime import datetime
from functools import wraps
from typing import Any
from typing import TypeVar

from typing_extensions import ParamSpec


T = TypeVar('T')
P = ParamSpec('P')

def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name."""
    return logging.getLogger(name)

def log_execution(level: str = 'DEBUG') -> Callable[
    [Callable[P, T]], Callable[P, T]
]:
    """Decorator to log function execution with timing."""
    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            logger = logging.getLogger(func.__module__)
            start_time = datetime.now()
            logger.log(getattr(logging, level), f"Calling {func.__name__}")
            
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration = datetime.now() - start_time
                logger.error(
                    f"{func.__name__} failed after {duration.total_seconds():.3f}s: {e!s}"
                )
                raise
            duration = datetime.now() - start_time
            logger.log(getattr(logging, level),
                f"{func.__name__} completed in {duration.total_seconds():.3f}s")
            return result
        
        return wrapper
    return decorator

class LoggerMixin:
    """Mixin class that provides context-aware logging."""
    
    def __init__(self) -> None:
        """Initialize logger."""
        self._logger = logging.getLogger(self.__class__.__module__)
        self._log_context: dict[str, Any] = {}
    
    @property
    def logger(self) -> logging.Logger:
        """Get the logger instance."""
        return self._logger
    
    def set_log_context(self, **kwargs: Any) -> None:
        """Set context values for all subsequent log messages."""
        self._log_context.update(kwargs)
    
    def _format_message(self, msg: str, **kwargs: Any) -> str:
        """Format log message with context and additional kwargs."""
        context = {**self._log_context, **kwargs}
        if context:
            context_str = " | ".join(f"{k}={v}" for k, v in context.items())
            return f"{msg} | Context: {context_str}"
        return msg
    
    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log a debug message with context."""
        self.logger.debug(self._format_message(msg, **kwargs))
    
    def info(self, msg: str, **kwargs: Any) -> None:
        """Log an info message with context."""
        self.logger.info(self._format_message(msg, **kwargs))
    
    def error(self, msg: str, exc_info: Any = None, **kwargs: Any) -> None:
        """Log an error message with context and optional exception info."""
        if isinstance(exc_info, BaseException):
            kwargs['error'] = str(exc_info)
            kwargs['traceback'] = "".join(traceback.format_tb(exc_info.__traceback__))
        self.logger.error(self._format_message(msg, **kwargs))
