import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Dict
import traceback
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
import time
import uuid


# Attributes every LogRecord carries; anything else came in through `extra`
_RESERVED_RECORD_ATTRS = frozenset([
    'name', 'msg', 'args', 'created', 'filename', 'funcName', 'levelname',
    'levelno', 'lineno', 'module', 'msecs', 'pathname', 'process',
    'processName', 'relativeCreated', 'thread', 'threadName', 'taskName',
    'getMessage', 'exc_info', 'exc_text', 'stack_info', 'message',
])


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        
        # Add extra fields
        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_ATTRS:
                log_obj[key] = value
        
        # Add exception info if present
        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)
            
        return json.dumps(log_obj, default=str)


def setup_logging(
    name: str,
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    console: bool = False
) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()
    
    json_formatter = JSONFormatter()
    
    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(json_formatter)
        logger.addHandler(console_handler)
    
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(json_formatter)
        logger.addHandler(file_handler)
    
    # Default to console if no handlers specified
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(json_formatter)
        logger.addHandler(console_handler)
    
    return logger


_loggers: Dict[str, logging.Logger] = {}


def get_logger(name: str, **kwargs) -> logging.Logger:
    if name not in _loggers:
        _loggers[name] = setup_logging(name, **kwargs)
    return _loggers[name]


def configure_loggers(level: int, log_file: Optional[str] = None) -> None:
    """既に生成済みのロガーも含め、レベルと出力先を再設定する"""
    for name in list(_loggers):
        _loggers[name] = setup_logging(name, level=level, log_file=log_file)


class LoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app):
        super().__init__(app)
        self.logger = get_logger("api.access")
    
    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = time.time()
        
        self.logger.info(
            "Request started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "query": request.url.query,
                "client": request.client.host if request.client else None,
            }
        )
        
        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.time() - start_time
            self.logger.error(
                "Request failed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                    "duration_ms": round(duration * 1000, 2),
                    "error": str(e),
                    "traceback": traceback.format_exc(),
                }
            )
            raise
        
        duration = time.time() - start_time
        response.headers["X-Request-ID"] = request_id
        self.logger.info(
            "Request completed",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round(duration * 1000, 2),
            }
        )
        return response
