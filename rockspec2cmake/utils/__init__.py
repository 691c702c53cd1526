"""
Utility modules for the generator
"""

import sys
import logging
from typing import Optional


class ColoredFormatter(logging.Formatter):
    """Colored log formatter for terminal output"""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
        'SUCCESS': '\033[92m',  # Bright Green
        'RESET': '\033[0m'
    }

    def __init__(self, *args, use_color: Optional[bool] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.use_color = sys.stderr.isatty() if use_color is None else use_color

    def format(self, record):
        if not self.use_color:
            return super().format(record)

        # Color a copy so other handlers see the plain record
        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset = self.COLORS['RESET']
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{reset}"
        record.msg = f"{color}{record.msg}{reset}"
        return super().format(record)


class Logger:
    """Generator logger"""

    SUCCESS = 25  # Between INFO and WARNING
    NAME = "rockspec2cmake"

    def __init__(self, verbose: bool = False, log_file: Optional[str] = None, stream=None):
        """
        Initialize logger

        Args:
            verbose: Enable verbose output
            log_file: Optional log file path
            stream: Console stream, stderr by default so stdout stays free
                    for generated output
        """
        self.verbose = verbose

        # Add SUCCESS level
        logging.addLevelName(self.SUCCESS, "SUCCESS")

        self.logger = logging.getLogger(self.NAME)
        self.logger.setLevel(logging.DEBUG if verbose else logging.INFO)

        # Remove existing handlers
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        stream = stream or sys.stderr
        console_handler = logging.StreamHandler(stream)
        console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)

        if verbose:
            fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        else:
            fmt = "[%(levelname)s] %(message)s"

        use_color = stream.isatty() if hasattr(stream, "isatty") else False
        console_handler.setFormatter(ColoredFormatter(fmt, datefmt="%H:%M:%S", use_color=use_color))
        self.logger.addHandler(console_handler)

        if log_file:
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            ))
            self.logger.addHandler(file_handler)

    def debug(self, msg: str):
        """Log debug message"""
        self.logger.debug(msg)

    def info(self, msg: str):
        """Log info message"""
        self.logger.info(msg)

    def warning(self, msg: str):
        """Log warning message"""
        self.logger.warning(msg)

    def error(self, msg: str):
        """Log error message"""
        self.logger.error(msg)

    def success(self, msg: str):
        """Log success message"""
        self.logger.log(self.SUCCESS, msg)


__all__ = ["Logger", "ColoredFormatter"]
