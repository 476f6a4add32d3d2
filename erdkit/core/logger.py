"""
ERDKIT Logging System

This module provides centralized logging for ERDKIT.
Records go to the console and, when configured, to a log file.
"""

import logging
import sys
from typing import Optional

from .config import Config


class Logger:
    """Centralized logging system for ERDKIT."""

    def __init__(self, name: str = "erdkit", level: str = "INFO", config: Optional[Config] = None):
        """Initialize logger.

        Args:
            name: Logger name
            level: Log level used when the configuration has none
            config: Optional Config instance (a default one is loaded otherwise)
        """
        self.name = name
        self.config = config or Config()

        config_level = self.config.get('logging.level', level) or level
        self.level = getattr(logging, str(config_level).upper(), logging.INFO)
        self.log_file = self.config.get('logging.file')

        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """Set up logger with console and optional file handlers."""
        logger = logging.getLogger(self.name)
        logger.setLevel(self.level)

        # Close and remove existing handlers
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(self.level)
        console_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

        if self.log_file:
            try:
                file_handler = logging.FileHandler(self.log_file, mode='a')
                file_handler.setLevel(logging.DEBUG)
                file_handler.setFormatter(logging.Formatter(
                    '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s',
                    datefmt='%Y-%m-%d %H:%M:%S'
                ))
                logger.addHandler(file_handler)
            except OSError as e:
                # Continue with console only
                print(f"Warning: Could not open log file {self.log_file}: {e}", file=sys.stderr)

        return logger

    def info(self, message: str, **kwargs) -> None:
        """Log info message."""
        self.logger.info(message, extra=kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message."""
        self.logger.warning(message, extra=kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log error message."""
        self.logger.error(message, extra=kwargs)

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message."""
        self.logger.debug(message, extra=kwargs)

    def critical(self, message: str, **kwargs) -> None:
        """Log critical message."""
        self.logger.critical(message, extra=kwargs)

    def log_phase_start(self, phase: str, **kwargs) -> None:
        """Log phase start."""
        self.info(f"Starting {phase} phase", phase=phase, **kwargs)

    def log_phase_complete(self, phase: str, **kwargs) -> None:
        """Log phase completion."""
        self.info(f"Completed {phase} phase", phase=phase, **kwargs)
