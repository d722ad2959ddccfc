"""
Logging configuration for the Label Track Converter.

This module sets up logging based on configuration settings.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


def setup_logging(config=None, log_file: Optional[str] = None) -> Optional[Path]:
    """
    Set up logging configuration.

    Args:
        config: Configuration object; defaults apply if omitted
        log_file: Optional log file name override

    Returns:
        Path of the log file, or None when file logging is disabled
    """
    log_level = config.log_level if config is not None else "INFO"
    file_logging = config.file_logging if config is not None else False
    log_dir = Path(config.log_dir) if config is not None else Path("logs")

    if log_file is None:
        log_file = "labeltrack_converter.log"

    # Configure logging format
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    handlers = []
    log_path = None

    if file_logging:
        if not log_dir.is_absolute():
            if getattr(sys, "frozen", False):
                app_dir = Path(sys.executable).parent
            else:
                app_dir = Path.cwd()
            log_dir = app_dir / log_dir
        log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = log_dir / f"{Path(log_file).stem}_{timestamp}.log"

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(log_format, date_format))
        handlers.append(file_handler)

    # Console output goes to stderr so it never mixes with the progress bar
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(log_format, date_format))
    handlers.append(console_handler)

    logging.basicConfig(
        level=getattr(logging, log_level.upper()), handlers=handlers, force=True
    )

    logger = logging.getLogger(__name__)
    if log_path:
        logger.info(f"Label Track Converter starting - Log file: {log_path}")
    logger.debug(f"Log level: {log_level}")

    return log_path
