"""
Logging Configuration
Sets up the package logger used by the knob model, its Qt host and the demo.
"""
import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "rotaryknob"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'rotaryknob' namespace.

    Value changes are logged at INFO by the demo window; rejected input
    (non-finite values, invalid tick spacing) at WARNING by the model.

    Args:
        level: Logging level, numeric (logging.DEBUG) or by name ("DEBUG").
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level: {level!r}")
        level = resolved

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Drop our own handlers so restarting the demo in one interpreter does not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # 1. Console Handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # 2. File Handler (Optional)
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized (level %s).", logging.getLevelName(level))
    return logger
