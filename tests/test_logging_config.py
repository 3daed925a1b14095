import logging

import pytest

from rotaryknob.logging_config import setup_logging


def test_setup_logging_does_not_stack_handlers(tmp_path):
    log_file = tmp_path / "knob.log"
    setup_logging(level=logging.DEBUG)
    logger = setup_logging(level=logging.DEBUG, log_file=str(log_file))
    assert logger.name == "rotaryknob"
    assert len(logger.handlers) == 2
    logger.debug("hello knob")
    for handler in logger.handlers:
        handler.flush()
    assert "hello knob" in log_file.read_text(encoding="utf-8")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_setup_logging_accepts_level_names():
    logger = setup_logging(level="warning")
    assert logger.level == logging.WARNING
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        setup_logging(level="chatty")
