import logging

import pytest
from wordle_analyzer.log import LOGGER_NAME, configure_logging


@pytest.fixture
def pkg_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for h in list(logger.handlers):
        h.close()
    logger.handlers.clear()


def test_file_handler_gets_info_and_up(tmp_path, pkg_logger):
    log_file = tmp_path / "logs" / "game.log"
    logger = configure_logging("ERROR", log_file)
    child = logging.getLogger(f"{LOGGER_NAME}.session.game")
    child.debug("not written")
    child.info("Game won in %d guess(es)", 3)
    for h in logger.handlers:
        h.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "| INFO | Game won in 3 guess(es)" in text
    assert "not written" not in text


def test_repeated_configuration_replaces_handlers(pkg_logger):
    configure_logging("INFO")
    logger = configure_logging("DEBUG")
    assert len(logger.handlers) == 1
