import logging

from consolehelpers.utils.logging_config import get_logger, setup_logging


def test_get_logger_uses_package_namespace():
    assert get_logger("consolehelpers.interfaces.prompter").name == "consolehelpers.interfaces.prompter"
    assert get_logger("demo").name == "consolehelpers.demo"


def test_setup_logging_writes_to_file(tmp_path):
    log_file = setup_logging(verbose=True, log_dir=tmp_path / "logs")
    try:
        get_logger("consolehelpers.tests").debug("debug record")
        for handler in logging.getLogger("consolehelpers").handlers:
            handler.flush()

        assert log_file == tmp_path / "logs" / "consolehelpers.log"
        assert "debug record" in log_file.read_text()
        assert logging.getLogger("consolehelpers").propagate is False
    finally:
        logger = logging.getLogger("consolehelpers")
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()


def test_setup_logging_replaces_handlers(tmp_path):
    setup_logging(log_dir=tmp_path)
    setup_logging(log_dir=tmp_path)
    logger = logging.getLogger("consolehelpers")
    try:
        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO
    finally:
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()
