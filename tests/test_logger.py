import logging

from foodcourt.logger import configure_logging


def test_configure_logging_writes_to_file(tmp_path):
    log_path = tmp_path / "logs" / "foodcourt.log"
    logger = configure_logging(log_path, "INFO")
    try:
        logging.getLogger("foodcourt.persistence").debug("hidden")
        logging.getLogger("foodcourt.app").info("app_start")
        for handler in logger.handlers:
            handler.flush()
        content = log_path.read_text(encoding="utf-8")
        assert "INFO - foodcourt.app - app_start" in content
        assert "hidden" not in content
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)
