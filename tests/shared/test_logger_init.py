import json
import logging

import pytest

from catalog_search.shared.utils import LOG_NAME, get_logger, init_logging, init_logging_from_config
from catalog_search.shared.utils.logger import JsonFormatter


@pytest.fixture
def root_logger():
    logger = logging.getLogger(LOG_NAME)
    saved = (list(logger.handlers), logger.level)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in saved[0]:
        logger.addHandler(handler)
    logger.setLevel(saved[1])


def test_repeated_init_replaces_handlers(root_logger):
    init_logging(level="DEBUG")
    init_logging(level="INFO")

    assert len(root_logger.handlers) == 1
    assert root_logger.level == logging.INFO


def test_init_from_config_adds_file_handler(root_logger, tmp_path):
    log_file = tmp_path / "logs" / "search.log"

    init_logging_from_config({"level": "INFO", "console": False, "file": str(log_file), "suppress": {"noisy": "ERROR"}})

    assert len(root_logger.handlers) == 1
    assert log_file.parent.exists()
    assert logging.getLogger("noisy").level == logging.ERROR


def test_get_logger_namespaces():
    assert get_logger().name == "catalog_search"
    assert get_logger("domain.search").name == "catalog_search.domain.search"


def test_json_formatter_includes_extra():
    record = logging.LogRecord("catalog_search", logging.ERROR, __file__, 1, "aborted", None, None)
    record.error_code = "store_unavailable"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["error_code"] == "store_unavailable"
    assert payload["message"] == "aborted"
