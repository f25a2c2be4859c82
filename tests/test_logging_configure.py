import json
import logging

from starlaunch.logging import configure_logging


def test_configure_logging_plain_and_json(capsys) -> None:
    # plain
    configure_logging(level="DEBUG")
    logger = logging.getLogger("starlaunch.test")
    logger.debug("hello")
    assert "hello" in capsys.readouterr().err

    # json
    configure_logging(level="INFO", json_format=True)
    logger.info("world")
    record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert record["message"] == "world"
    assert record["levelname"] == "INFO"
    assert record["name"] == "starlaunch.test"


def test_configure_logging_unknown_level_falls_back_to_info(capsys) -> None:
    configure_logging(level="chatty", fmt="%(levelname)s|%(message)s")
    logger = logging.getLogger("starlaunch.test")
    logger.debug("hidden")
    logger.info("shown")
    assert capsys.readouterr().err.strip() == "INFO|shown"
