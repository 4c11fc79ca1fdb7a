import json
import logging

from relocation.adapters.config import config
from relocation.adapters.logging_utils import JsonLogFormatter, get_logger


def _record(**extra):
    record = logging.LogRecord(
        name="relocation.services.scenario_space",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="scenario grid evaluated",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_line_carries_service_env_and_context():
    line = JsonLogFormatter().format(_record(context={"results": 96}))
    payload = json.loads(line)

    assert payload["service"] == "relocation"
    assert payload["env"] == config.ENV
    assert payload["level"] == "INFO"
    assert payload["message"] == "scenario grid evaluated"
    assert payload["results"] == 96


def test_get_logger_installs_one_json_handler():
    logger = get_logger("relocation.tests.logging")
    again = get_logger("relocation.tests.logging")

    assert logger is again
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, JsonLogFormatter)
    assert logger.propagate is False
