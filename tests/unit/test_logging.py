from __future__ import annotations

import json
import logging

from city_density.utils.logging import _json_formatter, configure_logging

EXPECTED_ROWS = 10


def _record() -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="hello %s",
        args=("world",),
        exc_info=None,
    )


def test_json_formatter_renders_core_fields() -> None:
    payload = json.loads(_json_formatter(_record()))

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello world"
    assert "pathname" not in payload


def test_json_formatter_promotes_extra_fields() -> None:
    record = _record()
    record.rows = EXPECTED_ROWS
    record.field = "density"

    payload = json.loads(_json_formatter(record))

    assert payload["rows"] == EXPECTED_ROWS
    assert payload["field"] == "density"


def test_configure_logging_sets_root_level() -> None:
    configure_logging(level="debug")

    assert logging.getLogger().level == logging.DEBUG
