import json
import logging
from pathlib import Path

from mtie.config import LoggingConfig
from mtie.logging_utils import JsonFormatter, configure_logging


def test_json_formatter_includes_extra_fields() -> None:
    record = logging.makeLogRecord(
        {"name": "mtie.test", "levelname": "WARNING", "msg": "skipped %d", "args": (3,), "line_number": 3}
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["message"] == "skipped 3"
    assert payload["level"] == "WARNING"
    assert payload["line_number"] == 3


def test_configure_logging_writes_to_file(tmp_path: Path) -> None:
    log_file = tmp_path / "mtie.log"
    configure_logging(LoggingConfig(level="INFO", json_format=True, log_file=str(log_file)))
    try:
        logging.getLogger("mtie.test").info("engine_done", extra={"points": 4})
        for handler in logging.getLogger().handlers:
            handler.flush()
        payload = json.loads(log_file.read_text().splitlines()[-1])
        assert payload["message"] == "engine_done"
        assert payload["points"] == 4
    finally:
        for handler in logging.getLogger().handlers:
            handler.close()
        logging.getLogger().handlers.clear()
