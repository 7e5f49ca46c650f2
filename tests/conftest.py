import io
import json
import logging
from datetime import datetime, timezone

import pytest

FIXED_TIME = datetime(2018, 3, 30, 17, 35, 28, 992000, tzinfo=timezone.utc)


class JsonLineFormatter(logging.Formatter):
    """Emit a record as one JSON object: time, level, message, then its fields."""

    def __init__(self, message_key="msg", level_key="level", missing_time=False):
        super().__init__()
        self.message_key = message_key
        self.level_key = level_key
        self.missing_time = missing_time

    def format(self, record):
        data = {}
        if not self.missing_time:
            data["time"] = FIXED_TIME.isoformat(timespec="milliseconds").replace("+00:00", "Z")
        data[self.level_key] = record.levelname
        data[self.message_key] = record.getMessage()
        data.update(getattr(record, "fields", {}))
        return json.dumps(data)


@pytest.fixture
def emit():
    """Log one message through a JSON handler and return the emitted bytes."""

    def _emit(message, level=logging.INFO, fields=None, **formatter_options):
        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(JsonLineFormatter(**formatter_options))
        emitter = logging.getLogger("logpretty.tests.emitter")
        emitter.propagate = False
        emitter.setLevel(logging.DEBUG)
        emitter.addHandler(handler)
        try:
            emitter.log(level, message, extra={"fields": fields or {}})
        finally:
            emitter.removeHandler(handler)
        return stream.getvalue().encode("utf-8")

    return _emit
