from __future__ import annotations

import uuid
from datetime import datetime

import pytest

from logstalker.core.dispatch import StreamDispatcher


def test_dispatch_uses_record_partition(sink, fixed_now: datetime) -> None:
    dispatcher = StreamDispatcher(sink, service_name="nginx", clock=lambda: fixed_now)
    record = {"log_type": "rails", "host": "h", "tableName": "logs_20150101"}

    dedup_id = dispatcher.dispatch(record)

    assert sink.inserted == [
        ("logs_20150101", dedup_id, {"log_type": "rails", "host": "h", "service": "nginx"})
    ]
    assert uuid.UUID(dedup_id)


def test_dispatch_defaults_to_today(sink, fixed_now: datetime) -> None:
    dispatcher = StreamDispatcher(sink, service_name="rails", clock=lambda: fixed_now)
    dispatcher.dispatch({"log_type": "rails", "host": "h"})
    assert sink.inserted[0][0] == "logs_20160102"


def test_dispatch_fresh_dedup_ids(sink) -> None:
    dispatcher = StreamDispatcher(sink, service_name="")
    first = dispatcher.dispatch({"host": "h"})
    second = dispatcher.dispatch({"host": "h"})
    assert first != second
    assert [row[1] for row in sink.inserted] == [first, second]
    assert sink.inserted[0][2]["service"] == ""


def test_dispatch_propagates_sink_errors(failing_sink) -> None:
    dispatcher = StreamDispatcher(failing_sink, service_name="x")
    with pytest.raises(RuntimeError):
        dispatcher.dispatch({"host": "h"})
