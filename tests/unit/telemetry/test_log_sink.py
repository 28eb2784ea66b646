import logging

import pytest

from fileseq.adapters.telemetry.log_sink import LoggingTelemetry
from fileseq.adapters.telemetry.null import NullTelemetry
from fileseq.core.file_seq import FileSeq


@pytest.fixture(autouse=True)
def reset_logging_handlers():
    # Keep test logging deterministic and avoid leaking handlers between tests.
    logging.getLogger("fileseq").handlers = []


def test_events_become_warning_records(caplog):
    telemetry = LoggingTelemetry()

    with caplog.at_level(logging.WARNING, logger="fileseq"):
        telemetry.log("sequence_anomaly_healed", latest=1, backup=2)

    (record,) = caplog.records
    assert record.levelno == logging.WARNING
    assert record.getMessage() == "sequence_anomaly_healed"
    assert record.event == "sequence_anomaly_healed"
    assert record.latest == 1
    assert record.backup == 2


def test_reserved_field_names_are_prefixed(caplog):
    logger = logging.getLogger("fileseq.test")
    telemetry = LoggingTelemetry(logger=logger, level=logging.INFO)

    with caplog.at_level(logging.INFO, logger="fileseq.test"):
        telemetry.log("custom", name="clash", msg="also clash")

    (record,) = caplog.records
    assert record.name == "fileseq.test"
    assert record.field_name == "clash"
    assert record.field_msg == "also clash"


def test_store_self_heal_is_logged(tmp_path, caplog):
    seq = FileSeq(tmp_path / "seq", 5, telemetry=LoggingTelemetry())
    seq.increment_and_get(1)
    seq.backup_path.write_bytes((9).to_bytes(8, "big"))

    with caplog.at_level(logging.WARNING, logger="fileseq"):
        assert seq.value() == 9

    assert [r.event for r in caplog.records] == ["sequence_anomaly_healed"]


def test_null_telemetry_discards(tmp_path):
    assert NullTelemetry().log("anything", value=1) is None
