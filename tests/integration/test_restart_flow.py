"""
End-to-end: a process hands out ids, "crashes" at different points of a write, and a fresh
store instance on the same directory carries on without reusing or losing a value.
"""

import os

from fileseq.core.codec import decode
from fileseq.core.file_seq import FileSeq


def test_ids_survive_restarts(tmp_path):
    store_dir = tmp_path / "ids"
    issued = []

    for _ in range(3):
        seq = FileSeq(store_dir, initial_value=1)
        issued.extend(seq.get_and_increment(1) for _ in range(4))

    assert issued == list(range(1, 13))
    assert FileSeq(store_dir, initial_value=1).value() == 13


def test_crash_between_rename_and_write(tmp_path, telemetry):
    store_dir = tmp_path / "ids"
    seq = FileSeq(store_dir, initial_value=1)
    seq.increment_and_get(1)  # latest=2, backup=1

    # Simulate the first half of the next write: rotate, then die before writing
    os.replace(seq.latest_path, seq.backup_path)

    restarted = FileSeq(store_dir, initial_value=1, telemetry=telemetry)
    assert restarted.value() == 2
    assert restarted.increment_and_get(1) == 3
    assert telemetry.events == []


def test_crash_mid_write_then_restart(tmp_path, telemetry):
    store_dir = tmp_path / "ids"
    seq = FileSeq(store_dir, initial_value=100)
    seq.increment_and_get(5)  # latest=105, backup=100
    os.replace(seq.latest_path, seq.backup_path)
    seq.latest_path.write_bytes(b"\x00\x00\x00\x00")  # half of the 110 write

    restarted = FileSeq(store_dir, initial_value=0, telemetry=telemetry)

    assert restarted.get_and_increment(5) == 105
    assert restarted.value() == 110
    assert telemetry.names() == ["sequence_corrupt_slot_removed"]
    assert decode(restarted.backup_path.read_bytes()) == 105
