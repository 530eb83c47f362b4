import pytest

from csv_generator.utils.size_helpers import (
    GIB,
    MIB,
    SizeConstraint,
    SizeTracker,
    SizeValue,
    format_gib,
)


def test_size_value_uses_binary_multiples() -> None:
    assert SizeValue(10, "GB").to_bytes() == 10 * 1024**3
    assert SizeValue(1.5, "MiB").to_bytes() == int(1.5 * MIB)
    assert SizeValue(7, "bytes").to_bytes() == 7


def test_size_value_rejects_unknown_unit() -> None:
    with pytest.raises(ValueError, match="Unsupported size unit"):
        SizeValue(1, "TB").to_bytes()


def test_size_value_describe() -> None:
    assert SizeValue(10.0, "GB").describe() == "10GB"
    assert SizeValue(2.5, "MB").describe() == "2.5MB"


def test_format_gib_two_decimals() -> None:
    assert format_gib(GIB + GIB // 2) == "1.50GB"
    assert format_gib(0) == "0.00GB"


def test_tracker_reads_file_size(tmp_path) -> None:
    destination = tmp_path / "sized.csv"
    destination.write_bytes(b"x" * 100)
    tracker = SizeTracker(SizeConstraint(target_bytes=200), destination)

    assert tracker.refresh() == 100
    assert tracker.should_continue()
    assert tracker.percent_complete() == 50.0

    destination.write_bytes(b"x" * 250)
    tracker.refresh()
    assert not tracker.should_continue()
    assert tracker.percent_complete() == 100.0


def test_tracker_zero_target_complete_after_first_check(tmp_path) -> None:
    destination = tmp_path / "empty.csv"
    destination.write_bytes(b"")
    tracker = SizeTracker(SizeConstraint(target_bytes=0), destination)

    tracker.refresh()

    assert not tracker.should_continue()
    assert tracker.percent_complete() == 100.0


def test_tracker_missing_file_raises(tmp_path) -> None:
    tracker = SizeTracker(SizeConstraint(target_bytes=1), tmp_path / "missing.csv")

    with pytest.raises(FileNotFoundError):
        tracker.refresh()
