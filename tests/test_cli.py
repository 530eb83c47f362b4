import pytest

from csv_generator.cli import main


def test_cli_generates_file_and_prints_summary(tmp_path, capsys) -> None:
    destination = tmp_path / "cli.csv"

    exit_code = main(
        ["-o", str(destination), "-s", "1", "-u", "B", "--batch-size", "50", "--seed", "7"]
    )

    captured = capsys.readouterr()
    assert exit_code == 0
    assert f"Starting to generate a 1B CSV file at {destination}..." in captured.out
    assert "Total rows generated: 50" in captured.out
    assert captured.err == ""
    assert len(destination.read_text(encoding="utf-8").splitlines()) == 51


def test_cli_quiet_prints_only_summary(tmp_path, capsys) -> None:
    destination = tmp_path / "quiet.csv"

    exit_code = main(["-o", str(destination), "-s", "0", "--batch-size", "5", "-q"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Starting to generate" not in captured.out
    assert f"Successfully generated {destination}" in captured.out


def test_cli_uses_names_file(tmp_path) -> None:
    names = tmp_path / "names.txt"
    names.write_text("Solo\n", encoding="utf-8")
    destination = tmp_path / "solo.csv"

    exit_code = main(
        ["-o", str(destination), "-s", "0", "--batch-size", "20", "--names-file", str(names), "-q"]
    )

    lines = destination.read_text(encoding="utf-8").splitlines()[1:]
    assert exit_code == 0
    assert {line.split(",")[1] for line in lines} == {"Solo"}


def test_cli_reports_errors_with_non_zero_status(tmp_path, capsys) -> None:
    exit_code = main(["-o", str(tmp_path / "out.txt"), "-s", "1", "-u", "B"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.err.startswith("An error occurred: ")


def test_cli_missing_names_file(tmp_path, capsys) -> None:
    exit_code = main(
        ["-o", str(tmp_path / "out.csv"), "--names-file", str(tmp_path / "missing.txt")]
    )

    assert exit_code == 1
    assert "An error occurred" in capsys.readouterr().err
    assert not (tmp_path / "out.csv").exists()


def test_cli_rejects_negative_size() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["-s", "-1"])

    assert excinfo.value.code == 2


def test_cli_reports_corrupt_workbook(tmp_path, capsys) -> None:
    names = tmp_path / "names.xlsx"
    names.write_text("not a workbook", encoding="utf-8")

    exit_code = main(["-o", str(tmp_path / "out.csv"), "--names-file", str(names)])

    assert exit_code == 1
    assert capsys.readouterr().err.startswith("An error occurred: Unreadable name file")


def test_cli_quiet_hides_progress_lines(tmp_path, capsys) -> None:
    destination = tmp_path / "quiet_progress.csv"

    exit_code = main(
        [
            "-o", str(destination), "-s", "1", "-u", "B",
            "--batch-size", "10", "--progress-interval", "10", "-q",
        ]
    )

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Generated 10 rows" not in out
    assert out.splitlines() == [
        f"Successfully generated {destination}",
        "Total rows generated: 10",
        "Final file size: 0.00GB",
    ]
