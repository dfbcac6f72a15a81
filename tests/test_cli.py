# tests/test_cli.py

import pytest

from bscal.cli import main


def run(capsys, *argv):
    rc = main(list(argv))
    out, err = capsys.readouterr()
    return rc, out, err


def test_to_ad(capsys):
    assert run(capsys, "to-ad", "2000-01-01") == (0, "1943-04-14\n", "")


def test_bare_date_is_to_ad(capsys):
    rc, out, _ = run(capsys, "2080-01-01")
    assert rc == 0
    assert out == "2023-04-14\n"


def test_to_bs(capsys):
    rc, out, _ = run(capsys, "to-bs", "2025-04-14")
    assert (rc, out) == (0, "2082-01-01\n")


def test_add_and_diff(capsys):
    assert run(capsys, "add", "2000-01-30", "1")[1] == "2000-02-01\n"
    assert run(capsys, "add", "2000-02-01", "-1")[1] == "2000-01-30\n"
    assert run(capsys, "diff", "2000-01-10", "2000-01-01")[1] == "-9\n"


def test_engine_option(capsys):
    rc, out, _ = run(capsys, "to-ad", "2081-01-01", "--engine", "sample")
    assert rc == 0
    assert out.startswith("2024-04-")


def test_today_and_range(capsys):
    rc, out, _ = run(capsys, "today")
    assert rc == 0
    assert len(out.strip()) == 10

    rc, out, _ = run(capsys, "range")
    assert rc == 0
    assert "BS 2000-01-01 .." in out
    assert "AD 1943-04-14 .." in out


def test_month(capsys):
    rc, out, _ = run(capsys, "month", "2000", "1")
    assert rc == 0
    assert "Baisakh" in out
    assert "30 days" in out
    assert "1943-05-13" in out


def test_engines(capsys):
    rc, out, _ = run(capsys, "engines")
    assert rc == 0
    assert [line.split()[0] for line in out.splitlines()] == ["nepal", "nepal-walk", "sample"]


@pytest.mark.parametrize(
    "argv, needle",
    [
        (("to-ad", "1999-01-01"), "not supported"),
        (("to-ad", "2000-13-01"), "Invalid month"),
        (("to-ad", "2000-01-31"), "Invalid day"),
        (("to-bs", "2024-02-30"), "day is out of range"),
        (("month", "2000", "0"), "Invalid month"),
        (("to-ad", "2000-01-01", "--engine", "nope"), "Unknown engine 'nope'"),
    ],
)
def test_errors_exit_2(capsys, argv, needle):
    rc, out, err = run(capsys, *argv)
    assert rc == 2
    assert out == ""
    assert needle in err


def test_diag_table_check(capsys):
    rc, out, _ = run(capsys, "diag", "table-check", "--engine", "sample")
    assert rc == 0
    assert "OK" in out


def test_diag_round_trip(capsys):
    rc, out, _ = run(capsys, "diag", "round-trip", "--engines", "nepal", "--N", "0")
    assert rc == 0
    assert "All round-trip tests passed." in out
