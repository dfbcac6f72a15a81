# tests/test_diagnostics.py

import pytest

from bscal.diagnostics import round_trip, table_check, year_lengths
from bscal.reference.nepal import BS_MONTH_DAYS


def test_check_table_reports_gaps_and_bad_rows():
    years = {
        2000: BS_MONTH_DAYS[2000],
        2001: BS_MONTH_DAYS[2001][:11],
        2003: (27,) + BS_MONTH_DAYS[2003][1:],
        2005: (28,) * 12,
    }
    rep = table_check.check_table(years)
    assert not rep.ok
    assert (rep.min_year, rep.max_year, rep.n_years) == (2000, 2005, 4)
    assert rep.missing_years == (2002, 2004)
    assert any(p.startswith("2001:") for p in rep.problems)
    assert any(p.startswith("2003-01:") for p in rep.problems)
    assert any(p.startswith("2005:") for p in rep.problems)


def test_check_table_empty():
    rep = table_check.check_table({})
    assert not rep.ok


def test_round_trip_passes():
    assert round_trip.roundtrip_test("nepal", N=300, seed=1, reference=None, max_failures=3) == 0
    assert round_trip.roundtrip_test("sample", N=50, seed=2, reference="nepal", max_failures=3) == 0


def test_round_trip_main(capsys):
    assert round_trip.main(["--engines", "nepal,sample", "--N", "25"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out


def test_year_lengths_plot(tmp_path):
    np = pytest.importorskip("numpy")
    pytest.importorskip("matplotlib")

    ys, lengths = year_lengths.year_length_series(np, "sample")
    assert list(ys) == [2080, 2081]
    assert list(lengths) == [sum(BS_MONTH_DAYS[2080]), sum(BS_MONTH_DAYS[2081])]

    out = tmp_path / "years.png"
    assert year_lengths.main(["--engine", "sample", "--out", str(out)]) == 0
    assert out.exists()
