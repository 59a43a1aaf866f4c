"""
Tests for the anomaly detection building blocks.

Covers series normalization, threshold scanning, dry-streak tracking and
severity classification.
"""

import math

import pytest  # type: ignore
from datetime import date

from src.climagro.algorithms import (
    ThresholdScanner,
    StreakState,
    classify_severity,
    longest_dry_streak,
    normalize_series,
)
from src.climagro.algorithms.severity import DEFAULT_BREAKPOINTS
from src.climagro.algorithms.streaks import advance
from src.climagro.models import Alert, AlertKind, Severity, ThresholdSet, DEFAULT_THRESHOLDS


class TestNormalizeSeries:
    """Test cases for series normalization."""

    def test_sorts_by_date_key(self):
        series = normalize_series({"20230103": 3.0, "20230101": 1.0, "20230102": 2.0})

        assert [point.key for point in series] == ["20230101", "20230102", "20230103"]
        assert [point.value for point in series] == [1.0, 2.0, 3.0]
        assert series.points[0].day == date(2023, 1, 1)
        assert series.skipped == 0

    def test_sorts_across_year_boundary(self):
        series = normalize_series({"20240101": 2.0, "20231231": 1.0})
        assert [point.key for point in series] == ["20231231", "20240101"]

    def test_empty_and_none_input(self):
        assert len(normalize_series({})) == 0
        assert len(normalize_series(None)) == 0
        assert normalize_series(None).skipped == 0

    @pytest.mark.parametrize("bad_key", ["2023-06-15", "2023061", "202306150", "abcdefgh", "20231301", "20230230"])
    def test_skips_malformed_keys(self, bad_key):
        series = normalize_series({bad_key: 10.0, "20230615": 12.0})

        assert [point.key for point in series] == ["20230615"]
        assert series.skipped == 1

    def test_skips_unusable_values(self):
        series = normalize_series({
            "20230101": None,
            "20230102": "n/a",
            "20230103": math.nan,
            "20230104": -999.0,
            "20230105": 7,
            "20230106": "8.5",
        })

        assert [(point.key, point.value) for point in series] == [
            ("20230105", 7.0),
            ("20230106", 8.5),
        ]
        assert series.skipped == 4

    def test_does_not_alias_input(self):
        raw = {"20230101": 1.0}
        series = normalize_series(raw)
        raw["20230102"] = 2.0

        assert len(series) == 1


class TestThresholdScanner:
    """Test cases for threshold scanning."""

    def test_temperature_flags_match_predicates(self, make_series):
        values = [36.0, 35.0, 34.9, 5.0, 4.99, 2.0, 2.01, -3.0, 40.0, 20.0]
        series = normalize_series(make_series(values, start="20230601"))
        scan = ThresholdScanner.scan_temperature(series, DEFAULT_THRESHOLDS)

        def expected(predicate):
            return tuple(
                f"{day:02d}/06/2023" for day, value in enumerate(values, start=1) if predicate(value)
            )

        assert scan.heat_dates == expected(lambda t: t > 35)
        assert scan.cold_dates == expected(lambda t: t < 5)
        assert scan.frost_dates == expected(lambda t: t <= 2)
        assert scan.heat_dates == ("01/06/2023", "09/06/2023")

    def test_single_cold_reading_counts_as_cold_and_frost(self):
        series = normalize_series({"20230615": 1.5})
        scan = ThresholdScanner.scan_temperature(series, DEFAULT_THRESHOLDS)

        assert scan.cold_dates == ("15/06/2023",)
        assert scan.frost_dates == ("15/06/2023",)
        assert scan.heat_dates == ()

    def test_frost_boundary_is_inclusive(self):
        series = normalize_series({"20230615": 2.0})
        scan = ThresholdScanner.scan_temperature(series, DEFAULT_THRESHOLDS)

        assert scan.frost_dates == ("15/06/2023",)
        assert scan.cold_dates == ("15/06/2023",)

    def test_custom_thresholds(self):
        thresholds = ThresholdSet(extreme_heat_c=30, extreme_cold_c=10, frost_risk_c=0)
        series = normalize_series({"20230101": 31.0, "20230102": 9.0, "20230103": 0.0})
        scan = ThresholdScanner.scan_temperature(series, thresholds)

        assert scan.heat_dates == ("01/01/2023",)
        assert scan.cold_dates == ("02/01/2023", "03/01/2023")
        assert scan.frost_dates == ("03/01/2023",)

    def test_heavy_rain_is_strict(self):
        series = normalize_series({"20230101": 50.0, "20230102": 50.1, "20230103": 0.0})
        scan = ThresholdScanner.scan_precipitation(series, DEFAULT_THRESHOLDS)

        assert scan.heavy_rain_dates == ("02/01/2023",)

    def test_empty_series(self):
        empty = normalize_series({})
        assert ThresholdScanner.scan_temperature(empty, DEFAULT_THRESHOLDS).heat_dates == ()
        assert ThresholdScanner.scan_precipitation(empty, DEFAULT_THRESHOLDS).heavy_rain_dates == ()


class TestStreaks:
    """Test cases for dry-streak tracking."""

    def test_advance_resets_on_wet_day(self):
        state = StreakState()
        state = advance(state, 0.0, 1.0)
        state = advance(state, 0.99, 1.0)
        assert state == StreakState(2, 2)

        state = advance(state, 1.0, 1.0)
        assert state == StreakState(0, 2)

    def test_longest_streak(self, make_series):
        values = [0.0, 0.0, 5.0, 0.0, 0.0, 0.0, 1.0, 0.5]
        series = normalize_series(make_series(values))

        assert longest_dry_streak(series, DEFAULT_THRESHOLDS) == 3

    def test_all_wet(self, make_series):
        series = normalize_series(make_series([60.0] * 40))
        assert longest_dry_streak(series, DEFAULT_THRESHOLDS) == 0

    def test_empty_series(self):
        assert longest_dry_streak(normalize_series({}), DEFAULT_THRESHOLDS) == 0

    def test_gaps_are_not_detected(self):
        # Entries are adjacent in the series even though a month is missing
        series = normalize_series({"20230101": 0.0, "20230201": 0.0, "20230301": 0.0})
        assert longest_dry_streak(series, DEFAULT_THRESHOLDS) == 3


class TestSeverity:
    """Test cases for severity classification."""

    @pytest.mark.parametrize("kind,magnitude,expected", [
        (AlertKind.EXTREME_HEAT, 1, Severity.MEDIUM),
        (AlertKind.EXTREME_HEAT, 5, Severity.MEDIUM),
        (AlertKind.EXTREME_HEAT, 6, Severity.HIGH),
        (AlertKind.EXTREME_HEAT, 10, Severity.HIGH),
        (AlertKind.EXTREME_HEAT, 11, Severity.CRITICAL),
        (AlertKind.EXTREME_COLD, 5, Severity.MEDIUM),
        (AlertKind.EXTREME_COLD, 6, Severity.HIGH),
        (AlertKind.EXTREME_COLD, 100, Severity.HIGH),
        (AlertKind.FROST_RISK, 10, Severity.MEDIUM),
        (AlertKind.FROST_RISK, 11, Severity.HIGH),
        (AlertKind.HEAVY_RAIN, 10, Severity.MEDIUM),
        (AlertKind.HEAVY_RAIN, 40, Severity.HIGH),
        (AlertKind.DROUGHT, 30, Severity.MEDIUM),
        (AlertKind.DROUGHT, 45, Severity.MEDIUM),
        (AlertKind.DROUGHT, 46, Severity.HIGH),
        (AlertKind.DROUGHT, 60, Severity.HIGH),
        (AlertKind.DROUGHT, 61, Severity.CRITICAL),
    ])
    def test_breakpoints(self, kind, magnitude, expected):
        assert classify_severity(kind, magnitude) == expected

    @pytest.mark.parametrize("kind", list(AlertKind))
    def test_monotonic(self, kind):
        ranks = [classify_severity(kind, magnitude).rank for magnitude in range(1, 100)]
        assert ranks == sorted(ranks)

    def test_every_kind_has_breakpoints(self):
        assert set(DEFAULT_BREAKPOINTS) == set(AlertKind)

    def test_custom_table(self):
        table = {AlertKind.EXTREME_HEAT: ((2, Severity.HIGH),)}
        assert classify_severity(AlertKind.EXTREME_HEAT, 3, table) == Severity.HIGH
        assert classify_severity(AlertKind.EXTREME_HEAT, 2, table) == Severity.MEDIUM
        assert classify_severity(AlertKind.DROUGHT, 99, table) == Severity.MEDIUM

    def test_low_tier_is_ordered_first(self):
        assert Severity.LOW.rank < Severity.MEDIUM.rank < Severity.HIGH.rank < Severity.CRITICAL.rank

    def test_tiers_compare_by_rank(self):
        assert sorted(Severity) == [Severity.LOW, Severity.MEDIUM, Severity.HIGH, Severity.CRITICAL]
        assert Severity.LOW < Severity.CRITICAL
        assert Severity.HIGH >= Severity.MEDIUM
        assert max([Severity.MEDIUM, Severity.CRITICAL, Severity.HIGH]) == Severity.CRITICAL

    def test_tiers_still_equal_their_value(self):
        assert Severity.HIGH == "high"


class TestAlert:
    """Test cases for the Alert value object."""

    def make_alert(self, dates, count):
        return Alert(
            kind=AlertKind.EXTREME_HEAT,
            severity=Severity.MEDIUM,
            title="Heat waves detected",
            description="",
            matched_dates=tuple(dates),
            matched_count=count,
        )

    def test_more_count(self):
        dates = ["0%d/01/2023" % day for day in range(1, 6)]
        assert self.make_alert(dates, 11).more_count == 6
        assert self.make_alert(dates, 5).more_count == 0

    def test_undated_alert_has_no_more_count(self):
        assert self.make_alert([], 61).more_count == 0
