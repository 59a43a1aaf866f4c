"""
Tests for the climate alert engine.

Exercises the full analysis from raw NASA POWER parameter blocks to the
ordered alert list.
"""

import pytest  # type: ignore

from src.climagro.algorithms import ClimateAlertEngine, analyze
from src.climagro.models import (
    AlertKind,
    AnalysisResult,
    Severity,
    ThresholdSet,
)


class TestClimateAlertEngine:
    """Test cases for ClimateAlertEngine."""

    @pytest.fixture
    def engine(self):
        return ClimateAlertEngine()

    def test_empty_dataset(self, engine):
        result = engine.analyze({})

        assert isinstance(result, AnalysisResult)
        assert result.alerts == ()
        assert not result.has_alerts
        assert result.skipped_points == 0
        assert result.analyzed_parameters == ()

    def test_none_dataset(self, engine):
        assert engine.analyze(None).alerts == ()

    def test_sample_response(self, engine, power_dataset):
        result = engine.analyze(power_dataset)

        assert [alert.kind for alert in result.alerts] == [
            AlertKind.EXTREME_HEAT,
            AlertKind.EXTREME_COLD,
            AlertKind.FROST_RISK,
            AlertKind.HEAVY_RAIN,
        ]
        assert result.skipped_points == 1  # T2M fill value on 20230605
        assert result.analyzed_parameters == ("T2M", "PRECTOTCORR")

        heat = result.get(AlertKind.EXTREME_HEAT)
        assert heat.matched_dates == ("02/06/2023",)
        assert heat.severity == Severity.MEDIUM

        cold = result.get(AlertKind.EXTREME_COLD)
        assert cold.matched_dates == ("03/06/2023", "08/06/2023", "09/06/2023")

        frost = result.get(AlertKind.FROST_RISK)
        assert frost.matched_dates == ("03/06/2023", "08/06/2023")

        rain = result.get(AlertKind.HEAVY_RAIN)
        assert rain.matched_dates == ("03/06/2023",)
        assert result.get(AlertKind.DROUGHT) is None

    def test_cold_and_frost_overlap(self, engine):
        result = engine.analyze({"T2M": {"20230615": 1.5}})

        assert [alert.kind for alert in result.alerts] == [
            AlertKind.EXTREME_COLD,
            AlertKind.FROST_RISK,
        ]
        for alert in result.alerts:
            assert alert.matched_dates == ("15/06/2023",)
            assert alert.matched_count == 1

    def test_heat_wave_is_critical_and_capped(self, engine, make_series):
        values = [36.0] * 11 + [0.0] * 19
        result = engine.analyze({"T2M": make_series(values, start="20230101")})

        heat = result.get(AlertKind.EXTREME_HEAT)
        assert heat.severity == Severity.CRITICAL
        assert heat.matched_count == 11
        assert heat.matched_dates == (
            "01/01/2023", "02/01/2023", "03/01/2023", "04/01/2023", "05/01/2023",
        )
        assert heat.more_count == 6
        assert "11" in heat.description
        assert "35" in heat.description

    def test_heavy_rain_without_drought(self, engine, make_series):
        result = engine.analyze({"PRECTOTCORR": make_series([60.0] * 40)})

        assert [alert.kind for alert in result.alerts] == [AlertKind.HEAVY_RAIN]
        rain = result.alerts[0]
        assert rain.severity == Severity.HIGH
        assert rain.matched_count == 40
        assert len(rain.matched_dates) == 5

    @pytest.mark.parametrize("dry_days,expected", [
        (29, None),
        (30, Severity.MEDIUM),
        (31, Severity.MEDIUM),
        (46, Severity.HIGH),
        (61, Severity.CRITICAL),
    ])
    def test_drought_boundaries(self, engine, make_series, dry_days, expected):
        result = engine.analyze({"PRECTOTCORR": make_series([0.0] * dry_days)})
        drought = result.get(AlertKind.DROUGHT)

        if expected is None:
            assert drought is None
        else:
            assert drought.severity == expected
            assert drought.matched_count == dry_days
            assert drought.matched_dates == ()
            assert drought.more_count == 0
            assert str(dry_days) in drought.description

    def test_drought_uses_longest_streak(self, engine, make_series):
        values = [0.0] * 10 + [5.0] + [0.5] * 35 + [2.0] + [0.0] * 3
        result = engine.analyze({"PRECTOTCORR": make_series(values)})

        assert result.get(AlertKind.DROUGHT).matched_count == 35

    def test_malformed_points_are_skipped(self, engine):
        dataset = {
            "T2M": {"20230101": 40.0, "bad-key": 40.0, "20230102": None},
            "PRECTOTCORR": {"2023011": 80.0, "20230101": 80.0},
        }
        result = engine.analyze(dataset)

        assert result.skipped_points == 3
        assert result.get(AlertKind.EXTREME_HEAT).matched_count == 1
        assert result.get(AlertKind.HEAVY_RAIN).matched_count == 1

    def test_drought_has_no_hidden_dates(self, engine, make_series):
        drought = engine.analyze({"PRECTOTCORR": make_series([0.0] * 30)}).get(AlertKind.DROUGHT)

        assert drought.matched_count == 30
        assert drought.more_count == 0

    def test_fill_value_does_not_count_as_dry_day(self, engine, make_series):
        values = [0.0] * 29 + [-999.0]
        result = engine.analyze({"PRECTOTCORR": make_series(values)})

        assert result.skipped_points == 1
        assert result.get(AlertKind.DROUGHT) is None

    def test_fill_value_does_not_break_dry_streak(self, engine, make_series):
        values = [0.0] * 15 + [-999.0] + [0.0] * 15
        drought = engine.analyze({"PRECTOTCORR": make_series(values)}).get(AlertKind.DROUGHT)

        assert drought.matched_count == 30
        assert drought.severity == Severity.MEDIUM

    def test_empty_series_emit_nothing(self, engine):
        result = engine.analyze({"T2M": {}, "PRECTOTCORR": {}})

        assert result.alerts == ()
        assert result.analyzed_parameters == ("T2M", "PRECTOTCORR")

    def test_other_parameters_are_ignored(self, engine):
        assert engine.analyze({"RH2M": {"20230101": 99.0}}).alerts == ()

    def test_idempotent(self, engine, power_dataset):
        assert engine.analyze(power_dataset) == engine.analyze(power_dataset)

    def test_does_not_mutate_input(self, engine, power_dataset):
        snapshot = {code: dict(series) for code, series in power_dataset.items()}
        engine.analyze(power_dataset)
        assert power_dataset == snapshot

    def test_injected_thresholds(self, make_series):
        thresholds = ThresholdSet(extreme_heat_c=25, drought_min_days=3, max_display_dates=2)
        dataset = {
            "T2M": make_series([26.0, 27.0, 28.0]),
            "PRECTOTCORR": make_series([0.0, 0.0, 0.0]),
        }
        result = analyze(dataset, thresholds)

        heat = result.get(AlertKind.EXTREME_HEAT)
        assert heat.matched_dates == ("01/01/2023", "02/01/2023")
        assert heat.more_count == 1
        assert "25" in heat.description
        assert result.get(AlertKind.DROUGHT).matched_count == 3

    def test_monotonic_severity_when_adding_events(self, make_series):
        ranks = []
        for hot_days in range(1, 20):
            values = [40.0] * hot_days + [20.0] * (20 - hot_days)
            heat = analyze({"T2M": make_series(values)}).get(AlertKind.EXTREME_HEAT)
            ranks.append(heat.severity.rank)
        assert ranks == sorted(ranks)

    def test_alerts_are_immutable(self, engine):
        alert = engine.analyze({"T2M": {"20230101": 40.0}}).alerts[0]
        with pytest.raises(AttributeError):
            alert.matched_count = 99
