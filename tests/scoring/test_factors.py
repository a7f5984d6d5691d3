"""Tests for the per-factor weather scorers.

Covers temperature, precipitation, land and marine wind, and sunshine/cloud
scoring against the fixed activity criteria.
"""

import pytest

from activityrank.activities import ActivityCriteria, ActivityKind, get_criteria
from activityrank.scoring import (
    format_number,
    score_marine_wind,
    score_precipitation,
    score_sunshine,
    score_temperature,
    score_wind,
)

OUTDOOR = get_criteria(ActivityKind.OUTDOOR_SIGHTSEEING)
SKIING = get_criteria(ActivityKind.SKIING)


class TestFormatNumber:
    def test_whole_number(self):
        assert format_number(20.0) == "20"

    def test_fraction(self):
        assert format_number(2.5) == "2.5"

    def test_negative(self):
        assert format_number(-5.0) == "-5"


class TestScoreTemperature:
    """Tests for temperature fit (outdoor: ideal 15-25, acceptable 5-30)."""

    def test_ideal_middle(self):
        result = score_temperature(20.0, OUTDOOR)
        assert result.score == 100
        assert result.reasons == ("Ideal temperature: 20°C",)

    def test_ideal_boundaries_inclusive(self):
        """Temperatures exactly on the ideal edges score 100."""
        assert score_temperature(15.0, OUTDOOR).score == 100
        assert score_temperature(25.0, OUTDOOR).score == 100
        assert score_temperature(-10.0, SKIING).score == 100
        assert score_temperature(2.0, SKIING).score == 100

    def test_acceptable_interpolation(self):
        """28C is 3 degrees past ideal over a 10 degree margin: 100 - 9."""
        result = score_temperature(28.0, OUTDOOR)
        assert result.score == pytest.approx(91.0)
        assert result.reasons == ("Acceptable temperature: 28°C",)

    def test_acceptable_edge(self):
        """The acceptable edge with the widest margin scores 70."""
        assert score_temperature(5.0, OUTDOOR).score == pytest.approx(70.0)

    def test_outside_acceptable(self):
        """35C: 40 - |35 - 20| * 2 = 10."""
        result = score_temperature(35.0, OUTDOOR)
        assert result.score == pytest.approx(10.0)
        assert result.reasons == ("Poor temperature: 35°C (outside acceptable range)",)

    def test_outside_floored_at_zero(self):
        assert score_temperature(-50.0, OUTDOOR).score == 0

    def test_fractional_temperature_in_reason(self):
        assert score_temperature(20.5, OUTDOOR).reasons == ("Ideal temperature: 20.5°C",)

    def test_degenerate_ranges_do_not_divide_by_zero(self):
        """Ideal band equal to acceptable band falls through to the poor branch."""
        criteria = ActivityCriteria(
            ideal_temp_range=(10, 20),
            acceptable_temp_range=(10, 20),
            max_precipitation=5,
            max_wind_speed=20,
            max_wind_gust=30,
            ideal_cloud_cover=(0, 50),
            min_sunshine_hours=0,
        )
        assert score_temperature(10.0, criteria).score == 100
        assert score_temperature(20.0, criteria).score == 100
        # 40 - |25 - 15| * 2
        assert score_temperature(25.0, criteria).score == pytest.approx(20.0)


class TestScorePrecipitation:
    """Tests for precipitation impact (outdoor: tolerance 2mm)."""

    def test_dry_day_has_no_reason(self):
        result = score_precipitation(0.0, OUTDOOR)
        assert result.score == 100
        assert result.reasons == ()

    def test_light(self):
        """Up to a quarter of the tolerance is free."""
        result = score_precipitation(0.5, OUTDOOR)
        assert result.score == 100
        assert result.reasons == ("Light precipitation: 0.5mm",)

    def test_moderate(self):
        """1.25mm: 100 - ((1.25 - 0.5) / 1.5) * 50 = 75."""
        result = score_precipitation(1.25, OUTDOOR)
        assert result.score == pytest.approx(75.0)
        assert result.reasons == ("Moderate precipitation: 1.25mm",)

    def test_at_tolerance(self):
        assert score_precipitation(2.0, OUTDOOR).score == pytest.approx(50.0)

    def test_heavy(self):
        """5mm: 30 - (5 - 2) * 2 = 24."""
        result = score_precipitation(5.0, OUTDOOR)
        assert result.score == pytest.approx(24.0)
        assert result.reasons == ("Heavy precipitation: 5mm",)

    def test_heavy_floored_at_zero(self):
        assert score_precipitation(50.0, OUTDOOR).score == 0


class TestScoreWind:
    """Tests for land wind scoring (outdoor: max 20 km/h, gusts 35 km/h)."""

    def test_calm(self):
        result = score_wind(5.0, 10.0, OUTDOOR)
        assert result.score == 100
        assert result.reasons == ("Calm wind conditions: 5 km/h",)

    def test_half_of_max_is_calm(self):
        assert score_wind(10.0, 10.0, OUTDOOR).score == 100

    def test_interpolation_has_no_reason(self):
        """15 km/h: 100 - (5 / 10) * 20 = 90."""
        result = score_wind(15.0, 20.0, OUTDOOR)
        assert result.score == pytest.approx(90.0)
        assert result.reasons == ()

    def test_high_speed(self):
        """25 km/h: 100 - 5 * 3 = 85."""
        result = score_wind(25.0, 30.0, OUTDOOR)
        assert result.score == pytest.approx(85.0)
        assert result.reasons == ("High wind speed: 25 km/h",)

    def test_speed_checked_before_gusts(self):
        result = score_wind(25.0, 80.0, OUTDOOR)
        assert result.reasons == ("High wind speed: 25 km/h",)

    def test_strong_gusts(self):
        """45 km/h gusts: 100 - 10 * 2 = 80."""
        result = score_wind(15.0, 45.0, OUTDOOR)
        assert result.score == pytest.approx(80.0)
        assert result.reasons == ("Strong wind gusts: 45 km/h",)

    def test_floored_at_zero(self):
        assert score_wind(100.0, 150.0, OUTDOOR).score == 0

    def test_marine_data_takes_over(self, make_marine):
        """With marine data the land wind values are ignored."""
        result = score_wind(100.0, 150.0, OUTDOOR, make_marine(wind_wave_height=0.3))
        assert result.score == 100
        assert result.reasons[0] == "Calm marine conditions: 0.3m wind waves"


class TestScoreMarineWind:
    """Tests for wind-over-water scoring from wind-wave height."""

    def test_calm_with_direction(self, make_marine):
        result = score_marine_wind(make_marine(wind_wave_height=0.3, wind_wave_direction=45.0))
        assert result.score == 100
        assert result.reasons == (
            "Calm marine conditions: 0.3m wind waves",
            "Wind direction: NE (45°)",
        )

    def test_light(self, make_marine):
        """0.7m: 100 - 0.2 * 5 = 99."""
        result = score_marine_wind(make_marine(wind_wave_height=0.7))
        assert result.score == pytest.approx(99.0)
        assert result.reasons[0] == "Light marine winds: 0.7m wind waves"

    def test_moderate(self, make_marine):
        """1.5m: 100 - 0.5 * 10 = 95."""
        result = score_marine_wind(make_marine(wind_wave_height=1.5))
        assert result.score == pytest.approx(95.0)
        assert result.reasons[0] == "Moderate marine winds: 1.5m wind waves"

    def test_strong(self, make_marine):
        """2.5m: 100 - 0.5 * 15 = 92.5."""
        result = score_marine_wind(make_marine(wind_wave_height=2.5))
        assert result.score == pytest.approx(92.5)
        assert result.reasons[0] == "Strong marine winds: 2.5m wind waves"

    def test_floored_at_zero(self, make_marine):
        """10m: 100 - 8 * 15 = -20, clamped."""
        assert score_marine_wind(make_marine(wind_wave_height=10.0)).score == 0

    def test_direction_out_of_range_omitted(self, make_marine):
        assert len(score_marine_wind(make_marine(wind_wave_direction=400.0)).reasons) == 1
        assert len(score_marine_wind(make_marine(wind_wave_direction=-10.0)).reasons) == 1

    def test_direction_edges(self, make_marine):
        """0 and 360 degrees are both north; halves round clockwise."""
        assert score_marine_wind(make_marine(wind_wave_direction=0.0)).reasons[1] == "Wind direction: N (0°)"
        assert score_marine_wind(make_marine(wind_wave_direction=360.0)).reasons[1] == "Wind direction: N (360°)"
        assert score_marine_wind(make_marine(wind_wave_direction=202.5)).reasons[1] == "Wind direction: SSW (202°)"


class TestScoreSunshine:
    """Tests for sunshine and cloud cover (outdoor: 6h, clouds 0-40%)."""

    def test_good(self):
        result = score_sunshine(10.0, 8.0, OUTDOOR)
        assert result.score == 100
        assert result.reasons == ("Good sunshine: 8h",)

    def test_sunshine_deficit(self):
        """2 missing hours cost 30 points."""
        result = score_sunshine(10.0, 4.0, OUTDOOR)
        assert result.score == pytest.approx(70.0)
        assert result.reasons == ("Limited sunshine: 4h (need 6h)",)

    def test_very_cloudy(self):
        """90% is 50 points above the band: -25."""
        result = score_sunshine(90.0, 8.0, OUTDOOR)
        assert result.score == pytest.approx(75.0)
        assert result.reasons == ("Good sunshine: 8h", "Very cloudy: 90%")

    def test_very_clear_for_skiing(self):
        """Skiing prefers 30-80% cloud; 10% costs 10 points."""
        result = score_sunshine(10.0, 8.0, SKIING)
        assert result.score == pytest.approx(90.0)
        assert result.reasons == ("Good sunshine: 8h", "Very clear: 10%")

    def test_outside_band_without_qualitative_reason(self):
        result = score_sunshine(25.0, 8.0, SKIING)
        assert result.score == pytest.approx(97.5)
        assert result.reasons == ("Good sunshine: 8h",)

    def test_floored_at_zero(self):
        assert score_sunshine(100.0, 0.0, OUTDOOR).score == 0
