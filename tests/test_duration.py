"""Tests for Duration construction, equality and arithmetic."""

import json
import pickle

import pytest

from caldur import (
    DeprecatedUsageWarning,
    Duration,
    Unit,
    day,
    days,
    fortnights,
    from_parts,
    hours,
    minute,
    minutes,
    months,
    second,
    seconds,
    weeks,
    year,
    years,
)


def test_duration_is_not_a_number():
    """Durations are their own type, not an int subclass."""
    d = days(1)
    assert isinstance(d, Duration)
    assert not isinstance(d, int)
    assert not isinstance(int(d), Duration)


def test_equals():
    assert days(1) == days(1)
    assert days(1) == 86400
    assert 86400 == days(1)
    assert not (days(1) == "foo")
    assert days(1) != "foo"


def test_str_renders_total():
    assert str(second(1)) == "1"


def test_eql():
    """Strict equality accepts only durations with the same total."""
    assert minute(1).eql(minutes(1))
    assert minute(1).eql(seconds(60))
    assert days(2).eql(hours(48))
    assert not second(1).eql(1)
    assert minute(1).eql(seconds(180) - minutes(2))
    assert not minute(1).eql(60)
    assert not minute(1).eql("foo")


def test_hash():
    assert hash(minute(1)) == hash(seconds(60))
    assert len({minute(1), seconds(60), hours(1)}) == 2


def test_durations_work_as_dict_keys():
    lookup = {days(2): "two days"}
    assert lookup[hours(48)] == "two days"


def test_plus():
    assert second(1) + second(1) == seconds(2)
    assert isinstance(second(1) + second(1), Duration)


def test_plus_number_is_deprecated():
    with pytest.deprecated_call():
        result = second(1) + 1
    assert result == seconds(2)
    assert isinstance(result, Duration)


def test_minus():
    assert seconds(2) - second(1) == second(1)
    assert isinstance(seconds(2) - second(1), Duration)


def test_minus_number_is_deprecated():
    with pytest.deprecated_call():
        result = seconds(2) - 1
    assert result == second(1)
    assert isinstance(result, Duration)


def test_multiply():
    assert day(1) * 7 == days(7)
    assert isinstance(day(1) * 7, Duration)
    assert (days(1) * 7).parts == ((Unit.DAYS, 7),)


def test_multiply_by_duration_is_deprecated():
    with pytest.deprecated_call():
        assert day(1) * second(1) == 86400


def test_divide():
    assert days(7) / 7 == day(1)
    assert isinstance(days(7) / 7, Duration)
    assert (days(7) / 7).parts == ((Unit.DAYS, 1),)
    assert (days(1) / 2).parts == ((Unit.DAYS, 0.5),)


def test_divide_by_duration_is_deprecated():
    with pytest.deprecated_call():
        assert day(1) / day(1) == 1


def test_implicit_coercion_is_deprecated():
    """Numbers on the left of an operator coerce through seconds."""
    with pytest.deprecated_call():
        assert 1 + second(1) == seconds(2)
    with pytest.deprecated_call():
        assert 1 - second(1) == seconds(0)
    with pytest.deprecated_call():
        assert 1 * second(1) == second(1)
    with pytest.deprecated_call():
        assert 1 / second(1) == 1


def test_implicit_coercion_results_are_durations():
    with pytest.deprecated_call():
        assert isinstance(1 + second(1), Duration)
    with pytest.deprecated_call():
        assert isinstance(2 * months(1), Duration)


def test_modulo():
    assert minutes(5) % minutes(2) == minute(1)
    assert isinstance(hours(1) % minutes(7), Duration)
    with pytest.deprecated_call():
        assert minutes(1) % 45 == seconds(15)


def test_negate():
    assert (-years(1)).parts == ((Unit.YEARS, -1),)
    d = years(1) - days(3) + seconds(2.5)
    assert (-(-d)).eql(d)
    assert (-(-d)).parts == d.parts
    assert abs(-d) == d


def test_fractional_weeks():
    assert weeks(1.5) == (86400 * 7) * 1.5
    assert weeks(1.7) == (86400 * 7) * 1.7


def test_fractional_days():
    assert days(1.5) == 86400 * 1.5
    assert days(1.7) == 86400 * 1.7


def test_compare():
    assert seconds(0).compare(second(1)) == -1
    assert second(1).compare(minute(1)) == -1
    assert seconds(0).compare(seconds(0)) == 0
    assert seconds(0).compare(minutes(0)) == 0
    assert second(1).compare(second(1)) == 0
    assert second(1).compare(seconds(0)) == 1
    assert minute(1).compare(second(1)) == 1


def test_compare_with_number_is_deprecated():
    with pytest.deprecated_call():
        assert minute(1).compare(61) == -1
    with pytest.deprecated_call():
        assert 1 < minute(1)
    with pytest.deprecated_call():
        assert 61 > minute(1)


def test_comparison_warning_points_at_the_caller():
    with pytest.warns(DeprecatedUsageWarning) as record:
        minute(1) < 61
    assert record[0].filename == __file__

    with pytest.warns(DeprecatedUsageWarning) as record:
        minute(1).compare(61)
    assert record[0].filename == __file__


def test_compare_rejects_other_types():
    with pytest.raises(TypeError, match="Cannot compare Duration"):
        minute(1).compare("soon")
    with pytest.raises(TypeError):
        minute(1) < "soon"


def test_rich_comparisons():
    assert seconds(59) < minute(1) <= seconds(60)
    assert hours(25) > day(1) >= hours(24)
    assert sorted([days(1), minutes(3), hours(2)]) == [minutes(3), hours(2), days(1)]


def test_twelve_months_equals_one_year():
    assert months(12) == year(1)


def test_thirty_days_does_not_equal_one_month():
    assert days(30) != months(1)
    assert not days(30).eql(months(1))


def test_zero():
    assert seconds(0).is_zero()
    assert (months(1) - months(1)).is_zero()
    assert not days(1).is_zero()
    assert not seconds(0)
    assert days(1)


def test_cancelled_durations_hold_no_prior_state():
    """Cancelled components vanish instead of lingering at zero."""
    d1 = months(3) - months(3)
    d2 = days(1) - days(1)
    assert d1.parts == d2.parts == ((Unit.SECONDS, 0),)
    assert d1 == d2
    assert d1.eql(d2)


def test_scalar_export():
    assert int(days(2)) == 172800
    assert float(seconds(1.5)) == 1.5
    assert days(2).in_seconds() == 172800
    assert days(2).as_json() == 172800
    assert days(2).to_json() == "172800"
    assert json.loads(hours(1).to_json()) == 3600


def test_unit_conversions():
    assert hours(36).in_days() == 1.5
    assert minutes(90).in_hours() == 1.5
    assert seconds(30).in_minutes() == 0.5
    assert days(14).in_weeks() == 2
    assert years(1).in_months() == 12
    assert months(6).in_years() == 0.5


def test_fortnights():
    assert fortnights(1).parts == ((Unit.WEEKS, 2),)
    assert fortnights(1) == weeks(2)


def test_from_unit_and_from_parts():
    assert Duration.from_unit("days", 3) == days(3)
    d = from_parts([("seconds", 5), (Unit.YEARS, 1), ("minute", 2)])
    assert d.parts == ((Unit.YEARS, 1), (Unit.MINUTES, 2), (Unit.SECONDS, 5))


def test_build_decomposes_seconds():
    d = Duration.build(3700)
    assert d.parts == ((Unit.HOURS, 1), (Unit.MINUTES, 1), (Unit.SECONDS, 40))
    assert d == 3700

    big = Duration.build(Unit.YEARS.factor + Unit.DAYS.factor + 1)
    assert big.parts == ((Unit.YEARS, 1), (Unit.DAYS, 1), (Unit.SECONDS, 1))


def test_build_negative_values():
    d = Duration.build(-3661)
    assert d.parts == ((Unit.HOURS, -1), (Unit.MINUTES, -1), (Unit.SECONDS, -1))


def test_build_zero():
    assert Duration.build(0).parts == ((Unit.SECONDS, 0),)


def test_immutable():
    d = days(1)
    with pytest.raises(AttributeError):
        d.value = 5  # type: ignore[misc]


def test_pickle_round_trip():
    d = years(1) + hours(2)
    restored = pickle.loads(pickle.dumps(d))
    assert restored.parts == d.parts
    assert restored.value == d.value


def test_deprecated_usage_warning_is_a_deprecation_warning():
    with pytest.warns(DeprecatedUsageWarning, match="seconds\\(1\\)"):
        minutes(1) + 1
