from datetime import date, datetime

from src.hr_portal.hr_portal.common.datetime_utils import combine_hhmm, format_elapsed, format_hhmm


def test_format_elapsed_pads_fields():
    assert format_elapsed(3661) == "01:01:01"
    assert format_elapsed(0) == "00:00:00"
    assert format_elapsed(59) == "00:00:59"


def test_format_elapsed_does_not_wrap_hours():
    assert format_elapsed(100 * 3600) == "100:00:00"


def test_hhmm_round_trip_onto_day():
    assert format_hhmm(datetime(2024, 5, 1, 7, 5, 59)) == "07:05"
    assert combine_hhmm(date(2024, 5, 1), "07:05") == datetime(2024, 5, 1, 7, 5)
