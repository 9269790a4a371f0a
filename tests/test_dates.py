import pytest

from tradeparser.app.extraction.dates import compose, parse_date


def test_parse_date():
    assert parse_date("04.06.2020") == "2020-06-04"
    assert parse_date("2020-06-04") is None
    assert parse_date(None) is None


@pytest.mark.parametrize(
    "date_token,time_token,expected",
    [
        # summer time, UTC+2
        ("04.06.2020", "16:22:22", ("2020-06-04", "2020-06-04T14:22:22Z")),
        # standard time, UTC+1
        ("15.01.2021", "10:00:00", ("2021-01-15", "2021-01-15T09:00:00Z")),
        # crosses midnight into the previous UTC day
        ("02.03.2021", "00:30:00", ("2021-03-02", "2021-03-01T23:30:00Z")),
    ],
)
def test_compose_converts_local_time_to_utc(date_token, time_token, expected):
    assert compose(date_token, time_token) == expected


@pytest.mark.parametrize("time_token", [None, "", "25:00:00", "16:22", "Uhr"])
def test_compose_without_valid_time(time_token):
    assert compose("04.06.2020", time_token) == ("2020-06-04", None)


@pytest.mark.parametrize("date_token", [None, "", "31.02.2020", "2020-06-04", "4.6.20"])
def test_compose_with_invalid_date(date_token):
    assert compose(date_token, "16:22:22") == (None, None)


def test_compose_explicit_zone():
    assert compose("04.06.2020", "16:22:22", tz="UTC") == ("2020-06-04", "2020-06-04T16:22:22Z")


def test_compose_zone_from_settings(monkeypatch):
    from tradeparser.app.config import get_settings

    monkeypatch.setenv("DOCUMENT_TIMEZONE", "America/New_York")
    get_settings.cache_clear()
    assert compose("04.06.2020", "10:00:00") == ("2020-06-04", "2020-06-04T14:00:00Z")
