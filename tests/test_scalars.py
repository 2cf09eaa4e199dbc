"""
Tests for the DateTime and Json scalars
"""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from mapgraph.errors import MalformedScalarError
from mapgraph.graphql.scalars import parse_datetime, parse_json, serialize_datetime, serialize_json


class TestDateTimeScalar:
    def test_serialize_aware_datetime(self):
        value = datetime(2024, 5, 1, 12, 30, tzinfo=UTC)
        assert serialize_datetime(value) == "2024-05-01T12:30:00+00:00"

    def test_serialize_naive_datetime_is_utc(self):
        assert serialize_datetime(datetime(2024, 5, 1, 12, 30)) == "2024-05-01T12:30:00+00:00"

    def test_parse_keeps_offset(self):
        parsed = parse_datetime("2024-05-01T14:30:00+02:00")
        assert parsed.utcoffset() == timedelta(hours=2)
        assert parsed.astimezone(UTC) == datetime(2024, 5, 1, 12, 30, tzinfo=UTC)

    def test_parse_naive_string_as_utc(self):
        assert parse_datetime("2024-05-01T12:30:00") == datetime(2024, 5, 1, 12, 30, tzinfo=UTC)

    def test_parse_zulu_suffix(self):
        assert parse_datetime("2024-05-01T12:30:00Z").tzinfo is not None

    def test_round_trip(self):
        value = datetime(2030, 1, 2, 3, 4, 5, tzinfo=timezone(timedelta(hours=-5)))
        assert parse_datetime(serialize_datetime(value)) == value

    @pytest.mark.parametrize("value", ["not a date", "2024-13-45T00:00:00", ""])
    def test_parse_rejects_malformed_strings(self, value):
        with pytest.raises(MalformedScalarError, match="Invalid DateTime value"):
            parse_datetime(value)

    @pytest.mark.parametrize("value", [1714566600, None, ["2024-05-01"]])
    def test_parse_rejects_non_strings(self, value):
        with pytest.raises(MalformedScalarError):
            parse_datetime(value)


class TestJsonScalar:
    def test_serialize_nested_value(self):
        assert serialize_json({"layers": [1, 2], "dark": True}) == '{"layers": [1, 2], "dark": true}'

    def test_parse_nested_value(self):
        assert parse_json('{"layers": [{"id": "roads"}], "zoom": 3.5}') == {
            "layers": [{"id": "roads"}],
            "zoom": 3.5,
        }

    @pytest.mark.parametrize("value", [{"a": 1}, [1, "two", None], "text", 7, None])
    def test_round_trip(self, value):
        assert parse_json(serialize_json(value)) == value

    def test_parse_rejects_malformed_json(self):
        with pytest.raises(MalformedScalarError, match="Invalid Json value"):
            parse_json("{not json")

    def test_parse_rejects_non_strings(self):
        with pytest.raises(MalformedScalarError):
            parse_json({"already": "decoded"})

    def test_malformed_scalar_is_value_error(self):
        with pytest.raises(ValueError):
            parse_json("[")
