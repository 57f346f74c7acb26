"""Unit tests for response normalization."""

from datetime import datetime, timedelta, timezone

import pytest

from mite_tools.api.normalize import DATE_FIELDS, convert_dates, normalize_response


class TestConvertDates:
    """Tests for convert_dates()."""

    def test_parses_date_fields(self):
        record = {
            "created_at": "2015-09-15T14:33:16+02:00",
            "updated_at": "2024-01-01T08:00:00Z",
            "date_at": "2024-01-01",
        }

        result = convert_dates(record)

        assert result["created_at"] == datetime(2015, 9, 15, 14, 33, 16, tzinfo=timezone(timedelta(hours=2)))
        assert result["updated_at"] == datetime(2024, 1, 1, 8, 0, tzinfo=timezone.utc)
        assert result["date_at"] == datetime(2024, 1, 1)

    def test_other_fields_are_untouched(self):
        rates = [{"service_id": 1, "hourly_rate": 100}]
        record = {"id": 5, "name": "X", "hourly_rates_per_service": rates, "created_at": "2024-01-01"}

        result = convert_dates(record)

        assert result is not record
        assert result["hourly_rates_per_service"] is rates
        assert result["name"] is record["name"]
        assert record["created_at"] == "2024-01-01"

    def test_only_known_fields_are_parsed(self):
        result = convert_dates({"started_at": "2024-01-01", "archived_at": "2024-01-01"})
        assert result == {"started_at": "2024-01-01", "archived_at": "2024-01-01"}
        assert set(DATE_FIELDS) == {"created_at", "updated_at", "date_at"}

    def test_falsy_and_missing_values_pass_through(self):
        result = convert_dates({"created_at": None, "updated_at": ""})
        assert result == {"created_at": None, "updated_at": ""}
        assert "date_at" not in result

    def test_malformed_date_raises(self):
        with pytest.raises(ValueError):
            convert_dates({"date_at": "not a date"})


class TestNormalizeResponse:
    """Tests for normalize_response()."""

    def test_unwraps_list(self):
        payload = [{"time_entry": {"id": 1, "date_at": "2024-01-01", "minutes": 30}}]

        result = normalize_response(200, payload, "time_entry", many=True)

        assert result == [{"id": 1, "date_at": datetime(2024, 1, 1), "minutes": 30}]

    def test_unwraps_single_object(self):
        payload = {"project": {"id": 42, "name": "P", "created_at": "2024-02-03"}}

        result = normalize_response(200, payload, "project")

        assert result == {"id": 42, "name": "P", "created_at": datetime(2024, 2, 3)}

    def test_without_data_key_uses_object_itself(self):
        result = normalize_response(200, {"id": 1, "updated_at": "2024-02-03"})
        assert result == {"id": 1, "updated_at": datetime(2024, 2, 3)}

    @pytest.mark.parametrize("status_code", [201, 204, 301, 401, 404, 500])
    def test_non_success_status_is_empty(self, status_code):
        payload = [{"customer": {"id": 1}}]

        assert normalize_response(status_code, payload, "customer", many=True) == []
        assert normalize_response(status_code, payload[0], "customer") is None

    def test_missing_body_is_empty(self):
        assert normalize_response(200, None, "user", many=True) == []
        assert normalize_response(200, None, "user") is None

    def test_single_object_where_list_expected(self):
        result = normalize_response(200, {"user": {"id": 9}}, "user", many=True)
        assert result == [{"id": 9}]

    def test_objects_without_envelope_are_skipped(self):
        payload = [{"customer": {"id": 1}}, {"error": "gone"}, {"customer": {"id": 3}}]

        assert normalize_response(200, payload, "customer", many=True) == [{"id": 1}, {"id": 3}]

    def test_single_object_without_envelope_is_none(self):
        assert normalize_response(200, {"error": "gone"}, "project") is None
        assert normalize_response(200, {"error": "gone"}, "project", many=True) == []
        assert normalize_response(200, [{"error": "gone"}], "project") is None
