from datetime import datetime, timedelta, timezone

from conftest import FIXED_EPOCH, FIXED_NOW
from table_import.application.services.timestamp_stamper import stamp_timestamps
from table_import.domain.entities import TableSchema


SCHEMA = TableSchema(
    "pages",
    frozenset({"uid", "tstamp", "crdate", "modified_at"}),
    frozenset({"modified_at"}),
)


def test_integer_columns_get_epoch_seconds():
    stamped = stamp_timestamps({"uid": 1}, ["crdate", "tstamp"], FIXED_NOW, SCHEMA)
    assert stamped == {"uid": 1, "crdate": FIXED_EPOCH, "tstamp": FIXED_EPOCH}


def test_existing_values_are_overwritten():
    stamped = stamp_timestamps({"tstamp": 123}, ["tstamp"], FIXED_NOW, SCHEMA)
    assert stamped["tstamp"] == FIXED_EPOCH


def test_datetime_columns_get_datetime():
    stamped = stamp_timestamps({}, ["modified_at"], FIXED_NOW, SCHEMA)
    assert stamped["modified_at"] == FIXED_NOW


def test_naive_now_is_treated_as_utc():
    naive = datetime(2025, 12, 16, 10, 15, 0)
    stamped = stamp_timestamps({}, ["modified_at"], naive, SCHEMA)
    assert stamped["modified_at"].tzinfo == timezone.utc


def test_fields_missing_from_schema_are_not_stamped():
    schema = TableSchema("sys_note", frozenset({"id", "subject"}))
    assert stamp_timestamps({"id": 1}, ["tstamp", "crdate"], FIXED_NOW, schema) == {"id": 1}


def test_input_is_not_mutated():
    record = {"uid": 1}
    stamp_timestamps(record, ["tstamp"], FIXED_NOW + timedelta(seconds=5), SCHEMA)
    assert record == {"uid": 1}
