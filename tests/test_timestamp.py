from datetime import datetime, timedelta, timezone

import pytest

from vault_parser.exceptions import InvalidTimestampError
from vault_parser.parsing.timestamp import (
    DEFAULT_TIMESTAMP_FORMAT,
    EPOCH,
    normalize_timestamp,
)


def test_zero_is_kept_as_sentinel():
    assert normalize_timestamp("0") == "0"
    assert normalize_timestamp(normalize_timestamp("0")) == "0"


def test_empty_value_stays_empty():
    assert normalize_timestamp("") == ""


def test_known_date_in_utc():
    assert normalize_timestamp("1700000000", tz=timezone.utc) == "2023-11-14 22:13:20"


@pytest.mark.parametrize("seconds", [1, 59, 86400, 951782400, 1700000000, 4102444800])
def test_result_is_offset_from_epoch(seconds: int):
    result = normalize_timestamp(str(seconds), tz=timezone.utc)
    moment = datetime.strptime(result, DEFAULT_TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)
    assert moment - EPOCH == timedelta(seconds=seconds)


def test_local_time_is_the_same_instant():
    result = normalize_timestamp("1700000000", fmt="%Y-%m-%dT%H:%M:%S%z")
    moment = datetime.strptime(result, "%Y-%m-%dT%H:%M:%S%z")
    assert moment == EPOCH + timedelta(seconds=1700000000)


def test_custom_format():
    assert normalize_timestamp("86400", fmt="%d/%m/%Y", tz=timezone.utc) == "02/01/1970"


@pytest.mark.parametrize("value", ["yesterday", "12.5", "0x10", "99999999999999999999"])
def test_invalid_values_raise(value: str):
    with pytest.raises(InvalidTimestampError):
        normalize_timestamp(value, tz=timezone.utc)
