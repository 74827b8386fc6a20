"""타임스탬프 정규화 / 표시 포맷 테스트"""

from datetime import datetime, timezone

import pytest

from config import Config
from utils.datetime_format import (
    DISPLAY_TIMEZONE,
    RawTimestamp,
    format_date_short,
    format_time_range,
    normalize_timestamp,
    truncate,
)


START = datetime(2024, 4, 6, 0, 0, tzinfo=timezone.utc)     # 4/6(土) 9:00 JST
END = datetime(2024, 4, 6, 3, 30, tzinfo=timezone.utc)      # 12:30 JST
START_SECONDS = int(START.timestamp())


class AccessorTimestamp:
    def __init__(self, dt):
        self._dt = dt

    def to_datetime(self):
        return self._dt


class BrokenTimestamp:
    def to_datetime(self):
        raise RuntimeError('backend exploded')


class TestNormalizeTimestamp:
    def test_datetime_passthrough(self):
        assert normalize_timestamp(START) == START

    def test_naive_datetime_is_utc(self):
        assert normalize_timestamp(datetime(2024, 4, 6)) == START

    def test_accessor(self):
        assert normalize_timestamp(AccessorTimestamp(START)) == START

    def test_raw_timestamp(self):
        assert normalize_timestamp(RawTimestamp(START_SECONDS, 0)) == START

    def test_emulator_fields_without_accessor(self):
        value = {"_seconds": START_SECONDS, "_nanoseconds": 500_000_000}
        assert normalize_timestamp(value) == START.replace(microsecond=500000)

    def test_plain_fields(self):
        assert normalize_timestamp({"seconds": START_SECONDS}) == START

    def test_object_with_raw_attributes(self):
        class Raw:
            seconds = START_SECONDS
            nanoseconds = 0

        assert normalize_timestamp(Raw()) == START

    def test_unrelated_error_propagates(self):
        with pytest.raises(RuntimeError, match='backend exploded'):
            normalize_timestamp(BrokenTimestamp())

    def test_unknown_value(self):
        with pytest.raises(TypeError):
            normalize_timestamp('2024-04-06')


class TestFormat:
    def test_date_short_uses_tokyo_and_japanese_weekday(self):
        assert format_date_short(START) == '4/6(土)'

    def test_date_rolls_over_in_tokyo(self):
        late_utc = datetime(2024, 4, 6, 16, 0, tzinfo=timezone.utc)
        assert format_date_short(late_utc) == '4/7(日)'

    def test_time_range_omits_end_date(self):
        assert format_time_range(START, END) == '4/6(土)9:00-12:30'


class TestTruncate:
    def test_short_string_unchanged(self):
        assert truncate('練習', 40) == '練習'

    def test_exact_length_unchanged(self):
        assert truncate('a' * 40, 40) == 'a' * 40

    def test_long_string_cut_without_ellipsis(self):
        result = truncate('あ' * 70, 60)
        assert result == 'あ' * 60
        assert len(result) == 60

    def test_idempotent(self):
        once = truncate('x' * 100, 60)
        assert truncate(once, 60) == once

    def test_none(self):
        assert truncate(None, 10) == ''


def test_display_timezone_from_config():
    assert DISPLAY_TIMEZONE.key == Config.TIMEZONE == 'Asia/Tokyo'
