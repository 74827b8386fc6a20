"""
스케줄 시간 정규화 및 표시 포맷

Firestore에서 읽은 타임스탬프는 두 가지 형태로 들어옵니다.
- 일반 타임스탬프: datetime (DatetimeWithNanoseconds 포함) 또는
  to_datetime() 접근자를 가진 객체
- 원시 필드 타임스탬프: seconds/nanoseconds 필드만 있는 값
  (에뮬레이터에서 직렬화된 {"_seconds": ..., "_nanoseconds": ...} 등)

normalize_timestamp()가 두 형태를 모두 aware datetime으로 바꿉니다.
표시용 시간은 항상 Asia/Tokyo, 요일은 일본어 약칭을 사용합니다.
"""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from config import Config


DISPLAY_TIMEZONE = ZoneInfo(Config.TIMEZONE)
WEEKDAYS_JA = ['月', '火', '水', '木', '金', '土', '日']


class RawTimestamp:
    """
    seconds/nanoseconds 필드만 가진 타임스탬프

    Attributes:
        seconds (int): UNIX epoch 초
        nanoseconds (int): 나노초 (0 ~ 999,999,999)
    """
    def __init__(self, seconds, nanoseconds=0):
        self.seconds = int(seconds)
        self.nanoseconds = int(nanoseconds)

    @classmethod
    def from_fields(cls, value):
        """
        원시 필드에서 RawTimestamp 생성

        Args:
            value: dict 또는 seconds/_seconds 속성을 가진 객체

        Returns:
            RawTimestamp: 필드가 있을 때
            None: 원시 필드 형태가 아닐 때
        """
        for seconds_key, nanos_key in (('seconds', 'nanoseconds'), ('_seconds', '_nanoseconds')):
            if isinstance(value, dict):
                if seconds_key in value:
                    return cls(value[seconds_key], value.get(nanos_key, 0))
            elif hasattr(value, seconds_key):
                return cls(getattr(value, seconds_key), getattr(value, nanos_key, 0))
        return None

    def to_datetime(self):
        base = datetime.fromtimestamp(self.seconds, tz=timezone.utc)
        return base + timedelta(microseconds=self.nanoseconds // 1000)


def normalize_timestamp(value):
    """
    타임스탬프 값을 aware datetime으로 정규화

    Args:
        value: datetime, RawTimestamp, to_datetime()을 가진 객체,
            또는 seconds/nanoseconds 필드를 가진 값

    Returns:
        datetime: timezone 정보가 있는 datetime (naive 값은 UTC로 간주)

    Raises:
        TypeError: 타임스탬프로 해석할 수 없는 값
        (접근자가 던지는 그 밖의 에러는 그대로 전파됩니다)

    Example:
        >>> normalize_timestamp({"_seconds": 0, "_nanoseconds": 0})
        datetime.datetime(1970, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, RawTimestamp):
        dt = value.to_datetime()
    elif callable(getattr(value, 'to_datetime', None)):
        dt = value.to_datetime()
    else:
        raw = RawTimestamp.from_fields(value)
        if raw is None:
            raise TypeError(f"타임스탬프로 변환할 수 없는 값입니다: {value!r}")
        dt = raw.to_datetime()

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def to_display_time(value):
    """타임스탬프를 표시용 타임존(Asia/Tokyo)으로 변환"""
    return normalize_timestamp(value).astimezone(DISPLAY_TIMEZONE)


def format_date_short(value):
    """
    날짜를 M/D(ddd) 형식으로 포맷

    Example:
        >>> format_date_short(datetime(2024, 4, 6, 1, 0, tzinfo=timezone.utc))
        '4/6(土)'
    """
    dt = to_display_time(value)
    return f"{dt.month}/{dt.day}({WEEKDAYS_JA[dt.weekday()]})"


def format_time(value):
    """H:mm 형식 (시는 0 채움 없음)"""
    dt = to_display_time(value)
    return f"{dt.hour}:{dt.minute:02d}"


def format_time_range(start, end):
    """
    시간 범위를 M/D(ddd)H:mm-H:mm 형식으로 포맷

    종료 시간에는 날짜를 붙이지 않습니다.

    Example:
        >>> format_time_range(start, end)
        '4/6(土)9:00-12:30'
    """
    return f"{format_date_short(start)}{format_time(start)}-{format_time(end)}"


def truncate(text, length):
    """
    문자열을 length 글자로 자르기 (말줄임표 없음)

    Example:
        >>> truncate("abcdef", 4)
        'abcd'
        >>> truncate("abc", 4)
        'abc'
    """
    if text is None:
        return ''
    return str(text)[:length]
