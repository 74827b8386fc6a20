"""
스케줄/설정 조회

- 단일 스케줄 조회 (ID)
- 응답 기한 내 스케줄 조회 (정기 공지 대상)
- settings 컬렉션의 설정값 조회 (없거나 타입이 다르면 기본값)
"""

import logging
from datetime import datetime, timedelta, timezone

from models import ScheduleDoc, SettingKey
from utils.datetime_format import normalize_timestamp
from utils.db import SCHEDULES_COLLECTION, SETTINGS_COLLECTION


DEFAULT_ANSWER_LIMIT_DAYS = 20

logger = logging.getLogger(__name__)


def to_schedule(snapshot):
    """
    Firestore 문서 스냅샷 → ScheduleDoc

    Args:
        snapshot: DocumentSnapshot

    Returns:
        ScheduleDoc: 타임스탬프는 aware datetime으로 정규화됨
    """
    data = snapshot.to_dict() or {}
    return ScheduleDoc(
        id=snapshot.id,
        title=data.get('title') or '',
        place_name=data.get('placeName') or '',
        start=normalize_timestamp(data.get('startTimestamp')),
        end=normalize_timestamp(data.get('endTimestamp')),
        is_deleted=bool(data.get('isDeleted', False))
    )


def get_schedule(db, schedule_id):
    """
    ID로 스케줄 조회

    Returns:
        ScheduleDoc: 문서가 있으면
        None: 없으면
    """
    snapshot = db.collection(SCHEDULES_COLLECTION).document(schedule_id).get()
    if not snapshot.exists:
        return None
    return to_schedule(snapshot)


def get_setting_value(db, key):
    """settings/{key} 문서의 value 필드 (없으면 None)"""
    snapshot = db.collection(SETTINGS_COLLECTION).document(key).get()
    if not snapshot.exists:
        return None
    return (snapshot.to_dict() or {}).get('value')


def get_answer_limit_days(db):
    """
    응답 기한 일수 (SCHEDULE_ANSWER_LIMIT_DAYS)

    Returns:
        int: 설정값, 없거나 숫자가 아니면 20
    """
    value = get_setting_value(db, SettingKey.SCHEDULE_ANSWER_LIMIT_DAYS)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_ANSWER_LIMIT_DAYS
    return value


def is_announce_batch_enabled(db):
    """정기 공지 기능 플래그 (LINE_SEND_ANNOUNCE_BACH), 불리언 True일 때만 활성"""
    return get_setting_value(db, SettingKey.LINE_SEND_ANNOUNCE_BACH) is True


def select_due_schedules(db, limit_days, now=None):
    """
    응답 기한 내 스케줄 조회

    [now, now + limit_days일] 범위 (양 끝 포함)의 스케줄을
    시작 시간 순으로 가져오고, 삭제된 스케줄은 제외합니다.

    Args:
        db: Firestore 클라이언트
        limit_days (int): 조회 범위 일수
        now (datetime, optional): 기준 시각 (기본값: 현재 UTC)

    Returns:
        list: ScheduleDoc 리스트
    """
    window_start = now or datetime.now(timezone.utc)
    window_end = window_start + timedelta(days=limit_days)

    snapshots = (
        db.collection(SCHEDULES_COLLECTION)
        .order_by('startTimestamp')
        .start_at({'startTimestamp': window_start})
        .end_at({'startTimestamp': window_end})
        .get()
    )

    schedules = [to_schedule(snapshot) for snapshot in snapshots]
    due = [schedule for schedule in schedules if not schedule.is_deleted]

    logger.info(
        f"응답 기한 내 스케줄: {len(due)}건 "
        f"(삭제 제외 {len(schedules) - len(due)}건, {window_start} ~ {window_end})"
    )
    return due
