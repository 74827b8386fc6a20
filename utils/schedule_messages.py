"""
스케줄 알림 메시지 구성

ScheduleDoc과 알림 종류(추가/변경/리마인드/정기 공지)로
LINE 메시지 객체 리스트를 만듭니다. 전송은 하지 않습니다.
"""

from utils.datetime_format import format_time_range, truncate
from utils.line_response import (
    CAROUSEL_MAX_COLUMNS,
    buttons_template,
    carousel_column,
    carousel_template,
    text_message,
    uri_action,
)


TITLE_MAX_LENGTH = 40
TEXT_MAX_LENGTH = 60


class ScheduleLabel:
    """알림 종류별 문구"""
    ADDED = '予定が追加されました'
    CHANGED = '予定が変更されました'
    REMINDER = '出欠の回答をお願いします'
    BATCH_ANNOUNCE = '回答期限が近い予定があります'


def build_schedule_url(site_base_url, schedule_id):
    """
    스케줄 상세 페이지 URL

    Example:
        >>> build_schedule_url("https://team.example.com", "abc")
        'https://team.example.com/member/schedule/abc'
    """
    return f"{site_base_url.rstrip('/')}/member/schedule/{schedule_id}"


def _schedule_body(schedule, label=None):
    lines = [format_time_range(schedule.start, schedule.end)]
    if schedule.place_name:
        lines.append(schedule.place_name)
    if label:
        lines.insert(0, label)
    return truncate('\n'.join(lines), TEXT_MAX_LENGTH)


def build_schedule_message(schedule, label, site_base_url):
    """
    단일 스케줄 Buttons 메시지 (추가/변경/리마인드)

    Args:
        schedule (ScheduleDoc): 대상 스케줄
        label (str): ScheduleLabel 문구
        site_base_url (str): 사이트 기본 URL

    Returns:
        list: [buttons 템플릿 메시지]

    Example:
        >>> build_schedule_message(schedule, ScheduleLabel.ADDED, "https://team.example.com")
        [{"type": "template", "altText": "予定が追加されました: 練習試合", ...}]
    """
    url = build_schedule_url(site_base_url, schedule.id)
    title = truncate(schedule.title, TITLE_MAX_LENGTH)
    return [
        buttons_template(
            alt_text=f"{label}: {schedule.title}",
            title=title,
            text=_schedule_body(schedule, label),
            actions=[uri_action('詳細を見る', url)]
        )
    ]


def build_batch_announce_messages(schedules, site_base_url):
    """
    정기 공지 메시지 (안내 텍스트 + Carousel)

    칼럼은 시작 시간 순으로 최대 10개까지 넣습니다.
    각 칼럼에는 상세 보기 / 출결 응답 두 개의 액션이 있습니다.

    Args:
        schedules (list): ScheduleDoc 리스트 (시작 시간 순)
        site_base_url (str): 사이트 기본 URL

    Returns:
        list: [텍스트 메시지, carousel 템플릿 메시지]
    """
    columns = []
    for schedule in schedules[:CAROUSEL_MAX_COLUMNS]:
        url = build_schedule_url(site_base_url, schedule.id)
        columns.append(carousel_column(
            title=truncate(schedule.title, TITLE_MAX_LENGTH),
            text=_schedule_body(schedule),
            actions=[
                uri_action('詳細を見る', url),
                uri_action('出欠を回答する', f"{url}?answer=1")
            ]
        ))

    banner = text_message(
        f"{ScheduleLabel.BATCH_ANNOUNCE}（{len(schedules)}件）\n"
        "まだ回答していない方は出欠の回答をお願いします。"
    )
    alt_text = ScheduleLabel.BATCH_ANNOUNCE + ': ' + ' / '.join(
        schedule.title for schedule in schedules
    )
    return [banner, carousel_template(alt_text, columns)]
