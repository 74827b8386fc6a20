"""
스케줄 알림 라우트

callable API (인증 필요)
- /sendScheduleAddedMessage: 스케줄 추가 알림 (push)
- /sendScheduleChangedMessage: 스케줄 변경 알림 (push)
- /sendScheduleReminder: 출결 응답 리마인드 (multicast)

정기 작업
- announce_schedule_batch(): 응답 기한 내 스케줄 일괄 공지
  (매주 월요일 09:00 Asia/Tokyo, `flask announce-schedules`)
"""

import click
from flask import Blueprint, current_app

from utils.callable import callable_function
from utils.errors import InvalidArgument
from utils.notifier import multicast_messages, push_messages, resolve_target
from utils.schedule_messages import (
    ScheduleLabel,
    build_batch_announce_messages,
    build_schedule_message,
)
from utils.schedule_query import (
    get_answer_limit_days,
    get_schedule,
    is_announce_batch_enabled,
    select_due_schedules,
)
from utils.services import get_services
from utils.validators import require_schedule_id

bp = Blueprint('schedule', __name__, cli_group=None)


def _load_schedule(data):
    schedule_id = require_schedule_id(data)
    schedule = get_schedule(get_services().db, schedule_id)
    if schedule is None:
        current_app.logger.warning(f"스케줄 없음: {schedule_id}")
        raise InvalidArgument('予定が見つかりません。', details={"scheduleId": schedule_id})
    return schedule


def _push_schedule_message(data, label):
    schedule = _load_schedule(data)
    to = resolve_target(data.get('toId'), current_app.config['LINE_GROUP_ID'])
    messages = build_schedule_message(schedule, label, current_app.config['SITE_BASE_URL'])
    return push_messages(get_services().notice_line, to, messages)


@bp.route('/sendScheduleAddedMessage', methods=['POST'])
@callable_function('sendScheduleAddedMessage')
def send_schedule_added_message(data, caller):
    """
    스케줄 추가 알림 API

    data:
    - scheduleId: 스케줄 문서 ID (필수)
    - toId: 전송 대상 (생략 시 LINE_GROUP_ID)
    """
    return _push_schedule_message(data, ScheduleLabel.ADDED)


@bp.route('/sendScheduleChangedMessage', methods=['POST'])
@callable_function('sendScheduleChangedMessage')
def send_schedule_changed_message(data, caller):
    """스케줄 변경 알림 API (data 형식은 추가 알림과 동일)"""
    return _push_schedule_message(data, ScheduleLabel.CHANGED)


@bp.route('/sendScheduleReminder', methods=['POST'])
@callable_function('sendScheduleReminder')
def send_schedule_reminder(data, caller):
    """
    출결 응답 리마인드 API

    data:
    - scheduleId: 스케줄 문서 ID (필수)
    - toIds: 미응답 멤버의 LINE userId 리스트

    Returns:
        {"result": "sent", "to": [...]} 또는 {"result": "noTarget"}
    """
    schedule = _load_schedule(data)
    messages = build_schedule_message(
        schedule, ScheduleLabel.REMINDER, current_app.config['SITE_BASE_URL']
    )
    return multicast_messages(get_services().line, data.get('toIds'), messages)


def announce_schedule_batch(services, app_config, now=None):
    """
    응답 기한 내 스케줄 일괄 공지

    1. LINE_SEND_ANNOUNCE_BACH 플래그가 True가 아니면 종료
    2. SCHEDULE_ANSWER_LIMIT_DAYS 범위의 스케줄 조회 (없으면 종료)
    3. 안내 텍스트 + Carousel을 기본 그룹에 push

    Args:
        services (Services): 외부 서비스
        app_config: Flask app.config
        now (datetime, optional): 기준 시각

    Returns:
        dict: 전송 결과, 또는 {"result": "disabled"} / {"result": "noSchedule"}
    """
    if not is_announce_batch_enabled(services.db):
        current_app.logger.info("정기 공지가 비활성화되어 있습니다.")
        return {"result": "disabled"}

    limit_days = get_answer_limit_days(services.db)
    schedules = select_due_schedules(services.db, limit_days, now=now)
    if not schedules:
        current_app.logger.info(f"{limit_days}일 이내에 공지할 스케줄이 없습니다.")
        return {"result": "noSchedule"}

    to = resolve_target(None, app_config['LINE_GROUP_ID'])
    messages = build_batch_announce_messages(schedules, app_config['SITE_BASE_URL'])
    return push_messages(services.notice_line, to, messages)


@bp.cli.command('announce-schedules')
def announce_schedules_command():
    """응답 기한 내 스케줄 일괄 공지 (정기 실행용)"""
    click.echo(
        f"announce-schedules (cron: {current_app.config['ANNOUNCE_SCHEDULE_CRON']} "
        f"{current_app.config['TIMEZONE']})"
    )
    result = announce_schedule_batch(get_services(), current_app.config)
    click.echo(result)
