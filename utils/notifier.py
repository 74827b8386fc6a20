"""
알림 전송

수신자 결정, push / multicast 전송, 웹훅 이벤트 분기를 담당합니다.
메시지 구성은 utils.schedule_messages에서 합니다.
"""

import logging

from utils.errors import InvalidArgument
from utils.line_response import text_message


logger = logging.getLogger(__name__)

RESULT_SENT = 'sent'
RESULT_NO_TARGET = 'noTarget'


def resolve_target(to_id, default_group_id):
    """
    전송 대상 결정

    우선순위: 요청의 toId → 환경 설정의 기본 그룹 ID

    Args:
        to_id (str): 요청에서 지정한 userId/groupId
        default_group_id (str): LINE_GROUP_ID

    Returns:
        str: 전송 대상 ID

    Raises:
        InvalidArgument: 둘 다 없는 경우

    Example:
        >>> resolve_target("U123", "Cgroup")
        'U123'
        >>> resolve_target(None, "Cgroup")
        'Cgroup'
    """
    if to_id:
        return to_id
    if default_group_id:
        return default_group_id
    raise InvalidArgument('送信先が指定されていません。', details={"toId": to_id})


def push_messages(line, to, messages):
    """단일 대상 push 전송"""
    line.push_message(to, messages)
    logger.info(f"push 전송 완료: to={to}, messages={len(messages)}")
    return {"result": RESULT_SENT, "to": to}


def multicast_messages(line, to_ids, messages):
    """
    여러 사용자에게 multicast 전송

    빈 ID는 제외하고, 남은 대상이 없으면 API를 호출하지 않습니다.

    Args:
        line (LineMessagingClient): 전송 클라이언트
        to_ids (list): userId 리스트 (빈 문자열/None 포함 가능)
        messages (list): 메시지 객체 리스트

    Returns:
        dict: {"result": "sent", "to": [...]} 또는 {"result": "noTarget"}

    Example:
        >>> multicast_messages(line, ["", "U1", "", "U2"], messages)
        {"result": "sent", "to": ["U1", "U2"]}
    """
    targets = [to_id for to_id in (to_ids or []) if to_id]
    if not targets:
        logger.info("multicast 대상이 없습니다.")
        return {"result": RESULT_NO_TARGET}

    line.multicast(targets, messages)
    logger.info(f"multicast 전송 완료: {len(targets)}명")
    return {"result": RESULT_SENT, "to": targets}


def handle_webhook_events(line, events):
    """
    웹훅 이벤트 처리

    user 소스의 message 이벤트에만 발신자의 userId를 답장합니다.
    (멤버가 자신의 ID를 등록할 때 사용)
    그 외 이벤트는 로그만 남깁니다.

    Args:
        line (LineMessagingClient): 응답 클라이언트
        events (list): 웹훅 body의 events

    Returns:
        int: 답장한 이벤트 수
    """
    replied = 0
    for event in events or []:
        event_type = event.get('type')
        source = event.get('source') or {}

        if event_type != 'message' or source.get('type') != 'user':
            logger.info(f"무시한 이벤트: type={event_type}, source={source.get('type')}")
            continue

        user_id = source.get('userId')
        line.reply_message(
            event.get('replyToken'),
            [text_message(f"あなたのユーザーIDは\n{user_id}\nです。")]
        )
        logger.info(f"웹훅 응답 완료: userId={user_id}")
        replied += 1

    return replied
