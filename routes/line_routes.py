"""
LINE 라우트 (인증 없음)

- /lineWebhook: LINE 플랫폼 웹훅 (user의 message 이벤트에 자동 응답)
- /pushMessage: 텍스트 push 테스트용 엔드포인트
"""

from flask import Blueprint, current_app, request

from utils.errors import InvalidArgument, PermissionDenied
from utils.line_client import verify_signature
from utils.line_response import text_message
from utils.logging_setup import log_api_call
from utils.notifier import handle_webhook_events, push_messages, resolve_target
from utils.services import get_services

bp = Blueprint('line', __name__)


@bp.route('/lineWebhook', methods=['POST'])
def line_webhook():
    """
    LINE 웹훅 API

    LINE_CHANNEL_SECRET이 설정되어 있으면 X-Line-Signature를 검증합니다.
    LINE 플랫폼은 200 응답만 확인하므로 본문은 비워서 반환합니다.
    """
    body = request.get_data()
    channel_secret = current_app.config['LINE_CHANNEL_SECRET']
    if channel_secret and not verify_signature(
            channel_secret, body, request.headers.get('X-Line-Signature')):
        current_app.logger.warning("웹훅 서명 불일치")
        raise PermissionDenied('Invalid signature')

    payload = request.get_json(silent=True) or {}
    events = payload.get('events', [])
    log_api_call(current_app, 'lineWebhook', None, {"events": len(events)})

    replied = handle_webhook_events(get_services().line, events)
    current_app.logger.info(f"웹훅 처리 완료: events={len(events)}, replied={replied}")
    return '', 200


@bp.route('/pushMessage', methods=['POST'])
def push_message():
    """
    텍스트 push 테스트 API

    body:
    - text: 보낼 텍스트 (필수)
    - toId: 전송 대상 (생략 시 LINE_GROUP_ID)
    """
    payload = request.get_json(silent=True) or {}
    log_api_call(current_app, 'pushMessage', None, payload)

    text = payload.get('text')
    if not text:
        raise InvalidArgument('textが指定されていません。', details=payload)

    to = resolve_target(payload.get('toId'), current_app.config['LINE_GROUP_ID'])
    return push_messages(get_services().line, to, [text_message(text)])
