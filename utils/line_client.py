"""
LINE Messaging API 클라이언트

push / reply / multicast 세 가지 전송 방식만 사용합니다.
재시도는 하지 않으며, API 에러는 requests.HTTPError로 그대로 전파됩니다.
"""

import base64
import hashlib
import hmac
import logging

import requests


LINE_API_BASE_URL = 'https://api.line.me/v2/bot/message'

logger = logging.getLogger(__name__)


class LineMessagingClient:
    """
    채널 액세스 토큰 하나에 대응하는 클라이언트

    Args:
        channel_access_token (str): LINE 채널 액세스 토큰
        session (requests.Session, optional): 테스트 시 교체용 세션
        timeout (float): 요청 타임아웃(초)
    """

    def __init__(self, channel_access_token, session=None, timeout=10):
        self.channel_access_token = channel_access_token
        self.session = session or requests.Session()
        self.timeout = timeout

    def _post(self, path, payload):
        response = self.session.post(
            f"{LINE_API_BASE_URL}/{path}",
            json=payload,
            headers={
                "Authorization": f"Bearer {self.channel_access_token}",
                "Content-Type": "application/json"
            },
            timeout=self.timeout
        )
        if response.status_code >= 400:
            logger.error(f"LINE API error: {path} | {response.status_code} | {response.text}")
        response.raise_for_status()
        return response.json() if response.content else {}

    def push_message(self, to, messages):
        """
        단일 사용자/그룹에 메시지 전송

        Args:
            to (str): userId 또는 groupId
            messages (list): 메시지 객체 리스트 (최대 5개)
        """
        return self._post('push', {"to": to, "messages": messages})

    def reply_message(self, reply_token, messages):
        """웹훅 이벤트의 replyToken으로 응답"""
        return self._post('reply', {"replyToken": reply_token, "messages": messages})

    def multicast(self, to, messages):
        """
        여러 사용자에게 동시에 전송

        Args:
            to (list): userId 리스트 (최대 500개)
            messages (list): 메시지 객체 리스트
        """
        return self._post('multicast', {"to": to, "messages": messages})


def verify_signature(channel_secret, body, signature):
    """
    웹훅 요청의 X-Line-Signature 검증

    Args:
        channel_secret (str): 채널 시크릿
        body (bytes): 요청 본문 원문
        signature (str): X-Line-Signature 헤더 값

    Returns:
        bool: 서명이 일치하면 True
    """
    if not signature:
        return False
    digest = hmac.new(channel_secret.encode('utf-8'), body, hashlib.sha256).digest()
    expected = base64.b64encode(digest).decode('utf-8')
    return hmac.compare_digest(expected.encode('utf-8'), signature.encode('utf-8'))
