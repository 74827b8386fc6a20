"""
외부 서비스 의존성 컨테이너

프로세스 시작 시 한 번 만들어 app.extensions['services']에 보관하고,
각 핸들러는 여기서 클라이언트를 꺼내 씁니다.
테스트에서는 fake 객체로 채운 Services를 create_app()에 넘깁니다.
"""

from flask import current_app

from utils.auth import FirebaseAuthenticator
from utils.db import create_firestore_client, create_replica_source_client
from utils.line_client import LineMessagingClient
from utils.sheets import SheetsClient


class Services:
    """
    Attributes:
        sheets (SheetsClient): 회계 스프레드시트
        db: 기본 Firestore 클라이언트
        line (LineMessagingClient): 기본 채널 (웹훅 응답, 리마인드, 테스트 푸시)
        notice_line (LineMessagingClient): 공지 채널 (추가/변경/정기 공지)
        authenticator: 토큰 → CallerIdentity 변환 함수
        replica_source: 리플리카 원본 Firestore (None이면 처음 사용할 때 생성)
    """
    def __init__(self, sheets, db, line, notice_line, authenticator,
                 replica_source=None, replica_project_id=''):
        self.sheets = sheets
        self.db = db
        self.line = line
        self.notice_line = notice_line
        self.authenticator = authenticator
        self._replica_source = replica_source
        self._replica_project_id = replica_project_id

    @property
    def replica_source(self):
        if self._replica_source is None:
            self._replica_source = create_replica_source_client(self._replica_project_id)
        return self._replica_source


def create_services(app_config):
    """
    설정값으로 실제 클라이언트들을 생성

    Args:
        app_config: Flask app.config

    Returns:
        Services
    """
    return Services(
        sheets=SheetsClient(app_config['ACCOUNTING_SPREADSHEET_ID']),
        db=create_firestore_client(app_config['FIREBASE_PROJECT_ID']),
        line=LineMessagingClient(app_config['LINE_CHANNEL_ACCESS_TOKEN']),
        notice_line=LineMessagingClient(app_config['LINE_NOTICE_CHANNEL_ACCESS_TOKEN']),
        authenticator=FirebaseAuthenticator(app_config['FIREBASE_PROJECT_ID']),
        replica_project_id=app_config['ANOTHER_FIREBASE_PROJECT_ID']
    )


def get_services():
    """현재 앱의 Services"""
    return current_app.extensions['services']
