"""Flask 앱 설정"""
import os
from dotenv import load_dotenv

# .env 파일 로드
load_dotenv()


class Config:
    """기본 설정 클래스"""
    FLASK_ENV = os.environ.get('FLASK_ENV', 'production')
    DEBUG = (FLASK_ENV == 'development')
    TESTING = False

    # 로그 파일 (빈 문자열이면 파일 로깅 비활성화)
    LOG_FILE = os.environ.get('LOG_FILE', 'logs/app.log')

    # 회계 스프레드시트
    ACCOUNTING_SPREADSHEET_ID = os.environ.get('ACCOUNTING_SPREADSHEET_ID', '')
    ACCOUNTING_SHEET_NAME = '明細'
    ACCOUNTING_RANGE_END_CELL = 'S211'

    # LINE Messaging API (기본 채널 / 공지 채널)
    LINE_CHANNEL_ACCESS_TOKEN = os.environ.get('LINE_CHANNEL_ACCESS_TOKEN', '')
    LINE_NOTICE_CHANNEL_ACCESS_TOKEN = os.environ.get('LINE_NOTICE_CHANNEL_ACCESS_TOKEN', '')
    LINE_CHANNEL_SECRET = os.environ.get('LINE_CHANNEL_SECRET', '')
    LINE_GROUP_ID = os.environ.get('LINE_GROUP_ID', '')

    # 스케줄 상세 페이지 링크
    SITE_BASE_URL = os.environ.get('SITE_BASE_URL', '')

    # Firestore
    FIREBASE_PROJECT_ID = os.environ.get('FIREBASE_PROJECT_ID') or None
    ANOTHER_FIREBASE_PROJECT_ID = os.environ.get('ANOTHER_FIREBASE_PROJECT_ID', '')
    REPLICA_TOKEN = os.environ.get('REPLICA_TOKEN', '')

    # 표시용 타임존 / 정기 공지 스케줄 (매주 월요일 09:00)
    TIMEZONE = 'Asia/Tokyo'
    ANNOUNCE_SCHEDULE_CRON = '0 9 * * 1'

    @staticmethod
    def init_app(app):
        """앱 초기화 시 실행되는 설정"""
        pass


class DevelopmentConfig(Config):
    """개발 환경 설정"""
    DEBUG = True


class ProductionConfig(Config):
    """프로덕션 환경 설정"""
    DEBUG = False


class TestingConfig(Config):
    """테스트 환경 설정 (외부 서비스는 fake로 주입)"""
    TESTING = True
    LOG_FILE = ''
    ACCOUNTING_SPREADSHEET_ID = 'test-spreadsheet'
    LINE_CHANNEL_SECRET = ''
    LINE_GROUP_ID = 'Cgroup'
    SITE_BASE_URL = 'https://team.example.com'
    REPLICA_TOKEN = 'replica-secret'


# 환경별 설정 매핑
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}
