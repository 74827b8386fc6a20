"""
로그 로테이션 및 레벨 설정

이 모듈은 Flask 앱의 로깅을 설정하며,
개발/프로덕션 환경에 따라 자동으로 로그 레벨을 전환합니다.
"""

import os
import logging
from logging.handlers import RotatingFileHandler


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(app):
    """
    Flask 앱 로깅 설정

    Args:
        app (Flask): Flask 앱 객체

    Note:
        - 개발 환경 (DEBUG=True): DEBUG 레벨
        - 그 외: INFO 레벨
        - 로그 로테이션: 10MB × 5개 백업 (LOG_FILE이 비어 있으면 파일 로깅 안 함)
        - utils 모듈의 로거(logging.getLogger(__name__))도 같은 핸들러로 기록됨

    Example:
        >>> from flask import Flask
        >>> app = Flask(__name__)
        >>> setup_logging(app)
        >>> app.logger.info("addPayment called")  # INFO 레벨 기록
    """
    if app.config.get('DEBUG'):
        log_level = logging.DEBUG
        app.logger.info("🔧 Development mode: DEBUG logging enabled")
    else:
        log_level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    app.logger.setLevel(log_level)

    log_file = app.config.get('LOG_FILE')
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        # 10MB 초과 시 자동으로 app.log.1, app.log.2... 생성
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        file_handler.setLevel(log_level)
        root_logger.addHandler(file_handler)

    app.logger.info('=' * 50)
    app.logger.info('Team Functions Starting')
    app.logger.info(f'Log level: {logging.getLevelName(log_level)}')
    app.logger.info(f'Log file: {log_file or "(disabled)"}')
    app.logger.info('=' * 50)


def log_api_call(app, endpoint, caller, params=None):
    """
    API 호출 로그 기록 (감사 로그)

    Args:
        app (Flask): Flask 앱 객체
        endpoint (str): 오퍼레이션 이름 (예: "addPayment")
        caller (CallerIdentity or None): 호출자
        params (dict, optional): 추가 파라미터

    Example:
        >>> log_api_call(app, "addPayment", caller, {"paidDate": "2024/04/01"})
        # 로그: INFO - API Call: addPayment | User: uid123 | Params: {...}
    """
    user = caller.uid if caller is not None else 'anonymous'
    log_msg = f"API Call: {endpoint} | User: {user}"
    if params:
        log_msg += f" | Params: {params}"
    app.logger.info(log_msg)
