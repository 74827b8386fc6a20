"""
Flask 메인 애플리케이션

팀 회계 장부(Google Sheets)와 스케줄 알림(LINE)을 처리하는 함수 서버입니다.
"""

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException
from config import config
from utils.errors import FunctionError
from utils.logging_setup import setup_logging
from utils.services import create_services
import os


def create_app(config_name=None, services=None):
    """
    Flask 앱 팩토리

    Args:
        config_name (str): 설정 이름 ('development', 'production', 'testing')
        services (Services, optional): 외부 서비스 (None이면 설정값으로 생성)

    Returns:
        Flask: 설정된 Flask 앱 객체
    """
    app = Flask(__name__)

    # 환경 설정 로드
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'default')

    # 설정 적용
    app.config.from_object(config[config_name])
    config[config_name].init_app(app)

    # 로깅 설정
    setup_logging(app)

    # 외부 서비스 클라이언트 (프로세스 수명 동안 유지)
    if services is None:
        services = create_services(app.config)
        app.logger.info("✅ External service clients created")
    app.extensions['services'] = services

    # 라우트 등록
    from routes import accounting_routes, schedule_routes, line_routes, replica_routes

    app.register_blueprint(accounting_routes.bp)
    app.register_blueprint(schedule_routes.bp)
    app.register_blueprint(line_routes.bp)
    app.register_blueprint(replica_routes.bp)

    app.logger.info("✅ All routes registered")

    # 헬스 체크 엔드포인트
    @app.route('/health')
    def health_check():
        """서버 상태 확인"""
        return {
            "status": "healthy",
            "service": "team-functions",
            "version": "1.0.0"
        }, 200

    @app.route('/helloWorld')
    def hello_world():
        """동작 확인용 엔드포인트"""
        app.logger.info("Hello logs!")
        return f"Hello {os.environ.get('TEST', '')} from Flask!"

    @app.errorhandler(FunctionError)
    def handle_function_error(e):
        """PermissionDenied / InvalidArgument → callable 에러 응답"""
        app.logger.warning(f"{e.status}: {e.message} | details={e.details}")
        return jsonify(e.to_dict()), e.http_status

    # 에러 핸들러
    @app.errorhandler(Exception)
    def handle_error(e):
        """
        전역 에러 핸들러

        예상하지 못한 백엔드 에러를 로그에 기록하고
        INTERNAL 에러로 응답합니다. 재시도는 하지 않습니다.
        """
        if isinstance(e, HTTPException):
            return e

        app.logger.error(f"Unhandled exception: {str(e)}", exc_info=True)
        return jsonify({
            "error": {
                "status": "INTERNAL",
                "message": "INTERNAL"
            }
        }), 500

    return app
