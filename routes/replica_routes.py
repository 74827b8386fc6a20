"""
리플리카 라우트

- /replicaSchedules: 다른 프로젝트의 스케줄을 이 프로젝트로 복사
  (REPLICA_TOKEN 공유 시크릿으로 인증)
"""

from flask import Blueprint, current_app, request

from utils.logging_setup import log_api_call
from utils.replica import replicate_schedules, verify_replica_token
from utils.services import get_services

bp = Blueprint('replica', __name__)


@bp.route('/replicaSchedules', methods=['POST'])
def replica_schedules():
    """
    스케줄 리플리카 API

    토큰은 body의 token 또는 쿼리 스트링 ?token= 으로 전달합니다.

    Returns:
        {"deleted": int, "copied": int}
    """
    payload = request.get_json(silent=True) or {}
    token = payload.get('token') or request.args.get('token')
    log_api_call(current_app, 'replicaSchedules', None)

    verify_replica_token(token, current_app.config['REPLICA_TOKEN'])

    services = get_services()
    result = replicate_schedules(services.replica_source, services.db)

    current_app.logger.info(f"리플리카 완료: {result}")
    return result
