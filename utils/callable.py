"""
callable 함수 프로토콜

요청: {"data": {...}}  /  응답: {"result": ...}
에러는 app.py의 FunctionError 핸들러가
{"error": {"status", "message", "details"}} 형식으로 바꿉니다.
"""

from functools import wraps

from flask import current_app, jsonify, request

from utils.auth import require_caller, resolve_caller
from utils.logging_setup import log_api_call
from utils.services import get_services


def callable_function(name, require_auth=True):
    """
    callable 핸들러 데코레이터

    핸들러는 (data, caller) 를 받아 JSON 직렬화 가능한 결과를 반환합니다.

    Args:
        name (str): 오퍼레이션 이름 (로그용)
        require_auth (bool): True면 인증되지 않은 호출을 PermissionDenied로 거부

    Example:
        >>> @bp.route('/addPayment', methods=['POST'])
        ... @callable_function('addPayment')
        ... def add_payment(data, caller):
        ...     return {"ok": True}
    """
    def decorator(func):
        @wraps(func)
        def wrapper():
            body = request.get_json(silent=True)
            data = body.get('data') if isinstance(body, dict) else None

            caller = resolve_caller(
                get_services().authenticator,
                request.headers.get('Authorization')
            )
            log_api_call(current_app, name, caller, data)

            if require_auth:
                require_caller(caller)

            return jsonify({"result": func(data, caller)})
        return wrapper
    return decorator
