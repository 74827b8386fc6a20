"""
함수 호출 에러 정의

callable 프로토콜의 에러 형식
({"error": {"status", "message", "details"}})으로 변환되는 예외들입니다.
app.py의 에러 핸들러가 HTTP 응답으로 바꿔 줍니다.
"""


class FunctionError(Exception):
    """
    사용자에게 반환되는 에러의 기반 클래스

    Attributes:
        status (str): callable 에러 상태 코드 (예: "INVALID_ARGUMENT")
        http_status (int): HTTP 상태 코드
        message (str): 짧은 사용자용 메시지
        details: 진단용으로 되돌려주는 입력값
    """
    status = 'INTERNAL'
    http_status = 500

    def __init__(self, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self):
        error = {
            "status": self.status,
            "message": self.message
        }
        if self.details is not None:
            error["details"] = self.details
        return {"error": error}


class PermissionDenied(FunctionError):
    """인증 정보 없음, 리플리카 토큰 불일치 등"""
    status = 'PERMISSION_DENIED'
    http_status = 403


class InvalidArgument(FunctionError):
    """필수 항목 누락, 존재하지 않는 스케줄 ID 등"""
    status = 'INVALID_ARGUMENT'
    http_status = 400
