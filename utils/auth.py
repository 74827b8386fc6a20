"""
호출자 인증

callable 요청의 Authorization: Bearer <Firebase ID 토큰> 헤더를 검증하여
CallerIdentity를 만듭니다. 인증이 필요한 핸들러는 require_caller()로
호출자 유무를 확인합니다.
"""

import logging

import google.auth.transport.requests
from google.oauth2 import id_token

from models import CallerIdentity
from utils.errors import PermissionDenied


logger = logging.getLogger(__name__)


class FirebaseAuthenticator:
    """
    Firebase ID 토큰 검증기

    Args:
        project_id (str, optional): 토큰의 audience로 기대하는 프로젝트 ID
    """

    def __init__(self, project_id=None):
        self.project_id = project_id
        self._request = google.auth.transport.requests.Request()

    def __call__(self, token):
        """
        토큰을 검증하여 CallerIdentity 반환

        Returns:
            CallerIdentity: 검증 성공 시
            None: 토큰이 잘못된 경우 (인증되지 않은 호출로 취급)
        """
        try:
            claims = id_token.verify_firebase_token(
                token, self._request, audience=self.project_id
            )
        except ValueError as e:
            logger.warning(f"ID 토큰 검증 실패: {e}")
            return None

        if not claims:
            return None
        return CallerIdentity(uid=claims.get('user_id') or claims.get('sub'), claims=claims)


def extract_bearer_token(authorization_header):
    """
    Authorization 헤더에서 토큰 추출

    Example:
        >>> extract_bearer_token("Bearer abc")
        'abc'
        >>> extract_bearer_token(None) is None
        True
    """
    if not authorization_header:
        return None
    scheme, _, token = authorization_header.partition(' ')
    if scheme.lower() != 'bearer' or not token.strip():
        return None
    return token.strip()


def resolve_caller(authenticator, authorization_header):
    """Authorization 헤더로부터 CallerIdentity (없으면 None)"""
    token = extract_bearer_token(authorization_header)
    if token is None:
        return None
    return authenticator(token)


def require_caller(caller):
    """
    인증된 호출자인지 확인

    Raises:
        PermissionDenied: 호출자가 없는 경우
    """
    if caller is None:
        raise PermissionDenied('Auth Error')
    return caller
