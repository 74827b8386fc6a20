"""
Firestore 클라이언트 생성

이 앱은 두 개의 Firestore 인스턴스를 사용합니다.
- 기본 스토어: 이 프로젝트의 Firestore
- 리플리카 원본: 다른 Firebase 프로젝트의 Firestore
  (미리 IAM에서 이 서비스 계정에 읽기 권한을 부여해야 함)
"""

from google.cloud import firestore


SCHEDULES_COLLECTION = 'schedules'
SETTINGS_COLLECTION = 'settings'


def create_firestore_client(project=None):
    """
    기본 Firestore 클라이언트 생성

    Args:
        project (str, optional): 프로젝트 ID (None이면 ADC의 프로젝트)

    Returns:
        google.cloud.firestore.Client
    """
    return firestore.Client(project=project)


def create_replica_source_client(project_id):
    """
    리플리카 원본 프로젝트의 Firestore 클라이언트 생성

    Args:
        project_id (str): ANOTHER_FIREBASE_PROJECT_ID

    Raises:
        RuntimeError: 프로젝트 ID가 설정되지 않은 경우
    """
    if not project_id:
        raise RuntimeError(
            "리플리카 원본 프로젝트 ID(ANOTHER_FIREBASE_PROJECT_ID)가 설정되지 않았습니다."
        )
    return firestore.Client(project=project_id)
