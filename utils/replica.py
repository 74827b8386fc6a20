"""
스케줄 리플리카 작업

다른 프로젝트(원본)의 schedules 컬렉션을 이 프로젝트(대상)로 통째로 복사합니다.
1. 대상 컬렉션의 모든 문서 삭제 (batch)
2. 원본 문서를 같은 ID로 추가 (batch), 출결 응답 목록은 비움

삭제와 추가는 별도의 batch이므로 둘 사이에 원자성은 없습니다.
"""

import hmac
import logging

from utils.db import SCHEDULES_COLLECTION
from utils.errors import PermissionDenied


# Firestore write batch 최대 작업 수
MAX_BATCH_OPERATIONS = 500
REPLICA_MARKER = 'replica'
RESET_MEMBER_FIELDS = ('okMembers', 'ngMembers', 'holdMembers')

logger = logging.getLogger(__name__)


def verify_replica_token(token, expected_token):
    """
    공유 시크릿 토큰 검증

    Raises:
        PermissionDenied: 토큰이 없거나 일치하지 않는 경우
    """
    if not token or not expected_token or not hmac.compare_digest(
        str(token).encode('utf-8'), str(expected_token).encode('utf-8')
    ):
        raise PermissionDenied('トークンが一致しません。', details={"token": token})


def _chunks(items, size):
    for start in range(0, len(items), size):
        yield items[start:start + size]


def build_replica_document(data):
    """
    복사할 문서 데이터

    출결 응답 목록은 비우고, createdBy/updatedBy는 리플리카 표시로 바꿉니다.
    그 외 필드는 그대로 복사합니다.
    """
    replica = dict(data)
    for field in RESET_MEMBER_FIELDS:
        replica[field] = []
    replica['createdBy'] = REPLICA_MARKER
    replica['updatedBy'] = REPLICA_MARKER
    return replica


def replicate_schedules(source_db, dest_db):
    """
    원본 스케줄을 대상 스토어로 복사

    Args:
        source_db: 원본 Firestore 클라이언트 (다른 프로젝트)
        dest_db: 대상 Firestore 클라이언트 (이 프로젝트)

    Returns:
        dict: {"deleted": 삭제 건수, "copied": 복사 건수}
    """
    dest_collection = dest_db.collection(SCHEDULES_COLLECTION)

    existing = list(dest_collection.get())
    for chunk in _chunks(existing, MAX_BATCH_OPERATIONS):
        batch = dest_db.batch()
        for snapshot in chunk:
            batch.delete(snapshot.reference)
        batch.commit()
    logger.info(f"대상 스케줄 삭제 완료: {len(existing)}건")

    source_docs = list(source_db.collection(SCHEDULES_COLLECTION).get())
    for chunk in _chunks(source_docs, MAX_BATCH_OPERATIONS):
        batch = dest_db.batch()
        for snapshot in chunk:
            batch.set(
                dest_collection.document(snapshot.id),
                build_replica_document(snapshot.to_dict() or {})
            )
        batch.commit()
    logger.info(f"원본 스케줄 복사 완료: {len(source_docs)}건")

    return {
        "deleted": len(existing),
        "copied": len(source_docs)
    }
