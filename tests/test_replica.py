"""스케줄 리플리카 테스트"""

from datetime import datetime, timezone

import pytest

from tests.fakes import FakeFirestore, schedule_data
from utils.errors import PermissionDenied
from utils.replica import MAX_BATCH_OPERATIONS, replicate_schedules, verify_replica_token


START = datetime(2024, 4, 6, 0, 0, tzinfo=timezone.utc)


def source_store():
    answered = schedule_data('練習', START)
    answered.update({
        "okMembers": ['m1', 'm2'],
        "ngMembers": ['m3'],
        "holdMembers": ['m4'],
        "createdBy": 'admin',
        "updatedBy": 'admin'
    })
    return FakeFirestore({"schedules": {
        "s1": answered,
        "s2": schedule_data('試合', START)
    }})


class TestReplicateSchedules:
    def test_deletes_then_copies(self):
        source = source_store()
        dest = FakeFirestore({"schedules": {
            "old1": schedule_data('古い', START),
            "s1": schedule_data('上書き前', START)
        }})

        result = replicate_schedules(source, dest)

        assert result == {"deleted": 2, "copied": 2}
        assert set(dest.data["schedules"]) == {"s1", "s2"}
        delete_commit, insert_commit = dest.commits
        assert {op for op, _ in delete_commit} == {'delete'}
        assert {op for op, _ in insert_commit} == {'set'}

    def test_resets_members_and_marks_provenance(self):
        dest = FakeFirestore()

        replicate_schedules(source_store(), dest)

        for doc in dest.data["schedules"].values():
            assert doc["okMembers"] == []
            assert doc["ngMembers"] == []
            assert doc["holdMembers"] == []
            assert doc["createdBy"] == 'replica'
            assert doc["updatedBy"] == 'replica'

        copied = dest.data["schedules"]["s1"]
        assert copied["title"] == '練習'
        assert copied["startTimestamp"] == START

    def test_source_untouched(self):
        source = source_store()

        replicate_schedules(source, FakeFirestore())

        assert source.data["schedules"]["s1"]["okMembers"] == ['m1', 'm2']
        assert source.commits == []

    def test_large_collections_are_chunked(self):
        docs = {f"s{i}": schedule_data(f"練習{i}", START) for i in range(MAX_BATCH_OPERATIONS + 1)}
        source = FakeFirestore({"schedules": docs})
        dest = FakeFirestore()

        result = replicate_schedules(source, dest)

        assert result["copied"] == MAX_BATCH_OPERATIONS + 1
        assert [len(commit) for commit in dest.commits] == [MAX_BATCH_OPERATIONS, 1]


class TestVerifyReplicaToken:
    def test_match(self):
        verify_replica_token('secret', 'secret')

    @pytest.mark.parametrize('token', ['wrong', '', None, 'トークン'])
    def test_mismatch(self, token):
        with pytest.raises(PermissionDenied):
            verify_replica_token(token, 'secret')

    def test_unconfigured_secret_rejects_everything(self):
        with pytest.raises(PermissionDenied):
            verify_replica_token('', '')


class TestReplicaRoute:
    def test_wrong_token(self, client, services):
        services.db.data["schedules"] = {"keep": schedule_data('残す', START)}

        response = client.post('/replicaSchedules', json={"token": "wrong"})

        assert response.status_code == 403
        assert response.get_json()["error"]["status"] == 'PERMISSION_DENIED'
        assert "keep" in services.db.data["schedules"]

    def test_non_ascii_token(self, client, services):
        services.db.data["schedules"] = {"keep": schedule_data('残す', START)}

        response = client.post('/replicaSchedules', json={"token": "トークン"})

        assert response.status_code == 403
        assert response.get_json()["error"]["details"] == {"token": "トークン"}
        assert "keep" in services.db.data["schedules"]

    def test_replicates(self, client, services):
        services.replica_source.data["schedules"] = {"s1": schedule_data('練習', START)}
        services.db.data["schedules"] = {"old": schedule_data('古い', START)}

        response = client.post('/replicaSchedules?token=replica-secret')

        assert response.status_code == 200
        assert response.get_json() == {"deleted": 1, "copied": 1}
        assert list(services.db.data["schedules"]) == ["s1"]
