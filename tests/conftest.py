"""공통 fixture — fake 서비스를 주입한 Flask 테스트 클라이언트"""

import pytest

from app import create_app
from tests.fakes import LEDGER_HEADER, FakeFirestore, FakeLine, FakeSheets, fake_authenticator
from utils.services import Services


@pytest.fixture
def services():
    return Services(
        sheets=FakeSheets([LEDGER_HEADER]),
        db=FakeFirestore(),
        line=FakeLine(),
        notice_line=FakeLine(),
        authenticator=fake_authenticator,
        replica_source=FakeFirestore()
    )


@pytest.fixture
def app(services):
    return create_app('testing', services=services)


@pytest.fixture
def client(app):
    return app.test_client()
