import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.pinger import PingReply, PingStatus, get_pinger


class FakePinger:
    def __init__(self, reply: PingReply | None = None, error: Exception | None = None) -> None:
        self.reply = reply or PingReply(PingStatus.SUCCESS, rtt_ms=12, address="192.0.2.10")
        self.error = error
        self.hosts: list[str] = []

    async def send(self, host: str) -> PingReply:
        self.hosts.append(host)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def fake_pinger():
    def install(**kwargs) -> FakePinger:
        pinger = FakePinger(**kwargs)
        app.dependency_overrides[get_pinger] = lambda: pinger
        return pinger

    return install
