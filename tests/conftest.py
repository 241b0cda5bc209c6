import pytest

from ip_registration.events import EventLog
from ip_registration.work import Work

LEDGER = "0x" + "11" * 20
TOKEN_1 = "0x" + "22" * 20
TOKEN_2 = "0x" + "33" * 20
CALLER = "0x" + "44" * 20
OTHER = "0x" + "55" * 20


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "IP_REGISTRATION_RPC_URL",
        "IP_REGISTRATION_CONTRACT_ADDRESS",
        "IP_REGISTRATION_ARTIFACTS_DIR",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def event_log():
    return EventLog()


@pytest.fixture
def work(event_log):
    return Work(1, LEDGER, "ipfs://abc", "h1", [TOKEN_1, TOKEN_2], event_log=event_log)
