from web3 import Web3

from ip_registration.config import DEFAULT_RPC_URL, Settings, get_settings


def test_defaults():
    settings = get_settings()
    assert settings == Settings(DEFAULT_RPC_URL, None, None)


def test_from_env(monkeypatch):
    monkeypatch.setenv("IP_REGISTRATION_RPC_URL", "http://node:8545")
    monkeypatch.setenv("IP_REGISTRATION_CONTRACT_ADDRESS", "0x" + "11" * 20)
    monkeypatch.setenv("IP_REGISTRATION_ARTIFACTS_DIR", "/tmp/artifacts")

    settings = get_settings()
    assert settings.rpc_url == "http://node:8545"
    assert settings.contract_address == "0x" + "11" * 20
    assert settings.artifacts_dir == "/tmp/artifacts"


def test_empty_values_are_unset(monkeypatch):
    monkeypatch.setenv("IP_REGISTRATION_CONTRACT_ADDRESS", "")
    assert get_settings().contract_address is None


def test_web3_uses_http_provider():
    w3 = Settings(rpc_url="http://node:8545").web3()
    assert isinstance(w3.provider, Web3.HTTPProvider)
    assert w3.provider.endpoint_uri == "http://node:8545"
