import pytest

from ip_registration.artifacts import loader
from ip_registration.events import MetadataChanged, Transfer


def test_all_artifacts_present():
    assert loader.validate_artifacts() == {name: True for name in loader.CONTRACT_PATHS}


def test_unknown_contract():
    with pytest.raises(ValueError, match="Unknown contract"):
        loader.load_artifact("ERC1155")


def test_artifacts_dir_override(monkeypatch, tmp_path):
    monkeypatch.setenv("IP_REGISTRATION_ARTIFACTS_DIR", str(tmp_path))

    assert loader.get_artifacts_dir() == tmp_path
    with pytest.raises(FileNotFoundError):
        loader.load_artifact("WorkRegistration")
    assert not any(loader.validate_artifacts().values())


def test_interface_abi():
    names = {item["name"] for item in loader.get_abi("IWorkRegistration")}
    assert names == {
        "MetadataChanged",
        "changeMetadataURI",
        "getLedger",
        "getMetadataURI",
        "getRoyaltyRightsTokens",
    }


def test_no_bytecode_shipped():
    assert loader.get_bytecode("WorkRegistration") == "0x"
    assert loader.get_deployed_bytecode("WorkFactory") == "0x"


def test_contract_metadata():
    metadata = loader.get_contract_metadata("WorkRegistration")
    assert metadata["contractName"] == "WorkRegistration"
    assert metadata["events"] == ["MetadataChanged", "WorkCreated"]
    assert "changeMetadataURI" in metadata["functions"]


def test_function_selector():
    assert loader.get_function_selector("RoyaltyRightsToken", "transfer") == "0xa9059cbb"
    assert loader.get_function_selector("WorkRegistration", "supportsInterface") == "0x01ffc9a7"
    assert loader.get_function_selector("WorkRegistration", "burn") is None


def test_event_topics_match_event_types():
    assert loader.get_event_topic("WorkRegistration", "MetadataChanged") == MetadataChanged.topic()
    assert loader.get_event_topic("RoyaltyRightsToken", "Transfer") == Transfer.topic()
    assert loader.get_event_topic("WorkFactory", "Missing") is None


def test_list_available_contracts():
    assert loader.list_available_contracts() == [
        "WorkRegistration",
        "WorkFactory",
        "RoyaltyRightsToken",
        "IWorkRegistration",
    ]
