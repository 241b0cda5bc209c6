import pytest

from ip_registration.contracts import WorkFactoryContract, WorkRegistrationContract
from ip_registration.events import MetadataChanged, WorkCreated

from .conftest import CALLER, LEDGER, TOKEN_1, TOKEN_2


@pytest.fixture
def contract():
    return WorkRegistrationContract()


def test_constructor_params(contract):
    params = contract.encode_constructor_params(LEDGER, "ipfs://abc", "h1", TOKEN_1, TOKEN_2)
    assert params == {
        "_ledger": LEDGER,
        "_metadataURI": "ipfs://abc",
        "_fileHash": "h1",
        "_royaltyToken1": TOKEN_1,
        "_royaltyToken2": TOKEN_2,
    }


@pytest.mark.parametrize("args", [
    (LEDGER, "", "h1", TOKEN_1, TOKEN_2),
    (LEDGER, "ipfs://abc", "", TOKEN_1, TOKEN_2),
    ("0x1234", "ipfs://abc", "h1", TOKEN_1, TOKEN_2),
    (LEDGER, "ipfs://abc", "h1", TOKEN_1, TOKEN_1),
])
def test_constructor_validation(contract, args):
    with pytest.raises(ValueError):
        contract.encode_constructor_params(*args)


def test_deployment_data(contract):
    data = contract.get_deployment_data(LEDGER, "ipfs://abc", "h1", TOKEN_1, TOKEN_2)
    assert data["contract_name"] == "WorkRegistration"
    assert data["bytecode"] == "0x"
    assert data["abi"] == contract.abi
    assert data["constructor_args"]["_ledger"] == LEDGER


def test_prepare_change_metadata_uri(contract):
    tx = contract.prepare_change_metadata_uri("ipfs://def", "h2", CALLER)
    assert tx["function"] == "changeMetadataURI"
    assert tx["args"] == ("ipfs://def", "h2")
    assert tx["transaction"] == {"from": CALLER}
    assert [inp["type"] for inp in tx["abi"]["inputs"]] == ["string", "string"]


def test_prepare_transaction_errors(contract):
    with pytest.raises(ValueError, match="not found"):
        contract.prepare_transaction("mint", LEDGER, 1)
    with pytest.raises(ValueError, match="takes 2 arguments"):
        contract.prepare_transaction("changeMetadataURI", "ipfs://def")


def test_decode_metadata_changed(contract):
    event = contract.decode_metadata_changed({
        "changer": CALLER,
        "oldURI": "ipfs://abc",
        "oldFileHash": "h1",
        "newURI": "ipfs://def",
        "newFileHash": "h2",
    })
    assert event == MetadataChanged(CALLER, "ipfs://abc", "h1", "ipfs://def", "h2")


def test_decode_work_created(contract):
    event = contract.decode_work_created({
        "ledger": LEDGER,
        "metadataURI": "ipfs://abc",
        "fileHash": "h1",
        "royaltyRightsTokens": [TOKEN_1, TOKEN_2],
    }, token_id=4)
    assert event == WorkCreated(4, LEDGER, "ipfs://abc", "h1", (TOKEN_1, TOKEN_2))


def test_decode_event_missing_argument(contract):
    with pytest.raises(ValueError, match="missing arguments: newFileHash"):
        contract.decode_event("MetadataChanged", {
            "changer": CALLER,
            "oldURI": "ipfs://abc",
            "oldFileHash": "h1",
            "newURI": "ipfs://def",
        })


def test_decode_unknown_event(contract):
    with pytest.raises(ValueError, match="Event Approval not found"):
        contract.decode_event("Approval", {})


def test_deployment_gas(contract):
    assert contract.estimate_deployment_gas("ipfs://abc", "h1") == 1500000 + 12 * 1000


class TestFactoryContract:

    def test_prepare_create_work(self):
        tx = WorkFactoryContract().prepare_create_work("ipfs://abc", "h1", LEDGER)
        assert tx["function"] == "createWork"
        assert tx["args"] == ("ipfs://abc", "h1")
        assert tx["transaction"] == {"from": LEDGER}

    def test_prepare_create_work_requires_metadata(self):
        with pytest.raises(ValueError):
            WorkFactoryContract().prepare_create_work("", "h1", LEDGER)

    def test_decode_work_deployed(self):
        work = "0x" + "aa" * 20
        decoded = WorkFactoryContract().decode_work_deployed({
            "work": work,
            "royaltyToken1": TOKEN_1,
            "royaltyToken2": TOKEN_2,
        })
        assert decoded == {"work": work, "royalty_rights_tokens": [TOKEN_1, TOKEN_2]}

    def test_create_work_gas(self):
        assert WorkFactoryContract().estimate_create_work_gas("", "") == 3500000
