import pytest

from ip_registration.errors import UnauthorizedError
from ip_registration.events import EventLog, MetadataChanged, Transfer, WorkCreated
from ip_registration.factory import DEFAULT_SUPPLY, WorkFactory
from ip_registration.work import only_ledger

from .conftest import CALLER, LEDGER


@pytest.fixture
def factory(event_log):
    return WorkFactory(event_log=event_log)


def test_create_work_binds_two_new_tokens(factory):
    work = factory.create_work(LEDGER, "ipfs://abc", "h1")
    tokens = factory.get_tokens(work.token_id)

    assert len(tokens) == 2
    assert work.get_royalty_rights_tokens() == [t.address for t in tokens]
    assert [t.name for t in tokens] == ["Composition Rights #0", "Recording Rights #0"]
    assert all(t.balance_of(LEDGER) == DEFAULT_SUPPLY for t in tokens)
    assert work.get_ledger() == LEDGER
    assert work.get_metadata_uri() == "ipfs://abc"


def test_each_call_creates_distinct_work_and_tokens(factory):
    first = factory.create_work(LEDGER, "ipfs://abc", "h1")
    second = factory.create_work(LEDGER, "ipfs://def", "h2")

    assert (first.token_id, second.token_id) == (0, 1)
    assert first.address != second.address
    assert not set(first.get_royalty_rights_tokens()) & set(second.get_royalty_rights_tokens())
    assert factory.get_work(1) is second
    assert len(factory) == 2
    assert factory.works() == [first, second]


def test_shared_event_log(factory, event_log):
    work = factory.create_work(LEDGER, "ipfs://abc", "h1")
    work.change_metadata_uri("ipfs://def", "h2", CALLER)

    assert len(event_log.events(Transfer)) == 2
    assert len(event_log.events(WorkCreated)) == 1
    assert event_log.events(MetadataChanged, work.address) == [
        MetadataChanged(CALLER, "ipfs://abc", "h1", "ipfs://def", "h2")
    ]


def test_custom_categories_and_supply(factory):
    work = factory.create_work(LEDGER, "ipfs://abc", "h1", ("Lyrics", "Melody", "Master"), supply=7)
    tokens = factory.get_tokens(work.token_id)

    assert len(work.get_royalty_rights_tokens()) == 3
    assert [t.total_supply() for t in tokens] == [7, 7, 7]


def test_duplicate_categories_rejected(factory):
    with pytest.raises(ValueError):
        factory.create_work(LEDGER, "ipfs://abc", "h1", ("Master", "Master"))
    assert len(factory) == 0


def test_authorizer_applies_to_created_works():
    factory = WorkFactory(event_log=EventLog(), authorizer=only_ledger)
    work = factory.create_work(LEDGER, "ipfs://abc", "h1")

    with pytest.raises(UnauthorizedError):
        work.change_metadata_uri("ipfs://def", "h2", CALLER)


def test_unknown_work(factory):
    with pytest.raises(KeyError):
        factory.get_work(3)


def test_factory_addresses_are_deterministic():
    first = WorkFactory(event_log=EventLog(), deployer=LEDGER)
    second = WorkFactory(event_log=EventLog(), deployer=LEDGER)

    assert first.address == second.address
    assert first.create_work(LEDGER, "ipfs://abc", "h1").address == \
        second.create_work(LEDGER, "ipfs://abc", "h1").address


def test_factories_sharing_a_log_keep_histories_apart(event_log):
    first = WorkFactory(event_log=event_log)
    second = WorkFactory(event_log=event_log)
    a = first.create_work(LEDGER, "ipfs://a", "ha")
    b = second.create_work(LEDGER, "ipfs://b", "hb")
    b.change_metadata_uri("ipfs://c", "hc", CALLER)

    assert first.address != second.address
    assert a.token_id == b.token_id == 0
    assert a.metadata_history() == [("ipfs://a", "ha")]
    assert b.metadata_history() == [("ipfs://b", "hb"), ("ipfs://c", "hc")]
