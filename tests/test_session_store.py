import json

import pytest

from app.core.session_store import SessionStore
from conftest import OTHER_SHOP, REAL_SHOP, params_for

WINDOW = 12 * 60 * 60


@pytest.fixture
def store(tmp_path, clock):
    return SessionStore(tmp_path / "session.json", window_seconds=WINDOW, clock=clock)


def test_load_without_saved_session(store):
    assert store.load() is None


def test_saved_session_is_valid_until_window_ends(store, clock):
    params = params_for(REAL_SHOP)
    store.save(params)

    assert store.load() == params

    clock.advance(WINDOW - 0.001)
    assert store.load() == params


def test_session_expires_at_window_end(store, clock):
    store.save(params_for(REAL_SHOP))

    clock.advance(WINDOW)
    assert store.load() is None
    # lazy expiry removes the slot
    assert not store.path.exists()


def test_load_slot_returns_expiry(store, clock):
    expires_at = store.save(params_for(REAL_SHOP))

    assert store.load_slot() == (params_for(REAL_SHOP), expires_at)
    assert not store.is_expired(expires_at)

    clock.advance(WINDOW)
    assert store.is_expired(expires_at)
    assert store.load_slot() is None


def test_reading_does_not_extend_the_window(store, clock):
    store.save(params_for(REAL_SHOP))

    for _ in range(3):
        clock.advance(WINDOW / 4)
        assert store.load() is not None

    clock.advance(WINDOW / 4)
    assert store.load() is None


def test_save_overwrites_previous_session(store):
    store.save(params_for(REAL_SHOP))
    store.save(params_for(OTHER_SHOP))

    assert store.load() == params_for(OTHER_SHOP)

    raw = json.loads(store.path.read_text(encoding="utf-8"))
    assert list(raw) == ["jewellery_admin_session"]


def test_persisted_record_shape(store, clock):
    store.save(params_for(REAL_SHOP))

    slot = json.loads(store.path.read_text(encoding="utf-8"))["jewellery_admin_session"]
    assert slot["expiresAt"] == int(clock.now * 1000) + WINDOW * 1000
    assert slot["connectionParams"]["projectId"] == "real_project"
    assert slot["connectionParams"]["shopName"] == "Real Jewellers"
    assert "password" not in slot["connectionParams"]


def test_clear_is_idempotent(store):
    store.save(params_for(REAL_SHOP))

    store.clear()
    assert store.load() is None
    store.clear()
    assert store.load() is None


def test_corrupt_slot_is_treated_as_no_session(store):
    store.path.write_text("{not json", encoding="utf-8")
    assert store.load() is None

    store.path.write_text(json.dumps({"jewellery_admin_session": {"expiresAt": "soon"}}), encoding="utf-8")
    assert store.load() is None


def test_session_survives_a_new_store_instance(tmp_path, clock):
    path = tmp_path / "session.json"
    SessionStore(path, window_seconds=WINDOW, clock=clock).save(params_for(REAL_SHOP))

    reloaded = SessionStore(path, window_seconds=WINDOW, clock=clock)
    assert reloaded.load() == params_for(REAL_SHOP)
