import pytest

from constants import CURRENT_USER_KEY
from exceptions import NotAuthenticatedError


def test_login_and_logout(session, user):
    assert session.current_user is None
    assert not session.is_authenticated

    session.login(user)
    assert session.current_user == user
    assert session.require_user().id == 1

    session.logout()
    assert session.current_user is None


def test_require_user_without_login(session):
    with pytest.raises(NotAuthenticatedError):
        session.require_user()


def test_corrupt_session_is_logged_out(kv_store, session):
    kv_store.set_item(CURRENT_USER_KEY, "not json")
    assert session.current_user is None

    kv_store.set_item(CURRENT_USER_KEY, '{"id": "x"}')
    assert session.current_user is None


def test_session_shares_store_with_new_instance(kv_store, session, user):
    from ledger.session import Session

    session.login(user)
    assert Session(kv_store).current_user == user


def test_undecodable_session_file_is_logged_out(tmp_path):
    from ledger.session import Session
    from ledger.storage import FileKeyValueStore

    store = FileKeyValueStore(str(tmp_path))
    (tmp_path / f"{CURRENT_USER_KEY}.json").write_bytes(b"\xff\xfe\x00garbage")

    session = Session(store)
    assert session.current_user is None
    assert not session.is_authenticated
    with pytest.raises(NotAuthenticatedError):
        session.require_user()
