# tests/test_session.py

from core.session import PatronSession, LOGGED_OUT_CARD
from api.session_store import SessionStore

def test_new_session_is_logged_out():
    session = PatronSession()
    assert session.name == ""
    assert session.card_num == LOGGED_OUT_CARD
    assert not session.logged_in

def test_login_and_clear():
    session = PatronSession()
    session.login("Alice", 7)
    assert session.logged_in
    assert (session.name, session.card_num) == ("Alice", 7)

    session.clear()
    assert not session.logged_in
    assert session.name == ""

def test_store_issues_distinct_sessions():
    store = SessionStore()
    session_a, session_b = PatronSession(), PatronSession()
    token_a = store.add(session_a)
    token_b = store.add(session_b)

    assert token_a != token_b
    assert store.get(token_a) is session_a
    assert store.get(token_b) is session_b
    assert len(store) == 2

    session_a.login("Alice", 7)
    assert not session_b.logged_in

def test_store_unknown_and_discarded_tokens():
    store = SessionStore()
    token = store.add(PatronSession())
    assert store.get("not-a-token") is None

    store.discard(token)
    store.discard(token)
    assert store.get(token) is None
    assert len(store) == 0
