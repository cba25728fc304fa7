import time

from planwizard.run_utils import state


def test_idle_sessions_expire_on_create(monkeypatch):
    monkeypatch.setattr(state, "SESSION_TTL_SECONDS", 60)
    old_id, old = state.create_session()
    old.touched_at = time.monotonic() - 120

    new_id, _ = state.create_session()

    assert old_id not in state.SESSIONS
    assert new_id in state.SESSIONS


def test_reading_a_session_keeps_it_alive(monkeypatch):
    monkeypatch.setattr(state, "SESSION_TTL_SECONDS", 60)
    sid, session = state.create_session()
    session.touched_at = time.monotonic() - 120

    assert state.get_session(sid) is session
    state.create_session()

    assert sid in state.SESSIONS


def test_session_count_is_capped(monkeypatch):
    monkeypatch.setattr(state, "MAX_SESSIONS", 3)
    ids = []
    for age in (50, 40, 30, 20, 10):
        sid, session = state.create_session()
        session.touched_at = time.monotonic() - age
        ids.append(sid)

    assert len(state.SESSIONS) == 3
    assert list(state.SESSIONS) == ids[2:]


def test_prune_reports_removed_count(monkeypatch):
    monkeypatch.setattr(state, "SESSION_TTL_SECONDS", 60)
    _, a = state.create_session()
    _, b = state.create_session()
    a.touched_at = b.touched_at = 0.0

    assert state.prune_sessions(now=1000.0) == 2
    assert state.SESSIONS == {}
