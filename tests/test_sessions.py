import threading
from datetime import datetime

from tarot_engine.tarot_core import Reading


def _reading(rid):
    return Reading(id=rid, spread_type="single_card", question="", cards=(), interpretation="", timestamp=datetime.now())


def test_create_and_append(store):
    sid = store.create_session()
    assert store.get_history(sid) == []
    store.append_reading(sid, _reading("r1"))
    store.append_reading(sid, _reading("r2"))
    assert [r.id for r in store.get_history(sid)] == ["r1", "r2"]


def test_append_opens_unknown_session(store):
    assert store.get_history("abc") is None
    store.append_reading("abc", _reading("r1"))
    assert len(store.get_history("abc")) == 1


def test_history_is_a_snapshot(store):
    store.append_reading("abc", _reading("r1"))
    history = store.get_history("abc")
    history.append(_reading("r2"))
    assert len(store.get_history("abc")) == 1


def test_concurrent_appends(store):
    def worker(n):
        for i in range(50):
            store.append_reading("shared", _reading(f"{n}-{i}"))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(store.get_history("shared")) == 400


def test_sessions_do_not_share_history(store):
    first = store.create_session()
    second = store.create_session()
    store.append_reading(first, _reading("r1"))
    assert store.get_history(second) == []
    assert store._sessions[first].created <= store._sessions[second].created
