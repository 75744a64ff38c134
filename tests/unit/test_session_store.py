from __future__ import annotations

import asyncio

import pytest

from src.errors import SessionNotFoundError
from src.state import Session
from src.sessions import SessionStore

from tests.unit.fakes import EchoModel


async def _append(session: Session, prompt: str, *, pause_s: float = 0.0) -> int:
    response = session.handler.generate(prompt, tuple(session.context))
    if pause_s:
        await asyncio.sleep(pause_s)
    session.record_turn(prompt, response)
    return len(session.context)


@pytest.mark.asyncio
async def test_create_returns_distinct_ids() -> None:
    store = SessionStore()
    ids = await asyncio.gather(*(store.create("echo", EchoModel()) for _ in range(200)))
    assert len(set(ids)) == 200
    assert store.count() == 200


@pytest.mark.asyncio
async def test_new_session_has_empty_context() -> None:
    store = SessionStore()
    sid = await store.create("echo", EchoModel())
    snap = await store.snapshot(sid)
    assert snap.model == "echo"
    assert snap.context == ()


@pytest.mark.asyncio
async def test_get_and_apply_returns_mutator_result() -> None:
    store = SessionStore()
    sid = await store.create("echo", EchoModel())
    assert await store.get_and_apply(sid, lambda s: _append(s, "a")) == 2
    assert await store.get_and_apply(sid, lambda s: _append(s, "b")) == 4
    snap = await store.snapshot(sid)
    assert snap.context == ("a", "echo:a:0", "b", "echo:b:2")


@pytest.mark.asyncio
async def test_get_and_apply_unknown_id() -> None:
    store = SessionStore()
    with pytest.raises(SessionNotFoundError):
        await store.get_and_apply("missing", lambda s: _append(s, "a"))


@pytest.mark.asyncio
async def test_failed_mutator_leaves_context_untouched() -> None:
    store = SessionStore()
    sid = await store.create("echo", EchoModel())

    async def _fail(session: Session) -> None:
        raise RuntimeError("nope")

    with pytest.raises(RuntimeError):
        await store.get_and_apply(sid, _fail)
    assert (await store.snapshot(sid)).context == ()


@pytest.mark.asyncio
async def test_close_then_everything_is_not_found() -> None:
    store = SessionStore()
    sid = await store.create("echo", EchoModel())
    await store.close(sid)
    assert store.count() == 0
    with pytest.raises(SessionNotFoundError):
        await store.close(sid)
    with pytest.raises(SessionNotFoundError):
        await store.get_and_apply(sid, lambda s: _append(s, "a"))
    with pytest.raises(SessionNotFoundError):
        await store.snapshot(sid)


@pytest.mark.asyncio
async def test_same_session_mutations_do_not_interleave() -> None:
    store = SessionStore()
    sid = await store.create("echo", EchoModel())
    lengths = await asyncio.gather(
        *(store.get_and_apply(sid, lambda s, p=f"p{i}": _append(s, p, pause_s=0.005)) for i in range(10))
    )
    assert sorted(lengths) == list(range(2, 22, 2))

    context = (await store.snapshot(sid)).context
    assert len(context) == 20
    for i in range(0, 20, 2):
        prompt, response = context[i], context[i + 1]
        assert response == f"echo:{prompt}:{i}"


@pytest.mark.asyncio
async def test_close_waits_for_inflight_mutation() -> None:
    store = SessionStore()
    sid = await store.create("echo", EchoModel())
    started = asyncio.Event()

    async def _slow(session: Session) -> int:
        started.set()
        return await _append(session, "slow", pause_s=0.05)

    mutation = asyncio.create_task(store.get_and_apply(sid, _slow))
    await started.wait()
    await store.close(sid)

    assert await mutation == 2
    with pytest.raises(SessionNotFoundError):
        await store.get_and_apply(sid, lambda s: _append(s, "late"))


@pytest.mark.asyncio
async def test_distinct_sessions_do_not_share_context() -> None:
    store = SessionStore()
    ids = [await store.create("echo", EchoModel()) for _ in range(5)]

    await asyncio.gather(
        *(
            store.get_and_apply(sid, lambda s, p=f"{sid}-{turn}": _append(s, p, pause_s=0.001))
            for turn in range(4)
            for sid in ids
        )
    )

    for sid in ids:
        context = (await store.snapshot(sid)).context
        assert len(context) == 8
        assert all(prompt.startswith(sid) for prompt in context[0::2])
