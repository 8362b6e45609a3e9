"""Tests for deferred-value handling.

- Classification of the supported deferred kinds
- chain() on LazyCoroResult, asyncio.Future and coroutines
- Marshal persisting only after the inner value is available
"""

import asyncio

import pytest

from kungfu import LazyCoroResult, Ok, Error

from fieldcache import cache as C
from fieldcache import lift as L


def lazy_ok(value):
    async def run():
        return Ok(value)

    return LazyCoroResult(run)


def lazy_error(error):
    async def run():
        return Error(error)

    return LazyCoroResult(run)


class TestDeferredKind:
    def test_lazy(self):
        assert C.deferred_kind(lazy_ok(1)) is C.DeferredKind.LAZY

    @pytest.mark.asyncio
    async def test_future(self):
        fut = asyncio.get_running_loop().create_future()
        assert C.deferred_kind(fut) is C.DeferredKind.FUTURE
        fut.cancel()

    def test_coroutine(self):
        async def f():
            return 1

        coro = f()
        assert C.deferred_kind(coro) is C.DeferredKind.COROUTINE
        coro.close()

    @pytest.mark.parametrize("value", [None, 0, "x", {"a": 1}, [1], Ok(1)])
    def test_plain_values(self, value):
        assert C.deferred_kind(value) is None
        assert not C.is_deferred(value)

    def test_chain_rejects_plain_value(self):
        with pytest.raises(TypeError):
            C.chain(5, lambda v: None)


class TestChain:
    @pytest.mark.asyncio
    async def test_lazy_runs_continuation_on_ok(self):
        seen: list[int] = []

        chained = C.chain(lazy_ok(3), seen.append)

        assert isinstance(chained, LazyCoroResult)
        assert seen == []
        match await chained:
            case Ok(value):
                assert value == 3
            case _:
                pytest.fail("expected Ok")
        assert seen == [3]

    @pytest.mark.asyncio
    async def test_lazy_skips_continuation_on_error(self):
        seen: list[object] = []

        result = await C.chain(lazy_error("nope"), seen.append)

        match result:
            case Error(e):
                assert e == "nope"
            case _:
                pytest.fail("expected Error")
        assert seen == []

    @pytest.mark.asyncio
    async def test_future_runs_continuation_on_result(self):
        seen: list[str] = []
        fut = asyncio.get_running_loop().create_future()

        chained = C.chain(fut, seen.append)

        assert isinstance(chained, asyncio.Future)
        fut.set_result("done")
        assert await chained == "done"
        assert seen == ["done"]

    @pytest.mark.asyncio
    async def test_future_exception_skips_continuation(self):
        seen: list[object] = []
        fut = asyncio.get_running_loop().create_future()

        chained = C.chain(fut, seen.append)
        fut.set_exception(RuntimeError("lost"))

        with pytest.raises(RuntimeError, match="lost"):
            await chained
        assert seen == []

    @pytest.mark.asyncio
    async def test_coroutine_continuation_failure_surfaces(self):
        async def f():
            return 1

        def explode(value):
            raise ConnectionError("store down")

        with pytest.raises(ConnectionError):
            await C.chain(f(), explode)


class TestMarshalDeferred:
    @pytest.mark.asyncio
    async def test_lazy_persists_after_completion(self, context, store, peek):
        result = C.Marshal("user:42", context).read(None, lambda: lazy_ok({"name": "Ada"}))

        assert isinstance(result, LazyCoroResult)
        assert "user:42" not in store

        match await result:
            case Ok(value):
                assert value == {"name": "Ada"}
            case _:
                pytest.fail("expected Ok")
        assert peek("user:42") == {"name": "Ada"}
        assert store.writes[-1][2] == 300

    @pytest.mark.asyncio
    async def test_lazy_error_not_persisted(self, context, store):
        result = C.Marshal("k", context).write(None, lambda: lazy_error("boom"))

        match await result:
            case Error(e):
                assert e == "boom"
            case _:
                pytest.fail("expected Error")
        assert "k" not in store

    @pytest.mark.asyncio
    async def test_coroutine_resolver(self, context, store, peek):
        async def load():
            await asyncio.sleep(0)
            return {"name": "Grace"}

        result = C.Marshal("k", context).read({"expiry": 9}, load)

        assert C.is_deferred(result)
        assert await result == {"name": "Grace"}
        assert peek("k") == {"name": "Grace"}
        assert store.writes == [("k", {"name": "Grace"}, 9)]

    @pytest.mark.asyncio
    async def test_future_resolver(self, context, peek):
        fut = asyncio.get_running_loop().create_future()

        result = C.Marshal("k", context).read(None, lambda: fut)
        fut.set_result([1, 2])

        assert await result == [1, 2]
        assert peek("k") == [1, 2]

    @pytest.mark.asyncio
    async def test_hit_after_deferred_miss_is_plain(self, context):
        async def load():
            return "v"

        m = C.Marshal("k", context)
        assert await m.read(None, load) == "v"

        assert m.read(None, load) == "v"

    @pytest.mark.asyncio
    async def test_lift_lazy_failure_not_persisted(self, context, store):
        async def load():
            raise LookupError("missing user")

        result = await C.Marshal("k", context).read(None, L.lazy(load))

        match result:
            case Error(e):
                assert isinstance(e, LookupError)
            case _:
                pytest.fail("expected Error")
        assert "k" not in store

    @pytest.mark.asyncio
    async def test_lift_from_result(self, context, peek):
        result = await C.Marshal("k", context).read(None, lambda: L.from_result(Ok(4)))

        match result:
            case Ok(value):
                assert value == 4
            case _:
                pytest.fail("expected Ok")
        assert peek("k") == 4
