"""Unit tests – SingleFlight."""
from __future__ import annotations

import asyncio

import pytest

from kv_keystore.kernel.errors import TransportError
from kv_keystore.resilience import SingleFlight


class TestSingleCaller:
    def test_runs_fn_and_reports_not_shared(self) -> None:
        group: SingleFlight[int] = SingleFlight()

        async def fn() -> int:
            return 42

        assert asyncio.run(group.do("k", fn)) == (42, False)
        assert len(group) == 0

    def test_error_propagates_and_clears_entry(self) -> None:
        group: SingleFlight[int] = SingleFlight()

        async def fn() -> int:
            raise ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            asyncio.run(group.do("k", fn))
        assert not group.in_flight("k")


class TestConcurrentCallers:
    def test_joiners_share_one_execution(self) -> None:
        group: SingleFlight[str] = SingleFlight()
        calls = 0

        async def fn() -> str:
            nonlocal calls
            calls += 1
            await asyncio.sleep(0.01)
            return "result"

        async def run() -> list[tuple[str, bool]]:
            return await asyncio.gather(*(group.do("k", fn) for _ in range(10)))

        results = asyncio.run(run())
        assert calls == 1
        assert all(value == "result" for value, _ in results)
        assert sum(1 for _, shared in results if not shared) == 1

    def test_joiners_share_the_error(self) -> None:
        group: SingleFlight[str] = SingleFlight()
        calls = 0

        async def fn() -> str:
            nonlocal calls
            calls += 1
            await asyncio.sleep(0.01)
            raise RuntimeError("remote down")

        async def run() -> list[object]:
            return await asyncio.gather(*(group.do("k", fn) for _ in range(4)), return_exceptions=True)

        results = asyncio.run(run())
        assert calls == 1
        assert all(isinstance(r, RuntimeError) for r in results)

    def test_distinct_keys_run_independently(self) -> None:
        group: SingleFlight[str] = SingleFlight()
        seen: list[str] = []

        def make(key: str):
            async def fn() -> str:
                seen.append(key)
                await asyncio.sleep(0.01)
                return key
            return fn

        async def run() -> list[tuple[str, bool]]:
            return await asyncio.gather(group.do("a", make("a")), group.do("b", make("b")))

        assert asyncio.run(run()) == [("a", False), ("b", False)]
        assert sorted(seen) == ["a", "b"]

    def test_entry_removed_after_completion(self) -> None:
        group: SingleFlight[int] = SingleFlight()
        calls = 0

        async def fn() -> int:
            nonlocal calls
            calls += 1
            return calls

        async def run() -> tuple[tuple[int, bool], tuple[int, bool]]:
            first = await group.do("k", fn)
            second = await group.do("k", fn)
            return first, second

        assert asyncio.run(run()) == ((1, False), (2, False))

    def test_in_flight_visible_while_running(self) -> None:
        group: SingleFlight[None] = SingleFlight()
        observed: list[bool] = []

        async def fn() -> None:
            observed.append(group.in_flight("k"))

        asyncio.run(group.do("k", fn))
        assert observed == [True]


class TestCancellation:
    def test_cancelled_joiner_does_not_cancel_owner(self) -> None:
        group: SingleFlight[str] = SingleFlight()

        async def fn() -> str:
            await asyncio.sleep(0.02)
            return "done"

        async def run() -> tuple[str, bool]:
            owner = asyncio.ensure_future(group.do("k", fn))
            await asyncio.sleep(0)
            joiner = asyncio.ensure_future(group.do("k", fn))
            await asyncio.sleep(0)
            joiner.cancel()
            with pytest.raises(asyncio.CancelledError):
                await joiner
            return await owner

        assert asyncio.run(run()) == ("done", False)

    def test_cancelled_owner_fails_joiners_with_transport_error(self) -> None:
        group: SingleFlight[str] = SingleFlight()

        async def fn() -> str:
            await asyncio.sleep(1)
            return "never"

        async def run() -> None:
            owner = asyncio.ensure_future(group.do("k", fn))
            await asyncio.sleep(0)
            joiner = asyncio.ensure_future(group.do("k", fn))
            await asyncio.sleep(0)
            owner.cancel()
            with pytest.raises(asyncio.CancelledError):
                await owner
            with pytest.raises(TransportError, match="cancelled"):
                await joiner
            assert not joiner.cancelled()
            assert not group.in_flight("k")

        asyncio.run(run())

    def test_owner_timeout_does_not_cancel_joiner(self) -> None:
        group: SingleFlight[str] = SingleFlight()

        async def fn() -> str:
            await asyncio.sleep(1)
            return "never"

        async def run() -> list[object]:
            owner = asyncio.ensure_future(asyncio.wait_for(group.do("k", fn), 0.02))
            while not group.in_flight("k"):
                await asyncio.sleep(0)
            joiner = asyncio.ensure_future(group.do("k", fn))
            return await asyncio.gather(owner, joiner, return_exceptions=True)

        owner_result, joiner_result = asyncio.run(run())
        assert isinstance(owner_result, asyncio.TimeoutError)
        assert isinstance(joiner_result, TransportError)
