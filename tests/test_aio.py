"""Tests for bounded-concurrency async iteration."""

import asyncio
import pytest
from seqkit import (
    AsyncOptions,
    for_each_async,
    map_async,
    sum_async,
    product_async,
    wait_until,
)


class Tracker:
    """Counts callbacks in flight and remembers the high-water mark."""

    def __init__(self):
        self.active = 0
        self.peak = 0
        self.started: list[int] = []

    async def __call__(self, delay: float, index: int, seq) -> float:
        self.started.append(index)
        self.active += 1
        self.peak = max(self.peak, self.active)
        try:
            await asyncio.sleep(delay)
        finally:
            self.active -= 1
        return delay


class TestForEachAsync:
    @pytest.mark.asyncio
    async def test_empty(self):
        tracker = Tracker()
        await for_each_async([], tracker)
        assert tracker.started == []

    @pytest.mark.asyncio
    async def test_unbounded_runs_together(self):
        loop = asyncio.get_running_loop()
        tracker = Tracker()
        start = loop.time()
        await for_each_async([0.01, 0.02, 0.06, 0.03], tracker)
        elapsed = loop.time() - start
        assert tracker.peak == 4
        assert 0.05 <= elapsed < 0.15

    @pytest.mark.asyncio
    async def test_bounded_waves(self):
        loop = asyncio.get_running_loop()
        tracker = Tracker()
        start = loop.time()
        await for_each_async([0.02, 0.03, 0.08, 0.06], tracker, AsyncOptions(max_concurrency=2))
        elapsed = loop.time() - start
        # workers run 0.02 + 0.08 and 0.03 + 0.06
        assert 0.09 <= elapsed < 0.2
        assert tracker.peak == 2

    @pytest.mark.asyncio
    async def test_never_exceeds_limit(self):
        tracker = Tracker()
        delays = [0.001 * (i % 7) for i in range(40)]
        await for_each_async(delays, tracker, AsyncOptions(max_concurrency=3))
        assert tracker.peak <= 3
        assert sorted(tracker.started) == list(range(40))

    @pytest.mark.asyncio
    async def test_dispatch_order_is_monotonic(self):
        tracker = Tracker()
        await for_each_async([0.005, 0.001, 0.003, 0.002, 0.004], tracker, AsyncOptions(max_concurrency=2))
        assert tracker.started == [0, 1, 2, 3, 4]

    @pytest.mark.asyncio
    async def test_limit_at_least_length_is_unbounded(self):
        tracker = Tracker()
        await for_each_async([0.01] * 3, tracker, AsyncOptions(max_concurrency=5))
        assert tracker.peak == 3

    @pytest.mark.asyncio
    async def test_zero_limit_is_unbounded(self):
        tracker = Tracker()
        await for_each_async([0.01] * 6, tracker, AsyncOptions(max_concurrency=0))
        assert tracker.peak == 6

    @pytest.mark.asyncio
    async def test_sequence_not_mutated(self):
        items = [0.001, 0.002, 0.003]
        await for_each_async(items, Tracker(), AsyncOptions(max_concurrency=1))
        assert items == [0.001, 0.002, 0.003]

    @pytest.mark.asyncio
    async def test_failure_propagates(self):
        async def fail_on_two(value, index, seq):
            await asyncio.sleep(0.001)
            if value == 2:
                raise KeyError(value)

        with pytest.raises(KeyError):
            await for_each_async([1, 2, 3], fail_on_two)
        await asyncio.sleep(0.01)

    @pytest.mark.asyncio
    async def test_failure_stops_dispatch(self):
        started = []

        async def fail_first(value, index, seq):
            started.append(index)
            await asyncio.sleep(0.001)
            if index == 0:
                raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            await for_each_async(list(range(10)), fail_first, AsyncOptions(max_concurrency=1))
        await asyncio.sleep(0.01)
        assert started == [0]


class TestMapAsync:
    @pytest.mark.asyncio
    async def test_preserves_order(self):
        delays = [0.03, 0.01, 0.05, 0.005]

        async def double(delay, index, seq):
            await asyncio.sleep(delay)
            return delay * 2

        expected = [d * 2 for d in delays]
        assert await map_async(delays, double) == expected
        assert await map_async(delays, double, AsyncOptions(max_concurrency=2)) == expected

    @pytest.mark.asyncio
    async def test_passes_index_and_sequence(self):
        async def describe(value, index, seq):
            return (value, index, len(seq))

        assert await map_async(["a", "b"], describe) == [("a", 0, 2), ("b", 1, 2)]

    @pytest.mark.asyncio
    async def test_empty(self):
        async def identity(value, index, seq):
            return value

        assert await map_async([], identity) == []

    @pytest.mark.asyncio
    async def test_failure_propagates(self):
        async def reject(value, index, seq):
            raise ValueError(f"bad {value}")

        with pytest.raises(ValueError, match="bad"):
            await map_async([1, 2, 3], reject, AsyncOptions(max_concurrency=2))


class TestAsyncFolds:
    @pytest.mark.asyncio
    async def test_sum(self):
        async def slow(n):
            await asyncio.sleep(0.001)
            return n

        assert await sum_async([0, 1, 2, 3, 4], slow) == 10

    @pytest.mark.asyncio
    async def test_product(self):
        async def slow(n):
            await asyncio.sleep(0.001)
            return n

        assert await product_async([1, 2, 3, 4], slow, AsyncOptions(max_concurrency=2)) == 24


class TestWaitUntil:
    @pytest.mark.asyncio
    async def test_already_true(self):
        assert await wait_until(lambda: True, 0.01)

    @pytest.mark.asyncio
    async def test_becomes_true(self):
        flag = False

        async def flip():
            nonlocal flag
            await asyncio.sleep(0.03)
            flag = True

        task = asyncio.create_task(flip())
        assert await wait_until(lambda: flag, 0.005)
        await task

    @pytest.mark.asyncio
    async def test_timeout(self):
        flag = False

        async def flip():
            nonlocal flag
            await asyncio.sleep(0.1)
            flag = True

        task = asyncio.create_task(flip())
        assert not await wait_until(lambda: flag, 0.005, 0.02)
        assert not flag
        await task

    @pytest.mark.asyncio
    async def test_async_predicate_with_args(self):
        loop = asyncio.get_running_loop()
        start = loop.time()

        async def past(deadline):
            return loop.time() - start > deadline

        assert await wait_until(past, 0.005, 0, 0.02)

    @pytest.mark.asyncio
    async def test_async_predicate_pending_at_deadline(self):
        async def never():
            await asyncio.sleep(1)
            return True

        assert not await wait_until(never, 0.005, 0.02)
