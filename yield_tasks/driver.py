"""
Drive a generator of deferred values to completion, one await at a time.

This is what generator-based coroutines did before async/await, and what
`co` (https://www.npmjs.com/package/co) does with promises:

    def routine():
        a = yield asyncio.sleep(0.1, result=5)
        b = yield 6
        return a + b

    run(routine)  # 11

https://snarky.ca/how-the-heck-does-async-await-work-in-python-3-5/
"""

import asyncio
import concurrent.futures
import inspect
from typing import Any, Callable, Generator, Optional

from .logging import get_logger

StepRoutine = Callable[[], Generator[Any, Any, Any]]


def as_future(value: Any) -> asyncio.Future:
    """
    Awaitables get scheduled on the running loop, thread-pool futures are
    wrapped, and anything else becomes an already-resolved future.
    """
    if isinstance(value, concurrent.futures.Future):
        return asyncio.wrap_future(value)
    if inspect.isawaitable(value):
        return asyncio.ensure_future(value)
    future = asyncio.get_running_loop().create_future()
    future.set_result(value)
    return future


class Step:
    """
    Wrapper around a step routine's generator. Every time the deferred value
    it last yielded settles, the value is sent back in and the generator runs
    to its next yield. The outcome of the whole routine lands in `result`.

    Only one deferred value is ever outstanding: the next step is not started
    until the done-callback of the current one fires.
    """

    def __init__(self, gen: Generator, result: asyncio.Future):
        self.gen = gen
        self.result = result
        self.pending: Optional[asyncio.Future] = None
        self.steps = 0
        self.log = get_logger("driver")

    def start(self):
        self.log.debug("starting %s", self.gen)
        self.advance(None)

    def advance(self, value: Any):
        if self.result.done():
            # Result was cancelled by the caller, stop here
            self.gen.close()
            return

        try:
            deferred = self.gen.send(value)
        except StopIteration as exc:
            self.log.debug("%s done after %d step(s)", self.gen, self.steps)
            self.result.set_result(exc.value)
            return
        except asyncio.CancelledError:
            self.result.cancel()
            return
        except Exception as exc:
            self.log.debug("%s raised %r", self.gen, exc)
            self.result.set_exception(exc)
            return

        self.steps += 1
        self.pending = as_future(deferred)
        self.log.debug("%s awaiting step %d: %r", self.gen, self.steps, self.pending)
        self.pending.add_done_callback(self.resume)

    def resume(self, future: asyncio.Future):
        self.pending = None
        if self.result.done():
            self.gen.close()
            return

        if future.cancelled():
            self.log.debug("%s step %d was cancelled", self.gen, self.steps)
            self.result.cancel()
            self.gen.close()
            return

        exc = future.exception()
        if exc is not None:
            self.log.debug("%s step %d failed with %r", self.gen, self.steps, exc)
            self.result.set_exception(exc)
            # No further steps; only the routine's cleanup code runs
            self.gen.close()
            return

        self.advance(future.result())


def run_async(routine: StepRoutine) -> asyncio.Future:
    """
    Start `routine` (a generator function) on the running loop and return a
    future for its return value. Must be called from inside a coroutine or
    callback.
    """
    loop = asyncio.get_running_loop()
    gen = routine()
    if not inspect.isgenerator(gen):
        raise TypeError(f"Step routine must return a generator, got {type(gen).__name__}")

    result = loop.create_future()
    Step(gen, result).start()
    return result


def run(routine: StepRoutine) -> Any:
    """Blocking version of `run_async`, on a fresh event loop."""

    async def main():
        return await run_async(routine)

    return asyncio.run(main())


if __name__ == "__main__":

    def add():
        a = yield asyncio.sleep(0.5, result=5)
        print("got", a)
        b = yield 6
        print("got", b)
        return a + b

    print(run(add))
