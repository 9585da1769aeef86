# channelstore/events.py
import asyncio
import collections
import inspect
import logging
from typing import Any, Callable

import sentry_sdk

logger = logging.getLogger(__name__)

EventCallback = Callable[..., Any]


class EventEmitter:
    def __init__(self) -> None:
        """
        Keep listeners per event name. Listeners are called inline; if one
        returns an awaitable it is scheduled on the running loop.
        """
        self._events: collections.defaultdict[str, list[EventCallback]] = (
            collections.defaultdict(list)
        )
        # Strong refs, the loop only keeps weak ones to pending tasks
        self._tasks: set[asyncio.Task] = set()

    def emit(self, event: str, *args: Any, **kwargs: Any) -> bool:
        """
        Fire every listener registered for `event`.

        Returns True if at least one listener was registered. A failing
        listener is logged and reported, it never reaches the emitter.
        """
        if event not in self._events:
            return False

        for cb in list(self._events[event]):
            try:
                result = cb(*args, **kwargs)
                if inspect.isawaitable(result):
                    task = asyncio.ensure_future(result)
                    self._tasks.add(task)
                    task.add_done_callback(self._task_done)
            except Exception as e:
                logger.error(f"Listener for {event} failed: {e}")
                sentry_sdk.capture_exception(e)

        return True

    def _task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        e = task.exception()
        if e is not None:
            logger.error(f"Async listener failed: {e}")
            sentry_sdk.capture_exception(e)

    def on(self, event: str, callback: EventCallback) -> "EventEmitter":
        """Run `callback` each time `event` is emitted."""
        self._events[event].append(callback)
        return self

    def off(self, event: str, callback: EventCallback) -> "EventEmitter":
        """Remove `callback` from the `event` register."""
        self._events[event].remove(callback)

        if not self._events[event]:
            del self._events[event]

        return self

    def once(self, event: str, callback: EventCallback) -> "EventEmitter":
        """Run `callback` only the first time `event` is emitted."""

        def callback_off(*args: Any, **kwargs: Any) -> Any:
            self.off(event, callback_off)
            return callback(*args, **kwargs)

        return self.on(event, callback_off)

    def listener_count(self, event: str) -> int:
        return len(self._events.get(event, ()))
