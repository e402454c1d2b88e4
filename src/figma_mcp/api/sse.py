"""Server-Sent Events stream used for capability announcement and keep-alive."""

import asyncio
from typing import AsyncIterator, Awaitable, Callable, Optional

from figma_mcp.core.logging import get_logger
from figma_mcp.protocol.envelope import JSONRPC_VERSION, format_sse_event

logger = get_logger(__name__)

INITIALIZED_EVENT = format_sse_event({"jsonrpc": JSONRPC_VERSION, "method": "initialized", "params": {}})
PING_EVENT = format_sse_event({"jsonrpc": JSONRPC_VERSION, "method": "ping"})

# Queued by close() to wake a reader blocked on the queue.
_STOP = ""

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
}


class KeepAliveSession:
    """One SSE connection and its keep-alive timer.

    The timer task exists only between the first event and ``close()``.
    ``close()`` is safe to call more than once and from any exit path.
    """

    def __init__(
        self,
        interval: float = 30.0,
        is_disconnected: Optional[Callable[[], Awaitable[bool]]] = None,
    ):
        self.interval = interval
        self._is_disconnected = is_disconnected
        self._queue: asyncio.Queue[str] = asyncio.Queue()
        self._timer: Optional[asyncio.Task] = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def timer(self) -> Optional[asyncio.Task]:
        return self._timer

    async def _tick(self) -> None:
        while not self._closed:
            await asyncio.sleep(self.interval)
            if not self._closed:
                self._queue.put_nowait(PING_EVENT)

    def close(self) -> None:
        """Cancel the timer and stop the stream."""
        if self._closed:
            return
        self._closed = True
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        self._queue.put_nowait(_STOP)
        logger.info("SSE stream closed")

    async def events(self) -> AsyncIterator[str]:
        """Yield the ``initialized`` event, then a ``ping`` every interval."""
        logger.info("SSE stream opened", interval=self.interval)
        try:
            yield INITIALIZED_EVENT
            self._timer = asyncio.create_task(self._tick())
            while not self._closed:
                event = await self._queue.get()
                if event == _STOP or self._closed:
                    break
                if self._is_disconnected is not None and await self._is_disconnected():
                    logger.debug("SSE client disconnected")
                    break
                yield event
        except (asyncio.CancelledError, GeneratorExit):
            # Client went away mid-write or the server aborted the response.
            logger.debug("SSE stream cancelled")
            raise
        finally:
            self.close()
