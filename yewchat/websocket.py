"""Connection to the chat server."""

from __future__ import annotations

import asyncio
import contextlib
import logging

import websockets
from websockets.exceptions import ConnectionClosed, ConnectionClosedError

from .event_bus import EventBus

log = logging.getLogger(__name__)

DEFAULT_URL = "ws://localhost:8080"
QUEUE_SIZE = 1000


def decode_frame(frame: str | bytes) -> str | None:
    """Return the text of a frame; None for binary data that is not UTF-8."""
    if isinstance(frame, str):
        return frame
    try:
        return bytes(frame).decode("utf-8")
    except UnicodeDecodeError:
        return None


class WebsocketService:
    """Queues outgoing text and relays incoming frames to an event bus."""

    def __init__(self, event_bus: EventBus, url: str = DEFAULT_URL) -> None:
        self.event_bus = event_bus
        self.url = url
        self._outgoing: asyncio.Queue[str] = asyncio.Queue(maxsize=QUEUE_SIZE)

    def send(self, text: str) -> None:
        """Queue *text* for the server; raises asyncio.QueueFull when the queue is full."""
        self._outgoing.put_nowait(text)

    async def run(self) -> None:
        """Connect and pump messages until the server closes the connection."""
        async with websockets.connect(self.url) as ws:
            writer = asyncio.create_task(self._write(ws))
            try:
                await self._read(ws)
            finally:
                writer.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await writer
        log.debug("WebSocket Closed")

    async def _write(self, ws) -> None:
        while True:
            text = await self._outgoing.get()
            log.debug("got event from channel! %s", text)
            try:
                await ws.send(text)
            except ConnectionClosed as exc:
                log.error("ws: %r", exc)
                return

    async def _read(self, ws) -> None:
        try:
            async for frame in ws:
                text = decode_frame(frame)
                if text is None:
                    continue
                log.debug("from websocket: %s", text)
                self.event_bus.publish(text)
        except ConnectionClosedError as exc:
            log.error("ws: %r", exc)