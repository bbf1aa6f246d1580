"""
Session Transport - A single WebSocket channel to one target.

The handshake is bounded by a connect timeout and inbound messages by a size
cap; a message over the cap is rejected by websockets before it is buffered
and surfaces here as TransportError.
"""
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import websockets
from websockets.asyncio.client import ClientConnection, connect

from cdp_cookies.config import DEFAULT_CONNECT_TIMEOUT, DEFAULT_MAX_MESSAGE_SIZE
from cdp_cookies.core.errors import ConnectError, TransportError

logger = logging.getLogger("cdp_cookies")

# RFC 6455 close code for "message too big"
MESSAGE_TOO_BIG = 1009


def _closed_for_size(error: websockets.exceptions.ConnectionClosed) -> bool:
    for frame in (error.sent, error.rcvd):
        if frame is not None and frame.code == MESSAGE_TOO_BIG:
            return True
    return False


class Session:
    """An open WebSocket session to a target's debugger URL."""

    def __init__(self, url: str, ws: ClientConnection, max_message_size: int,
                 read_timeout: Optional[float] = None):
        self.url = url
        self.max_message_size = max_message_size
        self.read_timeout = read_timeout
        self._ws: Optional[ClientConnection] = ws

    @property
    def closed(self) -> bool:
        return self._ws is None

    def _connection(self, method: str) -> ClientConnection:
        if self._ws is None:
            raise TransportError("Session is closed", method=method, url=self.url)
        return self._ws

    async def send(self, text: str) -> None:
        """Write one text message. Delivery is not acknowledged."""
        ws = self._connection("send")
        try:
            await ws.send(text)
        except websockets.exceptions.ConnectionClosed as e:
            raise TransportError(
                f"Connection closed while sending: {e}",
                method="send",
                url=self.url,
            ) from e
        logger.debug(f"Sent {len(text)} characters", extra={"url": self.url})

    async def receive(self) -> str:
        """
        Wait for one complete inbound message.

        Raises:
            TransportError: If the message exceeds the size cap, the connection
                drops, or the read timeout (when set) expires.
        """
        ws = self._connection("receive")
        try:
            if self.read_timeout is None:
                message = await ws.recv()
            else:
                message = await asyncio.wait_for(ws.recv(), timeout=self.read_timeout)
        except asyncio.TimeoutError as e:
            raise TransportError(
                f"No response within {self.read_timeout}s",
                method="receive",
                url=self.url,
            ) from e
        except websockets.exceptions.ConnectionClosed as e:
            if _closed_for_size(e):
                raise TransportError(
                    f"Inbound message exceeds {self.max_message_size} bytes",
                    method="receive",
                    url=self.url,
                    max_message_size=self.max_message_size,
                ) from e
            raise TransportError(
                f"Connection closed while receiving: {e}",
                method="receive",
                url=self.url,
            ) from e

        if isinstance(message, bytes):
            try:
                message = message.decode("utf-8")
            except UnicodeDecodeError as e:
                raise TransportError(
                    "Binary message is not valid UTF-8",
                    method="receive",
                    url=self.url,
                ) from e
        logger.debug(f"Received {len(message)} characters", extra={"url": self.url})
        return message

    async def close(self) -> None:
        """Close the WebSocket connection gracefully."""
        if self._ws:
            try:
                await self._ws.close()
            except Exception as e:
                logger.debug(f"Error closing WebSocket: {e}")
            finally:
                self._ws = None


async def connect_session(
    url: str,
    *,
    timeout: float = DEFAULT_CONNECT_TIMEOUT,
    max_message_size: int = DEFAULT_MAX_MESSAGE_SIZE,
    read_timeout: Optional[float] = None,
) -> Session:
    """
    Open a session to ``url``. The caller must close it.

    Raises:
        ConnectError: If the handshake does not finish within ``timeout``
            seconds, the connection is refused, or the server rejects it.
    """
    logger.info(f"Connecting to {url}")
    try:
        ws = await connect(url, open_timeout=timeout, max_size=max_message_size)
    except asyncio.TimeoutError as e:
        raise ConnectError(
            f"WebSocket handshake with {url} timed out after {timeout}s",
            timeout=timeout,
            method="connect",
        ) from e
    except (OSError, websockets.exceptions.InvalidURI, websockets.exceptions.InvalidHandshake) as e:
        raise ConnectError(
            f"Failed to connect to {url}: {e}",
            timeout=timeout,
            method="connect",
        ) from e
    logger.debug("WebSocket connection established", extra={"url": url})
    return Session(url, ws, max_message_size, read_timeout=read_timeout)


@asynccontextmanager
async def open_session(
    url: str,
    *,
    timeout: float = DEFAULT_CONNECT_TIMEOUT,
    max_message_size: int = DEFAULT_MAX_MESSAGE_SIZE,
    read_timeout: Optional[float] = None,
) -> AsyncIterator[Session]:
    """Open a session for the duration of an ``async with`` block."""
    session = await connect_session(
        url,
        timeout=timeout,
        max_message_size=max_message_size,
        read_timeout=read_timeout,
    )
    try:
        yield session
    finally:
        await session.close()
