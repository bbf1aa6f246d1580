"""
Target discovery over the browser's HTTP debug endpoint.
"""
import json
import logging
from typing import List, Optional, Sequence

import httpx

from cdp_cookies.core.errors import DiscoveryError
from cdp_cookies.core.models import Target

logger = logging.getLogger("cdp_cookies")


async def discover(
    host: str = "localhost",
    port: int = 9222,
    *,
    timeout: float = 5.0,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[Target]:
    """
    Fetch the list of debuggable targets from ``http://{host}:{port}/json``.

    A single attempt is made; any failure is surfaced immediately.

    Args:
        host: Debug host.
        port: Remote-debugging port.
        timeout: HTTP timeout in seconds.
        transport: Optional httpx transport, mainly for tests.

    Returns:
        Targets in the order the browser listed them.

    Raises:
        DiscoveryError: If the endpoint is unreachable, answers with a
            non-success status, or returns something other than a JSON
            array of target objects.
    """
    url = f"http://{host}:{port}/json"
    logger.debug(f"Discovering targets at {url}")

    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            response = await client.get(url)
            response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise DiscoveryError(
            f"Debug endpoint {url} returned HTTP {e.response.status_code}",
            method="discover",
            status_code=e.response.status_code,
        ) from e
    except httpx.HTTPError as e:
        raise DiscoveryError(
            f"Failed to reach debug endpoint {url}: {e}",
            method="discover",
        ) from e

    try:
        entries = json.loads(response.text)
    except (json.JSONDecodeError, RecursionError) as e:
        raise DiscoveryError(
            f"Debug endpoint {url} returned invalid JSON: {e}",
            method="discover",
        ) from e

    if not isinstance(entries, list):
        raise DiscoveryError(
            f"Debug endpoint {url} did not return a JSON array",
            method="discover",
        )

    targets = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise DiscoveryError(
                f"Target entry {index} is not an object",
                method="discover",
            )
        try:
            targets.append(Target.from_dict(entry))
        except TypeError as e:
            raise DiscoveryError(
                f"Target entry {index} is malformed: {e}",
                method="discover",
            ) from e

    logger.debug(f"Found {len(targets)} targets", extra={"url": url})
    return targets


def select_target(targets: Sequence[Target]) -> Target:
    """
    Pick the target to open a session with.

    The first listed target is always used, whatever its type.

    Raises:
        DiscoveryError: If there are no targets or the first one has no
            WebSocket debugger URL.
    """
    if not targets:
        raise DiscoveryError("No debuggable targets found", method="select_target")

    target = targets[0]
    if not target.has_endpoint:
        raise DiscoveryError(
            "First target has no WebSocket debugger URL",
            target_id=target.id,
            method="select_target",
        )
    return target
