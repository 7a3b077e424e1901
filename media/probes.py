"""HTTP HEAD reachability probes."""

from __future__ import annotations

import asyncio
import logging
import urllib.error
import urllib.request
from dataclasses import dataclass

logger = logging.getLogger(__name__)

USER_AGENT = "MediaLibrarySeeder/1.0"


@dataclass(frozen=True)
class ProbeResult:
    url: str
    status_code: int | None
    ok: bool
    message: str


def head(url: str, timeout: float | None = None) -> ProbeResult:
    """Issue a HEAD request; HTTP and network failures come back as ``ok=False``."""
    request = urllib.request.Request(url, method="HEAD", headers={"User-Agent": USER_AGENT})
    kwargs = {"timeout": timeout} if timeout is not None else {}
    try:
        with urllib.request.urlopen(request, **kwargs) as response:
            code = response.getcode()
            return ProbeResult(url, code, 200 <= code < 300, f"Status {code}")
    except urllib.error.HTTPError as exc:
        return ProbeResult(url, exc.code, False, f"HTTP {exc.code}")
    except urllib.error.URLError as exc:
        return ProbeResult(url, None, False, f"Error: {getattr(exc, 'reason', exc)}")
    except Exception as exc:
        return ProbeResult(url, None, False, f"Error: {exc}")


async def probe(url: str, timeout: float | None = None) -> ProbeResult:
    # Blocking network call in a thread to avoid blocking the event loop
    result = await asyncio.to_thread(head, url, timeout)
    logger.debug("HEAD %s -> %s", url, result.message)
    return result
