"""パッケージの登録状況チェックモジュール"""

from __future__ import annotations

import logging

import aiohttp

from nuget_index_checker.registry.models import Indexed, NotIndexed, ProbeOutcome, TransportError

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network error or no response received"

_DEFAULT_TIMEOUT_SECONDS = 30.0


async def probe(url: str, timeout_seconds: float = _DEFAULT_TIMEOUT_SECONDS) -> ProbeOutcome:
    """URLにHTTP GETリクエストを1回だけ送り、結果を3種類に分類する。

    リトライは行わない（リトライ方針はpollerの責務）。

    Args:
        url: パッケージバージョンのURL
        timeout_seconds: タイムアウト秒数

    Returns:
        200ならIndexed、404ならNotIndexed、それ以外はTransportError。
    """
    timeout = aiohttp.ClientTimeout(total=timeout_seconds)
    try:
        async with aiohttp.ClientSession(timeout=timeout) as session, session.get(url, allow_redirects=True) as response:
            if response.status == 200:
                return Indexed()
            if response.status == 404:
                return NotIndexed()
            return TransportError(f"HTTP error: Request failed with status code {response.status}")
    except (TimeoutError, aiohttp.ClientConnectionError) as e:
        logger.debug("Probe got no response from %s: %r", url, e)
        return TransportError(NETWORK_ERROR_MESSAGE)
    except aiohttp.ClientError as e:
        logger.debug("Probe failed for %s: %r", url, e)
        return TransportError(f"HTTP error: {e}")
