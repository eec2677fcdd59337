"""パッケージ登録待ちのポーリング"""

from __future__ import annotations

import asyncio
import enum
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from pydantic import BaseModel, Field

from nuget_index_checker.actions.reporter import FailureReporter
from nuget_index_checker.registry.models import Indexed, NotIndexed, ProbeOutcome, ProbeRequest, TransportError
from nuget_index_checker.registry.probe import probe

logger = logging.getLogger(__name__)

ProbeFunc = Callable[[str], Awaitable[ProbeOutcome]]

DEFAULT_DELAY_MILLIS = 30_000


class PollConfig(BaseModel):
    """ポーリング設定"""

    max_attempts: int = Field(..., ge=1, description="最大試行回数")
    delay_millis: int = Field(default=DEFAULT_DELAY_MILLIS, ge=0, description="試行間の待機時間（ミリ秒）")

    model_config = {"extra": "forbid", "frozen": True}


class PollState(enum.Enum):
    """ポーリングセッションの終了状態"""

    SUCCEEDED = "succeeded"
    EXHAUSTED = "exhausted"
    FATAL = "fatal"
    ABORTED = "aborted"


@dataclass(frozen=True)
class PollResult:
    """pollの結果"""

    succeeded: bool
    attempts_made: int
    state: PollState
    failure_message: str | None = None


def exhausted_message(request: ProbeRequest, max_attempts: int) -> str:
    return f"Package {request.package_name} version {request.package_version} was not indexed after {max_attempts} attempts."


def aborted_message(request: ProbeRequest, attempts_made: int) -> str:
    return (
        f"Polling for package {request.package_name} version {request.package_version} "
        f"was aborted after {attempts_made} attempts."
    )


async def wait_between_attempts(delay_millis: int, abort: asyncio.Event | None = None) -> bool:
    """次の試行まで待機する。

    delay_millisが0でもイベントループに制御を返す。
    abortがセットされた場合は待機を打ち切る。

    Returns:
        bool: 待機を最後まで完了した場合True、abortで中断された場合False
    """
    delay_seconds = delay_millis / 1000
    if abort is None:
        await asyncio.sleep(delay_seconds)
        return True

    if abort.is_set():
        return False
    try:
        await asyncio.wait_for(abort.wait(), timeout=delay_seconds)
    except TimeoutError:
        return True
    return False


async def poll(
    request: ProbeRequest,
    config: PollConfig,
    *,
    reporter: FailureReporter,
    probe_func: ProbeFunc = probe,
    abort: asyncio.Event | None = None,
) -> PollResult:
    """
    パッケージが登録されるまでprobeを繰り返す。

    NotIndexedの場合のみdelay_millis待ってリトライする。
    TransportErrorは残り試行回数に関係なく即座に失敗として終了する。
    最後の試行の後には待機しない。

    Args:
        request: チェック対象のパッケージ
        config: ポーリング設定
        reporter: 失敗の通知先
        probe_func: 1回分のチェックを行う関数
        abort: セットされると試行間の待機を中断して終了するイベント

    Returns:
        PollResult: ポーリング結果
    """
    url = request.url
    max_attempts = config.max_attempts

    for attempt in range(1, max_attempts + 1):
        outcome = await probe_func(url)

        match outcome:
            case Indexed():
                logger.info(
                    "Package %s version %s is indexed on %s.",
                    request.package_name,
                    request.package_version,
                    request.registry_host,
                )
                return PollResult(succeeded=True, attempts_made=attempt, state=PollState.SUCCEEDED)

            case TransportError(message=message):
                logger.error("Attempt %d of %d failed: %s", attempt, max_attempts, message)
                reporter.set_failed(message)
                return PollResult(
                    succeeded=False,
                    attempts_made=attempt,
                    state=PollState.FATAL,
                    failure_message=message,
                )

            case NotIndexed():
                if attempt == max_attempts:
                    break
                logger.info(
                    "Attempt %d of %d: Package not indexed yet. Retrying in %g seconds...",
                    attempt,
                    max_attempts,
                    config.delay_millis / 1000,
                )
                if not await wait_between_attempts(config.delay_millis, abort):
                    message = aborted_message(request, attempt)
                    logger.warning(message)
                    reporter.set_failed(message)
                    return PollResult(
                        succeeded=False,
                        attempts_made=attempt,
                        state=PollState.ABORTED,
                        failure_message=message,
                    )

            case _:
                msg = f"Unknown probe outcome: {outcome!r}"
                raise TypeError(msg)

    message = exhausted_message(request, max_attempts)
    logger.error(message)
    reporter.set_failed(message)
    return PollResult(
        succeeded=False,
        attempts_made=max_attempts,
        state=PollState.EXHAUSTED,
        failure_message=message,
    )
