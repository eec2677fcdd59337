import asyncio
import functools
import logging
import os
import signal
import sys
from contextlib import suppress
from pathlib import Path

from nuget_index_checker.actions import FailureReporter, GitHubActionsReporter
from nuget_index_checker.config import load_config
from nuget_index_checker.poller import PollConfig, poll
from nuget_index_checker.registry import ProbeRequest, probe

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "NUGET_INDEX_CHECKER_CONFIG"


async def main(reporter: FailureReporter, abort: asyncio.Event | None = None) -> bool:
    """アプリケーションのエントリーポイント

    Returns:
        bool: パッケージの登録を確認できた場合True
    """
    config_path = os.environ.get(CONFIG_PATH_ENV)
    try:
        config = load_config(Path(config_path) if config_path else None)
    except (ValueError, FileNotFoundError) as e:
        reporter.set_failed(str(e))
        return False

    logger.info(
        "Config loaded: package=%s, version=%s, attempts=%d, delay_millis=%d",
        config.package,
        config.version,
        config.attempts,
        config.delay_millis,
    )

    request = ProbeRequest(
        package_name=config.package,
        package_version=config.version,
        registry_host=config.registry_host,
    )
    result = await poll(
        request,
        PollConfig(max_attempts=config.attempts, delay_millis=config.delay_millis),
        reporter=reporter,
        probe_func=functools.partial(probe, timeout_seconds=config.request_timeout_seconds),
        abort=abort,
    )
    return result.succeeded


def setup_signal_handlers(loop: asyncio.AbstractEventLoop, abort: asyncio.Event) -> None:
    """シグナルハンドラを設定"""

    def handle_signal(sig: int) -> None:
        logger.info("Received signal %d, stopping after the current attempt...", sig)
        abort.set()

    for sig in (signal.SIGINT, signal.SIGTERM):
        # Windowsランナーではadd_signal_handlerが使えない
        with suppress(NotImplementedError):
            loop.add_signal_handler(sig, lambda s=sig: handle_signal(s))


def run() -> int:
    """イベントループを起動してmainを実行し、終了コードを返す"""
    reporter = GitHubActionsReporter()

    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)

    abort = asyncio.Event()
    main_task = loop.create_task(main(reporter, abort))
    setup_signal_handlers(loop, abort)

    try:
        loop.run_until_complete(main_task)
    finally:
        loop.close()
        asyncio.set_event_loop(None)

    return reporter.exit_code


if __name__ == "__main__":
    sys.exit(run())
