from __future__ import annotations

import logging
import sys
from typing import Protocol, TextIO, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class FailureReporter(Protocol):
    """ホスト側へ失敗を通知するためのProtocol"""

    def set_failed(self, message: str) -> None: ...


def escape_command_data(message: str) -> str:
    """ワークフローコマンドのデータ部をエスケープする"""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class GitHubActionsReporter:
    """ワークフローコマンド（::error::）で失敗を通知するFailureReporter実装"""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self.messages: list[str] = []

    @property
    def failed(self) -> bool:
        return bool(self.messages)

    @property
    def exit_code(self) -> int:
        """失敗が通知されていれば1、そうでなければ0"""
        return 1 if self.failed else 0

    def set_failed(self, message: str) -> None:
        """失敗を記録し、::error::コマンドを出力する。

        実行時にsys.stdoutを参照するため、pytestのcapsysでも捕捉できる。
        """
        self.messages.append(message)
        stream = self._stream or sys.stdout
        stream.write(f"::error::{escape_command_data(message)}\n")
        stream.flush()
        logger.debug("Failure reported: %s", message)
