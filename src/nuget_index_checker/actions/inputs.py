"""GitHub Actionsの入力値読み込み"""

from __future__ import annotations

import os
import re

DEFAULT_ATTEMPTS = 1

_LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?\d+)")


def get_input(name: str, *, required: bool = False) -> str:
    """GitHub Actionsの入力値を環境変数 INPUT_<NAME> から読み込む。

    Args:
        name: 入力名（action.ymlのinputsのキー）
        required: Trueの場合、未指定・空文字をエラーにする

    Returns:
        前後の空白を除いた入力値。未指定なら空文字。

    Raises:
        ValueError: requiredな入力が指定されていない場合
    """
    env_name = f"INPUT_{name.replace(' ', '_').upper()}"
    value = os.environ.get(env_name, "").strip()
    if required and not value:
        msg = f"Input required and not supplied: {name}"
        raise ValueError(msg)
    return value


def parse_attempts(raw: str | None, default: int = DEFAULT_ATTEMPTS) -> int:
    """試行回数の入力値を整数に変換する。

    先頭の整数部分だけを読み取る（"3x" は 3）。
    数値でない、未指定、または1未満の場合はdefaultを返す。
    """
    if not raw:
        return default
    match = _LEADING_INT_PATTERN.match(raw)
    if match is None:
        return default
    value = int(match.group(1))
    return value if value >= 1 else default
