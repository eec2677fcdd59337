"""統合Config クラス"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from nuget_index_checker.config.app import AppConfig, load_app_config
from nuget_index_checker.config.env import load_env_config
from nuget_index_checker.registry.models import DEFAULT_REGISTRY_HOST


class Config(BaseModel):
    """統合設定クラス（アクション入力 + アプリケーション設定）"""

    # アクション入力由来
    package: str = Field(..., min_length=1, description="チェック対象のパッケージ名")
    version: str = Field(..., min_length=1, description="チェック対象のパッケージバージョン")
    attempts: int = Field(default=1, ge=1, description="最大試行回数")

    # config.yaml由来
    registry_host: str = Field(default=DEFAULT_REGISTRY_HOST, description="レジストリのホスト名")
    delay_millis: int = Field(default=30_000, ge=0, description="試行間の待機時間（ミリ秒）")
    request_timeout_seconds: float = Field(default=30.0, gt=0, description="1回のHTTPリクエストのタイムアウト（秒）")

    model_config = {"extra": "forbid"}


def load_config(config_path: Path | None = None) -> Config:
    """アクション入力とYAMLファイルから統合設定を読み込む

    Args:
        config_path: YAMLファイルのパス（Noneならデフォルト値を使う）

    Returns:
        Config: 統合設定

    Raises:
        ValueError: 必須の入力が欠けている場合
        FileNotFoundError: YAMLファイルが存在しない場合
    """
    # .envファイルを読み込み
    load_dotenv()

    env_config = load_env_config()
    app_config = load_app_config(config_path) if config_path is not None else AppConfig()

    return Config(
        package=env_config.package,
        version=env_config.version,
        attempts=env_config.attempts,
        registry_host=app_config.registry_host,
        delay_millis=app_config.delay_millis,
        request_timeout_seconds=app_config.request_timeout_seconds,
    )
