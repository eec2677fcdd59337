"""アプリケーション設定"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from nuget_index_checker.registry.models import DEFAULT_REGISTRY_HOST


class AppConfig(BaseModel):
    """アプリケーション設定"""

    registry_host: str = Field(default=DEFAULT_REGISTRY_HOST, min_length=1, description="レジストリのホスト名")
    delay_millis: int = Field(default=30_000, ge=0, description="試行間の待機時間（ミリ秒）")
    request_timeout_seconds: float = Field(default=30.0, gt=0, description="1回のHTTPリクエストのタイムアウト（秒）")

    model_config = {"extra": "forbid"}


def load_app_config(config_path: Path) -> AppConfig:
    """YAMLファイルからAppConfigを読み込む

    Args:
        config_path: 設定ファイルのパス

    Returns:
        AppConfig: アプリケーション設定

    Raises:
        FileNotFoundError: 設定ファイルが存在しない場合
        ValueError: 設定ファイルが不正、または読み込めない場合
    """
    if not config_path.exists():
        msg = f"Config file not found: {config_path}"
        raise FileNotFoundError(msg)

    try:
        with config_path.open() as f:
            data = yaml.safe_load(f)
            if data is None:
                data = {}
            if not isinstance(data, dict):
                msg = f"Invalid configuration: expected a mapping in {config_path}"
                raise ValueError(msg)
            return AppConfig(**data)
    except yaml.YAMLError as e:
        msg = f"Invalid YAML file: {e}"
        raise ValueError(msg) from e
    except ValidationError as e:
        msg = f"Invalid configuration: {e}"
        raise ValueError(msg) from e
    except OSError as e:
        msg = f"Config file could not be read: {e}"
        raise ValueError(msg) from e
