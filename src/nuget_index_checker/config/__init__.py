"""設定管理モジュール"""

from nuget_index_checker.config.app import AppConfig, load_app_config
from nuget_index_checker.config.config import Config, load_config
from nuget_index_checker.config.env import EnvConfig, load_env_config

__all__ = [
    "AppConfig",
    "Config",
    "EnvConfig",
    "load_app_config",
    "load_config",
    "load_env_config",
]
