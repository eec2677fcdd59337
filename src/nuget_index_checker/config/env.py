"""アクション入力（環境変数）設定"""

from pydantic import BaseModel, Field, ValidationError

from nuget_index_checker.actions.inputs import DEFAULT_ATTEMPTS, get_input, parse_attempts


class EnvConfig(BaseModel):
    """アクション入力設定"""

    package: str = Field(..., min_length=1, description="チェック対象のパッケージ名")
    version: str = Field(..., min_length=1, description="チェック対象のパッケージバージョン")
    attempts: int = Field(default=DEFAULT_ATTEMPTS, ge=1, description="最大試行回数")

    model_config = {"extra": "forbid"}


def load_env_config() -> EnvConfig:
    """INPUT_* 環境変数からEnvConfigを読み込む

    Returns:
        EnvConfig: アクション入力設定

    Raises:
        ValueError: 必須入力が欠けている場合
    """
    package = get_input("package", required=True)
    version = get_input("version", required=True)
    attempts = parse_attempts(get_input("attempts"))

    try:
        return EnvConfig(package=package, version=version, attempts=attempts)
    except ValidationError as e:
        msg = f"Invalid action input: {e}"
        raise ValueError(msg) from e
