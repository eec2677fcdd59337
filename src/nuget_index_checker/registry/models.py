from __future__ import annotations

from dataclasses import dataclass

DEFAULT_REGISTRY_HOST = "www.nuget.org"


@dataclass(frozen=True)
class ProbeRequest:
    """チェック対象のパッケージとバージョン"""

    package_name: str
    package_version: str
    registry_host: str = DEFAULT_REGISTRY_HOST

    def __post_init__(self) -> None:
        if not self.package_name:
            msg = "package_name must not be empty"
            raise ValueError(msg)
        if not self.package_version:
            msg = "package_version must not be empty"
            raise ValueError(msg)

    @property
    def url(self) -> str:
        """パッケージバージョンのURLを返す（名前とバージョンはエンコードせずそのまま埋め込む）"""
        return f"https://{self.registry_host}/api/v2/package/{self.package_name}/{self.package_version}"


@dataclass(frozen=True)
class Indexed:
    """パッケージがレジストリに登録済み（HTTP 200）"""

    @property
    def retryable(self) -> bool:
        return False


@dataclass(frozen=True)
class NotIndexed:
    """パッケージがまだ登録されていない（HTTP 404）"""

    @property
    def retryable(self) -> bool:
        return True


@dataclass(frozen=True)
class TransportError:
    """200/404以外のレスポンス、またはレスポンスなしの通信エラー"""

    message: str

    @property
    def retryable(self) -> bool:
        return False


ProbeOutcome = Indexed | NotIndexed | TransportError
