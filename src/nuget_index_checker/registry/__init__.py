"""パッケージレジストリ関連モジュール"""

from nuget_index_checker.registry.models import (
    DEFAULT_REGISTRY_HOST,
    Indexed,
    NotIndexed,
    ProbeOutcome,
    ProbeRequest,
    TransportError,
)
from nuget_index_checker.registry.probe import probe

__all__ = [
    "DEFAULT_REGISTRY_HOST",
    "Indexed",
    "NotIndexed",
    "ProbeOutcome",
    "ProbeRequest",
    "TransportError",
    "probe",
]
