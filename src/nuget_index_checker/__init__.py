"""NuGetパッケージの登録（インデックス）待ちチェッカー"""

from nuget_index_checker.poller import PollConfig, PollResult, PollState, poll
from nuget_index_checker.registry import ProbeRequest, probe

__all__ = [
    "PollConfig",
    "PollResult",
    "PollState",
    "ProbeRequest",
    "poll",
    "probe",
]
