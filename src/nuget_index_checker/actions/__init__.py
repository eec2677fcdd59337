"""GitHub Actions連携モジュール"""

from nuget_index_checker.actions.inputs import DEFAULT_ATTEMPTS, get_input, parse_attempts
from nuget_index_checker.actions.reporter import FailureReporter, GitHubActionsReporter, escape_command_data

__all__ = [
    "DEFAULT_ATTEMPTS",
    "FailureReporter",
    "GitHubActionsReporter",
    "escape_command_data",
    "get_input",
    "parse_attempts",
]
