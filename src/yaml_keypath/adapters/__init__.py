"""
Emitters concretos.

    - github_actions → arquivos `$GITHUB_OUTPUT` / `$GITHUB_ENV` e workflow commands
    - console        → terminal (stdout/stderr)
"""

from .console import ConsoleEmitter
from .github_actions import GitHubActionsEmitter

__all__ = ["ConsoleEmitter", "GitHubActionsEmitter"]
