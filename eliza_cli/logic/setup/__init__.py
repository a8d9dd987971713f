"""First-use setup and interactive prompting."""

from .env_prompt import EnvPrompter
from .first_run import ensure_user_directories, is_interactive_environment

__all__ = ["EnvPrompter", "ensure_user_directories", "is_interactive_environment"]
