from .env import settings_from_env
from .settings import TokenSettings

__all__ = ["TokenSettings", "settings_from_env"]
