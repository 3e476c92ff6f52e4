"""Pool configuration management."""

from functools import lru_cache
from pathlib import Path

from .models import Team
from .schemas import PoolConfig
from .teams import PLACEHOLDER_TEAM, team_from_abbreviation
from .utils import load_json_safe

CONFIG_PATH = Path(__file__).parent.parent / 'data' / 'pool_config.json'


@lru_cache(maxsize=1)
def get_config() -> PoolConfig:
    """
    Load pool configuration from data/pool_config.json.

    Configuration is cached after first load. A missing or invalid file
    yields the built-in defaults.

    Example:
        from boxpool.config import get_config
        config = get_config()
        print(f"Default currency: {config.default_currency}")
    """
    return load_json_safe(CONFIG_PATH, default=PoolConfig(), schema=PoolConfig)


def get_default_pool_name() -> str:
    """Get the name given to newly created pools."""
    return get_config().default_pool_name


def get_default_currency() -> str:
    """Get the currency code for new pool structures."""
    return get_config().default_currency


def get_default_teams() -> tuple[Team, Team]:
    """Get (home, away) teams for new pools."""
    config = get_config()
    home = team_from_abbreviation(config.default_home_team) or PLACEHOLDER_TEAM
    away = team_from_abbreviation(config.default_away_team) or PLACEHOLDER_TEAM
    return home, away


def get_owner_name() -> str:
    """Get the global display name used when a pool has no owner labels."""
    return get_config().owner_name


def get_log_dir() -> Path:
    """Get the directory for log files."""
    return Path(get_config().log_dir)


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file is modified during runtime.
    """
    get_config.cache_clear()
