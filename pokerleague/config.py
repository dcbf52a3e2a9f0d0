"""League configuration management."""

import logging
import os
from functools import lru_cache
from pathlib import Path

from .schemas import LeagueConfig
from .utils import load_json

CONFIG_ENV_VAR = 'POKERLEAGUE_CONFIG'
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / 'data' / 'league_config.json'

logger = logging.getLogger('pokerleague.config')


@lru_cache(maxsize=None)
def get_config(path: Path | str | None = None) -> LeagueConfig:
    """
    Load league configuration.

    The file is taken from `path`, then the POKERLEAGUE_CONFIG environment
    variable, then data/league_config.json. A missing file gives the
    default rules. Configuration is cached per path.

    Raises:
        ValueError: If the config file is malformed or has invalid values

    Example:
        from pokerleague.config import get_config
        config = get_config()
        print(f"Best {config.counted_games} games count")
    """
    config_path = Path(path or os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH)
    if not config_path.exists():
        logger.debug(f'No config at {config_path}, using default rules')
        return LeagueConfig()
    return load_json(config_path, schema=LeagueConfig)


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if the config file or POKERLEAGUE_CONFIG changes at runtime.
    """
    get_config.cache_clear()
