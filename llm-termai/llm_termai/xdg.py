"""XDG Base Directory helpers."""
import os
from pathlib import Path

APP_NAME = "termai"


def get_config_dir(app_name: str = APP_NAME) -> Path:
    """Get application config directory using XDG spec.

    Args:
        app_name: Application name

    Returns:
        Path to XDG_CONFIG_HOME/app_name or ~/.config/app_name
    """
    xdg_config = os.environ.get('XDG_CONFIG_HOME')
    if xdg_config:
        base = Path(xdg_config)
    else:
        base = Path.home() / '.config'
    return base / app_name


def get_config_path(app_name: str = APP_NAME) -> Path:
    return get_config_dir(app_name) / 'config.json'
