# Utils package
from .paths import (
    get_home_dir,
    get_mac_user_app_path,
    get_mac_data_dir,
    get_mac_games_dir,
    STORE_ID,
    STORE_NAME,
    STORE_PRIORITY,
)

__all__ = [
    'get_home_dir',
    'get_mac_user_app_path',
    'get_mac_data_dir',
    'get_mac_games_dir',
    'STORE_ID',
    'STORE_NAME',
    'STORE_PRIORITY',
]
