"""GOG Galaxy path constants and utilities."""

import os
from pathlib import Path


# Store identity as registered with the host
STORE_ID = "gog"
STORE_NAME = "GOG"
# no DRM, does it get better than this?
STORE_PRIORITY = 15

# Client executables
GOG_EXEC = "GalaxyClient.exe"
GOG_MAC_EXEC = "GOG Galaxy.app"

# Windows registry locations (under HKEY_LOCAL_MACHINE)
REG_HIVE = "HKEY_LOCAL_MACHINE"
REG_GOG_CLIENT_PATHS = "SOFTWARE\\WOW6432Node\\GOG.com\\GalaxyClient\\paths"
REG_GOG_CLIENT_VALUE = "client"
REG_GOG_GAMES = "SOFTWARE\\WOW6432Node\\GOG.com\\Games"

# Value names read from each game subkey
REG_VALUE_GAME_ID = "gameID"
REG_VALUE_PATH = "path"
REG_VALUE_NAME = "startMenu"

# macOS locations
MAC_SYSTEM_APP_PATH = os.path.join("/Applications", GOG_MAC_EXEC)
MAC_GAMEINFO_FILENAME = "gameinfo"

# Marker file GOG installers drop into a game's root directory
GOG_MARKER_FILE = "gog.ico"


def get_home_dir() -> str:
    """Current user's home directory, honoring $HOME first."""
    return os.environ.get("HOME") or str(Path.home())


def get_mac_user_app_path(home_dir: str) -> str:
    """Galaxy app bundle under the user's own Applications folder."""
    return os.path.join(home_dir, "Applications", GOG_MAC_EXEC)


def get_mac_data_dir(home_dir: str) -> str:
    """Galaxy's per-user application-support directory.

    Args:
        home_dir: User home directory

    Returns:
        Full path to ~/Library/Application Support/GOG.com/Galaxy
    """
    return os.path.join(home_dir, "Library", "Application Support", "GOG.com", "Galaxy")


def get_mac_games_dir(home_dir: str) -> str:
    """Directory holding one subdirectory per installed game id."""
    return os.path.join(get_mac_data_dir(home_dir), "games")
