"""
Platform specific GOG Galaxy discovery.

Each platform variant knows where Galaxy is installed, how to enumerate the
games it installed and how to build a client invocation. The variant is picked
once per launcher with select_platform(); callers never branch on sys.platform.

Probe and enumeration failures never escape a variant: they are logged and
turned into "not installed" (None) or an empty game list.
"""
import asyncio
import logging
import ntpath
import os
import posixpath
from abc import ABC, abstractmethod
from typing import List, Optional

from ..stores.base import ExecInfo, GameStoreEntry
from ..stores.errors import GameStoreNotInstalled
from ..utils import fs
from ..utils import paths
from . import registry
from .gameinfo import GalaxyGameInfo, GameInfoParseError

logger = logging.getLogger(__name__)


def unique_entries(results: List[Optional[GameStoreEntry]]) -> List[GameStoreEntry]:
    """Drop skipped candidates and repeated appids, keeping the first of each."""
    entries = []
    seen = set()
    for entry in results:
        if entry is None:
            continue
        if entry.appid in seen:
            logger.debug(f"[GOG] Dropping duplicate appid {entry.appid} at {entry.game_path}")
            continue
        seen.add(entry.appid)
        entries.append(entry)
    return entries


class GalaxyPlatform(ABC):
    """Discovery and launch behavior of GOG Galaxy on one OS"""

    # Path flavor used for the client's own paths
    path = os.path

    @abstractmethod
    async def find_client_path(self) -> Optional[str]:
        """Locate the Galaxy installation. Returns None if not installed."""
        pass

    @abstractmethod
    async def get_game_entries(self, client_path: Optional[str]) -> List[GameStoreEntry]:
        """Enumerate installed games. Never raises."""
        pass

    @abstractmethod
    def get_store_path(self, client_path: str) -> str:
        """Path of the client's executable given its installation path"""
        pass

    @abstractmethod
    def build_exec_info(self, client_path: str, entry: GameStoreEntry) -> ExecInfo:
        """Client invocation that starts the given game"""
        pass


class WindowsGalaxy(GalaxyPlatform):
    """Galaxy on Windows, found through HKEY_LOCAL_MACHINE"""

    path = ntpath

    async def find_client_path(self) -> Optional[str]:
        loop = asyncio.get_running_loop()
        try:
            client_path = await loop.run_in_executor(
                None,
                registry.get_value,
                paths.REG_HIVE,
                paths.REG_GOG_CLIENT_PATHS,
                paths.REG_GOG_CLIENT_VALUE,
            )
        except OSError as e:
            logger.info(f"[GOG/Windows] gog not found: {e}")
            return None
        if not client_path:
            logger.info("[GOG/Windows] gog not found: empty client path in registry")
            return None
        logger.info(f"[GOG/Windows] Found GOG Galaxy at {client_path}")
        return str(client_path)

    async def get_game_entries(self, client_path: Optional[str]) -> List[GameStoreEntry]:
        if not client_path:
            return []

        loop = asyncio.get_running_loop()
        try:
            keys = await loop.run_in_executor(
                None, registry.enum_subkeys, paths.REG_HIVE, paths.REG_GOG_GAMES
            )
        except FileNotFoundError:
            logger.info("[GOG/Windows] No Games key in registry")
            return []
        except OSError as e:
            logger.error(f"[GOG/Windows] Failed to enumerate games key: {e}")
            return []

        results = await asyncio.gather(*[self._read_game_key(key) for key in keys])
        entries = unique_entries(results)
        logger.info(f"[GOG/Windows] Found {len(entries)} installed games")
        return entries

    async def _read_game_key(self, key: str) -> Optional[GameStoreEntry]:
        loop = asyncio.get_running_loop()
        key_path = f"{paths.REG_GOG_GAMES}\\{key}"

        def read(value_name):
            return loop.run_in_executor(
                None, registry.get_value, paths.REG_HIVE, key_path, value_name
            )

        try:
            appid, game_path, name = await asyncio.gather(
                read(paths.REG_VALUE_GAME_ID),
                read(paths.REG_VALUE_PATH),
                read(paths.REG_VALUE_NAME),
            )
        except OSError as e:
            # Don't stop, keep going.
            logger.error(f"[GOG/Windows] Failed to create game entry for {key}: {e}")
            return None

        return GameStoreEntry(
            appid=str(appid),
            name=str(name),
            game_path=str(game_path),
            game_store_id=paths.STORE_ID,
        )

    def get_store_path(self, client_path: str) -> str:
        return self.path.join(client_path, paths.GOG_EXEC)

    def build_exec_info(self, client_path: str, entry: GameStoreEntry) -> ExecInfo:
        # Galaxy parses these positionally, keep the order
        return ExecInfo(
            exec_path=self.get_store_path(client_path),
            arguments=[
                "/command=runGame",
                f"/gameId={entry.appid}",
                f'path="{entry.game_path}"',
            ],
        )


class MacGalaxy(GalaxyPlatform):
    """Galaxy on macOS, found as an app bundle"""

    path = posixpath

    def __init__(self, home_dir: Optional[str] = None):
        self.home_dir = home_dir or paths.get_home_dir()

    @property
    def candidate_paths(self) -> List[str]:
        return [
            paths.MAC_SYSTEM_APP_PATH,
            paths.get_mac_user_app_path(self.home_dir),
        ]

    async def find_client_path(self) -> Optional[str]:
        # os.path.exists reports unreadable paths as missing
        for candidate in self.candidate_paths:
            if os.path.exists(candidate):
                logger.info(f"[GOG/macOS] Found GOG Galaxy at {candidate}")
                return candidate
        logger.info("[GOG/macOS] gog not found: macOS app not installed")
        return None

    async def get_game_entries(self, client_path: Optional[str]) -> List[GameStoreEntry]:
        data_dir = paths.get_mac_data_dir(self.home_dir)
        if not await fs.exists(data_dir):
            logger.debug(f"[GOG/macOS] Galaxy data directory not found: {data_dir}")
            return []

        games_dir = paths.get_mac_games_dir(self.home_dir)
        try:
            game_dirs = await fs.list_dir(games_dir)
        except OSError as e:
            logger.debug(f"[GOG/macOS] Games directory not readable: {e}")
            return []

        results = await asyncio.gather(
            *[self._read_game_dir(games_dir, game_dir) for game_dir in game_dirs]
        )
        entries = unique_entries(results)
        logger.info(f"[GOG/macOS] Found {len(entries)} installed games")
        return entries

    async def _read_game_dir(self, games_dir: str, game_dir: str) -> Optional[GameStoreEntry]:
        gameinfo_path = os.path.join(games_dir, game_dir, paths.MAC_GAMEINFO_FILENAME)
        try:
            data = await fs.read_text(gameinfo_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"[GOG/macOS] Failed to read game info file for {game_dir}: {e}")
            return None

        try:
            info = GalaxyGameInfo.from_json(game_dir, data)
        except GameInfoParseError as e:
            logger.error(f"[GOG/macOS] Failed to parse game info for {game_dir}: {e}")
            return None

        if not info.install_directory:
            logger.debug(f"[GOG/macOS] No install directory for {game_dir}")
            return None
        if not await fs.exists(info.install_directory):
            logger.debug(f"[GOG/macOS] Game directory not found: {info.install_directory}")
            return None

        return GameStoreEntry(
            appid=info.appid,
            name=info.display_name,
            game_path=info.install_directory,
            game_store_id=paths.STORE_ID,
        )

    def get_store_path(self, client_path: str) -> str:
        return client_path

    def build_exec_info(self, client_path: str, entry: GameStoreEntry) -> ExecInfo:
        # The app bundle itself is launched
        return ExecInfo(
            exec_path=client_path,
            arguments=[
                f"/gameId={entry.appid}",
                "/command=runGame",
                f'path="{entry.game_path}"',
            ],
        )


class UnsupportedPlatform(GalaxyPlatform):
    """
    Any OS Galaxy does not run on.

    find_client_path always returns None, so GoGLauncher stops before calling
    get_store_path or build_exec_info. Code that calls them directly gets
    GameStoreNotInstalled.
    """

    def __init__(self, platform: str = ""):
        self.platform = platform

    async def find_client_path(self) -> Optional[str]:
        logger.info(f"[GOG] gog not found: unsupported platform {self.platform}")
        return None

    async def get_game_entries(self, client_path: Optional[str]) -> List[GameStoreEntry]:
        return []

    def get_store_path(self, client_path: str) -> str:
        raise GameStoreNotInstalled(paths.STORE_ID, "GOG Galaxy not supported on this platform")

    def build_exec_info(self, client_path: str, entry: GameStoreEntry) -> ExecInfo:
        raise GameStoreNotInstalled(paths.STORE_ID, "GOG Galaxy not supported on this platform")


def select_platform(platform: str, home_dir: Optional[str] = None) -> GalaxyPlatform:
    """
    Pick the platform variant for a sys.platform value.

    Args:
        platform: sys.platform style identifier ("win32", "darwin", ...)
        home_dir: Home directory for per-user paths, defaults to $HOME

    Returns:
        A GalaxyPlatform instance
    """
    if platform == "win32":
        return WindowsGalaxy()
    if platform == "darwin":
        return MacGalaxy(home_dir)
    return UnsupportedPlatform(platform)
