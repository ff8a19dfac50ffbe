"""
GOG Galaxy store provider.

Finds games installed through a local GOG Galaxy client and builds the client
invocation that starts them. Galaxy has no API for this, so the installation
path and game list come from the Windows registry or from Galaxy's data
directory on macOS (see discovery.platforms).
"""
import asyncio
import logging
import os
import re
import sys
from typing import Any, List, Optional

from ..discovery.platforms import GalaxyPlatform, select_platform
from ..utils import fs
from ..utils import paths
from .base import (
    AppIdQuery,
    ExecInfo,
    GameStore,
    GameStoreEntry,
    IdentifyFallback,
    RunOptions,
    maybe_await,
)
from .errors import GameEntryNotFound, GameStoreNotInstalled

logger = logging.getLogger(__name__)


class GoGLauncher(GameStore):
    """Interacts with the local GOG Galaxy client"""

    id = paths.STORE_ID
    name = paths.STORE_NAME
    priority = paths.STORE_PRIORITY

    def __init__(self, platform: Optional[str] = None, home_dir: Optional[str] = None,
                 galaxy: Optional[GalaxyPlatform] = None):
        """
        Args:
            platform: sys.platform style identifier, defaults to the running OS
            home_dir: Home directory for per-user paths, defaults to $HOME
            galaxy: Platform variant to use instead of selecting one
        """
        self.galaxy = galaxy or select_platform(platform or sys.platform, home_dir)
        self._client_path: Optional[asyncio.Task] = None
        self._cache: Optional[asyncio.Task] = None

        # Start probing right away when constructed inside a running loop,
        # otherwise on first use.
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            pass
        else:
            self._probe()

    def _probe(self) -> asyncio.Task:
        if self._client_path is None:
            self._client_path = asyncio.ensure_future(self.galaxy.find_client_path())
        return self._client_path

    async def get_client_path(self) -> Optional[str]:
        """Galaxy's installation path, or None. Probed once per launcher."""
        return await self._probe()

    async def all_games(self) -> List[GameStoreEntry]:
        if self._cache is None:
            self._cache = asyncio.ensure_future(self._get_game_entries())
        return await self._cache

    async def reload_games(self) -> None:
        self._cache = asyncio.ensure_future(self._get_game_entries())

    async def _get_game_entries(self) -> List[GameStoreEntry]:
        client_path = await self.get_client_path()
        try:
            return await self.galaxy.get_game_entries(client_path)
        except Exception as e:
            logger.error(f"[GOG] Failed to get GOG games: {e}", exc_info=True)
            return []

    async def find_by_name(self, name_pattern: str) -> GameStoreEntry:
        """find the first game that matches the specified name pattern"""
        pattern = re.compile(name_pattern)
        for entry in await self.all_games():
            if pattern.fullmatch(entry.name):
                return entry
        raise GameEntryNotFound(name_pattern, self.id)

    async def find_by_app_id(self, app_id: AppIdQuery) -> GameStoreEntry:
        """find the first game with the specified appid or one of the specified appids"""
        if isinstance(app_id, str):
            app_ids = (app_id,)
            query = app_id
        else:
            app_ids = tuple(app_id)
            query = ", ".join(app_ids)

        for entry in await self.all_games():
            if entry.appid in app_ids:
                return entry
        raise GameEntryNotFound(query, self.id)

    async def get_exec_info(self, app_id: str) -> ExecInfo:
        # Without a client nothing can be launched, whatever the id
        client_path = await self.get_client_path()
        if not client_path:
            raise GameStoreNotInstalled(self.id, "GOG Galaxy not installed")

        entries = await self.all_games()
        game_entry = next((entry for entry in entries if entry.appid == app_id), None)
        if game_entry is None:
            raise GameEntryNotFound(app_id, self.id)
        return self.galaxy.build_exec_info(client_path, game_entry)

    async def launch_game(self, app_id: str, api: Any) -> Any:
        exec_info = await self.get_exec_info(app_id)
        options = RunOptions(
            cwd=self.galaxy.path.dirname(exec_info.exec_path),
            shell=True,
            suggest_deploy=True,
        )
        logger.info(f"[GOG] Launching {app_id} via {exec_info.exec_path}")
        return await maybe_await(
            api.run_executable(exec_info.exec_path, exec_info.arguments, options)
        )

    async def get_game_store_path(self) -> Optional[str]:
        client_path = await self.get_client_path()
        if not client_path:
            return None
        return self.galaxy.get_store_path(client_path)

    async def identify_game(self, game_path: str, fallback: IdentifyFallback) -> bool:
        custom, fallback_result = await asyncio.gather(
            fs.exists(os.path.join(game_path, paths.GOG_MARKER_FILE)),
            maybe_await(fallback(game_path)),
        )
        fallback_result = bool(fallback_result)
        if custom != fallback_result:
            logger.warning(
                f"[GOG] game identification inconclusive: {game_path} "
                f"(custom={custom}, fallback={fallback_result})"
            )
        return custom or fallback_result
