"""
Tests for StoreManager, the host side of store registration.
"""
import sys

import pytest
from unittest.mock import AsyncMock, Mock, patch

from gamestore_gog import main
from gamestore_gog.stores.base import GameStoreEntry, RunOptions
from gamestore_gog.stores.errors import GameEntryNotFound
from gamestore_gog.stores.gog import GoGLauncher
from gamestore_gog.stores.manager import StoreManager


def mock_store(store_id, priority, games=None):
    games = games or []
    store = Mock(id=store_id, priority=priority)
    store.all_games = AsyncMock(return_value=games)
    store.reload_games = AsyncMock()

    async def find_by_app_id(app_id):
        app_ids = [app_id] if isinstance(app_id, str) else list(app_id)
        for game in games:
            if game.appid in app_ids:
                return game
        raise GameEntryNotFound(app_id, store_id)

    store.find_by_app_id = AsyncMock(side_effect=find_by_app_id)
    store.find_by_name = AsyncMock(side_effect=GameEntryNotFound("x", store_id))
    return store


@pytest.fixture
def manager():
    return StoreManager()


def test_main_registers_gog_store(manager):
    assert main(manager) is True
    store = manager.get_store("gog")
    assert isinstance(store, GoGLauncher)


def test_stores_sorted_by_priority(manager):
    manager.register_game_store(mock_store("steam", 40))
    manager.register_game_store(mock_store("gog", 15))
    assert [store.id for store in manager.stores] == ["gog", "steam"]


@pytest.mark.asyncio
async def test_find_falls_through_stores(manager):
    game = GameStoreEntry("7", "Seven", "/g/7", "steam")
    manager.register_game_store(mock_store("gog", 15))
    manager.register_game_store(mock_store("steam", 40, [game]))

    assert await manager.find_by_app_id("7") is game


@pytest.mark.asyncio
async def test_find_not_found_anywhere(manager):
    manager.register_game_store(mock_store("gog", 15))
    with pytest.raises(GameEntryNotFound):
        await manager.find_by_app_id(["1", "2"])
    with pytest.raises(GameEntryNotFound):
        await manager.find_by_name("Nothing")


@pytest.mark.asyncio
async def test_failing_store_does_not_abort_others(manager):
    game = GameStoreEntry("7", "Seven", "/g/7", "steam")
    broken = mock_store("gog", 15)
    broken.all_games.side_effect = RuntimeError("broken")
    manager.register_game_store(broken)
    manager.register_game_store(mock_store("steam", 40, [game]))

    assert await manager.all_games() == [game]


@pytest.mark.asyncio
async def test_reload_games_reaches_every_store(manager):
    stores = [mock_store("gog", 15), mock_store("steam", 40)]
    for store in stores:
        manager.register_game_store(store)
    await manager.reload_games()
    for store in stores:
        store.reload_games.assert_awaited_once()


@pytest.mark.asyncio
async def test_run_executable(manager, tmp_path):
    code = await manager.run_executable(sys.executable, ["-c", "pass"], RunOptions(cwd=str(tmp_path)))
    assert code == 0


@pytest.mark.asyncio
async def test_find_by_app_id_generator_reaches_later_stores(manager):
    game = GameStoreEntry("7", "Seven", "/g/7", "steam")
    manager.register_game_store(mock_store("gog", 15))
    manager.register_game_store(mock_store("steam", 40, [game]))

    assert await manager.find_by_app_id(app_id for app_id in ["6", "7"]) is game


@pytest.mark.asyncio
async def test_find_by_app_id_generator_not_found_query(manager):
    manager.register_game_store(mock_store("gog", 15))
    manager.register_game_store(mock_store("steam", 40))

    with pytest.raises(GameEntryNotFound) as excinfo:
        await manager.find_by_app_id(app_id for app_id in ["1", "2"])
    assert excinfo.value.query == "1, 2"


@pytest.mark.asyncio
async def test_run_executable_opens_app_bundle(manager, tmp_path):
    bundle = tmp_path / "GOG Galaxy.app"
    bundle.mkdir()
    proc = Mock(wait=AsyncMock(return_value=0))
    create = AsyncMock(return_value=proc)

    with patch("asyncio.create_subprocess_shell", create):
        code = await manager.run_executable(
            str(bundle), ["/gameId=1", "/command=runGame"], RunOptions(cwd=str(tmp_path), shell=True)
        )

    assert code == 0
    command = create.call_args.args[0]
    assert command.startswith("open -a ")
    assert command.endswith(" --args /gameId=1 /command=runGame")


@pytest.mark.asyncio
async def test_run_executable_app_bundle_without_shell(manager, tmp_path):
    bundle = tmp_path / "GOG Galaxy.app"
    bundle.mkdir()
    create = AsyncMock(return_value=Mock(wait=AsyncMock(return_value=0)))

    with patch("asyncio.create_subprocess_exec", create):
        await manager.run_executable(str(bundle), ["/gameId=1"], RunOptions(cwd=str(tmp_path)))

    assert create.call_args.args == ("open", "-a", str(bundle), "--args", "/gameId=1")
