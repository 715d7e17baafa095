import pytest

from survivor_draft.infrastructure.container import DraftContainer
from survivor_draft.infrastructure.draft_config_adapter import DraftConfiguration
from survivor_draft.infrastructure.json_store_adapter import JsonFileGroupRepository
from survivor_draft.infrastructure.roster_adapter import HttpRosterProvider, StaticRosterProvider
from survivor_draft.infrastructure.storage_adapter import MemoryGroupRepository


def test_defaults():
    config = DraftConfiguration.from_env({})
    assert config == DraftConfiguration()
    assert config.storage == "json"
    assert config.enforce_turns is True
    assert config.allow_empty_queue_lock is False


def test_values_from_environment():
    config = DraftConfiguration.from_env({
        "SURVIVOR_DRAFT_DATA_DIR": "/var/lib/draft",
        "SURVIVOR_DRAFT_STORAGE": "Memory",
        "SURVIVOR_DRAFT_SEASON": "49",
        "SURVIVOR_DRAFT_ROSTER_URL": "https://example.test",
        "SURVIVOR_DRAFT_ENFORCE_TURNS": "0",
        "SURVIVOR_DRAFT_ALLOW_EMPTY_LOCK": "yes",
        "SURVIVOR_DRAFT_LOG_LEVEL": "debug",
    })
    assert config.data_dir == "/var/lib/draft"
    assert config.storage == "memory"
    assert config.default_season_id == "49"
    assert config.roster_url == "https://example.test"
    assert config.enforce_turns is False
    assert config.allow_empty_queue_lock is True
    assert config.log_level == "DEBUG"


def test_unknown_storage_backend():
    with pytest.raises(ValueError):
        DraftConfiguration.from_env({"SURVIVOR_DRAFT_STORAGE": "redis"})


@pytest.mark.asyncio
async def test_container_wiring(tmp_path):
    container = DraftContainer(DraftConfiguration(data_dir=str(tmp_path)))
    assert isinstance(container.get_group_repository(), JsonFileGroupRepository)
    assert isinstance(container.get_roster_provider(), StaticRosterProvider)
    assert container.get_draft_service() is container.get_draft_service()
    await container.cleanup()

    container = DraftContainer(DraftConfiguration(storage="memory", roster_url="https://example.test"))
    assert isinstance(container.get_group_repository(), MemoryGroupRepository)
    assert isinstance(container.get_roster_provider(), HttpRosterProvider)
    await container.cleanup()


@pytest.mark.asyncio
async def test_global_container():
    from survivor_draft.infrastructure import container as container_module

    container = container_module.initialize_container(DraftConfiguration(storage="memory"))
    assert container_module.get_container() is container

    await container_module.cleanup_container()
    assert container_module._container is None
