import json

import pytest

from survivor_draft.domain.entities import AutodraftQueue, DraftRound
from survivor_draft.domain.exceptions import ConflictRetryError, StorageUnavailableError
from survivor_draft.infrastructure.json_store_adapter import (
    JsonDocumentStore,
    JsonFileAutodraftQueueRepository,
    JsonFileGroupRepository,
)
from survivor_draft.infrastructure.storage_adapter import (
    MemoryAutodraftQueueRepository,
    MemoryGroupRepository,
)


@pytest.fixture(params=["memory", "json"])
def repositories(request, tmp_path):
    """Group and queue stores for each backend"""
    if request.param == "memory":
        return MemoryGroupRepository(), MemoryAutodraftQueueRepository()
    store = JsonDocumentStore(str(tmp_path))
    return JsonFileGroupRepository(store), JsonFileAutodraftQueueRepository(store)


@pytest.mark.asyncio
async def test_group_put_and_get(repositories, group_factory):
    groups, _ = repositories
    saved = await groups.put(group_factory(slug="tribe"))
    assert saved.version == 1

    loaded = await groups.get("tribe")
    assert loaded == saved
    assert loaded is not saved
    assert await groups.get("missing") is None


@pytest.mark.asyncio
async def test_stale_version_is_rejected(repositories, group_factory):
    groups, _ = repositories
    await groups.put(group_factory(slug="tribe"))

    first = await groups.get("tribe")
    second = await groups.get("tribe")
    first.draft_rounds.append(DraftRound(1))
    await groups.put(first)

    second.draft_rounds.append(DraftRound(1))
    with pytest.raises(ConflictRetryError) as excinfo:
        await groups.put(second)
    assert excinfo.value.code == "conflict_retry"

    stored = await groups.get("tribe")
    assert stored.version == 2
    assert len(stored.draft_rounds) == 1


@pytest.mark.asyncio
async def test_creating_an_existing_slug_conflicts(repositories, group_factory):
    groups, _ = repositories
    await groups.put(group_factory(slug="tribe"))
    with pytest.raises(ConflictRetryError):
        await groups.put(group_factory(slug="tribe"))


@pytest.mark.asyncio
async def test_list_exists_and_delete(repositories, group_factory):
    groups, _ = repositories
    await groups.put(group_factory(slug="a"))
    await groups.put(group_factory(slug="b"))

    assert sorted(g.slug for g in await groups.list()) == ["a", "b"]
    assert await groups.exists("a")

    await groups.delete("a")
    assert not await groups.exists("a")
    await groups.delete("a")
    assert [g.slug for g in await groups.list()] == ["b"]


@pytest.mark.asyncio
async def test_queue_store_keys_by_group_and_user(repositories):
    _, queues = repositories
    await queues.put(AutodraftQueue("tribe", "Alice", [1, 2], locked=True, updated_at=3))
    await queues.put(AutodraftQueue("tribe", "Bob", [4], updated_at=3))
    await queues.put(AutodraftQueue("tribe-2", "Alice", [5], updated_at=3))

    alice = await queues.get("tribe", "Alice")
    assert alice.contestant_ids == [1, 2]
    assert alice.locked is True
    assert await queues.get("tribe", "Carol") is None

    listed = await queues.list_for_group("tribe")
    assert sorted(q.user_name for q in listed) == ["Alice", "Bob"]

    await queues.delete("tribe", "Alice")
    assert await queues.get("tribe", "Alice") is None
    assert (await queues.get("tribe-2", "Alice")).contestant_ids == [5]


def test_document_store_file_layout(tmp_path):
    store = JsonDocumentStore(str(tmp_path))
    store.write("group:tribe", {"slug": "tribe"})
    store.write("autodraft:tribe:Alice", {"userName": "Alice"})

    assert (tmp_path / "kv" / "group%3Atribe.json").exists()
    assert store.keys("group:") == ["group:tribe"]
    assert store.keys("autodraft:") == ["autodraft:tribe:Alice"]
    assert store.read("group:missing") is None
    assert not list((tmp_path / "kv").glob("*.tmp"))


def test_document_store_missing_directory(tmp_path):
    store = JsonDocumentStore(str(tmp_path / "nowhere"))
    assert store.keys() == []
    store.delete("group:tribe")


def test_corrupt_document_is_a_storage_error(tmp_path):
    store = JsonDocumentStore(str(tmp_path))
    store.write("group:tribe", {"slug": "tribe"})
    (tmp_path / "kv" / "group%3Atribe.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(StorageUnavailableError) as excinfo:
        store.read("group:tribe")
    assert excinfo.value.retryable is True

    (tmp_path / "kv" / "group%3Atribe.json").write_bytes(b'{"name": "\xff"}')
    with pytest.raises(StorageUnavailableError):
        store.read("group:tribe")


@pytest.mark.asyncio
async def test_json_group_document_on_disk(tmp_path, group_factory):
    repository = JsonFileGroupRepository(JsonDocumentStore(str(tmp_path)))
    await repository.put(group_factory(slug="tribe"))

    data = json.loads((tmp_path / "kv" / "group%3Atribe.json").read_text(encoding="utf-8"))
    assert data["slug"] == "tribe"
    assert data["version"] == 1
    assert data["draftRounds"] == []
    assert [u["name"] for u in data["users"]] == ["Alice", "Bob"]
