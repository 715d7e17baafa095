import pytest

from survivor_draft.domain.entities import (
    AutodraftQueue,
    Contestant,
    DraftPick,
    DraftRound,
    Group,
    Season,
)
from survivor_draft.domain.exceptions import InvalidGroupError, InvalidSelectionError


def test_group_document_shape(group_factory):
    group = group_factory(rounds=[DraftRound(1, [DraftPick("Alice", 7, 1)])])
    data = group.to_dict()

    assert data["draftRounds"] == [
        {"roundNumber": 1, "picks": [{"userName": "Alice", "contestantId": 7, "pickNumber": 1}], "complete": False}
    ]
    assert data["users"][0] == {"name": "Alice", "joinedAt": 1}
    assert data["seasonId"] == "48"
    assert Group.from_dict(data) == group


def test_missing_draft_rounds_load_as_empty():
    group = Group.from_dict({"name": "Tribe", "slug": "tribe", "users": [{"name": "Alice"}], "createdAt": 5})
    assert group.draft_rounds == []
    assert group.version == 0
    assert group.season_id is None
    assert group.users[0].joined_at is None


@pytest.mark.parametrize("document", [
    [],
    {"name": "Tribe"},
    {"name": "Tribe", "slug": ""},
    {"name": "Tribe", "slug": "tribe", "users": [{"nom": "x"}]},
    {"name": "Tribe", "slug": "tribe", "draftRounds": [{"picks": []}]},
    {"name": "Tribe", "slug": "tribe", "draftRounds": "nope"},
    {"name": "Tribe", "slug": "tribe", "createdAt": "2025-01-01T00:00:00Z"},
    {"name": "Tribe", "slug": "tribe", "version": "two"},
    {"name": "Tribe", "slug": "tribe", "users": [{"name": "Alice", "joinedAt": "yesterday"}]},
    {"name": "Tribe", "slug": "tribe", "draftRounds": [{"roundNumber": 1, "picks": [], "complete": "false"}]},
    {"name": "Tribe", "slug": "tribe", "draftRounds": ["round"]},
])
def test_malformed_group_documents(document):
    with pytest.raises(InvalidGroupError):
        Group.from_dict(document)


def test_find_user_ignores_case(group_factory):
    group = group_factory(names=["Alice", "Bob"])
    assert group.find_user(" aLICE ").name == "Alice"
    assert group.find_user("Carol") is None
    assert group.has_user("Alice")
    assert not group.has_user("alice")


def test_current_round(group_factory):
    group = group_factory(rounds=[DraftRound(1, complete=True), DraftRound(2)])
    assert group.current_round.round_number == 2


def test_queue_document_shape():
    queue = AutodraftQueue("tribe", "Alice", [3, 1], locked=True, updated_at=9)
    assert queue.to_dict() == {
        "groupSlug": "tribe",
        "userName": "Alice",
        "contestantIds": [3, 1],
        "locked": True,
        "updatedAt": 9,
    }
    assert AutodraftQueue.from_dict(queue.to_dict()) == queue


def test_malformed_queue_document():
    with pytest.raises(InvalidSelectionError):
        AutodraftQueue.from_dict({"groupSlug": "tribe"})
    with pytest.raises(InvalidSelectionError):
        AutodraftQueue.from_dict({"groupSlug": "tribe", "userName": "A", "contestantIds": ["x"]})


def test_empty_queue_defaults():
    queue = AutodraftQueue.empty("tribe", "Alice")
    assert queue.contestant_ids == []
    assert queue.locked is False


def test_season_from_document():
    season = Season.from_dict({
        "seasonNumber": 48,
        "seasonName": "Survivor 48",
        "contestants": [{"id": 1, "name": "Bianca Roses", "image": "/b.jpg", "eliminated": False}],
    })
    assert season.contestant_ids == [1]
    assert season.get_contestant(1) == Contestant(1, "Bianca Roses", "/b.jpg", False)
    assert season.get_contestant(2) is None


def test_contestant_id_must_be_integer():
    with pytest.raises(InvalidSelectionError):
        Contestant.from_dict({"id": "1", "name": "X"})
