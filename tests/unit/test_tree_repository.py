"""Tests for ProjectTreeRepository over the in-memory collection."""

import pytest

from src.projectree.repositories import ProjectTreeRepository

pytestmark = pytest.mark.unit


@pytest.fixture
def repo(tree_collection) -> ProjectTreeRepository:
    return ProjectTreeRepository(tree_collection)


async def test_empty_tree_shape(repo):
    assert await repo.insert_empty(5) is True

    assert await repo.get(5) == {"project_id": 5, "root": {"name": "root", "children": []}}


async def test_get_hides_internal_id(repo, tree_collection):
    await repo.insert_empty(5)

    assert "_id" in tree_collection.documents[0]
    assert "_id" not in await repo.get(5)


async def test_get_absent(repo):
    assert await repo.get(5) is None


async def test_insert_empty_keeps_existing_tree(repo, tree_collection):
    await tree_collection.insert_one(
        {"project_id": 5, "root": {"name": "root", "children": [{"name": "src", "children": []}]}}
    )

    assert await repo.insert_empty(5) is False

    assert len(tree_collection.documents) == 1
    assert (await repo.get(5))["root"]["children"] == [{"name": "src", "children": []}]


async def test_insert_empty_twice_writes_one_tree(repo, tree_collection):
    assert await repo.insert_empty(5) is True
    assert await repo.insert_empty(5) is False

    assert tree_collection.project_ids() == {5}
    assert len(tree_collection.documents) == 1


async def test_delete_counts(repo):
    await repo.insert_empty(5)

    assert await repo.delete(5) == 1
    assert await repo.delete(5) == 0


async def test_list_project_ids(repo):
    await repo.insert_empty(1)
    await repo.insert_empty(2)

    assert await repo.list_project_ids() == {1, 2}
