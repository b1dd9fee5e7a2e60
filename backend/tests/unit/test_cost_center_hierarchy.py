"""Unit tests for the cost center parent picker and its cycle prevention."""

import pytest

from backoffice.application.services import CostCenterManager, ErrorKind


@pytest.fixture
def hierarchy(fake_gateway):
    fake_gateway.seed(
        "cost_centers",
        {"id": "a", "code": "CC01", "name": "Holding"},
        {"id": "b", "code": "CC02", "name": "Operations", "parent_id": "a"},
        {"id": "c", "code": "CC03", "name": "Field Team", "parent_id": "b"},
        {"id": "d", "code": "CC04", "name": "Marketing"},
    )
    return fake_gateway


@pytest.mark.asyncio
async def test_parent_label_comes_from_the_joined_row(hierarchy):
    manager = CostCenterManager(hierarchy)
    await manager.load()

    labels = {cc.id: cc.parent_label for cc in manager.records}
    assert labels == {"a": None, "b": "CC01 - Holding", "c": "CC02 - Operations", "d": None}


@pytest.mark.asyncio
async def test_create_form_offers_every_cost_center(hierarchy):
    manager = CostCenterManager(hierarchy)
    await manager.load()
    manager.open_create()

    assert [o.id for o in manager.parent_options()] == ["a", "b", "c", "d"]


@pytest.mark.asyncio
async def test_edit_form_excludes_self_and_descendants(hierarchy):
    manager = CostCenterManager(hierarchy)
    await manager.load()
    root = next(cc for cc in manager.records if cc.id == "a")

    manager.open_edit(root)

    options = manager.parent_options()
    assert [(o.id, o.label) for o in options] == [("d", "CC04 - Marketing")]


@pytest.mark.asyncio
async def test_choosing_a_descendant_as_parent_is_rejected(hierarchy):
    manager = CostCenterManager(hierarchy)
    await manager.load()
    root = next(cc for cc in manager.records if cc.id == "a")
    manager.open_edit(root)
    manager.update_draft(parent_id="c")

    result = await manager.submit()

    assert result.kind is ErrorKind.VALIDATION
    assert "parent_id" in result.error
    assert hierarchy.mutations() == []


@pytest.mark.asyncio
async def test_moving_a_leaf_under_a_sibling_branch_is_saved(hierarchy):
    manager = CostCenterManager(hierarchy)
    await manager.load()
    leaf = next(cc for cc in manager.records if cc.id == "c")
    manager.open_edit(leaf)
    manager.update_draft(parent_id="d")

    result = await manager.submit()

    assert result.ok
    moved = next(cc for cc in manager.records if cc.id == "c")
    assert moved.parent_label == "CC04 - Marketing"


@pytest.mark.asyncio
async def test_clearing_the_parent_makes_a_root(hierarchy):
    manager = CostCenterManager(hierarchy)
    await manager.load()
    manager.open_edit(next(cc for cc in manager.records if cc.id == "b"))
    manager.update_draft(parent_id="")

    assert (await manager.submit()).ok
    assert hierarchy.mutations()[0][2][1]["parent_id"] is None
