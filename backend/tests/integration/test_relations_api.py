"""Integration tests for the relation endpoints and the HTTP gateway against them."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from backoffice.application.services import CostCenterManager, ErrorKind, ManagerState
from backoffice.infrastructure.dependencies import get_data_gateway
from backoffice.infrastructure.gateway import HttpDataGateway
from backoffice.main import app


@pytest_asyncio.fixture
async def client(db_gateway):
    app.dependency_overrides[get_data_gateway] = lambda: db_gateway
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_insert_then_select(client):
    response = await client.post(
        "/api/v1/relations/cost_centers", json=[{"code": "CC001", "name": "Finance"}]
    )
    assert response.status_code == 201
    created = response.json()[0]

    response = await client.get(
        "/api/v1/relations/cost_centers",
        params=[
            ("select", "id,code"),
            ("join", "parent:cost_centers.parent_id(code,name)"),
            ("eq", "status:active"),
            ("order", "code"),
        ],
    )

    assert response.status_code == 200
    assert response.json() == [{"id": created["id"], "code": "CC001", "parent": None}]


@pytest.mark.asyncio
async def test_patch_and_delete(client):
    created = (
        await client.post("/api/v1/relations/cost_centers", json=[{"code": "CC001", "name": "Finance"}])
    ).json()[0]
    url = f"/api/v1/relations/cost_centers/{created['id']}"

    patched = await client.patch(url, json={"name": "Treasury"})
    deleted = await client.delete(url)
    remaining = await client.get("/api/v1/relations/cost_centers")

    assert patched.status_code == 200
    assert patched.json()[0]["name"] == "Treasury"
    assert deleted.status_code == 204
    assert remaining.json() == []


@pytest.mark.asyncio
async def test_gateway_errors_map_to_status_codes(client):
    await client.post("/api/v1/relations/cost_centers", json=[{"code": "CC001", "name": "Finance"}])

    duplicate = await client.post(
        "/api/v1/relations/cost_centers", json=[{"code": "CC001", "name": "Again"}]
    )
    unknown = await client.get("/api/v1/relations/invoices")
    missing = await client.patch("/api/v1/relations/cost_centers/missing", json={"name": "X"})
    bad_column = await client.get("/api/v1/relations/cost_centers", params={"eq": "colour:red"})

    assert duplicate.status_code == 409
    assert unknown.status_code == 404
    assert missing.status_code == 404
    assert bad_column.status_code == 400
    assert "colour" in bad_column.json()["detail"]


@pytest.mark.asyncio
async def test_malformed_query_parameters_are_bad_requests(client):
    bad_join = await client.get("/api/v1/relations/projects", params={"join": "client=entities"})
    bad_filter = await client.get("/api/v1/relations/projects", params={"eq": "status"})
    empty_insert = await client.post("/api/v1/relations/projects", json=[])

    assert bad_join.status_code == 400
    assert bad_filter.status_code == 400
    assert empty_insert.status_code == 400


@pytest.mark.asyncio
async def test_manager_round_trip_over_http(client):
    gateway = HttpDataGateway("http://test/api/v1", http_client=client)
    manager = CostCenterManager(gateway)
    assert (await manager.load()).ok

    manager.open_create()
    manager.update_draft(code="CC100", name="Test")
    created = await manager.submit()
    assert created.ok
    assert [(cc.code, cc.name) for cc in manager.records] == [("CC100", "Test")]

    manager.open_create()
    manager.update_draft(code="CC101", name="Child", parent_id=created.value.id)
    assert (await manager.submit()).ok
    child = next(cc for cc in manager.records if cc.code == "CC101")
    assert child.parent_label == "CC100 - Test"

    manager.open_create()
    manager.update_draft(code="CC100", name="Duplicate")
    conflict = await manager.submit()
    assert conflict.kind is ErrorKind.MUTATION
    assert manager.state is ManagerState.FORM_CREATE
    manager.cancel_form()

    parent = next(cc for cc in manager.records if cc.code == "CC100")
    blocked = await manager.delete(parent.id, lambda prompt: True)
    assert blocked.kind is ErrorKind.MUTATION
    assert len(manager.records) == 2

    assert (await manager.delete(child.id, lambda prompt: True)).ok
    assert [cc.code for cc in manager.records] == ["CC100"]
