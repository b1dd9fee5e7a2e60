"""Unit tests for the HTTP gateway using httpx.MockTransport."""

import json

import httpx
import pytest

from backoffice.application.interfaces import Join
from backoffice.domain.exceptions import GatewayError
from backoffice.infrastructure.gateway import HttpDataGateway

BASE_URL = "http://backoffice.test/api/v1"


def _gateway(handler) -> HttpDataGateway:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpDataGateway(BASE_URL, http_client=client)


@pytest.mark.asyncio
async def test_select_encodes_columns_joins_filters_and_order():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"id": "p1", "name": "ERP"}])

    gateway = _gateway(handler)
    rows = await gateway.select(
        "projects",
        columns=("id", "name"),
        joins=(Join("client", "entities", "client_id", ("name",)),),
        filters={"status": "active"},
        order_by="created_at",
        descending=True,
    )

    assert rows == [{"id": "p1", "name": "ERP"}]
    (request,) = seen
    assert request.method == "GET"
    assert request.url.path == "/api/v1/relations/projects"
    params = request.url.params
    assert params["select"] == "id,name"
    assert params.get_list("join") == ["client:entities.client_id(name)"]
    assert params.get_list("eq") == ["status:active"]
    assert params["order"] == "created_at"
    assert params["desc"] == "true"


@pytest.mark.asyncio
async def test_mutations_use_the_relation_routes():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.method == "DELETE":
            return httpx.Response(204)
        body = json.loads(request.content)
        rows = body if isinstance(body, list) else [body]
        return httpx.Response(200, json=[{"id": "c1", **row} for row in rows])

    gateway = _gateway(handler)
    inserted = await gateway.insert("cost_centers", [{"code": "CC1", "name": "A"}])
    updated = await gateway.update("cost_centers", {"name": "B"}, "c1")
    await gateway.delete("cost_centers", "c1")

    assert inserted == [{"id": "c1", "code": "CC1", "name": "A"}]
    assert updated == [{"id": "c1", "name": "B"}]
    assert [(r.method, r.url.path) for r in seen] == [
        ("POST", "/api/v1/relations/cost_centers"),
        ("PATCH", "/api/v1/relations/cost_centers/c1"),
        ("DELETE", "/api/v1/relations/cost_centers/c1"),
    ]


@pytest.mark.asyncio
async def test_error_detail_becomes_the_gateway_message():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(409, json={"detail": "duplicate key value violates unique constraint"})

    gateway = _gateway(handler)
    with pytest.raises(GatewayError) as excinfo:
        await gateway.insert("cost_centers", [{"code": "CC1", "name": "A"}])

    assert excinfo.value.status_code == 409
    assert excinfo.value.message == "duplicate key value violates unique constraint"


@pytest.mark.asyncio
async def test_non_json_error_falls_back_to_the_body_text():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="Bad Gateway")

    with pytest.raises(GatewayError) as excinfo:
        await _gateway(handler).select("projects")

    assert excinfo.value.status_code == 502
    assert excinfo.value.message == "Bad Gateway"


@pytest.mark.asyncio
async def test_unreachable_service_is_reported_as_503():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(GatewayError) as excinfo:
        await _gateway(handler).select("projects")

    assert excinfo.value.status_code == 503
    assert "connection refused" in excinfo.value.message
