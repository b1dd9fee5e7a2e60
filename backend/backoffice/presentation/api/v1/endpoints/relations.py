"""Relation gateway endpoints — select/insert/update/delete per relation name."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from backoffice.application.interfaces import DataGateway, Join, Row, parse_filter
from backoffice.domain.exceptions import GatewayError
from backoffice.infrastructure.dependencies import get_data_gateway

router = APIRouter(prefix="/relations", tags=["Relations"])


def _http_error(exc: GatewayError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.message)


def _bad_request(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


@router.get("/{relation}", response_model=list[dict[str, Any]])
async def select_rows(
    relation: str,
    select: str | None = Query(None, description="Comma-separated columns to return"),
    join: list[str] = Query(default=[], description="alias:relation.foreign_key(col,col)"),
    eq: list[str] = Query(default=[], description="Equality filter column:value"),
    order: str | None = Query(None, description="Column to order by"),
    desc: bool = Query(False, description="Descending order"),
    gateway: DataGateway = Depends(get_data_gateway),
) -> list[Row]:
    """Rows of a relation, optionally filtered, ordered and joined."""
    try:
        joins = tuple(Join.parse(item) for item in join)
        filters = dict(parse_filter(item) for item in eq)
    except ValueError as e:
        raise _bad_request(str(e))
    columns = tuple(c.strip() for c in select.split(",") if c.strip()) if select else None

    try:
        return await gateway.select(
            relation,
            columns=columns,
            joins=joins,
            filters=filters,
            order_by=order,
            descending=desc,
        )
    except GatewayError as e:
        raise _http_error(e)


@router.post(
    "/{relation}",
    response_model=list[dict[str, Any]],
    status_code=status.HTTP_201_CREATED,
)
async def insert_rows(
    relation: str,
    rows: list[dict[str, Any]] = Body(...),
    gateway: DataGateway = Depends(get_data_gateway),
) -> list[Row]:
    """Insert rows and return them as stored."""
    if not rows:
        raise _bad_request("Nothing to insert")
    try:
        return await gateway.insert(relation, rows)
    except GatewayError as e:
        raise _http_error(e)


@router.patch("/{relation}/{record_id}", response_model=list[dict[str, Any]])
async def update_row(
    relation: str,
    record_id: str,
    patch: dict[str, Any] = Body(...),
    gateway: DataGateway = Depends(get_data_gateway),
) -> list[Row]:
    """Apply a partial update to one row by id."""
    try:
        return await gateway.update(relation, patch, record_id)
    except GatewayError as e:
        raise _http_error(e)


@router.delete("/{relation}/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_row(
    relation: str,
    record_id: str,
    gateway: DataGateway = Depends(get_data_gateway),
) -> None:
    """Delete one row by id."""
    try:
        await gateway.delete(relation, record_id)
    except GatewayError as e:
        raise _http_error(e)
