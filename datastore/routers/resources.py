from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Request, Response

from datastore.engines.base import DataEngine

router = APIRouter(prefix="/resources", tags=["resources"])


def _get_engine(request: Request) -> DataEngine:
    engine = getattr(getattr(request.app, "state", None), "engine", None)
    if engine is None:
        raise RuntimeError("Data engine nao configurado")
    return engine


@router.get("")
async def list_resources(request: Request):
    engine = _get_engine(request)
    pairs = await engine.get()
    return {"resources": [{"id": resource_id, "data": data} for resource_id, data in pairs]}


@router.get("/{resource_id}")
async def read_resource(resource_id: str, request: Request):
    engine = _get_engine(request)
    return await engine.get(resource_id)


@router.put("/{resource_id}", status_code=201)
async def create_resource(resource_id: str, request: Request, resource_data: Any = Body(...)):
    engine = _get_engine(request)
    await engine.put(resource_id, resource_data)
    return {"id": resource_id}


@router.delete("/{resource_id}", status_code=204)
async def delete_resource(resource_id: str, request: Request):
    engine = _get_engine(request)
    await engine.delete(resource_id)
    return Response(status_code=204)


@router.get("/{resource_id}/exists")
async def resource_exists(resource_id: str, request: Request):
    engine = _get_engine(request)
    return {"exists": await engine.has(resource_id)}
