from __future__ import annotations

import sqlite3

from fastapi import APIRouter, HTTPException, Query, Body
from pydantic import BaseModel, Field

from ..services.endpoint_svc import (
    add_endpoint,
    remove_endpoint,
    get_endpoint,
    list_session_endpoints,
    list_clusters,
    list_attributes,
    list_commands,
    set_cluster_enabled,
    get_endpoint_type_config,
)

router = APIRouter()


class EndpointCreate(BaseModel):
    session_id: int
    endpoint_identifier: int = Field(..., ge=0, le=0xFFFF)
    endpoint_type_ref: int
    network_identifier: int
    profile_identifier: int = Field(..., ge=0, le=0xFFFF)
    endpoint_version: int
    device_identifier: int


@router.get("/api/endpoint-types/{endpoint_type_id}/clusters")
def api_endpoint_type_clusters(endpoint_type_id: int):
    try:
        return {"items": list_clusters(endpoint_type_id)}
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/api/endpoint-types/{endpoint_type_id}/clusters/{cluster_id}/attributes")
def api_endpoint_type_cluster_attributes(
    endpoint_type_id: int, cluster_id: int, side: str = Query(..., pattern=r"^(client|server)$")
):
    try:
        return {"items": list_attributes(endpoint_type_id, cluster_id, side)}
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/api/endpoint-types/{endpoint_type_id}/clusters/{cluster_id}/commands")
def api_endpoint_type_cluster_commands(endpoint_type_id: int, cluster_id: int):
    try:
        return {"items": list_commands(endpoint_type_id, cluster_id)}
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/api/endpoint-types/{endpoint_type_id}/config")
def api_endpoint_type_config(endpoint_type_id: int):
    try:
        return get_endpoint_type_config(endpoint_type_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/api/endpoint-type-clusters/{endpoint_type_cluster_id}/enabled")
def api_endpoint_type_cluster_enabled(endpoint_type_cluster_id: int, enabled: bool = Body(..., embed=True)):
    try:
        updated = set_cluster_enabled(endpoint_type_cluster_id, enabled)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
    if not updated:
        raise HTTPException(status_code=404, detail="endpoint_type_cluster_not_found")
    return {"message": "ok", "updated": updated}


@router.post("/api/endpoints", status_code=201)
def api_endpoint_create(body: EndpointCreate):
    try:
        new_id = add_endpoint(
            body.session_id,
            body.endpoint_identifier,
            body.endpoint_type_ref,
            body.network_identifier,
            body.profile_identifier,
            body.endpoint_version,
            body.device_identifier,
        )
        return {"message": "ok", "id": new_id}
    except (ValueError, sqlite3.IntegrityError) as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/api/endpoints/{endpoint_id}")
def api_endpoint_get(endpoint_id: int):
    try:
        ep = get_endpoint(endpoint_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
    if ep is None:
        raise HTTPException(status_code=404, detail="endpoint_not_found")
    return ep


@router.delete("/api/endpoints/{endpoint_id}")
def api_endpoint_delete(endpoint_id: int):
    try:
        return {"deleted": remove_endpoint(endpoint_id)}
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/api/sessions/{session_id}/endpoints")
def api_session_endpoints(session_id: int):
    try:
        return {"items": list_session_endpoints(session_id)}
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
