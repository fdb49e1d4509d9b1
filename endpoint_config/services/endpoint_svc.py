from __future__ import annotations

# endpoint_config/services/endpoint_svc.py
import logging
from typing import Any

from ..db import get_conn, ensure_schema
from ..logs import LogContext
from ..models import Side
from ..repository import endpoint_repo

logger = logging.getLogger(__name__)


def ensure_endpoint_schema():
    with get_conn() as conn:
        ensure_schema(conn)
        conn.commit()


def _parse_side(side: str) -> str:
    try:
        return Side(str(side).lower()).value
    except ValueError:
        raise ValueError(f"invalid_side: {side}") from None


def add_endpoint(
    session_id: int,
    endpoint_identifier: int,
    endpoint_type_ref: int,
    network_identifier: int,
    profile_identifier: int,
    endpoint_version: int,
    device_identifier: int,
    log: LogContext | None = None,
) -> int:
    log = log or LogContext("ENDPOINT_ADD")
    payload = {
        "session_id": session_id,
        "endpoint_identifier": endpoint_identifier,
        "endpoint_type_ref": endpoint_type_ref,
        "network_identifier": network_identifier,
        "profile_identifier": profile_identifier,
        "endpoint_version": endpoint_version,
        "device_identifier": device_identifier,
    }
    log.set_payload(payload)
    try:
        with get_conn() as conn:
            new_id = endpoint_repo.insert_endpoint(
                conn,
                session_id,
                endpoint_identifier,
                endpoint_type_ref,
                network_identifier,
                profile_identifier,
                endpoint_version,
                device_identifier,
            )
            conn.commit()
            ep = endpoint_repo.select_endpoint(conn, new_id)
    except Exception as e:
        log.write("ERROR", str(e))
        raise
    log.set_entity("ENDPOINT", new_id)
    log.set_after(ep.to_dict() if ep else None)
    log.write("OK")
    logger.info("endpoint %s stored (session=%s identifier=%s)", new_id, session_id, endpoint_identifier)
    return new_id


def remove_endpoint(endpoint_id: int, log: LogContext | None = None) -> int:
    log = log or LogContext("ENDPOINT_DELETE")
    log.set_entity("ENDPOINT", endpoint_id)
    try:
        with get_conn() as conn:
            before = endpoint_repo.select_endpoint(conn, endpoint_id)
            deleted = endpoint_repo.delete_endpoint(conn, endpoint_id)
            conn.commit()
    except Exception as e:
        log.write("ERROR", str(e))
        raise
    log.set_before(before.to_dict() if before else None)
    log.set_after({"deleted": deleted})
    log.write("OK")
    logger.info("endpoint %s delete -> %d row(s)", endpoint_id, deleted)
    return deleted


def get_endpoint(endpoint_id: int) -> dict[str, Any] | None:
    with get_conn() as conn:
        ep = endpoint_repo.select_endpoint(conn, endpoint_id)
    return ep.to_dict() if ep else None


def list_session_endpoints(session_id: int) -> list[dict[str, Any]]:
    with get_conn() as conn:
        return [ep.to_dict() for ep in endpoint_repo.select_all_endpoints(conn, session_id)]


def list_clusters(endpoint_type_id: int) -> list[dict[str, Any]]:
    with get_conn() as conn:
        clusters = endpoint_repo.select_endpoint_clusters(conn, endpoint_type_id)
    logger.debug("endpoint type %s: %d enabled cluster(s)", endpoint_type_id, len(clusters))
    return [c.to_dict() for c in clusters]


def list_attributes(endpoint_type_id: int, cluster_id: int, side: str) -> list[dict[str, Any]]:
    side = _parse_side(side)
    with get_conn() as conn:
        attrs = endpoint_repo.select_endpoint_cluster_attributes(conn, cluster_id, side, endpoint_type_id)
    return [a.to_dict() for a in attrs]


def list_commands(endpoint_type_id: int, cluster_id: int) -> list[dict[str, Any]]:
    with get_conn() as conn:
        cmds = endpoint_repo.select_endpoint_cluster_commands(conn, cluster_id, endpoint_type_id)
    return [c.to_dict() for c in cmds]


def set_cluster_enabled(endpoint_type_cluster_id: int, enabled: bool, log: LogContext | None = None) -> int:
    log = log or LogContext("ENDPOINT_TYPE_CLUSTER_ENABLE")
    log.set_entity("ENDPOINT_TYPE_CLUSTER", endpoint_type_cluster_id)
    log.set_payload({"enabled": bool(enabled)})
    try:
        with get_conn() as conn:
            updated = endpoint_repo.update_endpoint_type_cluster_enabled(conn, endpoint_type_cluster_id, enabled)
            conn.commit()
    except Exception as e:
        log.write("ERROR", str(e))
        raise
    log.set_after({"updated": updated})
    log.write("OK")
    return updated


def get_endpoint_type_config(endpoint_type_id: int) -> dict[str, Any]:
    """
    Enabled clusters of an endpoint type, each carrying the attributes for
    its own side and its commands. One connection for the whole read.
    """
    with get_conn() as conn:
        clusters = endpoint_repo.select_endpoint_clusters(conn, endpoint_type_id)
        out: list[dict[str, Any]] = []
        for c in clusters:
            it = c.to_dict()
            attrs = []
            if c.side:
                attrs = endpoint_repo.select_endpoint_cluster_attributes(conn, c.cluster_id, c.side, endpoint_type_id)
            it["attributes"] = [a.to_dict() for a in attrs]
            it["commands"] = [
                cmd.to_dict()
                for cmd in endpoint_repo.select_endpoint_cluster_commands(conn, c.cluster_id, endpoint_type_id)
            ]
            out.append(it)
    return {"endpoint_type_id": endpoint_type_id, "clusters": out}
