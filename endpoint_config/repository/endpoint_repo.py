"""
Endpoint configuration queries.

Each function issues one parameterized statement against the caller's
connection and maps the rows into record types. Nothing here commits.
"""
from __future__ import annotations

from sqlite3 import Connection
from typing import List, Optional

from ..models import Endpoint, EndpointCluster, EndpointClusterAttribute, EndpointClusterCommand
from ..utils import int8_to_hex, int16_to_hex, prefixed_hex, to_bool
from .db_api import db_all, db_get, db_insert, db_remove, db_update
from .mapping import map_endpoint

_ENDPOINT_COLUMNS = """
  ENDPOINT_ID,
  SESSION_REF,
  ENDPOINT_IDENTIFIER,
  ENDPOINT_TYPE_REF,
  PROFILE,
  NETWORK_IDENTIFIER,
  DEVICE_VERSION,
  DEVICE_IDENTIFIER
"""


def select_endpoint_clusters(conn: Connection, endpoint_type_id: int) -> List[EndpointCluster]:
    """Enabled clusters on an endpoint type, ordered by cluster code."""
    rows = db_all(
        conn,
        """
SELECT
  C.CLUSTER_ID,
  EC.ENDPOINT_TYPE_CLUSTER_ID,
  EC.ENDPOINT_TYPE_REF,
  C.CODE,
  C.NAME,
  C.MANUFACTURER_CODE,
  EC.SIDE
FROM
  CLUSTER AS C
LEFT JOIN
  ENDPOINT_TYPE_CLUSTER AS EC
ON
  C.CLUSTER_ID = EC.CLUSTER_REF
WHERE
  EC.ENABLED = 1
  AND EC.ENDPOINT_TYPE_REF = ?
ORDER BY C.CODE
""",
        (endpoint_type_id,),
    )
    return [
        EndpointCluster(
            cluster_id=r["CLUSTER_ID"],
            endpoint_type_id=r["ENDPOINT_TYPE_REF"],
            endpoint_type_cluster_id=r["ENDPOINT_TYPE_CLUSTER_ID"],
            hex_code=prefixed_hex(int16_to_hex(r["CODE"])),
            manufacturer_code=r["MANUFACTURER_CODE"],
            code=r["CODE"],
            name=r["NAME"],
            side=r["SIDE"],
        )
        for r in rows
    ]


def select_endpoint_cluster_attributes(
    conn: Connection, cluster_id: int, side: str, endpoint_type_id: int
) -> List[EndpointClusterAttribute]:
    """
    Attributes of a cluster (plus global attributes with no cluster) on the
    given side, merged with their per-endpoint-type settings.

    The endpoint-type conditions sit in the WHERE clause, so an attribute
    without a matching ENDPOINT_TYPE_ATTRIBUTE row for the exact
    (cluster, side, endpoint type) association is not returned.
    """
    rows = db_all(
        conn,
        """
SELECT
  A.ATTRIBUTE_ID,
  A.CODE,
  A.NAME,
  A.SIDE,
  A.TYPE,
  A.ARRAY_TYPE,
  A.MIN_LENGTH,
  A.MAX_LENGTH,
  A.MIN,
  A.MAX,
  A.MANUFACTURER_CODE,
  A.IS_WRITABLE,
  A.DEFINE,
  EA.STORAGE_OPTION,
  EA.SINGLETON,
  EA.BOUNDED,
  EA.INCLUDED,
  EA.DEFAULT_VALUE,
  EA.INCLUDED_REPORTABLE,
  EA.MIN_INTERVAL,
  EA.MAX_INTERVAL,
  EA.REPORTABLE_CHANGE
FROM
  ATTRIBUTE AS A
LEFT JOIN
  ENDPOINT_TYPE_ATTRIBUTE AS EA
ON
  A.ATTRIBUTE_ID = EA.ATTRIBUTE_REF
WHERE
  (A.CLUSTER_REF = ? OR A.CLUSTER_REF IS NULL)
  AND A.SIDE = ?
  AND (EA.ENDPOINT_TYPE_REF = ? AND (EA.ENDPOINT_TYPE_CLUSTER_REF =
    (SELECT ENDPOINT_TYPE_CLUSTER_ID
     FROM ENDPOINT_TYPE_CLUSTER
     WHERE CLUSTER_REF = ? AND SIDE = ? AND ENDPOINT_TYPE_REF = ?) ))
ORDER BY A.MANUFACTURER_CODE, A.CODE
""",
        (cluster_id, side, endpoint_type_id, cluster_id, side, endpoint_type_id),
    )
    return [
        EndpointClusterAttribute(
            id=r["ATTRIBUTE_ID"],
            cluster_id=cluster_id,
            code=r["CODE"],
            manufacturer_code=r["MANUFACTURER_CODE"],
            hex_code=prefixed_hex(int16_to_hex(r["CODE"])),
            name=r["NAME"],
            side=r["SIDE"],
            type=r["TYPE"],
            entry_type=r["ARRAY_TYPE"],
            min_length=r["MIN_LENGTH"],
            max_length=r["MAX_LENGTH"],
            min=r["MIN"],
            max=r["MAX"],
            storage=r["STORAGE_OPTION"],
            is_included=to_bool(r["INCLUDED"]),
            is_singleton=to_bool(r["SINGLETON"]),
            is_bound=to_bool(r["BOUNDED"]),
            is_writable=to_bool(r["IS_WRITABLE"]),
            default_value=r["DEFAULT_VALUE"],
            included_reportable=to_bool(r["INCLUDED_REPORTABLE"]),
            min_interval=r["MIN_INTERVAL"],
            max_interval=r["MAX_INTERVAL"],
            reportable_change=r["REPORTABLE_CHANGE"],
            define=r["DEFINE"],
        )
        for r in rows
    ]


def select_endpoint_cluster_commands(
    conn: Connection, cluster_id: int, endpoint_type_id: int
) -> List[EndpointClusterCommand]:
    rows = db_all(
        conn,
        """
SELECT
  C.COMMAND_ID,
  C.NAME,
  C.CODE,
  C.SOURCE,
  C.MANUFACTURER_CODE,
  C.IS_OPTIONAL,
  EC.INCOMING,
  EC.OUTGOING
FROM
  COMMAND AS C
LEFT JOIN
  ENDPOINT_TYPE_COMMAND AS EC
ON
  C.COMMAND_ID = EC.COMMAND_REF
WHERE
  C.CLUSTER_REF = ?
  AND EC.ENDPOINT_TYPE_REF = ?
ORDER BY C.CODE
""",
        (cluster_id, endpoint_type_id),
    )
    return [
        EndpointClusterCommand(
            id=r["COMMAND_ID"],
            name=r["NAME"],
            code=r["CODE"],
            manufacturer_code=r["MANUFACTURER_CODE"],
            is_optional=to_bool(r["IS_OPTIONAL"]),
            source=r["SOURCE"],
            is_incoming=to_bool(r["INCOMING"]),
            is_outgoing=to_bool(r["OUTGOING"]),
            hex_code=prefixed_hex(int8_to_hex(r["CODE"])),
        )
        for r in rows
    ]


def delete_endpoint(conn: Connection, endpoint_id: int) -> int:
    """Returns the number of rows deleted, 0 when the id does not exist."""
    return db_remove(conn, "DELETE FROM ENDPOINT WHERE ENDPOINT_ID = ?", (endpoint_id,))


def insert_endpoint(
    conn: Connection,
    session_id: int,
    endpoint_identifier: int,
    endpoint_type_ref: int,
    network_identifier: int,
    profile_identifier: int,
    endpoint_version: int,
    device_identifier: int,
) -> int:
    """
    Insert an endpoint, replacing any row with the same
    (SESSION_REF, ENDPOINT_IDENTIFIER). Returns the new ENDPOINT_ID.
    """
    return db_insert(
        conn,
        """
INSERT OR REPLACE
INTO ENDPOINT (
  SESSION_REF,
  ENDPOINT_IDENTIFIER,
  ENDPOINT_TYPE_REF,
  NETWORK_IDENTIFIER,
  DEVICE_VERSION,
  DEVICE_IDENTIFIER,
  PROFILE
) VALUES ( ?, ?, ?, ?, ?, ?, ?)""",
        (
            session_id,
            endpoint_identifier,
            endpoint_type_ref,
            network_identifier,
            endpoint_version,
            device_identifier,
            profile_identifier,
        ),
    )


def select_endpoint(conn: Connection, endpoint_id: int) -> Optional[Endpoint]:
    row = db_get(
        conn,
        "SELECT" + _ENDPOINT_COLUMNS + "FROM ENDPOINT\nWHERE ENDPOINT_ID = ?",
        (endpoint_id,),
    )
    return map_endpoint(row)


def select_all_endpoints(conn: Connection, session_id: int) -> List[Endpoint]:
    rows = db_all(
        conn,
        "SELECT" + _ENDPOINT_COLUMNS + "FROM ENDPOINT\nWHERE SESSION_REF = ?\nORDER BY ENDPOINT_IDENTIFIER",
        (session_id,),
    )
    return [map_endpoint(r) for r in rows]


def update_endpoint_type_cluster_enabled(conn: Connection, endpoint_type_cluster_id: int, enabled: bool) -> int:
    return db_update(
        conn,
        "UPDATE ENDPOINT_TYPE_CLUSTER SET ENABLED = ? WHERE ENDPOINT_TYPE_CLUSTER_ID = ?",
        (1 if enabled else 0, endpoint_type_cluster_id),
    )
