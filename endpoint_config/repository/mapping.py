from __future__ import annotations

from sqlite3 import Row
from typing import Optional

from ..models import Endpoint


def map_endpoint(row: Optional[Row]) -> Optional[Endpoint]:
    if row is None:
        return None
    return Endpoint(
        endpoint_id=row["ENDPOINT_ID"],
        session_ref=row["SESSION_REF"],
        endpoint_identifier=row["ENDPOINT_IDENTIFIER"],
        endpoint_type_ref=row["ENDPOINT_TYPE_REF"],
        profile=row["PROFILE"],
        network_identifier=row["NETWORK_IDENTIFIER"],
        endpoint_version=row["DEVICE_VERSION"],
        device_identifier=row["DEVICE_IDENTIFIER"],
    )
