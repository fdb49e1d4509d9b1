"""Record types returned by the repository layer.

Fields sourced from outer-joined association tables are Optional and are
never defaulted: a missing association row shows up as None.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional


class Side(str, Enum):
    CLIENT = "client"
    SERVER = "server"


class _Record:
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class EndpointCluster(_Record):
    cluster_id: int
    endpoint_type_id: int
    endpoint_type_cluster_id: int
    hex_code: str
    manufacturer_code: Optional[int]
    code: int
    name: str
    side: Optional[str]


@dataclass(frozen=True)
class EndpointClusterAttribute(_Record):
    id: int
    cluster_id: int
    code: int
    manufacturer_code: Optional[int]
    hex_code: str
    name: str
    side: str
    type: Optional[str]
    entry_type: Optional[str]
    min_length: Optional[int]
    max_length: Optional[int]
    min: Optional[str]
    max: Optional[str]
    storage: Optional[str]
    is_included: Optional[bool]
    is_singleton: Optional[bool]
    is_bound: Optional[bool]
    is_writable: Optional[bool]
    default_value: Optional[str]
    included_reportable: Optional[bool]
    min_interval: Optional[int]
    max_interval: Optional[int]
    reportable_change: Optional[int]
    define: Optional[str]


@dataclass(frozen=True)
class EndpointClusterCommand(_Record):
    id: int
    name: str
    code: int
    manufacturer_code: Optional[int]
    is_optional: Optional[bool]
    source: Optional[str]
    is_incoming: Optional[bool]
    is_outgoing: Optional[bool]
    hex_code: str


@dataclass(frozen=True)
class Endpoint(_Record):
    endpoint_id: int
    session_ref: int
    endpoint_identifier: int
    endpoint_type_ref: int
    profile: Optional[int]
    network_identifier: Optional[int]
    endpoint_version: Optional[int]
    device_identifier: Optional[int]
