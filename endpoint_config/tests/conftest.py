import os
import sys
import sqlite3
import pytest
from pathlib import Path

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


_TABLES = [
    "ENDPOINT",
    "ENDPOINT_TYPE_COMMAND",
    "ENDPOINT_TYPE_ATTRIBUTE",
    "ENDPOINT_TYPE_CLUSTER",
    "COMMAND",
    "ATTRIBUTE",
    "ENDPOINT_TYPE",
    "CLUSTER",
    "SESSION",
    "operation_log",
]


@pytest.fixture(scope="session")
def tmp_db_path(tmp_path_factory):
    path = tmp_path_factory.mktemp("db") / "endpoint_config_test.db"
    # Point the package at this temp DB
    os.environ["ENDPOINT_DB_PATH"] = str(path)
    from endpoint_config.db import SCHEMA_PATH
    from endpoint_config.logs import DDL
    conn = sqlite3.connect(str(path))
    try:
        conn.executescript(SCHEMA_PATH.read_text(encoding="utf-8"))
        conn.executescript(DDL)
        conn.commit()
    finally:
        conn.close()
    return str(path)


@pytest.fixture()
def client(tmp_db_path):
    from endpoint_config.api import app
    from fastapi.testclient import TestClient
    return TestClient(app)


@pytest.fixture(autouse=True)
def _clean_db(tmp_db_path):
    # Only ever wipe the temp DB
    assert os.environ.get("ENDPOINT_DB_PATH") == tmp_db_path, "Refusing to clean non-temp DB"
    conn = sqlite3.connect(tmp_db_path)
    try:
        for t in _TABLES:
            conn.execute(f"DELETE FROM {t}")
        conn.execute("DELETE FROM sqlite_sequence")
        conn.commit()
    finally:
        conn.close()
    yield


@pytest.fixture()
def seeded(tmp_db_path):
    """
    Session 1 with two endpoint types.

    Endpoint type 1 (Light):
      Basic 0x0000 server enabled, On/Off 0x0006 server enabled,
      Level 0x0008 server disabled, vendor 0xFC00 server enabled.
    Endpoint type 2 (Switch):
      On/Off 0x0006 client enabled.
    """
    from endpoint_config.db import get_conn
    with get_conn() as conn:
        conn.execute("INSERT INTO SESSION (SESSION_ID, SESSION_KEY) VALUES (1, 'session-1')")
        conn.executemany(
            "INSERT INTO ENDPOINT_TYPE (ENDPOINT_TYPE_ID, SESSION_REF, NAME) VALUES (?, 1, ?)",
            [(1, "Light"), (2, "Switch")],
        )
        conn.executemany(
            "INSERT INTO CLUSTER (CLUSTER_ID, CODE, MANUFACTURER_CODE, NAME) VALUES (?, ?, ?, ?)",
            [
                (1, 0x0006, None, "On/off"),
                (2, 0x0000, None, "Basic"),
                (3, 0x0008, None, "Level Control"),
                (4, 0xFC00, 0x1002, "Sample Mfg Specific Cluster"),
            ],
        )
        conn.executemany(
            "INSERT INTO ENDPOINT_TYPE_CLUSTER "
            "(ENDPOINT_TYPE_CLUSTER_ID, ENDPOINT_TYPE_REF, CLUSTER_REF, SIDE, ENABLED) VALUES (?, ?, ?, ?, ?)",
            [
                (1, 1, 1, "server", 1),
                (2, 1, 2, "server", 1),
                (3, 1, 3, "server", 0),
                (4, 2, 1, "client", 1),
                (5, 1, 4, "server", 1),
            ],
        )
        conn.executemany(
            "INSERT INTO ATTRIBUTE (ATTRIBUTE_ID, CLUSTER_REF, CODE, MANUFACTURER_CODE, NAME, TYPE, SIDE, "
            "DEFINE, MIN, MAX, MIN_LENGTH, MAX_LENGTH, IS_WRITABLE, ARRAY_TYPE) "
            "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
            [
                (1, 1, 0x0000, None, "on/off", "BOOLEAN", "server", "ON_OFF", None, None, None, None, 0, None),
                (2, 1, 0x4000, None, "global scene control", "BOOLEAN", "server", "GLOBAL_SCENE_CONTROL",
                 None, None, None, None, 0, None),
                (3, 1, 0x0001, 0x1002, "sample mfg specific attribute", "INT8U", "server", "SAMPLE_MFG",
                 "0x00", "0xFE", None, None, 1, None),
                (4, 1, 0x0005, None, "client only", "INT16U", "client", "CLIENT_ONLY", None, None, None, None, 0,
                 None),
                (5, None, 0xFFFD, None, "cluster revision", "INT16U", "server", "CLUSTER_REVISION_SERVER",
                 None, None, None, None, 0, None),
                (6, 1, 0x4001, None, "on time", "INT16U", "server", "ON_TIME", None, None, None, None, 1, None),
                (7, 2, 0x0005, None, "model identifier", "CHAR_STRING", "server", "MODEL_IDENTIFIER",
                 None, None, 0, 32, 0, None),
            ],
        )
        conn.executemany(
            "INSERT INTO ENDPOINT_TYPE_ATTRIBUTE (ENDPOINT_TYPE_REF, ENDPOINT_TYPE_CLUSTER_REF, ATTRIBUTE_REF, "
            "INCLUDED, STORAGE_OPTION, SINGLETON, BOUNDED, DEFAULT_VALUE, INCLUDED_REPORTABLE, "
            "MIN_INTERVAL, MAX_INTERVAL, REPORTABLE_CHANGE) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
            [
                (1, 1, 1, 1, "RAM", 0, 0, "0x00", 1, 1, 10, 0),
                (1, 1, 2, 0, "RAM", 0, 0, "0x01", 0, 1, 65534, 0),
                (1, 1, 3, 1, "NVM", 1, 1, "0x05", 0, 1, 65534, 0),
                (1, 1, 5, 1, "RAM", 0, 0, "4", 0, 1, 65534, 0),
                (1, 2, 5, 1, "External", 0, 0, "2", 0, 1, 65534, 0),
                (1, 2, 7, 1, "RAM", 1, 0, "Light", 0, 1, 65534, 0),
                (2, 4, 4, 1, "RAM", 0, 0, "0x0000", 0, 1, 65534, 0),
            ],
        )
        conn.executemany(
            "INSERT INTO COMMAND (COMMAND_ID, CLUSTER_REF, CODE, MANUFACTURER_CODE, NAME, SOURCE, IS_OPTIONAL) "
            "VALUES (?, ?, ?, ?, ?, ?, ?)",
            [
                (1, 1, 0x02, None, "Toggle", "client", 0),
                (2, 1, 0x00, None, "Off", "client", 0),
                (3, 1, 0x0A, 0x1002, "SampleMfgCommand", "client", 1),
                (4, 1, 0x01, None, "On", "client", 0),
                (5, 2, 0x00, None, "ResetToFactoryDefaults", "client", 1),
            ],
        )
        conn.executemany(
            "INSERT INTO ENDPOINT_TYPE_COMMAND (ENDPOINT_TYPE_REF, COMMAND_REF, INCOMING, OUTGOING) "
            "VALUES (?, ?, ?, ?)",
            [
                (1, 1, 1, 0),
                (1, 2, 1, 0),
                (1, 3, 1, 1),
                (2, 4, 0, 1),
                (1, 5, 1, 0),
            ],
        )
        conn.commit()
    return {
        "session_id": 1,
        "light_type_id": 1,
        "switch_type_id": 2,
        "on_off_cluster_id": 1,
        "basic_cluster_id": 2,
        "level_cluster_id": 3,
        "mfg_cluster_id": 4,
    }
