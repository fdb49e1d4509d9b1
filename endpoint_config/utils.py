from __future__ import annotations

# endpoint_config/utils.py


def int_to_hex(value: int | None, byte_count: int) -> str | None:
    """Zero-padded uppercase hex of `value`, 2 digits per byte, no 0x prefix."""
    if value is None:
        return None
    value = int(value)
    if value < 0:
        raise ValueError(f"negative value cannot be rendered as hex: {value}")
    return format(value, "0{}X".format(byte_count * 2))


def int8_to_hex(value: int | None) -> str | None: return int_to_hex(value, 1)


def int16_to_hex(value: int | None) -> str | None: return int_to_hex(value, 2)


def prefixed_hex(hex_str: str | None) -> str | None:
    return None if hex_str is None else "0x" + hex_str


def to_bool(x) -> bool | None:
    # SQLite stores flags as 0/1; NULL stays None
    return None if x is None else bool(x)
