"""Real-time clock register encoding (BCD date and time)."""

from dataclasses import dataclass

I2C_ADDRESS = 0x51
REG_SECONDS = 0x04
OSCILLATOR_STOPPED_BIT = 0x80
REGISTER_COUNT = 7
BASE_YEAR = 2000


class OscillatorStoppedError(Exception):
    """The clock was stopped, so the time it holds cannot be trusted."""


@dataclass
class DateTime:
    """A calendar date and wall-clock time; defaults to 2025-01-01 00:00:00."""

    year: int = 2025
    month: int = 1
    day: int = 1
    hour: int = 0
    minute: int = 0
    second: int = 0


def bcd_to_byte(value: int) -> int:
    """Decode one packed-BCD byte."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{value} is not a byte")
    return (value >> 4) * 10 + (value & 0x0F)


def byte_to_bcd(value: int) -> int:
    """Encode 0-99 as one packed-BCD byte."""
    if not 0 <= value <= 99:
        raise ValueError(f"{value} cannot be encoded as two BCD digits")
    return ((value // 10) << 4) | (value % 10)


def decode_registers(data: bytes) -> DateTime:
    """Decode the register block read from ``REG_SECONDS`` onward."""
    if len(data) < REGISTER_COUNT:
        raise ValueError(f"need {REGISTER_COUNT} register bytes, got {len(data)}")
    if data[0] & OSCILLATOR_STOPPED_BIT:
        raise OscillatorStoppedError("clock oscillator was stopped")
    return DateTime(
        year=bcd_to_byte(data[5]) + BASE_YEAR,
        month=bcd_to_byte(data[4] & 0x1F),
        day=bcd_to_byte(data[3] & 0x3F),
        hour=bcd_to_byte(data[2] & 0x3F),
        minute=bcd_to_byte(data[1] & 0x7F),
        second=bcd_to_byte(data[0] & 0x7F),
    )


def encode_registers(dt: DateTime) -> bytes:
    """Encode ``dt`` as the register block written at ``REG_SECONDS``.

    Fields are wrapped or clamped into range rather than rejected.
    """
    year = (dt.year - BASE_YEAR if dt.year >= BASE_YEAR else 0) % 100
    return bytes((
        byte_to_bcd(dt.second % 60),
        byte_to_bcd(dt.minute % 60),
        byte_to_bcd(dt.hour % 24),
        byte_to_bcd(min(max(dt.day, 1), 31)),
        byte_to_bcd(min(max(dt.month, 1), 12)),
        byte_to_bcd(year),
        0,
    ))