"""Decoding of the power-management IC's battery and charger registers."""

from enum import IntEnum

I2C_ADDRESS = 0x34
REG_PMU_STATUS1 = 0x00
REG_PMU_STATUS2 = 0x01
REG_ADC_ENABLE = 0x30
REG_VBAT_HIGH = 0x34
REG_VBAT_LOW = 0x35
REG_BATTERY_PERCENT = 0xA4
REG_LDO_ON_OFF0 = 0x90
REG_INT_ENABLE2 = 0x41
REG_INT_STATUS2 = 0x49
PWR_KEY_SHORT_BIT = 1 << 1

VBAT_LSB_NUM = 1100
VBAT_LSB_DEN = 1000

_VBUS_GOOD_BIT = 1 << 5
_ALDO_BITS = 0x0F


class ChargeState(IntEnum):
    UNKNOWN = 0
    NOT_CHARGING = 1
    TRICKLE = 2
    PRE_CHARGE = 3
    CC = 4
    CV = 5
    DONE = 6
    DISCHARGING = 7
    STANDBY = 8


_CHARGING_STATUS = {
    0: ChargeState.TRICKLE,
    1: ChargeState.PRE_CHARGE,
    2: ChargeState.CC,
    3: ChargeState.CV,
    4: ChargeState.DONE,
    5: ChargeState.NOT_CHARGING,
}


def _check_bits(name: str, value: int, bits: int) -> int:
    value = int(value)
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{name}={value} is not an unsigned {bits}-bit value")
    return value


def charge_state_from_status(status1: int, status2: int) -> ChargeState:
    """Derive the charge state from the two PMU status registers."""
    _check_bits("status1", status1, 8)
    status2 = _check_bits("status2", status2, 8)
    direction = (status2 >> 5) & 3
    if direction == 2:
        return ChargeState.DISCHARGING
    if direction == 0:
        return ChargeState.STANDBY
    return _CHARGING_STATUS.get(status2 & 7, ChargeState.UNKNOWN)


def battery_mv_from_raw(raw: int) -> int:
    """Convert the 16-bit battery voltage reading to millivolts."""
    raw = _check_bits("raw", raw, 16)
    return raw * VBAT_LSB_NUM // VBAT_LSB_DEN


def battery_percent_from_register(value: int) -> int:
    """Fuel-gauge percentage, capped at 100."""
    return min(_check_bits("value", value, 8), 100)


def vbus_present(status1: int) -> bool:
    """True if the status register reports USB power as good."""
    return bool(_check_bits("status1", status1, 8) & _VBUS_GOOD_BIT)


def apply_aldo_mask(current: int, enable_mask: int, disable_mask: int) -> int:
    """New LDO on/off register value: clear ``disable_mask``, set ALDO bits of ``enable_mask``."""
    current = _check_bits("current", current, 8)
    enable_mask = _check_bits("enable_mask", enable_mask, 8)
    disable_mask = _check_bits("disable_mask", disable_mask, 8)
    return (current & ~disable_mask & 0xFF) | (enable_mask & _ALDO_BITS)