"""Single cable routing (EN 50494 / EN 50607) programming via DiSEqC."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from .diseqc import DiseqcError, Frontend, SecTone, SecVoltage
from .models import LnbType, Polarization, ScrConfig, Transponder

logger = logging.getLogger(__name__)

_R = TypeVar("_R")

# Settle time after switching 13 V -> 18 V and after the command, in seconds.
_SCR_SETTLE = 0.005

# Intermediate frequency range an SCR user band accepts, in MHz.
IF_MIN = 950
IF_MAX = 2150

# fVCO value that switches the user band off (EN 50494).
_VCO_OFF = 1400


def _checked(description: str, action: Callable[..., _R], *args: object) -> _R:
    try:
        return action(*args)
    except OSError as exc:
        logger.info("%s failed.", description)
        raise DiseqcError(f"{description} failed") from exc


def _in_if_range(f_if: int) -> bool:
    return IF_MIN <= f_if <= IF_MAX


def scr_prepare_en50494(f_if: int, config: ScrConfig, hiband: bool, horizontal: bool) -> bytes:
    """Build the EN 50494 ODU_Channel_change message and set ``config.offset``.

    ``f_if`` is the intermediate frequency in MHz. After tuning, the receiver
    should tune to the user band frequency plus ``config.offset``.
    """
    f_vco = _VCO_OFF
    if _in_if_range(f_if):
        f_vco = (f_if + config.user_frequency) & 0xFFFF

    msg = bytearray((0xE0, 0x10, 0x5A, 0x00, 0x00, 0x00))
    length = 5
    if config.has_pin:
        length = 6
        msg[2] = 0x5C
        msg[5] = config.pin & 0xFF

    msg[3] = (
        (config.slot << 5)
        | (int(hiband) << 2)
        | (int(horizontal) << 3)
        | (config.pos << 4)
    ) & 0xFF

    tuning_word = int(0.5 + (f_vco / 4.0 - 350.0)) & 0xFFFF
    msg[3] |= (tuning_word >> 8) & 0x03
    msg[4] |= tuning_word & 0xFF

    # Difference between the wanted fVCO and the programmed one (4 MHz steps).
    config.offset = (tuning_word + 350) * 4 - f_vco
    return bytes(msg[:length])


def scr_prepare_en50607(f_if: int, config: ScrConfig, hiband: bool, horizontal: bool) -> bytes:
    """Build the EN 50607 ODU_Channel_change message; ``config.offset`` becomes 0."""
    msg = bytearray((0x70, 0x10, 0x5A, 0x00, 0x00, 0x00))
    length = 4
    if config.has_pin:
        length = 5
        msg[0] = 0x71
        msg[4] = config.pin & 0xFF

    tuning_word = 0
    if _in_if_range(f_if):
        tuning_word = min(f_if - 100, 0x7FF)

    hi = int(hiband)
    pol = int(horizontal)
    msg[1] = ((config.slot << 3) | ((tuning_word >> 8) & 0x07)) & 0xFF
    msg[2] = tuning_word & 0xFF
    msg[3] = (config.pos | (hi << 0) | (pol << 1) | (hi << 4) | (pol << 5)) & 0xFF

    config.offset = 0
    return bytes(msg[:length])


def scr_command(frontend: Frontend, message: bytes) -> None:
    """Send an SCR command: 18 V while the message goes out, 13 V afterwards."""
    _checked("SEC_TONE_OFF", frontend.set_tone, SecTone.OFF)
    _checked("FE_SET_VOLTAGE", frontend.set_voltage, SecVoltage.V18)
    frontend.sleep(_SCR_SETTLE)
    _checked("FE_DISEQC_SEND_MASTER_CMD", frontend.send_master_cmd, bytes(message))
    frontend.sleep(_SCR_SETTLE)
    _checked("FE_SET_VOLTAGE", frontend.set_voltage, SecVoltage.V13)


def _unknown_norm(config: ScrConfig) -> ValueError:
    return ValueError(f"unknown SCR norm '{config.norm}'")


def setup_scr(frontend: Frontend, transponder: Transponder, lnb: LnbType, config: ScrConfig) -> bytes:
    """Programme an SCR LNB or switch for ``transponder`` and return the message sent.

    Afterwards the receiver should tune to the user band plus ``config.offset`` MHz.
    """
    hiband = lnb.is_high_band(transponder.frequency)
    horizontal = transponder.polarization == Polarization.HORIZONTAL
    f_lo = lnb.local_oscillator(transponder.frequency)
    f_if = int(0.5 + abs(transponder.frequency - f_lo) / 1000.0) & 0xFFFF

    if config.norm == 1:
        message = scr_prepare_en50494(f_if, config, hiband, horizontal)
    elif config.norm == 2:
        message = scr_prepare_en50607(f_if, config, hiband, horizontal)
    else:
        raise _unknown_norm(config)

    scr_command(frontend, message)
    return message


def scr_poweroff(frontend: Frontend, config: ScrConfig) -> bytes:
    """Switch the user band of ``config`` off and return the message sent."""
    if config.norm == 1:
        msg = bytearray((0xE0, 0x10, 0x5A, (config.slot << 5) & 0xFF, 0x00, 0x00))
        length = 5
        if config.has_pin:
            length = 6
            msg[2] = 0x5C
            msg[5] = config.pin & 0xFF
    elif config.norm == 2:
        msg = bytearray((0x70, (config.slot << 3) & 0xFF, 0x00, config.pos & 0xFF, 0x00))
        length = 4
        if config.has_pin:
            length = 5
            msg[0] = 0x71
            msg[4] = config.pin & 0xFF
    else:
        raise _unknown_norm(config)

    message = bytes(msg[:length])
    scr_command(frontend, message)
    return message