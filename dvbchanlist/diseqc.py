"""DiSEqC switch and positioner control on top of a satellite frontend."""

from __future__ import annotations

import abc
import logging
import time
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import IntEnum
from typing import TypeVar

logger = logging.getLogger(__name__)

_R = TypeVar("_R")

# Framing byte.
MASTER_CMD_NO_RESPONSE = 0xE0
MASTER_CMD_NO_RESPONSE_REPEATED = 0xE1
MASTER_CMD_WITH_RESPONSE = 0xE2
MASTER_CMD_WITH_RESPONSE_REPEATED = 0xE3
SLAVE_REPLY_OK = 0xE4
SLAVE_REPLY_UNSUPPORTED = 0xE5
SLAVE_REPLY_PARITY_ERR = 0xE6
SLAVE_REPLY_CMD_UNKNOWN = 0xE7

# Address byte.
ADDR_ANY_DEVICE = 0x00
ADDR_ANY_LNB = 0x10
ADDR_LNB = 0x11
ADDR_ANY_POSITIONER = 0x30
ADDR_POSITIONER_POLAR_AZIMUT = 0x31
ADDR_POSITIONER_ELEVATION = 0x32

# Command byte.
CMD_WR_N0_COMMITTED = 0x38
CMD_WR_N1_UNCOMMITTED = 0x39
CMD_HALT = 0x60
CMD_LIMITS_OFF = 0x63
CMD_RD_POS_STATUS = 0x64
CMD_LIMIT_EAST = 0x66
CMD_LIMIT_WEST = 0x67
CMD_DRIVE_EAST = 0x68
CMD_DRIVE_WEST = 0x69
CMD_STORE_SAT_POS = 0x6A
CMD_GOTO_SAT_POS_NN = 0x6B
CMD_GOTO_ANGLE_NN_N = 0x6E
CMD_SET_POSNS = 0x6F

# Positioner status bits (Read Positioner Status Byte, level 2.2).
MOVEMENT_COMPLETE = 0x80
SOFT_LIMITS_ENABLED = 0x40
MOVE_WEST = 0x20
MOTOR_RUNNING = 0x10
SOFT_LIMIT_REACHED = 0x08
NO_POWER = 0x04
HARD_LIMIT_REACHED = 0x02
NO_REF_POS = 0x01

# Rotation speed in degrees per second.
SPEED_13V = 1.5
SPEED_18V = 2.4

# Every positioner command is sent this many times.
ROTOR_REPEATS = 2

_SETTLE = 0.015
_SLAVE_REPLY_TIMEOUT_MS = 150


class DiseqcError(Exception):
    """A DiSEqC operation on the frontend failed."""


class SecVoltage(IntEnum):
    V13 = 0
    V18 = 1
    OFF = 2


class SecTone(IntEnum):
    ON = 0
    OFF = 1


class SecMiniCmd(IntEnum):
    A = 0
    B = 1


class Frontend(abc.ABC):
    """A satellite frontend able to drive LNB voltage, 22 kHz tone and DiSEqC.

    Implementations raise ``OSError`` when the device rejects an operation.
    """

    positioner_status_supported: bool = True

    @abc.abstractmethod
    def set_tone(self, tone: SecTone) -> None:
        """Switch the 22 kHz tone."""

    @abc.abstractmethod
    def set_voltage(self, voltage: SecVoltage) -> None:
        """Set the LNB supply voltage."""

    @abc.abstractmethod
    def send_master_cmd(self, message: bytes) -> None:
        """Send one DiSEqC master command of 3 to 6 bytes."""

    @abc.abstractmethod
    def recv_slave_reply(self, timeout_ms: int) -> bytes:
        """Read a slave reply, waiting at most ``timeout_ms``."""

    @abc.abstractmethod
    def send_burst(self, burst: SecMiniCmd) -> None:
        """Send a tone burst (mini DiSEqC)."""

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)


@dataclass(frozen=True)
class DiseqcCommand:
    """A DiSEqC master message with the time to wait after it, in ms."""

    message: bytes
    wait: int = 20

    def __str__(self) -> str:
        return " ".join(f"{b:02x}" for b in self.message)


class RotorCommand(IntEnum):
    HALT = 0
    DISABLE_LIMITS = 1
    SET_LIMIT_EAST = 2
    SET_LIMIT_WEST = 3
    DRIVE_EAST_CONT = 4
    DRIVE_EAST_STEP = 5
    DRIVE_WEST_STEP = 6
    DRIVE_WEST_CONT = 7
    STORE_SAT_POS = 8
    GOTO_SAT_POS_NN = 9
    RECALC_POS = 10
    ENABLE_LIMITS = 11
    GOTO_ANGLE = 12
    WR_COMMITTED = 13


# Data byte of the committed switch command, indexed by
# 4 * switch position + 2 * high band + 18 V.
_COMMITTED_DATA = (
    0xF0, 0xF2, 0xF1, 0xF3,
    0xF4, 0xF6, 0xF5, 0xF7,
    0xF8, 0xFA, 0xF9, 0xFB,
    0xFC, 0xFE, 0xFD, 0xFF,
)

_COMMITTED = tuple(
    DiseqcCommand(bytes((MASTER_CMD_NO_RESPONSE, ADDR_ANY_LNB, CMD_WR_N0_COMMITTED, data)))
    for data in _COMMITTED_DATA
)

_UNCOMMITTED = tuple(
    DiseqcCommand(bytes((MASTER_CMD_NO_RESPONSE, ADDR_ANY_LNB, CMD_WR_N1_UNCOMMITTED, data)))
    for data in range(0xF0, 0x100)
)


def _lookup(table: tuple[DiseqcCommand, ...], index: int, what: str) -> DiseqcCommand:
    if not 0 <= index < len(table):
        raise ValueError(f"{what} index {index} out of range 0..{len(table) - 1}")
    return table[index]


def committed_switch_command(index: int) -> DiseqcCommand:
    """The committed switch command for ``index`` (0..15)."""
    return _lookup(_COMMITTED, index, "committed switch")


def uncommitted_switch_command(index: int) -> DiseqcCommand:
    """The uncommitted switch command for ``index`` (0..15)."""
    return _lookup(_UNCOMMITTED, index, "uncommitted switch")


def _run(description: str, action: Callable[..., _R], *args: object) -> _R:
    try:
        return action(*args)
    except OSError as exc:
        logger.info("%s failed.", description)
        raise DiseqcError(f"{description} failed") from exc


def rotor_message(cmd: RotorCommand | int, n1: int = 0, n2: int = 0, n3: int = 0) -> bytes:
    """The DiSEqC 1.2 positioner message for ``cmd`` and its arguments."""
    cmd = RotorCommand(cmd)
    n1 &= 0xFF
    n2 &= 0xFF
    n3 &= 0xFF
    step = (256 - n1) & 0xFF
    pos = ADDR_POSITIONER_POLAR_AZIMUT
    bodies: dict[RotorCommand, tuple[tuple[int, ...], int]] = {
        RotorCommand.HALT: ((pos, CMD_HALT, 0, 0, 0), 3),
        RotorCommand.DISABLE_LIMITS: ((pos, CMD_LIMITS_OFF, 0, 0, 0), 3),
        RotorCommand.SET_LIMIT_EAST: ((pos, CMD_LIMIT_EAST, 0, 0, 0), 3),
        RotorCommand.SET_LIMIT_WEST: ((pos, CMD_LIMIT_WEST, 0, 0, 0), 3),
        RotorCommand.DRIVE_EAST_CONT: ((pos, CMD_DRIVE_EAST, 0, 0, 0), 4),
        RotorCommand.DRIVE_EAST_STEP: ((pos, CMD_DRIVE_EAST, step, 0, 0), 4),
        RotorCommand.DRIVE_WEST_STEP: ((pos, CMD_DRIVE_WEST, step, 0, 0), 4),
        RotorCommand.DRIVE_WEST_CONT: ((pos, CMD_DRIVE_WEST, 0, 0, 0), 4),
        RotorCommand.STORE_SAT_POS: ((pos, CMD_STORE_SAT_POS, n1, 0, 0), 4),
        RotorCommand.GOTO_SAT_POS_NN: ((pos, CMD_GOTO_SAT_POS_NN, n1, 0, 0), 4),
        RotorCommand.RECALC_POS: ((pos, CMD_SET_POSNS, n1, n2, n3), 4),
        RotorCommand.ENABLE_LIMITS: ((pos, CMD_STORE_SAT_POS, 0, 0, 0), 4),
        RotorCommand.GOTO_ANGLE: ((pos, CMD_GOTO_ANGLE_NN_N, n1, n2, 0), 5),
        RotorCommand.WR_COMMITTED: ((ADDR_ANY_LNB, CMD_WR_N0_COMMITTED, 0xF4, 0, 0), 4),
    }
    body, length = bodies[cmd]
    return bytes((MASTER_CMD_NO_RESPONSE, *body))[:length]


def rotor_command(
    frontend: Frontend, cmd: RotorCommand | int, n1: int = 0, n2: int = 0, n3: int = 0
) -> None:
    """Send a positioner command, repeated for reliability."""
    message = rotor_message(cmd, n1, n2, n3)
    for _ in range(ROTOR_REPEATS):
        frontend.sleep(_SETTLE)
        _run("FE_DISEQC_SEND_MASTER_CMD", frontend.send_master_cmd, message)


def _bcd_to_int(value: int) -> int:
    return sum(((value >> shift) & 0x0F) * weight for shift, weight in ((12, 1000), (8, 100), (4, 10), (0, 1)))


def rotor_angle(orbital_position: int, west: bool) -> float:
    """Angle 0.0..359.9 of a BCD coded orbital position in tenths of a degree."""
    degrees = _bcd_to_int(orbital_position) / 10
    return 360.0 - degrees if west else degrees


def get_positioner_status(frontend: Frontend) -> int:
    """Read the status byte of a DiSEqC 2.2 positioner."""
    request = bytes((MASTER_CMD_WITH_RESPONSE, ADDR_POSITIONER_POLAR_AZIMUT, CMD_RD_POS_STATUS))
    try:
        frontend.send_master_cmd(request)
    except OSError as exc:
        logger.debug("DiSEqC-2.2 cmd RD_POS_STATUS fails (expected with DiSEqC-1.2 equipment)")
        raise DiseqcError("RD_POS_STATUS failed") from exc
    try:
        reply = frontend.recv_slave_reply(_SLAVE_REPLY_TIMEOUT_MS)
    except OSError as exc:
        logger.debug("DiSEqC-2.2 read slave reply fails (expected with DiSEqC-1.2 equipment)")
        raise DiseqcError("reading slave reply failed") from exc
    if len(reply) > 1 and reply[0] == SLAVE_REPLY_OK:
        return reply[1]
    logger.info("get_positioner_status: unknown error.")
    raise DiseqcError("unexpected positioner reply")


def _rotation_angle(from_pos: int, to_pos: int, angles: Mapping[int, float]) -> float:
    if from_pos < 0 or from_pos not in angles or to_pos not in angles:
        # Unknown start: assume the worst case.
        return 180.0
    angle = float(int(abs(angles[to_pos] - angles[from_pos])))
    return 360.0 - angle if angle > 180 else angle


def _wait_for_rotor(frontend: Frontend, positioning_time: float) -> None:
    logger.info("Rotating")
    for i in range(int(positioning_time + 0.5)):
        if frontend.positioner_status_supported:
            frontend.sleep(1.0 - 0.0825)
            try:
                status = get_positioner_status(frontend)
            except DiseqcError:
                frontend.positioner_status_supported = False
            else:
                if (
                    status & MOVEMENT_COMPLETE
                    or status & HARD_LIMIT_REACHED
                    or not status & MOTOR_RUNNING
                ):
                    break
        else:
            frontend.sleep(1.0)
        logger.info("%d ", int(positioning_time) - i)
    logger.info(" completed.")


def rotate_rotor(
    frontend: Frontend,
    from_pos: int,
    to_pos: int,
    voltage_18: bool,
    hiband: bool,
    angles: Mapping[int, float],
) -> int:
    """Move a DiSEqC 1.2 rotor from ``from_pos`` to ``to_pos``.

    ``angles`` maps rotor positions to orbital angles in degrees. A negative
    ``from_pos`` means the current position is unknown. Returns the rotor
    position afterwards.
    """
    if to_pos < 0:
        logger.info("warn: to position < 0, ignored.")
        return from_pos

    if from_pos != to_pos:
        angle = _rotation_angle(from_pos, to_pos, angles)
        if from_pos < 0:
            logger.info("Initializing rotor to rotor position %d", to_pos)
        else:
            logger.info("moving rotor from rotor position %d to %d", from_pos, to_pos)
        positioning_time = angle / SPEED_18V
        logger.info("expected rotation %.2fdeg (%.1f sec)", angle, positioning_time)

        _run("SEC_TONE_OFF", frontend.set_tone, SecTone.OFF)
        frontend.sleep(_SETTLE)
        _run("SEC_VOLTAGE_18", frontend.set_voltage, SecVoltage.V18)
        frontend.sleep(_SETTLE)
        try:
            rotor_command(frontend, RotorCommand.GOTO_SAT_POS_NN, to_pos)
        except DiseqcError as exc:
            raise DiseqcError("ROTOR_CMD_GOTO_SAT_POS_NN failed") from exc
        _wait_for_rotor(frontend, positioning_time)
        from_pos = to_pos

    _run("FE_SET_TONE", frontend.set_tone, SecTone.ON if hiband else SecTone.OFF)
    frontend.sleep(_SETTLE)
    _run("FE_SET_VOLTAGE", frontend.set_voltage, SecVoltage.V18 if voltage_18 else SecVoltage.V13)
    frontend.sleep(_SETTLE)
    return from_pos


def diseqc_send_msg(
    frontend: Frontend,
    voltage: SecVoltage,
    commands: Iterable[DiseqcCommand],
    tone: SecTone,
    burst: SecMiniCmd,
) -> None:
    """Send ``commands`` followed by a tone burst, then set the final tone."""
    _run("SEC_TONE_OFF", frontend.set_tone, SecTone.OFF)
    _run("FE_SET_VOLTAGE", frontend.set_voltage, voltage)
    frontend.sleep(_SETTLE)

    for command in commands:
        logger.debug("DiSEqC: %s", command)
        _run("FE_DISEQC_SEND_MASTER_CMD", frontend.send_master_cmd, command.message)

    frontend.sleep(_SETTLE)
    _run("FE_DISEQC_SEND_BURST", frontend.send_burst, burst)
    frontend.sleep(_SETTLE)
    _run("FE_SET_TONE", frontend.set_tone, tone)
    frontend.sleep(_SETTLE)


def setup_switch(
    frontend: Frontend,
    switch_pos: int,
    voltage_18: bool,
    hiband: bool,
    uncommitted_switch_pos: int,
) -> None:
    """Set a switch to position, voltage and band via uncommitted and committed commands."""
    logger.debug("DiSEqC: uncommitted switch pos %i", uncommitted_switch_pos)
    uncommitted = uncommitted_switch_command(uncommitted_switch_pos)

    voltage = SecVoltage.V18 if voltage_18 else SecVoltage.V13
    tone = SecTone.ON if hiband else SecTone.OFF
    burst = SecMiniCmd.B if switch_pos % 2 else SecMiniCmd.A

    diseqc_send_msg(frontend, voltage, [uncommitted], tone, burst)

    index = 4 * switch_pos + 2 * int(hiband) + (1 if voltage_18 else 0)
    logger.debug(
        "DiSEqC: switch pos %i, %sV, %sband (index %d)",
        switch_pos,
        "18" if voltage_18 else "13",
        "hi" if hiband else "lo",
        index,
    )
    committed = committed_switch_command(index)
    diseqc_send_msg(frontend, voltage, [committed], tone, burst)