"""Tuning parameters, services and scan settings shared by the output writers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class DeliverySystem(IntEnum):
    """Delivery systems as numbered by the frontend API."""

    UNDEFINED = 0
    DVBC_ANNEX_A = 1
    DVBC_ANNEX_B = 2
    DVBT = 3
    DSS = 4
    DVBS = 5
    DVBS2 = 6
    DVBH = 7
    ISDBT = 8
    ISDBS = 9
    ISDBC = 10
    ATSC = 11
    ATSCMH = 12
    DTMB = 13
    CMMB = 14
    DAB = 15
    DVBT2 = 16
    TURBO = 17
    DVBC_ANNEX_C = 18
    DVBC2 = 19


class Modulation(IntEnum):
    QPSK = 0
    QAM_16 = 1
    QAM_32 = 2
    QAM_64 = 3
    QAM_128 = 4
    QAM_256 = 5
    QAM_AUTO = 6
    VSB_8 = 7
    VSB_16 = 8
    PSK_8 = 9
    APSK_16 = 10
    APSK_32 = 11
    DQPSK = 12
    QAM_4_NR = 13
    QAM_512 = 14
    QAM_1024 = 15
    QAM_4096 = 16


class CodeRate(IntEnum):
    FEC_NONE = 0
    FEC_1_2 = 1
    FEC_2_3 = 2
    FEC_3_4 = 3
    FEC_4_5 = 4
    FEC_5_6 = 5
    FEC_6_7 = 6
    FEC_7_8 = 7
    FEC_8_9 = 8
    FEC_AUTO = 9
    FEC_3_5 = 10
    FEC_9_10 = 11
    FEC_2_5 = 12


class Inversion(IntEnum):
    OFF = 0
    ON = 1
    AUTO = 2


class GuardInterval(IntEnum):
    GI_1_32 = 0
    GI_1_16 = 1
    GI_1_8 = 2
    GI_1_4 = 3
    AUTO = 4
    GI_1_128 = 5
    GI_19_128 = 6
    GI_19_256 = 7


class TransmissionMode(IntEnum):
    TM_2K = 0
    TM_8K = 1
    AUTO = 2
    TM_4K = 3
    TM_1K = 4
    TM_16K = 5
    TM_32K = 6


class Hierarchy(IntEnum):
    NONE = 0
    H1 = 1
    H2 = 2
    H4 = 3
    AUTO = 4


class Rolloff(IntEnum):
    R35 = 0
    R20 = 1
    R25 = 2
    AUTO = 3


class Pilot(IntEnum):
    ON = 0
    OFF = 1
    AUTO = 2


class Polarization(IntEnum):
    HORIZONTAL = 0
    VERTICAL = 1
    CIRCULAR_LEFT = 2
    CIRCULAR_RIGHT = 3


class ScanType(IntEnum):
    UNDEFINED = 0
    SATELLITE = 1
    CABLE = 2
    TERRESTRIAL = 3
    TERRCABLE_ATSC = 4


@dataclass
class Transponder:
    """One tuned or tunable multiplex."""

    frequency: int = 0
    symbolrate: int = 0
    bandwidth: int = 8_000_000
    delsys: DeliverySystem = DeliverySystem.UNDEFINED
    modulation: Modulation = Modulation.QAM_AUTO
    coderate: CodeRate = CodeRate.FEC_AUTO
    coderate_LP: CodeRate = CodeRate.FEC_AUTO
    inversion: Inversion = Inversion.AUTO
    transmission: TransmissionMode = TransmissionMode.AUTO
    guard: GuardInterval = GuardInterval.AUTO
    hierarchy: Hierarchy = Hierarchy.AUTO
    rolloff: Rolloff = Rolloff.AUTO
    pilot: Pilot = Pilot.AUTO
    polarization: Polarization = Polarization.HORIZONTAL
    plp_id: int = 0
    data_slice_id: int = 0
    system_id: int = 0
    transport_stream_id: int = 0
    original_network_id: int = 0
    network_id: int = 0
    network_name: str | None = None


@dataclass
class Service:
    """One programme carried by a transponder."""

    service_name: str = ""
    provider_name: str | None = None
    service_id: int = 0
    pmt_pid: int = 0
    pcr_pid: int = 0
    video_pid: int = 0
    video_stream_type: int = 0
    audio_pids: list[int] = field(default_factory=list)
    audio_langs: list[str] = field(default_factory=list)
    audio_stream_types: list[int] = field(default_factory=list)
    ac3_pids: list[int] = field(default_factory=list)
    ac3_langs: list[str] = field(default_factory=list)
    subtitling_pids: list[int] = field(default_factory=list)
    subtitling_langs: list[str] = field(default_factory=list)
    teletext_pid: int = 0
    ca_ids: list[int] = field(default_factory=list)
    scrambled: bool = False


@dataclass
class ScanFlags:
    """Settings of a scan that influence how results are written."""

    version: str = ""
    tuning_timeout: int = 0
    filter_timeout: int = 0
    scantype: ScanType = ScanType.TERRESTRIAL
    list_name: str = ""
    rotor_position: int = 0
    sw_pos: int = 0
    ca_select: bool = True
    dump_provider: bool = False
    vdr_version: int = 2
    print_pmt: bool = False


@dataclass
class LnbType:
    """A low noise block converter: local oscillators and band switch."""

    name: str = ""
    description: str = ""
    low_val: int = 0
    high_val: int = 0
    switch_val: int = 0

    def is_high_band(self, frequency: int) -> bool:
        """True if ``frequency`` is received through the high band oscillator."""
        return self.high_val > 0 and frequency >= self.switch_val

    def local_oscillator(self, frequency: int) -> int:
        """The oscillator frequency used for ``frequency``."""
        return self.high_val if self.is_high_band(frequency) else self.low_val


NO_PIN = 256


@dataclass
class ScrConfig:
    """Single cable routing (unicable) settings."""

    norm: int = 1
    slot: int = 0
    user_frequency: int = 0
    pin: int = NO_PIN
    pos: int = 0
    offset: int = 0

    @property
    def has_pin(self) -> bool:
        return self.pin < NO_PIN