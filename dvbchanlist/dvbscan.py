"""Conversion between tuning parameters and the initial tuning data text format."""

from __future__ import annotations

from typing import TypeVar

from .models import (
    CodeRate,
    DeliverySystem,
    GuardInterval,
    Hierarchy,
    Modulation,
    Polarization,
    Rolloff,
    ScanType,
    TransmissionMode,
)

_T = TypeVar("_T", bound=int)

# DVB-T

TERR_BW = (
    ("8MHz", 8000000),
    ("7MHz", 7000000),
    ("6MHz", 6000000),
    ("5MHz", 5000000),
    ("10MHz", 10000000),
    ("1.712MHz", 1712000),
    ("AUTO", 8000000),
)

TERR_FEC = (
    ("NONE", CodeRate.FEC_NONE),
    ("1/2", CodeRate.FEC_1_2),
    ("2/3", CodeRate.FEC_2_3),
    ("3/4", CodeRate.FEC_3_4),
    ("4/5", CodeRate.FEC_4_5),
    ("5/6", CodeRate.FEC_5_6),
    ("6/7", CodeRate.FEC_6_7),
    ("7/8", CodeRate.FEC_7_8),
    ("3/5", CodeRate.FEC_3_5),
    ("4/5", CodeRate.FEC_4_5),
    ("AUTO", CodeRate.FEC_AUTO),
)

TERR_MOD = (
    ("QPSK", Modulation.QPSK),
    ("QAM16", Modulation.QAM_16),
    ("QAM64", Modulation.QAM_64),
    ("QAM256", Modulation.QAM_256),
    ("AUTO", Modulation.QAM_AUTO),
)

TERR_TRANSMISSION = (
    ("2k", TransmissionMode.TM_2K),
    ("8k", TransmissionMode.TM_8K),
    ("4k", TransmissionMode.TM_4K),
    ("1k", TransmissionMode.TM_1K),
    ("16k", TransmissionMode.TM_16K),
    ("32k", TransmissionMode.TM_32K),
    ("AUTO", TransmissionMode.AUTO),
)

TERR_GUARD = (
    ("1/32", GuardInterval.GI_1_32),
    ("1/16", GuardInterval.GI_1_16),
    ("1/8", GuardInterval.GI_1_8),
    ("1/4", GuardInterval.GI_1_4),
    ("1/128", GuardInterval.GI_1_128),
    ("19/128", GuardInterval.GI_19_128),
    ("19/256", GuardInterval.GI_19_256),
    ("AUTO", GuardInterval.AUTO),
)

TERR_HIERARCHY = (
    ("NONE", Hierarchy.NONE),
    ("1", Hierarchy.H1),
    ("2", Hierarchy.H2),
    ("4", Hierarchy.H4),
    ("AUTO", Hierarchy.AUTO),
)

# DVB-C

CABLE_FEC = (
    ("NONE", CodeRate.FEC_NONE),
    ("1/2", CodeRate.FEC_1_2),
    ("2/3", CodeRate.FEC_2_3),
    ("3/4", CodeRate.FEC_3_4),
    ("4/5", CodeRate.FEC_4_5),
    ("5/6", CodeRate.FEC_5_6),
    ("6/7", CodeRate.FEC_6_7),
    ("7/8", CodeRate.FEC_7_8),
    ("8/9", CodeRate.FEC_8_9),
    ("3/5", CodeRate.FEC_3_5),
    ("9/10", CodeRate.FEC_9_10),
    ("AUTO", CodeRate.FEC_AUTO),
)

CABLE_MOD = (
    ("QAM16", Modulation.QAM_16),
    ("QAM32", Modulation.QAM_32),
    ("QAM64", Modulation.QAM_64),
    ("QAM128", Modulation.QAM_128),
    ("QAM256", Modulation.QAM_256),
    ("QAM512", Modulation.QAM_512),
    ("QAM1024", Modulation.QAM_1024),
    ("QAM4096", Modulation.QAM_4096),
)

# ATSC

ATSC_MOD = (
    ("QAM64", Modulation.QAM_64),
    ("QAM256", Modulation.QAM_256),
    ("8VSB", Modulation.VSB_8),
    ("16VSB", Modulation.VSB_16),
)

# DVB-S

SAT_DELIVERY_SYSTEM = (
    ("S", DeliverySystem.DVBS),
    ("S1", DeliverySystem.DVBS),
    ("S2", DeliverySystem.DVBS2),
)

SAT_POL = (
    ("H", Polarization.HORIZONTAL),
    ("V", Polarization.VERTICAL),
    ("R", Polarization.CIRCULAR_RIGHT),
    ("L", Polarization.CIRCULAR_LEFT),
)

SAT_FEC = CABLE_FEC

# "AUTO" stands for a rolloff of 0.35 and for QPSK here.
SAT_ROLLOFF = (
    ("35", Rolloff.R35),
    ("25", Rolloff.R25),
    ("20", Rolloff.R20),
    ("AUTO", Rolloff.AUTO),
)

SAT_MOD = (
    ("QPSK", Modulation.QPSK),
    ("8PSK", Modulation.PSK_8),
    ("16APSK", Modulation.APSK_16),
    ("32APSK", Modulation.APSK_32),
    ("AUTO", Modulation.QPSK),
)

SCANTYPES = (
    ("TERRCABLE_ATSC", ScanType.TERRCABLE_ATSC),
    ("CABLE", ScanType.CABLE),
    ("TERRESTRIAL", ScanType.TERRESTRIAL),
    ("SATELLITE", ScanType.SATELLITE),
)


def _to_id(table: tuple[tuple[str, _T], ...], txt: str, fallback: _T) -> _T:
    wanted = txt.lower()
    return next((ident for name, ident in table if name.lower() == wanted), fallback)


def _to_txt(table: tuple[tuple[str, int], ...], ident: int, fallback: str) -> str:
    return next((name for name, value in table if value == ident), fallback)


def txt_to_terr_bw(txt: str) -> int:
    return _to_id(TERR_BW, txt, 8000000)


def txt_to_terr_fec(txt: str) -> CodeRate:
    return _to_id(TERR_FEC, txt, CodeRate.FEC_AUTO)


def txt_to_terr_mod(txt: str) -> Modulation:
    return _to_id(TERR_MOD, txt, Modulation.QAM_AUTO)


def txt_to_terr_transmission(txt: str) -> TransmissionMode:
    return _to_id(TERR_TRANSMISSION, txt, TransmissionMode.AUTO)


def txt_to_terr_guard(txt: str) -> GuardInterval:
    return _to_id(TERR_GUARD, txt, GuardInterval.AUTO)


def txt_to_terr_hierarchy(txt: str) -> Hierarchy:
    return _to_id(TERR_HIERARCHY, txt, Hierarchy.AUTO)


def terr_bw_to_txt(id: int) -> str:
    return _to_txt(TERR_BW, id, "AUTO")


def terr_fec_to_txt(id: int) -> str:
    return _to_txt(TERR_FEC, id, "AUTO")


def terr_mod_to_txt(id: int) -> str:
    return _to_txt(TERR_MOD, id, "AUTO")


def terr_transmission_to_txt(id: int) -> str:
    return _to_txt(TERR_TRANSMISSION, id, "AUTO")


def terr_guard_to_txt(id: int) -> str:
    return _to_txt(TERR_GUARD, id, "AUTO")


def terr_hierarchy_to_txt(id: int) -> str:
    return _to_txt(TERR_HIERARCHY, id, "AUTO")


def txt_to_cable_fec(txt: str) -> CodeRate:
    return _to_id(CABLE_FEC, txt, CodeRate.FEC_AUTO)


def txt_to_cable_mod(txt: str) -> Modulation:
    return _to_id(CABLE_MOD, txt, Modulation.QAM_AUTO)


def cable_fec_to_txt(id: int) -> str:
    return _to_txt(CABLE_FEC, id, "AUTO")


def cable_mod_to_txt(id: int) -> str:
    return _to_txt(CABLE_MOD, id, "AUTO")


def txt_to_atsc_mod(txt: str) -> Modulation:
    return _to_id(ATSC_MOD, txt, Modulation.QAM_AUTO)


def atsc_mod_to_txt(id: int) -> str:
    return _to_txt(ATSC_MOD, id, "AUTO")


def txt_to_sat_delivery_system(txt: str) -> DeliverySystem:
    return _to_id(SAT_DELIVERY_SYSTEM, txt, DeliverySystem.DVBS)


def txt_to_sat_pol(txt: str) -> Polarization:
    return _to_id(SAT_POL, txt, Polarization.HORIZONTAL)


def txt_to_sat_fec(txt: str) -> CodeRate:
    return _to_id(SAT_FEC, txt, CodeRate.FEC_AUTO)


def txt_to_sat_rolloff(txt: str) -> Rolloff:
    return _to_id(SAT_ROLLOFF, txt, Rolloff.R35)


def txt_to_sat_mod(txt: str) -> Modulation:
    return _to_id(SAT_MOD, txt, Modulation.QPSK)


def sat_delivery_system_to_txt(id: int) -> str:
    return _to_txt(SAT_DELIVERY_SYSTEM, id, "S")


def sat_pol_to_txt(id: int) -> str:
    return _to_txt(SAT_POL, id, "H")


def sat_fec_to_txt(id: int) -> str:
    return _to_txt(SAT_FEC, id, "AUTO")


def sat_rolloff_to_txt(id: int) -> str:
    return _to_txt(SAT_ROLLOFF, id, "35")


def sat_mod_to_txt(id: int) -> str:
    return _to_txt(SAT_MOD, id, "QPSK")


def txt_to_scantype(txt: str) -> ScanType:
    return _to_id(SCANTYPES, txt, ScanType.TERRESTRIAL)


def scantype_to_txt(id: int) -> str:
    return _to_txt(SCANTYPES, id, "TERRESTRIAL")