"""Writing XSPF playlists with DVB tuning options understood by VLC."""

from __future__ import annotations

from typing import TextIO

from .dump_dvbscan import PROGRAM_NAME
from .models import (
    CodeRate,
    DeliverySystem,
    GuardInterval,
    Hierarchy,
    Inversion,
    LnbType,
    Modulation,
    Polarization,
    Rolloff,
    ScanFlags,
    ScanType,
    Service,
    TransmissionMode,
    Transponder,
)

XSPF_NAMESPACE = "http://xspf.org/ns/0/"
VLC_NAMESPACE = "http://www.videolan.org/vlc/playlist/ns/0/"
VLC_APPLICATION = "http://www.videolan.org/vlc/playlist/0"

_T1 = "\t"
_T2 = "\t" * 2
_T3 = "\t" * 3
_T4 = "\t" * 4

_FEC = ("0", "1/2", "2/3", "3/4", "4/5", "5/6", "6/7", "7/8", "8/9", "", "3/5", "9/10", "2/5")

_MODULATION = (
    "QPSK", "16QAM", "32QAM", "64QAM", "128QAM", "256QAM", "QAM",
    "8VSB", "16VSB", "8PSK", "16APSK", "32APSK", "DQPSK",
)

_DELSYS = {
    DeliverySystem.DVBC_ANNEX_A: "dvb-c",
    DeliverySystem.DVBC_ANNEX_B: "dvb-c",
    DeliverySystem.DVBT: "dvb-t",
    DeliverySystem.DVBS: "dvb-s",
    DeliverySystem.DVBS2: "dvb-s2",
    DeliverySystem.ISDBT: "isdb-t",
    DeliverySystem.ISDBS: "isdb-s",
    DeliverySystem.ISDBC: "isdb-t",
    DeliverySystem.ATSC: "atsc",
    DeliverySystem.DVBT2: "dvb-t2",
    DeliverySystem.DVBC_ANNEX_C: "dvb-c",
}

_BANDWIDTH = {
    8000000: 8,
    7000000: 7,
    6000000: 6,
    5000000: 5,
    10000000: 10,
    1712000: 2,  # VLC rounds 1.712 MHz to 2.
}

_TRANSMISSION = {
    TransmissionMode.TM_2K: 2,
    TransmissionMode.TM_8K: 8,
    TransmissionMode.TM_4K: 4,
    TransmissionMode.TM_1K: 1,
    TransmissionMode.TM_16K: 16,
    TransmissionMode.TM_32K: 32,
}

_GUARD = {
    GuardInterval.GI_1_32: "1/32",
    GuardInterval.GI_1_16: "1/16",
    GuardInterval.GI_1_8: "1/8",
    GuardInterval.GI_1_4: "1/4",
    GuardInterval.GI_1_128: "1/128",
    GuardInterval.GI_19_128: "19/128",
    GuardInterval.GI_19_256: "19/256",
}

_HIERARCHY = {Hierarchy.NONE: 0, Hierarchy.H1: 1, Hierarchy.H2: 2, Hierarchy.H4: 4}

_ROLLOFF = {Rolloff.R35: 35, Rolloff.R20: 20, Rolloff.R25: 25}

_ENTITIES = {'"': "&quot;", "&": "&amp;", "'": "&apos;", "<": "&lt;", ">": "&gt;"}


def vlc_inversion(inversion: int) -> int:
    if inversion == Inversion.OFF:
        return 0
    if inversion == Inversion.ON:
        return 1
    return 2


def vlc_fec(fec: int) -> str:
    return _FEC[fec] if 0 <= fec < len(_FEC) else ""


def vlc_modulation(modulation: int) -> str:
    return _MODULATION[modulation] if 0 <= modulation < len(_MODULATION) else ""


def vlc_delsys(delsys: int) -> str:
    return _DELSYS.get(delsys, "unknown")


def vlc_bandwidth(bandwidth: int) -> int:
    return _BANDWIDTH.get(bandwidth, 0)


def vlc_transmission(transmission: int) -> int:
    return _TRANSMISSION.get(transmission, 0)


def vlc_guard(guard_interval: int) -> str:
    return _GUARD.get(guard_interval, "")


def vlc_hierarchy(hierarchy: int) -> int:
    return _HIERARCHY.get(hierarchy, 0)


def vlc_rolloff(rolloff: int) -> int:
    return _ROLLOFF.get(rolloff, 35)


def _escape_char(ch: str) -> str:
    code = ord(ch)
    if code < 0x7F:
        if ch == "\t":
            return " "
        if ch in _ENTITIES:
            return _ENTITIES[ch]
        return ch if code >= 0x20 else ""
    # 0x7F .. 0xA0 (unused and no-break space) are dropped.
    if code >= 0xA1:
        return f"&#x{code:04X};"
    return ""


def xml_escape_service_name(name: str | None) -> str:
    """A service name made safe for an XSPF title element."""
    if not name:
        return ""
    return "".join(_escape_char(ch) for ch in name)


def _option(key: str, value: object) -> str:
    return f"{_T4}<vlc:option>{key}={value}</vlc:option>\n"


def _location(scheme: str, frequency: int) -> str:
    return (
        f"{_T3}<location>{scheme}://frequency={frequency}</location>\n"
        f'{_T3}<extension application="{VLC_APPLICATION}">\n'
    )


def _atsc_options(t: Transponder) -> list[str]:
    lines = [_location("atsc", t.frequency)]
    if t.modulation != Modulation.QAM_AUTO:
        lines.append(_option("dvb-modulation", vlc_modulation(t.modulation)))
    return lines


def _cable_options(t: Transponder) -> list[str]:
    lines = [
        _location(vlc_delsys(t.delsys), t.frequency),
        _option("dvb-srate", t.symbolrate),
        _option("dvb-ts-id", t.transport_stream_id),
    ]
    if t.modulation != Modulation.QAM_AUTO:
        lines.append(_option("dvb-modulation", vlc_modulation(t.modulation)))
    if t.inversion != Inversion.AUTO:
        lines.append(_option("dvb-inversion", vlc_inversion(t.inversion)))
    return lines


def _terrestrial_options(t: Transponder) -> list[str]:
    lines = [
        _location(vlc_delsys(t.delsys), t.frequency),
        _option("dvb-bandwidth", vlc_bandwidth(t.bandwidth)),
        _option("dvb-ts-id", t.transport_stream_id),
    ]
    if t.plp_id != 0:
        lines.append(_option("dvb-plp-id", t.plp_id))
    if t.inversion != Inversion.AUTO:
        lines.append(_option("dvb-inversion", vlc_inversion(t.inversion)))
    if t.coderate != CodeRate.FEC_AUTO:
        lines.append(_option("dvb-code-rate-hp", vlc_fec(t.coderate)))
    if t.coderate_LP not in (CodeRate.FEC_AUTO, CodeRate.FEC_NONE):
        lines.append(_option("dvb-code-rate-lp", vlc_fec(t.coderate_LP)))
    if t.modulation != Modulation.QAM_AUTO:
        lines.append(_option("dvb-modulation", vlc_modulation(t.modulation)))
    if t.transmission != TransmissionMode.AUTO:
        lines.append(_option("dvb-transmission", vlc_transmission(t.transmission)))
    if t.guard != GuardInterval.AUTO:
        lines.append(_option("dvb-guard", vlc_guard(t.guard)))
    if t.hierarchy not in (Hierarchy.AUTO, Hierarchy.NONE):
        lines.append(_option("dvb-hierarchy", vlc_hierarchy(t.hierarchy)))
    return lines


def _satellite_options(t: Transponder, flags: ScanFlags, lnb: LnbType) -> list[str]:
    horizontal = t.polarization in (Polarization.HORIZONTAL, Polarization.CIRCULAR_LEFT)
    lines = [
        _location(vlc_delsys(t.delsys), t.frequency),
        _option("dvb-polarization", "H" if horizontal else "V"),
        _option("dvb-srate", t.symbolrate),
        _option("dvb-ts-id", t.transport_stream_id),
    ]
    if t.delsys != DeliverySystem.DVBS:
        lines.append(_option("dvb-modulation", vlc_modulation(t.modulation)))
        if t.rolloff != Rolloff.AUTO:
            lines.append(_option("dvb-rolloff", vlc_rolloff(t.rolloff)))
    if t.inversion != Inversion.AUTO:
        lines.append(_option("dvb-inversion", vlc_inversion(t.inversion)))
    if t.coderate != CodeRate.FEC_AUTO:
        lines.append(_option("dvb-fec", vlc_fec(t.coderate)))
    lines.append(_option("dvb-lnb-low", lnb.low_val))
    lines.append(_option("dvb-lnb-high", lnb.high_val))
    lines.append(_option("dvb-lnb-switch", lnb.switch_val))
    satno = flags.sw_pos & 0xF
    if satno < 0xF:
        lines.append(_option("dvb-satno", satno))
    return lines


def dump_dvb_parameters_as_xspf(f: TextIO, t: Transponder, flags: ScanFlags, lnb: LnbType) -> None:
    """Write the location and the opening extension element with VLC tuning options."""
    if flags.scantype == ScanType.TERRCABLE_ATSC:
        lines = _atsc_options(t)
    elif flags.scantype == ScanType.CABLE:
        lines = _cable_options(t)
    elif flags.scantype == ScanType.TERRESTRIAL:
        lines = _terrestrial_options(t)
    elif flags.scantype == ScanType.SATELLITE:
        lines = _satellite_options(t, flags, lnb)
    else:
        raise ValueError(f"Unknown scantype {int(flags.scantype)}")
    f.write("".join(lines))


class XspfPlaylist:
    """An XSPF playlist written track by track to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self.index = 1

    def prolog(self) -> None:
        """Write the XML declaration and open the track list."""
        self.stream.write(
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            f'<playlist xmlns="{XSPF_NAMESPACE}" xmlns:vlc="{VLC_NAMESPACE}" version="1">\n'
            f"{_T1}<title>DVB Playlist</title>\n"
            f"{_T1}<creator>{PROGRAM_NAME}</creator>\n"
            f"{_T1}<trackList>\n"
        )
        self.index = 1

    def dump_service(
        self, service: Service, transponder: Transponder, flags: ScanFlags, lnb: LnbType
    ) -> None:
        """Write one track for ``service`` on ``transponder``."""
        name = xml_escape_service_name(service.service_name)
        self.stream.write(f"{_T2}<track>\n")
        self.stream.write(f"{_T3}<title>{self.index:04d}. {name}</title>\n")
        self.index += 1
        dump_dvb_parameters_as_xspf(self.stream, transponder, flags, lnb)
        self.stream.write(
            f"{_T4}<vlc:id>{self.index}</vlc:id>\n"
            f"{_T4}<vlc:option>program={service.service_id}</vlc:option>\n"
            f"{_T3}</extension>\n"
            f"{_T2}</track>\n"
        )

    def epilog(self) -> None:
        """Close the track list and the playlist."""
        self.stream.write(f"{_T1}</trackList>\n</playlist>\n")

    def __enter__(self) -> XspfPlaylist:
        self.prolog()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.epilog()