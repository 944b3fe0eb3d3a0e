"""Writing channels.conf lines in the format read by VDR."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

from .models import (
    CodeRate,
    DeliverySystem,
    GuardInterval,
    Hierarchy,
    Inversion,
    Modulation,
    Polarization,
    Rolloff,
    ScanFlags,
    ScanType,
    Service,
    TransmissionMode,
    Transponder,
)

UNKNOWN = "999"

# Satellite short names and the matching VDR source identifiers.
TRANSLATIONS: tuple[tuple[str, str], ...] = (
    ("S180E0", "S180E"),
    ("S172E0", "S172E"),
    ("S169E0", "S169E"),
    ("S166E0", "S166E"),
    ("S162E0", "S162E"),
    ("S160E0", "S160E"),
    ("S156E0", "S156E"),
    ("S154E0", "S154E"),
    ("S152E0", "S152E"),
    ("S144E0", "S144E"),
    ("S140E0", "S140E"),
    ("S138E0", "S138E"),
    ("S134E0", "S134E"),
    ("S132E0", "S132E"),
    ("S128E0", "S128E"),
    ("S125E0", "S125E"),
    ("S124E0", "S124E"),
    ("S122E2", "S122.2E"),
    ("S118E0", "S118E"),
    ("S116E0", "S116E"),
    ("S115E5", "S115.5E"),
    ("S113E0", "S113E"),
    ("S110E5", "S110.5E"),
    ("S110E0", "S110E"),
    ("S108E2", "S108.2E"),
    ("S105E5", "S105.5E"),
    ("S103E0", "S103E"),
    ("S100E5", "S100.5E"),
    ("S96E5", "S96.5E"),
    ("S95E0", "S95E"),
    ("S93E5", "S93.5E"),
    ("S91E5", "S91.5E"),
    ("S90E0", "S90E"),
    ("S88E0", "S88E"),
    ("S87E5", "S87.5E"),
    ("S86E5", "S86.5E"),
    ("S85E0", "S85.2E"),
    ("S83E0", "S83E"),
    ("S78E5", "S78.5E"),
    ("S76E5", "S76.5E"),
    ("S75E0", "S75E"),
    ("S70E5", "S70.5E"),
    ("S68E5", "S68.5E"),
    ("S66E0", "S66E"),
    ("S64E2", "S64E"),
    ("S62E0", "S62E"),
    ("S60E0", "S60E"),
    ("S57E0", "S57E"),
    ("S56E0", "S56E"),
    ("S53E0", "S53E"),
    ("S52E5", "S52.5E"),
    ("S49E0", "S49E"),
    ("S45E0", "S45E"),
    ("S42E0", "S42E"),
    ("S40E0", "S40E"),
    ("S39E0", "S39E"),
    ("S38E0", "S38E"),
    ("S36E0", "S36E"),
    ("S33E0", "S33E"),
    ("S31E5", "S31.5E"),
    ("S30E5", "S30.5E"),
    ("S28E2", "S28.2E"),
    ("S26E0", "S26E"),
    ("S25E5", "S25.5E"),
    ("S23E5", "S23.5E"),
    ("S21E6", "S21.6E"),
    ("S20E0", "S20E"),
    ("S19E2", "S19.2E"),
    ("S16E0", "S16E"),
    ("S13E0", "S13E"),
    ("S10E0", "S10E"),
    ("S9E0", "S9E"),
    ("S7E0", "S7E"),
    ("S4E8", "S4.8E"),
    ("S3E0", "S3E"),
    ("S0W8", "S1W"),
    ("S4W0", "S4W"),
    ("S5W0", "S5W"),
    ("S7W0", "S7W"),
    ("S8W0", "S8W"),
    ("S11W0", "S11W"),
    ("S12W5", "S12.5W"),
    ("S14W0", "S14W"),
    ("S15W0", "S15W"),
    ("S18W0", "S18W"),
    ("S20W0", "S20W"),
    ("S22W0", "S22W"),
    ("S24W5", "S24.5W"),
    ("S27W5", "S27.5W"),
    ("S30W0", "S30W"),
    ("S31W5", "S31.5W"),
    ("S34W5", "S34.5W"),
    ("S37W5", "S37.5W"),
    ("S40W5", "S40.5W"),
    ("S43W0", "S43W"),
    ("S45W0", "S45W"),
    ("S50W0", "S50W"),
    ("S53W0", "S53W"),
    ("S55W5", "S55.5W"),
    ("S58W0", "S58W"),
    ("S63W0", "S63W"),
    ("S65W0", "S65W"),
    ("S70W0", "S70W"),
    ("S72W0", "S72W"),
    ("S78W0", "S78W"),
    ("S83W0", "S83W"),
    ("S84W0", "S84W"),
    ("S85W0", "S85W"),
    ("S87W0", "S87W"),
    ("S89W0", "S89W"),
    ("S91W0", "S91W"),
    ("S93W1", "S93.1W"),
    ("S95W0", "S95W"),
    ("S97W0", "S97W"),
    ("S99W2", "S99W2"),
    ("S101W0", "S101W"),
    ("S103W0", "S103W"),
    ("S105W0", "S105W"),
    ("S107W3", "S107.3W"),
    ("S111W1", "S111.1W"),
    ("S113W0", "S113W"),
    ("S116W8", "S116.8W"),
    ("S119W0", "S118.8W"),
    ("S121W0", "S121W"),
    ("S123W0", "S123W"),
    ("S125W0", "S125W"),
    ("S127W0", "S127W"),
    ("S131W0", "S131W"),
    ("S133W0", "S133W"),
    ("S135W0", "S135W"),
    ("S137W0", "S137W"),
    ("S139W0", "S139W"),
    ("S177W0", "S177W"),
)

_INVERSION = {Inversion.OFF: "0", Inversion.ON: "1"}

_FEC = {
    CodeRate.FEC_NONE: "0",
    CodeRate.FEC_1_2: "12",
    CodeRate.FEC_2_3: "23",
    CodeRate.FEC_3_4: "34",
    CodeRate.FEC_4_5: "45",
    CodeRate.FEC_5_6: "56",
    CodeRate.FEC_6_7: "67",
    CodeRate.FEC_7_8: "78",
    CodeRate.FEC_8_9: "89",
    CodeRate.FEC_3_5: "35",
    CodeRate.FEC_9_10: "910",
}

_MODULATION = {
    Modulation.QAM_16: "16",
    Modulation.QAM_32: "32",
    Modulation.QAM_64: "64",
    Modulation.QAM_128: "128",
    Modulation.QAM_256: "256",
    Modulation.QAM_512: "512",
    Modulation.QAM_1024: "1024",
    Modulation.QAM_4096: "4096",
    Modulation.QAM_AUTO: "998",
    Modulation.QPSK: "2",
    Modulation.PSK_8: "5",
    Modulation.APSK_16: "6",
    Modulation.APSK_32: "7",
    Modulation.VSB_8: "10",
    Modulation.VSB_16: "11",
    Modulation.DQPSK: "12",
}

_BANDWIDTH = {
    8000000: "8",
    7000000: "7",
    6000000: "6",
    5000000: "5",
    10000000: "10",
    1712000: "1712",
}

_TRANSMISSION = {
    TransmissionMode.TM_2K: "2",
    TransmissionMode.TM_8K: "8",
    TransmissionMode.TM_4K: "4",
    TransmissionMode.TM_1K: "1",
    TransmissionMode.TM_16K: "16",
    TransmissionMode.TM_32K: "32",
}

_GUARD = {
    GuardInterval.GI_1_32: "32",
    GuardInterval.GI_1_16: "16",
    GuardInterval.GI_1_8: "8",
    GuardInterval.GI_1_4: "4",
    GuardInterval.GI_1_128: "128",
    GuardInterval.GI_19_128: "19128",
    GuardInterval.GI_19_256: "19256",
}

_HIERARCHY = {
    Hierarchy.NONE: "0",
    Hierarchy.H1: "1",
    Hierarchy.H2: "2",
    Hierarchy.H4: "4",
}

_ROLLOFF = {Rolloff.R20: "20", Rolloff.R25: "25"}

_DELSYS = {
    DeliverySystem.DVBT: "0",
    DeliverySystem.DVBS: "0",
    DeliverySystem.DVBS2: "1",
    DeliverySystem.DVBT2: "1",
}

_POLARIZATION = {
    Polarization.HORIZONTAL: "h",
    Polarization.VERTICAL: "v",
    Polarization.CIRCULAR_LEFT: "l",
    Polarization.CIRCULAR_RIGHT: "r",
}


def short_name_to_vdr_name(satname: str) -> str:
    """The VDR source identifier for a satellite short name, or the name itself."""
    return next((vdr for short, vdr in TRANSLATIONS if short == satname), satname)


def vdr_name_to_short_name(satname: str) -> str:
    """The satellite short name for a VDR source identifier."""
    return next((short for short, vdr in TRANSLATIONS if vdr == satname), "unknown satellite")


def vdr_inversion_name(inversion: int) -> str:
    return _INVERSION.get(inversion, UNKNOWN)


def vdr_fec_name(fec: int) -> str:
    return _FEC.get(fec, UNKNOWN)


def vdr_modulation_name(modulation: int) -> str:
    return _MODULATION.get(modulation, UNKNOWN)


def vdr_bandwidth_name(bandwidth: int) -> str:
    return _BANDWIDTH.get(bandwidth, UNKNOWN)


def vdr_transmission_mode_name(transmission_mode: int) -> str:
    return _TRANSMISSION.get(transmission_mode, UNKNOWN)


def vdr_guard_name(guard_interval: int) -> str:
    return _GUARD.get(guard_interval, UNKNOWN)


def vdr_hierarchy_name(hierarchy: int) -> str:
    return _HIERARCHY.get(hierarchy, UNKNOWN)


def vdr_rolloff_name(rolloff: int) -> str:
    return _ROLLOFF.get(rolloff, "35")


def vdr_delsys_name(delsys: int) -> str:
    return _DELSYS.get(delsys, "0")


def _terrestrial_params(t: Transponder) -> str:
    params = (
        (t.bandwidth, 0, "B", vdr_bandwidth_name),
        (t.coderate, CodeRate.FEC_AUTO, "C", vdr_fec_name),
        (t.coderate_LP, CodeRate.FEC_AUTO, "D", vdr_fec_name),
        (t.guard, GuardInterval.AUTO, "G", vdr_guard_name),
        (t.inversion, Inversion.AUTO, "I", vdr_inversion_name),
        (t.modulation, Modulation.QAM_AUTO, "M", vdr_modulation_name),
        (t.delsys, DeliverySystem.DVBT, "S", vdr_delsys_name),
        (t.transmission, TransmissionMode.AUTO, "T", vdr_transmission_mode_name),
        (t.hierarchy, Hierarchy.AUTO, "Y", vdr_hierarchy_name),
    )
    text = "".join(ident + name(value) for value, default, ident, name in params if value != default)
    if t.delsys == DeliverySystem.DVBT2:
        text += f"P{t.plp_id}"
    return text


def _satellite_params(t: Transponder, flags: ScanFlags) -> str:
    try:
        pol = _POLARIZATION[t.polarization]
    except KeyError:
        raise ValueError(f"Unknown Polarization {int(t.polarization)}") from None
    text = f":{t.frequency // 1000}:{pol}C{vdr_fec_name(t.coderate)}"
    if t.delsys == DeliverySystem.DVBS2:
        text += f"M{vdr_modulation_name(t.modulation)}O{vdr_rolloff_name(t.rolloff)}S1:"
    else:
        # DVB-S is always rolloff 0.35 and QPSK; VDR expects O0 here.
        text += "M2O0S0:"
    text += f"{short_name_to_vdr_name(flags.list_name)}:{t.symbolrate // 1000}:"
    return text


def _param_text(t: Transponder, flags: ScanFlags) -> str:
    freq = t.frequency // 1000
    if flags.scantype == ScanType.TERRCABLE_ATSC:
        return f":{freq}:M{vdr_modulation_name(t.modulation)}:A:{t.symbolrate // 1000}:"
    if flags.scantype == ScanType.CABLE:
        return f":{freq}:M{vdr_modulation_name(t.modulation)}:C:{t.symbolrate // 1000}:"
    if flags.scantype == ScanType.TERRESTRIAL:
        return f":{freq}:{_terrestrial_params(t)}:T:27500:"
    if flags.scantype == ScanType.SATELLITE:
        return _satellite_params(t, flags)
    return ""


def dump_param_vdr(f: TextIO, t: Transponder, flags: ScanFlags) -> None:
    """Write ":frequency:params:source:symbolrate:" in VDR >= 1.7.4 syntax."""
    f.write(_param_text(t, flags))


def _at(items: Sequence, i: int, default):
    return items[i] if i < len(items) else default


def _lang(langs: Sequence[str], i: int) -> str:
    lang = _at(langs, i, "")
    return f"={lang[:4]}" if lang else ""


def _audio_text(s: Service, flags: ScanFlags) -> str:
    text = str(_at(s.audio_pids, 0, 0)) + _lang(s.audio_langs, 0)
    first_type = _at(s.audio_stream_types, 0, 0)
    if first_type:
        text += f"@{first_type}"
    for i in range(1, len(s.audio_pids)):
        text += f",{s.audio_pids[i]}" + _lang(s.audio_langs, i)
        stream_type = _at(s.audio_stream_types, i, 0)
        if flags.vdr_version > 7 and stream_type:
            text += f"@{stream_type}"
    if s.ac3_pids:
        entries = []
        for i, pid in enumerate(s.ac3_pids):
            entry = str(pid)
            if flags.vdr_version > 7:
                entry += _lang(s.ac3_langs, i)
            entries.append(entry)
        text += ";" + ",".join(entries)
    return text


def _service_line(s: Service, t: Transponder, flags: ScanFlags) -> str:
    parts = [s.service_name]
    if flags.dump_provider:
        parts.append(f";{s.provider_name or ''}")
    parts.append(_param_text(t, flags))

    video = str(s.video_pid)
    if s.video_pid and s.pcr_pid != s.video_pid:
        video += f"+{s.pcr_pid}"
    if s.video_stream_type:
        video += f"={s.video_stream_type}"
    parts.append(video + ":")

    parts.append(_audio_text(s, flags))

    parts.append(f":{s.teletext_pid}")
    if s.subtitling_pids:
        subs = (f"{pid}" + _lang(s.subtitling_langs, i) for i, pid in enumerate(s.subtitling_pids))
        parts.append(";" + ",".join(subs))

    ca_first = _at(s.ca_ids, 0, 0)
    parts.append(f":{ca_first:X}")
    parts.extend(f",{ca:X}" for ca in s.ca_ids[1:] if ca != 0)

    onid = t.original_network_id if t.transport_stream_id > 0 else 0
    parts.append(f":{s.service_id}:{onid}:{t.transport_stream_id}:0")
    if flags.print_pmt:
        parts.append(f":{s.pmt_pid}")
    parts.append("\n")
    return "".join(parts)


def vdr_dump_service_parameter_set(f: TextIO, s: Service, t: Transponder, flags: ScanFlags) -> None:
    """Write one complete channels.conf line for ``s``; scrambled ones only if selected."""
    if not flags.ca_select and s.scrambled:
        return
    f.write(_service_line(s, t, flags))