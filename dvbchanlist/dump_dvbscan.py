"""Writing initial tuning data files from found transponders."""

from __future__ import annotations

import datetime
from typing import TextIO

from .dvbscan import (
    atsc_mod_to_txt,
    cable_fec_to_txt,
    cable_mod_to_txt,
    sat_delivery_system_to_txt,
    sat_fec_to_txt,
    sat_mod_to_txt,
    sat_pol_to_txt,
    sat_rolloff_to_txt,
    scantype_to_txt,
    terr_bw_to_txt,
    terr_fec_to_txt,
    terr_guard_to_txt,
    terr_hierarchy_to_txt,
    terr_mod_to_txt,
    terr_transmission_to_txt,
)
from .models import DeliverySystem, ScanFlags, ScanType, Transponder

PROGRAM_NAME = "dvbchanlist"

_RULE = "#" + "-" * 78 + "\n"

_COLUMNS = {
    ScanType.TERRCABLE_ATSC: "# A[2] <freq> <mod> [# comment]\n",
    ScanType.CABLE: (
        "# C[2] <freq> <sr> <fec> <mod> [plp_id] [data_slice_id] [system_id] [# comment]\n"
    ),
    ScanType.TERRESTRIAL: (
        "# T[2] <freq> <bw> <fec_hi> <fec_lo> <mod> <tm> <guard> <hi> [plp_id] [# comment]\n"
    ),
    ScanType.SATELLITE: (
        "# S[2] <freq> <pol> <sr> <fec> [ro] [mod] [isi] [pls_code] [pls_mode] [# comment]\n"
    ),
}


def _header(flags: ScanFlags, today: datetime.date) -> str:
    if flags.scantype not in _COLUMNS:
        raise ValueError(f"unknown scan type {int(flags.scantype)}")
    lines = [
        _RULE,
        f"# file automatically generated by {PROGRAM_NAME}\n",
        f"#! <w_scan> {flags.version} {flags.tuning_timeout} {flags.filter_timeout} "
        f"{scantype_to_txt(flags.scantype)} {flags.list_name} </w_scan>\n",
        _RULE,
    ]
    if flags.scantype == ScanType.SATELLITE:
        lines.append(f"# satellite            : {flags.list_name}\n")
    else:
        lines.append("# location and provider: <add description here>\n")
    lines.append(f"# date (yyyy-mm-dd)    : {today.year:04d}-{today.month:02d}-{today.day:02d}\n")
    lines.append("# provided by (opt)    : <your name or email here>\n")
    lines.append("#\n")
    lines.append(_COLUMNS[flags.scantype])
    lines.append(_RULE)
    return "".join(lines)


def _atsc_line(t: Transponder) -> str:
    return "A %9i %8s" % (t.frequency, atsc_mod_to_txt(t.modulation))


def _cable_line(t: Transponder) -> str:
    parts = ["C "]
    if t.delsys == DeliverySystem.DVBC2:
        parts.append("2 %u %u %u" % (t.plp_id, t.data_slice_id, t.system_id))
    parts.append(
        "%9i %7i %4s %8s"
        % (t.frequency, t.symbolrate, cable_fec_to_txt(t.coderate), cable_mod_to_txt(t.modulation))
    )
    return "".join(parts)


def _terrestrial_line(t: Transponder) -> str:
    line = "%s %9i %4s %4s %4s %8s %4s %4s %4s" % (
        "T2" if t.delsys == DeliverySystem.DVBT2 else "T",
        t.frequency,
        terr_bw_to_txt(t.bandwidth),
        terr_fec_to_txt(t.coderate),
        terr_fec_to_txt(t.coderate_LP),
        terr_mod_to_txt(t.modulation),
        terr_transmission_to_txt(t.transmission),
        terr_guard_to_txt(t.guard),
        terr_hierarchy_to_txt(t.hierarchy),
    )
    if t.plp_id:
        line += " %u" % t.plp_id
    return line


def _satellite_line(t: Transponder) -> str:
    line = "%-2s %8i %1s %8i %4s" % (
        sat_delivery_system_to_txt(t.delsys),
        t.frequency,
        sat_pol_to_txt(t.polarization),
        t.symbolrate,
        sat_fec_to_txt(t.coderate),
    )
    if t.delsys != DeliverySystem.DVBS:
        line += " %2s %6s" % (sat_rolloff_to_txt(t.rolloff), sat_mod_to_txt(t.modulation))
    return line


_LINE_WRITERS = {
    ScanType.TERRCABLE_ATSC: _atsc_line,
    ScanType.CABLE: _cable_line,
    ScanType.TERRESTRIAL: _terrestrial_line,
    ScanType.SATELLITE: _satellite_line,
}


def dvbscan_dump_tuningdata(
    f: TextIO,
    t: Transponder,
    index: int,
    flags: ScanFlags,
    today: datetime.date | None = None,
) -> None:
    """Write ``t`` as one initial tuning data line; index 0 writes the file header first."""
    if index == 0:
        f.write(_header(flags, today or datetime.date.today()))

    writer = _LINE_WRITERS.get(flags.scantype)
    line = writer(t) if writer else ""
    if t.network_name is not None:
        line += f"\t# {t.network_name}"
    f.write(line + "\n")