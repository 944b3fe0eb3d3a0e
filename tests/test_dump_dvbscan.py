import datetime
import io

import pytest

from dvbchanlist.dump_dvbscan import dvbscan_dump_tuningdata
from dvbchanlist.dvbscan import (
    txt_to_atsc_mod,
    txt_to_cable_fec,
    txt_to_cable_mod,
    txt_to_sat_delivery_system,
    txt_to_sat_fec,
    txt_to_sat_mod,
    txt_to_sat_pol,
    txt_to_sat_rolloff,
    txt_to_terr_bw,
    txt_to_terr_fec,
    txt_to_terr_guard,
    txt_to_terr_hierarchy,
    txt_to_terr_mod,
    txt_to_terr_transmission,
)
from dvbchanlist.models import (
    CodeRate,
    DeliverySystem,
    GuardInterval,
    Hierarchy,
    Modulation,
    Polarization,
    Rolloff,
    ScanFlags,
    ScanType,
    TransmissionMode,
    Transponder,
)

TODAY = datetime.date(2024, 1, 5)


def _dump(t, flags, index=1):
    out = io.StringIO()
    dvbscan_dump_tuningdata(out, t, index, flags, TODAY)
    return out.getvalue()


def _terr():
    return Transponder(
        frequency=474000000,
        bandwidth=8000000,
        delsys=DeliverySystem.DVBT,
        coderate=CodeRate.FEC_2_3,
        coderate_LP=CodeRate.FEC_AUTO,
        modulation=Modulation.QAM_64,
        transmission=TransmissionMode.TM_8K,
        guard=GuardInterval.GI_1_4,
        hierarchy=Hierarchy.NONE,
    )


def test_terrestrial_tokens():
    text = _dump(_terr(), ScanFlags(scantype=ScanType.TERRESTRIAL))
    assert text.endswith("\n")
    assert text.split() == ["T", "474000000", "8MHz", "2/3", "AUTO", "QAM64", "8k", "1/4", "NONE"]


def test_terrestrial_round_trip():
    t = _terr()
    tokens = _dump(t, ScanFlags(scantype=ScanType.TERRESTRIAL)).split()
    assert int(tokens[1]) == t.frequency
    assert txt_to_terr_bw(tokens[2]) == t.bandwidth
    assert txt_to_terr_fec(tokens[3]) == t.coderate
    assert txt_to_terr_fec(tokens[4]) == t.coderate_LP
    assert txt_to_terr_mod(tokens[5]) == t.modulation
    assert txt_to_terr_transmission(tokens[6]) == t.transmission
    assert txt_to_terr_guard(tokens[7]) == t.guard
    assert txt_to_terr_hierarchy(tokens[8]) == t.hierarchy


def test_terrestrial_t2_with_plp():
    t = _terr()
    t.delsys = DeliverySystem.DVBT2
    t.plp_id = 3
    tokens = _dump(t, ScanFlags(scantype=ScanType.TERRESTRIAL)).split()
    assert tokens[0] == "T2"
    assert tokens[-1] == "3"
    assert len(tokens) == 10


def test_cable_round_trip():
    t = Transponder(
        frequency=330000000,
        symbolrate=6900000,
        delsys=DeliverySystem.DVBC_ANNEX_A,
        coderate=CodeRate.FEC_NONE,
        modulation=Modulation.QAM_256,
    )
    tokens = _dump(t, ScanFlags(scantype=ScanType.CABLE)).split()
    assert tokens[0] == "C"
    assert int(tokens[1]) == t.frequency
    assert int(tokens[2]) == t.symbolrate
    assert txt_to_cable_fec(tokens[3]) == t.coderate
    assert txt_to_cable_mod(tokens[4]) == t.modulation


def test_atsc_round_trip():
    t = Transponder(frequency=57028615, delsys=DeliverySystem.ATSC, modulation=Modulation.VSB_8)
    tokens = _dump(t, ScanFlags(scantype=ScanType.TERRCABLE_ATSC)).split()
    assert tokens == ["A", "57028615", "8VSB"]
    assert txt_to_atsc_mod(tokens[2]) == t.modulation


def test_satellite_s2_with_network_name():
    t = Transponder(
        frequency=11778000,
        symbolrate=27500000,
        delsys=DeliverySystem.DVBS2,
        polarization=Polarization.VERTICAL,
        coderate=CodeRate.FEC_2_3,
        rolloff=Rolloff.R35,
        modulation=Modulation.PSK_8,
        network_name="Test Network",
    )
    text = _dump(t, ScanFlags(scantype=ScanType.SATELLITE))
    line, comment = text.rstrip("\n").split("\t# ")
    assert comment == "Test Network"
    tokens = line.split()
    assert txt_to_sat_delivery_system(tokens[0]) == DeliverySystem.DVBS2
    assert int(tokens[1]) == t.frequency
    assert txt_to_sat_pol(tokens[2]) == Polarization.VERTICAL
    assert int(tokens[3]) == t.symbolrate
    assert txt_to_sat_fec(tokens[4]) == CodeRate.FEC_2_3
    assert txt_to_sat_rolloff(tokens[5]) == Rolloff.R35
    assert txt_to_sat_mod(tokens[6]) == Modulation.PSK_8


def test_satellite_dvbs_omits_rolloff_and_modulation():
    t = Transponder(
        frequency=12188000,
        symbolrate=27500000,
        delsys=DeliverySystem.DVBS,
        polarization=Polarization.HORIZONTAL,
        coderate=CodeRate.FEC_3_4,
    )
    tokens = _dump(t, ScanFlags(scantype=ScanType.SATELLITE)).split()
    assert tokens == ["S", "12188000", "H", "27500000", "3/4"]


def test_header_written_only_for_index_zero():
    flags = ScanFlags(
        version="20240105",
        tuning_timeout=3,
        filter_timeout=5,
        scantype=ScanType.SATELLITE,
        list_name="S19E2",
    )
    t = Transponder(frequency=12188000, symbolrate=27500000, delsys=DeliverySystem.DVBS)
    first = _dump(t, flags, index=0)
    assert "#! <w_scan> 20240105 3 5 SATELLITE S19E2 </w_scan>\n" in first
    assert "# satellite            : S19E2\n" in first
    assert "# date (yyyy-mm-dd)    : 2024-01-05\n" in first
    data_lines = [line for line in first.splitlines() if not line.startswith("#")]
    assert data_lines == [_dump(t, flags).rstrip("\n")]
    assert not _dump(t, flags, index=1).startswith("#")


def test_header_for_terrestrial_has_location_line():
    flags = ScanFlags(scantype=ScanType.TERRESTRIAL, list_name="DE")
    text = _dump(_terr(), flags, index=0)
    assert "# location and provider: <add description here>\n" in text
    assert "# T[2] <freq> <bw> <fec_hi> <fec_lo> <mod> <tm> <guard> <hi> [plp_id] [# comment]\n" in text


def test_unknown_scantype_in_header_raises():
    with pytest.raises(ValueError):
        _dump(_terr(), ScanFlags(scantype=ScanType.UNDEFINED), index=0)


def test_unknown_scantype_without_header_writes_only_comment():
    t = _terr()
    t.network_name = "Net"
    assert _dump(t, ScanFlags(scantype=ScanType.UNDEFINED)) == "\t# Net\n"