import pytest

from dvbchanlist import dvbscan
from dvbchanlist.models import (
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


@pytest.mark.parametrize(
    "to_id, to_txt, names",
    [
        (dvbscan.txt_to_terr_bw, dvbscan.terr_bw_to_txt,
         ["8MHz", "7MHz", "6MHz", "5MHz", "10MHz", "1.712MHz"]),
        (dvbscan.txt_to_terr_fec, dvbscan.terr_fec_to_txt,
         ["NONE", "1/2", "2/3", "3/4", "4/5", "5/6", "6/7", "7/8", "3/5", "AUTO"]),
        (dvbscan.txt_to_terr_mod, dvbscan.terr_mod_to_txt,
         ["QPSK", "QAM16", "QAM64", "QAM256", "AUTO"]),
        (dvbscan.txt_to_terr_transmission, dvbscan.terr_transmission_to_txt,
         ["2k", "8k", "4k", "1k", "16k", "32k", "AUTO"]),
        (dvbscan.txt_to_terr_guard, dvbscan.terr_guard_to_txt,
         ["1/32", "1/16", "1/8", "1/4", "1/128", "19/128", "19/256", "AUTO"]),
        (dvbscan.txt_to_terr_hierarchy, dvbscan.terr_hierarchy_to_txt,
         ["NONE", "1", "2", "4", "AUTO"]),
        (dvbscan.txt_to_cable_fec, dvbscan.cable_fec_to_txt,
         ["NONE", "1/2", "8/9", "3/5", "9/10", "AUTO"]),
        (dvbscan.txt_to_cable_mod, dvbscan.cable_mod_to_txt,
         ["QAM16", "QAM32", "QAM64", "QAM128", "QAM256", "QAM512", "QAM1024", "QAM4096"]),
        (dvbscan.txt_to_atsc_mod, dvbscan.atsc_mod_to_txt,
         ["QAM64", "QAM256", "8VSB", "16VSB"]),
        (dvbscan.txt_to_sat_pol, dvbscan.sat_pol_to_txt, ["H", "V", "R", "L"]),
        (dvbscan.txt_to_sat_fec, dvbscan.sat_fec_to_txt,
         ["NONE", "1/2", "2/3", "3/4", "8/9", "3/5", "9/10", "AUTO"]),
        (dvbscan.txt_to_sat_rolloff, dvbscan.sat_rolloff_to_txt,
         ["35", "25", "20", "AUTO"]),
        (dvbscan.txt_to_sat_mod, dvbscan.sat_mod_to_txt,
         ["QPSK", "8PSK", "16APSK", "32APSK"]),
        (dvbscan.txt_to_scantype, dvbscan.scantype_to_txt,
         ["TERRCABLE_ATSC", "CABLE", "TERRESTRIAL", "SATELLITE"]),
    ],
)
def test_round_trip(to_id, to_txt, names):
    for name in names:
        assert to_txt(to_id(name)) == name


def test_lookup_is_case_insensitive():
    assert dvbscan.txt_to_terr_mod("qam64") == Modulation.QAM_64
    assert dvbscan.txt_to_terr_transmission("8K") == TransmissionMode.TM_8K
    assert dvbscan.txt_to_sat_pol("v") == Polarization.VERTICAL
    assert dvbscan.txt_to_scantype("satellite") == ScanType.SATELLITE


def test_terrestrial_values():
    assert dvbscan.txt_to_terr_bw("7MHz") == 7000000
    assert dvbscan.txt_to_terr_bw("1.712MHz") == 1712000
    assert dvbscan.txt_to_terr_guard("19/256") == GuardInterval.GI_19_256
    assert dvbscan.txt_to_terr_hierarchy("4") == Hierarchy.H4
    assert dvbscan.txt_to_terr_fec("3/4") == CodeRate.FEC_3_4


def test_terrestrial_auto_bandwidth_is_8mhz():
    assert dvbscan.txt_to_terr_bw("AUTO") == 8000000
    assert dvbscan.terr_bw_to_txt(8000000) == "8MHz"


def test_fallbacks_for_unknown_text():
    assert dvbscan.txt_to_terr_bw("bogus") == 8000000
    assert dvbscan.txt_to_terr_fec("bogus") == CodeRate.FEC_AUTO
    assert dvbscan.txt_to_terr_mod("bogus") == Modulation.QAM_AUTO
    assert dvbscan.txt_to_terr_transmission("bogus") == TransmissionMode.AUTO
    assert dvbscan.txt_to_terr_guard("bogus") == GuardInterval.AUTO
    assert dvbscan.txt_to_terr_hierarchy("bogus") == Hierarchy.AUTO
    assert dvbscan.txt_to_cable_mod("bogus") == Modulation.QAM_AUTO
    assert dvbscan.txt_to_atsc_mod("bogus") == Modulation.QAM_AUTO
    assert dvbscan.txt_to_sat_delivery_system("bogus") == DeliverySystem.DVBS
    assert dvbscan.txt_to_sat_pol("bogus") == Polarization.HORIZONTAL
    assert dvbscan.txt_to_sat_rolloff("bogus") == Rolloff.R35
    assert dvbscan.txt_to_sat_mod("bogus") == Modulation.QPSK
    assert dvbscan.txt_to_scantype("bogus") == ScanType.TERRESTRIAL


def test_fallbacks_for_unknown_ids():
    assert dvbscan.terr_bw_to_txt(1234) == "AUTO"
    assert dvbscan.terr_mod_to_txt(Modulation.VSB_8) == "AUTO"
    assert dvbscan.cable_mod_to_txt(Modulation.QPSK) == "AUTO"
    assert dvbscan.atsc_mod_to_txt(Modulation.QAM_16) == "AUTO"
    assert dvbscan.sat_delivery_system_to_txt(DeliverySystem.DVBT) == "S"
    assert dvbscan.sat_pol_to_txt(99) == "H"
    assert dvbscan.sat_rolloff_to_txt(99) == "35"
    assert dvbscan.sat_mod_to_txt(Modulation.QAM_64) == "QPSK"
    assert dvbscan.scantype_to_txt(ScanType.UNDEFINED) == "TERRESTRIAL"


def test_satellite_delivery_system_aliases():
    assert dvbscan.txt_to_sat_delivery_system("S1") == DeliverySystem.DVBS
    assert dvbscan.txt_to_sat_delivery_system("S2") == DeliverySystem.DVBS2
    assert dvbscan.sat_delivery_system_to_txt(DeliverySystem.DVBS) == "S"
    assert dvbscan.sat_delivery_system_to_txt(DeliverySystem.DVBS2) == "S2"


def test_satellite_auto_quirks():
    assert dvbscan.txt_to_sat_mod("AUTO") == Modulation.QPSK
    assert dvbscan.sat_mod_to_txt(Modulation.QPSK) == "QPSK"
    assert dvbscan.txt_to_sat_rolloff("AUTO") == Rolloff.AUTO


def test_terrestrial_fec_has_no_8_9():
    assert dvbscan.txt_to_terr_fec("8/9") == CodeRate.FEC_AUTO
    assert dvbscan.terr_fec_to_txt(CodeRate.FEC_8_9) == "AUTO"
    assert dvbscan.cable_fec_to_txt(CodeRate.FEC_8_9) == "8/9"