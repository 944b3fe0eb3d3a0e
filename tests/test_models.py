from dvbchanlist.models import (
    CodeRate,
    DeliverySystem,
    LnbType,
    Modulation,
    ScanFlags,
    ScanType,
    ScrConfig,
    Service,
    Transponder,
)


def test_lnb_high_band_switch():
    lnb = LnbType(low_val=9750000, high_val=10600000, switch_val=11700000)
    assert lnb.is_high_band(12000000) is True
    assert lnb.is_high_band(11700000) is True
    assert lnb.is_high_band(11000000) is False


def test_lnb_local_oscillator_follows_band():
    lnb = LnbType(low_val=9750000, high_val=10600000, switch_val=11700000)
    assert lnb.local_oscillator(12000000) == 10600000
    assert lnb.local_oscillator(11000000) == 9750000


def test_single_band_lnb_never_high():
    lnb = LnbType(low_val=5150000, high_val=0, switch_val=0)
    assert lnb.is_high_band(4000000) is False
    assert lnb.local_oscillator(4000000) == 5150000


def test_scr_pin_presence():
    assert ScrConfig().has_pin is False
    assert ScrConfig(pin=255).has_pin is True
    assert ScrConfig(pin=0).has_pin is True
    assert ScrConfig(pin=256).has_pin is False


def test_service_lists_are_independent():
    a = Service()
    b = Service()
    a.audio_pids.append(101)
    assert b.audio_pids == []
    assert a.audio_pids == [101]


def test_transponder_defaults_are_auto():
    t = Transponder()
    assert t.modulation == Modulation.QAM_AUTO
    assert t.coderate == CodeRate.FEC_AUTO
    assert t.delsys == DeliverySystem.UNDEFINED
    assert t.network_name is None


def test_scan_flags_default_scantype():
    flags = ScanFlags()
    assert flags.scantype == ScanType.TERRESTRIAL
    assert flags.ca_select is True