# dvbchanlist

Tools for DVB tuning data. Use them after a scan has found transponders and services,
or when a satellite dish needs to be set up to receive one.

- `dvbchanlist.models`: the data types `Transponder`, `Service`, `ScanFlags`, `LnbType`
  and `ScrConfig`, and the parameter enums `DeliverySystem`, `Modulation`, `CodeRate`,
  `Inversion`, `GuardInterval`, `TransmissionMode`, `Hierarchy`, `Rolloff`, `Pilot`,
  `Polarization` and `ScanType`.
- `dvbchanlist.dvbscan`: converts between the text tokens of initial tuning data files
  and parameter values, in both directions. Examples are `txt_to_cable_mod("QAM64")`,
  `terr_bw_to_txt(8000000)` and `sat_pol_to_txt(Polarization.VERTICAL)`. Text lookups
  ignore case. An unknown token gives the same fixed fallback value every time, and
  never raises.
- `dvbchanlist.dump_dvbscan`: `dvbscan_dump_tuningdata(f, t, index, flags, today=None)`
  writes one transponder as a line of initial tuning data. When `index` is 0 it writes
  the file header first. The header is dated `today`, or the current date if `today`
  is not given.
- `dvbchanlist.vdr`: `vdr_dump_service_parameter_set` writes a complete VDR
  `channels.conf` line. `dump_param_vdr` writes only the tuning part. The module also
  has the `vdr_*_name` parameter translators. `short_name_to_vdr_name` and
  `vdr_name_to_short_name` translate satellite names, for example `"S19E2"` to
  `"S19.2E"`.
- `dvbchanlist.vlc`: `XspfPlaylist` writes an XSPF playlist with DVB tuning options that
  VLC reads. `xml_escape_service_name` makes a service name safe for the playlist.
- `dvbchanlist.diseqc`: DiSEqC committed and uncommitted switch commands
  (`setup_switch`, `diseqc_send_msg`) and DiSEqC 1.2 positioner control
  (`rotor_message`, `rotor_command`, `rotate_rotor`, `rotor_angle`). It also reads the
  DiSEqC 2.2 positioner status (`get_positioner_status`).
- `dvbchanlist.scr`: single cable routing (EN 50494 and EN 50607). It builds messages
  (`scr_prepare_en50494`, `scr_prepare_en50607`), tunes a user band (`setup_scr`) and
  switches a user band off (`scr_poweroff`).

## Installation

```
pip install .
```

The package needs only the standard library. To run the tests:

```
pip install ".[test]"
pytest
```

## Writing a VDR channel line

```python
import sys

from dvbchanlist.models import (
    DeliverySystem, Modulation, Polarization, ScanFlags, ScanType, Service, Transponder,
)
from dvbchanlist.vdr import vdr_dump_service_parameter_set

t = Transponder(
    delsys=DeliverySystem.DVBS2,
    frequency=11493750,
    polarization=Polarization.HORIZONTAL,
    symbolrate=22000000,
    modulation=Modulation.PSK_8,
)
s = Service(service_name="Example TV", service_id=100, video_pid=101, pcr_pid=101)
flags = ScanFlags(scantype=ScanType.SATELLITE, list_name="S19E2")

vdr_dump_service_parameter_set(sys.stdout, s, t, flags)
```

A scrambled service is written only when `flags.ca_select` is true.

## Writing a VLC playlist

```python
from dvbchanlist.models import LnbType
from dvbchanlist.vlc import XspfPlaylist

with open("channels.xspf", "w", encoding="utf-8") as out:
    with XspfPlaylist(out) as playlist:
        playlist.dump_service(s, t, flags, LnbType())
```

Entering the `with` block writes the prolog. Leaving it writes the epilog. You can also
call `prolog()` and `epilog()` yourself.

## Talking to a frontend

The DiSEqC and SCR functions do not open a device themselves. Subclass
`dvbchanlist.diseqc.Frontend` and implement these methods:

- `set_tone`
- `set_voltage`
- `send_master_cmd`
- `recv_slave_reply`
- `send_burst`

`sleep` is optional to override. Overriding it with a no-op is useful in tests.

When one of your methods raises `OSError`, the functions raise `DiseqcError`.
Bad input raises `ValueError`. Examples are a switch index outside 0..15 or an SCR norm
other than 1 or 2.

`rotate_rotor` returns the rotor position after the move. It uses the `angles` mapping,
from rotor position to orbital angle, to estimate how long the move takes. If the rotor
does not answer a status request, `rotate_rotor` sets
`frontend.positioner_status_supported` to false and stops asking.
`setup_scr` and `scr_poweroff` return the message they sent. `setup_scr` also sets
`config.offset`: tune to the user band frequency plus this offset.

## What this package does not do

- It does not scan. It has no device access, no table parsing (PAT, PMT, NIT, SDT) and
  no country, satellite or LNB lists.
- It has no command-line program.
- It only writes channel lists. It does not read them back.
- It cannot write the xine, mplayer or XML service list formats.