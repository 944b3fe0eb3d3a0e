"""DVB tuning-data conversion, DiSEqC/SCR control and channel list writers for VDR, VLC and dvbscan."""

__version__ = "0.1.0"