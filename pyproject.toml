[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dvbchanlist"
version = "0.1.0"
description = "DVB tuning-data conversions, DiSEqC/SCR control and channel list writers for VDR, VLC and dvbscan"
requires-python = ">=3.10"
dependencies = []
keywords = ["dvb", "diseqc", "scr", "unicable", "vdr", "vlc", "xspf", "channels.conf", "satellite"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dvbchanlist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
