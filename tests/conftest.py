import pytest

from xrpex import profiles
from xrpex.xrandr import XRandR

VERSION = "xrandr program version       1.5.1\nServer reports RandR version 1.6\n"

LISTMONITORS = """Monitors: 2
 0: +*DP-5 3840/1210x2160/680+0+0  DP-5
 1: +HDMI-1 1920/530x1080/300+3840+0  HDMI-1
"""

LISTMONITORS_SPLIT = """Monitors: 3
 0: DP-5-XRPEX-0-0 1920/605x2160/680+0+0  DP-5
 1: DP-5-XRPEX-1920-0 1920/605x2160/680+1920+0
 2: +HDMI-1 1920/530x1080/300+3840+0  HDMI-1
"""


class FakeXRandR(XRandR):
    """XRandR answering from canned output and recording every call."""

    def __init__(self, listmonitors=LISTMONITORS, version=VERSION, **kwargs):
        self.calls = []
        self.listmonitors = listmonitors
        self.version = version
        super().__init__(**kwargs)

    def _output(self, *args):
        self.calls.append(args)
        if args == ("--version",):
            return self.version
        if args == ("--listmonitors",):
            return self.listmonitors
        return ""


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / 'xrpex' / 'config'
    monkeypatch.setattr(profiles, 'CONFIG_FILE', str(path))
    monkeypatch.delenv(profiles.MONITOR_ENV, raising=False)
    return path
