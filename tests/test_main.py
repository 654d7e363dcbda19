import pytest

from conftest import LISTMONITORS_SPLIT, FakeXRandR
from xrpex import main as main_module
from xrpex import profiles


class CreatedList(list):
    pass


@pytest.fixture
def xrandrs(monkeypatch):
    """Replace XRandR in the CLI; returns the list of created fakes."""
    created = CreatedList()
    listmonitors = {}

    def factory(**kwargs):
        xrandr = FakeXRandR(**listmonitors, **kwargs)
        created.append(xrandr)
        return xrandr

    monkeypatch.setattr(main_module, 'XRandR', factory)
    created.listmonitors = listmonitors
    return created


@pytest.fixture(autouse=True)
def isolated_config(config_file):
    return config_file


def test_apply(xrandrs):
    assert main_module.main(['-m', 'DP-5', '1+1:']) == 0
    (xrandr,) = xrandrs
    assert xrandr.calls[-1][0] == '--setmonitor'
    assert xrandr.calls[-1].count('--setmonitor') == 2


def test_apply_monitor_from_environment(xrandrs, monkeypatch):
    monkeypatch.setenv(profiles.MONITOR_ENV, 'HDMI-1')
    assert main_module.main([':1+1']) == 0
    assert xrandrs[0].calls[-1][1] == 'HDMI-1-XRPEX-0-0'


def test_apply_profile(xrandrs):
    profiles.save_profile('halves', '1+1:')
    assert main_module.main(['-m', 'DP-5', '@halves']) == 0
    assert xrandrs[0].calls[-1][1:3] == ('DP-5-XRPEX-0-0', '1920/605x2160/680+0+0')


def test_unknown_profile_is_usage_error(xrandrs):
    with pytest.raises(SystemExit) as e:
        main_module.main(['-m', 'DP-5', '@nothing'])
    assert e.value.code == 2


def test_missing_monitor_is_usage_error(xrandrs):
    with pytest.raises(SystemExit) as e:
        main_module.main(['1+1:'])
    assert e.value.code == 2


def test_bad_ratio(xrandrs, capsys):
    assert main_module.main(['-m', 'DP-5', '1+1']) == 1
    assert capsys.readouterr().err.startswith('xrpex: error: parse error')
    assert xrandrs == []


def test_unknown_monitor(xrandrs, capsys):
    assert main_module.main(['-m', 'VGA-1', '1+1:']) == 1
    assert "VGA-1" in capsys.readouterr().err


def test_unequal_scales(xrandrs, capsys):
    assert main_module.main(['-m', 'HDMI-1', '1:1+1']) == 1
    assert "unequal" in capsys.readouterr().err


def test_dry_run(xrandrs, capsys):
    assert main_module.main(['-m', 'DP-5', '--dry-run', '1+1:']) == 0
    out = capsys.readouterr().out
    assert out.startswith('#!/bin/sh\n')
    assert '--setmonitor DP-5-XRPEX-0-0' in out
    assert all(call[0] in ('--version', '--listmonitors') for call in xrandrs[0].calls)


def test_reset(xrandrs):
    xrandrs.listmonitors['listmonitors'] = LISTMONITORS_SPLIT
    assert main_module.main(['-m', 'DP-5', '--reset']) == 0
    assert xrandrs[0].calls[-1][0] == '--delmonitor'


def test_list(xrandrs, capsys):
    assert main_module.main(['--list']) == 0
    assert capsys.readouterr().out.splitlines() == [
        'DP-5 3840x2160+0+0 DP-5',
        'HDMI-1 1920x1080+3840+0 HDMI-1',
    ]


def test_save_and_list_profiles(capsys):
    assert main_module.main(['--save', 'thirds', '++:']) == 0
    assert main_module.main(['--profiles']) == 0
    assert capsys.readouterr().out == 'thirds = ++:\n'


def test_dry_run_on_split_monitor(xrandrs, capsys):
    xrandrs.listmonitors['listmonitors'] = LISTMONITORS_SPLIT
    assert main_module.main(['-m', 'DP-5', '--dry-run', '1+1:']) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == '#!/bin/sh'
    assert lines[1].startswith('xrandr --delmonitor DP-5-XRPEX-0-0')
    assert lines[2].startswith('xrandr --setmonitor DP-5-XRPEX-0-0')


def test_dry_run_reset_renders_script(xrandrs, capsys):
    xrandrs.listmonitors['listmonitors'] = LISTMONITORS_SPLIT
    assert main_module.main(['-m', 'DP-5', '--dry-run', '--reset']) == 0
    assert capsys.readouterr().out == (
        '#!/bin/sh\n'
        'xrandr --delmonitor DP-5-XRPEX-0-0 --delmonitor DP-5-XRPEX-1920-0\n'
    )
    assert all(call[0] != '--delmonitor' for call in xrandrs[0].calls)


def test_huge_numeral_is_reported(xrandrs, capsys):
    assert main_module.main(['-m', 'DP-5', '9' * 5000 + ':']) == 1
    assert 'TooLarge' in capsys.readouterr().err


def test_set_monitor(xrandrs):
    assert main_module.main(['--set-monitor', 'HDMI-1']) == 0
    assert profiles.default_monitor() == 'HDMI-1'
    assert main_module.main([':1+1']) == 0
    assert xrandrs[0].calls[-1][1] == 'HDMI-1-XRPEX-0-0'


def test_delete_profile():
    profiles.save_profile('halves', '1+1:')
    assert main_module.main(['--delete-profile', 'halves']) == 0
    assert profiles.list_profiles() == []
    with pytest.raises(SystemExit) as e:
        main_module.main(['--delete-profile', 'halves'])
    assert e.value.code == 2
