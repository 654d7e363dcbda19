# xrpex -- Ratio Partitioned Monitors for xrandr
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Settings and named ratio profiles for xrpex."""

import configparser
import logging
import os

from .sums_in_ratio import IndeterminateSumsInRatio

log = logging.getLogger('xrpex')

CONFIG_DIR = os.path.join(
    os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config')),
    'xrpex'
)
CONFIG_FILE = os.path.join(CONFIG_DIR, 'config')

SECTION = 'xrpex'
PROFILES_SECTION = 'profiles'
MONITOR_ENV = 'XRPEX_MONITOR'


# ── Settings ──────────────────────────────────────────────────────────

def _read_config():
    # no interpolation: ratio expressions are stored verbatim
    cfg = configparser.ConfigParser(interpolation=None)
    cfg.read(CONFIG_FILE)
    return cfg


def _write_config(cfg):
    os.makedirs(os.path.dirname(CONFIG_FILE), exist_ok=True)
    with open(CONFIG_FILE, 'w') as f:
        cfg.write(f)


def get_setting(key, default=None):
    cfg = _read_config()
    return cfg.get(SECTION, key, fallback=default)


def set_setting(key, value):
    cfg = _read_config()
    if not cfg.has_section(SECTION):
        cfg.add_section(SECTION)
    cfg.set(SECTION, key, value)
    _write_config(cfg)


def default_monitor():
    """Monitor to split when none is given: $XRPEX_MONITOR, then the config file."""
    return os.environ.get(MONITOR_ENV) or get_setting('monitor')


# ── Profiles ──────────────────────────────────────────────────────────

def list_profiles():
    cfg = _read_config()
    if not cfg.has_section(PROFILES_SECTION):
        return []
    return sorted(cfg.options(PROFILES_SECTION))


def get_profile(name):
    return _read_config().get(PROFILES_SECTION, name, fallback=None)


def save_profile(name, expression, dimensions=2):
    """Store expression under name; raises ParseError if it is not a valid ratio."""
    IndeterminateSumsInRatio.parse(expression, dimensions)
    cfg = _read_config()
    if not cfg.has_section(PROFILES_SECTION):
        cfg.add_section(PROFILES_SECTION)
    cfg.set(PROFILES_SECTION, name, expression)
    _write_config(cfg)
    log.info("saved profile %s = %s", name, expression)


def delete_profile(name):
    cfg = _read_config()
    if not cfg.has_section(PROFILES_SECTION) or not cfg.remove_option(PROFILES_SECTION, name):
        return False
    _write_config(cfg)
    return True
