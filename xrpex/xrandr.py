# xrpex -- Ratio Partitioned Monitors for xrandr
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Wrapper around command line xrandr's monitor support (RandR 1.5)"""

import os
import re
import shlex
import subprocess
import warnings
import logging

from .errors import (
    ApplyError, NoSuchMonitor, SumsInRatioEvaluationError, UnsupportedXRandR, XRandRError,
)
from .rectangle import HyperRectangle

log = logging.getLogger('xrpex')

SHELLSHEBANG = '#!/bin/sh'
RPEX_SUFFIX = '-XRPEX'

# Lines like:
#  0: +*DP-5 3840/1210x2160/680+0+0  DP-5
#  1: DP-5-XRPEX-0-0 1920/605x2160/680+0+0  DP-5
_LISTMONITORS_LINE = re.compile(
    r'\d+:\s+([+*]*)(\S+)\s+(\d+)/(\d+)x(\d+)/(\d+)\+(-?\d+)\+(-?\d+)(?:\s+(\S+))?')


class Monitor:

    def __init__(self, name, resolution, size_mm=(0, 0), position=(0, 0),
                 output=None, primary=False, automatic=False):
        self.name = name
        self.resolution = resolution
        self.size_mm = tuple(size_mm)
        self.position = tuple(position)
        self.output = output
        self.primary = primary
        self.automatic = automatic

    def __repr__(self):
        return '<%s %r %s+%d+%d>' % (
            type(self).__name__, self.name, self.resolution, *self.position)

    def __eq__(self, other):
        if not isinstance(other, Monitor):
            return NotImplemented
        return vars(self) == vars(other)


def parse_listmonitors(output):
    """Parse the output of ``xrandr --listmonitors`` into Monitor objects."""
    monitors = []
    for line in output.strip().split('\n'):
        line = line.strip()
        if not line or line.startswith('Monitors:'):
            continue
        m = _LISTMONITORS_LINE.match(line)
        if not m:
            log.debug("ignoring listmonitors line %r", line)
            continue
        flags, name = m.group(1), m.group(2)
        w, w_mm, h, h_mm, x, y = [int(m.group(i)) for i in range(3, 9)]
        monitors.append(Monitor(
            name, HyperRectangle((w, h)), (w_mm, h_mm), (x, y),
            output=m.group(9), primary='*' in flags, automatic='+' in flags,
        ))
    return monitors


def rpex_monitor_name(parent_name, x, y):
    return "%s%s-%d-%d" % (parent_name, RPEX_SUFFIX, x, y)


def is_rpex_monitor_of(monitor, parent_name):
    return monitor.name.startswith(parent_name + RPEX_SUFFIX)


def _scale_mm(mm, pixels, total_pixels):
    return int(round(mm * pixels / total_pixels)) if mm else 0


class XRandR:

    REQUIRED_VERSIONS = ["1.5", "1.6"]

    def __init__(self, display=None, force_version=False):
        self.environ = dict(os.environ)
        if display:
            self.environ['DISPLAY'] = display

        version_output = self._output("--version")
        if not any(x in version_output for x in self.REQUIRED_VERSIONS) and not force_version:
            raise UnsupportedXRandR(
                "XRandR %s required for monitor support." % "/".join(self.REQUIRED_VERSIONS))

    #################### calling xrandr ####################

    def _output(self, *args):
        log.info("xrandr %s", " ".join(args))
        proc = subprocess.Popen(
            ("xrandr",) + args,
            stdout=subprocess.PIPE, stderr=subprocess.PIPE, env=self.environ
        )
        ret, err = proc.communicate()
        status = proc.wait()
        if status != 0:
            err = err.decode('utf-8', errors='replace')
            log.error("xrandr exit %d stderr: %s", status, err)
            raise XRandRError(status, err)
        if err:
            log.warning("xrandr stderr (no error): %s", err.decode('utf-8', errors='replace'))
            warnings.warn(
                "XRandR wrote to stderr, but did not report an error (Message was: %r)" % err)
        return ret.decode('utf-8')

    def _run(self, *args):
        self._output(*args)

    #################### monitors ####################

    def list_monitors(self):
        return parse_listmonitors(self._output("--listmonitors"))

    def find_monitor(self, name):
        for monitor in self.list_monitors():
            if monitor.name == name:
                return monitor
        raise NoSuchMonitor(name)

    def delmonitor_args(self, parent_name):
        """Return (monitors, args) deleting every partition of parent_name."""
        doomed = [m for m in self.list_monitors() if is_rpex_monitor_of(m, parent_name)]
        args = []
        for monitor in doomed:
            args.extend(["--delmonitor", monitor.name])
        return doomed, args

    def reset_rpex_monitors(self, parent_name):
        """Delete the partitions previously created for parent_name."""
        doomed, args = self.delmonitor_args(parent_name)
        if args:
            self._run(*args)
        log.info("removed %d partition(s) of %s", len(doomed), parent_name)
        return doomed

    def setmonitor_args(self, monitor, rpex):
        """Return the xrandr arguments that split monitor according to rpex.

        The first partition takes over the monitor's output, the others are
        attached to none, mirroring how xrandr hands out outputs.
        """
        try:
            evaluated, scale = rpex.evaluate(monitor.resolution)
        except SumsInRatioEvaluationError as e:
            raise ApplyError(monitor.name, e) from e

        width, height = monitor.resolution
        w_mm, h_mm = monitor.size_mm
        ox, oy = monitor.position
        args = []
        for i, partition in enumerate(evaluated.partitions()):
            pixels = partition.scaled(scale)
            x, y = pixels.position
            w, h = pixels.size
            geometry = "%d/%dx%d/%d+%d+%d" % (
                w, _scale_mm(w_mm, w, width), h, _scale_mm(h_mm, h, height), ox + x, oy + y)
            output = (monitor.output or monitor.name) if i == 0 else "none"
            args.extend(["--setmonitor", rpex_monitor_name(monitor.name, x, y), geometry, output])
        log.info("%s split by %s at scale %d into %d partition(s)",
                 monitor.name, rpex, scale, len(evaluated.partitions()))
        return args

    def apply_rpex_monitors(self, monitor, rpex):
        self._run(*self.setmonitor_args(monitor, rpex))

    def find_parent_monitor(self, name):
        """Like find_monitor, but also finds a monitor that is currently split.

        While split, the first partition owns the output and xrandr no longer
        lists the parent; its geometry is then the bounding box of the
        partitions.
        """
        monitors = self.list_monitors()
        for monitor in monitors:
            if monitor.name == name:
                return monitor
        parts = [m for m in monitors if is_rpex_monitor_of(m, name)]
        if not parts:
            raise NoSuchMonitor(name)

        x0 = min(m.position[0] for m in parts)
        y0 = min(m.position[1] for m in parts)
        width = max(m.position[0] + m.resolution[0] for m in parts) - x0
        height = max(m.position[1] + m.resolution[1] for m in parts) - y0
        first = parts[0]
        size_mm = (
            _scale_mm(first.size_mm[0], width, first.resolution[0]),
            _scale_mm(first.size_mm[1], height, first.resolution[1]),
        )
        output = next((m.output for m in parts if m.output), None)
        log.debug("%s is split into %d partition(s), rebuilt as %dx%d+%d+%d",
                  name, len(parts), width, height, x0, y0)
        return Monitor(name, HyperRectangle((width, height)), size_mm, (x0, y0), output=output)

    def to_shellscript(self, parent_name, rpex=None):
        """Render the reset and, given rpex, the apply step as a shell script."""
        _, delete = self.delmonitor_args(parent_name)
        commands = []
        if delete:
            commands.append(delete)
        if rpex is not None:
            commands.append(self.setmonitor_args(self.find_parent_monitor(parent_name), rpex))
        lines = [SHELLSHEBANG]
        for args in commands:
            lines.append(" ".join(shlex.quote(a) for a in ["xrandr"] + args))
        return "\n".join(lines) + "\n"
