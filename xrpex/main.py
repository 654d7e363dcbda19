# xrpex -- Ratio Partitioned Monitors for xrandr
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Command line interface: split a monitor into xrandr virtual monitors."""

import logging
import optparse
import sys

from . import __version__, profiles
from .errors import XrpexError
from .sums_in_ratio import IndeterminateSumsInRatio
from .xrandr import XRandR

log = logging.getLogger('xrpex')

USAGE = """%prog [options] RATIO|@PROFILE

RATIO is one sum of addends per axis, e.g. `1+2:1` for a left third and
a right two thirds. Empty addends are solved to share the remaining
space equally, e.g. `++:` for three equal columns."""


def _build_parser():
    parser = optparse.OptionParser(
        usage=USAGE,
        description="Split a monitor into virtual monitors by ratio",
        version="%%prog %s" % __version__
    )
    parser.add_option(
        '-m', '--monitor',
        help='Monitor to split (default: $%s, then the config file)' % profiles.MONITOR_ENV,
        metavar='NAME'
    )
    parser.add_option(
        '--randr-display',
        help='Use D as display for xrandr (e.g. `localhost:10.0`)',
        metavar='D'
    )
    parser.add_option(
        '--force-version',
        help='Even run with untested XRandR versions',
        action='store_true'
    )
    parser.add_option(
        '--reset',
        help='Only remove the partitions of the monitor, then exit',
        action='store_true'
    )
    parser.add_option(
        '-n', '--dry-run',
        help='Print the xrandr commands as a shell script instead of running them',
        action='store_true'
    )
    parser.add_option(
        '--list',
        help='List the monitors xrandr knows about, then exit',
        action='store_true'
    )
    parser.add_option(
        '--save',
        help='Save RATIO as profile NAME, then exit',
        metavar='NAME'
    )
    parser.add_option(
        '--delete-profile',
        help='Delete the saved profile NAME, then exit',
        metavar='NAME'
    )
    parser.add_option(
        '--set-monitor',
        help='Store NAME as the default monitor in the config file, then exit',
        metavar='NAME'
    )
    parser.add_option(
        '--profiles',
        help='List saved profiles, then exit',
        action='store_true'
    )
    parser.add_option('-v', '--verbose', action='store_true', help='Log debugging output')
    parser.add_option('-q', '--quiet', action='store_true', help='Only log warnings and errors')
    return parser


def _expression(parser, args):
    if len(args) != 1:
        parser.error("expected exactly one RATIO or @PROFILE")
    expression = args[0]
    if expression.startswith('@'):
        stored = profiles.get_profile(expression[1:])
        if stored is None:
            parser.error("no such profile: %s" % expression[1:])
        return stored
    return expression


def main(argv=None):
    parser = _build_parser()
    (options, args) = parser.parse_args(argv)

    level = logging.INFO
    if options.verbose:
        level = logging.DEBUG
    elif options.quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format='%(name)s: %(message)s')

    try:
        return _run(parser, options, args)
    except XrpexError as e:
        sys.stderr.write("xrpex: error: %s\n" % e)
        return 1


def _run(parser, options, args):
    if options.profiles:
        for name in profiles.list_profiles():
            print("%s = %s" % (name, profiles.get_profile(name)))
        return 0

    if options.set_monitor:
        profiles.set_setting('monitor', options.set_monitor)
        return 0

    if options.delete_profile:
        if not profiles.delete_profile(options.delete_profile):
            parser.error("no such profile: %s" % options.delete_profile)
        return 0

    if options.save:
        profiles.save_profile(options.save, _expression(parser, args))
        return 0

    if options.list:
        xrandr = XRandR(display=options.randr_display, force_version=options.force_version)
        for monitor in xrandr.list_monitors():
            print("%s %s+%d+%d%s" % (
                monitor.name, monitor.resolution, monitor.position[0], monitor.position[1],
                " %s" % monitor.output if monitor.output else ""))
        return 0

    monitor_name = options.monitor or profiles.default_monitor()
    if not monitor_name:
        parser.error("no monitor given; use --monitor or $%s" % profiles.MONITOR_ENV)

    rpex = None
    if not options.reset:
        rpex = IndeterminateSumsInRatio.parse(_expression(parser, args))

    xrandr = XRandR(display=options.randr_display, force_version=options.force_version)

    if options.dry_run:
        sys.stdout.write(xrandr.to_shellscript(monitor_name, rpex))
        return 0

    xrandr.reset_rpex_monitors(monitor_name)
    if rpex is None:
        return 0

    monitor = xrandr.find_monitor(monitor_name)
    xrandr.apply_rpex_monitors(monitor, rpex)
    return 0


if __name__ == '__main__':
    sys.exit(main())
