#
# vmrunctl - control tool wrapper for suspending and resuming virtual machines
#
# Copyright (C) 2026  vmrunctl authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as published by
# the Free Software Foundation; either version 2.1 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License along
# with this program; if not, see <http://www.gnu.org/licenses/>.


'''vmrunctl logging routines

Messages about the control tool (commands being run, unknown running
machines) go through :py:mod:`logging`, to standard error. Progress and
results of the tools are printed to standard output directly.
'''

import logging
import sys

#: format at the default verbosity
FORMAT_CONSOLE = '%(name)s: %(message)s'
#: format with ``-vv``, the control tool command lines are logged then
FORMAT_DEBUG = '%(levelname)s %(name)s: %(message)s'


def enable(debug=False):
    '''Log to standard error.

    Nothing is changed when the root logger already has a handler, so
    logging configured by the caller is left alone.

    :param bool debug: log at DEBUG level instead of INFO
    '''

    if logging.root.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(FORMAT_DEBUG if debug else FORMAT_CONSOLE))
    logging.root.addHandler(handler)
    logging.root.setLevel(logging.DEBUG if debug else logging.INFO)
