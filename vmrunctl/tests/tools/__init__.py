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

# pylint: disable=missing-docstring

import io
import sys


class _StreamBuffer:
    '''Replace ``sys.<name>`` with a :py:class:`io.StringIO` for the
    duration of the ``with`` block.'''
    name = None

    def __init__(self):
        self.orig_stream = None
        self.buffer = io.StringIO()

    def __enter__(self):
        self.orig_stream = getattr(sys, self.name)
        setattr(sys, self.name, self.buffer)
        return self.buffer

    def __exit__(self, exc_type, exc_val, exc_tb):
        setattr(sys, self.name, self.orig_stream)
        return False


class StdoutBuffer(_StreamBuffer):
    name = 'stdout'


class StderrBuffer(_StreamBuffer):
    name = 'stderr'
