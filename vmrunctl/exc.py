# -*- encoding: utf8 -*-
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

"""
vmrunctl exception hierarchy
"""


class VmrunException(Exception):
    """Exception that can be shown to the user"""

    def __init__(self, message_format, *args, **kwargs):
        if args:
            message_format = message_format % args
        super().__init__(message_format, **kwargs)


class VmrunConfigError(VmrunException):
    """Configuration file cannot be read, parsed or has a wrong shape"""


class VmrunVMNotFoundError(VmrunException, KeyError):
    """Virtual machine with a given ID is not configured"""

    def __str__(self):
        # KeyError overrides __str__ method
        return VmrunException.__str__(self)


class VmrunVMError(VmrunException):
    """Some problem with running an action on a virtual machine."""


class VmrunToolError(VmrunVMError):
    """Control tool could not be executed or exited with an error status"""


class VmrunActionError(VmrunVMError):
    """Control tool ran, but reported that the action failed"""
