# -*- encoding: utf-8 -*-
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

'''Virtual machine objects.'''

import logging


class VirtualMachine(object):
    '''Virtual machine, as described in the configuration file.

    :param app: :py:class:`vmrunctl.app.VMManagerBase` instance
    :param str vmid: identifier used on the command line
    :param str name: human readable name
    :param str path: VM descriptor path, understood by the control tool
    '''

    log = None

    def __init__(self, app, vmid, name, path):
        self.app = app
        self._vmid = vmid
        self._name = name
        self._path = path
        self.log = logging.getLogger(vmid)

    @property
    def vmid(self):
        '''Identifier of the machine in the configuration'''
        return self._vmid

    @property
    def name(self):
        '''Display name'''
        return self._name

    @property
    def path(self):
        '''VM descriptor path'''
        return self._path

    def __str__(self):
        return self._vmid

    def __repr__(self):
        return '<{} {} ({})>'.format(
            self.__class__.__name__, self._vmid, self._path)

    def __eq__(self, other):
        if isinstance(other, VirtualMachine):
            return self.vmid == other.vmid and self.path == other.path
        if isinstance(other, str):
            return self.vmid == other
        return NotImplemented

    def __hash__(self):
        return hash(self.vmid)

    def suspend(self):
        '''
        Suspend the machine.

        :return: informational output of the control tool, if any
        :raises vmrunctl.exc.VmrunToolError: when the tool failed to run
        :raises vmrunctl.exc.VmrunActionError: when the tool reported
            a failure
        '''
        return self._run_action('suspend', self.path)

    def start(self):
        '''
        Start (or resume a suspended) machine, without a GUI.

        :return: informational output of the control tool, if any
        :raises vmrunctl.exc.VmrunToolError: when the tool failed to run
        :raises vmrunctl.exc.VmrunActionError: when the tool reported
            a failure
        '''
        return self._run_action('start', self.path, 'nogui')

    def _run_action(self, command, *args):
        stdout, stderr = self.app.vmrun_call(command, *args)
        info = self.app.classifier.check_action_output(stdout, stderr)
        if info:
            self.log.debug('%s output: %s', command, info)
        return info


class ActionResult(object):
    '''Outcome of a single action on a single machine.

    :param VirtualMachine vm: the machine
    :param bool success: whether the action succeeded
    :param str message: tool output (on success) or error text (on failure)
    '''

    # pylint: disable=too-few-public-methods

    def __init__(self, vm, success, message=None):
        self.vm = vm
        self.success = success
        self.message = message

    @property
    def failed(self):
        '''Inverse of :py:attr:`success`'''
        return not self.success

    def __repr__(self):
        return '<{} {} {}>'.format(
            self.__class__.__name__, self.vm,
            'success' if self.success else 'failure')
