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


"""
Main VMManager() class and related classes.
"""
import re
import subprocess

import logging

import vmrunctl.config
import vmrunctl.exc
import vmrunctl.output
import vmrunctl.vm

#: command arguments which are shown without quotes
_BARE_WORD = re.compile(r'^[A-Za-z0-9_-]+$')


class VMCollection(object):
    """Collection of configured VM objects, in configuration order"""

    def __init__(self, app, records=()):
        self.app = app
        self._vm_list = [
            vmrunctl.vm.VirtualMachine(
                app, record['id'], record['name'], record['path'])
            for record in records]

    def __getitem__(self, item):
        if isinstance(item, vmrunctl.vm.VirtualMachine):
            item = item.vmid
        for vm in self._vm_list:
            if vm.vmid == item:
                return vm
        raise vmrunctl.exc.VmrunVMNotFoundError(
            'Virtual machine with ID "%s" not found. '
            'Please check the configuration file.', item)

    def get_by_path(self, path, default=None):
        """Get the first VM object with given descriptor *path*."""
        for vm in self._vm_list:
            if vm.path == path:
                return vm
        return default

    def __iter__(self):
        return iter(list(self._vm_list))

    def values(self):
        """Get list of VM objects."""
        return list(self._vm_list)


class VMManagerBase(object):
    """Main application object.

    This is a base abstract class, don't use it directly. Use
    :py:class:`vmrunctl.VMManager` instead, which points at
    :py:class:`VMManagerLocal`.

    :param dict config: validated configuration, as returned by
        :py:func:`vmrunctl.config.load`
    """

    #: domains (VMs) collection
    domains = None
    #: path to the control tool executable
    vmrun_path = None
    #: control tool output interpretation, see
    #: :py:class:`vmrunctl.output.OutputClassifier`
    classifier = None
    #: logger
    log = None

    def __init__(self, config):
        self.vmrun_path = config['vmrunPath']
        self.domains = VMCollection(self, config['virtualMachines'])
        self.classifier = vmrunctl.output.OutputClassifier()
        self.log = logging.getLogger('vmrunctl')

    @classmethod
    def from_file(cls, path=None):
        """Load configuration and create the application object.

        :param str path: configuration file, see
            :py:func:`vmrunctl.config.get_config_path`
        :raises vmrunctl.exc.VmrunConfigError: on invalid configuration
        """
        config_path = vmrunctl.config.get_config_path(path)
        return cls(vmrunctl.config.load(config_path))

    def format_command(self, command, *args):
        """Render control tool invocation the way one would type it in
        a shell, for messages.
        """
        parts = ['"{}"'.format(self.vmrun_path), command]
        for arg in args:
            if _BARE_WORD.match(arg):
                parts.append(arg)
            else:
                parts.append('"{}"'.format(arg))
        return ' '.join(parts)

    def vmrun_call(self, command, *args):
        """
        Run the control tool and wait for it to finish.

        :param str command: control tool command ('list', 'suspend', ...)
        :param args: command arguments
        :return: tuple of (stdout, stderr) as text
        :raises vmrunctl.exc.VmrunToolError: when the tool could not be
            started or exited with non-zero status
        """
        raise NotImplementedError(
            'vmrun_call not implemented in VMManagerBase class; use '
            'specialized class: vmrunctl.VMManager()')

    def list_running(self):
        """List configured machines the control tool reports as running.

        Running machines not present in the configuration are logged and
        skipped. If the tool cannot be asked, it is logged as well and
        nothing is considered running.

        :return: list of :py:class:`vmrunctl.vm.VirtualMachine`
        """
        try:
            stdout, stderr = self.vmrun_call('list')
        except vmrunctl.exc.VmrunToolError as e:
            self.log.error('Failed to list running VMs: %s', e)
            return []

        running = []
        for path in self.classifier.parse_running_list(stdout, stderr):
            vm = self.domains.get_by_path(path)
            if vm is None:
                self.log.warning(
                    'Running VM not found in configuration: %s', path)
                continue
            running.append(vm)
        return running


class VMManagerLocal(VMManagerBase):
    """Application object running the control tool as a local process."""

    def vmrun_call(self, command, *args):
        """
        Run the control tool and wait for it to finish.

        There is no timeout, the call blocks until the tool exits.

        :param str command: control tool command ('list', 'suspend', ...)
        :param args: command arguments
        :return: tuple of (stdout, stderr) as text
        :raises vmrunctl.exc.VmrunToolError: when the tool could not be
            started or exited with non-zero status
        """
        cmd = [self.vmrun_path, command] + list(args)
        cmdline = self.format_command(command, *args)
        self.log.debug('Running: %s', cmdline)
        try:
            with subprocess.Popen(cmd,
                                  stdin=subprocess.DEVNULL,
                                  stdout=subprocess.PIPE,
                                  stderr=subprocess.PIPE) as p:
                (stdout, stderr) = p.communicate()
        except (IOError, OSError) as e:
            raise vmrunctl.exc.VmrunToolError(
                'Command failed: %s: %s', cmdline, e.strerror or str(e))

        stdout = stdout.decode('utf-8', errors='replace')
        stderr = stderr.decode('utf-8', errors='replace')
        if p.returncode != 0:
            # the reason may be on either stream
            details = (stderr.strip() or stdout.strip())
            raise vmrunctl.exc.VmrunToolError(
                'Command failed: %s (exit status %s)%s', cmdline,
                str(p.returncode), ': ' + details if details else '')
        return stdout, stderr
