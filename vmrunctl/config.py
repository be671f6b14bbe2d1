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

'''Configuration variables/constants and the configuration file loader'''

import json
import logging
import os
import sys

import vmrunctl.exc

#: environment variable overriding the configuration file location
CONFIG_ENV = 'VMRUN_MANAGER_CONFIG'
#: configuration file name, looked up next to the executable
CONFIG_FILE_NAME = 'config.json'
#: target selector meaning "all virtual machines"
ALL_VMS = '-'
#: text the control tool puts in front of fatal messages on stderr
ERROR_MARKER = 'Error:'

#: keys every virtual machine record must have
VM_RECORD_KEYS = ('id', 'name', 'path')

log = logging.getLogger('vmrunctl.config')


def get_config_path(path=None, environ=None):
    '''Find out which configuration file to use.

    An explicit *path* wins, then the :py:data:`CONFIG_ENV` environment
    variable, then :py:data:`CONFIG_FILE_NAME` next to the running
    executable.

    :param str path: path given on the command line, if any
    :param dict environ: environment to consult, defaults to `os.environ`
    :rtype: str
    '''
    if path:
        return path
    if environ is None:
        environ = os.environ
    if environ.get(CONFIG_ENV):
        return environ[CONFIG_ENV]
    return os.path.join(
        os.path.dirname(os.path.abspath(sys.argv[0])), CONFIG_FILE_NAME)


def _check_vm_record(index, record):
    if not isinstance(record, dict):
        raise vmrunctl.exc.VmrunConfigError(
            'Invalid configuration format. Entry %s of "virtualMachines" '
            'is not an object.', str(index))
    for key in VM_RECORD_KEYS:
        value = record.get(key)
        if not isinstance(value, str) or not value:
            raise vmrunctl.exc.VmrunConfigError(
                'Invalid configuration format. Entry %s of "virtualMachines" '
                'has no valid "%s".', str(index), key)


def parse(data):
    '''Validate already decoded configuration document.

    :param data: object decoded from JSON
    :return: the same *data*, if valid
    :raises vmrunctl.exc.VmrunConfigError: when the shape is wrong
    '''
    if not isinstance(data, dict) \
            or not isinstance(data.get('vmrunPath'), str) \
            or not data['vmrunPath'] \
            or not isinstance(data.get('virtualMachines'), list):
        raise vmrunctl.exc.VmrunConfigError(
            'Invalid configuration format. '
            'Missing "vmrunPath" or "virtualMachines" array.')

    seen = set()
    for index, record in enumerate(data['virtualMachines']):
        _check_vm_record(index, record)
        if record['id'] in seen:
            log.warning('Duplicate virtual machine ID %r, '
                        'only the first entry will be used', record['id'])
        seen.add(record['id'])

    return data


def load(path):
    '''Read and validate configuration file.

    :param str path: path to JSON configuration file
    :rtype: dict
    :raises vmrunctl.exc.VmrunConfigError: when the file cannot be read or
        parsed, or is not a valid configuration
    '''
    try:
        with open(path, encoding='utf-8') as config_file:
            data = json.load(config_file)
    except (IOError, OSError) as e:
        raise vmrunctl.exc.VmrunConfigError(
            'Failed to read configuration file %s: %s',
            path, e.strerror or str(e))
    except ValueError as e:
        raise vmrunctl.exc.VmrunConfigError(
            'Failed to parse configuration file %s: %s', path, str(e))
    return parse(data)
