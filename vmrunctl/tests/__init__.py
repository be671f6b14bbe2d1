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
import copy
import traceback
import unittest

import vmrunctl
import vmrunctl.app

#: configuration used by :py:class:`VMManagerTest` unless given another one
TEST_CONFIG = {
    'vmrunPath': '/bin/vmrun',
    'virtualMachines': [
        {'id': 'vm1', 'name': 'Alpha', 'path': '/vms/a.vmx'},
        {'id': 'vm2', 'name': 'Beta', 'path': '/vms/b.vmx'},
    ],
}


class _AssertNotRaisesContext(object):
    """A context manager used to implement TestCase.assertNotRaises methods.

    Stolen from unittest and hacked. Regexp support stripped.
    """ # pylint: disable=too-few-public-methods

    def __init__(self, expected, test_case):
        self.expected = expected
        self.failureException = test_case.failureException

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, tb):
        if exc_type is None:
            return True

        if issubclass(exc_type, self.expected):
            raise self.failureException(
                "{!r} raised, traceback:\n{!s}".format(
                    exc_value, ''.join(traceback.format_tb(tb))))
        # pass through
        return False


class VMManagerTest(vmrunctl.app.VMManagerBase):
    """Application object answering control tool calls from
    :py:attr:`expected_calls`.

    Keys are tuples of (command, arg, ...), values are (stdout, stderr)
    tuples, exceptions to raise, or lists of those for repeated calls.
    """
    expected_calls = None
    actual_calls = None

    def __init__(self, config=None):
        if config is None:
            config = copy.deepcopy(TEST_CONFIG)
        super().__init__(config)
        #: expected calls and saved replies for them
        self.expected_calls = {}
        #: actual calls made
        self.actual_calls = []

    def vmrun_call(self, command, *args):
        call_key = (command,) + args
        self.actual_calls.append(call_key)
        if call_key not in self.expected_calls:
            raise AssertionError('Unexpected call {!r}'.format(call_key))
        return_data = self.expected_calls[call_key]
        if isinstance(return_data, list):
            try:
                return_data = return_data.pop(0)
            except IndexError:
                raise AssertionError('Extra call {!r}'.format(call_key))
        if isinstance(return_data, Exception):
            raise return_data
        return return_data


class VMManagerTestCase(unittest.TestCase):
    def setUp(self):
        super().setUp()
        self.app = VMManagerTest()

    def assertAllCalled(self):
        self.assertEqual(
            set(self.app.expected_calls.keys()),
            set(self.app.actual_calls))
        # and also check if calls expected multiple times were called
        self.assertFalse(any(x for x in self.app.expected_calls.values() if
            isinstance(x, list)))

    def assertNotRaises(self, excClass, callableObj=None, *args, **kwargs):
        """Fail if an exception of class excClass is raised
           by callableObj when invoked with arguments args and keyword
           arguments kwargs.

           If called with callableObj omitted or None, will return a
           context object used like this::

                with self.assertNotRaises(SomeException):
                    do_something()
        """
        context = _AssertNotRaisesContext(excClass, self)
        if callableObj is None:
            return context
        with context:
            callableObj(*args, **kwargs)
        return None
