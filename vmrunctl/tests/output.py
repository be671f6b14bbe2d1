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

# pylint: disable=missing-docstring

import unittest

import vmrunctl.exc
import vmrunctl.output


class TC_00_OutputClassifier(unittest.TestCase):
    def setUp(self):
        super().setUp()
        self.classifier = vmrunctl.output.OutputClassifier()

    def test_000_list(self):
        self.assertEqual(self.classifier.parse_running_list(
            'Total running VMs: 2\n/vms/a.vmx\n  /vms/b.vmx  \n\n', ''),
            ['/vms/a.vmx', '/vms/b.vmx'])

    def test_001_list_empty(self):
        self.assertEqual(self.classifier.parse_running_list(
            'Total running VMs: 0\n', ''), [])
        self.assertEqual(self.classifier.parse_running_list('', ''), [])

    def test_002_list_stderr_only(self):
        self.assertEqual(self.classifier.parse_running_list(
            '\n', 'Error: cannot connect\n'), [])

    def test_003_list_stderr_with_stdout(self):
        self.assertEqual(self.classifier.parse_running_list(
            'Total running VMs: 1\n/vms/a.vmx\n', 'some warning\n'),
            ['/vms/a.vmx'])

    def test_010_action_success(self):
        self.assertIsNone(self.classifier.check_action_output('', ''))
        self.assertIsNone(self.classifier.check_action_output('', '\n'))

    def test_011_action_info(self):
        self.assertEqual(self.classifier.check_action_output(
            '', ' Warning: tools out of date\n'),
            'Warning: tools out of date')

    def test_012_action_error(self):
        with self.assertRaises(vmrunctl.exc.VmrunActionError) as e:
            self.classifier.check_action_output(
                '', 'Error: The virtual machine is not powered on: '
                    '/vms/a.vmx\n')
        self.assertEqual(str(e.exception),
            'Error: The virtual machine is not powered on: /vms/a.vmx')

    def test_013_marker_in_stdout_ignored(self):
        self.assertIsNone(
            self.classifier.check_action_output('Error: something', ''))

    def test_014_custom_marker(self):
        classifier = vmrunctl.output.OutputClassifier(error_marker='FAILED')
        self.assertEqual(
            classifier.check_action_output('', 'Error: harmless\n'),
            'Error: harmless')
        with self.assertRaises(vmrunctl.exc.VmrunActionError):
            classifier.check_action_output('', 'FAILED to suspend\n')

    def test_015_action_blank_stderr(self):
        self.assertIsNone(
            self.classifier.check_action_output('', ' \t\r\n'))
