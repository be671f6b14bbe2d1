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

# pylint: disable=missing-docstring,protected-access

import logging
import unittest
import unittest.mock

import vmrunctl.log


class TC_00_enable(unittest.TestCase):
    def setUp(self):
        super().setUp()
        # a fresh root logger, not the one of the test runner
        self.root = logging.RootLogger(logging.WARNING)
        patcher = unittest.mock.patch('logging.root', self.root)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_000_enable(self):
        vmrunctl.log.enable()
        self.assertEqual(len(self.root.handlers), 1)
        self.assertEqual(self.root.level, logging.INFO)
        self.assertEqual(self.root.handlers[0].formatter._fmt,
            vmrunctl.log.FORMAT_CONSOLE)

    def test_001_debug(self):
        vmrunctl.log.enable(debug=True)
        self.assertEqual(self.root.level, logging.DEBUG)
        self.assertEqual(self.root.handlers[0].formatter._fmt,
            vmrunctl.log.FORMAT_DEBUG)

    def test_002_configured_already(self):
        handler = logging.NullHandler()
        self.root.addHandler(handler)
        vmrunctl.log.enable(debug=True)
        self.assertEqual(self.root.handlers, [handler])
        self.assertEqual(self.root.level, logging.WARNING)
