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

'''Interpretation of the control tool output.

The control tool has no structured output. Everything known about its
conventions is kept in :py:class:`OutputClassifier`, so a tool with
different conventions needs only a different classifier.
'''

import vmrunctl.config
import vmrunctl.exc


class OutputClassifier(object):
    '''Classify control tool output.

    :param str error_marker: text which, when present on standard error,
        means the action failed
    '''

    def __init__(self, error_marker=vmrunctl.config.ERROR_MARKER):
        self.error_marker = error_marker

    def parse_running_list(self, stdout, stderr):
        '''Extract paths of running machines from ``list`` output.

        The first line is a header (``Total running VMs: N``), every other
        non-empty line is a VM descriptor path.

        :param str stdout: standard output of the ``list`` command
        :param str stderr: standard error of the ``list`` command
        :return: list of paths, in the order reported by the tool
        '''
        if stderr and not stdout.strip():
            # the tool complains on stderr when there is nothing to list
            return []
        lines = stdout.splitlines()[1:]
        return [line.strip() for line in lines if line.strip()]

    def check_action_output(self, stdout, stderr):
        '''Decide whether suspend/start command succeeded.

        :param str stdout: standard output of the command
        :param str stderr: standard error of the command
        :return: informational text from standard error, or None
        :raises vmrunctl.exc.VmrunActionError: when the tool reported
            a failure
        '''
        # pylint: disable=unused-argument
        # blank stderr carries nothing to show, report plain success
        if not stderr or not stderr.strip():
            return None
        if self.error_marker in stderr:
            raise vmrunctl.exc.VmrunActionError(stderr.strip())
        return stderr.strip()
