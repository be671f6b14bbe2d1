# encoding=utf-8
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

'''vm-status - list running virtual machines'''

import sys

import vmrunctl.tools

parser = vmrunctl.tools.VmrunArgumentParser(
    description='list currently running virtual machines from the '
                'configuration')


def main(args=None, app=None):
    '''Main routine of :program:`vm-status`.

    :param list args: Optional arguments to override those delivered from \
        command line.
    '''

    args = parser.parse_args(args, app=app)

    print('Listing currently running virtual machines...')
    running = args.app.list_running()
    if not running:
        print('No virtual machines are currently running.')
        return 0

    print('\nCurrently running virtual machines:')
    for vm in running:
        print('- {} (ID: {})'.format(vm.name, vm.vmid))
    return 0


if __name__ == '__main__':
    sys.exit(main())
