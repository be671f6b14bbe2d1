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

'''vm-resume - resume (start) a virtual machine, or all configured ones'''

import sys

import vmrunctl.tools

parser = vmrunctl.tools.VmrunArgumentParser(
    description='resume a virtual machine; with "-" resume all configured '
                'virtual machines', vmid=True)

parser.add_argument('--fail-on-error',
    action='store_true', default=False,
    help='exit with status 1 if any virtual machine failed to resume')


def main(args=None, app=None):
    '''Main routine of :program:`vm-resume`.

    :param list args: Optional arguments to override those delivered from \
        command line.
    '''

    args = parser.parse_args(args, app=app)

    if args.all_vms:
        print('Initiating resume process for ALL specified virtual '
              'machines...')
    else:
        print('Initiating resume process for: {} (ID: {})...'.format(
            args.domains[0].name, args.domains[0].vmid))

    results = vmrunctl.tools.process_vms_action(
        parser, 'resume', args.domains)
    return vmrunctl.tools.get_exit_code(args, results)


if __name__ == '__main__':
    sys.exit(main())
