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

'''vm-suspend - suspend a virtual machine, or all running ones'''

import sys

import vmrunctl.tools

parser = vmrunctl.tools.VmrunArgumentParser(
    description='suspend a virtual machine; with "-" suspend all running '
                'virtual machines', vmid=True)

parser.add_argument('--fail-on-error',
    action='store_true', default=False,
    help='exit with status 1 if any virtual machine failed to suspend')


def main(args=None, app=None):
    '''Main routine of :program:`vm-suspend`.

    :param list args: Optional arguments to override those delivered from \
        command line.
    '''

    args = parser.parse_args(args, app=app)

    if args.all_vms:
        # only machines that are running can be suspended
        print('Checking for running virtual machines to suspend...')
        domains = args.app.list_running()
        if not domains:
            print('No running virtual machines found to suspend.')
            return 0
        print('Initiating suspend process for ALL specified virtual '
              'machines...')
    else:
        domains = args.domains
        print('Initiating suspend process for: {} (ID: {})...'.format(
            domains[0].name, domains[0].vmid))

    results = vmrunctl.tools.process_vms_action(parser, 'suspend', domains)
    return vmrunctl.tools.get_exit_code(args, results)


if __name__ == '__main__':
    sys.exit(main())
