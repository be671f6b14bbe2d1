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

'''vm-manager - suspend, resume or list virtual machines

The action is the first argument and is case-insensitive; the actual work is
done by the :program:`vm-suspend`, :program:`vm-resume` and
:program:`vm-status` tools.
'''

import argparse
import sys

import vmrunctl.config
import vmrunctl.tools

#: actions, each implemented by vmrunctl.tools.vm_<action>
COMMANDS = ('suspend', 'resume', 'status')

USAGE = '''%(prog)s [options] <suspend|resume> <VM_ID|- (all VMs)>
       %(prog)s [options] status'''

EPILOG = '''examples:
  %(prog)s resume vm1
  %(prog)s suspend -
  %(prog)s status'''


class VmManagerArgumentParser(vmrunctl.tools.VmrunArgumentParser):
    '''Parser checking that VM_ID is given exactly for actions which take
    it.'''

    def parse_known_args(self, args=None, namespace=None):
        namespace, extras = super().parse_known_args(args, namespace)
        # an ID such as "-web" is not known as an option, take it as VM_ID
        if namespace.vmid is None and extras \
                and not extras[0].startswith('--'):
            namespace.vmid = extras.pop(0)
        return namespace, extras

    def check_arguments(self, namespace):
        if namespace.action == 'status':
            if namespace.vmid is not None:
                self.error('"status" action does not take a VM_ID')
        elif namespace.vmid is None:
            self.error('VM_ID (or {!r}) is required for {!r} action'.format(
                vmrunctl.config.ALL_VMS, namespace.action))


parser = VmManagerArgumentParser(
    usage=USAGE, epilog=EPILOG, description=__doc__.splitlines()[0],
    formatter_class=argparse.RawDescriptionHelpFormatter)

parser.add_argument('action', metavar='ACTION',
    type=str.lower, choices=COMMANDS,
    help='one of: {}'.format(', '.join(COMMANDS)))

parser.add_argument('vmid', metavar='VM_ID', nargs='?',
    help='virtual machine ID, or {!r} for all virtual machines'.format(
        vmrunctl.config.ALL_VMS))

parser.add_argument('--fail-on-error',
    action='store_true', default=False,
    help='exit with status 1 if any virtual machine action failed')


def main(args=None, app=None):
    '''Main routine of :program:`vm-manager`.

    :param list args: Optional arguments to override those delivered from \
        command line.
    '''

    args = parser.parse_args(args, app=app)

    tool_args = ['--verbose'] * (args.verbose - 1) + ['--quiet'] * args.quiet
    if args.action != 'status':
        if args.fail_on_error:
            tool_args.append('--fail-on-error')
        tool_args += ['--', args.vmid]

    tool = vmrunctl.tools.get_tool_module(args.action)
    return tool.main(tool_args, app=args.app)


if __name__ == '__main__':
    sys.exit(main())
