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

"""vmrunctl command line tools
"""

import argparse
import importlib
import sys

import vmrunctl
import vmrunctl.config
import vmrunctl.exc
import vmrunctl.log
import vmrunctl.vm

#: per-action texts and the method of
#: :py:class:`vmrunctl.vm.VirtualMachine` performing it
ACTIONS = {
    'suspend': {
        'progress': 'Suspending',
        'done': 'suspended',
        'method': 'suspend',
    },
    'resume': {
        'progress': 'Resuming',
        'done': 'resumed',
        'method': 'start',
    },
}


class VmrunAction(argparse.Action):
    """Interface providing a convenience method to be called, after
    `namespace.app` is instantiated.
    """

    # pylint: disable=too-few-public-methods
    def parse_vmrun_app(self, parser, namespace):
        """This method is called by :py:class:`VmrunArgumentParser`
        after the `namespace.app` is instantiated. Overwrite this method when
        extending :py:class:`VmrunAction` to initialize values
        based on the `namespace.app`
        """
        raise NotImplementedError


class VmIdAction(VmrunAction):
    """Action for parsing a VM_ID, or ``-`` meaning all virtual machines.

    Sets ``namespace.domains`` to the list of selected machines and
    ``namespace.all_vms`` to whether ``-`` was given.
    """

    # pylint: disable=too-few-public-methods,redefined-builtin
    def __init__(self, option_strings, dest, nargs=None, help=None,
                 **kwargs):
        if help is None:
            help = 'virtual machine ID, or {!r} for all virtual machines' \
                .format(vmrunctl.config.ALL_VMS)
        super().__init__(option_strings, dest=dest, help=help, nargs=nargs,
                         **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        """Set ``namespace.vmid`` to ``values``"""
        setattr(namespace, self.dest, values)

    def parse_vmrun_app(self, parser, namespace):
        assert hasattr(namespace, 'app')
        app = namespace.app
        vmid = getattr(namespace, self.dest)
        if vmid == vmrunctl.config.ALL_VMS:
            namespace.all_vms = True
            namespace.domains = app.domains.values()
            return
        namespace.all_vms = False
        try:
            namespace.domains = [app.domains[vmid]]
        except vmrunctl.exc.VmrunVMNotFoundError as e:
            parser.error_runtime(str(e))


class VmrunArgumentParser(argparse.ArgumentParser):
    """Parser preconfigured for use in the vmrunctl command-line tools.

    :param bool vmid: whether to consume a ``VM_ID`` argument (a machine
        ID or ``-`` for all machines)

    *kwargs* are passed to :py:class:`argparser.ArgumentParser`.

    Currently supported options:
        ``--config`` configuration file to use
        ``--verbose`` and ``--quiet``

    Errors in the command line print the usage to standard output and
    exit with status 1.
    """

    def __init__(self, vmid=False, **kwargs):

        super().__init__(add_help=False, **kwargs)

        self.add_argument('--config', '-c', metavar='PATH',
            help='configuration file (default: ${} or {} next to the '
                 'executable)'.format(vmrunctl.config.CONFIG_ENV,
                                      vmrunctl.config.CONFIG_FILE_NAME))

        self.add_argument('--verbose', '-v', action='count',
            help='increase verbosity')

        self.add_argument('--quiet', '-q', action='count',
            help='decrease verbosity')

        self.add_argument('--help', '-h', action='help',
            help='show this help message and exit')

        if vmid:
            self.add_argument('vmid', metavar='VM_ID', action=VmIdAction)

        self.set_defaults(verbose=1, quiet=0)

    def parse_args(self, *args, **kwargs):
        # pylint: disable=arguments-differ,signature-differs
        # hack for tests
        app = kwargs.pop('app', None)
        namespace = super().parse_args(*args, **kwargs)

        self.check_arguments(namespace)
        self.set_vmrun_verbosity(namespace)
        if app is not None:
            namespace.app = app
        else:
            try:
                namespace.app = vmrunctl.VMManager.from_file(namespace.config)
            except vmrunctl.exc.VmrunConfigError as e:
                self.error_runtime(str(e))

        for action in self._actions:
            if issubclass(action.__class__, VmrunAction):
                action.parse_vmrun_app(self, namespace)

        return namespace

    def check_arguments(self, namespace):
        """Check the arguments as a whole, before configuration is loaded.

        Call :py:meth:`error` from here to reject the command line.
        """

    def error(self, message):
        """Usage error: show usage on stdout, the message on stderr and
        exit with status 1.

        :param str message: message to show
        """
        self.print_usage(sys.stdout)
        self.exit(1, '{}: error: {}\n'.format(self.prog, message))

    def error_runtime(self, message, exit_code=1):
        """Runtime error, without showing usage.

        :param str message: message to show
        """
        self.exit(exit_code, '{}: error: {}\n'.format(self.prog, message))

    @staticmethod
    def set_vmrun_verbosity(namespace):
        """Apply a verbosity setting.

        This is done by configuring global logging.
        :param argparse.Namespace args: args as parsed by parser
        """

        verbose = namespace.verbose - namespace.quiet

        if verbose >= 1:
            vmrunctl.log.enable(debug=verbose >= 2)

    def print_error(self, *args, **kwargs):
        """Print to ``sys.stderr``"""
        print(*args, file=sys.stderr, **kwargs)


def get_tool_module(command):
    """Get module implementing given vm-tool.

    :param str command: action name ('suspend', 'resume', 'status')
    :raises ImportError: when command's module is not found
    """

    return importlib.import_module(
        '.vm_' + command.replace('-', '_'), 'vmrunctl.tools')


def process_vms_action(parser, action, domains):
    """Run *action* on each of *domains*, one after another.

    Failures are reported and do not stop processing of the remaining
    machines.

    :param VmrunArgumentParser parser: parser, used to report errors
    :param str action: 'suspend' or 'resume'
    :param list domains: :py:class:`vmrunctl.vm.VirtualMachine` objects
    :return: list of :py:class:`vmrunctl.vm.ActionResult`
    """
    if not domains:
        print('No virtual machines found to {}.'.format(action))
        return []

    texts = ACTIONS[action]
    results = []
    print('\nStarting {} process for the following virtual machine(s):'
          .format(action))
    for vm in domains:
        print('- {} "{}" (ID: {})...'.format(
            texts['progress'], vm.name, vm.vmid))
        try:
            info = getattr(vm, texts['method'])()
        except vmrunctl.exc.VmrunActionError as e:
            parser.print_error('  Failed to {} "{}". Error: {}'.format(
                action, vm.name, e))
            results.append(vmrunctl.vm.ActionResult(vm, False, str(e)))
            continue
        except vmrunctl.exc.VmrunException as e:
            parser.print_error('  Failed to {} "{}". Details: {}'.format(
                action, vm.name, e))
            results.append(vmrunctl.vm.ActionResult(vm, False, str(e)))
            continue

        if info:
            print('  "{}" {} successfully. (vmrun output: {})'.format(
                vm.name, texts['done'], info))
        else:
            print('  "{}" {} successfully.'.format(vm.name, texts['done']))
        results.append(vmrunctl.vm.ActionResult(vm, True, info))

    print('\nAll specified virtual machines {} process completed.'
          .format(action))
    failed = [result for result in results if result.failed]
    if failed:
        print('{} of {} virtual machine(s) failed to {}.'.format(
            len(failed), len(results), action))
    return results


def get_exit_code(args, results):
    """Exit code of a suspend/resume tool.

    Failures of individual machines make the exit code non-zero only with
    ``--fail-on-error``.
    """
    if getattr(args, 'fail_on_error', False) \
            and any(result.failed for result in results):
        return 1
    return 0
