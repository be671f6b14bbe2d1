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

'''Suspend, resume and list virtual machines through a vmrun-style
control tool.'''

import vmrunctl.app

VMManager = vmrunctl.app.VMManagerLocal
