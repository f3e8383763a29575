#
# ----------------------------------------------------------------------------------------------------
#
# Copyright (c) 2026, Oracle and/or its affiliates. All rights reserved.
# DO NOT ALTER OR REMOVE COPYRIGHT NOTICES OR THIS FILE HEADER.
#
# This code is free software; you can redistribute it and/or modify it
# under the terms of the GNU General Public License version 2 only, as
# published by the Free Software Foundation.
#
# This code is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License
# version 2 for more details (a copy is included in the LICENSE file that
# accompanied this code).
#
# You should have received a copy of the GNU General Public License version
# 2 along with this work; if not, write to the Free Software Foundation,
# Inc., 51 Franklin St, Fifth Floor, Boston, MA 02110-1301 USA.
#
# Please contact Oracle, 500 Oracle Parkway, Redwood Shores, CA 94065 USA
# or visit www.oracle.com if you need additional information or have any
# questions.
#
# ----------------------------------------------------------------------------------------------------

__all__ = ["_opts", "default_options"]

import os
from argparse import Namespace


def default_options():
    """
    Gets the options in effect when the launcher has not parsed a command line,
    as when the resolvers are used as a library.
    """
    verbose = os.getenv('JEKA_BOOT_VERBOSE', '').strip().lower() in ('true', '1', 'yes')
    return Namespace(verbose=verbose, very_verbose=False, quiet=False, warn=True, print_only=False)


# Launcher options, updated by jkboot._impl.jkboot.parse_options
_opts = default_options()
