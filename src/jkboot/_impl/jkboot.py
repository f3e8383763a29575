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
"""
Launcher entry point: resolves the base directory, the JDK and the JeKa
distribution for an invocation and runs the tool with them.
"""

__all__ = [
    "parse_options",
    "parse_remote_args",
    "launch_command",
    "main",
]

import os
import shlex
import signal
import sys
from argparse import ArgumentParser

from . import jk_distrib, jk_fetchjdk, jk_remote
from .jk_alias import is_alias
from .jk_errors import ResolutionError
from .support.envvars import env_var_to_bool, get_env
from .support.logging import abort, log, logv
from .support.options import _opts
from .support.processes import run, terminate_subprocesses
from .support.system import Platform

_print_flag = '--jkboot-print'


def parse_options(args):
    """
    Sets the launcher options from `args`. The options are only recognized,
    not removed: they are passed on to the tool as well.
    """
    parser = ArgumentParser(prog='jkboot', add_help=False, allow_abbrev=False)
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-vv', '--very-verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')
    parser.add_argument('--no-warning', action='store_false', dest='warn')
    parser.add_argument(_print_flag, action='store_true', dest='print_only')
    # Only exact flags are looked at, anything else belongs to the tool
    flags = {s for a in parser._actions for s in a.option_strings}
    known = parser.parse_args([a for a in args if a in flags])

    _opts.very_verbose = known.very_verbose
    _opts.verbose = known.verbose or known.very_verbose or env_var_to_bool('JEKA_BOOT_VERBOSE')
    _opts.quiet = known.quiet
    _opts.warn = known.warn
    _opts.print_only = known.print_only
    return _opts


def parse_remote_args(args):
    """
    Interprets the leading ``-r <ref>``, ``-rc <ref>`` or ``@alias`` of `args`.

    :return: a tuple of the remote reference (None if there is none), whether its
             cached clone must be cleaned and the remaining arguments
    """
    if args and args[0] in ('-r', '-rc'):
        if len(args) < 2:
            raise ResolutionError(f'Option {args[0]} requires a remote reference (path, git URL or @alias)')
        return args[1], args[0] == '-rc', list(args[2:])
    if args and is_alias(args[0]):
        return args[0], False, list(args[1:])
    return None, False, list(args)


def launch_command(base_dir, jdk_home, classpath_entries, tool_args):
    cmd = [jk_fetchjdk.java_executable(jdk_home)]
    jeka_opts = get_env('JEKA_OPTS')
    if jeka_opts:
        cmd += shlex.split(jeka_opts)
    cmd += [f'-Djeka.current.basedir={base_dir}', '-cp', jk_distrib.classpath(classpath_entries), jk_distrib.MAIN_CLASS]
    return cmd + list(tool_args)


def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)
    parse_options(args)
    args = [a for a in args if a != _print_flag]

    reference, force_clean, tool_args = parse_remote_args(args)
    if reference:
        base_dir = jk_remote.resolve(reference, force_clean)
    else:
        base_dir = os.getcwd()
    logv(f'Base directory: {base_dir}')

    platform = Platform.current()
    logv(f'Platform: {platform}')
    jdk_home = jk_fetchjdk.resolve(base_dir, platform)
    classpath_entries = jk_distrib.resolve(base_dir)
    cmd = launch_command(base_dir, jdk_home, classpath_entries, tool_args)

    if _opts.print_only:
        log(f'base_dir={base_dir}')
        log(f'java_home={jdk_home or ""}')
        log(f'classpath={jk_distrib.classpath(classpath_entries)}')
        log(' '.join(shlex.quote(c) for c in cmd))
        return 0
    return run(cmd, cwd=base_dir)


def _main_wrapper():
    def term_handler(signum, frame):
        terminate_subprocesses()
        abort(1)
    signal.signal(signal.SIGTERM, term_handler)

    try:
        retcode = main()
    except ResolutionError as e:
        abort(str(e))
    except KeyboardInterrupt:
        # no need to show the stack trace when the user presses CTRL-C
        terminate_subprocesses()
        abort(1)
    raise SystemExit(retcode)
