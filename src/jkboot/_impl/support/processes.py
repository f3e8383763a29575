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

__all__ = ["run"]

import os
import subprocess
from typing import List, Optional, Sequence, Tuple

from .logging import logvv
from .system import is_windows

Args = Sequence[str]
ReturnCode = int

# Makes the current subprocess accessible to signal handlers
_currentSubprocesses: List[Tuple[subprocess.Popen, Args]] = []


def _check_output_str(*args, **kwargs) -> str:
    try:
        return subprocess.check_output(*args, **kwargs).decode()
    except subprocess.CalledProcessError as e:
        if e.output:
            e.output = e.output.decode()
        if hasattr(e, "stderr") and e.stderr:
            e.stderr = e.stderr.decode()
        raise e


def _addSubprocess(p: subprocess.Popen, args: Args) -> Tuple[subprocess.Popen, Args]:
    entry = (p, args)
    logvv(f"[{os.getpid()}: started subprocess {p.pid}: {args}]")
    _currentSubprocesses.append(entry)
    return entry


def _removeSubprocess(entry: Tuple[subprocess.Popen, Args]) -> None:
    if entry and entry in _currentSubprocesses:
        _currentSubprocesses.remove(entry)


def terminate_subprocesses() -> None:
    for p, _ in _currentSubprocesses:
        if p.poll() is None:
            p.terminate()


def run(args: Args, cwd: Optional[str] = None, env=None) -> ReturnCode:
    """
    Runs the command `args` in the foreground, inheriting the standard streams,
    and returns its exit status.
    """
    logvv(" ".join(args))
    p = subprocess.Popen(args, cwd=cwd, env=env)
    entry = _addSubprocess(p, args)
    try:
        if is_windows():
            # on windows use a poll loop, otherwise signal does not get handled
            retcode = None
            while retcode is None:
                try:
                    retcode = p.wait(0.05)
                except subprocess.TimeoutExpired:
                    pass
        else:
            retcode = p.wait()
        return retcode
    finally:
        _removeSubprocess(entry)
