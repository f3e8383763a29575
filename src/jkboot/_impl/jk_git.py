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

__all__ = ["GitCloner"]

import subprocess

from .jk_errors import CloneFailedError
from .support.logging import log, logvv
from .support.processes import _check_output_str


class GitCloner(object):
    """
    Encapsulates the shallow cloning of git repositories.
    """
    missing = 'No Git executable found. You must install Git in order to clone remote projects!'

    def clone_cmd(self, url, dest, ref=None):
        cmd = ['git', 'clone', '--quiet', '--depth', '1']
        if ref:
            cmd += ['--branch', ref]
        cmd += [url, dest]
        return cmd

    def clone(self, url, dest, ref=None):
        """
        Clones the tip of `ref` (the default branch if None) of the repository at `url` into `dest`.

        :raises CloneFailedError: if git is not available or the clone fails. The
                                  output of git is carried unchanged in the error.
        """
        cmd = self.clone_cmd(url, dest, ref)
        log(f'Cloning {url}' + (f' at {ref}' if ref else '') + f' into {dest}')
        logvv(' '.join(cmd))
        try:
            out = _check_output_str(cmd, stderr=subprocess.STDOUT)
        except OSError:
            raise CloneFailedError(url, self.missing)
        except subprocess.CalledProcessError as e:
            raise CloneFailedError(url, (e.output or '').strip())
        logvv(out)
