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

#
# File system utility functions shared by the resolvers.
#
# This module must only import from the standard Python library
# and the jkboot support package.
#

__all__ = [
    "ensure_dir_exists",
    "ensure_dirname_exists",
    "rmtree",
    "TempDir",
    "SafeDirectoryUpdater",
]

import errno
import os
import shutil
import sys
import tempfile
from os.path import basename, dirname, exists, isdir, islink, join
from stat import S_IWRITE

from .support.logging import logv


def ensure_dirname_exists(path, mode=None):
    d = dirname(path)
    if d != '':
        ensure_dir_exists(d, mode)


def ensure_dir_exists(path, mode=None):
    """
    Ensures all directories on 'path' exists, creating them first if necessary with os.makedirs().
    """
    if not isdir(path):
        try:
            if mode:
                os.makedirs(path, mode=mode)
            else:
                os.makedirs(path)
        except OSError as e:
            if e.errno == errno.EEXIST and isdir(path):
                # be happy if another process already created the path
                pass
            else:
                raise e
    return path


def rmtree(path, ignore_errors=False):
    if ignore_errors:
        def on_error(*args):
            pass
    elif sys.platform.startswith('win32'):
        def on_error(func, _path, exc_info):
            os.chmod(_path, S_IWRITE)
            if isdir(_path):
                os.rmdir(_path)
            else:
                os.unlink(_path)
    else:
        on_error = None
    if isdir(path) and not islink(path):
        shutil.rmtree(path, onerror=on_error)
    elif exists(path) or islink(path):
        os.remove(path)


class TempDir(object):
    def __init__(self, parent_dir=None, ignore_errors=False):
        self.parent_dir = parent_dir
        self.ignore_errors = ignore_errors

    def __enter__(self):
        self.tmp_dir = tempfile.mkdtemp(dir=self.parent_dir)
        return self.tmp_dir

    def __exit__(self, exc_type, exc_value, traceback):
        rmtree(self.tmp_dir, ignore_errors=self.ignore_errors)


class SafeDirectoryUpdater(object):
    """
    Context manager for populating a cache directory so that it either appears
    complete or not at all.

    :Example:
    # Unpacks `archive` into `dst`. If the unpacking fails, `dst` is not created.
    # If another process creates `dst` concurrently, its result is kept.
    with SafeDirectoryUpdater(dst) as sdu:
        extract(archive, sdu.directory)

    """
    def __init__(self, directory, create=False):
        """
        :param directory: the target directory that will be created within the context.
                          The working copy of the directory is accessed via `self.directory`
                          within the context.
        """
        self.target = directory
        self._workspace = None
        self.directory = None
        self.create = create

    def __enter__(self):
        parent = dirname(self.target)
        ensure_dir_exists(parent)
        # The workspace must be on the same file system as the target for os.rename to be atomic
        self._workspace = tempfile.mkdtemp(prefix='.' + basename(self.target) + '-', dir=parent)
        self.directory = join(self._workspace, basename(self.target))
        if self.create:
            ensure_dir_exists(self.directory)
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is not None:
            rmtree(self._workspace, ignore_errors=True)
            return False

        try:
            os.rename(self.directory, self.target)
        except OSError:
            if not exists(self.target):
                raise
            logv(f'{self.target} was created concurrently, discarding {self.directory}')
        finally:
            rmtree(self._workspace, ignore_errors=True)
        return False
