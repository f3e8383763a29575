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
Resolution of the ``-r``/``-rc`` reference of an invocation to a local base directory.

A reference is either a file system path or a git URL with an optional ``#<ref>``
suffix naming a branch or tag. Git references are shallow-cloned into the cache
once and reused afterwards without fetching; updating a cached clone requires the
clean flag (``-rc``) or removing it from the cache.
"""

__all__ = [
    "LocalPath",
    "SourceRef",
    "classify",
    "giturl_to_foldername",
    "resolve",
]

import os
import re
from os.path import isabs, isdir, join, realpath

from . import jk_cache
from .jk_alias import resolve_alias
from .jk_errors import DirectoryNotFoundError
from .jk_git import GitCloner
from .jk_util import SafeDirectoryUpdater, rmtree
from .support.logging import log, logv

_scheme_prefixes = ('https://', 'ssh://', 'git://')
_folder_name_prefixes = _scheme_prefixes + ('git@',)
_scp_like_pattern = re.compile(r'^[\w.+-]+@[\w.-]+:')


class LocalPath(object):
    def __init__(self, path):
        self.path = path

    def __eq__(self, other):
        return isinstance(other, LocalPath) and self.path == other.path

    def __hash__(self):
        return hash(self.path)

    def __repr__(self):
        return f'LocalPath({self.path})'


class SourceRef(object):
    def __init__(self, url, ref=None):
        self.url = url
        self.ref = ref

    @staticmethod
    def matches(reference):
        return reference.startswith(_scheme_prefixes) or bool(_scp_like_pattern.match(reference))

    @staticmethod
    def parse(reference):
        """
        Splits `reference` on its first ``#`` into a URL and a ref.
        """
        url, sep, ref = reference.partition('#')
        return SourceRef(url, ref if sep and ref else None)

    def folder_name(self):
        return giturl_to_foldername(self.url)

    def __eq__(self, other):
        return isinstance(other, SourceRef) and (self.url, self.ref) == (other.url, other.ref)

    def __hash__(self):
        return hash((self.url, self.ref))

    def __repr__(self):
        return f'SourceRef({self.url}#{self.ref})' if self.ref else f'SourceRef({self.url})'


def classify(reference):
    """
    :return: a `SourceRef` if `reference` denotes a git repository, a `LocalPath` otherwise
    """
    if SourceRef.matches(reference):
        return SourceRef.parse(reference)
    return LocalPath(reference)


def giturl_to_foldername(url):
    """
    Derives the name of the cache directory for the repository at `url`
    (e.g. ``https://example.com/org/repo`` -> ``example.com_org_repo``).
    """
    name = url
    for prefix in _folder_name_prefixes:
        if name.startswith(prefix):
            name = name[len(prefix):]
    return re.sub(r'[/\\:]', '_', name)


def _resolve_local(local, cwd):
    path = local.path if isabs(local.path) else join(cwd or os.getcwd(), local.path)
    if not isdir(path):
        raise DirectoryNotFoundError(path)
    return realpath(path)


def _resolve_source(source, force_clean, cloner):
    target = join(jk_cache.git_cache_dir(), source.folder_name())
    if force_clean and os.path.lexists(target):
        log(f'Deleting cached clone {target}')
        rmtree(target)
    if isdir(target):
        logv(f'Using cached clone of {source.url} in {target}')
    else:
        with SafeDirectoryUpdater(target) as sdu:
            cloner.clone(source.url, sdu.directory, source.ref)
    return target


def resolve(reference, force_clean=False, cwd=None, cloner=None):
    """
    Resolves `reference` (possibly an ``@alias``) to an existing local directory.

    :param str reference: a path, a git URL with optional ``#<ref>`` or an alias
    :param bool force_clean: delete a cached clone of a git reference before using it
    :param str cwd: directory against which relative paths are resolved (default: current directory)
    :param GitCloner cloner: clone capability
    :raises DirectoryNotFoundError: if a path reference does not denote a directory
    :raises CloneFailedError: if cloning a git reference fails
    """
    classified = classify(resolve_alias(reference))
    if isinstance(classified, SourceRef):
        return _resolve_source(classified, force_clean, cloner or GitCloner())
    return _resolve_local(classified, cwd)
