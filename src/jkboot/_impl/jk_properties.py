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
Reading of flat ``key=value`` property files such as ``jeka.properties``.
"""

__all__ = ["read", "load"]

from os.path import isfile

from .support.logging import logvv


def _read_text(path):
    """
    Decodes the file at `path` as UTF-8, or as ISO-8859-1 (the traditional encoding
    of Java property files) if it is not valid UTF-8.
    """
    with open(path, 'rb') as f:
        data = f.read()
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError:
        logvv(f'{path} is not UTF-8, reading it as ISO-8859-1')
        return data.decode('iso-8859-1')


def _entries(path):
    """
    Yields the (key, value) pairs of the property file at `path` in file order.
    The key is stripped, the value is kept as-is apart from the line terminator.
    """
    for line in _read_text(path).split('\n'):
        line = line.rstrip('\r')
        stripped = line.lstrip()
        if not stripped or stripped[0] in '#!':
            continue
        if '=' not in line:
            logvv(f'{path}: ignoring line without "=": {line}')
            continue
        key, value = line.split('=', 1)
        yield key.strip(), value


def read(path, key):
    """
    Gets the value of the first entry for `key` in the property file at `path`.

    :return: the value or None if the file does not exist or has no entry for `key`
    """
    if not isfile(path):
        return None
    for k, value in _entries(path):
        if k == key:
            return value
    return None


def load(path):
    """
    Gets all entries of the property file at `path` as a dict. If a key occurs
    more than once, the first occurrence wins. A missing file yields an empty dict.
    """
    result = {}
    if isfile(path):
        for k, value in _entries(path):
            result.setdefault(k, value)
    return result
