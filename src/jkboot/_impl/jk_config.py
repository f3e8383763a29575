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
Layered property lookup.

The effective value of a property is the first non-empty value found in:

1. the environment, under the literal property name or its upper case
   variable form (``jeka.java.version`` or ``JEKA_JAVA_VERSION``),
2. ``jeka.properties`` of the base directory,
3. ``jeka.properties`` of each ancestor directory, walking up while the
   parent directory still has a ``jeka.properties`` file,
4. the global ``global.properties`` file of the user.
"""

__all__ = [
    "LOCAL_CONFIG_FILE",
    "LookupSource",
    "EnvironmentSource",
    "PropertiesFileSource",
    "ConfigChain",
    "local_config_dirs",
    "config_chain",
    "resolve",
]

import os
from abc import ABCMeta, abstractmethod
from os.path import abspath, dirname, isfile, join

from . import jk_cache, jk_properties
from .support.envvars import property_to_env_name
from .support.logging import logvv

LOCAL_CONFIG_FILE = 'jeka.properties'


class LookupSource(object, metaclass=ABCMeta):
    @abstractmethod
    def lookup(self, key):
        """
        :return: the value of `key` in this source or None
        """
        pass


class EnvironmentSource(LookupSource):
    def __init__(self, environ=None):
        self.environ = os.environ if environ is None else environ

    def lookup(self, key):
        for name in (key, property_to_env_name(key)):
            value = self.environ.get(name)
            if value and value.strip():
                return value
        return None

    def __repr__(self):
        return 'environment'


class PropertiesFileSource(LookupSource):
    def __init__(self, path):
        self.path = path

    def lookup(self, key):
        return jk_properties.read(self.path, key)

    def __repr__(self):
        return self.path


class ConfigChain(object):
    """
    An ordered list of lookup sources. Empty or blank values count as absent so
    that the search continues with the next source.
    """
    def __init__(self, sources):
        self.sources = list(sources)

    def lookup(self, key):
        for source in self.sources:
            value = source.lookup(key)
            if value and value.strip():
                logvv(f'Property {key}={value} found in {source}')
                return value
        return None

    def __repr__(self):
        return ' -> '.join(str(s) for s in self.sources)


def local_config_dirs(base_dir):
    """
    Gets the directories whose ``jeka.properties`` take part in a lookup from `base_dir`,
    nearest first. `base_dir` itself is always included; an ancestor is included while
    it has a ``jeka.properties`` file, stopping at the first one without it or at the
    filesystem root.
    """
    current = abspath(base_dir)
    dirs = [current]
    while True:
        parent = dirname(current)
        if parent == current or not isfile(join(parent, LOCAL_CONFIG_FILE)):
            break
        dirs.append(parent)
        current = parent
    return dirs


def config_chain(base_dir, environ=None):
    sources = [EnvironmentSource(environ)]
    sources += [PropertiesFileSource(join(d, LOCAL_CONFIG_FILE)) for d in local_config_dirs(base_dir)]
    sources.append(PropertiesFileSource(jk_cache.global_config_file()))
    return ConfigChain(sources)


def resolve(base_dir, key, environ=None):
    """
    Gets the effective value of the property `key` for `base_dir`.

    :return: the value or None if no source defines a non-empty value
    """
    return config_chain(base_dir, environ).lookup(key)
