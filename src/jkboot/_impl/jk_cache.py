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
Locations of the user configuration and of the artifact cache.

The cache root holds:

    git/<sanitized-url>          shallow clones of remote projects
    jdks/<distrib>-<version>     downloaded JDKs
    distributions/<version>      downloaded JeKa distributions
"""

__all__ = [
    "user_home",
    "jeka_user_dir",
    "global_config_file",
    "cache_dir",
    "git_cache_dir",
    "jdks_cache_dir",
    "distributions_cache_dir",
]

import os
from os.path import join

from .support.envvars import get_env


def user_home():
    return os.path.expanduser('~')


def jeka_user_dir():
    return get_env('JEKA_USER_HOME') or join(user_home(), '.jeka')


def global_config_file():
    return join(jeka_user_dir(), 'global.properties')


def cache_dir():
    return get_env('JEKA_CACHE_DIR') or join(jeka_user_dir(), 'cache')


def git_cache_dir():
    return join(cache_dir(), 'git')


def jdks_cache_dir():
    return join(cache_dir(), 'jdks')


def distributions_cache_dir():
    return join(cache_dir(), 'distributions')
