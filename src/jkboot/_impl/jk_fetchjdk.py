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

__all__ = [
    "required_version",
    "java_distrib",
    "jdk_property",
    "jdk_download_url",
    "jdk_cache_path",
    "flatten_single_root",
    "fetch_jdk",
    "resolve",
    "java_executable",
]

import os
import shutil
import tempfile
from os.path import dirname, isdir, islink, join

from . import jk_cache, jk_config
from .jk_download import Extractor, download
from .jk_errors import RuntimeNotFoundError, UnsupportedPlatformError
from .jk_urlrewrites import rewriteurl
from .jk_util import SafeDirectoryUpdater, TempDir
from .support.envvars import get_env
from .support.logging import log, logv
from .support.system import Platform, is_windows

JDK_HOME_ENV = 'JEKA_JDK_HOME'
JAVA_VERSION_PROPERTY = 'jeka.java.version'
JAVA_DISTRIB_PROPERTY = 'jeka.java.distrib'
DEFAULT_JAVA_DISTRIB = 'temurin'

_disco_url_template = ('https://api.foojay.io/disco/v3.0/directuris?distro={distrib}&javafx_bundled=false'
                       '&libc_type={libc_type}&archive_type={archive_type}&operating_system={os}'
                       '&package_type=jdk&version={version}&architecture={arch}&latest=available')

# macOS JDK bundles keep the actual JDK root below this directory
_mac_home_subpath = join('Contents', 'Home')


def required_version(base_dir):
    """
    Gets the JDK version required by the project in `base_dir` with all whitespace removed.

    :return: the version or None if the project does not require a specific JDK
    """
    version = jk_config.resolve(base_dir, JAVA_VERSION_PROPERTY)
    if version is None:
        return None
    return ''.join(version.split()) or None


def jdk_property(version):
    return f'jeka.jdk.{version}'


def java_distrib(base_dir):
    distrib = jk_config.resolve(base_dir, JAVA_DISTRIB_PROPERTY)
    if distrib and distrib.strip():
        return distrib.strip()
    return DEFAULT_JAVA_DISTRIB


def jdk_download_url(platform, distrib, version):
    return _disco_url_template.format(distrib=distrib, libc_type=platform.libc_type,
                                      archive_type=platform.archive_type, os=platform.os,
                                      version=version, arch=platform.arch)


def jdk_cache_path(distrib, version):
    return join(jk_cache.jdks_cache_dir(), f'{distrib}-{version}')


def _check_platform(platform, version):
    if not platform.os:
        missing = 'operating system'
    elif not platform.arch:
        missing = 'architecture'
    else:
        return
    raise UnsupportedPlatformError(
        f"Cannot download JDK {version}: the {missing} of this machine is not supported." + os.linesep +
        f"Set the '{jdk_property(version)}' property or the {JDK_HOME_ENV} environment variable "
        f"to the path of an installed JDK {version}.")


def flatten_single_root(directory):
    """
    Moves the contents of the only directory in `directory` up one level, as produced
    by archives that wrap the JDK in a top-level folder (e.g. ``jdk-17.0.2/bin``).

    :return: True if the contents were moved, False if `directory` was left untouched
    """
    entries = os.listdir(directory)
    if len(entries) != 1:
        return False
    nested = join(directory, entries[0])
    if not isdir(nested) or islink(nested):
        return False
    # Move the nested folder aside first so it cannot clash with one of its own entries
    holder = tempfile.mkdtemp(prefix='.flatten-', dir=directory)
    root = join(holder, 'root')
    os.rename(nested, root)
    for name in os.listdir(root):
        shutil.move(join(root, name), join(directory, name))
    os.rmdir(root)
    os.rmdir(holder)
    return True


def fetch_jdk(platform, distrib, version, final_path):
    """
    Downloads the JDK `distrib` `version` for `platform` and installs it in `final_path`.
    `final_path` only appears once the JDK is completely unpacked.
    """
    _check_platform(platform, version)
    url = rewriteurl(jdk_download_url(platform, distrib, version))
    log(f"Downloading JDK {distrib} {version}. It may take a while...")
    with SafeDirectoryUpdater(final_path, create=True) as sdu:
        with TempDir(parent_dir=dirname(final_path)) as temp_dir:
            archive = join(temp_dir, 'jdk.' + platform.archive_type)
            download(archive, url)
            log(f"Installing JDK {distrib} {version} to {final_path}...")
            Extractor.create(archive, platform.archive_type).extract(sdu.directory)
        flatten_single_root(sdu.directory)
    return final_path


def resolve(base_dir, platform=None):
    """
    Gets the JDK to run the project in `base_dir` with, downloading it if needed. In order:

    1. no ``jeka.java.version``: None, the launcher's own JDK is used,
    2. the ``JEKA_JDK_HOME`` environment variable,
    3. the ``jeka.jdk.<version>`` property,
    4. the ``jdks/<distrib>-<version>`` cache entry, populated on demand.

    :param Platform platform: the host to download for, detected if None
    :return: the JDK home or None
    """
    version = required_version(base_dir)
    if version is None:
        logv(f'No {JAVA_VERSION_PROPERTY} defined for {base_dir}')
        return None

    jdk_home = get_env(JDK_HOME_ENV)
    if jdk_home:
        logv(f'Using JDK from {JDK_HOME_ENV}: {jdk_home}')
        return jdk_home

    configured = jk_config.resolve(base_dir, jdk_property(version))
    if configured and configured.strip():
        configured = configured.strip()
        if not isdir(configured):
            raise RuntimeNotFoundError(f"The '{jdk_property(version)}' property points to {configured}, "
                                       f"which is not a directory.")
        logv(f'Using JDK from {jdk_property(version)}: {configured}')
        return configured

    if platform is None:
        platform = Platform.current()
    distrib = java_distrib(base_dir)
    final_path = jdk_cache_path(distrib, version)
    if isdir(final_path):
        logv(f'Using cached JDK {final_path}')
    else:
        fetch_jdk(platform, distrib, version, final_path)
    if platform.os == 'mac':
        return join(final_path, _mac_home_subpath)
    return final_path


def java_executable(jdk_home):
    exe = 'java.exe' if is_windows() else 'java'
    if jdk_home is None:
        jdk_home = get_env(JDK_HOME_ENV) or get_env('JAVA_HOME')
        if not jdk_home:
            return exe
    return join(jdk_home, 'bin', exe)
