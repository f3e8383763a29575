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
Resolution of the JeKa distribution that runs a project.

A distribution root contains the ``bin/jeka.jar`` artifact. It is taken from the
``jeka.distrib.location`` property, from the ``distributions/<version>`` cache entry
for ``jeka.version`` (downloaded from a Maven repository when missing), or from the
launcher's own installation when no version is configured.
"""

__all__ = [
    "resolve",
    "distrib_root",
    "repository",
    "distrib_url",
    "metadata_url",
    "latest_version",
    "distrib_cache_path",
    "fetch_distrib",
    "launcher_home",
    "classpath",
]

import os
from os.path import dirname, isabs, isdir, isfile, join, realpath

from defusedxml.ElementTree import parse as etreeParse
from defusedxml.common import DefusedXmlException
from xml.etree.ElementTree import ParseError

from . import jk_cache, jk_config
from .jk_download import Extractor, download, urlopen
from .jk_errors import DistributionArtifactMissingError, DistributionNotFoundError
from .jk_urlrewrites import rewriteurl
from .jk_util import SafeDirectoryUpdater, TempDir
from .support.envvars import get_env
from .support.logging import log, logv

LOCATION_PROPERTY = 'jeka.distrib.location'
VERSION_PROPERTY = 'jeka.version'
REPO_PROPERTY = 'jeka.distrib.repo'
DEFAULT_REPO = 'https://repo.maven.apache.org/maven2/'
LATEST_VERSION = 'latest'
JAR_PATH = join('bin', 'jeka.jar')
BOOT_DIR = 'jeka-boot'
MAIN_CLASS = 'dev.jeka.core.tool.Main'

_artifact_path = 'dev/jeka/jeka-core'
_launcher_home = realpath(join(dirname(__file__), '..', '..', '..'))


def launcher_home():
    """
    Gets the directory of the launcher installation, which holds a ``bin/jeka.jar``
    when the launcher is shipped within a distribution.
    """
    return get_env('JEKA_HOME') or _launcher_home


def repository(base_dir):
    repo = (jk_config.resolve(base_dir, REPO_PROPERTY) or DEFAULT_REPO).strip()
    return repo if repo.endswith('/') else repo + '/'


def distrib_url(repo, version):
    return f'{repo}{_artifact_path}/{version}/jeka-core-{version}-distrib.zip'


def metadata_url(repo):
    return f'{repo}{_artifact_path}/maven-metadata.xml'


def latest_version(repo):
    """
    Gets the latest released version of the distribution published in `repo`.

    :raises DownloadFailedError: if the repository metadata cannot be retrieved
    :raises DistributionNotFoundError: if the metadata does not name a version
    """
    url = rewriteurl(metadata_url(repo))
    logv(f'Retrieving and parsing {url}')
    metadataFile = urlopen(url)
    try:
        root = etreeParse(metadataFile).getroot()
    except (ParseError, DefusedXmlException) as e:
        raise DistributionNotFoundError(f'Cannot parse {url}: {e}')
    finally:
        metadataFile.close()
    versioning = root.find('versioning')
    if versioning is not None:
        for tag in ('release', 'latest'):
            element = versioning.find(tag)
            if element is not None and element.text and element.text.strip():
                version = element.text.strip()
                logv(f'Latest distribution version is {version}')
                return version
    raise DistributionNotFoundError(f'No release version found in {url}. Set {VERSION_PROPERTY} to an explicit version.')


def distrib_cache_path(version):
    return join(jk_cache.distributions_cache_dir(), version)


def fetch_distrib(repo, version, final_path):
    """
    Downloads the distribution `version` from `repo` and unpacks it in `final_path`.
    `final_path` only appears once the distribution is completely unpacked.
    """
    url = rewriteurl(distrib_url(repo, version))
    log(f'Downloading JeKa distribution {version}...')
    with SafeDirectoryUpdater(final_path, create=True) as sdu:
        with TempDir(parent_dir=dirname(final_path)) as temp_dir:
            archive = join(temp_dir, f'jeka-core-{version}-distrib.zip')
            download(archive, url)
            Extractor.create(archive).extract(sdu.directory)
    return final_path


def distrib_root(base_dir, home=None):
    """
    Gets the root directory of the distribution to use for the project in `base_dir`.

    :param str home: launcher installation used when no version is configured (default: `launcher_home()`)
    :raises DistributionNotFoundError: if neither a location nor a version is configured and
                                       the launcher installation has no ``bin/jeka.jar``
    """
    location = jk_config.resolve(base_dir, LOCATION_PROPERTY)
    if location and location.strip():
        location = location.strip()
        if not isabs(location):
            location = join(base_dir, location)
        logv(f'Using distribution from {LOCATION_PROPERTY}: {location}')
        return location

    version = jk_config.resolve(base_dir, VERSION_PROPERTY)
    if not version or not version.strip():
        home = home or launcher_home()
        if not isfile(join(home, JAR_PATH)):
            raise DistributionNotFoundError(
                f'No JeKa distribution found: {join(home, JAR_PATH)} does not exist.' + os.linesep +
                f"Set the '{VERSION_PROPERTY}' or '{LOCATION_PROPERTY}' property, for example in {join(base_dir, jk_config.LOCAL_CONFIG_FILE)}.")
        logv(f'Using distribution of the launcher: {home}')
        return home

    version = version.strip()
    repo = repository(base_dir)
    if version == LATEST_VERSION:
        version = latest_version(repo)
    final_path = distrib_cache_path(version)
    if isdir(final_path):
        logv(f'Using cached distribution {final_path}')
    else:
        fetch_distrib(repo, version, final_path)
    return final_path


def resolve(base_dir, home=None):
    """
    Gets the classpath entries to run the tool for the project in `base_dir`:
    the jars of the project's ``jeka-boot`` directory, if any, followed by the
    ``bin/jeka.jar`` of the resolved distribution.

    :raises DistributionArtifactMissingError: if the distribution has no ``bin/jeka.jar``
    """
    jar = join(distrib_root(base_dir, home), JAR_PATH)
    if not isfile(jar):
        raise DistributionArtifactMissingError(jar)
    entries = []
    boot_dir = join(base_dir, BOOT_DIR)
    if isdir(boot_dir):
        entries.append(join(boot_dir, '*'))
    entries.append(jar)
    return entries


def classpath(entries):
    return os.pathsep.join(entries)
