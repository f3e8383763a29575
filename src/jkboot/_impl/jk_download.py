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
Download of remote archives and their extraction into cache directories.

Downloads are attempted exactly once: transport errors are reported as
`DownloadFailedError` and never retried.
"""

__all__ = ["urlopen", "download", "Extractor", "TarExtractor", "ZipExtractor"]

import os
import socket
import sys
import tarfile
import urllib.error
import urllib.request
import zipfile
from abc import ABCMeta, abstractmethod
from os.path import isabs, normpath

from .jk_errors import DownloadFailedError, ResolutionError
from .jk_util import ensure_dirname_exists
from .support.logging import log, logv, warn
from .support.options import _opts


def urlopen(url):
    """
    Opens `url`, converting transport errors to `DownloadFailedError`.
    """
    try:
        return urllib.request.urlopen(url)
    except (IOError, socket.timeout) as e:
        raise DownloadFailedError(url, _describe_error(e))


def _describe_error(e):
    if isinstance(e, urllib.error.HTTPError):
        return f'HTTP {e.code} {e.reason}'
    if isinstance(e, urllib.error.URLError):
        return str(e.reason)
    return str(e)


def download(path, url):
    """
    Downloads the content of `url` to the file `path`. On failure no file is left at `path`.

    :raises DownloadFailedError: if the content cannot be retrieved
    """
    ensure_dirname_exists(path)
    assert not path.endswith(os.sep)

    if url.lower().startswith('http://'):
        warn(f'Downloading from non-https URL {url}')

    progress = not vars(_opts).get('quiet') and sys.stdout.isatty()
    logv('Downloading ' + url + ' to ' + path)
    conn = urlopen(url)
    try:
        # Not all servers support the "Content-Length" header
        lengthHeader = conn.headers.get('Content-Length')
        length = int(lengthHeader.strip()) if lengthHeader else -1

        bytesRead = 0
        chunkSize = 8192

        with open(path, 'wb') as fp:
            chunk = conn.read(chunkSize)
            while chunk:
                bytesRead += len(chunk)
                fp.write(chunk)
                if progress:
                    if length == -1:
                        sys.stdout.write(f'\r {bytesRead} bytes')
                    else:
                        sys.stdout.write(f'\r {bytesRead} bytes ({bytesRead * 100 / length:.0f}%)')
                chunk = conn.read(chunkSize)

        if progress:
            sys.stdout.write('\n')

        if length not in (-1, bytesRead):
            raise DownloadFailedError(url, f'download truncated: read {bytesRead} of {length} bytes')
    except (IOError, socket.timeout) as e:
        if os.path.exists(path):
            os.remove(path)
        raise DownloadFailedError(url, _describe_error(e))
    except DownloadFailedError:
        if os.path.exists(path):
            os.remove(path)
        raise
    finally:
        conn.close()
    log(f'Downloaded {url}')


class Extractor(object, metaclass=ABCMeta):
    def __init__(self, src):
        self.src = src

    def extract(self, dst):
        logv(f"Extracting {self.src} to {dst}")
        with self._open() as ar:
            problematic_files = [m for m in self._getnames(ar) if not Extractor._is_sane_name(m)]
            if problematic_files:
                raise ResolutionError("Refusing to create files outside of the destination folder.\n" +
                                      "Reasons might be entries with absolute paths or paths pointing to the parent directory (starting with `..`).\n" +
                                      f"Archive: {self.src} \nProblematic files:\n{os.linesep.join(problematic_files)}")
            self._extractall(ar, dst)

    @abstractmethod
    def _open(self):
        pass

    @abstractmethod
    def _getnames(self, ar):
        pass

    @abstractmethod
    def _extractall(self, ar, dst):
        pass

    @staticmethod
    def _is_sane_name(m):
        if isabs(m):
            return False
        return not normpath(m).startswith('..')

    @staticmethod
    def create(src, archive_type=None):
        """
        Creates an extractor for `src`. The kind of archive is given by `archive_type`
        (e.g. "zip" or "tar.gz") or, if None, derived from the file name.
        """
        name = src if archive_type is None else '.' + archive_type
        if any((name.endswith(ext) for ext in [".tar", ".tar.gz", ".tgz", ".tar.bz2", ".tbz2", ".tar.xz", ".txz"])):
            return TarExtractor(src)
        if name.endswith(".zip") or name.endswith(".jar"):
            return ZipExtractor(src)
        raise ResolutionError("Don't know how to extract the archive: " + src)


class TarExtractor(Extractor):

    def _open(self):
        return tarfile.open(self.src)

    def _getnames(self, ar):
        return ar.getnames()

    def _extractall(self, ar, dst):
        if hasattr(tarfile, 'data_filter'):
            return ar.extractall(dst, filter='data')
        return ar.extractall(dst)


class ZipExtractor(Extractor):

    def _open(self):
        return zipfile.ZipFile(self.src)

    def _getnames(self, ar):
        return ar.namelist()

    def _extractall(self, ar, dst):
        # Cannot use `ar.extractall(dst)` because that loses permissions:
        # https://stackoverflow.com/q/39296101/388803
        for zipinfo in ar.infolist():
            ZipExtractor.extract_and_preserve_permissions(ar, zipinfo, dst)

    @staticmethod
    def extract_and_preserve_permissions(zf, zipinfo, destination):
        extracted_file = zf.extract(zipinfo, destination)
        unix_attributes = (zipinfo.external_attr >> 16) & 0xFFFF
        if unix_attributes != 0:
            os.chmod(extracted_file, unix_attributes)
        return extracted_file
