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

from __future__ import annotations

__all__ = [
    "Platform",
    "get_os",
    "get_arch",
    "get_os_variant",
    "is_darwin",
    "is_linux",
    "is_windows",
]

import platform
import subprocess
import sys
from typing import NamedTuple

from .logging import logv


def is_darwin() -> bool:
    return sys.platform.startswith("darwin")


def is_linux() -> bool:
    return sys.platform.startswith("linux")


def is_windows() -> bool:
    return sys.platform.startswith("win32")


def get_os() -> str:
    """
    Get a canonical form of sys.platform, or an empty string for
    operating systems JDKs cannot be downloaded for.
    """
    if is_darwin():
        return "mac"
    elif is_linux():
        return "linux"
    elif is_windows():
        return "windows"
    logv("Unknown operating system " + sys.platform)
    return ""


def get_arch() -> str:
    machine = platform.uname()[4]
    if machine in ["aarch64", "arm64", "ARM64"]:
        return "aarch64"
    if machine in ["amd64", "AMD64", "x86_64", "i86pc"]:
        return "x64"
    logv("Unknown or unsupported architecture: machine=" + machine)
    return ""


def get_os_variant() -> str:
    """
    Returns "musl" on Linux systems whose C library is musl (e.g. Alpine), an empty string otherwise.
    """
    if get_os() == "linux":
        from .processes import _check_output_str

        try:
            proc_output = _check_output_str(["ldd", "--version"], stderr=subprocess.STDOUT)
        except subprocess.CalledProcessError as e:
            proc_output = e.output
        except OSError:
            proc_output = None

        if proc_output and "musl" in proc_output:
            logv("OS variant detected: musl")
            return "musl"
    return ""


class Platform(NamedTuple):
    """
    Describes the host a JDK has to be downloaded for, using the names of the foojay disco API.
    An empty `os` or `arch` means the host is not supported for downloads.
    """

    os: str
    arch: str
    libc_type: str
    archive_type: str

    @staticmethod
    def current() -> Platform:
        os_name = get_os()
        if os_name == "mac":
            libc_type = "libc"
        elif os_name == "windows":
            libc_type = "c_std_lib"
        elif get_os_variant() == "musl":
            libc_type = "musl"
        else:
            libc_type = "glibc"
        archive_type = "zip" if os_name == "windows" else "tar.gz"
        return Platform(os_name, get_arch(), libc_type, archive_type)
