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
Errors raised while resolving the base directory, the JDK and the JeKa distribution.

Each error is fatal to the invocation. The launcher entry point reports the message
and exits with a non-zero status.
"""

__all__ = [
    "ResolutionError",
    "DirectoryNotFoundError",
    "AliasNotFoundError",
    "CloneFailedError",
    "UnsupportedPlatformError",
    "DownloadFailedError",
    "RuntimeNotFoundError",
    "DistributionNotFoundError",
    "DistributionArtifactMissingError",
]


class ResolutionError(Exception):
    pass


class DirectoryNotFoundError(ResolutionError):
    def __init__(self, path):
        ResolutionError.__init__(self, f"Directory {path} does not exist")
        self.path = path


class AliasNotFoundError(ResolutionError):
    def __init__(self, name, known_aliases):
        msg = f"No remote alias named '{name}' found in global configuration."
        if known_aliases:
            msg += "\nDefined aliases:\n  " + "\n  ".join(known_aliases)
        else:
            msg += "\nNo aliases are defined."
        ResolutionError.__init__(self, msg)
        self.name = name
        self.known_aliases = known_aliases


class CloneFailedError(ResolutionError):
    def __init__(self, url, output):
        msg = f"Failed to clone {url}"
        if output:
            msg += ":\n" + output
        ResolutionError.__init__(self, msg)
        self.url = url
        self.output = output


class UnsupportedPlatformError(ResolutionError):
    pass


class DownloadFailedError(ResolutionError):
    def __init__(self, url, reason):
        ResolutionError.__init__(self, f"Error downloading from {url}: {reason}")
        self.url = url
        self.reason = reason


class RuntimeNotFoundError(ResolutionError):
    pass


class DistributionNotFoundError(ResolutionError):
    pass


class DistributionArtifactMissingError(ResolutionError):
    def __init__(self, path):
        ResolutionError.__init__(self, f"Cannot find {path}. The distribution directory may be corrupted, "
                                        f"delete it and run again.")
        self.path = path
