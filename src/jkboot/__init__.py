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
The jkboot package.

Resolves the project directory, the JDK and the JeKa distribution a JeKa
invocation runs with, downloading and caching them on demand.

DO NOT WRITE IMPLEMENTATION CODE HERE.
"""

from ._impl.jk_errors import *
from ._impl.jk_alias import resolve_alias
from ._impl.jk_remote import LocalPath, SourceRef, classify, giturl_to_foldername
from ._impl.support.system import Platform
from ._impl import jk_config as config
from ._impl import jk_distrib as distrib
from ._impl import jk_fetchjdk as runtime
from ._impl import jk_remote as remote
from ._impl import jk_errors as _errors

__all__ = [
    "resolve_alias",
    "LocalPath",
    "SourceRef",
    "classify",
    "giturl_to_foldername",
    "Platform",
    "config",
    "distrib",
    "runtime",
    "remote",
]
__all__ += _errors.__all__
