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

__all__ = ["ALIAS_SIGIL", "ALIAS_PREFIX", "is_alias", "known_aliases", "resolve_alias"]

from . import jk_cache, jk_properties
from .jk_errors import AliasNotFoundError
from .support.logging import logv

ALIAS_SIGIL = '@'
ALIAS_PREFIX = 'jeka.remote.alias.'


def is_alias(token):
    return token.startswith(ALIAS_SIGIL)


def known_aliases():
    """
    Gets the sorted alias keys defined in the global configuration.
    """
    entries = jk_properties.load(jk_cache.global_config_file())
    return sorted(k for k in entries if k.startswith(ALIAS_PREFIX))


def resolve_alias(token):
    """
    Expands an ``@name`` token to the remote reference defined by the global
    ``jeka.remote.alias.<name>`` property. Other tokens are returned unchanged.

    :raises AliasNotFoundError: if the alias is not defined
    """
    if not is_alias(token):
        return token
    name = token[len(ALIAS_SIGIL):]
    value = jk_properties.read(jk_cache.global_config_file(), ALIAS_PREFIX + name)
    if not value:
        raise AliasNotFoundError(name, known_aliases())
    value = value.strip()
    logv(f'Alias {token} resolved to {value}')
    return value
