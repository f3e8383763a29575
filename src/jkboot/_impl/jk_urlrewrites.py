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

__all__ = ["URLRewrite", "parse_urlrewrite", "urlrewrites_from_env", "rewriteurl"]

import json
import re

from .support.envvars import get_env
from .support.logging import logvv

URLREWRITES_ENV = 'JEKA_URLREWRITES'


class URLRewrite(object):
    """
    Represents a regular expression based rewrite rule that can be applied to a URL.

    :param :class:`re.Pattern` pattern: a regular expression for matching URLs
    :param replacement: the replacement URL to use for a URL matched by `pattern`
    """

    def __init__(self, pattern, replacement):
        self.pattern = pattern
        self.replacement = str(replacement)

    def _rewrite(self, url):
        match = self.pattern.match(url)
        if match:
            return self.pattern.sub(self.replacement, url)
        else:
            return None

    def __str__(self):
        return self.pattern.pattern + ' -> ' + self.replacement


def parse_urlrewrite(urlrewrite, onError):
    """
    Parses a URL rewrite rule. A URL rewrite rule is a dict where the key is a
    regex for matching a URL and the value describes how to rewrite.

    :Example:

    {
      "https://repo.maven.apache.org/maven2/(.*)" : {
         "replacement" : "https://maven.acme.com/central/\1",
      }
    }

    :param dict urlrewrite: a URL rewrite rule
    :param function onError: called with error message argument if urlrewrite is badly formed
    :return: a list of `URLRewrite` objects
    """
    if not isinstance(urlrewrite, dict) or len(urlrewrite) != 1:
        onError('A URL rewrite rule must be a dict with a single entry')
    result = []
    for pattern, attrs in urlrewrite.items():
        if not isinstance(attrs, dict):
            onError('URL rewrite for pattern "' + pattern + '" must be a dict')
        attrs = dict(attrs)
        replacement = attrs.pop('replacement', None)
        if replacement is None:
            onError('URL rewrite for pattern "' + pattern + '" is missing "replacement" entry')
        if len(attrs) != 0:
            onError('Unsupported attributes found for URL rewrite "' + pattern + '": ' + str(attrs))
        try:
            compiled = re.compile(pattern)
        except re.error as e:
            onError('Error parsing URL rewrite pattern "' + pattern + '": ' + str(e))
        rewrite = URLRewrite(compiled, replacement)
        logvv("Registering url rewrite: " + str(rewrite))
        result.append(rewrite)
    return result


def urlrewrites_from_env(name=URLREWRITES_ENV):
    """
    Gets the rewrite rules denoted by the environment variable named by `name`.
    If the environment variable has a non-empty value it must either be an JSON
    object describing a single rewrite rule, a JSON array describing a list of
    rewrite rules or a file containing one of these JSON values.

    :param str name: name of an environment variable denoting URL rewrite rules
    :return: a list of `URLRewrite` objects
    """
    value = get_env(name, None)
    rewrites = []
    if value:
        def raiseError(msg):
            raise ValueError('Error processing URL rewrite rules denoted by environment variable ' + name + ':\n' + msg)

        value = value.strip()
        if value[0] not in '{[':
            with open(value) as fp:
                jsonValue = fp.read().strip()
        else:
            jsonValue = value

        if jsonValue:
            try:
                rules = json.loads(jsonValue)
            except ValueError as e:
                raiseError('Error parsing JSON: ' + str(e))
            # JSON root is always either list or dict
            if isinstance(rules, dict):
                rules = [rules]
            for rule in rules:
                rewrites += parse_urlrewrite(rule, raiseError)
    return rewrites


def rewriteurl(url, urlrewrites=None):
    """
    Finds the first rewrite rule that matches `url` and returns the replacement `url`
    provided by the rule.

    :param str url: a URL to match against the rewrite rules
    :param list urlrewrites: the rules to apply, by default those denoted by ``JEKA_URLREWRITES``
    :return: the value of `url` rewritten according to the first matching rewrite URL or unmodified if no rules match
    :rtype: str
    """
    if urlrewrites is None:
        urlrewrites = urlrewrites_from_env()
    for urlrewrite in urlrewrites:
        res = urlrewrite._rewrite(url)
        if res:
            logvv(f"Rewrote '{url}' to '{res}'")
            return res
    return url
