"""
Component Update Helper — Issue text to (package, version) extractor.

Title/body patterns are tried in a fixed order; the first match wins.
Upstream projects tag their releases in wildly different ways, so the
captured version is normalised through a small, fixed pipeline:

  OpenSSL_3_1_4      → 3.1.4
  Bash-5.2 patch 21  → 5.2.21
  v2.44.0            → 2.44.0
  cygwin-3.4.9-release → 3.4.9
"""

from __future__ import annotations

import re

from component_updates.errors import ExtractionError
from component_updates.models.update import UpdateDescriptor
from component_updates.utils.logging import logger

# "[New openssl version] OpenSSL_3_1_4"; the optional non-digit prefix
# keeps e.g. "GnuTLS 3.8.1" from capturing "GnuTLS"
NEW_VERSION_TITLE = re.compile(
    r"^\[New (\S+) version\] (?:[^0-9]+\s+)?(\S+(?:\s+patch\s+\d+)?)"
)
UPDATE_TO_TITLE = re.compile(r"^(\S+): update to v?(\d[0-9.]\S*)")
NEW_VERSION_BODY = re.compile(
    r"^# \[New (\S+) version\] (?:[^0-9]+\s+)?(\S+(?:\s+patch\s+\d+)?)"
)

PACKAGE_ALIASES = {
    "git-lfs": "mingw-w64-git-lfs",
    "git-credential-manager": "mingw-w64-git-credential-manager",
    "gcm-core": "mingw-w64-git-credential-manager",
    "gcm": "mingw-w64-git-credential-manager",
    "cygwin": "msys2-runtime",
}

# Alternation order matters: the first full match is the only one removed.
VERSION_PREFIX = re.compile(
    r"^(?:GCM |openssl-|OpenSSL_|v|V_|GnuTLS |tig-|Heimdal |cygwin-|PCRE2-|Bash-)"
)
VERSION_SEPARATOR = re.compile(r"_|\s+patch\s+")
RELEASE_SUFFIX = re.compile(r"-release$")


def _match(title: str, body: str) -> re.Match | None:
    if "new items" not in title:
        match = NEW_VERSION_TITLE.match(title)
        if match:
            return match
    return UPDATE_TO_TITLE.match(title) or NEW_VERSION_BODY.match(body or "")


def normalize_package_name(package_name: str) -> str:
    """Map upstream/short names onto the package names used for builds."""
    return PACKAGE_ALIASES.get(package_name, package_name)


def normalize_version(version: str) -> str:
    version = VERSION_PREFIX.sub("", version, count=1)
    version = VERSION_SEPARATOR.sub(".", version)
    return RELEASE_SUFFIX.sub("", version)


def guess_component_update_details(title: str, body: str | None) -> UpdateDescriptor:
    """
    Guess which component an issue/PR is about and which version it updates to.

    Raises ExtractionError when no pattern matches or a capture is empty;
    there is no fallback guess.
    """
    match = _match(title, body or "")
    if not match or not match.group(1) or not match.group(2):
        raise ExtractionError(title)

    package_name = normalize_package_name(match.group(1))
    version = normalize_version(match.group(2))
    if not version:
        raise ExtractionError(title)

    logger.info("  Component update: %s v%s", package_name, version)
    return UpdateDescriptor(package_name=package_name, version=version)
