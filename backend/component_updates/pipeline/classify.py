"""
Component Update Helper — Package classification.

Git for Windows builds packages on two tracks: the MSYS track (POSIX
layer, plain package names) and the MINGW track (native, cross-compiled,
names prefixed with 'mingw-w64-'). These predicates are pure lookups.
"""

CROSS_TRACK_PREFIX = "mingw-w64-"

# Built on the MINGW track although its name carries no prefix.
CROSS_TRACK_ONLY = "git-extra"

BOTH_TRACKS = {"openssl", "curl", "gnutls", "pcre2"}

NO_SEPARATE_ARM64_BUILD = {
    "mingw-w64-git-credential-manager",
    "mingw-w64-git-lfs",
    "mingw-w64-wintoast",
}

PRETTY_NAMES = {
    "git-credential-manager": "Git Credential Manager",
    "git-lfs": "Git LFS",
    "msys2-runtime": "MSYS2 runtime",
    "bash": "Bash",
    "curl": "cURL",
    "gnutls": "GNU TLS",
    "heimdal": "Heimdal",
    "mintty": "MinTTY",
    "openssh": "OpenSSH",
    "openssl": "OpenSSL",
    "pcre2": "PCRE2",
    "perl": "Perl",
    "tig": "Tig",
}


def strip_cross_track_prefix(package_name: str) -> str:
    if package_name.startswith(CROSS_TRACK_PREFIX):
        return package_name[len(CROSS_TRACK_PREFIX):]
    return package_name


def is_msys_package(package_name: str) -> bool:
    return package_name != CROSS_TRACK_ONLY and not package_name.startswith(CROSS_TRACK_PREFIX)


def package_needs_both_tracks(package_name: str) -> bool:
    """Libraries that ship once per track (MSYS and MINGW)."""
    return package_name in BOTH_TRACKS


def needs_separate_arm64_build(package_name: str) -> bool:
    """Informational for callers scheduling builds; artifact planning does not use it."""
    if package_name == CROSS_TRACK_ONLY:
        return True
    return (
        package_name.startswith(CROSS_TRACK_PREFIX)
        and package_name not in NO_SEPARATE_ARM64_BUILD
    )


def pretty_package_name(package_name: str) -> str:
    return PRETTY_NAMES.get(package_name, package_name)
