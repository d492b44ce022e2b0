"""
Component Update Helper — Artifact URL planner.

Computes the package files the Pacman repository must serve once a
component update has been deployed:

  MSYS  : {BASE}/x86-64/curl-8.4.0-1-x86_64.pkg.tar.xz
  MINGW : {BASE}/x86-64/mingw-w64-x86_64-curl-8.4.0-1-any.pkg.tar.xz

Pure and deterministic: same inputs, same URLs, same order.
"""

from __future__ import annotations

from typing import Sequence

from component_updates.pipeline.classify import (
    CROSS_TRACK_PREFIX,
    is_msys_package,
    package_needs_both_tracks,
    strip_cross_track_prefix,
)

ARTIFACT_BASE_URL = "https://wingit.blob.core.windows.net"
DEFAULT_ARCHITECTURES = ("i686", "x86_64")

# Packages whose version carries a Pacman epoch ("1~3.6.1").
EPOCHS = {"mintty": 1}


def architectures_for(
    package_name: str,
    architectures: Sequence[str] | None = None,
) -> list[str]:
    archs = list(DEFAULT_ARCHITECTURES if architectures is None else architectures)
    if package_name == "msys2-runtime":
        archs = archs[1:]
    elif package_name == "msys2-runtime-3.3":
        archs = archs[:-1]
    return archs


def epoch_version(package_name: str, version: str) -> str:
    epoch = EPOCHS.get(package_name)
    return f"{epoch}~{version}" if epoch is not None else version


def _arch_path(arch: str) -> str:
    return arch.replace("_", "-")


def msys_package_url(package_name: str, version: str, arch: str) -> str:
    return f"{ARTIFACT_BASE_URL}/{_arch_path(arch)}/{package_name}-{version}-1-{arch}.pkg.tar.xz"


def mingw_package_url(package_name: str, version: str, arch: str) -> str:
    name = strip_cross_track_prefix(package_name)
    return (
        f"{ARTIFACT_BASE_URL}/{_arch_path(arch)}/"
        f"{CROSS_TRACK_PREFIX}{arch}-{name}-{version}-1-any.pkg.tar.xz"
    )


def plan_urls(
    package_name: str,
    version: str,
    architectures: Sequence[str] | None = None,
) -> list[str]:
    """
    Return every artifact URL a deployed `package_name` `version` must have.

    Applies the per-package architecture exclusions and epoch prefix
    first. Packages built on both tracks yield the MSYS URLs followed by
    the MINGW URLs.
    """
    archs = architectures_for(package_name, architectures)
    version = epoch_version(package_name, version)

    if package_needs_both_tracks(package_name):
        base = strip_cross_track_prefix(package_name)
        return [msys_package_url(base, version, arch) for arch in archs] + [
            mingw_package_url(base, version, arch) for arch in archs
        ]

    if is_msys_package(package_name):
        return [msys_package_url(package_name, version, arch) for arch in archs]
    return [mingw_package_url(package_name, version, arch) for arch in archs]
