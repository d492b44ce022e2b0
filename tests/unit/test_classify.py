"""Unit tests for package classification predicates."""

from component_updates.pipeline.classify import (
    is_msys_package,
    needs_separate_arm64_build,
    package_needs_both_tracks,
    pretty_package_name,
    strip_cross_track_prefix,
)


class TestIsMSYSPackage:
    def test_plain_names(self):
        assert is_msys_package("bash")
        assert is_msys_package("msys2-runtime")

    def test_git_extra_is_mingw(self):
        assert not is_msys_package("git-extra")

    def test_prefixed_names(self):
        assert not is_msys_package("mingw-w64-git-lfs")


class TestBothTracks:
    def test_libraries(self):
        for name in ("openssl", "curl", "gnutls", "pcre2"):
            assert package_needs_both_tracks(name)

    def test_others(self):
        assert not package_needs_both_tracks("bash")
        assert not package_needs_both_tracks("mingw-w64-curl")


class TestSeparateARM64Build:
    def test_git_extra(self):
        assert needs_separate_arm64_build("git-extra")

    def test_prefixed_default(self):
        assert needs_separate_arm64_build("mingw-w64-curl")

    def test_exclusions(self):
        assert not needs_separate_arm64_build("mingw-w64-git-credential-manager")
        assert not needs_separate_arm64_build("mingw-w64-git-lfs")
        assert not needs_separate_arm64_build("mingw-w64-wintoast")

    def test_msys_packages(self):
        assert not needs_separate_arm64_build("bash")


class TestPrettyName:
    def test_known(self):
        assert pretty_package_name("curl") == "cURL"
        assert pretty_package_name("git-credential-manager") == "Git Credential Manager"
        assert pretty_package_name("msys2-runtime") == "MSYS2 runtime"

    def test_identity_fallback(self):
        assert pretty_package_name("zstd") == "zstd"


class TestStripPrefix:
    def test_strip(self):
        assert strip_cross_track_prefix("mingw-w64-git-lfs") == "git-lfs"
        assert strip_cross_track_prefix("git-lfs") == "git-lfs"
