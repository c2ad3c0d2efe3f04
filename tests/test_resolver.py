"""Tests for solc_inference.core.resolver: short to long version mapping."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from solc_inference.core.catalog import CompilersList
from solc_inference.core.resolver import ReleaseResolver, get_long_version, strip_build_wrapper
from solc_inference.errors import ResolutionError


@pytest.fixture
def fetch_versions(compilers_list_json):
    return MagicMock(return_value=CompilersList.from_json(compilers_list_json))


class TestGetLongVersion:

    def test_resolves_known_version(self, fetch_versions):
        assert get_long_version("0.8.4", fetch_versions) == "v0.8.4+commit.c7e474f2"
        fetch_versions.assert_called_once_with()

    def test_unknown_version(self, fetch_versions):
        with pytest.raises(ResolutionError) as exc_info:
            get_long_version("9.9.9", fetch_versions)
        assert "doesn't exist" in exc_info.value.message

    def test_empty_build_id_is_unknown(self):
        fetch = MagicMock(return_value=CompilersList(releases={"0.8.4": ""}, latest_release="0.8.4"))
        with pytest.raises(ResolutionError):
            get_long_version("0.8.4", fetch)

    def test_non_string_build_id_is_a_resolution_error(self):
        fetch = MagicMock(return_value=CompilersList(releases={"0.8.4": 123}, latest_release="0.8.4"))
        with pytest.raises(ResolutionError):
            get_long_version("0.8.4", fetch)

    def test_fetch_errors_surface(self):
        error = ResolutionError("Failed to obtain list of solc versions. Reason: timeout")
        fetch = MagicMock(side_effect=error)
        with pytest.raises(ResolutionError) as exc_info:
            get_long_version("0.8.4", fetch)
        assert exc_info.value is error

    def test_latest_release(self, fetch_versions):
        assert ReleaseResolver(fetch_versions).get_latest_long_version() == "v0.8.4+commit.c7e474f2"


class TestStripBuildWrapper:

    def test_strips_prefix_and_suffix(self):
        assert strip_build_wrapper("soljson-v0.4.26+commit.4563c3fc.js") == "v0.4.26+commit.4563c3fc"

    @pytest.mark.parametrize("build_id", [
        "v0.8.4+commit.c7e474f2",
        "solc-v0.8.4.json",
        "soljson-v0.8.4",
        "v0.8.4.js",
        "soljson-.js",
    ])
    def test_partially_wrapped_ids_are_returned_unchanged(self, build_id):
        assert strip_build_wrapper(build_id) == build_id

    def test_inner_occurrences_are_kept(self):
        assert strip_build_wrapper("soljson-soljson-x.js.js") == "soljson-x.js"
