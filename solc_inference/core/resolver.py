from typing import Callable, Optional

from solc_inference.core.catalog import CompilersList, SolcReleasesClient
from solc_inference.errors import ResolutionError
from solc_inference.utils.logger import setup_logger

SOLJSON_PREFIX = 'soljson-'
SOLJSON_SUFFIX = '.js'

VersionsFetcher = Callable[[], CompilersList]


def strip_build_wrapper(build_id: str) -> str:
    """soljson-v0.8.4+commit.c7e474f2.js -> v0.8.4+commit.c7e474f2"""
    # Only rewrite fully wrapped identifiers; anything else is returned as published
    if (build_id.startswith(SOLJSON_PREFIX) and build_id.endswith(SOLJSON_SUFFIX)
            and len(build_id) > len(SOLJSON_PREFIX) + len(SOLJSON_SUFFIX)):
        return build_id[len(SOLJSON_PREFIX):-len(SOLJSON_SUFFIX)]
    return build_id


class ReleaseResolver:
    """Maps short solc versions to their published build versions"""
    
    def __init__(self, fetch_versions: Optional[VersionsFetcher] = None):
        self.fetch_versions = fetch_versions or SolcReleasesClient().get_versions
        self.logger = setup_logger('solc_inference.resolver')
    
    def get_long_version(self, short_version: str) -> str:
        versions = self.fetch_versions()
        return self._resolve(versions, short_version)
    
    def get_latest_long_version(self) -> str:
        """Long version of the catalog's latest release"""
        versions = self.fetch_versions()
        return self._resolve(versions, versions.latest_release)
    
    def _resolve(self, versions: CompilersList, short_version: str) -> str:
        full_version = versions.releases.get(short_version)
        
        if not isinstance(full_version, str) or not full_version:
            raise ResolutionError(f"Given solc version doesn't exist: {short_version}")
        
        long_version = strip_build_wrapper(full_version)
        self.logger.debug(f"Resolved solc {short_version} to {long_version}")
        return long_version


def get_long_version(short_version: str,
                     fetch_versions: Optional[VersionsFetcher] = None) -> str:
    """Resolve e.g. "0.8.4" to "v0.8.4+commit.c7e474f2" using the live catalog"""
    return ReleaseResolver(fetch_versions).get_long_version(short_version)
