#!/usr/bin/env python3
"""
client for the published list of solc releases
(solc-bin list.json: short version -> soljson build file)
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import requests

from solc_inference.config import Config
from solc_inference.errors import ResolutionError
from solc_inference.utils.logger import setup_logger


@dataclass(frozen=True)
class CompilersList:
    """Non-exhaustive view of the official compiler list"""
    
    releases: Dict[str, str] = field(default_factory=dict)
    latest_release: str = ""
    
    @classmethod
    def from_json(cls, data: Any) -> 'CompilersList':
        """
        build from the decoded list.json document
        
        raises:
            ValueError: document doesn't have the expected shape
        """
        if not isinstance(data, dict):
            raise ValueError("compilers list is not a JSON object")
        
        releases = data.get('releases')
        latest_release = data.get('latestRelease')
        
        if not isinstance(releases, dict):
            raise ValueError("compilers list has no 'releases' mapping")
        if not isinstance(latest_release, str):
            raise ValueError("compilers list has no 'latestRelease' string")
        for version, build_id in releases.items():
            if not isinstance(version, str) or not isinstance(build_id, str):
                raise ValueError(f"compilers list has a malformed release entry: {version!r}: {build_id!r}")
        
        return cls(releases=dict(releases), latest_release=latest_release)


class SolcReleasesClient:
    """client for fetching the solc release catalog"""
    
    def __init__(self, url: Optional[str] = None, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        """
        args:
            url: list.json location (defaults to Config.COMPILERS_LIST_URL)
            timeout: request timeout in seconds, None to wait indefinitely
            session: requests session to reuse (a plain requests.get otherwise)
        """
        self.url = url or Config.COMPILERS_LIST_URL
        self.timeout = timeout if timeout is not None else Config.REQUEST_TIMEOUT
        self.session = session
        self.logger = setup_logger('solc_inference.catalog')
    
    def get_versions(self) -> CompilersList:
        """
        fetch the current list of solc releases, one request per call
        
        raises:
            ResolutionError: bad status, transport failure or malformed document
        """
        http = self.session or requests
        self.logger.debug(f"fetching compilers list from {self.url}")
        
        try:
            response = http.get(self.url, timeout=self.timeout)
            
            if not response.ok:
                raise ResolutionError(
                    f"HTTP response is not ok. Status code: {response.status_code} "
                    f"Response text: {response.text}"
                )
            
            return CompilersList.from_json(response.json())
        except (requests.exceptions.RequestException, ValueError, ResolutionError) as e:
            reason = e.message if isinstance(e, ResolutionError) else e
            self.logger.warning(f"failed to fetch compilers list: {reason}")
            raise ResolutionError(
                f"Failed to obtain list of solc versions. Reason: {reason}",
                cause=e,
            ) from e


def get_versions(timeout: Optional[float] = None) -> CompilersList:
    """fetch the solc release catalog from the default location"""
    return SolcReleasesClient(timeout=timeout).get_versions()
