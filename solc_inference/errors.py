"""
Error taxonomy for version inference and release resolution.

Every error carries the component tag, a human-readable message and, for
wrapped failures, the original exception as ``cause``.
"""

from typing import Optional

from solc_inference.config import Config


class SolcInferenceError(Exception):
    """Base error, tagged with the component name"""
    
    def __init__(self, message: str, cause: Optional[BaseException] = None,
                 plugin_name: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.plugin_name = plugin_name or Config.PLUGIN_NAME
    
    def __str__(self):
        return f"{self.plugin_name}: {self.message}"


class ResolutionError(SolcInferenceError):
    """Release catalog could not be fetched, or a version is unknown"""


class MetadataError(SolcInferenceError):
    """Base for failures while reading bytecode metadata"""


class VersionNotFoundError(MetadataError):
    """Metadata decoded fine but carries no solc version"""


class MetadataAbsentError(MetadataError):
    """No metadata could be located or decoded"""


class MetadataDecodeError(MetadataError):
    """Metadata decoded into something we don't understand"""
