from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from packaging.version import InvalidVersion, Version

from solc_inference.metadata import (
    BytecodeBuffer,
    MetadataStatus,
    VersionReader,
    lookup_solc_version,
    read_solc_version,
)
from solc_inference.utils.logger import setup_logger

# Solc 0.4.7 was the first release to append metadata to the bytecode.
# Solc 0.5.9 was the first release to put its own version in that metadata.
METADATA_PRESENT_SOLC_NOT_FOUND_VERSION_RANGE = "0.4.7 - 0.5.8"
METADATA_ABSENT_VERSION_RANGE = "<0.4.7"


class InferralType(Enum):
    """How exact an inferred version range is"""
    EXACT = "exact"
    METADATA_PRESENT_VERSION_ABSENT = "metadata_present_version_absent"
    METADATA_ABSENT = "metadata_absent"


def _parse_version(version: str) -> Optional[Version]:
    """Parse the release part of a solc version ("v0.8.4+commit.c7e474f2" -> 0.8.4)"""
    release = version.strip().lstrip('v').split('+')[0].split('-')[0]
    try:
        return Version(release)
    except InvalidVersion:
        return None


@dataclass(frozen=True)
class SolcVersionRange:
    """Best-effort compiler version guess for a piece of bytecode"""
    
    inferral_type: InferralType
    range: str
    
    def satisfied_by(self, version: str) -> bool:
        """Check whether a concrete compiler version falls inside the range"""
        candidate = _parse_version(version)
        if candidate is None:
            return False
        
        if self.inferral_type == InferralType.EXACT:
            return candidate == _parse_version(self.range)
        
        if self.inferral_type == InferralType.METADATA_PRESENT_VERSION_ABSENT:
            lower, upper = (part.strip() for part in self.range.split(' - ', 1))
            return Version(lower) <= candidate <= Version(upper)
        
        # METADATA_ABSENT: "<X"
        return candidate < Version(self.range.lstrip('<').strip())
    
    def matching_versions(self, candidates: Iterable[str]) -> List[str]:
        """Filter candidate versions down to those inside the range"""
        return [str(v) for v in candidates if self.satisfied_by(str(v))]
    
    def to_dict(self) -> dict:
        return {
            'inferral_type': self.inferral_type.value,
            'range': self.range,
        }


def infer_solc_version(bytecode: BytecodeBuffer,
                       reader: VersionReader = read_solc_version) -> SolcVersionRange:
    """
    Infer the solc version range that could have produced the bytecode.
    
    Metadata without a version field only exists for 0.4.7 - 0.5.8, and no
    metadata at all means the bytecode predates 0.4.7. Any decoder failure
    other than those two is re-raised unchanged.
    """
    logger = setup_logger('solc_inference.inference')
    lookup = lookup_solc_version(bytecode, reader)
    
    if lookup.status == MetadataStatus.FOUND:
        logger.debug(f"Found solc {lookup.version} in bytecode metadata")
        return SolcVersionRange(InferralType.EXACT, lookup.version)
    
    if lookup.status == MetadataStatus.VERSION_NOT_FOUND:
        logger.debug("Metadata present without solc version")
        return SolcVersionRange(
            InferralType.METADATA_PRESENT_VERSION_ABSENT,
            METADATA_PRESENT_SOLC_NOT_FOUND_VERSION_RANGE,
        )
    
    if lookup.status == MetadataStatus.METADATA_ABSENT:
        logger.debug("No decodable metadata in bytecode")
        return SolcVersionRange(InferralType.METADATA_ABSENT, METADATA_ABSENT_VERSION_RANGE)
    
    raise AssertionError(f"Unhandled metadata status: {lookup.status}")
