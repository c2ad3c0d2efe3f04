from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from solc_inference.errors import MetadataAbsentError, VersionNotFoundError
from solc_inference.metadata.decoder import BytecodeBuffer, read_solc_version

VersionReader = Callable[[BytecodeBuffer], str]


class MetadataStatus(Enum):
    """Recognized outcomes of reading the solc version"""
    FOUND = "found"
    VERSION_NOT_FOUND = "version_not_found"
    METADATA_ABSENT = "metadata_absent"


@dataclass(frozen=True)
class MetadataLookup:
    status: MetadataStatus
    version: Optional[str] = None


def lookup_solc_version(bytecode: BytecodeBuffer,
                        reader: VersionReader = read_solc_version) -> MetadataLookup:
    """
    Run the reader and fold its two recognized failures into a tagged result.
    Anything else the reader raises is not caught here.
    """
    try:
        version = reader(bytecode)
    except VersionNotFoundError:
        return MetadataLookup(MetadataStatus.VERSION_NOT_FOUND)
    except MetadataAbsentError:
        return MetadataLookup(MetadataStatus.METADATA_ABSENT)
    return MetadataLookup(MetadataStatus.FOUND, version)
