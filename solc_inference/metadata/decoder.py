"""
CBOR metadata decoding for deployed EVM bytecode.

Since solc 0.4.7 the compiler appends a CBOR map to the runtime bytecode,
followed by its length as a 2-byte big-endian integer:

    <runtime code> <CBOR map> <len(CBOR map): uint16>

From 0.5.9 onwards the map carries a ``solc`` key holding the compiler version
as three raw bytes (major, minor, patch). Prerelease builds store the full
version as a text string instead.
"""

import io
from dataclasses import dataclass, field
from typing import Any, Dict, Union

import cbor2

from solc_inference.errors import (
    MetadataAbsentError,
    MetadataDecodeError,
    VersionNotFoundError,
)

METADATA_LENGTH_SIZE = 2

BytecodeBuffer = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class SolcMetadata:
    """Decoded metadata trailer"""
    
    fields: Dict[Any, Any] = field(default_factory=dict)
    # CBOR payload plus the two length bytes
    section_size: int = 0
    
    @property
    def solc(self) -> Any:
        return self.fields.get('solc')


def decode_solc_metadata(bytecode: BytecodeBuffer) -> SolcMetadata:
    """
    Locate and decode the CBOR metadata trailer.
    
    Raises:
        MetadataAbsentError: no decodable CBOR map at the end of the bytecode
    """
    code = bytes(bytecode)
    if len(code) < METADATA_LENGTH_SIZE:
        raise MetadataAbsentError("Could not decode metadata: bytecode is too short.")
    
    metadata_length = int.from_bytes(code[-METADATA_LENGTH_SIZE:], byteorder='big')
    metadata_start = len(code) - METADATA_LENGTH_SIZE - metadata_length
    if metadata_length == 0 or metadata_start < 0:
        raise MetadataAbsentError("Could not decode metadata: invalid metadata length.")
    
    payload = code[metadata_start:-METADATA_LENGTH_SIZE]
    try:
        # Only the first item matters, like a streaming decoder would do
        decoded = cbor2.CBORDecoder(io.BytesIO(payload)).decode()
    except (cbor2.CBORDecodeError, ValueError, EOFError) as e:
        raise MetadataAbsentError(f"Could not decode metadata: {e}", cause=e) from e
    
    if not isinstance(decoded, dict):
        raise MetadataAbsentError(
            f"Could not decode metadata: expected a CBOR map, got {type(decoded).__name__}."
        )
    
    return SolcMetadata(fields=decoded, section_size=metadata_length + METADATA_LENGTH_SIZE)


def read_solc_version(bytecode: BytecodeBuffer) -> str:
    """
    Extract the compiler version embedded in the bytecode metadata.
    
    Returns:
        version string, e.g. "0.8.4"
    
    Raises:
        MetadataAbsentError: metadata could not be decoded at all
        VersionNotFoundError: metadata has no solc field
        MetadataDecodeError: solc field has an unknown shape
    """
    solc = decode_solc_metadata(bytecode).solc
    
    if solc is None:
        raise VersionNotFoundError("Could not find solc version in metadata.")
    
    if isinstance(solc, bytes):
        if len(solc) != 3:
            raise MetadataDecodeError(
                f"Found solc version field with {len(solc)} bytes instead of 3!"
            )
        major, minor, patch = solc
        return f"{major}.{minor}.{patch}"
    
    if isinstance(solc, str) and solc:
        return solc
    
    raise MetadataDecodeError(f"Unexpected solc version field: {solc!r}")
