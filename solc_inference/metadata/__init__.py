from solc_inference.metadata.decoder import (
    METADATA_LENGTH_SIZE,
    BytecodeBuffer,
    SolcMetadata,
    decode_solc_metadata,
    read_solc_version,
)
from solc_inference.metadata.lookup import (
    MetadataLookup,
    MetadataStatus,
    VersionReader,
    lookup_solc_version,
)
