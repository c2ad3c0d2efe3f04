"""Shared fixtures for the solc_inference test suite."""

from __future__ import annotations

import cbor2
import pytest

RUNTIME_CODE = bytes.fromhex("6080604052348015600f57600080fd5b50")


def with_metadata(payload: bytes, code: bytes = RUNTIME_CODE) -> bytes:
    """Append a metadata payload and its 2-byte length, the way solc does."""
    return code + payload + len(payload).to_bytes(2, byteorder="big")


@pytest.fixture
def bytecode_v0_8_4() -> bytes:
    return with_metadata(cbor2.dumps({"ipfs": b"\x12\x20" + b"\xab" * 32, "solc": bytes([0, 8, 4])}))


@pytest.fixture
def bytecode_without_version() -> bytes:
    # 0.4.7 - 0.5.8 only emitted the swarm hash
    return with_metadata(cbor2.dumps({"bzzr0": b"\xcd" * 32}))


@pytest.fixture
def bytecode_without_metadata() -> bytes:
    return RUNTIME_CODE


@pytest.fixture
def compilers_list_json() -> dict:
    return {
        "builds": [],
        "releases": {
            "0.8.4": "soljson-v0.8.4+commit.c7e474f2.js",
            "0.5.8": "soljson-v0.5.8+commit.23d335f2.js",
            "0.4.26": "soljson-v0.4.26+commit.4563c3fc.js",
        },
        "latestRelease": "0.8.4",
    }
