#!/usr/bin/env python3
"""Solidity compiler version inference CLI"""

import argparse
import sys
from pathlib import Path
from typing import List

from dotenv import load_dotenv

from solc_inference.config import Config
from solc_inference.core.catalog import SolcReleasesClient
from solc_inference.core.inference import infer_solc_version
from solc_inference.core.resolver import ReleaseResolver
from solc_inference.errors import SolcInferenceError

def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Infer and resolve the solc version behind deployed bytecode'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)
    
    infer = subparsers.add_parser('infer', help='Infer solc version range from bytecode')
    input_group = infer.add_mutually_exclusive_group(required=True)
    input_group.add_argument('--bytecode', '-b', help='Deployed bytecode as hex')
    input_group.add_argument('--file', '-f', help='File containing deployed bytecode as hex')
    infer.add_argument('--installed', action='store_true',
                       help='List installed compilers matching the range')
    
    resolve = subparsers.add_parser('resolve', help='Resolve a short version to its build version')
    resolve.add_argument('version', help='Short version, e.g. 0.8.4')
    resolve.add_argument('--timeout', type=float, default=Config.REQUEST_TIMEOUT)
    
    latest = subparsers.add_parser('latest', help='Show the latest solc release')
    latest.add_argument('--timeout', type=float, default=Config.REQUEST_TIMEOUT)
    
    return parser.parse_args(argv)

def read_bytecode(args) -> bytes:
    """Decode hex bytecode from CLI args"""
    text = args.bytecode if args.bytecode else Path(args.file).read_text(encoding='utf-8')
    text = text.strip()
    if text[:2].lower() == '0x':
        text = text[2:]
    return bytes.fromhex(text)

def installed_versions() -> List[str]:
    """Locally installed compilers (py-solc-x)"""
    import solcx
    return [str(v) for v in solcx.get_installed_solc_versions()]

def run_infer(args) -> int:
    try:
        bytecode = read_bytecode(args)
    except (OSError, ValueError) as e:
        print(f"error: could not read bytecode: {e}", file=sys.stderr)
        return 1
    
    inferred = infer_solc_version(bytecode)
    print(f"inferral type: {inferred.inferral_type.value}")
    print(f"range: {inferred.range}")
    
    if args.installed:
        matching = inferred.matching_versions(installed_versions())
        if matching:
            print(f"installed matches: {', '.join(matching)}")
        else:
            print("installed matches: none")
    return 0

def run_resolve(args) -> int:
    resolver = ReleaseResolver(SolcReleasesClient(timeout=args.timeout).get_versions)
    print(resolver.get_long_version(args.version))
    return 0

def run_latest(args) -> int:
    versions = SolcReleasesClient(timeout=args.timeout).get_versions()
    resolver = ReleaseResolver(lambda: versions)
    print(f"latest release: {versions.latest_release}")
    print(resolver.get_latest_long_version())
    return 0

COMMANDS = {
    'infer': run_infer,
    'resolve': run_resolve,
    'latest': run_latest,
}

def main(argv=None):
    load_dotenv()
    Config.reload()
    args = parse_args(argv)
    
    try:
        return COMMANDS[args.command](args)
    except SolcInferenceError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

if __name__ == '__main__':
    sys.exit(main())
