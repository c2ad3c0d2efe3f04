from pathlib import Path
from typing import Optional
import os

DEFAULT_COMPILERS_LIST_URL = 'https://raw.githubusercontent.com/ethereum/solc-bin/gh-pages/bin/list.json'


def _optional_float(name: str) -> Optional[float]:
    """Read a number of seconds; blank or non-numeric values mean no timeout"""
    value = os.environ.get(name, '').strip()
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _optional_path(name: str) -> Optional[Path]:
    value = os.environ.get(name, '').strip()
    return Path(value) if value else None


class Config:
    """Global configuration"""
    
    # Component tag carried by every error we raise
    PLUGIN_NAME: str = 'solc-inference'
    
    # Published list of solc releases (short version -> soljson build file)
    COMPILERS_LIST_URL: str = os.environ.get('SOLC_COMPILERS_LIST_URL') or DEFAULT_COMPILERS_LIST_URL
    
    # None means the transport waits indefinitely; callers choose the policy
    REQUEST_TIMEOUT: Optional[float] = _optional_float('SOLC_REQUEST_TIMEOUT')
    
    # Logging
    LOG_LEVEL: str = os.environ.get('SOLC_INFERENCE_LOG_LEVEL', 'INFO').upper()
    LOGS_DIR: Optional[Path] = _optional_path('SOLC_INFERENCE_LOGS_DIR')
    
    @classmethod
    def reload(cls):
        """Re-read environment overrides (after a .env file was loaded)"""
        cls.COMPILERS_LIST_URL = os.environ.get('SOLC_COMPILERS_LIST_URL') or DEFAULT_COMPILERS_LIST_URL
        cls.REQUEST_TIMEOUT = _optional_float('SOLC_REQUEST_TIMEOUT')
        cls.LOG_LEVEL = os.environ.get('SOLC_INFERENCE_LOG_LEVEL', 'INFO').upper()
        cls.LOGS_DIR = _optional_path('SOLC_INFERENCE_LOGS_DIR')
