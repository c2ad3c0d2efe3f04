import logging
from pathlib import Path
from datetime import datetime
from typing import Optional

from solc_inference.config import Config

def setup_logger(name: str, log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Configure logging from the current Config.
    
    Safe to call repeatedly: the level is re-applied every time, while the
    console and file handlers are attached at most once per name.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, Config.LOG_LEVEL, logging.INFO))
    
    # FileHandler subclasses StreamHandler, so match the exact type
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        console = logging.StreamHandler()
        console.setLevel(logging.INFO)
        console.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console)
    
    # File
    log_dir = log_dir or Config.LOGS_DIR
    if log_dir is not None and not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        file_handler = logging.FileHandler(log_dir / f'{name}_{timestamp}.log')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        logger.addHandler(file_handler)
    
    return logger
