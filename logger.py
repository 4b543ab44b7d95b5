import logging
import sys

from config import config

def resolve_level(level_name: str) -> int:
    """Map a level name like 'DEBUG' to its number, falling back to WARNING."""
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        return logging.WARNING
    return level

class AppLogger:
    """Sets up stderr logging for the demo; stdout is reserved for program output."""
    
    def __init__(self, level: str = None):
        logging.basicConfig(
            level=resolve_level(level or config.LOG_LEVEL),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            handlers=[
                logging.StreamHandler(sys.stderr)
            ]
        )
        self.logger = logging.getLogger('basic_functions')

# Global logger instance
app_logger = AppLogger()
