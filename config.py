import os

class Config:
    """Configuration class for the basic functions demo."""
    
    # Logging Configuration
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'WARNING')
    
    # Integer Configuration
    INT_BITS: int = int(os.getenv('INT_BITS', '0'))  # 0 = unbounded, e.g. 32 for C int limits

# Global config instance
config = Config()
