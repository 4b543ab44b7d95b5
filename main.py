#!/usr/bin/env python3
"""
Basic Functions - Main Entry Point

Runs the three demo operations in order and prints their results.
"""

import sys

from basic_functions import add, greet, factorial
from logger import app_logger

def main() -> int:
    """Main entry point."""
    app_logger.logger.info("Running basic functions demo")
    
    try:
        result = add(5, 3)
        print(f"5 + 3 = {result}")
        
        greet("Alice")
        
        fact = factorial(5)
        print(f"5! = {fact}")
        
    except (OverflowError, ValueError) as e:
        app_logger.logger.error(f"Demo failed: {e}")
        return 1
    
    app_logger.logger.info("Basic functions demo completed")
    return 0

if __name__ == '__main__':
    exit_code = main()
    sys.exit(exit_code)
