"""
Utility functions for the consolehelpers package.
"""
from consolehelpers.utils.logging_config import get_logger, setup_logging
