"""Pytest configuration for test logging."""
import logging

from config.config import LOG_CONFIG

logging.basicConfig(level=logging.DEBUG, format=LOG_CONFIG["format"])
