"""
LinkParser_Engine — Embedded-link extraction engine.

Submodules:
    - config: Paths and environment settings
    - processors.link_parser: scan -> resolve -> classify -> sort pipeline
    - connectors: Page fetching for callers that start from an address
"""
import logging

from LinkParser_Engine.config import settings

_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())
_logger.setLevel(settings.LOG_LEVEL.upper())
