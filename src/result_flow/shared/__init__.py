"""Shared module.

Cross-cutting concerns: configuration and logging.
"""
from result_flow.shared.config import (
    AddonOptions,
    FeatureOptions,
    PatternMatchingOptions,
    Settings,
    get_settings,
)
from result_flow.shared.logging import configure_logging, get_logger

__all__ = [
    "AddonOptions",
    "FeatureOptions",
    "PatternMatchingOptions",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
]
