"""Pytest configuration and fixtures."""
from __future__ import annotations

import pytest

from result_flow.application.registry import ContractRegistry
from result_flow.shared.config import (
    AddonOptions,
    FeatureOptions,
    PatternMatchingOptions,
    Settings,
)


@pytest.fixture
def test_settings() -> Settings:
    """Default settings, independent of the cached instance."""
    return Settings()


@pytest.fixture
def continuation_settings() -> Settings:
    """Settings with the continuation addon enabled."""
    return Settings(addon=AddonOptions(continuation=True))


@pytest.fixture
def no_expectations_settings() -> Settings:
    """Settings with expectation enforcement switched off."""
    return Settings(feature=FeatureOptions(expectations=False))


@pytest.fixture
def nil_as_valid_settings() -> Settings:
    """Settings accepting None values without running predicates."""
    return Settings(pattern_matching=PatternMatchingOptions(nil_as_valid_value_checking=True))


@pytest.fixture
def registry() -> ContractRegistry:
    """Fresh contract registry per test."""
    return ContractRegistry()
