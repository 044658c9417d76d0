"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers, configures logging and auto-marks tests by
directory.

================================================================================
"""

import pytest

from testsuites.ui_testing.framework.config_loader import apply_selection_defaults
from testsuites.ui_testing.framework.log_config import init_logger


def pytest_configure(config):
    """Configure pytest with project-wide custom markers and logging."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "unit: Offline tests of the automation framework itself"
    )
    config.addinivalue_line(
        "markers", "ui: Live browser tests against the storefront"
    )
    config.addinivalue_line(
        "markers", "security: Password masking and lockout scenarios"
    )
    config.addinivalue_line(
        "markers", "validation: Form validation scenarios"
    )
    config.addinivalue_line(
        "markers", "navigation: Screen-to-screen navigation scenarios"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "auth: Tests related to authentication"
    )
    config.addinivalue_line(
        "markers", "login: Tests related to the login screen"
    )
    config.addinivalue_line(
        "markers", "register: Tests related to account registration"
    )

    # Before init_logger(): it builds the ConfigLoader singleton
    apply_selection_defaults()
    init_logger()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config, items):
    """
    Modify collected test items.

    Tests under `ui_testing` drive a real browser and are marked `ui`;
    tests under `unit` are marked `unit`.
    """
    for item in items:
        parts = item.path.parts
        if "ui_testing" in parts:
            item.add_marker(pytest.mark.ui)
        if "unit" in parts:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Storefront Authentication UI Automation",
        "=" * 60,
        "",
    ]
