#!/usr/bin/env python3

"""
Test Configuration and Fixtures

Shared node chains and a clean process-wide config for every test.
"""

import pytest
from hypothesis import HealthCheck, settings

from injx.config import InjxConfig, reset_config, setup_logging
from injx.container import InjectableNode, SentinelNode

setup_logging("DEBUG")

# clean_config is autouse and function-scoped; property tests never touch the config
settings.register_profile("injx", suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile("injx")

@pytest.fixture(autouse=True)
def clean_config():
    """Every test starts and ends with the default process-wide config"""
    reset_config()
    yield
    reset_config()

@pytest.fixture
def root():
    return InjectableNode(name="root")

@pytest.fixture
def chain(root):
    """Root R, child C1 (parent R), grandchild C2 (parent C1)"""
    child = InjectableNode(name="child").link_from(root)
    grandchild = InjectableNode(name="grandchild").link_from(child)
    return root, child, grandchild

@pytest.fixture
def capped_chain():
    """Sentinel S, top T (parent S), child C (parent T)"""
    sentinel = SentinelNode(name="sentinel")
    top = InjectableNode(name="top").link_from(sentinel)
    child = InjectableNode(name="child").link_from(top)
    return sentinel, top, child

@pytest.fixture
def truthy_config():
    return InjxConfig.from_dict({"safe_check": "truthy"})

# Markers for different test types
def pytest_configure(config):
    """Configure pytest markers"""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "property: Property-based tests")

def pytest_collection_modifyitems(config, items):
    """Add markers based on test file location"""
    for item in items:
        path = str(item.fspath)
        if "unit" in path:
            item.add_marker(pytest.mark.unit)
        elif "integration" in path:
            item.add_marker(pytest.mark.integration)
        elif "property_based" in path:
            item.add_marker(pytest.mark.property)
