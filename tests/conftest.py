"""
Shared fixtures for permissions engine tests.
"""

import pytest

from permissions.models import Actor, Role


@pytest.fixture
def admin_user():
    """Create admin actor."""
    return Actor(id="admin-123", email="admin@test.com", role=Role.ADMIN)


@pytest.fixture
def seller_user():
    """Create seller actor with a shop."""
    return Actor(id="seller-456", email="seller@test.com", role=Role.SELLER, shop_id="shop-789")


@pytest.fixture
def seller_without_shop():
    """Create seller actor that has not opened a shop yet."""
    return Actor(id="seller-456", email="seller@test.com", role=Role.SELLER)


@pytest.fixture
def regular_user():
    """Create regular user actor."""
    return Actor(id="user-101", email="user@test.com", role=Role.USER)


@pytest.fixture
def guest_user():
    """Create guest actor."""
    return Actor(id="guest-999", email="guest@test.com", role=Role.GUEST)
