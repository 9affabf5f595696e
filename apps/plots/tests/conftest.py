import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from apps.accounts.models import User
from apps.plots.models import Plot, PlotStatus


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def plot_user(db):
    """Create and return a back-office user."""
    return User.objects.create_user(
        username='plotdesk',
        password='TestPass123!',
        display_name='Plot Desk',
    )


@pytest.fixture
def plot_client(api_client, plot_user):
    """Return API client with an active session."""
    api_client.force_login(plot_user)
    return api_client


@pytest.fixture
def plot_a1(db):
    """Create an available corner plot."""
    return Plot.objects.create(
        plot_key='A1',
        title='Plot A-1',
        plot_num=1,
        stamp_num='S-101',
        price=Decimal('1800000.00'),
        length_ft=Decimal('40.00'),
        width_ft=Decimal('30.00'),
        sqft=Decimal('1200.00'),
        cent=Decimal('2.755'),
        facing='East',
    )


@pytest.fixture
def plot_a2(db):
    """Create a reserved plot."""
    return Plot.objects.create(
        plot_key='A2',
        title='Plot A-2',
        plot_num=2,
        price=Decimal('1500000.00'),
        facing='West',
        status=PlotStatus.RESERVED,
    )
