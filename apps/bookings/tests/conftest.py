import pytest
from datetime import date
from decimal import Decimal
from rest_framework.test import APIClient
from apps.accounts.models import User
from apps.bookings.models import BookingStatus, Customer, Installment
from apps.bookings.services import plot_status_for
from apps.plots.models import Plot


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a back-office user."""
    return User.objects.create_user(
        username='salesdesk',
        password='TestPass123!',
        display_name='Sales Desk',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an API client with an active session."""
    api_client.force_login(user)
    return api_client


@pytest.fixture
def plot(db):
    """Create the available plot A1."""
    return Plot.objects.create(
        plot_key='A1',
        title='Plot A-1',
        plot_num=1,
        price=Decimal('1800000.00'),
        sqft=Decimal('1200.00'),
        facing='East',
    )


@pytest.fixture
def other_plot(db):
    """Create the available plot A2."""
    return Plot.objects.create(
        plot_key='A2',
        title='Plot A-2',
        plot_num=2,
    )


@pytest.fixture
def make_customer(db):
    """Factory booking a plot directly in the database."""
    def _make(plot, status=BookingStatus.RESERVED, **kwargs):
        kwargs.setdefault('customer_name', 'Kavitha S')
        customer = Customer.objects.create(plot=plot, status=status, **kwargs)
        plot.status = plot_status_for(status)
        plot.save()
        return customer
    return _make


@pytest.fixture
def customer(plot, make_customer):
    """Create a reserved customer on A1 with two installments."""
    customer = make_customer(
        plot,
        customer_phone='9876543210',
        mediator_name='Ravi Kumar',
        commission=Decimal('25000.00'),
        booking_amount=Decimal('100000.00'),
        closure_date=date(2024, 6, 30),
    )
    Installment.objects.create(
        customer=customer,
        amount=Decimal('50000.00'),
        date_received=date(2024, 3, 1),
    )
    Installment.objects.create(
        customer=customer,
        amount=Decimal('5000.00'),
        date_received=date(2024, 1, 1),
        follow_up_date=date(2024, 2, 1),
    )
    return customer
