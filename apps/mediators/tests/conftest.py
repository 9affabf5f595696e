import pytest
from rest_framework.test import APIClient
from apps.accounts.models import User
from apps.mediators.models import Mediator


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def authenticated_client(api_client, db):
    """Return an API client with an active session."""
    user = User.objects.create_user(
        username='mediatordesk',
        password='TestPass123!',
    )
    api_client.force_login(user)
    return api_client


@pytest.fixture
def mediator(db):
    """Create and return a mediator with full contact details."""
    return Mediator.objects.create(
        name='Ravi Kumar',
        phone='9840012345',
        location='Tambaram',
    )


@pytest.fixture
def mediators(db):
    """Create a few mediators out of alphabetical order."""
    return [
        Mediator.objects.create(name='Suresh Babu', phone='9962011122'),
        Mediator.objects.create(name='Anand Raj', location='Porur'),
        Mediator.objects.create(name='Lakshmi Narayanan'),
    ]
