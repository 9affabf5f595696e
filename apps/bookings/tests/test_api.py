import pytest
from decimal import Decimal
from unittest.mock import patch
from django.db import DatabaseError
from django.urls import reverse
from rest_framework.test import APIClient
from rest_framework import status
from apps.bookings.models import BookingStatus, Customer, Installment
from apps.plots.models import Plot, PlotStatus


def _payload(**overrides):
    data = {
        'plotKey': 'A1',
        'customerName': 'Kavitha S',
        'customerPhone': '9876543210',
        'mediator': 'Ravi Kumar',
        'commission': '25,000',
        'bookingAmount': '1,00,000',
        'closureDate': '2024-06-30',
        'status': 'reserved',
        'installments': [],
    }
    data.update(overrides)
    return data


# =============================================================================
# Full Lifecycle Scenario
# =============================================================================

@pytest.mark.django_db
class TestBookingLifecycle:
    """Walk plot A1 from available to the registered lock."""

    def test_reserve_register_then_locked(self, authenticated_client, plot):
        response = authenticated_client.post(
            reverse('customers:customer-list'),
            _payload(status='reserved'),
            format='json'
        )
        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['success'] is True
        assert response.data['plotStatus'] == 'reserved'
        customer_id = response.data['customerId']

        plot.refresh_from_db()
        assert plot.status == PlotStatus.RESERVED

        url = reverse('customers:customer-detail', args=[customer_id])
        response = authenticated_client.put(url, _payload(status='registered'), format='json')
        assert response.status_code == status.HTTP_200_OK
        assert response.data == {
            'success': True,
            'plotStatus': 'registration done',
            'newStatus': 'registered',
        }

        plot.refresh_from_db()
        assert plot.status == PlotStatus.REGISTRATION_DONE

        response = authenticated_client.put(url, _payload(status='booked'), format='json')
        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['error'] == 'This plot is Registered: status cannot be changed.'
        assert response.data['currentStatus'] == 'registered'
        assert response.data['locked'] is True

        plot.refresh_from_db()
        assert plot.status == PlotStatus.REGISTRATION_DONE


# =============================================================================
# Create Tests
# =============================================================================

@pytest.mark.django_db
class TestCreateCustomer:
    """Tests for POST /api/customers/"""

    def test_requires_session(self, api_client, plot):
        response = api_client.post(
            reverse('customers:customer-list'),
            _payload(),
            format='json'
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert 'error' in response.data
        assert not Customer.objects.exists()

    def test_grouped_amounts_accepted(self, authenticated_client, plot):
        response = authenticated_client.post(
            reverse('customers:customer-list'),
            _payload(),
            format='json'
        )

        customer = Customer.objects.get(id=response.data['customerId'])
        assert customer.commission == Decimal('25000.00')
        assert customer.booking_amount == Decimal('100000.00')

    def test_extra_decimals_rounded_to_paise(self, authenticated_client, plot):
        response = authenticated_client.post(
            reverse('customers:customer-list'),
            _payload(
                commission='1,234.567',
                installments=[{'amount': '2500.125', 'date': '2024-01-01'}],
            ),
            format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        customer = Customer.objects.get(id=response.data['customerId'])
        assert customer.commission == Decimal('1234.57')
        assert customer.installments.get().amount == Decimal('2500.13')

        response = authenticated_client.get(
            reverse('customers:customer-by-plot', args=['A1'])
        )
        assert response.data['commission'] == '1,234.57'
        assert response.data['installments'][0]['amount'] == '2,500.13'

    def test_installment_round_trip(self, authenticated_client, plot):
        authenticated_client.post(
            reverse('customers:customer-list'),
            _payload(installments=[{'amount': 5000, 'date': '2024-01-01'}]),
            format='json'
        )

        response = authenticated_client.get(
            reverse('customers:customer-by-plot', args=['A1'])
        )

        assert response.status_code == status.HTTP_200_OK
        installments = response.data['installments']
        assert len(installments) == 1
        assert installments[0]['amount'] == '5,000'
        assert installments[0]['date'] == '2024-01-01'
        assert installments[0]['followUp'] == ''

    def test_blank_installment_rows_ignored(self, authenticated_client, plot):
        authenticated_client.post(
            reverse('customers:customer-list'),
            _payload(installments=[
                {'amount': '', 'date': '', 'followUp': ''},
                {'amount': '2,500', 'date': '', 'followUp': '2024-02-01'},
            ]),
            format='json'
        )

        installment = Installment.objects.get()
        assert installment.amount == Decimal('2500.00')
        assert installment.date_received is None
        assert str(installment.follow_up_date) == '2024-02-01'

    def test_conflict_returns_existing_id(self, authenticated_client, plot, customer):
        response = authenticated_client.post(
            reverse('customers:customer-list'),
            _payload(customerName='Second Buyer', installments=[{'amount': 1000}]),
            format='json'
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.data['error'] == 'Plot already has a customer. Use edit instead.'
        assert response.data['existingId'] == customer.id
        assert Customer.objects.count() == 1
        assert Installment.objects.count() == 2

    def test_unknown_plot(self, authenticated_client, db):
        response = authenticated_client.post(
            reverse('customers:customer-list'),
            _payload(plotKey='Z99'),
            format='json'
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error'] == 'Plot not found.'

    @pytest.mark.parametrize('field,value,message', [
        ('customerName', '', 'Customer name is required.'),
        ('plotKey', '', 'Plot key is required.'),
        ('status', 'sold', 'Invalid status.'),
        ('status', 'available', 'Invalid status.'),
    ])
    def test_validation_errors(self, authenticated_client, plot, field, value, message):
        response = authenticated_client.post(
            reverse('customers:customer-list'),
            _payload(**{field: value}),
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == message
        assert field in response.data['fields']
        assert not Customer.objects.exists()

    def test_database_failure_is_generic(self, authenticated_client, plot):
        with patch(
            'apps.bookings.services.booking_management._set_plot_status',
            side_effect=DatabaseError('secret connection detail'),
        ):
            response = authenticated_client.post(
                reverse('customers:customer-list'),
                _payload(),
                format='json'
            )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {'error': 'Failed to save customer.'}
        assert not Customer.objects.exists()


# =============================================================================
# Read Tests
# =============================================================================

@pytest.mark.django_db
class TestReadCustomers:
    """Tests for GET /api/customers/ and /api/customers/by-plot/{key}/"""

    def test_list_requires_session(self, api_client, customer):
        response = api_client.get(reverse('customers:customer-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_list_shape(self, authenticated_client, customer):
        response = authenticated_client.get(reverse('customers:customer-list'))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        entry = response.data[0]
        assert entry['id'] == customer.id
        assert entry['customerName'] == 'Kavitha S'
        assert entry['customerPhone'] == '9876543210'
        assert entry['mediator'] == 'Ravi Kumar'
        assert entry['commission'] == '25,000'
        assert entry['bookingAmount'] == '1,00,000'
        assert entry['closureDate'] == '2024-06-30'
        assert entry['status'] == 'reserved'
        assert entry['plotLabel'] == 'Plot A-1'
        assert entry['plotKey'] == 'A1'
        assert [i['amount'] for i in entry['installments']] == ['5,000', '50,000']
        assert entry['installments'][0]['followUp'] == '2024-02-01'

    def test_by_plot_without_customer(self, authenticated_client, plot):
        response = authenticated_client.get(
            reverse('customers:customer-by-plot', args=['A1'])
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data is None

    def test_missing_values_render_blank(self, authenticated_client, plot, make_customer):
        make_customer(plot, status=BookingStatus.BOOKED)

        response = authenticated_client.get(
            reverse('customers:customer-by-plot', args=['A1'])
        )

        assert response.data['mediator'] == ''
        assert response.data['commission'] == '0'
        assert response.data['closureDate'] == ''
        assert response.data['installments'] == []


# =============================================================================
# Update Tests
# =============================================================================

@pytest.mark.django_db
class TestUpdateCustomer:
    """Tests for PUT /api/customers/{id}/"""

    def test_backward_move_forbidden(self, authenticated_client, plot, make_customer):
        customer = make_customer(plot, status=BookingStatus.BOOKED)
        url = reverse('customers:customer-detail', args=[customer.id])

        response = authenticated_client.put(url, _payload(status='reserved'), format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data['error'] == 'Cannot move status from "booked" back to "reserved".'
        assert response.data['currentStatus'] == 'booked'
        assert response.data['locked'] is False

    def test_plot_key_not_required(self, authenticated_client, customer):
        url = reverse('customers:customer-detail', args=[customer.id])
        payload = _payload(status='booked')
        del payload['plotKey']

        response = authenticated_client.put(url, payload, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['plotStatus'] == 'booked'

    def test_plot_key_cannot_move_booking(self, authenticated_client, customer, other_plot):
        url = reverse('customers:customer-detail', args=[customer.id])

        authenticated_client.put(url, _payload(plotKey='A2'), format='json')

        customer.refresh_from_db()
        other_plot.refresh_from_db()
        assert customer.plot.plot_key == 'A1'
        assert other_plot.status == PlotStatus.AVAILABLE

    def test_missing_customer(self, authenticated_client, db):
        url = reverse('customers:customer-detail', args=[9999])

        response = authenticated_client.put(url, _payload(), format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error'] == 'Customer not found.'

    def test_database_failure_is_generic(self, authenticated_client, customer):
        url = reverse('customers:customer-detail', args=[customer.id])
        with patch(
            'apps.bookings.services.booking_management._replace_installments',
            side_effect=DatabaseError('deadlock'),
        ):
            response = authenticated_client.put(url, _payload(status='booked'), format='json')

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {'error': 'Failed to update customer.'}
        customer.refresh_from_db()
        assert customer.status == BookingStatus.RESERVED


# =============================================================================
# Delete Tests
# =============================================================================

@pytest.mark.django_db
class TestDeleteCustomer:
    """Tests for DELETE /api/customers/{id}/"""

    def test_delete_releases_plot(self, authenticated_client, plot, customer):
        url = reverse('customers:customer-detail', args=[customer.id])

        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'success': True}
        plot.refresh_from_db()
        assert plot.status == PlotStatus.AVAILABLE
        assert not Installment.objects.exists()

    def test_delete_registered_allowed(self, authenticated_client, plot, make_customer):
        customer = make_customer(plot, status=BookingStatus.REGISTERED)
        url = reverse('customers:customer-detail', args=[customer.id])

        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert Plot.objects.get(id=plot.id).status == PlotStatus.AVAILABLE

    def test_missing_customer(self, authenticated_client, db):
        url = reverse('customers:customer-detail', args=[9999])

        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_requires_session(self, api_client, customer):
        url = reverse('customers:customer-detail', args=[customer.id])

        response = api_client.delete(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert Customer.objects.filter(id=customer.id).exists()


# =============================================================================
# Path Form Tests
# =============================================================================

@pytest.mark.django_db
class TestCustomerPaths:
    """Routes answer with and without a trailing slash, never redirecting."""

    @pytest.mark.parametrize('path', ['/api/customers', '/api/customers/'])
    def test_create_on_both_forms(self, authenticated_client, plot, path):
        response = authenticated_client.post(path, _payload(), format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert Customer.objects.filter(plot=plot).exists()

    @pytest.mark.parametrize('path', ['/api/customers', '/api/customers/'])
    def test_list_on_both_forms(self, authenticated_client, customer, path):
        response = authenticated_client.get(path)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1

    @pytest.mark.parametrize('path', ['/api/customers/by-plot/A1', '/api/customers/by-plot/A1/'])
    def test_by_plot_on_both_forms(self, authenticated_client, customer, path):
        response = authenticated_client.get(path)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == customer.id

    @pytest.mark.parametrize('suffix', ['', '/'])
    def test_update_on_both_forms(self, authenticated_client, customer, suffix):
        path = f'/api/customers/{customer.id}{suffix}'

        response = authenticated_client.put(path, _payload(status='booked'), format='json')

        assert response.status_code == status.HTTP_200_OK
        customer.refresh_from_db()
        assert customer.status == BookingStatus.BOOKED

    @pytest.mark.parametrize('suffix', ['', '/'])
    def test_delete_on_both_forms(self, authenticated_client, customer, suffix):
        response = authenticated_client.delete(f'/api/customers/{customer.id}{suffix}')

        assert response.status_code == status.HTTP_200_OK
        assert not Customer.objects.exists()

    def test_unauthenticated_without_slash_is_json(self, api_client, db):
        response = api_client.post('/api/customers', _payload(), format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert 'error' in response.data


# =============================================================================
# Browser Session Tests
# =============================================================================

@pytest.mark.django_db
class TestBrowserSession:
    """Login through the API, then write with the CSRF token from the cookie."""

    @pytest.fixture
    def browser_client(self, user):
        client = APIClient(enforce_csrf_checks=True)
        response = client.post(
            '/api/auth/login',
            {'username': 'salesdesk', 'password': 'TestPass123!'},
            format='json'
        )
        assert response.status_code == status.HTTP_200_OK
        return client

    def test_login_sets_csrf_cookie(self, browser_client):
        assert browser_client.cookies['csrftoken'].value

    def test_write_without_token_rejected(self, browser_client, plot):
        response = browser_client.post('/api/customers', _payload(), format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert 'CSRF' in response.data['error']
        assert 'locked' not in response.data
        assert not Customer.objects.exists()

    def test_write_with_token_accepted(self, browser_client, plot):
        token = browser_client.cookies['csrftoken'].value

        response = browser_client.post(
            '/api/customers',
            _payload(),
            format='json',
            HTTP_X_CSRFTOKEN=token,
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert Customer.objects.filter(plot=plot).exists()

    def test_reads_need_no_token(self, browser_client, plot):
        response = browser_client.get('/api/customers')

        assert response.status_code == status.HTTP_200_OK
