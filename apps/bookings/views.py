import logging

from rest_framework import viewsets, status, serializers
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from django.db import DatabaseError
from drf_spectacular.utils import extend_schema

from .serializers import BookingInputSerializer, CustomerSerializer
from .services import (
    create_booking,
    update_booking,
    delete_booking,
    list_bookings,
    get_booking_for_plot,
    # Exceptions
    CustomerNotFoundError,
    PlotAlreadyBookedError,
    PlotNotFoundError,
    StatusLockedError,
)

logger = logging.getLogger(__name__)


# Response serializers for API documentation
class BookingCreatedSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    customerId = serializers.IntegerField()
    plotStatus = serializers.CharField()


class BookingUpdatedSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    plotStatus = serializers.CharField()
    newStatus = serializers.CharField()


class ConflictResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
    existingId = serializers.IntegerField()


class LockedResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
    currentStatus = serializers.CharField()
    locked = serializers.BooleanField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


def _failure(message):
    return Response({'error': message}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class CustomerViewSet(viewsets.ViewSet):
    """
    Customer bookings and their installments.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: All customers with installments
    by_plot: The customer booked on a plot, or null
    create: Book a plot for a new customer
    update: Edit a customer and move the plot along its lifecycle
    destroy: Delete a customer and release the plot
    """

    permission_classes = [IsAuthenticated]
    lookup_value_regex = r'\d+'

    @extend_schema(responses={200: CustomerSerializer(many=True)}, tags=['customers'])
    def list(self, request):
        try:
            customers = list(list_bookings())
        except DatabaseError:
            logger.exception("GET /customers failed")
            return _failure('Failed to fetch customers.')
        return Response(CustomerSerializer(customers, many=True).data)

    @extend_schema(responses={200: CustomerSerializer}, tags=['customers'])
    @action(detail=False, methods=['get'], url_path=r'by-plot/(?P<plot_key>[^/]+)')
    def by_plot(self, request, plot_key=None):
        """Load the customer when a plot is clicked."""
        try:
            customer = get_booking_for_plot(plot_key=plot_key)
        except DatabaseError:
            logger.exception("GET /customers/by-plot/%s failed", plot_key)
            return _failure('Failed to fetch customer for plot.')

        if customer is None:
            return Response(None)
        return Response(CustomerSerializer(customer).data)

    @extend_schema(
        request=BookingInputSerializer,
        responses={
            201: BookingCreatedSerializer,
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
            409: ConflictResponseSerializer,
        },
        tags=['customers'],
    )
    def create(self, request):
        serializer = BookingInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            customer, plot_status = create_booking(**serializer.validated_data)
        except PlotAlreadyBookedError as e:
            return Response(
                {'error': str(e), 'existingId': e.existing_id},
                status=status.HTTP_409_CONFLICT
            )
        except PlotNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except DatabaseError:
            logger.exception("POST /customers failed")
            return _failure('Failed to save customer.')

        return Response({
            'success': True,
            'customerId': customer.id,
            'plotStatus': plot_status,
        }, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=BookingInputSerializer,
        responses={
            200: BookingUpdatedSerializer,
            400: ErrorResponseSerializer,
            403: LockedResponseSerializer,
            404: ErrorResponseSerializer,
        },
        tags=['customers'],
    )
    def update(self, request, pk=None):
        serializer = BookingInputSerializer(data=request.data, require_plot_key=False)
        serializer.is_valid(raise_exception=True)

        try:
            customer, plot_status = update_booking(
                customer_id=pk,
                **serializer.validated_data
            )
        except CustomerNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except StatusLockedError as e:
            return Response({
                'error': str(e),
                'currentStatus': e.current_status,
                'locked': e.locked,
            }, status=status.HTTP_403_FORBIDDEN)
        except DatabaseError:
            logger.exception("PUT /customers/%s failed", pk)
            return _failure('Failed to update customer.')

        return Response({
            'success': True,
            'plotStatus': plot_status,
            'newStatus': customer.status,
        })

    @extend_schema(
        responses={200: None, 404: ErrorResponseSerializer},
        tags=['customers'],
    )
    def destroy(self, request, pk=None):
        try:
            delete_booking(customer_id=pk)
        except CustomerNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except DatabaseError:
            logger.exception("DELETE /customers/%s failed", pk)
            return _failure('Failed to delete customer.')

        return Response({'success': True})
