import logging

from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from django.db import DatabaseError
from drf_spectacular.utils import extend_schema

from .serializers import PlotSerializer, PlotUpdateSerializer, PlotStatusSerializer
from .services import list_plots, update_plot_details, set_plot_status

logger = logging.getLogger(__name__)


class SuccessResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(
    responses={200: PlotSerializer(many=True)},
    description="Get every plot as a mapping keyed by plot key.",
    tags=['plots'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def plot_map(request):
    """Load all plots keyed by plot_key."""
    try:
        plots = list(list_plots())
    except DatabaseError:
        logger.exception("GET /plots failed")
        return Response(
            {'error': 'Failed to fetch plots.'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return Response({plot.plot_key: PlotSerializer(plot).data for plot in plots})


@extend_schema(
    request=PlotUpdateSerializer,
    responses={
        200: SuccessResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Update price, dimensions or facing of a plot. Null fields are left unchanged.",
    tags=['plots'],
)
@api_view(['PUT'])
@permission_classes([IsAuthenticated])
def update_plot(request, plot_key):
    """Update plot details."""
    serializer = PlotUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        update_plot_details(plot_key=plot_key, **serializer.validated_data)
    except DatabaseError:
        logger.exception("PUT /plots/%s failed", plot_key)
        return Response(
            {'error': 'Failed to update plot.'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return Response({'success': True})


@extend_schema(
    request=PlotStatusSerializer,
    responses={
        200: SuccessResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Override a plot's status.",
    tags=['plots'],
)
@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def update_plot_status(request, plot_key):
    """Update status only."""
    serializer = PlotStatusSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        set_plot_status(plot_key=plot_key, status=serializer.validated_data['status'])
    except DatabaseError:
        logger.exception("PATCH /plots/%s/status failed", plot_key)
        return Response(
            {'error': 'Failed to update plot status.'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return Response({'success': True})
