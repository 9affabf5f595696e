import logging

from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticatedOrReadOnly, IsAuthenticated
from rest_framework.response import Response
from django.db import DatabaseError
from drf_spectacular.utils import extend_schema

from .serializers import MediatorSerializer, MediatorCreateSerializer
from .services import list_mediators, save_mediator, delete_mediator

logger = logging.getLogger(__name__)


class MediatorCreatedSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    id = serializers.IntegerField()


@extend_schema(
    methods=['GET'],
    responses={200: MediatorSerializer(many=True)},
    description="List mediators ordered by name.",
    tags=['mediators'],
)
@extend_schema(
    methods=['POST'],
    request=MediatorCreateSerializer,
    responses={201: MediatorCreatedSerializer},
    description="Add a mediator, or refresh phone/location of an existing one with the same name.",
    tags=['mediators'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticatedOrReadOnly])
def mediator_list(request):
    if request.method == 'GET':
        try:
            mediators = list(list_mediators())
        except DatabaseError:
            logger.exception("GET /mediators failed")
            return Response(
                {'error': 'Failed to fetch mediators.'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )
        return Response(MediatorSerializer(mediators, many=True).data)

    serializer = MediatorCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        mediator = save_mediator(**serializer.validated_data)
    except DatabaseError:
        logger.exception("POST /mediators failed")
        return Response(
            {'error': 'Failed to save mediator.'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return Response({'success': True, 'id': mediator.id}, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={200: None},
    description="Remove a mediator.",
    tags=['mediators'],
)
@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def mediator_detail(request, pk):
    try:
        delete_mediator(mediator_id=pk)
    except DatabaseError:
        logger.exception("DELETE /mediators/%s failed", pk)
        return Response(
            {'error': 'Failed to delete mediator.'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    return Response({'success': True})
