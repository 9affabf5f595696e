import logging

from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from django.contrib.auth import login as session_login, logout as session_logout
from django.db import DatabaseError
from drf_spectacular.utils import extend_schema

from .serializers import UserLoginSerializer, UserSerializer
from .services import authenticate_user, InvalidCredentialsError, InactiveAccountError

logger = logging.getLogger(__name__)


# Response serializers for API documentation
class LoginResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    displayName = serializers.CharField()
    role = serializers.CharField()


class SessionStateSerializer(serializers.Serializer):
    loggedIn = serializers.BooleanField()
    user = UserSerializer(required=False)


class SuccessResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: LoginResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate with username and password and start a session.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with username and password."""
    serializer = UserLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = authenticate_user(
            username=serializer.validated_data['username'],
            password=serializer.validated_data['password'],
        )
    except InvalidCredentialsError as e:
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
    except DatabaseError:
        logger.exception("Login failed")
        return Response(
            {'error': 'Server error during login.'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    session_login(request, user)

    return Response({
        'success': True,
        'displayName': user.get_display_name(),
        'role': user.role,
    })


@extend_schema(
    request=None,
    responses={200: SuccessResponseSerializer},
    description="End the current session.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def logout(request):
    """Logout and flush the session."""
    session_logout(request)
    return Response({'success': True})


@extend_schema(
    responses={200: SessionStateSerializer},
    description="Report whether the caller has an active session.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def me(request):
    """Get the session user, if any."""
    if request.user and request.user.is_authenticated:
        return Response({
            'loggedIn': True,
            'user': UserSerializer(request.user).data,
        })
    return Response({'loggedIn': False})
