from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Session user as exposed by /api/auth/me/."""

    displayName = serializers.CharField(source='get_display_name', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'username', 'displayName', 'role']
        read_only_fields = fields


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    username = serializers.CharField(
        required=True,
        trim_whitespace=True,
        error_messages={
            'required': 'Username and password required.',
            'blank': 'Username and password required.',
        },
    )
    password = serializers.CharField(
        required=True,
        trim_whitespace=False,
        style={'input_type': 'password'},
        error_messages={
            'required': 'Username and password required.',
            'blank': 'Username and password required.',
        },
    )
