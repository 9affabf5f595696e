from rest_framework import serializers
from .models import Mediator


class MediatorSerializer(serializers.ModelSerializer):

    class Meta:
        model = Mediator
        fields = ['id', 'name', 'phone', 'location']
        read_only_fields = ['id']


class MediatorCreateSerializer(serializers.Serializer):
    """Validate input for adding a mediator."""

    name = serializers.CharField(
        max_length=150,
        error_messages={
            'required': 'Mediator name is required.',
            'blank': 'Mediator name is required.',
            'null': 'Mediator name is required.',
        },
    )
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True, allow_null=True)
    location = serializers.CharField(max_length=150, required=False, allow_blank=True, allow_null=True)
