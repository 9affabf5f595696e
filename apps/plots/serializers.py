from rest_framework import serializers
from .models import Plot, PlotStatus


# =============================================================================
# Input Serializers
# =============================================================================

class PlotUpdateSerializer(serializers.Serializer):
    """
    Validate a partial plot update.

    Every field is optional; null means "keep the stored value".
    """

    price = serializers.DecimalField(max_digits=14, decimal_places=2, required=False, allow_null=True)
    length = serializers.DecimalField(max_digits=10, decimal_places=2, required=False, allow_null=True)
    width = serializers.DecimalField(max_digits=10, decimal_places=2, required=False, allow_null=True)
    sqft = serializers.DecimalField(max_digits=12, decimal_places=2, required=False, allow_null=True)
    cent = serializers.DecimalField(max_digits=10, decimal_places=3, required=False, allow_null=True)
    facing = serializers.CharField(max_length=30, required=False, allow_null=True, allow_blank=True)


class PlotStatusSerializer(serializers.Serializer):
    """Validate a direct plot status override."""

    status = serializers.ChoiceField(
        choices=PlotStatus.choices,
        error_messages={
            'required': 'Invalid status value.',
            'invalid_choice': 'Invalid status value.',
        },
    )


# =============================================================================
# Output Serializers
# =============================================================================

class PlotSerializer(serializers.ModelSerializer):
    """One entry of the plot map returned by GET /api/plots/."""

    plotNum = serializers.IntegerField(source='plot_num', read_only=True)
    stampNum = serializers.CharField(source='stamp_num', read_only=True)
    price = serializers.DecimalField(max_digits=14, decimal_places=2, coerce_to_string=False, read_only=True)
    length = serializers.DecimalField(source='length_ft', max_digits=10, decimal_places=2, coerce_to_string=False, read_only=True)
    width = serializers.DecimalField(source='width_ft', max_digits=10, decimal_places=2, coerce_to_string=False, read_only=True)
    sqft = serializers.DecimalField(max_digits=12, decimal_places=2, coerce_to_string=False, read_only=True)
    cent = serializers.DecimalField(max_digits=10, decimal_places=3, coerce_to_string=False, read_only=True)
    db_id = serializers.IntegerField(source='id', read_only=True)

    class Meta:
        model = Plot
        fields = [
            'title',
            'plotNum',
            'stampNum',
            'price',
            'length',
            'width',
            'sqft',
            'cent',
            'facing',
            'status',
            'db_id',
        ]
        read_only_fields = fields
