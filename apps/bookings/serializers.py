from decimal import InvalidOperation

from rest_framework import serializers

from .models import BookingStatus, Customer, Installment
from .utils import format_inr, parse_amount, round_amount


# =============================================================================
# Fields
# =============================================================================

class AmountField(serializers.DecimalField):
    """
    Money input accepting numbers or grouped strings like "5,00,000".

    Values are rounded half-up to paise before the precision check, so
    "1,234.567" is stored as 1234.57.
    """

    def __init__(self, **kwargs):
        kwargs.setdefault('max_digits', 14)
        kwargs.setdefault('decimal_places', 2)
        kwargs.setdefault('required', False)
        kwargs.setdefault('allow_null', True)
        super().__init__(**kwargs)

    def validate_empty_values(self, data):
        if isinstance(data, str) and not data.strip():
            data = None
        return super().validate_empty_values(data)

    def to_internal_value(self, data):
        try:
            data = round_amount(parse_amount(data))
        except InvalidOperation:
            self.fail('invalid')
        return super().to_internal_value(data)


class OptionalDateField(serializers.DateField):
    """Date input where an empty string means no date."""

    def __init__(self, **kwargs):
        kwargs.setdefault('required', False)
        kwargs.setdefault('allow_null', True)
        super().__init__(**kwargs)

    def validate_empty_values(self, data):
        if data == '':
            data = None
        return super().validate_empty_values(data)


class FormattedAmountField(serializers.Field):
    """Money output with Indian digit grouping."""

    def __init__(self, **kwargs):
        kwargs['read_only'] = True
        super().__init__(**kwargs)

    def to_representation(self, value):
        return format_inr(value)


def _iso_or_blank(value):
    return value.isoformat() if value else ''


# =============================================================================
# Input Serializers
# =============================================================================

class InstallmentInputSerializer(serializers.Serializer):
    """One installment entry of a booking form."""

    amount = AmountField()
    date = OptionalDateField()
    followUp = OptionalDateField(source='follow_up')


class BookingInputSerializer(serializers.Serializer):
    """
    Validate a customer booking submitted for create or update.

    Fields:
        customerName (str): Buyer's name, required
        plotKey (str): Plot being booked, required on create only
        customerPhone (str): Buyer's phone
        mediator (str): Referring mediator's name
        commission, bookingAmount: Money amounts
        closureDate (date): Expected closure date
        status (str): reserved, booked or registered
        installments (list): Installment entries
    """

    customerName = serializers.CharField(
        source='customer_name',
        max_length=150,
        error_messages={
            'required': 'Customer name is required.',
            'blank': 'Customer name is required.',
            'null': 'Customer name is required.',
        },
    )
    plotKey = serializers.CharField(
        source='plot_key',
        max_length=50,
        error_messages={
            'required': 'Plot key is required.',
            'blank': 'Plot key is required.',
            'null': 'Plot key is required.',
        },
    )
    customerPhone = serializers.CharField(
        source='customer_phone', max_length=20,
        required=False, allow_blank=True, allow_null=True,
    )
    mediator = serializers.CharField(
        max_length=150, required=False, allow_blank=True, allow_null=True,
    )
    commission = AmountField()
    bookingAmount = AmountField(source='booking_amount')
    closureDate = OptionalDateField(source='closure_date')
    status = serializers.ChoiceField(
        choices=BookingStatus.choices,
        error_messages={
            'required': 'Invalid status.',
            'null': 'Invalid status.',
            'invalid_choice': 'Invalid status.',
        },
    )
    installments = InstallmentInputSerializer(many=True, required=False)

    def __init__(self, *args, require_plot_key=True, **kwargs):
        super().__init__(*args, **kwargs)
        if not require_plot_key:
            self.fields.pop('plotKey')


# =============================================================================
# Output Serializers
# =============================================================================

class InstallmentSerializer(serializers.ModelSerializer):

    amount = FormattedAmountField()
    date = serializers.SerializerMethodField()
    followUp = serializers.SerializerMethodField()

    class Meta:
        model = Installment
        fields = ['id', 'amount', 'date', 'followUp']
        read_only_fields = fields

    def get_date(self, obj):
        return _iso_or_blank(obj.date_received)

    def get_followUp(self, obj):
        return _iso_or_blank(obj.follow_up_date)


class CustomerSerializer(serializers.ModelSerializer):
    """Customer booking as shown in the plot side panel and customer list."""

    customerName = serializers.CharField(source='customer_name', read_only=True)
    customerPhone = serializers.CharField(source='customer_phone', read_only=True)
    mediator = serializers.SerializerMethodField()
    commission = FormattedAmountField()
    bookingAmount = FormattedAmountField(source='booking_amount')
    closureDate = serializers.SerializerMethodField()
    plotLabel = serializers.CharField(source='plot.title', read_only=True)
    plotKey = serializers.CharField(source='plot.plot_key', read_only=True)
    installments = InstallmentSerializer(many=True, read_only=True)

    class Meta:
        model = Customer
        fields = [
            'id',
            'customerName',
            'customerPhone',
            'mediator',
            'commission',
            'bookingAmount',
            'closureDate',
            'status',
            'plotLabel',
            'plotKey',
            'installments',
        ]
        read_only_fields = fields

    def get_mediator(self, obj):
        return obj.mediator_name or ''

    def get_closureDate(self, obj):
        return _iso_or_blank(obj.closure_date)
