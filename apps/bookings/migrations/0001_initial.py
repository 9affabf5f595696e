from decimal import Decimal
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('plots', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Customer',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('customer_name', models.CharField(max_length=150)),
                ('customer_phone', models.CharField(blank=True, max_length=20, null=True)),
                ('mediator_name', models.CharField(blank=True, max_length=150, null=True)),
                ('commission', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=14)),
                ('booking_amount', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=14)),
                ('closure_date', models.DateField(blank=True, null=True)),
                ('status', models.CharField(choices=[('reserved', 'Reserved'), ('booked', 'Booked'), ('registered', 'Registered')], default='reserved', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('plot', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='customers', to='plots.plot')),
            ],
            options={
                'db_table': 'customers',
                'ordering': ['-id'],
                'indexes': [models.Index(fields=['status'], name='customers_status_idx')],
            },
        ),
        migrations.CreateModel(
            name='Installment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('amount', models.DecimalField(decimal_places=2, max_digits=14)),
                ('date_received', models.DateField(blank=True, null=True)),
                ('follow_up_date', models.DateField(blank=True, null=True)),
                ('customer', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='installments', to='bookings.customer')),
            ],
            options={
                'db_table': 'installments',
                'ordering': ['date_received', 'id'],
            },
        ),
    ]
