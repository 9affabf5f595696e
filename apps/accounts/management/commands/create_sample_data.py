"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data
    python manage.py create_sample_data --rows 4 --per-row 10 --clear

This creates:
- 1 admin user (admin / admin123) and 1 staff user (staff / staff123)
- A grid of available plots keyed A1, A2, ... B1, ...
- 3 mediators
"""

from decimal import Decimal
from string import ascii_uppercase

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import User, UserRole
from apps.bookings.models import Customer, Installment
from apps.mediators.models import Mediator
from apps.plots.models import Plot, PlotStatus


MEDIATORS = [
    ('Ravi Kumar', '9840012345', 'Tambaram'),
    ('Lakshmi Narayanan', '9884056789', 'Chengalpattu'),
    ('Suresh Babu', '9962011122', 'Guduvanchery'),
]

FACINGS = ['East', 'West', 'North', 'South']


class Command(BaseCommand):
    help = 'Create sample data for trying out the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing plots, bookings and mediators first',
        )
        parser.add_argument('--rows', type=int, default=3, help='Number of plot rows (A, B, ...)')
        parser.add_argument('--per-row', type=int, default=8, help='Plots per row')

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        self.create_users()
        plots = self.create_plots(options['rows'], options['per_row'])
        mediators = self.create_mediators()

        self.stdout.write(self.style.SUCCESS(
            f'Done: {plots} plots, {mediators} mediators.'
        ))

    def clear_data(self):
        Installment.objects.all().delete()
        Customer.objects.all().delete()
        Plot.objects.all().delete()
        Mediator.objects.all().delete()

    def create_users(self):
        if not User.objects.filter(username='admin').exists():
            User.objects.create_superuser(
                username='admin',
                password='admin123',
                display_name='Administrator',
            )
            self.stdout.write('  Created user admin')
        if not User.objects.filter(username='staff').exists():
            User.objects.create_user(
                username='staff',
                password='staff123',
                display_name='Sales Desk',
                role=UserRole.STAFF,
            )
            self.stdout.write('  Created user staff')

    def create_plots(self, rows, per_row):
        created = 0
        plot_num = 0
        for row in ascii_uppercase[:rows]:
            for n in range(1, per_row + 1):
                plot_num += 1
                length = Decimal('40')
                width = Decimal('30') + (n % 3) * 5
                sqft = length * width
                _, was_created = Plot.objects.get_or_create(
                    plot_key=f'{row}{n}',
                    defaults={
                        'title': f'Plot {row}-{n}',
                        'plot_num': plot_num,
                        'length_ft': length,
                        'width_ft': width,
                        'sqft': sqft,
                        # 1 cent = 435.6 sq ft
                        'cent': (sqft / Decimal('435.6')).quantize(Decimal('0.001')),
                        'price': sqft * Decimal('1500'),
                        'facing': FACINGS[n % len(FACINGS)],
                        'status': PlotStatus.AVAILABLE,
                    },
                )
                created += was_created
        return created

    def create_mediators(self):
        created = 0
        for name, phone, location in MEDIATORS:
            _, was_created = Mediator.objects.get_or_create(
                name=name,
                defaults={'phone': phone, 'location': location},
            )
            created += was_created
        return created
