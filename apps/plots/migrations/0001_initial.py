from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Plot',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('plot_key', models.CharField(db_index=True, max_length=50, unique=True)),
                ('title', models.CharField(blank=True, max_length=200)),
                ('plot_num', models.PositiveIntegerField(blank=True, null=True)),
                ('stamp_num', models.CharField(blank=True, max_length=50)),
                ('price', models.DecimalField(blank=True, decimal_places=2, max_digits=14, null=True)),
                ('length_ft', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('width_ft', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('sqft', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('cent', models.DecimalField(blank=True, decimal_places=3, max_digits=10, null=True)),
                ('facing', models.CharField(blank=True, max_length=30)),
                ('status', models.CharField(choices=[('available', 'Available'), ('booked', 'Booked'), ('reserved', 'Reserved'), ('registration done', 'Registration Done')], db_index=True, default='available', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'plots',
                'ordering': ['plot_num', 'plot_key'],
            },
        ),
    ]
