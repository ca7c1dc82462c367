import uuid

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Hotel',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255)),
                ('slug', models.CharField(blank=True, max_length=255, unique=True, validators=[django.core.validators.RegexValidator('^[a-z0-9]+(?:-[a-z0-9]+)*$', 'Slug may contain lowercase letters, digits and hyphens.')])),
                ('location', models.CharField(max_length=255)),
                ('city', models.CharField(max_length=100)),
                ('country', models.CharField(max_length=100)),
                ('description', models.TextField(blank=True)),
                ('short_description', models.TextField(blank=True)),
                ('images', models.JSONField(blank=True, default=list)),
                ('main_image', models.URLField(blank=True, max_length=500)),
                ('special_offer', models.BooleanField(default=False)),
                ('offer_title', models.CharField(blank=True, max_length=255)),
                ('offer_details', models.TextField(blank=True)),
                ('offer_valid_until', models.DateTimeField(blank=True, null=True)),
                ('offer_booking_deadline', models.DateTimeField(blank=True, null=True)),
                ('offer_blackout_dates', models.JSONField(blank=True, default=list)),
                ('price', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('currency', models.CharField(default='USD', max_length=3)),
                ('vip_benefits', models.JSONField(blank=True, default=list)),
                ('hotel_details', models.JSONField(blank=True, default=dict)),
                ('featured', models.BooleanField(default=False)),
                ('popular', models.BooleanField(default=False)),
                ('display_order', models.IntegerField(default=0)),
                ('is_active', models.BooleanField(default=True)),
                ('meta_title', models.CharField(blank=True, max_length=255)),
                ('meta_description', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'hotels',
                'ordering': ['display_order', '-created_at'],
                'constraints': [models.CheckConstraint(condition=models.Q(('price__isnull', True), ('price__gte', 0), _connector='OR'), name='hotel_price_non_negative')],
                'indexes': [
                    models.Index(fields=['city'], name='hotels_city_idx'),
                    models.Index(fields=['featured'], name='hotels_featured_idx'),
                    models.Index(fields=['is_active', 'display_order'], name='hotels_active_order_idx'),
                ],
            },
        ),
    ]
