# Generated manually for the coins app

import uuid
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='CoinTransfer',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('amount', models.PositiveBigIntegerField()),
                ('message', models.CharField(blank=True, max_length=500)),
                ('status', models.CharField(choices=[('completed', 'Completed'), ('pending', 'Pending'), ('cancelled', 'Cancelled')], default='completed', max_length=20)),
                ('type', models.CharField(choices=[('transfer', 'Transfer'), ('gift', 'Gift'), ('reward', 'Reward')], default='transfer', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('from_user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='coin_transfers_sent', to=settings.AUTH_USER_MODEL)),
                ('to_user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='coin_transfers_received', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'coin_transfers',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['from_user', 'created_at'], name='transfer_from_created_idx'),
                    models.Index(fields=['to_user', 'created_at'], name='transfer_to_created_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(amount__gt=0), name='coin_transfer_amount_positive'),
                ],
            },
        ),
        migrations.CreateModel(
            name='AddressBookEntry',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('nickname', models.CharField(max_length=100)),
                ('is_favorite', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='address_book', to=settings.AUTH_USER_MODEL)),
                ('recipient', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='address_book_mentions', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'address_book_entries',
                'ordering': ['-is_favorite', '-created_at'],
                'constraints': [
                    models.UniqueConstraint(fields=('owner', 'recipient'), name='unique_address_book_entry'),
                ],
            },
        ),
    ]
