# Generated manually for the collectibles app

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
            name='NftItem',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('image_url', models.URLField(blank=True, max_length=500)),
                ('category', models.CharField(choices=[('levelup', 'Level up'), ('achievement', 'Achievement'), ('event', 'Event'), ('special', 'Special')], default='achievement', max_length=20)),
                ('rarity', models.CharField(choices=[('common', 'Common'), ('rare', 'Rare'), ('epic', 'Epic'), ('legendary', 'Legendary')], default='common', max_length=20)),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'nft_items',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='UserNft',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('obtained_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('obtained_reason', models.CharField(blank=True, max_length=255)),
                ('metadata', models.JSONField(blank=True, default=dict)),
                ('nft', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='owners', to='collectibles.nftitem')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='nfts', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'user_nfts',
                'ordering': ['-obtained_at'],
                'indexes': [models.Index(fields=['user', 'obtained_at'], name='user_nft_user_obtained_idx')],
            },
        ),
    ]
