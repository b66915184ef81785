# Generated manually for the rewards app

import uuid
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('stores', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Account',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('experience', models.PositiveBigIntegerField(default=0)),
                ('loyalty', models.PositiveBigIntegerField(default=0)),
                ('coins', models.PositiveBigIntegerField(default=0)),
                ('gems', models.PositiveBigIntegerField(default=0)),
                ('level', models.PositiveIntegerField(default=1, editable=False)),
                ('rank', models.CharField(choices=[('bronze', 'Bronze'), ('silver', 'Silver'), ('gold', 'Gold'), ('platinum', 'Platinum')], default='bronze', editable=False, max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='reward_account', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'reward_accounts',
                'constraints': [
                    models.CheckConstraint(condition=models.Q(coins__gte=0), name='account_coins_non_negative'),
                    models.CheckConstraint(condition=models.Q(level__gte=1), name='account_level_positive'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Visit',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('experience_earned', models.PositiveIntegerField(default=0)),
                ('loyalty_earned', models.PositiveIntegerField(default=0)),
                ('coins_earned', models.PositiveIntegerField(default=0)),
                ('gems_earned', models.PositiveIntegerField(default=0)),
                ('level_before', models.PositiveIntegerField()),
                ('level_after', models.PositiveIntegerField()),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('store', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='visits', to='stores.store')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='visits', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'store_visits',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['user', 'created_at'], name='visit_user_created_idx'),
                    models.Index(fields=['user', 'store', 'created_at'], name='visit_user_store_created_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='RewardTransaction',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('experience', models.PositiveIntegerField(default=0)),
                ('loyalty', models.PositiveIntegerField(default=0)),
                ('coins', models.PositiveIntegerField(default=0)),
                ('gems', models.PositiveIntegerField(default=0)),
                ('type', models.CharField(choices=[('checkin', 'Check-in'), ('bonus', 'Bonus'), ('redeem', 'Redeem'), ('level_up', 'Level up')], max_length=20)),
                ('description', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('store', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='reward_transactions', to='stores.store')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='reward_transactions', to=settings.AUTH_USER_MODEL)),
                ('visit', models.OneToOneField(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='transaction', to='rewards.visit')),
            ],
            options={
                'db_table': 'reward_transactions',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['user', 'created_at'], name='rtx_user_created_idx')],
            },
        ),
    ]
