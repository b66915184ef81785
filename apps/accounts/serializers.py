from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User
from apps.rewards.serializers import AccountSerializer


class UserSerializer(serializers.ModelSerializer):
    """User profile with reward balances."""

    account = AccountSerializer(source='reward_account', read_only=True)

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'display_name',
            'is_staff',
            'created_at',
            'last_login',
            'account',
        ]
        read_only_fields = ['id', 'email', 'is_staff', 'created_at', 'last_login', 'account']


class UserRegistrationSerializer(serializers.ModelSerializer):
    """Serializer for user registration."""

    # Uniqueness is checked by the registration service
    email = serializers.EmailField(max_length=255)
    password = serializers.CharField(
        write_only=True,
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        required=True,
        style={'input_type': 'password'}
    )

    class Meta:
        model = User
        fields = ['email', 'password', 'password_confirm', 'display_name']

    def validate(self, attrs):
        """Validate password confirmation."""
        if attrs['password'] != attrs['password_confirm']:
            raise serializers.ValidationError({
                'password_confirm': 'Passwords do not match'
            })
        return attrs


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class UserPublicSerializer(serializers.ModelSerializer):
    """Public user info (for picking a transfer recipient)."""

    display_name = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ['id', 'display_name', 'created_at']
        read_only_fields = fields

    def get_display_name(self, obj) -> str:
        return obj.get_display_name()
