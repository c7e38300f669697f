from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Basic member serializer for profile display."""

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'email',
            'role',
            'status',
            'telegram_id',
            'created_at',
            'last_login',
        ]
        read_only_fields = ['id', 'role', 'status', 'created_at', 'last_login']


class MemberRegistrationSerializer(serializers.Serializer):
    """Input serializer for member registration."""

    username = serializers.CharField(max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        style={'input_type': 'password'}
    )
    telegram_id = serializers.CharField(max_length=64, required=False, allow_blank=True)

    def validate(self, attrs):
        """Validate password confirmation."""
        if attrs['password'] != attrs['password_confirm']:
            raise serializers.ValidationError({
                'password_confirm': 'Passwords do not match'
            })
        return attrs


class MemberLoginSerializer(serializers.Serializer):
    """Serializer for member login."""

    username = serializers.CharField()
    password = serializers.CharField(
        write_only=True,
        style={'input_type': 'password'}
    )


class ProfileUpdateSerializer(serializers.Serializer):
    """Input serializer for profile updates (all fields optional)."""

    username = serializers.CharField(max_length=150, required=False)
    email = serializers.EmailField(required=False)
    telegram_id = serializers.CharField(max_length=64, required=False, allow_blank=True)
