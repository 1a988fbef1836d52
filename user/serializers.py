from rest_framework import serializers
from django.contrib.auth import get_user_model
from rest_framework_simplejwt.tokens import RefreshToken, TokenError


class UserSerializer(serializers.ModelSerializer):
    """User serializer"""

    class Meta:
        model = get_user_model()
        fields = ['id', 'name', 'phone', 'email', 'role', 'status', 'created_at', 'updated_at', 'is_active']
        read_only_fields = ['id', 'role', 'status', 'created_at', 'updated_at', 'is_active']


class UserLoginSerializer(serializers.Serializer):
    """Phone + password login"""
    phone = serializers.CharField(required=True, help_text='phone number')
    password = serializers.CharField(required=True, write_only=True, help_text='password')

    def validate(self, attrs):
        phone = attrs.get('phone')
        password = attrs.get('password')

        # Fetch inactive accounts too so the message can be specific
        user = get_user_model().objects.filter(phone=phone).first()
        if not user or not user.check_password(password):
            raise serializers.ValidationError({'password': 'Invalid phone number or password'})

        if (not user.is_active) or user.status in ['pending', 'inactive']:
            if user.status == 'pending':
                raise serializers.ValidationError({'phone': 'Account is waiting for verification'})
            raise serializers.ValidationError({'phone': 'Account is disabled, please contact the clinic'})

        attrs['user'] = user
        return attrs


class UserLogOutSerializer(serializers.Serializer):
    "Validates the refresh token a user logs out with"
    refresh = serializers.CharField(required=True,
                                    write_only=True,
                                    help_text='refresh token')

    def validate_refresh(self, value):
        try:
            RefreshToken(value)
        except TokenError:
            raise serializers.ValidationError('Invalid or expired refresh token')
        return value
