from rest_framework import generics
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework_simplejwt.views import TokenRefreshView
from rest_framework_simplejwt.settings import api_settings
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView
from utils.response import success_response
from .serializers import UserSerializer, UserLogOutSerializer, UserLoginSerializer


class LoginView(APIView):
    """
    Login endpoint issuing a JWT pair
    """
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        serializer = UserLoginSerializer(data=request.data, context={'request': request})
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data['user']

        refresh = RefreshToken.for_user(user)
        response_data = {
            'token': str(refresh.access_token),
            'refresh_token': str(refresh),
            'user': UserSerializer(user).data,
            'expires_in': int(api_settings.ACCESS_TOKEN_LIFETIME.total_seconds()),
        }
        return success_response(data=response_data, message='Login successful')


class RefreshTokenView(TokenRefreshView):
    """
    Refresh the access token and rotate the refresh token
    """
    permission_classes = [AllowAny]

    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        token_data = serializer.validated_data
        response_data = {
            'token': token_data.get('access'),
            'refresh_token': token_data.get('refresh') or request.data.get('refresh'),
            'expires_in': int(api_settings.ACCESS_TOKEN_LIFETIME.total_seconds()),
        }
        return success_response(data=response_data, message='Token refreshed')


class RetrieveCurrentUser(generics.RetrieveAPIView):
    """The logged-in account"""
    authentication_classes = [JWTAuthentication, ]
    permission_classes = [IsAuthenticated, ]
    serializer_class = UserSerializer

    def get_object(self):
        return self.request.user

    def retrieve(self, request, *args, **kwargs):
        return success_response(self.get_serializer(self.get_object()).data)


class Logout(APIView):
    """Blacklist the refresh token"""
    authentication_classes = [JWTAuthentication, ]
    permission_classes = [IsAuthenticated, ]

    def post(self, request):
        serializer = UserLogOutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        RefreshToken(serializer.validated_data['refresh']).blacklist()
        return success_response(data=None, message='Logged out')
