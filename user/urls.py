from django.urls import path
from .views import (
    LoginView,
    RefreshTokenView,
    RetrieveCurrentUser,
    Logout,
)

urlpatterns = [
    path('login/', LoginView.as_view(), name='login'),            # phone + password login
    path('refresh/', RefreshTokenView.as_view(), name='refresh'),  # refresh token
    path('logout/', Logout.as_view(), name='logout'),             # logout
    path('me/', RetrieveCurrentUser.as_view(), name='me'),        # current account
]
