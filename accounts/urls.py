from django.urls import path
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView
from .api_views import MeAPIView, WalletAPIView

app_name = "accounts"

urlpatterns = [
    path("api/token/", TokenObtainPairView.as_view(), name="token_obtain"),
    path("api/token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
    path("api/me/", MeAPIView.as_view(), name="api_me"),
    path("api/wallet/", WalletAPIView.as_view(), name="api_wallet"),
]
