from rest_framework import permissions
from rest_framework.response import Response
from rest_framework.views import APIView
from .models import WalletTransaction
from .serializers import MeSerializer, WalletTransactionSerializer
from .wallet import balance_of

class MeAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        return Response(MeSerializer(request.user).data)


class WalletAPIView(APIView):
    """Balance plus the 20 most recent transactions of the caller."""
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        transactions = WalletTransaction.objects.filter(wallet__user=request.user)[:20]
        return Response({
            "balance": str(balance_of(request.user.pk)),
            "transactions": WalletTransactionSerializer(transactions, many=True).data,
        })
