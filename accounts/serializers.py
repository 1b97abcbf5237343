from rest_framework import serializers
from .models import User, WalletTransaction

class MeSerializer(serializers.ModelSerializer):
    is_admin = serializers.BooleanField(source="is_platform_admin", read_only=True)

    class Meta:
        model = User
        fields = ["id", "username", "email", "role", "is_admin"]
        read_only_fields = fields

class WalletTransactionSerializer(serializers.ModelSerializer):
    tournament_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = WalletTransaction
        fields = ["id", "kind", "amount", "description", "tournament_id", "created_at"]
