import logging
from decimal import Decimal

from django.db.models import F

from .models import Wallet, WalletTransaction

log = logging.getLogger(__name__)


def credit(user_id, amount, *, kind=WalletTransaction.Kind.REFUND, description="", tournament_id=None):
    """Add ``amount`` to the user's wallet and record the transaction.

    Creates the wallet on first credit. Must run inside the caller's
    ``transaction.atomic()`` block so the credit commits or rolls back with it.
    """
    amount = Decimal(amount)
    if amount <= 0:
        raise ValueError("credit amount must be positive")
    wallet, _ = Wallet.objects.select_for_update().get_or_create(user_id=user_id)
    Wallet.objects.filter(pk=wallet.pk).update(balance=F("balance") + amount)
    entry = WalletTransaction.objects.create(
        wallet=wallet,
        kind=kind,
        amount=amount,
        description=description,
        tournament_id=tournament_id,
    )
    log.info("Wallet of user %s credited %s (%s)", user_id, amount, kind)
    return entry


def balance_of(user_id) -> Decimal:
    balance = Wallet.objects.filter(user_id=user_id).values_list("balance", flat=True).first()
    return Decimal("0.00") if balance is None else balance
