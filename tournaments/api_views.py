import logging
import math
from django.conf import settings
from django.shortcuts import get_object_or_404
from rest_framework import generics, permissions, status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView

from teams.models import Team
from . import catalog, ledger
from .exceptions import RegistrationFailed, RegistrationUnavailable
from .ledger import Outcome
from .models import Tournament
from .pagination import TournamentPagination
from .permissions import IsPlatformAdminOrReadOnly
from .serializers import (
    JoinSerializer,
    RegistrationSerializer,
    TournamentCreateSerializer,
    TournamentSerializer,
)

log = logging.getLogger(__name__)

OUTCOME_STATUS = {
    Outcome.REGISTERED: status.HTTP_201_CREATED,
    Outcome.WITHDRAWN: status.HTTP_200_OK,
    Outcome.CONTEST_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    Outcome.REGISTRATION_CLOSED: status.HTTP_409_CONFLICT,
    Outcome.CONTEST_FULL: status.HTTP_409_CONFLICT,
    Outcome.ALREADY_REGISTERED: status.HTTP_409_CONFLICT,
    Outcome.NOT_REGISTERED: status.HTTP_409_CONFLICT,
    Outcome.COOLDOWN_ACTIVE: status.HTTP_429_TOO_MANY_REQUESTS,
}

OUTCOME_MESSAGES = {
    Outcome.REGISTERED: "Successfully registered for tournament",
    Outcome.WITHDRAWN: "Successfully unregistered from tournament",
    Outcome.CONTEST_NOT_FOUND: "Tournament not found",
    Outcome.REGISTRATION_CLOSED: "Tournament is not accepting registrations",
    Outcome.CONTEST_FULL: "Tournament is full",
    Outcome.ALREADY_REGISTERED: "Already registered for this tournament",
    Outcome.NOT_REGISTERED: "You are not registered for this tournament",
    Outcome.COOLDOWN_ACTIVE: "Please wait {minutes} minutes before unregistering",
}


def _outcome_response(result):
    message = OUTCOME_MESSAGES[result.outcome]
    body = {"success": result.ok, "outcome": result.outcome.value}
    headers = {}
    if result.registration_id is not None:
        body["registration_id"] = result.registration_id
    retry_after = getattr(result, "retry_after", None)
    if retry_after:
        body["retry_after"] = retry_after
        headers["Retry-After"] = str(retry_after)
        message = message.format(minutes=math.ceil(retry_after / 60))
    refund = getattr(result, "refund_amount", None)
    if refund:
        body["refund_amount"] = str(refund)
        message = f"{message}. {refund} refunded to your wallet"
    body["message"] = message
    return Response(body, status=OUTCOME_STATUS[result.outcome], headers=headers)


def _run_ledger(operation, *args, **kwargs):
    try:
        return operation(*args, **kwargs)
    except ledger.LedgerValidationError as exc:
        raise ValidationError({"detail": str(exc)}) from exc
    except ledger.LedgerUnavailable as exc:
        log.warning("Ledger unavailable: %s", exc)
        raise RegistrationUnavailable(retry_after=settings.REGISTRATION_RETRY_AFTER) from exc
    except ledger.LedgerInvariantError as exc:
        log.error("Ledger invariant failure: %s", exc)
        raise RegistrationFailed() from exc


class TournamentListCreateAPIView(generics.ListCreateAPIView):
    serializer_class = TournamentSerializer
    pagination_class = TournamentPagination
    permission_classes = [IsPlatformAdminOrReadOnly]

    def get_queryset(self):
        params = self.request.query_params
        return catalog.list_contests(status=params.get("status"), game=params.get("game"))

    def create(self, request, *args, **kwargs):
        serializer = TournamentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            tournament = catalog.create_contest(request.user, **serializer.to_catalog_fields())
        except catalog.CatalogError as exc:
            raise ValidationError({"game_slug": [str(exc)]}) from exc
        log.info("Tournament %s created by %s", tournament.pk, request.user)
        return Response(
            {
                "success": True,
                "message": "Tournament created successfully",
                "tournament": TournamentSerializer(tournament).data,
            },
            status=status.HTTP_201_CREATED,
        )


class TournamentDetailAPIView(generics.RetrieveAPIView):
    queryset = Tournament.objects.select_related("game", "created_by")
    serializer_class = TournamentSerializer

    def retrieve(self, request, *args, **kwargs):
        tournament = self.get_object()
        data = self.get_serializer(tournament).data
        user = request.user
        registration = None
        if user.is_authenticated:
            registration = ledger.registration_for(tournament.pk, user.pk)
        data["user_registration"] = (
            RegistrationSerializer(registration).data if registration else None
        )
        data["is_admin"] = bool(user.is_authenticated and user.is_platform_admin)
        return Response(data)


class TournamentJoinAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request, pk):
        serializer = JoinSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        team_id = serializer.validated_data.get("team_id")
        if team_id is not None:
            team = Team.objects.filter(pk=team_id).first()
            if team is None or not team.has_member(request.user):
                raise ValidationError({"team_id": ["You are not a member of this team"]})
        result = _run_ledger(ledger.register, pk, request.user.pk, team_id=team_id)
        return _outcome_response(result)


class TournamentUnregisterAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request, pk):
        result = _run_ledger(ledger.withdraw, pk, request.user.pk)
        return _outcome_response(result)


class TournamentParticipantsAPIView(generics.ListAPIView):
    serializer_class = RegistrationSerializer
    pagination_class = None

    def get_queryset(self):
        tournament = get_object_or_404(Tournament, pk=self.kwargs["pk"])
        return ledger.active_registrations(tournament.pk)
