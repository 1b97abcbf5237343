import logging
from django.db import transaction
from django.db.models import Count
from django.shortcuts import get_object_or_404
from rest_framework import generics, permissions, status
from rest_framework.exceptions import PermissionDenied, ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView
from .models import Team, TeamMembership
from .serializers import TeamSerializer, TeamDetailSerializer

log = logging.getLogger(__name__)


class IsCaptainOrReadOnly(permissions.BasePermission):
    message = "Only the captain can change the team"

    def has_object_permission(self, request, view, obj):
        if request.method in permissions.SAFE_METHODS:
            return True
        return obj.captain_id == request.user.id


class TeamListCreateAPIView(generics.ListCreateAPIView):
    """Teams of the caller (captain or member); POST creates a team."""
    serializer_class = TeamSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):
        return (
            Team.objects
            .filter(id__in=TeamMembership.objects.filter(user=self.request.user).values("team_id"))
            .select_related("game", "captain")
            .annotate(member_count=Count("memberships"))
        )

    def perform_create(self, serializer):
        with transaction.atomic():
            team = serializer.save(captain=self.request.user)
            TeamMembership.objects.create(
                user=self.request.user, team=team, role=TeamMembership.Role.CAPTAIN
            )
        log.info("Team %s created by %s", team.pk, self.request.user)


class TeamDetailAPIView(generics.RetrieveUpdateAPIView):
    queryset = Team.objects.select_related("game", "captain").prefetch_related("memberships__user")
    serializer_class = TeamDetailSerializer
    permission_classes = [permissions.IsAuthenticatedOrReadOnly, IsCaptainOrReadOnly]
    http_method_names = ["get", "patch", "head", "options"]


class TeamJoinAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request, code):
        team = get_object_or_404(Team, invite_code=code)
        _, created = TeamMembership.objects.get_or_create(
            user=request.user, team=team, defaults={"role": TeamMembership.Role.PLAYER}
        )
        return Response(
            {"success": True, "joined": created, "team_id": team.id},
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


class TeamLeaveAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request, pk):
        team = get_object_or_404(Team, pk=pk)
        membership = get_object_or_404(TeamMembership, user=request.user, team=team)
        if membership.role == TeamMembership.Role.CAPTAIN:
            raise ValidationError({"detail": "The captain cannot leave the team"})
        membership.delete()
        return Response({"success": True})
