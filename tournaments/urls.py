from django.urls import path
from .api_views import (
    TournamentListCreateAPIView,
    TournamentDetailAPIView,
    TournamentJoinAPIView,
    TournamentUnregisterAPIView,
    TournamentParticipantsAPIView,
)


app_name = "tournaments"

urlpatterns = [
    path("api/tournaments/", TournamentListCreateAPIView.as_view(), name="api_tournament_list"),
    path("api/tournaments/<int:pk>/", TournamentDetailAPIView.as_view(), name="api_tournament_detail"),
    path("api/tournaments/<int:pk>/join/", TournamentJoinAPIView.as_view(), name="api_tournament_join"),
    path("api/tournaments/<int:pk>/unregister/", TournamentUnregisterAPIView.as_view(), name="api_tournament_unregister"),
    path("api/tournaments/<int:pk>/participants/", TournamentParticipantsAPIView.as_view(), name="api_tournament_participants"),
]
