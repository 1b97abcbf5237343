from django.urls import path
from . import api_views

app_name = 'teams'

urlpatterns = [
    path('api/teams/', api_views.TeamListCreateAPIView.as_view(), name='api_team_list'),
    path('api/teams/<int:pk>/', api_views.TeamDetailAPIView.as_view(), name='api_team_detail'),
    path('api/teams/<int:pk>/leave/', api_views.TeamLeaveAPIView.as_view(), name='api_team_leave'),
    path('api/teams/join/<str:code>/', api_views.TeamJoinAPIView.as_view(), name='api_team_join'),
]
