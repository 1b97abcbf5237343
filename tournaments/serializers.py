from rest_framework import serializers
from .models import Tournament, Registration
from teams.models import Team

class TeamSerializer(serializers.ModelSerializer):
    class Meta:
        model = Team
        fields = ['id', 'name', 'tag']

class TournamentSerializer(serializers.ModelSerializer):
    game_name = serializers.CharField(source="game.name", default=None, read_only=True)
    game_slug = serializers.CharField(source="game.slug", default=None, read_only=True)
    creator_username = serializers.CharField(source="created_by.username", default=None, read_only=True)
    max_players = serializers.IntegerField(source="capacity", read_only=True)
    current_players = serializers.IntegerField(source="occupancy", read_only=True)
    slots_left = serializers.IntegerField(read_only=True)

    class Meta:
        model = Tournament
        fields = [
            'id', 'title', 'description', 'rules', 'format_type', 'match_format',
            'platform', 'entry_fee', 'prize_pool', 'max_players', 'current_players',
            'slots_left', 'start_date', 'start_time', 'registration_deadline',
            'status', 'is_featured', 'game_name', 'game_slug', 'creator_username',
        ]

class RegistrationSerializer(serializers.ModelSerializer):
    username = serializers.CharField(source="participant.username", read_only=True)
    team = TeamSerializer(read_only=True)

    class Meta:
        model = Registration
        fields = ['id', 'participant', 'username', 'team', 'status', 'created_at']

class TournamentCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=128)
    game_slug = serializers.SlugField()
    description = serializers.CharField(required=False, allow_blank=True, default="")
    rules = serializers.CharField(required=False, allow_blank=True, default="")
    format_type = serializers.CharField(required=False, max_length=32, default="single_elimination")
    match_format = serializers.CharField(required=False, max_length=16, default="1v1")
    platform = serializers.CharField(required=False, max_length=16, default="PC")
    entry_fee = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False, default=0)
    prize_pool = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, required=False, default=0)
    max_players = serializers.IntegerField(min_value=1)
    start_date = serializers.DateField()
    start_time = serializers.TimeField(required=False)
    registration_deadline = serializers.DateField(required=False, allow_null=True)

    def validate(self, attrs):
        deadline = attrs.get("registration_deadline")
        if deadline and deadline > attrs["start_date"]:
            raise serializers.ValidationError(
                {"registration_deadline": "Registration deadline must not be after the start date"}
            )
        return attrs

    def to_catalog_fields(self):
        data = dict(self.validated_data)
        data["capacity"] = data.pop("max_players")
        return data

class JoinSerializer(serializers.Serializer):
    team_id = serializers.IntegerField(required=False, allow_null=True, min_value=1)
