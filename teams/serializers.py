from rest_framework import serializers
from tournaments.models import Game
from .models import Team, TeamMembership

class MemberSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(source="user.id", read_only=True)
    username = serializers.CharField(source="user.username", read_only=True)

    class Meta:
        model = TeamMembership
        fields = ["user_id", "username", "role", "joined_at"]

class TeamSerializer(serializers.ModelSerializer):
    game_id = serializers.PrimaryKeyRelatedField(
        source="game", queryset=Game.objects.filter(is_active=True),
        required=False, allow_null=True,
    )
    game_name = serializers.CharField(source="game.name", default=None, read_only=True)
    captain_id = serializers.IntegerField(source="captain.id", read_only=True)
    captain_username = serializers.CharField(source="captain.username", read_only=True)
    member_count = serializers.SerializerMethodField()

    class Meta:
        model = Team
        fields = [
            "id", "name", "tag", "description", "logo", "game_id", "game_name",
            "captain_id", "captain_username", "member_count", "created_at",
        ]
        read_only_fields = ["logo", "created_at"]

    def get_member_count(self, obj):
        annotated = getattr(obj, "member_count", None)
        if annotated is not None:
            return annotated
        return obj.memberships.count()

class TeamDetailSerializer(TeamSerializer):
    members = MemberSerializer(source="memberships", many=True, read_only=True)
    invite_code = serializers.SerializerMethodField()

    class Meta(TeamSerializer.Meta):
        fields = TeamSerializer.Meta.fields + ["members", "invite_code"]

    def get_invite_code(self, obj):
        # only the captain sees the code
        request = self.context.get("request")
        if request and request.user.is_authenticated and obj.captain_id == request.user.id:
            return obj.invite_code
        return None
