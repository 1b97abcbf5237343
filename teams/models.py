import secrets
import string
from django.conf import settings
from django.db import models

INVITE_ALPHABET = string.ascii_uppercase + string.digits

def generate_invite_code():
    return "TEAM_" + "".join(secrets.choice(INVITE_ALPHABET) for _ in range(10))

class Team(models.Model):
    name = models.CharField(max_length=50, unique=True)
    tag = models.CharField(max_length=8, blank=True)
    description = models.TextField(blank=True)
    logo = models.ImageField(upload_to='team_logos/', blank=True, null=True)
    game = models.ForeignKey(
        "tournaments.Game", on_delete=models.SET_NULL, null=True, blank=True,
        related_name="teams",
    )
    captain = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='captain_teams'
    )
    invite_code = models.CharField(max_length=16, unique=True, default=generate_invite_code, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("-created_at", "-id")

    def __str__(self):
        return f"[{self.tag}] {self.name}" if self.tag else self.name

    def has_member(self, user) -> bool:
        return self.memberships.filter(user=user).exists()

class TeamMembership(models.Model):
    class Role(models.TextChoices):
        CAPTAIN = "captain", "Captain"
        PLAYER = "player", "Player"

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='team_memberships'
    )
    team = models.ForeignKey(Team, on_delete=models.CASCADE, related_name='memberships')
    role = models.CharField(max_length=10, choices=Role.choices, default=Role.PLAYER)
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = ('user', 'team')

    def __str__(self):
        return f"{self.user} -> {self.team} ({self.role})"
