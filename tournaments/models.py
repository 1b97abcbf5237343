import datetime

from django.conf import settings
from django.db import models


class Game(models.Model):
    name = models.CharField(max_length=64)
    slug = models.SlugField(max_length=64, unique=True)
    is_active = models.BooleanField(default=True)

    class Meta:
        ordering = ("name",)

    def __str__(self):
        return self.name


class Tournament(models.Model):
    class Status(models.TextChoices):
        DRAFT = "draft", "Draft"
        REGISTRATION_OPEN = "registration_open", "Registration open"
        CLOSED = "closed", "Closed"
        COMPLETED = "completed", "Completed"
        CANCELLED = "cancelled", "Cancelled"

    # statuses in which participants may register or withdraw
    OPEN_STATUSES = (Status.DRAFT, Status.REGISTRATION_OPEN)

    title = models.CharField(max_length=128)
    game = models.ForeignKey(
        Game, on_delete=models.PROTECT, null=True, blank=True, related_name="tournaments"
    )
    description = models.TextField(blank=True)
    rules = models.TextField(blank=True)
    format_type = models.CharField(max_length=32, default="single_elimination")
    match_format = models.CharField(max_length=16, default="1v1")
    platform = models.CharField(max_length=16, default="PC")
    entry_fee = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    prize_pool = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    capacity = models.PositiveIntegerField(default=16)
    occupancy = models.PositiveIntegerField(default=0, editable=False)
    start_date = models.DateField()
    start_time = models.TimeField(default=datetime.time(18, 0))
    registration_deadline = models.DateField(null=True, blank=True)
    status = models.CharField(max_length=24, choices=Status.choices, default=Status.DRAFT)
    is_featured = models.BooleanField(default=False)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True,
        related_name="created_tournaments",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("-created_at", "-id")
        indexes = [models.Index(fields=["status", "created_at"], name="tournament_status_created_idx")]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(capacity__gt=0),
                name="tournament_capacity_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(occupancy__lte=models.F("capacity")),
                name="tournament_occupancy_lte_capacity",
            ),
        ]

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        if self.registration_deadline is None:
            self.registration_deadline = self.start_date
        super().save(*args, **kwargs)

    @property
    def accepts_registrations(self) -> bool:
        return self.status in self.OPEN_STATUSES

    @property
    def slots_left(self):
        return max(self.capacity - self.occupancy, 0)


class RegistrationQuerySet(models.QuerySet):
    def active(self):
        return self.filter(status=Registration.Status.REGISTERED)


class Registration(models.Model):
    class Status(models.TextChoices):
        REGISTERED = "registered", "Registered"
        UNREGISTERED = "unregistered", "Unregistered"

    tournament = models.ForeignKey(
        Tournament, on_delete=models.CASCADE, related_name="registrations"
    )
    participant = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name="registrations"
    )
    team = models.ForeignKey(
        "teams.Team", on_delete=models.SET_NULL, null=True, blank=True,
        related_name="registrations",
    )
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.REGISTERED)
    # seconds since epoch
    created_at = models.PositiveBigIntegerField()
    withdrawn_at = models.PositiveBigIntegerField(null=True, blank=True)

    objects = RegistrationQuerySet.as_manager()

    class Meta:
        ordering = ("created_at", "id")
        indexes = [
            models.Index(fields=["tournament", "status"], name="registration_tournament_status"),
            models.Index(fields=["created_at"], name="registration_created_at_idx"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["tournament", "participant"],
                condition=models.Q(status="registered"),
                name="unique_active_registration",
            ),
        ]

    def __str__(self):
        return f"{self.participant} → {self.tournament} ({self.status})"

    @property
    def is_active(self) -> bool:
        return self.status == self.Status.REGISTERED
