import datetime
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Game",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=64)),
                ("slug", models.SlugField(max_length=64, unique=True)),
                ("is_active", models.BooleanField(default=True)),
            ],
            options={
                "ordering": ("name",),
            },
        ),
        migrations.CreateModel(
            name="Tournament",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=128)),
                ("description", models.TextField(blank=True)),
                ("rules", models.TextField(blank=True)),
                ("format_type", models.CharField(default="single_elimination", max_length=32)),
                ("match_format", models.CharField(default="1v1", max_length=16)),
                ("platform", models.CharField(default="PC", max_length=16)),
                ("entry_fee", models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                ("prize_pool", models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ("capacity", models.PositiveIntegerField(default=16)),
                ("occupancy", models.PositiveIntegerField(default=0, editable=False)),
                ("start_date", models.DateField()),
                ("start_time", models.TimeField(default=datetime.time(18, 0))),
                ("registration_deadline", models.DateField(blank=True, null=True)),
                ("status", models.CharField(choices=[("draft", "Draft"), ("registration_open", "Registration open"), ("closed", "Closed"), ("completed", "Completed"), ("cancelled", "Cancelled")], default="draft", max_length=24)),
                ("is_featured", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="created_tournaments", to=settings.AUTH_USER_MODEL)),
                ("game", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.PROTECT, related_name="tournaments", to="tournaments.game")),
            ],
            options={
                "ordering": ("-created_at", "-id"),
                "indexes": [models.Index(fields=["status", "created_at"], name="tournament_status_created_idx")],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(capacity__gt=0), name="tournament_capacity_positive"),
                    models.CheckConstraint(condition=models.Q(occupancy__lte=models.F("capacity")), name="tournament_occupancy_lte_capacity"),
                ],
            },
        ),
    ]
