import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("teams", "0001_initial"),
        ("tournaments", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Registration",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("status", models.CharField(choices=[("registered", "Registered"), ("unregistered", "Unregistered")], default="registered", max_length=16)),
                ("created_at", models.PositiveBigIntegerField()),
                ("withdrawn_at", models.PositiveBigIntegerField(blank=True, null=True)),
                ("participant", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="registrations", to=settings.AUTH_USER_MODEL)),
                ("team", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="registrations", to="teams.team")),
                ("tournament", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="registrations", to="tournaments.tournament")),
            ],
            options={
                "ordering": ("created_at", "id"),
                "indexes": [
                    models.Index(fields=["tournament", "status"], name="registration_tournament_status"),
                    models.Index(fields=["created_at"], name="registration_created_at_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(condition=models.Q(status="registered"), fields=("tournament", "participant"), name="unique_active_registration"),
                ],
            },
        ),
    ]
