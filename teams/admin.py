from django.contrib import admin
from django.db.models import Count, Q
from .models import Team, TeamMembership

class MembershipInline(admin.TabularInline):
    model = TeamMembership
    extra = 0
    fields = ("user", "role", "joined_at")
    readonly_fields = ("joined_at",)
    raw_id_fields = ("user",)

@admin.register(Team)
class TeamAdmin(admin.ModelAdmin):
    list_display = ("name", "tag", "game", "captain", "member_count", "active_registrations", "created_at")
    list_filter = ("game",)
    search_fields = ("name", "tag", "invite_code", "captain__username")
    readonly_fields = ("invite_code", "created_at")
    raw_id_fields = ("captain",)
    inlines = [MembershipInline]

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(
            _member_count=Count("memberships", distinct=True),
            _active_registrations=Count(
                "registrations", filter=Q(registrations__status="registered"), distinct=True
            ),
        )

    @admin.display(description="Members", ordering="_member_count")
    def member_count(self, obj):
        return obj._member_count

    @admin.display(description="Registrations", ordering="_active_registrations")
    def active_registrations(self, obj):
        return obj._active_registrations

@admin.register(TeamMembership)
class TeamMembershipAdmin(admin.ModelAdmin):
    list_display = ("user", "team", "role", "joined_at")
    list_filter = ("role",)
    search_fields = ("user__username", "team__name", "team__tag")
