from django.contrib import admin
from django.contrib.admin.sites import NotRegistered
from django.contrib.auth import get_user_model
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from teams.models import Team
from .models import Wallet, WalletTransaction

User = get_user_model()

class CaptainTeamInline(admin.TabularInline):
    model = Team
    fk_name = "captain"
    fields = ("name", "tag", "game")
    extra = 0
    verbose_name = "Team (captain)"
    verbose_name_plural = "Teams where user is captain"

try:
    admin.site.unregister(User)
except NotRegistered:
    pass


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    inlines = [CaptainTeamInline]

    list_display = BaseUserAdmin.list_display + ("role", "active_registrations", "captain_of_teams")
    list_filter = ("role", "is_staff", "is_superuser", "groups")
    search_fields = ("username", "email", "first_name", "last_name")
    readonly_fields = getattr(BaseUserAdmin, "readonly_fields", ()) + ("permissions_summary",)

    fieldsets = BaseUserAdmin.fieldsets + (
        ("Platform", {"fields": ("role", "avatar")}),
        ("Permissions summary", {"fields": ("permissions_summary",)}),
    )

    def active_registrations(self, obj):
        return obj.registrations.filter(status="registered").count()
    active_registrations.short_description = "Registrations"

    def captain_of_teams(self, obj):
        return ", ".join(t.name for t in obj.captain_teams.all()) or "—"
    captain_of_teams.short_description = "Teams captain"

    def permissions_summary(self, obj):
        if not obj or not getattr(obj, "pk", None):
            return ""
        groups = ", ".join(g.name for g in obj.groups.all()) or "—"
        return f"role={obj.role}, staff={obj.is_staff}, superuser={obj.is_superuser}, groups=[{groups}]"


class WalletTransactionInline(admin.TabularInline):
    model = WalletTransaction
    extra = 0
    can_delete = False
    fields = ("kind", "amount", "description", "tournament", "created_at")
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Wallet)
class WalletAdmin(admin.ModelAdmin):
    list_display = ("user", "balance", "updated_at")
    search_fields = ("user__username", "user__email")
    readonly_fields = ("user", "balance", "created_at", "updated_at")
    inlines = [WalletTransactionInline]

    def has_add_permission(self, request):
        return False
