from django.contrib import admin
from .models import Game, Tournament, Registration

class RegistrationInline(admin.TabularInline):
    model = Registration
    extra = 0
    can_delete = False
    fields = ("participant", "team", "status", "created_at", "withdrawn_at")
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Game)
class GameAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "is_active")
    list_filter = ("is_active",)
    search_fields = ("name", "slug")
    prepopulated_fields = {"slug": ("name",)}


@admin.register(Tournament)
class TournamentAdmin(admin.ModelAdmin):
    list_display = (
        "title", "game", "start_date", "status", "occupancy", "capacity", "is_featured",
    )
    list_filter = ("status", "game", "is_featured")
    search_fields = ("title",)
    readonly_fields = ("occupancy", "created_by", "created_at", "updated_at")
    inlines = [RegistrationInline]

    def save_model(self, request, obj, form, change):
        if not change and obj.created_by_id is None:
            obj.created_by = request.user
        super().save_model(request, obj, form, change)


@admin.register(Registration)
class RegistrationAdmin(admin.ModelAdmin):
    list_display = ("tournament", "participant", "team", "status", "created_at")
    list_filter = ("status",)
    search_fields = ("tournament__title", "participant__username")
    readonly_fields = ("tournament", "participant", "team", "status", "created_at", "withdrawn_at")

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
