from django.contrib import admin

from catalog.models import Experience, ExperienceAttendance, Trip, TripAttendance


class ExperienceAttendanceInline(admin.TabularInline):
    model = ExperienceAttendance
    extra = 1


class TripAttendanceInline(admin.TabularInline):
    model = TripAttendance
    extra = 1


@admin.register(Experience)
class ExperienceAdmin(admin.ModelAdmin):
    list_display = ["name", "organiser", "date", "location", "created_at"]
    search_fields = ["name", "location"]
    list_filter = ["organiser"]
    inlines = [ExperienceAttendanceInline]

    def get_readonly_fields(self, request, obj=None):
        # The organiser is fixed once the experience exists.
        readonly = list(super().get_readonly_fields(request, obj))
        if obj is not None:
            readonly.append("organiser")
        return readonly


@admin.register(Trip)
class TripAdmin(admin.ModelAdmin):
    list_display = ["destination", "organiser", "start_date", "end_date"]
    search_fields = ["destination"]
    list_filter = ["organiser"]
    inlines = [TripAttendanceInline]
