from django.contrib import admin
from django.db import models

from .models import Event
from .models import EventPhoto


class EventPhotoInline(admin.TabularInline):
    model = EventPhoto
    extra = 0
    fields = ['src', 'alt', 'order']
    ordering = ['order', 'id']


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    inlines = [EventPhotoInline]

    list_display = ['occasion', 'date', 'location', 'photos_count', 'created_at']
    list_filter = ['date', 'created_at']
    search_fields = ['occasion', 'location', 'description']
    readonly_fields = ['created_at', 'updated_at']
    date_hierarchy = 'date'

    fieldsets = (
        ('Basic Information', {'fields': ('occasion', 'date', 'location', 'description')}),
        ('People', {'fields': ('people',), 'classes': ('collapse',)}),
        ('System Fields', {'fields': ('created_at', 'updated_at'), 'classes': ('collapse',)}),
    )

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(photo_count=models.Count('photos'))

    @admin.display(description='Photos', ordering='photo_count')
    def photos_count(self, obj):
        return obj.photo_count


@admin.register(EventPhoto)
class EventPhotoAdmin(admin.ModelAdmin):
    list_display = ['id', 'event', 'alt', 'order']
    list_filter = ['event']
    list_select_related = ['event']
    ordering = ['event', 'order']
