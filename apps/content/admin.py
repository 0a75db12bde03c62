from django.contrib import admin

from .models import Faq
from .models import Initiative
from .models import MediaHighlight
from .models import Partner
from .models import PressArticle
from .models import Testimonial


@admin.register(Testimonial)
class TestimonialAdmin(admin.ModelAdmin):
    list_display = ['partner_name', 'rating', 'order']
    list_editable = ['order']
    search_fields = ['partner_name', 'quote']


@admin.register(Faq)
class FaqAdmin(admin.ModelAdmin):
    list_display = ['question', 'order']
    list_editable = ['order']
    search_fields = ['question', 'answer']


@admin.register(Initiative)
class InitiativeAdmin(admin.ModelAdmin):
    list_display = ['title', 'start_date', 'created_at']
    search_fields = ['title', 'description']


@admin.register(PressArticle)
class PressArticleAdmin(admin.ModelAdmin):
    list_display = ['title', 'publication', 'date', 'featured']
    list_filter = ['featured', 'publication']
    search_fields = ['title', 'publication']


@admin.register(MediaHighlight)
class MediaHighlightAdmin(admin.ModelAdmin):
    list_display = ['title', 'media_name', 'date']
    search_fields = ['title', 'media_name']


@admin.register(Partner)
class PartnerAdmin(admin.ModelAdmin):
    list_display = ['name', 'collaboration_status', 'collaboration_date', 'created_at']
    list_filter = ['collaboration_status']
    search_fields = ['name']
