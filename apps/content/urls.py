from django.urls import path

from apps.content.resources import RESOURCES
from apps.content.views import ContentCreateAPIView
from apps.content.views import ContentDeleteAPIView
from apps.content.views import ContentDetailAPIView
from apps.content.views import ContentListAPIView
from apps.content.views import ContentReorderAPIView
from apps.content.views import ContentUpdateAPIView

app_name = 'content'


def resource_urls(resource):
    name = resource.name
    patterns = [
        path(f'{name}/', ContentListAPIView.as_view(resource_name=name), name=f'{name}-list'),  # GET
        path(f'{name}/create/', ContentCreateAPIView.as_view(resource_name=name), name=f'{name}-create'),  # POST
        path(f'{name}/<int:item_id>/', ContentDetailAPIView.as_view(resource_name=name), name=f'{name}-detail'),  # GET
        path(
            f'{name}/<int:item_id>/update/',
            ContentUpdateAPIView.as_view(resource_name=name),
            name=f'{name}-update',
        ),  # PUT
        path(
            f'{name}/<int:item_id>/delete/',
            ContentDeleteAPIView.as_view(resource_name=name),
            name=f'{name}-delete',
        ),  # DELETE
    ]
    if resource.reorderable:
        patterns.append(
            path(f'{name}/reorder/', ContentReorderAPIView.as_view(resource_name=name), name=f'{name}-reorder'),  # POST
        )
    return patterns


urlpatterns = [pattern for resource in RESOURCES.values() for pattern in resource_urls(resource)]
