from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response

from apps.content.serializers import SERIALIZERS
from apps.shared.base.base_api_view import BaseAPIView
from apps.shared.container import get_content_service
from apps.shared.serializers import ReorderSerializer


class BaseContentAPIView(BaseAPIView):
    """
    Base view for one content resource.

    ``resource_name`` is given to ``as_view()`` in the URL configuration.
    """

    resource_name = None
    _content_service = None

    def get_service(self):
        if self._content_service is None:
            self._content_service = get_content_service(self.resource_name)
        return self._content_service

    def get_serializer_class(self):
        return SERIALIZERS[self.resource_name][1]

    def serialize(self, items, many=False):
        read_serializer = SERIALIZERS[self.resource_name][0]
        context = {'image_service': self.get_service().image_service}
        return read_serializer(items, many=many, context=context).data


@extend_schema(tags=['Content'])
class ContentListAPIView(BaseContentAPIView):
    def get(self, request):
        items = self.get_service().list_items()
        return Response(self.serialize(items, many=True), status=status.HTTP_200_OK)


@extend_schema(tags=['Content'])
class ContentCreateAPIView(BaseContentAPIView):
    def post(self, request):
        serializer = self.get_serializer_class()(data=request.data)
        serializer.is_valid(raise_exception=True)

        item = self.get_service().create_item(serializer.validated_data)
        return Response(self.serialize(item), status=status.HTTP_201_CREATED)


@extend_schema(tags=['Content'])
class ContentDetailAPIView(BaseContentAPIView):
    def get(self, request, item_id):
        item = self.get_service().get_item(item_id)
        return Response(self.serialize(item), status=status.HTTP_200_OK)


@extend_schema(tags=['Content'])
class ContentUpdateAPIView(BaseContentAPIView):
    def put(self, request, item_id):
        item = self.get_service().get_item(item_id)
        serializer = self.get_serializer_class()(item, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        item = self.get_service().update_item(item_id, serializer.validated_data)
        return Response(self.serialize(item), status=status.HTTP_200_OK)

    patch = put


@extend_schema(tags=['Content'])
class ContentDeleteAPIView(BaseContentAPIView):
    def delete(self, request, item_id):
        self.get_service().delete_item(item_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=['Content'], request=ReorderSerializer)
class ContentReorderAPIView(BaseContentAPIView):
    """Persist the drag-and-drop order: ``{"ids": [3, 1, 2]}``"""

    def get_serializer_class(self):
        return ReorderSerializer

    def post(self, request):
        serializer = ReorderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        updated = self.get_service().reorder(serializer.validated_data['ids'])
        return Response({'updated': updated}, status=status.HTTP_200_OK)
