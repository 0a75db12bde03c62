from django.urls import path
from django.urls import register_converter

from apps.workshops import views
from apps.workshops.converters import IsoDateConverter

app_name = 'workshops'

register_converter(IsoDateConverter, 'isodate')


urlpatterns = [
    # Workshops
    path('', views.WorkshopListAPIView.as_view(), name='workshop-list'),  # GET /workshops/
    path('create/', views.WorkshopCreateAPIView.as_view(), name='workshop-create'),  # POST /workshops/create/
    path('status/', views.WorkshopStatusListAPIView.as_view(), name='workshop-status-list'),  # GET /workshops/status/
    path(
        'generate-password/', views.WorkshopPasswordGenerateAPIView.as_view(), name='workshop-generate-password'
    ),  # GET
    path('<int:workshop_id>/', views.WorkshopDetailAPIView.as_view(), name='workshop-detail'),  # GET
    path('<int:workshop_id>/update/', views.WorkshopUpdateAPIView.as_view(), name='workshop-update'),  # PUT
    path('<int:workshop_id>/delete/', views.WorkshopDeleteAPIView.as_view(), name='workshop-delete'),  # DELETE
    path('<int:workshop_id>/status/', views.WorkshopStatusDetailAPIView.as_view(), name='workshop-status'),  # GET
    # Trainers
    path('trainers/', views.TrainerListAPIView.as_view(), name='trainer-list'),  # GET ?workshop_date=
    path('trainers/create/', views.TrainerCreateAPIView.as_view(), name='trainer-create'),  # POST
    path('trainers/generate-code/', views.TrainerCodeGenerateAPIView.as_view(), name='trainer-generate-code'),  # GET
    path('trainers/<int:trainer_id>/', views.TrainerDetailAPIView.as_view(), name='trainer-detail'),  # GET
    path('trainers/<int:trainer_id>/update/', views.TrainerUpdateAPIView.as_view(), name='trainer-update'),  # PUT
    path(
        'trainers/<int:trainer_id>/toggle-code-sent/',
        views.TrainerToggleCodeSentAPIView.as_view(),
        name='trainer-toggle-code-sent',
    ),  # POST
    path('trainers/<int:trainer_id>/delete/', views.TrainerDeleteAPIView.as_view(), name='trainer-delete'),  # DELETE
    # Registrations
    path('registrations/', views.RegistrationListAPIView.as_view(), name='registration-list'),  # GET
    path(
        'registrations/<int:registration_id>/', views.RegistrationDetailAPIView.as_view(), name='registration-detail'
    ),  # GET
    path(
        'registrations/<int:registration_id>/toggle-paid/',
        views.RegistrationTogglePaidAPIView.as_view(),
        name='registration-toggle-paid',
    ),  # POST
    path(
        'registrations/<int:registration_id>/contract/',
        views.RegistrationContractAPIView.as_view(),
        name='registration-contract',
    ),  # GET
    path(
        'registrations/<int:registration_id>/delete/',
        views.RegistrationDeleteAPIView.as_view(),
        name='registration-delete',
    ),  # DELETE
    # Guidelines
    path('guidelines/', views.GuidelinesListAPIView.as_view(), name='guidelines-list'),  # GET
    path('guidelines/upsert/', views.GuidelinesUpsertAPIView.as_view(), name='guidelines-upsert'),  # POST
    path(
        'guidelines/<isodate:workshop_date>/', views.GuidelinesDetailAPIView.as_view(), name='guidelines-detail'
    ),  # GET
    path(
        'guidelines/<int:guidelines_id>/delete/', views.GuidelinesDeleteAPIView.as_view(), name='guidelines-delete'
    ),  # DELETE
]
