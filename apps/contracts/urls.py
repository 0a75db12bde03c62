from django.urls import path

from apps.contracts import views

app_name = 'contracts'


urlpatterns = [
    # Templates
    path('templates/', views.TemplateListAPIView.as_view(), name='template-list'),  # GET ?workshop_date=&type=
    path('templates/create/', views.TemplateCreateAPIView.as_view(), name='template-create'),  # POST
    path('templates/<int:template_id>/', views.TemplateDetailAPIView.as_view(), name='template-detail'),  # GET
    path('templates/<int:template_id>/update/', views.TemplateUpdateAPIView.as_view(), name='template-update'),  # PUT
    path('templates/<int:template_id>/delete/', views.TemplateDeleteAPIView.as_view(), name='template-delete'),  # DELETE
    path('templates/<int:template_id>/clone/', views.TemplateCloneAPIView.as_view(), name='template-clone'),  # POST
    # Assignments
    path(
        'templates/<int:template_id>/assignments/',
        views.TemplateAssignmentListAPIView.as_view(),
        name='template-assignments',
    ),  # GET
    path(
        'templates/<int:template_id>/available-trainers/',
        views.TemplateAvailableTrainersAPIView.as_view(),
        name='template-available-trainers',
    ),  # GET
    path('templates/<int:template_id>/assign/', views.TemplateAssignAPIView.as_view(), name='template-assign'),  # POST
    path(
        'assignments/<int:assignment_id>/delete/', views.AssignmentDeleteAPIView.as_view(), name='assignment-delete'
    ),  # DELETE
    # Client contracts
    path('clients/', views.ClientContractListAPIView.as_view(), name='client-contract-list'),  # GET
    path('clients/create/', views.ClientContractCreateAPIView.as_view(), name='client-contract-create'),  # POST
    path(
        'clients/available-dates/',
        views.ClientContractAvailableDatesAPIView.as_view(),
        name='client-contract-available-dates',
    ),  # GET
    path('clients/<int:contract_id>/', views.ClientContractDetailAPIView.as_view(), name='client-contract-detail'),  # GET
    path(
        'clients/<int:contract_id>/update/', views.ClientContractUpdateAPIView.as_view(), name='client-contract-update'
    ),  # PUT
    path(
        'clients/<int:contract_id>/delete/', views.ClientContractDeleteAPIView.as_view(), name='client-contract-delete'
    ),  # DELETE
    path(
        'clients/<int:contract_id>/toggle-code-sent/',
        views.ClientContractToggleCodeSentAPIView.as_view(),
        name='client-contract-toggle-code-sent',
    ),  # POST
    path(
        'clients/<int:contract_id>/toggle-payment/',
        views.ClientContractTogglePaymentAPIView.as_view(),
        name='client-contract-toggle-payment',
    ),  # POST
    path(
        'clients/<int:contract_id>/send-code/',
        views.ClientContractSendCodeAPIView.as_view(),
        name='client-contract-send-code',
    ),  # POST
    path(
        'clients/<int:contract_id>/regenerate-code/',
        views.ClientContractRegenerateCodeAPIView.as_view(),
        name='client-contract-regenerate-code',
    ),  # POST
    path(
        'clients/<int:contract_id>/render/', views.ClientContractRenderAPIView.as_view(), name='client-contract-render'
    ),  # GET
]
