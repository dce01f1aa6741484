from django.urls import path

from . import views

app_name = 'admin_config'

urlpatterns = [
    path('config/', views.admin_config, name='admin_config'),
]
