from django.urls import re_path
from . import views

app_name = 'auth'

urlpatterns = [
    # Session authentication, trailing slash optional
    re_path(r'^auth/login/?$', views.login, name='login'),
    re_path(r'^auth/logout/?$', views.logout, name='logout'),
    re_path(r'^auth/me/?$', views.me, name='me'),
]
