from django.urls import re_path
from . import views

app_name = 'mediators'

urlpatterns = [
    # GET    /api/mediators       - List mediators
    # POST   /api/mediators       - Add or refresh mediator
    # DELETE /api/mediators/{id}  - Remove mediator
    # A trailing slash is optional on every route.
    re_path(r'^mediators/?$', views.mediator_list, name='mediator-list'),
    re_path(r'^mediators/(?P<pk>\d+)/?$', views.mediator_detail, name='mediator-detail'),
]
