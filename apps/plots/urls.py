from django.urls import re_path
from . import views

app_name = 'plots'

urlpatterns = [
    # GET    /api/plots               - Plot map keyed by plot key
    # PUT    /api/plots/{key}         - Update plot details
    # PATCH  /api/plots/{key}/status  - Override plot status
    # A trailing slash is optional on every route.
    re_path(r'^plots/?$', views.plot_map, name='plot-map'),
    re_path(r'^plots/(?P<plot_key>[^/]+)/?$', views.update_plot, name='plot-detail'),
    re_path(r'^plots/(?P<plot_key>[^/]+)/status/?$', views.update_plot_status, name='plot-status'),
]
