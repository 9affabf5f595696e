from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'customers'


class OptionalSlashRouter(SimpleRouter):
    """Router whose routes match with or without a trailing slash."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.trailing_slash = '/?'


# Router for ViewSets
router = OptionalSlashRouter()
router.register(r'customers', views.CustomerViewSet, basename='customer')

urlpatterns = [
    # Customer ViewSet routes
    # GET    /api/customers                    - List customers with installments
    # GET    /api/customers/by-plot/{plotKey}  - Customer booked on a plot
    # POST   /api/customers                    - Book a plot
    # PUT    /api/customers/{id}               - Edit booking
    # DELETE /api/customers/{id}               - Delete booking, release plot

    # Include router URLs
    path('', include(router.urls)),
]
