"""
Domain exceptions for plots app.

Raised by the plot services and rendered by the API exception handler.
"""
from rest_framework.exceptions import APIException


class PlotNotFoundError(APIException):
    """Plot with the given key does not exist."""
    status_code = 404
    default_detail = 'Plot not found.'
    default_code = 'plot_not_found'
