"""Domain exceptions for mediators app."""
from rest_framework.exceptions import APIException


class MediatorNotFoundError(APIException):
    """Mediator with the given id does not exist."""
    status_code = 404
    default_detail = 'Mediator not found.'
    default_code = 'mediator_not_found'
