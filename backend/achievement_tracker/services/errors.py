"""
Achievement Tracker - Service Errors
Domain exceptions raised by the service layer
"""


class ServiceError(Exception):
    """Base service error."""
    pass


class NotFoundError(ServiceError):
    """A referenced record does not exist."""

    def __init__(self, entity: str, key: object):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} with ID {key} not found")
