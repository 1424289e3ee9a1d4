"""Domain exceptions raised by the reporting services"""


class EntityNotFoundException(Exception):
    """
    Raised when an entity or a relationship between entities is missing

    The message names the entity type and the key that was looked up and
    is returned verbatim to API clients.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
