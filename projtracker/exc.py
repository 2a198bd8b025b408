from sqlalchemy.engine import URL


class DoesNotExist(LookupError):  # noqa: N818
    """Exception raised when a resource does not exist."""

    def __init__(self, resource_type: str, resource_id: int | str | None):
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(f'{resource_type} with ID "{resource_id!s}" does not exist')


class DbUnavailable(Exception):  # noqa: N818
    """Exception raised when a connection to the store cannot be obtained."""

    def __init__(self, url: URL | str, error: Exception):
        if isinstance(url, URL):
            url = url.render_as_string(hide_password=True)
        self.url = url
        self.error = error
        super().__init__(f"Database {self.url} is unavailable: {error!s}")


class DbException(Exception):
    """
    Exception raised when a statement fails inside a transaction.

    The enclosing transaction has already been rolled back by the time this
    is raised.
    """

    def __init__(self, message: str, error: Exception | None = None):
        self.error = error
        super().__init__(message)


class ConfigurationError(ValueError):
    """Exception raised when database settings are invalid."""


class InvalidInput(ValueError):  # noqa: N818
    """Exception raised when a menu answer cannot be parsed."""

    def __init__(self, value: str, kind: str = "number"):
        self.value = value
        super().__init__(f"{value} is not a valid {kind}.")
