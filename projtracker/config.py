"""Connection settings for the projects store."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import ArgumentError

from projtracker.exc import ConfigurationError

#: Prefix shared by every environment variable read by
#: :meth:`DatabaseSettings.from_env`.
ENV_PREFIX: Final[str] = "PROJECTS_DB_"


@dataclass(frozen=True)
class DatabaseSettings:
    """
    Where the projects store lives.

    Either give a full SQLAlchemy ``url``, or a ``host`` plus the other
    connection parts.  With neither, the default SQLite file in the
    per-user application directory is used (see
    :func:`~projtracker.db.create_engine_from_settings`).
    """

    #: A complete SQLAlchemy URL; wins over every other field.
    url: str | None = None
    #: The SQLAlchemy dialect and driver for host-based URLs.
    driver: str = "mysql+pymysql"
    #: The database host.
    host: str | None = None
    #: The database port.
    port: int = 3306
    #: The schema (database) name.
    schema: str = "projects"
    #: The user to connect as.
    user: str | None = None
    #: The password for :attr:`user`.
    password: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "DatabaseSettings":
        """
        Build settings from ``PROJECTS_DB_*`` environment variables.

        Recognized: ``URL``, ``DRIVER``, ``HOST``, ``PORT``, ``SCHEMA``,
        ``USER`` and ``PASSWORD``.  Unset variables keep the field default.

        Keyword Args:
            environ: Mapping to read instead of :data:`os.environ`

        Raises:
            ConfigurationError: ``PROJECTS_DB_PORT`` is not an integer

        Returns:
            The settings

        """
        if environ is None:
            environ = os.environ
        kwargs: dict[str, str | int] = {}
        for name in ("url", "driver", "host", "schema", "user", "password"):
            value = environ.get(f"{ENV_PREFIX}{name.upper()}")
            if value:
                kwargs[name] = value
        port = environ.get(f"{ENV_PREFIX}PORT")
        if port:
            try:
                kwargs["port"] = int(port)
            except ValueError:
                msg = f"{ENV_PREFIX}PORT must be an integer, got {port!r}"
                raise ConfigurationError(msg) from None
        return cls(**kwargs)  # type: ignore[arg-type]

    def sqlalchemy_url(self) -> URL | None:
        """
        The URL to connect to, or ``None`` when the default SQLite file
        should be used.
        """
        if self.url:
            try:
                return make_url(self.url)
            except ArgumentError as e:
                msg = f"Invalid database URL: {e!s}"
                raise ConfigurationError(msg) from e
        if self.host:
            return URL.create(
                self.driver,
                username=self.user,
                password=self.password,
                host=self.host,
                port=self.port,
                database=self.schema,
            )
        return None

