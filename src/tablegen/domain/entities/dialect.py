"""Database dialects supported by the DDL generator."""

from enum import Enum

from tablegen.core.exceptions import ConfigurationError


class Dialect(str, Enum):
    """Relational engines a table can be generated for."""

    MYSQL = "mysql"
    POSTGRESQL = "postgresql"
    SQLITE = "sqlite"

    @classmethod
    def from_name(cls, name: str) -> "Dialect":
        """Map a SQLAlchemy dialect name onto a supported dialect.

        Args:
            name: Dialect name as reported by ``engine.dialect.name``.

        Returns:
            The matching dialect.

        Raises:
            ConfigurationError: If the name is not a supported engine.
        """
        normalized = str(name).lower()
        if normalized == "mariadb":
            return cls.MYSQL
        for dialect in cls:
            if dialect.value == normalized:
                return dialect
        raise ConfigurationError(f"Unsupported dialect: {name}")
