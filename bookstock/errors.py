"""Storage error taxonomy shared by the repository and service layers."""


class RepositoryError(Exception):
    """Base class for data-access failures."""


class NoRowsError(RepositoryError):
    """The statement matched or affected zero rows."""


class DatabaseQueryError(RepositoryError):
    """Any other driver or SQL failure, including timeouts."""
