class DomainError(Exception):
    pass


class RepositoryError(DomainError):
    pass


class ConfigurationError(DomainError):
    pass
