"""Exceptions raised while configuring and running deployments."""


class DeploymentError(Exception):
    """Base exception for all raffle deployment errors."""


class ConfigurationError(DeploymentError, ValueError):
    """Raised when the deployment configuration is incomplete or invalid."""


class UnknownChainError(ConfigurationError):
    """Raised when no chain profile exists for a chain id."""


class UnknownNetworkError(ConfigurationError):
    """Raised when no network settings exist for a network name."""


class MissingEnvironmentVariable(ConfigurationError):
    """Raised when a required environment variable is not set."""


class DeploymentNotFound(DeploymentError, LookupError):
    """Raised when a contract was not deployed during the current run."""
