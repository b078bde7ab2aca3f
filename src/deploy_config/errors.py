"""Error taxonomy for deploy configuration resolution.

Every failure is deterministic input validation: nothing here is retried
and no partial configuration is ever returned.

- UnknownNetwork: no raw configuration source for the requested network
- ValidationError: raw configuration does not satisfy the schema
    - MissingRequiredField
    - InvalidFieldType
    - UnknownField
"""

from typing import Any, Optional


class DeployConfigError(Exception):
    """Base exception for all deploy configuration errors."""
    pass


class UnknownNetwork(DeployConfigError):
    """Raised when no configuration source exists for a network name.

    Parameters
    ----------
    network : str
        The requested network name.
    available : list of str, optional
        Network names that do have a configuration source.
    """

    def __init__(self, network: str, available: Optional[list[str]] = None):
        self.network = network
        self.available = list(available or [])
        message = f"no deploy config found for network: {network}"
        if self.available:
            message += f" (available: {', '.join(sorted(self.available))})"
        super().__init__(message)


class ValidationError(DeployConfigError):
    """Raised when a raw configuration fails schema validation.

    ``network`` is filled in by the loader entry point so the message
    names the network whose configuration was rejected.
    """

    def __init__(self, message: str, network: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.network = network

    def __str__(self) -> str:
        if self.network is None:
            return self.message
        return f"{self.message} (network: {self.network})"


class MissingRequiredField(ValidationError):
    """A mandatory field is absent from the raw configuration."""

    def __init__(self, field: str, expected_type: str):
        self.field = field
        self.expected_type = expected_type
        super().__init__(
            f"deploy config is missing required field: {field} ({expected_type})"
        )


class InvalidFieldType(ValidationError):
    """A field's value fails its type or format check."""

    def __init__(self, field: str, expected_type: str, value: Any):
        self.field = field
        self.expected_type = expected_type
        self.value = value
        super().__init__(
            f"deploy config field: {field} is not of type {expected_type}: {value!r}"
        )


class UnknownField(ValidationError):
    """The raw configuration contains a key the schema does not declare."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"deploy config has unknown field: {field}")
