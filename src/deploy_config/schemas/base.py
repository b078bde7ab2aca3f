"""Base Pydantic model with strict defaults for deploy configs.

All deploy config schemas inherit from this base to ensure consistent
validation behavior across the resolved record and CLI options.
"""

from pydantic import BaseModel, ConfigDict


class DeployBaseModel(BaseModel):
    """Base model for all deploy configuration schemas.

    Enforces strict validation:
    - No extra fields allowed
    - No type coercion (an int stays an int, "1" is never a number)
    - Immutable after construction
    """

    model_config = ConfigDict(
        extra='forbid',           # Reject unknown fields
        strict=True,              # No coercion between types
        frozen=True,              # Immutable after construction
    )
