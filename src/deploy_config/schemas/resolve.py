"""Deploy configuration resolution and validation.

This module provides the single entrypoint for turning a raw per-network
configuration into a DeployConfig: resolve_deploy_config().

Two iteration policies exist:

1. validate_supplied_fields() visits only the keys present in the raw
   input. A defaulted field whose key is omitted entirely is never
   visited, so it stays absent from the result.
2. resolve_deploy_config() visits the raw keys first, then every remaining
   schema field, so omitted fields always receive their defaults and
   omitted mandatory fields are always reported.

In both, the first violation encountered is raised and the raw input is
never modified.
"""

import logging
from typing import Any, Iterable, Mapping, Union

from deploy_config.errors import InvalidFieldType, MissingRequiredField
from deploy_config.schemas.deploy import DeployConfig
from deploy_config.schemas.fields import DEPLOY_CONFIG_SCHEMA, get_field_spec


logger = logging.getLogger(__name__)


def _check_field(name: str, value: Any) -> Any:
    """Fill in a default for an undefined value, then type-check it.

    ``None`` counts as undefined.

    Returns
    -------
    Any
        The value to store for ``name``.

    Raises
    ------
    UnknownField
        If ``name`` is not declared in the schema.
    MissingRequiredField
        If the value is undefined and the field has no default.
    InvalidFieldType
        If the value does not match the field's declared type.
    """
    spec = get_field_spec(name)

    if value is None:
        if not spec.has_default:
            raise MissingRequiredField(name, spec.type.value)
        value = spec.default
        logger.debug("Using default for %s: %r", name, value)
        # A None default means the field stays unset
        if value is None:
            return None

    if not spec.type.validate(value):
        raise InvalidFieldType(name, spec.type.value, value)

    return value


def _check_fields(raw: Mapping[str, Any], names: Iterable[str]) -> dict[str, Any]:
    return {name: _check_field(name, raw.get(name)) for name in names}


def validate_supplied_fields(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Validate only the fields present in ``raw``, in ``raw``'s key order.

    Undefined (``None``) values are replaced by their defaults. Keys that
    are absent from ``raw`` are not visited: a mandatory field left out is
    not reported, and a defaulted field left out gets no default.

    Parameters
    ----------
    raw : Mapping[str, Any]
        Raw configuration values keyed by config field name.

    Returns
    -------
    dict
        New dictionary holding exactly the keys of ``raw``, validated.

    Examples
    --------
    >>> validate_supplied_fields({"network": "goerli", "hfBerlinBlock": None})
    {'network': 'goerli', 'hfBerlinBlock': 0}
    """
    return _check_fields(raw, list(raw))


def resolve_deploy_config(raw: Union[Mapping[str, Any], DeployConfig]) -> DeployConfig:
    """Resolve a raw configuration into a complete, immutable DeployConfig.

    Fields supplied in ``raw`` are checked first, in ``raw``'s own order;
    then every schema field not supplied is checked in declaration order.
    This means every omitted field with a default receives it and every
    omitted mandatory field raises MissingRequiredField.

    Parameters
    ----------
    raw : Mapping[str, Any] or DeployConfig
        Raw configuration values keyed by config field name. An already
        resolved DeployConfig is accepted and resolves to an equal one.

    Returns
    -------
    DeployConfig
        Fully populated, type-checked configuration.

    Raises
    ------
    ValidationError
        UnknownField, MissingRequiredField or InvalidFieldType for the
        first violation encountered.

    Examples
    --------
    >>> config = resolve_deploy_config(goerli_raw)
    >>> config.gas_price_oracle_overhead
    2750
    """
    if isinstance(raw, DeployConfig):
        raw = raw.to_raw()

    supplied = list(raw)
    omitted = [name for name in DEPLOY_CONFIG_SCHEMA if name not in raw]

    resolved = _check_fields(raw, supplied)
    resolved.update(_check_fields(raw, omitted))

    if omitted:
        logger.debug("Filled %d omitted field(s): %s", len(omitted), ", ".join(omitted))

    return DeployConfig.model_validate(resolved)
