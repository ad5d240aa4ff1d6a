"""Extraction and validation of declared fields before any SQL is issued"""

from typing import Optional

from exalib.errors import ValidationError
from exalib.resource_data import ResourceData
from exalib.utils.identifiers import is_valid_identifier


def required_str(data: ResourceData, field: str) -> str:
    """Get a non-empty string field"""
    value = data.get(field)
    if value is None or value == "":
        raise ValidationError(f"Missing required argument {field}")
    if not isinstance(value, str):
        raise ValidationError(
            f"Argument {field} must be a string, got {type(value).__name__}"
        )
    return value


def optional_str(data: ResourceData, field: str) -> Optional[str]:
    """Get a string field that may be absent (empty counts as absent)"""
    value = data.get(field)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValidationError(
            f"Argument {field} must be a string, got {type(value).__name__}"
        )
    return value


def identifier(data: ResourceData, field: str) -> str:
    """Get a field that is interpolated into DDL as a regular identifier"""
    value = required_str(data, field)
    if not is_valid_identifier(value):
        raise ValidationError(
            f"Argument {field} is not a valid identifier: {value!r}. "
            "Only regular identifiers are supported "
            "(letters, digits, underscores; must start with a letter)."
        )
    return value


def name(data: ResourceData) -> str:
    """Get the ``name`` every managed object declares"""
    return identifier(data, "name")
