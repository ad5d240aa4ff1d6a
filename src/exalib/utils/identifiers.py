"""Utilities for validating Exasol identifiers"""

import re

_IDENTIFIER = re.compile(r'^[A-Za-z][A-Za-z0-9_]*$')


def is_valid_identifier(name: str) -> bool:
    """Check if a string is a valid Exasol regular (unquoted) identifier"""
    if not name or not isinstance(name, str):
        return False
    return bool(_IDENTIFIER.match(name))


def quote_literal(value: str) -> str:
    """Render a string as a SQL string literal, doubling embedded quotes"""
    return "'" + value.replace("'", "''") + "'"


def quote_password(value: str) -> str:
    """Render a password the way IDENTIFIED BY expects it (double quoted)"""
    return '"' + value.replace('"', '""') + '"'
