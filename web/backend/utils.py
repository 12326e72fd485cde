#!/usr/bin/env python3
"""
Utility functions for the web application.
"""

import uuid
from decimal import Decimal
from typing import Optional, Any
from fastapi import HTTPException


def safe_float(value: Optional[Any], default: float = 0.0) -> float:
    """
    Safely convert value to float.

    Args:
        value: Value to convert (can be Decimal, int, float, or None).
        default: Default value if conversion fails or value is None.

    Returns:
        Float value.
    """
    if value is None:
        return default

    if isinstance(value, Decimal):
        return float(value)

    try:
        return float(value)
    except (ValueError, TypeError):
        return default


def safe_str(value: Optional[Any], default: str = "") -> str:
    """
    Safely convert value to string.

    Args:
        value: Value to convert.
        default: Default value if value is None.

    Returns:
        String value.
    """
    if value is None:
        return default
    return str(value)


def validate_uuid(value: str, field_name: str = "id") -> str:
    """Validate that value is a valid UUID string, raising HTTP 400 otherwise."""
    try:
        uuid.UUID(value)
        return value
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid {field_name} format: {value}. Must be a valid UUID."
        )
