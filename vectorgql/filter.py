"""
Filter module for vectorgql.

This module provides typed filter definitions and utilities to convert
filter dictionaries into where filters for GraphQL queries.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Literal, Union

from .where_filter import Operator, WhereFilter

# Type definitions for filter values
FieldValue = Union[str, int, float, bool, datetime]
NumericFieldValue = Union[int, float, datetime]

# Simple filter types
ExactMatchFilter = Dict[str, FieldValue]

# Comparison operators
EqFilter = Dict[Literal["$eq"], FieldValue]
NeFilter = Dict[Literal["$ne"], FieldValue]
GtFilter = Dict[Literal["$gt"], NumericFieldValue]
GteFilter = Dict[Literal["$gte"], NumericFieldValue]
LtFilter = Dict[Literal["$lt"], NumericFieldValue]
LteFilter = Dict[Literal["$lte"], NumericFieldValue]
LikeFilter = Dict[Literal["$like"], str]

# Collection operators
InFilter = Dict[Literal["$in"], List[FieldValue]]
AllFilter = Dict[Literal["$all"], List[FieldValue]]

# Existence operator
ExistsFilter = Dict[Literal["$exists"], bool]

# Combined filter types
FieldFilter = Union[
    EqFilter,
    NeFilter,
    GtFilter,
    GteFilter,
    LtFilter,
    LteFilter,
    LikeFilter,
    InFilter,
    AllFilter,
    ExistsFilter,
]

SimpleFilter = Union[
    ExactMatchFilter,
    Dict[str, FieldFilter],
]

# Logical operators
AndFilter = Dict[Literal["$and"], List["FilterTypedDict"]]
OrFilter = Dict[Literal["$or"], List["FilterTypedDict"]]

# Overall filter type
FilterTypedDict = Union[SimpleFilter, AndFilter, OrFilter]

_COMPARISON_OPERATORS = {
    "$eq": Operator.EQUAL,
    "$ne": Operator.NOT_EQUAL,
    "$gt": Operator.GREATER_THAN,
    "$gte": Operator.GREATER_THAN_EQUAL,
    "$lt": Operator.LESS_THAN,
    "$lte": Operator.LESS_THAN_EQUAL,
}

_COLLECTION_OPERATORS = {
    "$in": Operator.CONTAINS_ANY,
    "$all": Operator.CONTAINS_ALL,
}


def _get_value_keyword(value: Any) -> str:
    """
    Determine the where filter value keyword based on value type.

    Args:
        value: The value to match against

    Returns:
        Name of the WhereFilter keyword argument holding the value

    Raises:
        ValueError: If the value type is not supported
    """
    # Check bool first since bool is a subclass of int
    if isinstance(value, bool):
        return "value_boolean"
    elif isinstance(value, int):
        return "value_int"
    elif isinstance(value, float):
        return "value_number"
    elif isinstance(value, str):
        return "value_text"
    elif isinstance(value, datetime):
        return "value_date"
    else:
        raise ValueError(f"Unsupported value type: {type(value)}")


def _get_array_value_keyword(values: List[Any]) -> str:
    """Determine the where filter array keyword from the type of the values."""
    if not values:
        raise ValueError("Collection filter values must not be empty")
    keywords = {_get_value_keyword(value) for value in values}
    # Mixed int and float lists are compared as numbers
    if keywords == {"value_int", "value_number"}:
        return "value_number_array"
    if len(keywords) != 1:
        raise ValueError("Collection filter values must share one type")
    return f"{keywords.pop()}_array"


def _get_path(field_name: str) -> List[str]:
    """Split a dotted field name into a property path."""
    return field_name.split(".")


def parse_filter(filter_dict: FilterTypedDict) -> WhereFilter:
    """
    Parse a filter dictionary into a where filter.

    Args:
        filter_dict: Filter specification following the FilterTypedDict schema

    Returns:
        WhereFilter equivalent to the dictionary

    Raises:
        ValueError: If the filter format is invalid
    """
    if not isinstance(filter_dict, dict):
        raise ValueError("Filter must be a dictionary")

    if len(filter_dict) != 1:
        raise ValueError("Filter must contain exactly one key")

    # Handle logical operators
    if "$and" in filter_dict:
        return _handle_logical_filter(filter_dict, "$and", Operator.AND)
    elif "$or" in filter_dict:
        return _handle_logical_filter(filter_dict, "$or", Operator.OR)
    else:
        # Handle field filters
        field_name = next(iter(filter_dict))
        field_value = filter_dict[field_name]

        if isinstance(field_value, dict):
            # Handle operator-based field filter
            return _handle_operator_filter(field_name, field_value)
        else:
            # Handle exact match filter
            return WhereFilter(
                path=_get_path(field_name),
                operator=Operator.EQUAL,
                **{_get_value_keyword(field_value): field_value},
            )


def _handle_logical_filter(filter_dict: Dict, key: str, operator: Operator) -> WhereFilter:
    """Handle $and and $or operator filters."""
    sub_filters = filter_dict[key]
    if not isinstance(sub_filters, list):
        raise ValueError(f"{key} must be a list of filters")
    if not sub_filters:
        raise ValueError(f"{key} must contain at least one filter")

    return WhereFilter(
        operator=operator,
        operands=[parse_filter(sub_filter) for sub_filter in sub_filters],
    )


def _handle_operator_filter(field_name: str, field_filter: Dict) -> WhereFilter:
    """Handle operator-based field filters like $eq, $gt, etc."""
    if len(field_filter) != 1:
        raise ValueError("Field filter must contain exactly one key")

    operator = next(iter(field_filter))
    field_value = field_filter[operator]
    path = _get_path(field_name)

    # Equality and numeric comparison operators
    if operator in _COMPARISON_OPERATORS:
        if operator not in ("$eq", "$ne") and (
            isinstance(field_value, bool)
            or not isinstance(field_value, (int, float, datetime))
        ):
            raise ValueError(f"{operator} must be a numeric or date value")
        return WhereFilter(
            path=path,
            operator=_COMPARISON_OPERATORS[operator],
            **{_get_value_keyword(field_value): field_value},
        )

    # Wildcard match operator
    elif operator == "$like":
        if not isinstance(field_value, str):
            raise ValueError("$like must be a string")
        return WhereFilter(path=path, operator=Operator.LIKE, value_text=field_value)

    # Collection operators
    elif operator in _COLLECTION_OPERATORS:
        if not isinstance(field_value, list):
            raise ValueError(f"{operator} must be a list")
        return WhereFilter(
            path=path,
            operator=_COLLECTION_OPERATORS[operator],
            **{_get_array_value_keyword(field_value): field_value},
        )

    # Existence operator
    elif operator == "$exists":
        if not isinstance(field_value, bool):
            raise ValueError("$exists must be a boolean")
        return WhereFilter(path=path, operator=Operator.IS_NULL, value_boolean=not field_value)

    else:
        raise ValueError(f"Unsupported operator: {operator}")
