"""
Where filters for GraphQL queries.

A WhereFilter is either a leaf condition (path, operator and one value)
or a logical combination of operand filters (And/Or).
"""
from datetime import datetime
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, Tuple, Union

from . import _serializer


class Operator(str, Enum):
    AND = "And"
    OR = "Or"
    EQUAL = "Equal"
    LIKE = "Like"
    NOT_EQUAL = "NotEqual"
    GREATER_THAN = "GreaterThan"
    GREATER_THAN_EQUAL = "GreaterThanEqual"
    LESS_THAN = "LessThan"
    LESS_THAN_EQUAL = "LessThanEqual"
    WITHIN_GEO_RANGE = "WithinGeoRange"
    IS_NULL = "IsNull"
    CONTAINS_ANY = "ContainsAny"
    CONTAINS_ALL = "ContainsAll"


class GeoRange:
    """Circle on the globe: a center point and a maximum distance in meters."""

    def __init__(self, *, latitude: float, longitude: float, max_distance: float) -> None:
        self.latitude = latitude
        self.longitude = longitude
        self.max_distance = max_distance

    def build(self) -> str:
        return (
            f"{{geoCoordinates:{{latitude:{_serializer.scalar(self.latitude)} "
            f"longitude:{_serializer.scalar(self.longitude)}}} "
            f"distance:{{max:{_serializer.scalar(self.max_distance)}}}}}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeoRange):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self) -> str:
        return (
            f"GeoRange(latitude={self.latitude}, longitude={self.longitude}, "
            f"max_distance={self.max_distance})"
        )


def _dates(values: Sequence[datetime]) -> str:
    return f"[{','.join(_serializer.date(value) for value in values)}]"


# Value keys in rendering order, with the function rendering each of them
_VALUE_FORMATTERS: List[Tuple[str, str, Callable[[Any], str]]] = [
    ("value_int", "valueInt", _serializer.scalar),
    ("value_number", "valueNumber", _serializer.scalar),
    ("value_boolean", "valueBoolean", _serializer.scalar),
    ("value_string", "valueString", _serializer.quote),
    ("value_text", "valueText", _serializer.quote),
    ("value_date", "valueDate", _serializer.date),
    ("value_geo_range", "valueGeoRange", lambda value: value.build()),
    ("value_int_array", "valueIntArray", _serializer.array),
    ("value_number_array", "valueNumberArray", _serializer.array),
    ("value_boolean_array", "valueBooleanArray", _serializer.array),
    ("value_string_array", "valueStringArray", _serializer.array_with_quotes),
    ("value_text_array", "valueTextArray", _serializer.array_with_quotes),
    ("value_date_array", "valueDateArray", _dates),
]


class WhereFilter:
    def __init__(
        self,
        *,
        operator: Union[Operator, str],
        path: Optional[List[str]] = None,
        operands: Optional[List["WhereFilter"]] = None,
        value_int: Optional[int] = None,
        value_number: Optional[float] = None,
        value_boolean: Optional[bool] = None,
        value_string: Optional[str] = None,
        value_text: Optional[str] = None,
        value_date: Optional[datetime] = None,
        value_geo_range: Optional[GeoRange] = None,
        value_int_array: Optional[List[int]] = None,
        value_number_array: Optional[List[float]] = None,
        value_boolean_array: Optional[List[bool]] = None,
        value_string_array: Optional[List[str]] = None,
        value_text_array: Optional[List[str]] = None,
        value_date_array: Optional[List[datetime]] = None,
    ) -> None:
        """
        Create a where filter.

        Args:
            operator: Comparison or logical operator
            path: Property path the condition applies to (leaf filters)
            operands: Filters combined by a logical operator
            value_*: The value to compare against; the first one set wins

        Raises:
            ValueError: If a logical operator has no operands, a comparison
                operator has operands, or a leaf filter has no path
        """
        # Convert operator from string to enum if needed
        if isinstance(operator, str):
            operator = Operator(operator)
        if operator in (Operator.AND, Operator.OR) and not operands:
            raise ValueError(f"{operator.value} filter requires operands")
        if operands and operator not in (Operator.AND, Operator.OR):
            raise ValueError(f"{operator.value} filter does not take operands")
        if not operands and not path:
            raise ValueError("Filter without operands requires a path")

        self.operator = operator
        self.path = path
        self.operands = operands
        self.value_int = value_int
        self.value_number = value_number
        self.value_boolean = value_boolean
        self.value_string = value_string
        self.value_text = value_text
        self.value_date = value_date
        self.value_geo_range = value_geo_range
        self.value_int_array = value_int_array
        self.value_number_array = value_number_array
        self.value_boolean_array = value_boolean_array
        self.value_string_array = value_string_array
        self.value_text_array = value_text_array
        self.value_date_array = value_date_array

    def _value_part(self) -> Optional[str]:
        for attribute, key, formatter in _VALUE_FORMATTERS:
            value = getattr(self, attribute)
            if value is not None:
                return f"{key}:{formatter(value)}"
        return None

    def build(self) -> str:
        """Render the filter body, e.g. {path:["name"] valueText:"x" operator:Equal}."""
        parts = []
        if self.operands:
            parts.append(f"operator:{self.operator.value}")
            parts.append(f"operands:[{','.join(operand.build() for operand in self.operands)}]")
        else:
            parts.append(f"path:{_serializer.array_with_quotes(self.path)}")
            value = self._value_part()
            if value is not None:
                parts.append(value)
            parts.append(f"operator:{self.operator.value}")
        return f"{{{' '.join(parts)}}}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WhereFilter):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self) -> str:
        return f"WhereFilter({self.build()})"
