"""
Field selections for GraphQL queries.

A field is a name with optional nested fields, rendered as
`name{child child}`.
"""
from typing import Iterator, List, Optional, Sequence, Union

from ._constants import ADDITIONAL_FIELD


class Field:
    def __init__(self, name: str, fields: Optional[Sequence[Union["Field", str]]] = None) -> None:
        if not name:
            raise ValueError("Field requires a name")
        self.name = name
        self.fields = (
            [Field(field) if isinstance(field, str) else field for field in fields]
            if fields
            else []
        )

    def build(self) -> str:
        if not self.fields:
            return self.name
        return f"{self.name}{{{' '.join(field.build() for field in self.fields)}}}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Field):
            return NotImplemented
        return self.name == other.name and self.fields == other.fields

    def __repr__(self) -> str:
        return f"Field({self.build()})"


class Fields:
    """Ordered selection of fields, as given in a query's field tree."""

    def __init__(self, *fields: Union[Field, str]) -> None:
        self.fields: List[Field] = [
            Field(field) if isinstance(field, str) else field for field in fields
        ]

    def get(self, name: str) -> Optional[Field]:
        """Get the first top-level field with the given name."""
        for field in self.fields:
            if field.name == name:
                return field
        return None

    def with_additional(self, *additional: Field) -> "Fields":
        """
        Return a copy of the fields with extra `_additional` fields.

        The extra fields are appended to the existing `_additional` field,
        or to a new one appended at the end when there is none.
        """
        fields = []
        merged = False
        for field in self.fields:
            if field.name == ADDITIONAL_FIELD and not merged:
                field = Field(ADDITIONAL_FIELD, [*field.fields, *additional])
                merged = True
            fields.append(field)
        if not merged:
            fields.append(Field(ADDITIONAL_FIELD, list(additional)))
        return Fields(*fields)

    def build(self) -> str:
        return " ".join(field.build() for field in self.fields)

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __bool__(self) -> bool:
        return bool(self.fields)

    def __repr__(self) -> str:
        return f"Fields({self.build()})"
