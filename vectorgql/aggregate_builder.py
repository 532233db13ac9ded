"""
Builder for Aggregate queries, which return aggregations (counts,
means, top occurrences, ...) over the objects of one class.
"""
import logging
from typing import List, Optional, Union

from . import _serializer
from .argument import AskArgument, WhereArgument
from .fields import Field, Fields
from .filter import FilterTypedDict
from .near import (
    NearImageArgument,
    NearObjectArgument,
    NearTextArgument,
    NearVectorArgument,
)
from .query_interface import QueryInterface
from .where_filter import WhereFilter

logger = logging.getLogger(__name__)


class AggregateBuilder(QueryInterface):
    def __init__(
        self,
        *,
        class_name: str,
        fields: Union[Fields, List[Union[Field, str]]],
        group_by: Optional[Union[List[str], str]] = None,
        where: Optional[Union[WhereArgument, WhereFilter, FilterTypedDict]] = None,
        near_text: Optional[NearTextArgument] = None,
        near_object: Optional[NearObjectArgument] = None,
        near_vector: Optional[NearVectorArgument] = None,
        ask: Optional[AskArgument] = None,
        near_image: Optional[NearImageArgument] = None,
        object_limit: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> None:
        """
        Initialize the builder.

        Args:
            class_name: Name of the class to aggregate
            fields: Aggregations to return, e.g. meta{count}
            group_by: Property path to group the aggregation by
            object_limit: Maximum number of objects aggregated when a
                similarity search argument is set
            limit: Maximum number of groups returned
        """
        if not class_name:
            raise ValueError("Class name must be provided")
        if object_limit is not None and object_limit < 1:
            raise ValueError("object_limit must be positive")

        if isinstance(fields, str):
            fields = Fields(fields)
        elif not isinstance(fields, Fields):
            fields = Fields(*fields)
        if isinstance(group_by, str):
            group_by = [group_by]
        if where is not None and not isinstance(where, WhereArgument):
            where = WhereArgument(where)

        self.class_name = class_name
        self.fields = fields
        self.group_by = group_by
        self.where = where
        self.near_text = near_text
        self.near_object = near_object
        self.near_vector = near_vector
        self.ask = ask
        self.near_image = near_image
        self.object_limit = object_limit
        self.limit = limit

    def _create_filter_clause(self) -> str:
        arguments = []
        if self.group_by:
            arguments.append(f"groupBy:{_serializer.array_with_quotes(self.group_by)}")
        arguments.extend(
            argument.build()
            for argument in (
                self.where,
                self.near_text,
                self.near_object,
                self.near_vector,
                self.ask,
                self.near_image,
            )
            if argument is not None
        )
        if self.object_limit is not None:
            arguments.append(f"objectLimit:{self.object_limit}")
        if self.limit is not None:
            arguments.append(f"limit:{self.limit}")

        if not arguments:
            return ""
        return f"({','.join(arguments)})"

    def build_query(self) -> str:
        if not self.fields:
            raise ValueError("At least one field must be selected")
        query = f"{{Aggregate{{{self.class_name}{self._create_filter_clause()}{{{self.fields.build()}}}}}}}"
        logger.debug("Built Aggregate query for class %s: %s", self.class_name, query)
        return query
