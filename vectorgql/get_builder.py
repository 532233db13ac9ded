"""
Builder for Get queries.

This module provides the GetBuilder class that assembles
`{Get{Class(arguments){fields}}}` queries from a class name, a field
selection and any number of argument builders.
"""

# Standard library imports
import logging
from typing import List, Optional, Union

# Local imports
from . import _serializer
from .argument import (
    AskArgument,
    Bm25Argument,
    GroupArgument,
    GroupByArgument,
    HybridArgument,
    SortArguments,
    WhereArgument,
)
from .consistency_level import ConsistencyLevel
from .fields import Field, Fields
from .filter import FilterTypedDict
from .generative import GenerativeSearch
from .near import (
    NearImageArgument,
    NearObjectArgument,
    NearTextArgument,
    NearVectorArgument,
)
from .query_interface import QueryInterface
from .where_filter import WhereFilter

logger = logging.getLogger(__name__)


class GetBuilder(QueryInterface):
    """
    Assembles Get queries, which return objects of one class.

    Arguments are rendered in a fixed order regardless of the order they
    were given in, so equal builders always produce equal queries.
    """

    def __init__(
        self,
        *,
        class_name: str,
        fields: Union[Fields, List[Union[Field, str]]],
        where: Optional[Union[WhereArgument, WhereFilter, FilterTypedDict]] = None,
        near_text: Optional[NearTextArgument] = None,
        near_object: Optional[NearObjectArgument] = None,
        near_vector: Optional[NearVectorArgument] = None,
        group: Optional[GroupArgument] = None,
        ask: Optional[AskArgument] = None,
        near_image: Optional[NearImageArgument] = None,
        bm25: Optional[Bm25Argument] = None,
        hybrid: Optional[HybridArgument] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        after: Optional[str] = None,
        sort: Optional[SortArguments] = None,
        consistency_level: Optional[Union[ConsistencyLevel, str]] = None,
        group_by: Optional[GroupByArgument] = None,
        generative_search: Optional[GenerativeSearch] = None,
    ) -> None:
        """
        Initialize the builder.

        Args:
            class_name: Name of the class to query
            fields: Field selection, as Fields or a list of fields/names
            where: Where filter, as an argument, a WhereFilter or a filter dictionary
            near_text, near_object, near_vector, near_image: Similarity search arguments
            group: Group argument merging or deduplicating similar results
            ask: Question answering argument
            bm25: Keyword search argument
            hybrid: Hybrid keyword/vector search argument
            limit: Maximum number of objects returned
            offset: Number of objects skipped
            after: Object id to start cursor pagination after
            sort: Sort criteria
            consistency_level: Replica consistency level for the read
            group_by: Group-by argument grouping results by a property
            generative_search: Generative search added under `_additional`

        Raises:
            ValueError: If the class name is empty or limit/offset are negative
        """
        if not class_name:
            raise ValueError("Class name must be provided")
        if limit is not None and limit < 0:
            raise ValueError("limit must not be negative")
        if offset is not None and offset < 0:
            raise ValueError("offset must not be negative")

        if isinstance(fields, str):
            fields = Fields(fields)
        elif not isinstance(fields, Fields):
            fields = Fields(*fields)
        if where is not None and not isinstance(where, WhereArgument):
            where = WhereArgument(where)
        # Convert consistency level from string to enum if needed
        if isinstance(consistency_level, str):
            consistency_level = ConsistencyLevel(consistency_level)

        self.class_name = class_name
        self.fields = fields
        self.where = where
        self.near_text = near_text
        self.near_object = near_object
        self.near_vector = near_vector
        self.group = group
        self.ask = ask
        self.near_image = near_image
        self.bm25 = bm25
        self.hybrid = hybrid
        self.limit = limit
        self.offset = offset
        self.after = after
        self.sort = sort
        self.consistency_level = consistency_level
        self.group_by = group_by
        self.generative_search = generative_search

    def _create_filter_clause(self) -> str:
        """
        Render the argument list.

        Returns:
            The comma-separated arguments in parentheses, or an empty string
            when no argument is set
        """
        arguments = [
            argument.build()
            for argument in (
                self.where,
                self.near_text,
                self.near_object,
                self.near_vector,
                self.group,
                self.ask,
                self.near_image,
                self.bm25,
                self.hybrid,
            )
            if argument is not None
        ]
        if self.limit is not None:
            arguments.append(f"limit:{self.limit}")
        if self.offset is not None:
            arguments.append(f"offset:{self.offset}")
        if self.after is not None:
            arguments.append(f"after:{_serializer.quote(self.after)}")
        if self.sort is not None:
            arguments.append(self.sort.build())
        if self.consistency_level is not None:
            arguments.append(f"consistencyLevel:{self.consistency_level.value}")
        if self.group_by is not None:
            arguments.append(self.group_by.build())

        if not arguments:
            return ""
        return f"({','.join(arguments)})"

    def _create_fields(self) -> str:
        fields = self.fields
        if self.generative_search is not None:
            fields = fields.with_additional(self.generative_search.build())
        if not fields:
            raise ValueError("At least one field must be selected")
        return fields.build()

    def build_query(self) -> str:
        query = f"{{Get{{{self.class_name}{self._create_filter_clause()}{{{self._create_fields()}}}}}}}"
        logger.debug("Built Get query for class %s: %s", self.class_name, query)
        return query
