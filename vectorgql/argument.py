"""
Argument builders for GraphQL queries.

Each argument renders exactly one clause of a query's argument list
(e.g. `ask:{question:"..."}`). Optional parts that are not set are left
out of the rendered clause.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from . import _serializer
from .filter import FilterTypedDict, parse_filter
from .where_filter import WhereFilter


class Argument(ABC):
    @abstractmethod
    def build(self) -> str:
        """
        Render the argument clause.

        Returns:
            The clause in GraphQL syntax, ready to be joined into an
            argument list
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.build()})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return vars(self) == vars(other)


def _object_clause(name: str, parts: List[str]) -> str:
    return f"{name}:{{{' '.join(parts)}}}"


class GroupType(str, Enum):
    """
    How objects are grouped together by the group argument
    closest - keep the object closest to the group's centroid
    merge - merge the objects into a single one
    """

    CLOSEST = "closest"
    MERGE = "merge"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class WhereArgument(Argument):
    """Wraps a WhereFilter, or a filter dictionary, into a where clause."""

    def __init__(self, filter: Union[WhereFilter, FilterTypedDict]) -> None:
        if isinstance(filter, dict):
            filter = parse_filter(filter)
        if not isinstance(filter, WhereFilter):
            raise ValueError("Where argument requires a WhereFilter or a filter dictionary")
        self.filter = filter

    def build(self) -> str:
        return f"where:{self.filter.build()}"


class AskArgument(Argument):
    def __init__(
        self,
        *,
        question: str,
        properties: Optional[List[str]] = None,
        certainty: Optional[float] = None,
        distance: Optional[float] = None,
        autocorrect: Optional[bool] = None,
        rerank: Optional[bool] = None,
    ) -> None:
        if not question:
            raise ValueError("Ask argument requires a question")
        self.question = question
        self.properties = properties
        self.certainty = certainty
        self.distance = distance
        self.autocorrect = autocorrect
        self.rerank = rerank

    def build(self) -> str:
        parts = [f"question:{_serializer.quote(self.question)}"]
        if self.properties is not None:
            parts.append(f"properties:{_serializer.array_with_quotes(self.properties)}")
        if self.certainty is not None:
            parts.append(f"certainty:{_serializer.scalar(self.certainty)}")
        if self.distance is not None:
            parts.append(f"distance:{_serializer.scalar(self.distance)}")
        if self.autocorrect is not None:
            parts.append(f"autocorrect:{_serializer.scalar(self.autocorrect)}")
        if self.rerank is not None:
            parts.append(f"rerank:{_serializer.scalar(self.rerank)}")
        return _object_clause("ask", parts)


class Bm25Argument(Argument):
    """Keyword (BM25) search over the given properties, or all of them."""

    def __init__(self, *, query: str, properties: Optional[List[str]] = None) -> None:
        if not query:
            raise ValueError("Bm25 argument requires a query")
        self.query = query
        self.properties = properties

    def build(self) -> str:
        parts = [f"query:{_serializer.quote(self.query)}"]
        if self.properties is not None:
            parts.append(f"properties:{_serializer.array_with_quotes(self.properties)}")
        return _object_clause("bm25", parts)


class HybridArgument(Argument):
    """
    Hybrid search mixing keyword and vector scores.

    alpha weighs the two: 0 is pure keyword search, 1 is pure vector search.
    """

    def __init__(
        self,
        *,
        query: str,
        alpha: Optional[float] = None,
        vector: Optional[List[float]] = None,
    ) -> None:
        if not query:
            raise ValueError("Hybrid argument requires a query")
        if alpha is not None and not 0 <= alpha <= 1:
            raise ValueError("alpha must be between 0 and 1")
        self.query = query
        self.alpha = alpha
        self.vector = vector

    def build(self) -> str:
        parts = [f"query:{_serializer.quote(self.query)}"]
        if self.alpha is not None:
            parts.append(f"alpha:{_serializer.scalar(self.alpha)}")
        if self.vector is not None:
            parts.append(f"vector:{_serializer.vector(self.vector)}")
        return _object_clause("hybrid", parts)


class GroupArgument(Argument):
    def __init__(
        self,
        *,
        type: Union[GroupType, str],
        force: Optional[float] = None,
    ) -> None:
        # Convert type from string to enum if needed
        if isinstance(type, str):
            type = GroupType(type)
        self.type = type
        self.force = force

    def build(self) -> str:
        parts = [f"type:{self.type.value}"]
        if self.force is not None:
            parts.append(f"force:{_serializer.scalar(self.force)}")
        return _object_clause("group", parts)


class GroupByArgument(Argument):
    def __init__(
        self,
        *,
        path: List[str],
        groups: Optional[int] = None,
        objects_per_group: Optional[int] = None,
    ) -> None:
        if not path:
            raise ValueError("Group by argument requires a path")
        self.path = path
        self.groups = groups
        self.objects_per_group = objects_per_group

    def build(self) -> str:
        parts = [f"path:{_serializer.array_with_quotes(self.path)}"]
        if self.groups is not None:
            parts.append(f"groups:{self.groups}")
        if self.objects_per_group is not None:
            parts.append(f"objectsPerGroup:{self.objects_per_group}")
        return _object_clause("groupBy", parts)


class SortArgument(Argument):
    def __init__(
        self,
        *,
        path: List[str],
        order: Optional[Union[SortOrder, str]] = None,
    ) -> None:
        if not path:
            raise ValueError("Sort argument requires a path")
        if isinstance(order, str):
            order = SortOrder(order)
        self.path = path
        self.order = order

    def build(self) -> str:
        parts = [f"path:{_serializer.array_with_quotes(self.path)}"]
        if self.order is not None:
            parts.append(f"order:{self.order.value}")
        return f"{{{' '.join(parts)}}}"


class SortArguments(Argument):
    """Ordered list of sort criteria, the first one taking precedence."""

    def __init__(self, *sorts: Union[SortArgument, Dict[str, Any]]) -> None:
        if not sorts:
            raise ValueError("Sort arguments require at least one sort")
        self.sorts = [
            SortArgument(**sort) if isinstance(sort, dict) else sort for sort in sorts
        ]

    def build(self) -> str:
        return f"sort:[{','.join(sort.build() for sort in self.sorts)}]"
