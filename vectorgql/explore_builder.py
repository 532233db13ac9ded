"""
Builder for Explore queries, which search across all classes and return
beacons to the matching objects.
"""
import logging
from enum import Enum
from typing import List, Optional, Union

from .near import NearTextArgument, NearVectorArgument
from .query_interface import QueryInterface

logger = logging.getLogger(__name__)


class ExploreField(str, Enum):
    BEACON = "beacon"
    CERTAINTY = "certainty"
    DISTANCE = "distance"
    CLASS_NAME = "className"


class ExploreBuilder(QueryInterface):
    def __init__(
        self,
        *,
        fields: List[Union[ExploreField, str]],
        near_text: Optional[NearTextArgument] = None,
        near_vector: Optional[NearVectorArgument] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> None:
        if not fields:
            raise ValueError("At least one field must be selected")
        if near_text is None and near_vector is None:
            raise ValueError("Explore requires a nearText or a nearVector argument")
        if near_text is not None and near_vector is not None:
            raise ValueError("Cannot specify both nearText and nearVector for explore")

        self.fields = [ExploreField(field) for field in fields]
        self.near_text = near_text
        self.near_vector = near_vector
        self.limit = limit
        self.offset = offset

    def _create_filter_clause(self) -> str:
        arguments = [
            argument.build()
            for argument in (self.near_text, self.near_vector)
            if argument is not None
        ]
        if self.limit is not None:
            arguments.append(f"limit:{self.limit}")
        if self.offset is not None:
            arguments.append(f"offset:{self.offset}")
        return f"({','.join(arguments)})"

    def build_query(self) -> str:
        fields = " ".join(field.value for field in self.fields)
        query = f"{{Explore{self._create_filter_clause()}{{{fields}}}}}"
        logger.debug("Built Explore query: %s", query)
        return query
