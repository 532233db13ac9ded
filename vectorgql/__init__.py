"""
vectorgql: GraphQL query builders and REST data-transfer objects for a
vector database service.

This module provides argument builders, field selections and query
builders that render the service's GraphQL syntax, plus the models of
its batch reference and schema shard REST endpoints.
"""

import logging
from importlib import metadata

# Argument builders
from .argument import (
    Argument,
    AskArgument,
    Bm25Argument,
    GroupArgument,
    GroupByArgument,
    GroupType,
    HybridArgument,
    SortArgument,
    SortArguments,
    SortOrder,
    WhereArgument,
)

# REST data-transfer objects
from .batch import (
    BatchReference,
    BatchReferenceResponse,
    BatchReferenceResult,
    BatchResultStatus,
    ErrorMessage,
    ErrorResponse,
    parse_batch_reference_responses,
)
from .consistency_level import ConsistencyLevel

# Field selections
from .fields import Field, Fields

# Filter types
from .filter import (
    AndFilter,
    ExactMatchFilter,
    FilterTypedDict,
    OrFilter,
    SimpleFilter,
    parse_filter,
)
from .generative import GenerativeSearch
from .near import (
    MoveObject,
    NearImageArgument,
    NearObjectArgument,
    NearTextArgument,
    NearVectorArgument,
    ObjectMove,
)
from .shard import Shard, ShardStatus
from .where_filter import GeoRange, Operator, WhereFilter

# Query builders
from .aggregate_builder import AggregateBuilder
from .explore_builder import ExploreBuilder, ExploreField
from .get_builder import GetBuilder
from .query_interface import QueryInterface

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Version handling
try:
    __version__ = metadata.version(__package__)
except metadata.PackageNotFoundError:
    __version__ = ""
del metadata  # Avoid polluting the namespace

# Define public API
__all__ = [
    # Query builders
    "QueryInterface",
    "GetBuilder",
    "AggregateBuilder",
    "ExploreBuilder",
    "ExploreField",
    # Field selections
    "Field",
    "Fields",
    "GenerativeSearch",
    # Argument builders
    "Argument",
    "AskArgument",
    "Bm25Argument",
    "HybridArgument",
    "GroupArgument",
    "GroupType",
    "GroupByArgument",
    "SortArgument",
    "SortArguments",
    "SortOrder",
    "WhereArgument",
    "NearTextArgument",
    "NearVectorArgument",
    "NearObjectArgument",
    "NearImageArgument",
    "ObjectMove",
    "MoveObject",
    "ConsistencyLevel",
    # Where filters
    "WhereFilter",
    "Operator",
    "GeoRange",
    # Filter types
    "FilterTypedDict",
    "SimpleFilter",
    "AndFilter",
    "OrFilter",
    "ExactMatchFilter",
    "parse_filter",
    # REST data-transfer objects
    "BatchReference",
    "BatchReferenceResponse",
    "BatchReferenceResult",
    "BatchResultStatus",
    "ErrorMessage",
    "ErrorResponse",
    "parse_batch_reference_responses",
    "Shard",
    "ShardStatus",
    # Version
    "__version__",
]
