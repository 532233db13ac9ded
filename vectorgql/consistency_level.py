from enum import Enum


class ConsistencyLevel(str, Enum):
    """
    The consistency level specifies how many replicas must acknowledge
    a read before the service answers a query
    ONE - a single replica
    QUORUM - a majority of replicas
    ALL - every replica
    """

    ALL = "ALL"
    ONE = "ONE"
    QUORUM = "QUORUM"
