from enum import Enum

from pydantic import BaseModel, ConfigDict


class ShardStatus(str, Enum):
    """
    Status of a shard of a class's index
    READY - the shard accepts reads and writes
    READONLY - the shard rejects writes
    """

    READY = "READY"
    READONLY = "READONLY"


class Shard(BaseModel):
    """Shard metadata as returned by the schema shards endpoint"""

    model_config = ConfigDict(frozen=True)

    name: str
    status: ShardStatus
