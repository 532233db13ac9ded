"""
Data-transfer objects for the REST batch references endpoint.

A batch reference links a property of one object (from) to another
object (to); both ends are addressed by beacons. The endpoint answers
with one BatchReferenceResponse per submitted reference.
"""
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from ._constants import BEACON_DEFAULT_HOST, BEACON_SCHEME, _get_beacon


class BatchResultStatus(str, Enum):
    SUCCESS = "SUCCESS"
    PENDING = "PENDING"
    FAILED = "FAILED"


class ErrorMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str


class ErrorResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    error: List[ErrorMessage] = Field(default_factory=list)


class BatchReferenceResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Optional[BatchResultStatus] = None
    errors: Optional[ErrorResponse] = None


class BatchReference(BaseModel):
    """A reference to create, from an object's property to another object."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: str = Field(alias="from")
    to: str
    tenant: Optional[str] = None

    @classmethod
    def create(
        cls,
        *,
        from_class_name: str,
        from_id: str,
        from_property_name: str,
        to_id: str,
        to_class_name: Optional[str] = None,
        tenant: Optional[str] = None,
        host: str = BEACON_DEFAULT_HOST,
    ) -> "BatchReference":
        """
        Create a reference from object ids, building both beacons.

        Args:
            from_class_name: Class of the object holding the reference
            from_id: Id of the object holding the reference
            from_property_name: Reference property on the from object
            to_id: Id of the referenced object
            to_class_name: Class of the referenced object; when omitted the
                to beacon carries the id only
            tenant: Tenant both objects belong to
            host: Host part of the beacons
        """
        if to_class_name is None:
            to = f"{BEACON_SCHEME}://{host}/{to_id}"
        else:
            to = _get_beacon(to_class_name, to_id, host)
        return cls(
            from_=f"{_get_beacon(from_class_name, from_id, host)}/{from_property_name}",
            to=to,
            tenant=tenant,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the request body shape, leaving out unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class BatchReferenceResponse(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    result: Optional[BatchReferenceResult] = None

    @property
    def has_errors(self) -> bool:
        return bool(self.error_messages) or (
            self.result is not None and self.result.status == BatchResultStatus.FAILED
        )

    @property
    def error_messages(self) -> List[str]:
        if self.result is None or self.result.errors is None:
            return []
        return [error.message for error in self.result.errors.error]


_responses_adapter = TypeAdapter(List[BatchReferenceResponse])


def parse_batch_reference_responses(data: Any) -> List[BatchReferenceResponse]:
    """
    Parse the batch references endpoint's JSON body.

    Args:
        data: Decoded JSON, a list of response objects

    Returns:
        One BatchReferenceResponse per submitted reference, in order

    Raises:
        pydantic.ValidationError: If the body does not have the expected shape
    """
    return _responses_adapter.validate_python(data)
