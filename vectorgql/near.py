"""
Similarity-search arguments: nearText, nearVector, nearObject and nearImage.

Each of them accepts either a certainty (0..1, higher is closer) or a
distance (metric dependent, lower is closer) threshold.
"""
import base64
import logging
import os
from typing import Dict, List, Optional, Union

from . import _serializer
from .argument import Argument, _object_clause

logger = logging.getLogger(__name__)

DATA_URI_PREFIX = "data:"


def _threshold_parts(certainty: Optional[float], distance: Optional[float]) -> List[str]:
    parts = []
    if certainty is not None:
        parts.append(f"certainty:{_serializer.scalar(certainty)}")
    if distance is not None:
        parts.append(f"distance:{_serializer.scalar(distance)}")
    return parts


class MoveObject:
    """Reference to an object used as a moveTo/moveAwayFrom target."""

    def __init__(self, *, id: Optional[str] = None, beacon: Optional[str] = None) -> None:
        if id is None and beacon is None:
            raise ValueError("Move object requires an id or a beacon")
        self.id = id
        self.beacon = beacon

    def build(self) -> str:
        parts = []
        if self.id is not None:
            parts.append(f"id:{_serializer.quote(self.id)}")
        if self.beacon is not None:
            parts.append(f"beacon:{_serializer.quote(self.beacon)}")
        return f"{{{' '.join(parts)}}}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MoveObject):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self) -> str:
        return f"MoveObject(id={self.id}, beacon={self.beacon})"


class ObjectMove:
    """
    Shifts a nearText search towards (moveTo) or away from (moveAwayFrom)
    the given concepts and objects.
    """

    def __init__(
        self,
        *,
        force: float,
        concepts: Optional[List[str]] = None,
        objects: Optional[List[Union[MoveObject, Dict[str, str]]]] = None,
    ) -> None:
        if concepts is None and objects is None:
            raise ValueError("Move requires concepts or objects")
        self.force = force
        self.concepts = concepts
        self.objects = (
            [MoveObject(**obj) if isinstance(obj, dict) else obj for obj in objects]
            if objects is not None
            else None
        )

    def build(self, name: str) -> str:
        parts = []
        if self.concepts is not None:
            parts.append(f"concepts:{_serializer.array_with_quotes(self.concepts)}")
        parts.append(f"force:{_serializer.scalar(self.force)}")
        if self.objects is not None:
            parts.append(f"objects:[{','.join(obj.build() for obj in self.objects)}]")
        return _object_clause(name, parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjectMove):
            return NotImplemented
        return vars(self) == vars(other)


class NearTextArgument(Argument):
    def __init__(
        self,
        *,
        concepts: List[str],
        certainty: Optional[float] = None,
        distance: Optional[float] = None,
        move_to: Optional[ObjectMove] = None,
        move_away_from: Optional[ObjectMove] = None,
        autocorrect: Optional[bool] = None,
    ) -> None:
        if not concepts:
            raise ValueError("Near text argument requires at least one concept")
        self.concepts = concepts
        self.certainty = certainty
        self.distance = distance
        self.move_to = move_to
        self.move_away_from = move_away_from
        self.autocorrect = autocorrect

    def build(self) -> str:
        parts = [f"concepts:{_serializer.array_with_quotes(self.concepts)}"]
        parts.extend(_threshold_parts(self.certainty, self.distance))
        if self.move_to is not None:
            parts.append(self.move_to.build("moveTo"))
        if self.move_away_from is not None:
            parts.append(self.move_away_from.build("moveAwayFrom"))
        if self.autocorrect is not None:
            parts.append(f"autocorrect:{_serializer.scalar(self.autocorrect)}")
        return _object_clause("nearText", parts)


class NearVectorArgument(Argument):
    def __init__(
        self,
        *,
        vector: List[float],
        certainty: Optional[float] = None,
        distance: Optional[float] = None,
    ) -> None:
        if vector is None or len(vector) == 0:
            raise ValueError("Near vector argument requires a vector")
        self.vector = vector
        self.certainty = certainty
        self.distance = distance

    def build(self) -> str:
        parts = [f"vector:{_serializer.vector(self.vector)}"]
        parts.extend(_threshold_parts(self.certainty, self.distance))
        return _object_clause("nearVector", parts)


class NearObjectArgument(Argument):
    """Searches near an existing object, addressed by id or beacon."""

    def __init__(
        self,
        *,
        id: Optional[str] = None,
        beacon: Optional[str] = None,
        certainty: Optional[float] = None,
        distance: Optional[float] = None,
    ) -> None:
        if id is None and beacon is None:
            raise ValueError("Near object argument requires an id or a beacon")
        self.id = id
        self.beacon = beacon
        self.certainty = certainty
        self.distance = distance

    def build(self) -> str:
        parts = []
        if self.id is not None:
            parts.append(f"id:{_serializer.quote(self.id)}")
        if self.beacon is not None:
            parts.append(f"beacon:{_serializer.quote(self.beacon)}")
        parts.extend(_threshold_parts(self.certainty, self.distance))
        return _object_clause("nearObject", parts)


class NearImageArgument(Argument):
    """
    Searches near an image.

    The image is given either as a base64 string (optionally a data URI,
    whose prefix is stripped) or as a path to an image file, which is read
    and base64 encoded when the argument is built.
    """

    def __init__(
        self,
        *,
        image: Optional[str] = None,
        image_file: Optional[Union[str, os.PathLike]] = None,
        certainty: Optional[float] = None,
        distance: Optional[float] = None,
    ) -> None:
        if image is None and image_file is None:
            raise ValueError("Near image argument requires an image or an image file")
        self.image = image
        self.image_file = image_file
        self.certainty = certainty
        self.distance = distance

    def _encoded_image(self) -> str:
        if self.image is not None:
            if self.image.startswith(DATA_URI_PREFIX):
                _, separator, encoded = self.image.partition(",")
                if not separator or not encoded:
                    raise ValueError("Image data URI has no base64 payload")
                return encoded
            return self.image
        logger.debug("Encoding image file %s", self.image_file)
        with open(self.image_file, "rb") as f:
            return base64.b64encode(f.read()).decode("ascii")

    def build(self) -> str:
        parts = [f"image:{_serializer.quote(self._encoded_image())}"]
        parts.extend(_threshold_parts(self.certainty, self.distance))
        return _object_clause("nearImage", parts)

    def __repr__(self) -> str:
        return (
            f"NearImageArgument(image_file={self.image_file}, "
            f"certainty={self.certainty}, distance={self.distance})"
        )
