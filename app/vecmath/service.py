from __future__ import annotations

import logging
import math
from typing import Callable, Dict, List, Mapping, Tuple, Type, Union

from pydantic import BaseModel

from app.vecmath import vec2
from app.vecmath.schema import (
    FromAngleRequest,
    PairRequest,
    ReflectRequest,
    ScaleRequest,
    Vec2Model,
    VectorRequest,
)
from app.vecmath.vec2 import Vec2


logger = logging.getLogger(__name__)


class UnknownOperationError(KeyError):
    """Raised when an operation name has no registered handler."""


class NonFiniteResultError(ValueError):
    """Raised when a result cannot be represented in JSON (NaN or infinity)."""


def _vec(v: Vec2Model) -> Vec2:
    return Vec2(float(v.x), float(v.y))


_Handler = Callable[[BaseModel], Union[Vec2, float]]

_OPERATIONS: Dict[str, Tuple[Type[BaseModel], _Handler]] = {
    "add": (PairRequest, lambda r: vec2.add(_vec(r.a), _vec(r.b))),
    "subtract": (PairRequest, lambda r: vec2.subtract(_vec(r.a), _vec(r.b))),
    "multiply": (ScaleRequest, lambda r: vec2.multiply(_vec(r.v), float(r.scalar))),
    "dot": (PairRequest, lambda r: vec2.dot(_vec(r.a), _vec(r.b))),
    "magnitude": (VectorRequest, lambda r: vec2.magnitude(_vec(r.v))),
    "normalize": (VectorRequest, lambda r: vec2.normalize(_vec(r.v))),
    "distance": (PairRequest, lambda r: vec2.distance(_vec(r.a), _vec(r.b))),
    "reflect": (ReflectRequest, lambda r: vec2.reflect(_vec(r.incident), _vec(r.normal))),
    "angle": (VectorRequest, lambda r: vec2.angle(_vec(r.v))),
    "from_angle": (FromAngleRequest, lambda r: vec2.from_angle(float(r.angle), float(r.magnitude))),
}


def operation_names() -> List[str]:
    return list(_OPERATIONS)


def _lookup(name: str) -> Tuple[Type[BaseModel], _Handler]:
    try:
        return _OPERATIONS[name]
    except KeyError:
        raise UnknownOperationError(name) from None


def evaluate(name: str, request: Union[BaseModel, Mapping]) -> Dict:
    """Run operation `name` on a request model (or a plain mapping of its fields).

    Returns {"result": {"x": .., "y": ..}} for vector results and
    {"result": float} for scalar ones.
    """
    model, handler = _lookup(name)
    if not isinstance(request, model):
        request = model(**dict(request))

    out = handler(request)
    logger.debug("%s(%r) -> %r", name, request, out)

    if isinstance(out, Vec2):
        values = (out.x, out.y)
        result: Union[Dict, float] = {"x": out.x, "y": out.y}
    else:
        values = (out,)
        result = out

    if not all(math.isfinite(c) for c in values):
        logger.warning("Rejecting non-finite result for %s: %r", name, out)
        raise NonFiniteResultError(f"{name} produced a non-finite result: {out!r}")
    return {"result": result}
