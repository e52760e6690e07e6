from __future__ import annotations

from pydantic import BaseModel, Field

from app import config


class Vec2Model(BaseModel):
    x: float
    y: float


class PairRequest(BaseModel):
    a: Vec2Model
    b: Vec2Model


class VectorRequest(BaseModel):
    v: Vec2Model


class ScaleRequest(BaseModel):
    v: Vec2Model
    scalar: float = Field(..., description="Any real factor, zero and negatives included.")


class ReflectRequest(BaseModel):
    incident: Vec2Model
    normal: Vec2Model = Field(..., description="Surface normal; need not be unit length.")


class FromAngleRequest(BaseModel):
    angle: float = Field(..., description="Angle from the positive x-axis (radians).")
    magnitude: float = Field(default=config.DEFAULT_FROM_ANGLE_MAGNITUDE)


class VectorResult(BaseModel):
    result: Vec2Model


class ScalarResult(BaseModel):
    result: float

