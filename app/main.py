from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app import config
from app.vecmath.schema import (
    FromAngleRequest,
    PairRequest,
    ReflectRequest,
    ScalarResult,
    ScaleRequest,
    VectorRequest,
    VectorResult,
)
from app.vecmath.service import NonFiniteResultError, evaluate, operation_names


logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(title="Vec2 math")


@app.exception_handler(NonFiniteResultError)
def non_finite_handler(request: Request, exc: NonFiniteResultError):
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/api/operations")
def api_operations():
    return {"operations": operation_names()}


@app.post(f"{config.API_PREFIX}/add", response_model=VectorResult)
def api_add(req: PairRequest):
    return evaluate("add", req)


@app.post(f"{config.API_PREFIX}/subtract", response_model=VectorResult)
def api_subtract(req: PairRequest):
    return evaluate("subtract", req)


@app.post(f"{config.API_PREFIX}/multiply", response_model=VectorResult)
def api_multiply(req: ScaleRequest):
    return evaluate("multiply", req)


@app.post(f"{config.API_PREFIX}/dot", response_model=ScalarResult)
def api_dot(req: PairRequest):
    return evaluate("dot", req)


@app.post(f"{config.API_PREFIX}/magnitude", response_model=ScalarResult)
def api_magnitude(req: VectorRequest):
    return evaluate("magnitude", req)


@app.post(f"{config.API_PREFIX}/normalize", response_model=VectorResult)
def api_normalize(req: VectorRequest):
    return evaluate("normalize", req)


@app.post(f"{config.API_PREFIX}/distance", response_model=ScalarResult)
def api_distance(req: PairRequest):
    return evaluate("distance", req)


@app.post(f"{config.API_PREFIX}/reflect", response_model=VectorResult)
def api_reflect(req: ReflectRequest):
    return evaluate("reflect", req)


@app.post(f"{config.API_PREFIX}/angle", response_model=ScalarResult)
def api_angle(req: VectorRequest):
    return evaluate("angle", req)


@app.post(f"{config.API_PREFIX}/from_angle", response_model=VectorResult)
def api_from_angle(req: FromAngleRequest):
    return evaluate("from_angle", req)
