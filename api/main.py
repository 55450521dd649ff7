# api/main.py
"""
FastAPI backend for mini_beam - exposes the beam analysis engine as REST API.

Requests and responses use the camelCase shape of the web client, e.g.

    POST /analyze
    {
        "config": {"length": 10, "elasticModulus": 200000, "momentOfInertia": 5e8},
        "supports": [{"id": "1", "type": "PINNED", "position": 0}, ...],
        "loads": [{"id": "l1", "type": "UDL", "magnitude": 10,
                   "position": 0, "endPosition": 10}],
        "probeX": 5
    }
"""

import io
import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from mini_beam import (
    BeamConfig,
    InvalidBeamError,
    analyze,
    load_from_record,
    support_from_record,
    __version__,
)
from mini_beam.analysis import AnalysisResults
from mini_beam.presets import default_problem

logger = logging.getLogger(__name__)

app = FastAPI(
    title="mini_beam API",
    description="Direct-stiffness beam analysis engine",
    version=__version__,
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Request Models
# =============================================================================

class BeamConfigIn(BaseModel):
    """Beam geometry and section in input units."""
    length: float = Field(..., gt=0, description="Span length (m)")
    elasticModulus: float = Field(..., gt=0, description="Elastic modulus E (MPa)")
    momentOfInertia: float = Field(..., gt=0, description="Moment of inertia I (mm^4)")


class SupportIn(BaseModel):
    id: str
    type: str = Field(..., description="PINNED, ROLLER, FIXED or HINGE")
    position: float


class LoadIn(BaseModel):
    id: str
    type: str = Field(..., description="POINT, UDL, UVL or MOMENT")
    magnitude: float
    endMagnitude: Optional[float] = None
    position: float
    endPosition: Optional[float] = None


class AnalyzeRequest(BaseModel):
    config: BeamConfigIn
    supports: List[SupportIn] = []
    loads: List[LoadIn] = []
    probeX: float = 0.0


# =============================================================================
# Analysis
# =============================================================================

def run_analysis(request: AnalyzeRequest) -> AnalysisResults:
    """Convert the request to domain objects and analyze; bad input -> 422."""
    try:
        config = BeamConfig(
            length=request.config.length,
            elastic_modulus=request.config.elasticModulus,
            moment_of_inertia=request.config.momentOfInertia,
        )
        supports = [support_from_record(s.model_dump()) for s in request.supports]
        loads = [load_from_record(l.model_dump()) for l in request.loads]
        return analyze(config, supports, loads, request.probeX)
    except InvalidBeamError as e:
        logger.info("Rejected analysis request: %s", e)
        raise HTTPException(status_code=422, detail=str(e))


def preset_request() -> Dict[str, Any]:
    """The default problem in request shape."""
    config, supports, loads, probe_x = default_problem()
    return {
        "config": {
            "length": config.length,
            "elasticModulus": config.elastic_modulus,
            "momentOfInertia": config.moment_of_inertia,
        },
        "supports": [{"id": s.id, "type": s.type.value, "position": s.position}
                     for s in supports],
        "loads": [{"id": l.id, "type": l.kind.value, "magnitude": l.magnitude,
                   "position": l.position, "endPosition": l.end_position}
                  for l in loads],
        "probeX": probe_x,
    }


# =============================================================================
# Endpoints
# =============================================================================

@app.get("/health")
async def health():
    """Health check."""
    return {"status": "ok", "version": __version__}


@app.get("/preset")
async def preset():
    return preset_request()


@app.post("/analyze")
async def analyze_beam(request: AnalyzeRequest):
    """Run a full analysis and return the results dictionary."""
    return run_analysis(request).to_dict()


@app.post("/export/csv")
async def export_csv(request: AnalyzeRequest):
    """Export the per-node diagrams as CSV."""
    results = run_analysis(request)

    output = io.StringIO()
    results.to_frame().to_csv(output, index=False)
    output.seek(0)

    return StreamingResponse(
        iter([output.getvalue()]),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=beam_diagrams.csv"}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
