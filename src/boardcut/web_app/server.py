"""FastAPI 백엔드 서버 - Boardcut 웹 애플리케이션"""

import io
import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from ..schemas import OptimizeRequest, OptimizeResponse
from ..strategies import plan
from ..summary import summarize
from ..visualizer import render_outcome

logger = logging.getLogger(__name__)

app = FastAPI(title="Boardcut - 합판 재단 배치 최적화")

# CORS 설정 (개발 환경용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _run_plan(request: OptimizeRequest):
    if not request.boards:
        raise HTTPException(status_code=400, detail="No boards in the cut list")

    specs = request.to_specs()
    try:
        outcome = plan(specs, request.sheet_length, request.sheet_width)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return specs, outcome


@app.get("/")
async def read_root():
    """루트 경로 - 서비스 정보"""
    return {"service": "boardcut", "endpoints": ["/api/optimize", "/api/render"]}


@app.post("/api/optimize", response_model=OptimizeResponse)
def optimize(request: OptimizeRequest):
    """배치 계산 API"""
    specs, outcome = _run_plan(request)
    summary = summarize(outcome, specs, request.price_per_sheet)

    return OptimizeResponse(
        success=not outcome.unplaceable,
        total_pieces=sum(max(spec.quantity, 0) for spec in specs),
        placed_pieces=outcome.total_placed,
        sheets_used=len(outcome.sheets),
        outcome=outcome.to_dict(),
        summary=summary.to_dict(),
    )


@app.post("/api/render")
def render(request: OptimizeRequest):
    """배치 결과 PNG"""
    _, outcome = _run_plan(request)

    # pyplot 전역 figure 관리자를 거치지 않음
    buf = io.BytesIO()
    fig = render_outcome(outcome, verbose=False)
    fig.savefig(buf, format="png", dpi=100, bbox_inches="tight")
    logger.debug("rendered %d sheets", len(outcome.sheets))
    return Response(content=buf.getvalue(), media_type="image/png")
