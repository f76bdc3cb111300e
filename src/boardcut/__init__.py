"""Boardcut - 합판 재단 배치 최적화

큰 보드 우선 Bottom-Left 휴리스틱 기반 원판 배치 도구
"""

from .models import OptimizationOutcome, PieceSpec, PlacedPiece, SheetResult
from .packing import Sheet
from .strategies import BottomLeftPacker, plan

__all__ = [
    'BottomLeftPacker',
    'OptimizationOutcome',
    'PieceSpec',
    'PlacedPiece',
    'Sheet',
    'SheetResult',
    'plan',
]
