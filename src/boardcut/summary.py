"""배치 결과 통계 (필요 원판 수, 재료 효율, 비용, 원판별 사용률)"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone

from .config import DEFAULT_PRICE_PER_SHEET
from .models import OptimizationOutcome, PieceSpec, SheetResult


@dataclass
class SheetBreakdown:
    index: int
    pieces: int
    used_area: float
    waste: float
    waste_percent: float
    used_percent: float


@dataclass
class LayoutSummary:
    sheets_required: int
    total_pieces: int
    requested_area: float
    efficiency_percent: float
    estimated_cost: float
    breakdown: list[SheetBreakdown] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


def summarize(outcome: OptimizationOutcome,
              pieces: list[PieceSpec],
              price_per_sheet: float = DEFAULT_PRICE_PER_SHEET) -> LayoutSummary:
    """배치 결과 요약

    재료 효율은 배치 가능한 보드의 총 면적을 사용한 원판 총 면적으로 나눈 값.
    """
    unplaceable_ids = {spec.id for spec in outcome.unplaceable}
    requested_area = sum(
        spec.area * spec.quantity
        for spec in pieces
        if spec.quantity > 0 and spec.id not in unplaceable_ids
    )

    sheet_area = outcome.sheet_area
    sheets_required = len(outcome.sheets)
    efficiency = requested_area / (sheets_required * sheet_area) * 100 if sheets_required else 0.0

    breakdown = []
    for idx, sheet in enumerate(outcome.sheets):
        breakdown.append(SheetBreakdown(
            index=idx,
            pieces=len(sheet.pieces),
            used_area=sheet_area - sheet.waste,
            waste=sheet.waste,
            waste_percent=sheet.waste / sheet_area * 100,
            used_percent=(sheet_area - sheet.waste) / sheet_area * 100,
        ))

    return LayoutSummary(
        sheets_required=sheets_required,
        total_pieces=outcome.total_placed,
        requested_area=requested_area,
        efficiency_percent=efficiency,
        estimated_cost=sheets_required * price_per_sheet,
        breakdown=breakdown,
    )


def cut_list_lines(sheet: SheetResult) -> list[str]:
    """원판 1장의 재단 목록 (출력용)"""
    lines = []
    for placed in sheet.pieces:
        dims = f'{placed.placed_width:g}" x {placed.placed_height:g}"'
        if placed.rotated:
            dims += " (rotated)"
        elif not placed.spec.rotation_allowed:
            dims += " (no rotate)"
        lines.append(f'{placed.spec.label}: {dims} @ ({placed.x:.1f}", {placed.y:.1f}")')
    return lines


def cut_summary(outcome: OptimizationOutcome,
                generated_at: datetime | None = None,
                sheet_index: int = 0) -> dict:
    """재단 요약 내보내기용 dict (원판별 보드 위치 포함)"""
    generated_at = generated_at or datetime.now(timezone.utc)
    sheet_area = outcome.sheet_area
    return {
        'generatedAt': generated_at.isoformat(),
        'sheetIndex': sheet_index,
        'totalSheets': len(outcome.sheets),
        'sheets': [
            {
                'sheetNumber': idx + 1,
                'boardsPlaced': len(sheet.pieces),
                'waste': sheet.waste,
                'areaUsed': sheet_area - sheet.waste,
                'boards': [
                    {
                        'id': placed.spec.id,
                        'name': placed.spec.name,
                        'length': placed.spec.length,
                        'width': placed.spec.width,
                        'quantity': placed.spec.quantity,
                        'rotated': placed.rotated,
                        'x': placed.x,
                        'y': placed.y,
                    }
                    for placed in sheet.pieces
                ],
            }
            for idx, sheet in enumerate(outcome.sheets)
        ],
    }
