"""큰 보드 우선 + Bottom-Left 배치 전략"""

import logging

from ..config import DEFAULT_SHEET_LENGTH, DEFAULT_SHEET_WIDTH
from ..models import OptimizationOutcome, PieceSpec, PlacedPiece, SheetResult
from ..packing import PackingStrategy

logger = logging.getLogger(__name__)


class BottomLeftPacker(PackingStrategy):
    """면적 내림차순으로 정렬한 뒤 현재 원판에 Bottom-Left로 채우고,
    안 들어가면 새 원판을 연다."""

    def pack(self, pieces):
        units = self.expand_pieces(pieces)
        # sorted는 안정 정렬: 같은 면적이면 입력 순서 유지
        units = sorted(units, key=lambda u: u.area, reverse=True)

        sheets: list[SheetResult] = []
        unplaceable: list[PieceSpec] = []
        unplaceable_ids: set[str] = set()

        current_sheet = self.new_sheet()
        current_pieces: list[PlacedPiece] = []

        for unit in units:
            spec = unit.spec
            placement = current_sheet.try_place(spec.length, spec.width, spec.rotation_allowed)

            if placement is None and current_pieces:
                sheets.append(SheetResult(current_pieces, current_sheet.compute_waste()))
                logger.debug("sheet %d closed with %d pieces", len(sheets) - 1, len(current_pieces))
                current_sheet = self.new_sheet()
                current_pieces = []
                placement = current_sheet.try_place(spec.length, spec.width, spec.rotation_allowed)

            if placement is None:
                # 빈 원판에도 안 들어감
                if spec.id not in unplaceable_ids:
                    unplaceable_ids.add(spec.id)
                    unplaceable.append(spec)
                    logger.info("board %r (%gx%g) does not fit on a %gx%g sheet",
                                spec.label, spec.length, spec.width,
                                self.sheet_length, self.sheet_width)
                continue

            current_pieces.append(PlacedPiece(spec, placement.x, placement.y, placement.rotated))

        if current_pieces:
            sheets.append(SheetResult(current_pieces, current_sheet.compute_waste()))

        return OptimizationOutcome(
            sheets=sheets,
            total_placed=sum(len(s.pieces) for s in sheets),
            total_waste=sum(s.waste for s in sheets),
            placed_per_sheet=[len(s.pieces) for s in sheets],
            unplaceable=unplaceable,
            sheet_length=self.sheet_length,
            sheet_width=self.sheet_width,
        )


def plan(piece_specs: list[PieceSpec],
         sheet_length: float = DEFAULT_SHEET_LENGTH,
         sheet_width: float = DEFAULT_SHEET_WIDTH) -> OptimizationOutcome:
    """보드 목록 → 배치 결과 (호출마다 새 상태, 부수효과 없음)"""
    return BottomLeftPacker(sheet_length, sheet_width).pack(piece_specs)
