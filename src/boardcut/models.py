"""
데이터 모델 모듈
- PieceSpec: 보드 종류 (불변)
- Orientation: 배치 방향 (원래 방향 / 90° 회전)
- PlacementUnit: 수량 확장으로 생긴 보드 1장
- OccupiedRect: 원판 위에 이미 확정된 사각형
- PlacedPiece / SheetResult / OptimizationOutcome: 최적화 결과
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .config import DEFAULT_SHEET_LENGTH, DEFAULT_SHEET_WIDTH


@dataclass(frozen=True)
class PieceSpec:
    """보드 종류 (길이 × 너비, 수량, 회전 허용 여부)

    depth는 표시용이며 패킹에는 사용하지 않는다.
    """

    id: str
    length: float
    width: float
    depth: float = 0
    quantity: int = 1
    name: str | None = None
    rotation_allowed: bool = False

    @property
    def area(self) -> float:
        return self.length * self.width

    @property
    def label(self) -> str:
        return self.name or f"{self.length:g}x{self.width:g}"

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'length': self.length,
            'width': self.width,
            'depth': self.depth,
            'quantity': self.quantity,
            'name': self.name,
            'rotationAllowed': self.rotation_allowed,
        }


class Orientation(Enum):
    """배치 방향: 길이가 x축(NATURAL) 또는 y축(SWAPPED)"""

    NATURAL = "natural"
    SWAPPED = "swapped"

    def extents(self, length: float, width: float) -> tuple[float, float]:
        """이 방향으로 놓았을 때의 (가로, 세로)"""
        if self is Orientation.SWAPPED:
            return width, length
        return length, width


@dataclass(frozen=True)
class PlacementUnit:
    """PieceSpec 한 장 (최적화 1회 동안만 존재)"""

    spec: PieceSpec
    seq: int

    @property
    def area(self) -> float:
        return self.spec.area


@dataclass(frozen=True)
class OccupiedRect:
    """원판 위에 확정된 사각형 (회전 후 크기)"""

    x: float
    y: float
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    def overlaps(self, other: OccupiedRect) -> bool:
        # 반개구간: 변이 맞닿는 것은 겹침이 아님
        return (self.x < other.x + other.width and
                self.x + self.width > other.x and
                self.y < other.y + other.height and
                self.y + self.height > other.y)


@dataclass(frozen=True)
class Placement:
    """Sheet.try_place 결과"""

    x: float
    y: float
    orientation: Orientation

    @property
    def rotated(self) -> bool:
        return self.orientation is Orientation.SWAPPED


@dataclass
class PlacedPiece:
    """결과 레코드: 어떤 보드가 어디에, 회전 여부"""

    spec: PieceSpec
    x: float
    y: float
    rotated: bool = False

    @property
    def placed_width(self) -> float:
        return self.spec.width if self.rotated else self.spec.length

    @property
    def placed_height(self) -> float:
        return self.spec.length if self.rotated else self.spec.width

    @property
    def area(self) -> float:
        return self.spec.area

    def to_dict(self) -> dict:
        return {
            'board': self.spec.to_dict(),
            'x': self.x,
            'y': self.y,
            'rotated': self.rotated,
            'placed_w': self.placed_width,
            'placed_h': self.placed_height,
        }


@dataclass
class SheetResult:
    """원판 1장의 배치 결과"""

    pieces: list[PlacedPiece] = field(default_factory=list)
    waste: float = 0

    def to_dict(self) -> dict:
        return {
            'boards': [p.to_dict() for p in self.pieces],
            'waste': self.waste,
        }


@dataclass
class OptimizationOutcome:
    """최적화 전체 결과 (sheets의 인덱스 = 원판 번호, 0부터)"""

    sheets: list[SheetResult] = field(default_factory=list)
    total_placed: int = 0
    total_waste: float = 0
    placed_per_sheet: list[int] = field(default_factory=list)
    unplaceable: list[PieceSpec] = field(default_factory=list)
    sheet_length: float = DEFAULT_SHEET_LENGTH
    sheet_width: float = DEFAULT_SHEET_WIDTH

    @property
    def sheet_area(self) -> float:
        return self.sheet_length * self.sheet_width

    def to_dict(self) -> dict:
        return {
            'sheets': [s.to_dict() for s in self.sheets],
            'totalBoardsPlaced': self.total_placed,
            'totalWaste': self.total_waste,
            'boardsPerSheet': list(self.placed_per_sheet),
            'unplaced': [spec.to_dict() for spec in self.unplaceable],
            'sheetLength': self.sheet_length,
            'sheetWidth': self.sheet_width,
        }
