"""
기본 클래스 모듈
- Sheet: 원판 1장의 점유 공간 (Bottom-Left 배치)
- PackingStrategy: 패킹 전략 베이스 클래스
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from .models import (
    OccupiedRect,
    OptimizationOutcome,
    Orientation,
    PieceSpec,
    Placement,
    PlacementUnit,
)


def _require_positive(**values: float) -> None:
    for name, value in values.items():
        if not value > 0:
            raise ValueError(f"{name} must be > 0, got {value!r}")


class Sheet:
    """원판 1장

    occupied는 배치 순서대로 쌓이며 (공간 정렬 아님) 서로 겹치지 않는다.
    """

    def __init__(self, width: float, height: float) -> None:
        _require_positive(width=width, height=height)
        self.width = width
        self.height = height
        self._occupied: list[OccupiedRect] = []

    @property
    def occupied(self) -> tuple[OccupiedRect, ...]:
        return tuple(self._occupied)

    @property
    def is_empty(self) -> bool:
        return not self._occupied

    @property
    def area(self) -> float:
        return self.width * self.height

    def try_place(self, length: float, width: float, rotation_allowed: bool) -> Placement | None:
        """보드 1장 배치 시도

        원래 방향을 먼저 시도하고, 실패하면 회전이 허용된 경우에만
        90° 회전해서 시도한다. 성공하면 사각형 하나를 확정한다.

        Args:
            length: 보드 길이 (x축)
            width: 보드 너비 (y축)
            rotation_allowed: 90° 회전 허용 여부

        Returns:
            배치 위치와 방향, 들어갈 곳이 없으면 None
        """
        _require_positive(length=length, width=width)

        orientations = [Orientation.NATURAL]
        if rotation_allowed:
            orientations.append(Orientation.SWAPPED)

        for orientation in orientations:
            w, h = orientation.extents(length, width)
            space = self.find_space(w, h)
            if space is not None:
                self._occupied.append(space)
                return Placement(space.x, space.y, orientation)

        return None

    def find_space(self, w: float, h: float) -> OccupiedRect | None:
        """Bottom-Left 휴리스틱으로 w×h 자리 찾기 (확정하지 않음)"""
        if w > self.width or h > self.height:
            return None

        # 후보: 원점 + 기존 사각형의 오른쪽/위쪽 모서리
        candidates = [(0, 0)]
        for rect in self._occupied:
            if rect.x + rect.width + w <= self.width:
                candidates.append((rect.x + rect.width, rect.y))
            if rect.y + rect.height + h <= self.height:
                candidates.append((rect.x, rect.y + rect.height))

        # 아래쪽 우선, 같은 높이면 왼쪽 우선
        candidates.sort(key=lambda c: (c[1], c[0]))

        for x, y in candidates:
            rect = OccupiedRect(x, y, w, h)
            if self._is_space_available(rect):
                return rect

        return None

    def _is_space_available(self, rect: OccupiedRect) -> bool:
        if (rect.x < 0 or rect.y < 0 or
                rect.x + rect.width > self.width or
                rect.y + rect.height > self.height):
            return False
        return not any(rect.overlaps(used) for used in self._occupied)

    def compute_waste(self) -> float:
        """원판 면적 - 확정된 사각형 면적 합"""
        used = sum(rect.area for rect in self._occupied)
        return self.area - used


class PackingStrategy(ABC):
    """패킹 전략 베이스 클래스"""

    def __init__(self, sheet_length: float, sheet_width: float) -> None:
        _require_positive(sheet_length=sheet_length, sheet_width=sheet_width)
        self.sheet_length: float = sheet_length
        self.sheet_width: float = sheet_width

    @abstractmethod
    def pack(self, pieces: list[PieceSpec]) -> OptimizationOutcome:
        """보드들을 원판에 배치

        Args:
            pieces: PieceSpec 목록 (수량 포함)

        Returns:
            원판별 배치 결과와 배치 불가 목록
        """
        pass

    def new_sheet(self) -> Sheet:
        return Sheet(self.sheet_length, self.sheet_width)

    def expand_pieces(self, pieces: list[PieceSpec]) -> list[PlacementUnit]:
        """보드 종류를 수량만큼 개별 유닛으로 확장 (수량 0 이하는 무시)"""
        units: list[PlacementUnit] = []
        seq = 0
        for spec in pieces:
            if spec.quantity <= 0:
                continue
            _require_positive(length=spec.length, width=spec.width)
            for _ in range(spec.quantity):
                units.append(PlacementUnit(spec, seq))
                seq += 1
        return units
