"""입력/응답 모델 (pydantic) - 웹 API와 재단 목록 파일이 함께 사용"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .config import DEFAULT_PRICE_PER_SHEET, DEFAULT_SHEET_LENGTH, DEFAULT_SHEET_WIDTH
from .models import PieceSpec


def duplicate_ids(boards) -> list[str]:
    """두 번 이상 나온 보드 id (처음 중복된 순서)"""
    seen = set()
    duplicates = []
    for board in boards:
        if board.id in seen and board.id not in duplicates:
            duplicates.append(board.id)
        seen.add(board.id)
    return duplicates


class BoardInput(BaseModel):
    """보드 입력 모델"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    length: float = Field(gt=0)
    width: float = Field(gt=0)
    depth: float = Field(default=0, ge=0)
    quantity: int = 1
    name: str | None = None
    rotation_allowed: bool = Field(default=False, alias="rotationAllowed")

    def to_spec(self) -> PieceSpec:
        return PieceSpec(
            id=self.id,
            length=self.length,
            width=self.width,
            depth=self.depth,
            quantity=self.quantity,
            name=self.name,
            rotation_allowed=self.rotation_allowed,
        )


class OptimizeRequest(BaseModel):
    """배치 요청 모델"""
    sheet_length: float = Field(default=DEFAULT_SHEET_LENGTH, gt=0)
    sheet_width: float = Field(default=DEFAULT_SHEET_WIDTH, gt=0)
    price_per_sheet: float = Field(default=DEFAULT_PRICE_PER_SHEET, ge=0)
    boards: list[BoardInput]

    @model_validator(mode="after")
    def check_unique_ids(self):
        duplicates = duplicate_ids(self.boards)
        if duplicates:
            raise ValueError(f"duplicate board id(s): {', '.join(duplicates)}")
        return self

    def to_specs(self) -> list[PieceSpec]:
        return [b.to_spec() for b in self.boards]


class OptimizeResponse(BaseModel):
    """배치 응답 모델"""
    success: bool
    total_pieces: int
    placed_pieces: int
    sheets_used: int
    outcome: dict
    summary: dict
