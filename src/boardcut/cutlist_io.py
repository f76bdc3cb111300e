"""재단 목록 저장/불러오기 (JSON)"""

from __future__ import annotations

import json
from datetime import date, datetime
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from .models import OptimizationOutcome, PieceSpec
from .schemas import BoardInput, duplicate_ids
from .summary import cut_summary

_BOARD_LIST = TypeAdapter(list[BoardInput])


class CutListError(ValueError):
    """재단 목록 파일 형식 오류"""


def default_cut_list_filename(today: date | None = None) -> str:
    today = today or date.today()
    return f"cut-list-{today.isoformat()}.json"


def default_cut_summary_filename(sheet_index: int = 0, today: date | None = None) -> str:
    today = today or date.today()
    return f"cut-summary-sheet-{sheet_index + 1}-{today.isoformat()}.json"


def save_cut_list(pieces: list[PieceSpec], path: str | Path) -> Path:
    """보드 목록을 JSON 배열로 저장

    Returns:
        저장된 파일 경로
    """
    if not pieces:
        raise CutListError("No boards to save. Add some boards first.")

    path = Path(path)
    data = [spec.to_dict() for spec in pieces]
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    return path


def load_cut_list(path: str | Path) -> list[PieceSpec]:
    """JSON 파일에서 보드 목록 불러오기

    최상위는 배열이어야 하며, 각 항목은 BoardInput 규칙으로 검증한다.
    """
    try:
        content = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise CutListError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(content, list):
        raise CutListError("Invalid file format: expected an array of boards")

    try:
        boards = _BOARD_LIST.validate_python(content)
    except ValidationError as e:
        raise CutListError(f"Invalid board format in file: {e}") from e

    duplicates = duplicate_ids(boards)
    if duplicates:
        raise CutListError(f"Duplicate board id(s) in file: {', '.join(duplicates)}")

    return [b.to_spec() for b in boards]


def save_cut_summary(outcome: OptimizationOutcome, path: str | Path,
                     generated_at: datetime | None = None, sheet_index: int = 0) -> Path:
    """배치 결과 요약을 JSON으로 저장

    Returns:
        저장된 파일 경로
    """
    path = Path(path)
    data = cut_summary(outcome, generated_at, sheet_index)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    return path
