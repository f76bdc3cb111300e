#!/usr/bin/env python3
"""대화형 재단 배치 CLI"""

from .config import DEFAULT_PRICE_PER_SHEET, DEFAULT_SHEET_LENGTH, DEFAULT_SHEET_WIDTH, OUTPUT_PNG, SAMPLE_BOARDS
from .cutlist_io import CutListError, load_cut_list
from .models import PieceSpec
from .strategies import plan
from .summary import summarize


def get_positive_float_input(prompt: str, default: float | None = None) -> float | None:
    """양수 입력을 받는 헬퍼 함수

    Args:
        prompt: 사용자에게 보여줄 프롬프트 메시지
        default: 기본값 (None이면 필수 입력)

    Returns:
        입력받은 양수, 또는 에러 시 None
    """
    user_input = input(prompt).strip()

    if user_input == "":
        if default is not None:
            return default
        print("❌ 오류: 값을 입력해주세요.")
        return None

    try:
        value = float(user_input)
    except ValueError:
        print("❌ 오류: 숫자를 입력해주세요.")
        return None
    if value <= 0:
        print("❌ 오류: 양수를 입력해주세요.")
        return None
    return value


def sample_boards() -> list[PieceSpec]:
    return [
        PieceSpec(id=id_, name=name, length=length, width=width, depth=depth,
                  quantity=qty, rotation_allowed=rotation)
        for id_, name, length, width, depth, qty, rotation in SAMPLE_BOARDS
    ]


def print_summary(outcome, pieces, price_per_sheet=DEFAULT_PRICE_PER_SHEET):
    """요약 통계 출력"""
    summary = summarize(outcome, pieces, price_per_sheet)

    print(f"\n필요 원판: {summary.sheets_required}장")
    print(f"재료 효율: {summary.efficiency_percent:.1f}%")
    print(f"배치된 보드: {summary.total_pieces}개")
    print(f"예상 비용: ${summary.estimated_cost:.2f}")
    for row in summary.breakdown:
        print(f"  원판 {row.index + 1}: {row.pieces}개, 낭비 {row.waste_percent:.1f}%, "
              f"사용 {row.used_percent:.0f}%")
    return summary


def run_interactive():
    """대화형 CLI 실행"""
    print("="*60)
    print("합판 재단 배치 최적화 - Bottom-Left")
    print("="*60)

    sheet_length = get_positive_float_input(
        f"원판 길이 (inch, 기본값 {DEFAULT_SHEET_LENGTH}): ", default=DEFAULT_SHEET_LENGTH)
    if sheet_length is None:
        return

    sheet_width = get_positive_float_input(
        f"원판 너비 (inch, 기본값 {DEFAULT_SHEET_WIDTH}): ", default=DEFAULT_SHEET_WIDTH)
    if sheet_width is None:
        return

    print(f"✓ 원판 크기: {sheet_length:g}×{sheet_width:g} inch")

    path = input("재단 목록 파일 (JSON, 비우면 샘플 사용): ").strip()
    if path:
        try:
            pieces = load_cut_list(path)
        except (OSError, CutListError) as e:
            print(f"❌ 오류: {e}")
            return
        print(f"✓ {len(pieces)}종 보드 불러옴")
    else:
        pieces = sample_boards()
        print("✓ 샘플 재단 목록 사용")

    outcome = plan(pieces, sheet_length, sheet_width)
    print_summary(outcome, pieces)

    # 시각화
    from .visualizer import render_outcome
    render_outcome(outcome, path=OUTPUT_PNG, show=True)
