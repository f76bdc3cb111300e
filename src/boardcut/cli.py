#!/usr/bin/env python3
"""CLI 진입점 - 서브커맨드 라우팅"""

import argparse
import json
import sys

from .config import DEFAULT_PRICE_PER_SHEET, DEFAULT_SHEET_LENGTH, DEFAULT_SHEET_WIDTH


def build_plan_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="boardcut plan",
                                     description="저장된 재단 목록(JSON)으로 배치 계산")
    parser.add_argument("cut_list", help="재단 목록 JSON 파일")
    parser.add_argument("--sheet-length", type=float, default=DEFAULT_SHEET_LENGTH)
    parser.add_argument("--sheet-width", type=float, default=DEFAULT_SHEET_WIDTH)
    parser.add_argument("--price", type=float, default=DEFAULT_PRICE_PER_SHEET,
                        help="원판 1장 가격")
    parser.add_argument("--png", default=None, help="시각화 PNG 저장 경로")
    parser.add_argument("--json", action="store_true", help="결과를 JSON으로 출력")
    parser.add_argument("--summary-json", default=None,
                        help="재단 요약(원판별 보드 위치) JSON 저장 경로")
    return parser


def run_plan(argv: list[str]) -> int:
    """비대화형 배치 계산, 종료 코드 반환"""
    from .cutlist_io import CutListError, load_cut_list, save_cut_summary
    from .interactive import print_summary
    from .strategies import plan
    from .summary import cut_list_lines, summarize

    args = build_plan_parser().parse_args(argv)
    if args.sheet_length <= 0 or args.sheet_width <= 0:
        print("❌ 오류: 원판 크기는 양수여야 합니다.", file=sys.stderr)
        return 2

    try:
        pieces = load_cut_list(args.cut_list)
    except (OSError, CutListError) as e:
        print(f"❌ 오류: {e}", file=sys.stderr)
        return 1

    outcome = plan(pieces, args.sheet_length, args.sheet_width)

    if args.json:
        summary = summarize(outcome, pieces, args.price)
        print(json.dumps({'outcome': outcome.to_dict(), 'summary': summary.to_dict()},
                         indent=2, ensure_ascii=False))
    else:
        print_summary(outcome, pieces, args.price)
        for idx, sheet in enumerate(outcome.sheets):
            print(f"\n원판 {idx + 1} 재단 목록:")
            for line in cut_list_lines(sheet):
                print(f"  {line}")
        for spec in outcome.unplaceable:
            print(f"⚠️  배치 불가: {spec.label} ({spec.length:g}x{spec.width:g})")

    if args.summary_json:
        path = save_cut_summary(outcome, args.summary_json)
        if not args.json:
            print(f"\n재단 요약 저장: {path}")

    if args.png:
        import matplotlib.pyplot as plt
        from .visualizer import render_outcome
        fig = render_outcome(outcome, path=args.png, verbose=not args.json)
        plt.close(fig)

    return 0


def main(argv: list[str] | None = None):
    """CLI 진입점

    서브커맨드:
    - (없음): 대화형 배치 계획
    - web: 웹 서버 시작
    - plan FILE: 재단 목록 파일로 배치 계산
    """
    argv = sys.argv[1:] if argv is None else argv

    if argv and argv[0] == "web":
        from .web import run_server
        run_server()
    elif argv and argv[0] == "plan":
        sys.exit(run_plan(argv[1:]))
    else:
        from .interactive import run_interactive
        run_interactive()


if __name__ == "__main__":
    main()
