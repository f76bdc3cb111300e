"""시각화 모듈"""

import matplotlib.pyplot as plt
import matplotlib.patches as patches
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle as MPLRect

from .config import COLOR_PALETTE
from .summary import cut_list_lines


def spec_colors(outcome):
    """보드 종류(id)별 색상, 처음 등장한 순서대로 팔레트 순환"""
    colors = {}
    for sheet in outcome.sheets:
        for placed in sheet.pieces:
            if placed.spec.id not in colors:
                colors[placed.spec.id] = COLOR_PALETTE[len(colors) % len(COLOR_PALETTE)]
    return colors


def _new_figure(figsize, show):
    # pyplot 전역 figure 관리자는 화면 표시할 때만 사용
    if show:
        return plt.figure(figsize=figsize)
    return Figure(figsize=figsize)


def render_outcome(outcome, path=None, show=False, verbose=True):
    """배치 결과 시각화

    Args:
        outcome: OptimizationOutcome
        path: PNG 저장 경로 (None이면 저장 안 함)
        show: plt.show() 호출 여부
        verbose: 터미널에 재단 목록 출력 여부

    Returns:
        matplotlib Figure
    """
    sheet_length = outcome.sheet_length
    sheet_width = outcome.sheet_width
    colors = spec_colors(outcome)

    if not outcome.sheets:
        fig = _new_figure((6, 3), show)
        ax = fig.subplots()
        ax.text(0.5, 0.5, "No sheets", ha='center', va='center', fontsize=14)
        ax.set_axis_off()
        if verbose:
            print("\n배치된 원판이 없습니다.")
            _report_unplaceable(outcome)
        return _finish(fig, path, show, verbose)

    fig = _new_figure((8 * len(outcome.sheets), 5), show)
    axes = fig.subplots(1, len(outcome.sheets), squeeze=False)[0]

    for plot_idx, sheet in enumerate(outcome.sheets):
        ax = axes[plot_idx]

        if verbose:
            print(f"\n{'='*60}")
            print(f"원판 {plot_idx + 1}")
            print(f"배치된 보드: {len(sheet.pieces)}개\n")
            print("재단 목록:")
            for i, line in enumerate(cut_list_lines(sheet)):
                print(f"  [{i+1}] {line}")

        ax.add_patch(MPLRect((0, 0), sheet_length, sheet_width,
                             fill=False, edgecolor='black', linewidth=2))

        for placed in sheet.pieces:
            x, y = placed.x, placed.y
            w, h = placed.placed_width, placed.placed_height

            rect_patch = MPLRect((x, y), w, h,
                                 linewidth=1, edgecolor='black',
                                 facecolor=colors[placed.spec.id], alpha=0.8)
            ax.add_patch(rect_patch)

            label = f"{placed.spec.label}\n{w:g}×{h:g}"
            if placed.rotated:
                label += "\n(rotated)"
            ax.text(x + w/2, y + h/2, label, ha='center', va='center',
                    fontsize=8, fontweight='bold')

        usage = (outcome.sheet_area - sheet.waste) / outcome.sheet_area * 100
        if verbose:
            print(f"\n  사용률: {usage:.1f}%  (낭비 {sheet.waste:g} sq in)")

        ax.set_xlim(0, sheet_length)
        ax.set_ylim(0, sheet_width)
        ax.set_aspect('equal')
        ax.set_xlabel('length (in)')
        ax.set_ylabel('width (in)')
        ax.set_title(f'Sheet {plot_idx + 1} ({sheet_length:g}×{sheet_width:g})\nused: {usage:.1f}%',
                     fontsize=12, fontweight='bold')
        ax.grid(True, alpha=0.3)

    if verbose:
        print(f"\n{'='*60}")
        print(f"총 사용 원판: {len(outcome.sheets)}장")
        print(f"총 배치 보드: {outcome.total_placed}개")
        _report_unplaceable(outcome)

    labels = {}
    for sheet in outcome.sheets:
        for placed in sheet.pieces:
            labels.setdefault(placed.spec.id, placed.spec.label)
    legend_elements = [patches.Patch(facecolor=colors[spec_id], alpha=0.8,
                                     edgecolor='black', label=label)
                       for spec_id, label in labels.items()]
    fig.legend(handles=legend_elements, loc='upper center',
               bbox_to_anchor=(0.5, 0.98), ncol=max(1, len(legend_elements)))

    return _finish(fig, path, show, verbose)


def _report_unplaceable(outcome):
    if not outcome.unplaceable:
        return
    print("\n⚠️  원판에 들어가지 않는 보드:")
    for spec in outcome.unplaceable:
        note = "" if spec.rotation_allowed else " (회전 금지)"
        print(f"  - {spec.label}: {spec.length:g}\" × {spec.width:g}\"{note}")


def _finish(fig, path, show, verbose):
    fig.tight_layout()
    if path is not None:
        fig.savefig(path, dpi=150, bbox_inches='tight')
        if verbose:
            print(f"\n시각화 파일 저장: {path}")
    if show:
        plt.show()
    return fig
