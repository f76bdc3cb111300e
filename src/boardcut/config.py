"""
기본 설정값과 표시용 상수
"""

import os

# 원판 기본 크기 (인치, 4×8 합판)
DEFAULT_SHEET_LENGTH = 96
DEFAULT_SHEET_WIDTH = 48

# 원판 1장 가격 (비용 추정용)
DEFAULT_PRICE_PER_SHEET = 45.0

# 웹 서버
WEB_HOST = os.environ.get("BOARDCUT_HOST", "0.0.0.0")
WEB_PORT = int(os.environ.get("BOARDCUT_PORT", "8000"))

# 시각화
OUTPUT_PNG = "boardcut_layout.png"
COLOR_PALETTE = [
    "#8dd3c7", "#ffffb3", "#bebada", "#fb8072", "#80b1d3",
    "#fdb462", "#b3de69", "#fccde5", "#d9d9d9", "#bc80bd",
]

# 대화형 모드 샘플 재단 목록: (id, 이름, 길이, 너비, 두께, 수량, 회전 허용)
SAMPLE_BOARDS = [
    ("1", "Side Panels", 24, 12, 1, 4, False),
    ("2", "Top/Bottom", 48, 12, 1, 2, False),
]
