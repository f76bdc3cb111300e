"""패킹 전략 모듈"""
from .bottom_left import BottomLeftPacker, plan

__all__ = [
    'BottomLeftPacker',
    'plan',
]
