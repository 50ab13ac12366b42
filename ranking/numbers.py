"""
숫자 입력 해석

쿼리 파라미터와 요청 본문 값은 앞부분 숫자만 사용한다
("12abc" → 12, "4.5점" → 4.5). 해석할 수 없으면 None.
"""
import math
import re
from typing import Any, Optional

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_float(value: Any) -> Optional[float]:
    """실수 해석 (숫자는 그대로, 문자열은 앞부분 숫자, 그 외 None)"""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        match = _FLOAT_PREFIX.match(value)
        if not match:
            return None
        number = float(match.group(1))
    else:
        return None
    return number if math.isfinite(number) else None


def parse_int(value: Any) -> Optional[int]:
    """정수 해석 (실수는 소수점 이하 버림)"""
    if isinstance(value, str):
        match = _INT_PREFIX.match(value)
        return int(match.group(1)) if match else None
    number = parse_float(value)
    return int(number) if number is not None else None
