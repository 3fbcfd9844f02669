"""
중첩 구조 압축 유틸리티
dict / list 트리에서 빈 값("", None, ABSENT, 빈 리스트, 빈 dict)을 재귀적으로 제거합니다.

DDL 의미와는 무관한 범용 함수이며, 변경이 없으면 입력 객체를 그대로(identity) 반환하므로
호출 측은 `result is value` 로 변경 여부를 판단할 수 있습니다.
"""
from collections.abc import Mapping
from typing import Any


class _Absent:
    """키/원소가 존재하지 않음을 나타내는 센티널 (None과 구분됨)"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self):
        return (_Absent, ())


ABSENT = _Absent()


def _is_container(value: Any) -> bool:
    return isinstance(value, (list, tuple, Mapping))


def _is_empty_scalar(value: Any) -> bool:
    return value is None or value is ABSENT or (isinstance(value, str) and value == "")


def _compress_item(value: Any) -> Any:
    """
    단일 원소를 압축합니다.
    제거 대상이면 ABSENT, 아니면 (압축된) 값을 반환합니다.
    """
    if _is_container(value):
        return compress(value)
    if _is_empty_scalar(value):
        return ABSENT
    return value


def _compress_sequence(value):
    if len(value) == 0:
        return ABSENT

    modified = False
    compressed = []
    for element in value:
        reduced = _compress_item(element)
        if reduced is ABSENT:
            modified = True
            continue
        if reduced is not element:
            modified = True
        compressed.append(reduced)

    if not modified:
        return value
    if not compressed:
        return ABSENT
    return tuple(compressed) if isinstance(value, tuple) else compressed


def _compress_mapping(value):
    if len(value) == 0:
        return ABSENT

    modified = False
    compressed = {}
    for key, item in value.items():
        reduced = _compress_item(item)
        if reduced is ABSENT:
            modified = True
            continue
        if reduced is not item:
            modified = True
        compressed[key] = reduced

    if not modified:
        return value
    if not compressed:
        return ABSENT
    return compressed


def compress(value: Any) -> Any:
    """
    값을 재귀적으로 압축합니다.

    - 스칼라(컨테이너가 아닌 값)는 그대로 반환합니다.
    - list/tuple: 빈 원소를 제거하고, 하위 컨테이너가 ABSENT로 압축되면 그 원소도 제거합니다.
    - dict: 같은 규칙을 값 단위로 적용하며 키 순서를 유지합니다.
    - 아무것도 바뀌지 않았으면 입력 객체 자체를, 모두 제거되었으면 ABSENT를 반환합니다.

    Args:
        value: JSON 형태의 임의 값

    Returns:
        압축된 값 또는 ABSENT
    """
    if isinstance(value, Mapping):
        return _compress_mapping(value)
    if isinstance(value, (list, tuple)):
        return _compress_sequence(value)
    return value
