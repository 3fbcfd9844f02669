"""
점(.)으로 구분된 식별자를 schema / table / column 으로 분해합니다.
"""

from typing import NamedTuple


# 기대 형태 -> 구성요소 개수
NAME_SHAPES = {
    "S.T": 2,
    "S.T.C": 3,
}


class QualifiedName(NamedTuple):
    schema: str
    table: str
    column: str


def split_qualified_name(full_name: str, shape: str = "S.T") -> QualifiedName:
    """
    식별자를 기대 형태(shape)에 맞춰 분해합니다.

    구성요소가 형태보다 적으면 오른쪽 정렬합니다.
        - "t"     (S.T)   -> ("", "t", "")
        - "t.c"   (S.T.C) -> ("", "t", "c")
    구성요소가 정확히 3개면 형태와 무관하게 (schema, table, column) 입니다.

    Raises:
        ValueError: 알 수 없는 shape
    """
    if shape not in NAME_SHAPES:
        raise ValueError(
            f"지원하지 않는 이름 형태: {shape}. 지원하는 형태: {', '.join(NAME_SHAPES)}"
        )

    parts = [part.strip().strip('"') for part in full_name.split(".")]
    if len(parts) >= 3:
        schema, table, column = parts[-3:]
        return QualifiedName(schema, table, column)

    arity = NAME_SHAPES[shape]
    padded = [""] * (arity - len(parts)) + parts
    if arity == 2:
        return QualifiedName(padded[0], padded[1], "")
    return QualifiedName(padded[0], padded[1], padded[2])
