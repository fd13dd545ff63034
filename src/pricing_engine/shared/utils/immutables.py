# 🧊 pricing_engine/shared/utils/immutables.py
"""
🧊 Незмінні знімки вхідних даних на час одного розрахунку.

🔹 `freeze_mapping` — плаский знімок мапи (таблиця курсів, кількості набору, назви товару).
"""

from __future__ import annotations

# 🔠 Системні імпорти
from collections.abc import Mapping                             # 🧰 Вхідні мапи
from types import MappingProxyType                              # 🔒 Незмінна обгортка над dict
from typing import Any, Callable, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


def _same(value: Any) -> Any:
    return value


def freeze_mapping(data: Optional[Mapping[K, Any]], convert: Callable[[Any], V] = _same) -> Mapping[K, V]:
    """🔒 Копія мапи в `MappingProxyType`; `convert` застосовується до кожного значення."""
    return MappingProxyType({key: convert(value) for key, value in (data or {}).items()})


__all__ = ["freeze_mapping"]
