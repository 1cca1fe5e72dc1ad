# cxxtarget/codegen/heuristics.py
"""분석 단계 휴리스틱 임계값 (인라인 테이블 vs switch).

- max_inline_dfa_states : 인라인으로 펼칠 비순환 DFA 상태 수 상한
- max_switch_case_labels: switch 하나에 넣을 case 라벨 수 상한
- min_switch_alts       : switch를 쓰기 시작하는 최소 대안 수

C++ 컴파일러는 큰 switch를 잘 최적화하므로, 기본값 그대로인 항목만
C++ 선호값으로 끌어올린다. 호출자가 바꾼 값은 건드리지 않는다.

주의: 분석(외부 단계) 전에 **한 번** 적용하는 것은 호출자 책임이다.
merge는 멱등이라 두 번 불려도 결과는 같지만, 그것이 단일 호출 규율을 대신하지는 않는다.
"""

from __future__ import annotations
from dataclasses import dataclass, fields, replace


@dataclass(frozen=True)
class ThresholdSet:
    max_inline_dfa_states: int = 60
    max_switch_case_labels: int = 300
    min_switch_alts: int = 3


DEFAULT_THRESHOLDS = ThresholdSet()

CXX_THRESHOLDS = ThresholdSet(
    max_inline_dfa_states=65535,
    max_switch_case_labels=3000,
    min_switch_alts=1,
)


def merge_thresholds(current: ThresholdSet,
                     preferred: ThresholdSet,
                     defaults: ThresholdSet = DEFAULT_THRESHOLDS) -> ThresholdSet:
    """
    merge_thresholds(current, preferred[, defaults]) -> ThresholdSet
    ----------------------------------------------------------------
    current의 각 항목이 defaults와 같으면 preferred 값으로, 다르면 current 값 유지.
    """
    changes = {}
    for f in fields(ThresholdSet):
        if getattr(current, f.name) == getattr(defaults, f.name):
            changes[f.name] = getattr(preferred, f.name)
    return replace(current, **changes)
