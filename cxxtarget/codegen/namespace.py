# cxxtarget/codegen/namespace.py
"""@namespace { a::b::c } 액션에서 네임스페이스 경로를 뽑는다.

- 액션 본문 조각을 이어 붙인 뒤 `::` 로 자르고, 각 조각의 앞뒤 공백을 제거
- 공백 제거 **후** 끝쪽의 빈 조각을 버린다
  ("a::b::" → ["a", "b"], "a::b::  " → ["a", "b"], "" → [])
  공백만 있는 끝 조각도 빈 조각으로 보고 버린다. 빈 본문은 [""] 가 아닌 [] 이다.
- 가운데 빈 조각은 그대로 둔다("a::::b" → ["a", "", "b"])
- 식별자 유효성은 검사하지 않는다(그대로 템플릿에 넘김)
"""

from __future__ import annotations
from typing import List, Mapping, Optional

from ..grammar.ast import ActionValue, Grammar, GrammarKind
from .scopes import default_action_scope

SCOPE_SEPARATOR = "::"
NAMESPACE_ACTION = "namespace"


def split_namespace(value: ActionValue) -> List[str]:
    text = value if isinstance(value, str) else "".join(value)
    parts = [p.strip() for p in text.split(SCOPE_SEPARATOR)]
    while parts and not parts[-1]:
        parts.pop()
    return parts


def namespace_components(actions: Mapping[str, Mapping[str, ActionValue]],
                         kind: GrammarKind) -> List[str]:
    scope_actions = actions.get(default_action_scope(kind))
    if not scope_actions:
        return []
    value: Optional[ActionValue] = scope_actions.get(NAMESPACE_ACTION)
    if value is None:
        return []
    return split_namespace(value)


def grammar_namespace(g: Grammar) -> List[str]:
    """합성 문법이면 루트 문법의 액션을 본다."""
    root = g.root()
    return namespace_components(root.actions, root.kind)
