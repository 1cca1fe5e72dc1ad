# cxxtarget/codegen/scopes.py
"""@scope::name { ... } 액션 스코프 검증.

문법 종류마다 허용되는 스코프 이름 화이트리스트를 둔다.
- 공통: header, includes, preincludes, overrides
- lexer: lexer / parser: parser / combined: lexer+parser / treeparser: treeparser

알 수 없는 (종류, 이름) 조합은 예외 없이 False.
"""

from __future__ import annotations
from typing import Dict, FrozenSet

from ..grammar.ast import GrammarKind, coerce_kind

COMMON_SCOPES: FrozenSet[str] = frozenset({"header", "includes", "preincludes", "overrides"})

VALID_ACTION_SCOPES: Dict[GrammarKind, FrozenSet[str]] = {
    GrammarKind.LEXER:       COMMON_SCOPES | {"lexer"},
    GrammarKind.PARSER:      COMMON_SCOPES | {"parser"},
    GrammarKind.COMBINED:    COMMON_SCOPES | {"lexer", "parser"},
    GrammarKind.TREE_PARSER: COMMON_SCOPES | {"treeparser"},
}

_DEFAULT_SCOPE: Dict[GrammarKind, str] = {
    GrammarKind.LEXER:       "lexer",
    GrammarKind.PARSER:      "parser",
    GrammarKind.COMBINED:    "parser",
    GrammarKind.TREE_PARSER: "treeparser",
}


def is_valid_action_scope(kind: object, scope: object) -> bool:
    gk = coerce_kind(kind)
    if gk is None or not isinstance(scope, str):
        return False
    return scope in VALID_ACTION_SCOPES[gk]


def default_action_scope(kind: GrammarKind) -> str:
    """스코프 없이 쓴 @name { ... } 가 속하는 기본 스코프."""
    return _DEFAULT_SCOPE[kind]
