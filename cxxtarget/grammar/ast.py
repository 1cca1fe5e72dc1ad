# cxxtarget/grammar/ast.py
"""Grammar 모델 (백엔드가 소비하는 최소 정보)

- GrammarKind: lexer / parser / combined / treeparser
- TokenDecl : 토큰 이름과 토큰 타입 번호
- Grammar   : 이름, 종류, 액션 맵, 토큰 선언, (선택) 합성 문법의 루트
"""

from __future__     import annotations
from dataclasses    import dataclass, field
from enum           import Enum
from typing         import Dict, List, Optional, Union


class GrammarKind(Enum):
    LEXER       = "lexer"
    PARSER      = "parser"
    COMBINED    = "combined"
    TREE_PARSER = "treeparser"


def coerce_kind(kind: object) -> Optional[GrammarKind]:
    """GrammarKind 또는 그 값 문자열을 GrammarKind로. 알 수 없으면 None."""
    if isinstance(kind, GrammarKind):
        return kind
    try:
        return GrammarKind(kind)
    except (ValueError, TypeError):
        return None


# @scope::name { ... } 본문은 텍스트 조각 리스트로 보존된다.
ActionValue = Union[str, List[str]]
ActionMap = Dict[str, Dict[str, ActionValue]]


@dataclass
class TokenDecl:
    name: str
    ttype: int


@dataclass
class Grammar:
    """
    Grammar
    =======
    - name          : 문법 이름
    - kind          : GrammarKind
    - actions       : {scope: {action_name: 본문 조각들}}
    - tokens        : 토큰 선언(헤더 파일용)
    - composite_root: 합성(import) 문법이면 루트 문법, 아니면 None
    """
    name: str
    kind: GrammarKind
    actions: ActionMap = field(default_factory=dict)
    tokens: List[TokenDecl] = field(default_factory=list)
    composite_root: Optional["Grammar"] = None

    def root(self) -> "Grammar":
        return self.composite_root if self.composite_root is not None else self
