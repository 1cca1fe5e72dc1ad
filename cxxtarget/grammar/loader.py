"""(MVP) 문법 설명(JSON) 로더

문법 파싱은 이 패키지의 몫이 아니므로, 앞단이 만들어 둔 요약을 JSON으로 받는다.

    {
      "name": "Expr",
      "kind": "combined",
      "actions": {"parser": {"namespace": ["my::", "expr"]}},
      "tokens": [{"name": "EOF", "type": -1}, {"name": "PLUS", "type": 4}],
      "composite_root": { ... 같은 형식 ... }
    }
"""

from __future__ import annotations
import json
from pathlib    import Path
from typing     import Any, Dict

from .ast import Grammar, TokenDecl, coerce_kind


class LoaderError(ValueError):
    """문법 설명 형식 오류."""


def load_grammar_text(path: str) -> str:
    """
    Load Grammar Description Text
    """
    text = Path(path).read_text(encoding="utf-8")
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _is_action_body(body: Any) -> bool:
    """액션 본문은 문자열 또는 문자열 조각 리스트."""
    if isinstance(body, str):
        return True
    return isinstance(body, list) and all(isinstance(p, str) for p in body)


def grammar_from_dict(d: Dict[str, Any]) -> Grammar:
    if not isinstance(d, dict):
        raise LoaderError(f"grammar description must be an object, got {type(d).__name__}")
    try:
        name = d["name"]
    except KeyError:
        raise LoaderError("grammar description: missing 'name'")
    kind = coerce_kind(d.get("kind"))
    if kind is None:
        raise LoaderError(f"grammar '{name}': unknown kind {d.get('kind')!r}")

    actions = d.get("actions") or {}
    if not isinstance(actions, dict) or not all(isinstance(v, dict) for v in actions.values()):
        raise LoaderError(f"grammar '{name}': 'actions' must map scope -> {{name: body}}")
    for scope, acts in actions.items():
        for act_name, body in acts.items():
            if not _is_action_body(body):
                raise LoaderError(
                    f"grammar '{name}': action @{scope}::{act_name} must be a string "
                    f"or a list of strings, got {body!r}"
                )

    raw_tokens = d.get("tokens") or []
    if not isinstance(raw_tokens, list):
        raise LoaderError(f"grammar '{name}': 'tokens' must be a list, got {type(raw_tokens).__name__}")

    tokens = []
    for i, td in enumerate(raw_tokens):
        try:
            tokens.append(TokenDecl(name=str(td["name"]), ttype=int(td["type"])))
        except (KeyError, TypeError, ValueError):
            raise LoaderError(f"grammar '{name}': bad token entry #{i}: {td!r}")

    root = d.get("composite_root")
    return Grammar(
        name=str(name),
        kind=kind,
        actions=actions,
        tokens=tokens,
        composite_root=grammar_from_dict(root) if root is not None else None,
    )


def load_grammar(path: str) -> Grammar:
    text = load_grammar_text(path)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise LoaderError(f"{path}: invalid JSON: {e}")
    return grammar_from_dict(data)
