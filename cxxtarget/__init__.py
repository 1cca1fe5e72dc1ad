# cxxtarget/__init__.py
"""C++ source-emission backend core for a parser generator.

This package provides:
- Encoding strategies for 8/16/32-bit code units
- C++ character/string literal synthesis from grammar literals
- Analysis threshold merging, action-scope validation, namespace resolution

Grammar parsing, analysis and template rendering live outside this package.
"""

from .codegen.encoding import DEFAULT_ENCODING, DecodeError, Encoding
from .codegen.heuristics import CXX_THRESHOLDS, DEFAULT_THRESHOLDS, ThresholdSet, merge_thresholds
from .codegen.literals import DegradedLiteral, LiteralSynthesizer, literal_prefix
from .codegen.namespace import namespace_components
from .codegen.scopes import is_valid_action_scope
from .codegen.target import CxxTarget, TargetConfig, get_target
from .grammar.ast import Grammar, GrammarKind, TokenDecl
from .grammar.literals import LiteralError, unescape_grammar_literal
