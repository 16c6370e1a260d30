# CUI // SP-CTI
"""Expression Renderer - turn an ESTree expression back into source text.

Used by the pattern detector to recover the collection name of
``<expr>.map(...)`` calls. Output is concise, single-line JavaScript
(``this.state.items``, ``Object.keys(users)``, ``data?.rows``).

Only plain value expressions are supported. Functions, JSX and other
constructs raise ExpressionRenderError; the detector substitutes a
placeholder in that case.
"""

import json
from typing import Any, Callable, Mapping

from tools.jsx_migration.syntax_tree import node_type

Renderer = Callable[[Mapping], str]


class ExpressionRenderError(Exception):
    """Raised when an expression cannot be rendered back to source text."""

    def __init__(self, message, node_kind=""):
        super().__init__(message)
        self.node_kind = node_kind


def render_expression(node: Any) -> str:
    """Render *node* as concise source text, raising ExpressionRenderError."""
    text = _render(node)
    extra = node.get("extra") if isinstance(node, Mapping) else None
    if isinstance(extra, Mapping) and extra.get("parenthesized"):
        return f"({text})"
    return text


def _render(node):
    kind = node_type(node)
    if not kind:
        raise ExpressionRenderError("Not a syntax tree node")

    if kind == "Identifier":
        return _require_str(node, "name", kind)
    if kind == "ThisExpression":
        return "this"
    if kind == "Super":
        return "super"
    if kind == "StringLiteral":
        return json.dumps(_require_str(node, "value", kind))
    if kind == "NumericLiteral":
        extra = node.get("extra")
        if isinstance(extra, Mapping) and isinstance(extra.get("raw"), str):
            return extra["raw"]
        value = node.get("value")
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return repr(value)
        raise ExpressionRenderError("NumericLiteral without value", kind)
    if kind == "BooleanLiteral":
        return "true" if node.get("value") else "false"
    if kind == "NullLiteral":
        return "null"
    if kind in ("MemberExpression", "OptionalMemberExpression"):
        obj = render_expression(node.get("object"))
        prop = render_expression(node.get("property"))
        optional = "?." if node.get("optional") else ""
        if node.get("computed"):
            return f"{obj}{optional}[{prop}]"
        return f"{obj}{optional or '.'}{prop}"
    if kind in ("CallExpression", "OptionalCallExpression"):
        target = render_expression(node.get("callee"))
        args = node.get("arguments") or []
        rendered = ", ".join(render_expression(a) for a in args)
        optional = "?." if node.get("optional") else ""
        return f"{target}{optional}({rendered})"
    if kind == "ArrayExpression":
        elements = node.get("elements") or []
        return "[" + ", ".join(render_expression(e) for e in elements if e is not None) + "]"
    if kind in ("LogicalExpression", "BinaryExpression"):
        operator = _require_str(node, "operator", kind)
        return f"{render_expression(node.get('left'))} {operator} {render_expression(node.get('right'))}"
    if kind == "UnaryExpression":
        operator = _require_str(node, "operator", kind)
        sep = " " if operator.isalpha() else ""
        return f"{operator}{sep}{render_expression(node.get('argument'))}"
    if kind == "SpreadElement":
        return f"...{render_expression(node.get('argument'))}"
    if kind == "ParenthesizedExpression":
        return f"({render_expression(node.get('expression'))})"
    if kind == "TSNonNullExpression":
        return f"{render_expression(node.get('expression'))}!"
    if kind in ("TSAsExpression", "TypeCastExpression"):
        return render_expression(node.get("expression"))

    raise ExpressionRenderError(f"Cannot render {kind} as source text", kind)


def _require_str(node, key, kind):
    value = node.get(key)
    if not isinstance(value, str):
        raise ExpressionRenderError(f"{kind}.{key} is missing", kind)
    return value
