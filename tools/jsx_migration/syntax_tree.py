# CUI // SP-CTI
"""Syntax tree shape contract for Babel/ESTree JSON trees.

The tree itself comes from an external parser (``@babel/parser`` with the
``jsx`` plugin, serialized to JSON). This module only reads it: node kind
via ``type``, call parts, element attributes/children and source location.
The core never constructs or mutates nodes.

Traversal is pre-order and iterative, so arbitrarily deep trees do not hit
the interpreter recursion limit.
"""

from dataclasses import dataclass
from typing import Any, Iterator, List, Mapping, Optional, Tuple

# Keys that hold metadata rather than child nodes
METADATA_KEYS = frozenset({
    "type", "start", "end", "loc", "range", "extra", "comments",
    "leadingComments", "trailingComments", "innerComments", "tokens",
    "errors",
})

# Child field order per node type (Babel VISITOR_KEYS subset). Unknown types
# fall back to mapping order.
VISITOR_KEYS = {
    "File": ("program",),
    "Program": ("directives", "body"),
    "ExpressionStatement": ("expression",),
    "VariableDeclaration": ("declarations",),
    "VariableDeclarator": ("id", "init"),
    "ExportDefaultDeclaration": ("declaration",),
    "ExportNamedDeclaration": ("declaration", "specifiers", "source"),
    "FunctionDeclaration": ("id", "typeParameters", "params", "returnType", "body"),
    "FunctionExpression": ("id", "typeParameters", "params", "returnType", "body"),
    "ArrowFunctionExpression": ("typeParameters", "params", "returnType", "body"),
    "ClassDeclaration": ("id", "typeParameters", "superClass", "superTypeParameters",
                         "implements", "body", "decorators"),
    "ClassBody": ("body",),
    "ClassMethod": ("decorators", "key", "typeParameters", "params", "returnType", "body"),
    "BlockStatement": ("directives", "body"),
    "ReturnStatement": ("argument",),
    "IfStatement": ("test", "consequent", "alternate"),
    "CallExpression": ("callee", "typeParameters", "typeArguments", "arguments"),
    "OptionalCallExpression": ("callee", "typeParameters", "typeArguments", "arguments"),
    "NewExpression": ("callee", "typeParameters", "typeArguments", "arguments"),
    "MemberExpression": ("object", "property"),
    "OptionalMemberExpression": ("object", "property"),
    "ConditionalExpression": ("test", "consequent", "alternate"),
    "LogicalExpression": ("left", "right"),
    "BinaryExpression": ("left", "right"),
    "AssignmentExpression": ("left", "right"),
    "ParenthesizedExpression": ("expression",),
    "ObjectExpression": ("properties",),
    "ObjectProperty": ("key", "value", "decorators"),
    "ArrayExpression": ("elements",),
    "SpreadElement": ("argument",),
    "TemplateLiteral": ("quasis", "expressions"),
    "JSXElement": ("openingElement", "children", "closingElement"),
    "JSXOpeningElement": ("name", "typeParameters", "typeArguments", "attributes"),
    "JSXClosingElement": ("name",),
    "JSXFragment": ("openingFragment", "children", "closingFragment"),
    "JSXAttribute": ("name", "value"),
    "JSXSpreadAttribute": ("argument",),
    "JSXExpressionContainer": ("expression",),
    "JSXSpreadChild": ("expression",),
    "JSXMemberExpression": ("object", "property"),
    "JSXNamespacedName": ("namespace", "name"),
}

FUNCTION_TYPES = frozenset({"ArrowFunctionExpression", "FunctionExpression"})
MEMBER_TYPES = frozenset({"MemberExpression", "OptionalMemberExpression"})
CALL_TYPES = frozenset({"CallExpression", "OptionalCallExpression"})
STRUCTURAL_CHILD_TYPES = frozenset({"JSXElement", "JSXFragment"})


@dataclass(frozen=True)
class SourceLocation:
    """Where a node starts in the original source (1-based line, 0-based column)."""
    line: int = 0
    column: int = 0
    offset: int = 0

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


# ---------------------------------------------------------------------------
# Node accessors
# ---------------------------------------------------------------------------

def is_node(value: Any) -> bool:
    return isinstance(value, Mapping) and isinstance(value.get("type"), str)


def node_type(node: Any) -> str:
    if is_node(node):
        return node["type"]
    return ""


def is_identifier(node: Any, name: Optional[str] = None) -> bool:
    if node_type(node) != "Identifier":
        return False
    return name is None or node.get("name") == name


def is_function(node: Any) -> bool:
    return node_type(node) in FUNCTION_TYPES


def callee(node: Mapping) -> Any:
    return node.get("callee")


def arguments(node: Mapping) -> List[Any]:
    args = node.get("arguments")
    return list(args) if isinstance(args, (list, tuple)) else []


def member_property_name(node: Any) -> Optional[str]:
    """Name of a non-computed ``obj.prop`` access, else None."""
    if node_type(node) not in MEMBER_TYPES or node.get("computed"):
        return None
    prop = node.get("property")
    if node_type(prop) == "Identifier":
        return prop.get("name")
    return None


def attributes(element: Mapping) -> List[Any]:
    opening = element.get("openingElement")
    if not is_node(opening):
        return []
    attrs = opening.get("attributes")
    return list(attrs) if isinstance(attrs, (list, tuple)) else []


def children(element: Mapping) -> List[Any]:
    kids = element.get("children")
    return list(kids) if isinstance(kids, (list, tuple)) else []


def attribute_name(attr: Any) -> Optional[str]:
    """Plain ``JSXIdentifier`` name of an attribute; namespaced names return None."""
    if node_type(attr) != "JSXAttribute":
        return None
    name = attr.get("name")
    if node_type(name) == "JSXIdentifier":
        return name.get("name")
    return None


def contained_expression(node: Any) -> Any:
    """Expression inside a ``{...}`` slot, or None for anything else."""
    if node_type(node) != "JSXExpressionContainer":
        return None
    return node.get("expression")


def element_name(element: Mapping) -> Optional[str]:
    """Render a JSX element's tag name: ``Foo``, ``Foo.Bar`` or ``ns:Foo``."""
    opening = element.get("openingElement")
    if not is_node(opening):
        return None
    return _jsx_name(opening.get("name"))


def _jsx_name(name: Any, path: frozenset = frozenset()) -> Optional[str]:
    # A name node already on the current chain means cyclic input
    if id(name) in path:
        return None
    path = path | {id(name)}
    kind = node_type(name)
    if kind == "JSXIdentifier":
        value = name.get("name")
        return value if isinstance(value, str) else None
    if kind == "JSXMemberExpression":
        obj = _jsx_name(name.get("object"), path)
        prop = _jsx_name(name.get("property"), path)
        if obj and prop:
            return f"{obj}.{prop}"
        return None
    if kind == "JSXNamespacedName":
        ns = _jsx_name(name.get("namespace"), path)
        local = _jsx_name(name.get("name"), path)
        if ns and local:
            return f"{ns}:{local}"
    return None


def location(node: Mapping) -> SourceLocation:
    """Best-effort start location; missing metadata yields zeros."""
    line = column = 0
    loc = node.get("loc")
    if isinstance(loc, Mapping) and isinstance(loc.get("start"), Mapping):
        start = loc["start"]
        line = start.get("line") if isinstance(start.get("line"), int) else 0
        column = start.get("column") if isinstance(start.get("column"), int) else 0
    offset = node.get("start") if isinstance(node.get("start"), int) else 0
    return SourceLocation(line=line, column=column, offset=offset)


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------

def child_nodes(node: Mapping) -> List[Mapping]:
    """Direct child nodes in visitor-key order."""
    keys = VISITOR_KEYS.get(node["type"])
    if keys is None:
        keys = [k for k in node.keys() if k not in METADATA_KEYS]
    result = []
    for key in keys:
        value = node.get(key)
        if isinstance(value, (list, tuple)):
            result.extend(v for v in value if is_node(v))
        elif is_node(value):
            result.append(value)
    return result


def iter_preorder(tree: Any) -> Iterator[Tuple[Mapping, Optional[Mapping]]]:
    """Yield ``(node, parent)`` for every reachable node, depth-first pre-order.

    A node object already on the current ancestor path is skipped, so a
    malformed cyclic structure still terminates.
    """
    if isinstance(tree, (list, tuple)):
        roots = [n for n in tree if is_node(n)]
    elif is_node(tree):
        roots = [tree]
    else:
        return

    # Entries are (node, parent, exiting)
    stack = [(n, None, False) for n in reversed(roots)]
    ancestors = set()
    while stack:
        node, parent, exiting = stack.pop()
        if exiting:
            ancestors.discard(id(node))
            continue
        if id(node) in ancestors:
            continue
        yield node, parent
        ancestors.add(id(node))
        stack.append((node, parent, True))
        for child in reversed(child_nodes(node)):
            stack.append((child, node, False))
