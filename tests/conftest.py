#!/usr/bin/env python3
# CUI // SP-CTI
"""Shared pytest fixtures for the JSX migration test suite.

Trees are written in the same shape ``@babel/parser`` emits with the ``jsx``
plugin, serialized to JSON. The ``babel`` fixture exposes small builders so
tests read close to the JSX they stand for.
"""

import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path
BASE_DIR = Path(__file__).resolve().parent.parent
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))


class BabelNodes:
    """Builders for Babel AST JSON nodes."""

    @staticmethod
    def ident(name):
        return {"type": "Identifier", "name": name}

    @staticmethod
    def string(value):
        return {"type": "StringLiteral", "value": value,
                "extra": {"rawValue": value, "raw": f'"{value}"'}}

    @staticmethod
    def null():
        return {"type": "NullLiteral"}

    @staticmethod
    def this():
        return {"type": "ThisExpression"}

    @classmethod
    def _expr(cls, value):
        return cls.ident(value) if isinstance(value, str) else value

    @classmethod
    def call(cls, callee, *args):
        return {"type": "CallExpression", "callee": cls._expr(callee),
                "arguments": [cls._expr(a) for a in args]}

    @classmethod
    def member(cls, obj, prop, computed=False, optional=False):
        node_type = "OptionalMemberExpression" if optional else "MemberExpression"
        node = {"type": node_type, "object": cls._expr(obj),
                "property": cls._expr(prop), "computed": computed}
        if optional:
            node["optional"] = True
        return node

    @classmethod
    def dotted(cls, path):
        """``"this.state.items"`` -> nested MemberExpression."""
        parts = path.split(".")
        node = cls.this() if parts[0] == "this" else cls.ident(parts[0])
        for part in parts[1:]:
            node = cls.member(node, part)
        return node

    @classmethod
    def method_call(cls, obj, method, *args):
        target = cls.dotted(obj) if isinstance(obj, str) else obj
        return cls.call(cls.member(target, method), *args)

    @classmethod
    def arrow(cls, body=None, params=("props",)):
        return {"type": "ArrowFunctionExpression",
                "params": [cls.ident(p) for p in params],
                "body": body if body is not None else cls.null(),
                "expression": True}

    @classmethod
    def function(cls, body=None):
        return {"type": "FunctionExpression", "id": None, "params": [],
                "body": {"type": "BlockStatement", "directives": [],
                         "body": [{"type": "ReturnStatement",
                                   "argument": body if body is not None else cls.null()}]}}

    @staticmethod
    def _jsx_name(name):
        if ":" in name:
            ns, local = name.split(":", 1)
            return {"type": "JSXNamespacedName",
                    "namespace": {"type": "JSXIdentifier", "name": ns},
                    "name": {"type": "JSXIdentifier", "name": local}}
        parts = name.split(".")
        node = {"type": "JSXIdentifier", "name": parts[0]}
        for part in parts[1:]:
            node = {"type": "JSXMemberExpression", "object": node,
                    "property": {"type": "JSXIdentifier", "name": part}}
        return node

    @classmethod
    def element(cls, name, attrs=(), children=()):
        children = list(children)
        return {
            "type": "JSXElement",
            "openingElement": {"type": "JSXOpeningElement", "name": cls._jsx_name(name),
                               "attributes": list(attrs), "selfClosing": not children},
            "closingElement": (
                {"type": "JSXClosingElement", "name": cls._jsx_name(name)} if children else None
            ),
            "children": children,
        }

    @classmethod
    def attr(cls, name, value):
        if isinstance(value, str):
            wrapped = cls.string(value)
        else:
            wrapped = cls.container(value)
        return {"type": "JSXAttribute",
                "name": {"type": "JSXIdentifier", "name": name},
                "value": wrapped}

    @staticmethod
    def container(expression):
        return {"type": "JSXExpressionContainer", "expression": expression}

    @staticmethod
    def text(value):
        return {"type": "JSXText", "value": value,
                "extra": {"rawValue": value, "raw": value}}

    @staticmethod
    def fragment(*children):
        return {"type": "JSXFragment",
                "openingFragment": {"type": "JSXOpeningFragment"},
                "closingFragment": {"type": "JSXClosingFragment"},
                "children": list(children)}

    @classmethod
    def ternary(cls, test, consequent, alternate):
        return {"type": "ConditionalExpression", "test": cls._expr(test),
                "consequent": consequent, "alternate": alternate}

    @classmethod
    def const(cls, name, init):
        return {"type": "VariableDeclaration", "kind": "const",
                "declarations": [{"type": "VariableDeclarator",
                                  "id": cls.ident(name), "init": init}]}

    @staticmethod
    def program(*statements):
        body = []
        for stmt in statements:
            if stmt["type"].endswith(("Statement", "Declaration")):
                body.append(stmt)
            else:
                body.append({"type": "ExpressionStatement", "expression": stmt})
        return {"type": "File",
                "program": {"type": "Program", "sourceType": "module",
                            "directives": [], "body": body},
                "comments": []}

    @staticmethod
    def at(node, line, column=0, offset=0):
        """Attach Babel location metadata to *node* and return it."""
        node["start"] = offset
        node["loc"] = {"start": {"line": line, "column": column},
                       "end": {"line": line, "column": column + 1}}
        return node


@pytest.fixture
def babel():
    return BabelNodes


@pytest.fixture
def empty_tree(babel):
    return babel.program()
