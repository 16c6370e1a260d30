# CUI // SP-CTI
"""Pattern Detector - single pre-order pass over a Babel JSX syntax tree.

Call expressions are classified by a priority chain (first match wins):
  1. withX(Component)           -> WrappedComponent
  2. memo(...) / React.memo(...) -> MemoizationMarker
  3. forwardRef(...)             -> RefForwarding
  4. <expr>.map(...)             -> IterationRendering

Elements and expressions are checked independently of that chain:
  5. render prop / function-as-children   -> DeferredRenderCallback
  6. <>...</> / <Fragment>                -> MultiRootGrouping
  7. cond ? a : b inside a JSX {...} slot -> ConditionalBranch

Traversal always continues into a matched node, so nested occurrences are
recorded on their own. Nothing here raises for a well-formed tree: a node
matching no rule is skipped, and a renderer failure degrades to a placeholder
plus a diagnostic on the catalog.
"""

import logging
from typing import Any, Callable, Mapping, Optional, Tuple

from tools.jsx_migration import syntax_tree as st
from tools.jsx_migration.expression_renderer import Renderer, render_expression
from tools.jsx_migration.pattern_catalog import (
    CatalogBuilder,
    ConditionalBranch,
    DeferredRenderCallback,
    Diagnostic,
    IterationRendering,
    MemoizationMarker,
    MultiRootGrouping,
    PatternCatalog,
    RefForwarding,
    WrappedComponent,
)
from tools.jsx_migration.pattern_config import DEFAULT_PATTERN_CONFIG, PatternConfig

logger = logging.getLogger("jsxport.jsx_migration.pattern_detector")

# Rule signature: (node, builder, config, renderer) -> builder, or None if no match
Rule = Callable[[Mapping, CatalogBuilder, PatternConfig, Renderer], Optional[CatalogBuilder]]

_EMPTY_ALTERNATE_IDENTIFIERS = frozenset({"undefined"})


def detect(tree: Any, config: Optional[PatternConfig] = None,
           renderer: Optional[Renderer] = None) -> PatternCatalog:
    """Walk *tree* once and return the catalog of recognized JSX idioms.

    Args:
        tree: Babel/ESTree JSON tree (``File``, ``Program``, any node, or a
            list of nodes).
        config: naming conventions; defaults to the builtin PatternConfig.
        renderer: ``node -> source text`` capability used for collection
            names; defaults to render_expression.
    """
    config = config or DEFAULT_PATTERN_CONFIG
    renderer = renderer or render_expression
    builder = CatalogBuilder()

    for node, parent in st.iter_preorder(tree):
        kind = node["type"]
        if kind in st.CALL_TYPES:
            builder = _classify_call(node, builder, config, renderer)
        elif kind == "JSXElement":
            builder = _detect_deferred_render(node, builder, config)
            builder = _detect_fragment_element(node, builder, config)
        elif kind == "JSXFragment":
            builder = _record_grouping(node, builder)
        elif kind == "ConditionalExpression":
            if st.node_type(parent) == "JSXExpressionContainer":
                builder = _record_conditional(node, builder)

    catalog = builder.build()
    if catalog.is_empty:
        logger.info("No JSX patterns detected")
    else:
        logger.info("Detected %d JSX patterns: %s", catalog.total, catalog.summary())
    return catalog


# ---------------------------------------------------------------------------
# Call expressions (priority chain)
# ---------------------------------------------------------------------------

def _classify_call(node, builder, config, renderer):
    for rule in CALL_RULES:
        result = rule(node, builder, config, renderer)
        if result is not None:
            return result
    return builder


def _wrapped_component(node, builder, config, renderer):
    fn = st.callee(node)
    if not st.is_identifier(fn):
        return None
    wrapper_name = fn.get("name")
    if not isinstance(wrapper_name, str) or not config.is_wrapper_name(wrapper_name):
        return None
    args = st.arguments(node)
    if not args:
        return None

    # Shallow: only the direct argument is inspected, chains get the placeholder
    first = args[0]
    if st.is_identifier(first) and isinstance(first.get("name"), str):
        component_name = first["name"]
    else:
        component_name = config.component_placeholder

    occurrence = WrappedComponent(
        wrapper_name=wrapper_name,
        component_name=component_name,
        generated_name=config.wrapper_generated_name(wrapper_name),
        location=st.location(node),
    )
    logger.debug("Detected HOC %s(%s) -> %s", wrapper_name, component_name,
                 occurrence.generated_name)
    return builder.add(occurrence)


def _callee_matches_alias(fn, alias):
    if st.is_identifier(fn, alias):
        return True
    return st.member_property_name(fn) == alias


def _memoization_marker(node, builder, config, renderer):
    if not _callee_matches_alias(st.callee(node), config.memo_alias):
        return None
    args = st.arguments(node)
    first = args[0] if args else None
    if st.is_identifier(first) and isinstance(first.get("name"), str):
        component_name = first["name"]
    elif first is None or st.is_function(first):
        component_name = config.memo_default_name
    else:
        component_name = config.component_placeholder

    logger.debug("Detected memo(%s)", component_name)
    return builder.add(MemoizationMarker(component_name=component_name,
                                         location=st.location(node)))


def _ref_forwarding(node, builder, config, renderer):
    if not _callee_matches_alias(st.callee(node), config.ref_forwarding_alias):
        return None
    logger.debug("Detected %s", config.ref_forwarding_alias)
    return builder.add(RefForwarding(location=st.location(node)))


def _iteration_rendering(node, builder, config, renderer):
    fn = st.callee(node)
    if st.member_property_name(fn) != config.iteration_method:
        return None

    loc = st.location(node)
    try:
        collection_name = renderer(fn.get("object"))
        if not isinstance(collection_name, str) or not collection_name:
            raise ValueError("renderer returned no text")
    except Exception as e:
        logger.warning("Failed to render collection expression at %s: %s", loc, e)
        collection_name = config.collection_placeholder
        builder = builder.note(Diagnostic(
            severity="warning",
            message=(f"Could not render .{config.iteration_method}() receiver "
                     f"({e}); using '{collection_name}'"),
            location=loc,
        ))

    logger.debug("Detected list rendering over %s", collection_name)
    return builder.add(IterationRendering(collection_name=collection_name, location=loc))


CALL_RULES: Tuple[Rule, ...] = (
    _wrapped_component,
    _memoization_marker,
    _ref_forwarding,
    _iteration_rendering,
)


# ---------------------------------------------------------------------------
# Elements and expressions
# ---------------------------------------------------------------------------

def _detect_deferred_render(node, builder, config):
    prop_name = None
    for attr in st.attributes(node):
        name = st.attribute_name(attr)
        if name is None or not config.is_callback_prop(name):
            continue
        if st.is_function(st.contained_expression(attr.get("value"))):
            prop_name = name
            break

    if prop_name is None:
        for child in st.children(node):
            if st.is_function(st.contained_expression(child)):
                prop_name = config.callback_fallback_name
                break

    if prop_name is None:
        return builder

    host_name = st.element_name(node) or config.host_placeholder
    logger.debug("Detected render prop %s.%s", host_name, prop_name)
    return builder.add(DeferredRenderCallback(
        host_name=host_name,
        callback_prop_name=prop_name,
        location=st.location(node),
    ))


def _detect_fragment_element(node, builder, config):
    if st.element_name(node) in config.fragment_names:
        return _record_grouping(node, builder)
    return builder


def _record_grouping(node, builder):
    count = sum(1 for child in st.children(node)
                if st.node_type(child) in st.STRUCTURAL_CHILD_TYPES)
    logger.debug("Detected fragment with %d element children", count)
    return builder.add(MultiRootGrouping(structural_child_count=count,
                                         location=st.location(node)))


def _record_conditional(node, builder):
    has_alternate = _is_present(node.get("alternate"))
    logger.debug("Detected conditional rendering (alternate=%s)", has_alternate)
    return builder.add(ConditionalBranch(has_alternate=has_alternate,
                                         location=st.location(node)))


def _is_present(branch):
    """False for a missing branch or one that renders nothing."""
    kind = st.node_type(branch)
    if not kind or kind == "NullLiteral":
        return False
    if kind == "Identifier" and branch.get("name") in _EMPTY_ALTERNATE_IDENTIFIERS:
        return False
    if kind == "StringLiteral" and branch.get("value") == "":
        return False
    return True
