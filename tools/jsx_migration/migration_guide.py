# CUI // SP-CTI
"""Migration Guide - Markdown conversion notes for a PatternCatalog."""

from typing import Callable, Dict, List

from tools.jsx_migration.pattern_catalog import (
    CANONICAL_ORDER,
    Category,
    PatternCatalog,
    require_exhaustive,
)

GUIDE_TITLE = "# JSX Pattern Conversion Guide"


def describe(catalog: PatternCatalog) -> str:
    """Render one section per non-empty category, in canonical order.

    An empty catalog yields the title line alone.
    """
    sections = []
    for category in CANONICAL_ORDER:
        occurrences = catalog.get(category)
        if occurrences:
            sections.append("\n".join(SECTION_WRITERS[category](occurrences)))
    if not sections:
        return GUIDE_TITLE + "\n"
    return GUIDE_TITLE + "\n\n" + "\n".join(sections)


def _hoc_section(occurrences) -> List[str]:
    lines = ["## Higher-Order Components (HOCs)", ""]
    for hoc in occurrences:
        lines += [
            f"### {hoc.wrapper_name}",
            f"- **Wraps**: `{hoc.component_name}`",
            "- **Pattern**: Mixin",
            f"- **Flutter**: `{hoc.generated_name}`",
            f"- **Usage**: `class MyWidgetState extends State<MyWidget> with {hoc.generated_name} {{}}`",
            "",
        ]
    return lines


def _render_props_section(occurrences) -> List[str]:
    lines = ["## Render Props", ""]
    for rp in occurrences:
        lines += [
            f"### {rp.host_name}.{rp.callback_prop_name}",
            "- **Pattern**: Builder",
            "- **Flutter**: Use `Builder` widget with `builder` callback",
            "",
        ]
    return lines


def _memo_section(occurrences) -> List[str]:
    lines = ["## React.memo", ""]
    for memo in occurrences:
        lines += [
            f"### {memo.component_name}",
            "- **Pattern**: const constructor",
            f"- **Flutter**: Use `const {memo.component_name}()`; Flutter skips rebuilding const widgets",
            "",
        ]
    return lines


def _forward_ref_section(occurrences) -> List[str]:
    return [
        "## React.forwardRef",
        "",
        f"- **Occurrences**: {len(occurrences)}",
        "- **Flutter**: Use `GlobalKey` to access widget/state from parent",
        "- **Example**: `final key = GlobalKey<MyWidgetState>();`",
        "",
    ]


def _list_section(occurrences) -> List[str]:
    lines = ["## List Rendering", ""]
    for lst in occurrences:
        lines += [
            f"### {lst.collection_name}",
            "- **Pattern**: ListView.builder",
            f"- **Flutter**: `ListView.builder(itemCount: {lst.collection_name}.length, itemBuilder: ...)`",
            "",
        ]
    return lines


def _fragment_section(occurrences) -> List[str]:
    lines = ["## Fragments", ""]
    for i, frag in enumerate(occurrences, 1):
        lines += [
            f"### Fragment {i}",
            f"- **Element children**: {frag.structural_child_count}",
            "- **Flutter**: Return a list of widgets or wrap them in `Column`/`Row`",
            "",
        ]
    return lines


def _conditional_section(occurrences) -> List[str]:
    lines = ["## Conditional Rendering", ""]
    for i, cond in enumerate(occurrences, 1):
        if cond.has_alternate:
            flutter = "`condition ? Widget1() : Widget2()`"
        else:
            flutter = "`if (condition) Widget1()` inside a children list"
        lines += [
            f"### Conditional {i}",
            f"- **Has alternate**: {'yes' if cond.has_alternate else 'no'}",
            f"- **Flutter**: {flutter}",
            "",
        ]
    return lines


SECTION_WRITERS: Dict[Category, Callable[[tuple], List[str]]] = {
    Category.WRAPPED_COMPONENT: _hoc_section,
    Category.DEFERRED_RENDER_CALLBACK: _render_props_section,
    Category.MEMOIZATION_MARKER: _memo_section,
    Category.REF_FORWARDING: _forward_ref_section,
    Category.ITERATION_RENDERING: _list_section,
    Category.MULTI_ROOT_GROUPING: _fragment_section,
    Category.CONDITIONAL_BRANCH: _conditional_section,
}
require_exhaustive(SECTION_WRITERS, "SECTION_WRITERS")
