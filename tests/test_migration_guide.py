# CUI // SP-CTI
"""Tests for tools/jsx_migration/migration_guide.py - Markdown conversion guide."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from tools.jsx_migration.migration_guide import GUIDE_TITLE, describe
from tools.jsx_migration.pattern_catalog import (
    CatalogBuilder,
    ConditionalBranch,
    DeferredRenderCallback,
    IterationRendering,
    MemoizationMarker,
    MultiRootGrouping,
    PatternCatalog,
    RefForwarding,
    WrappedComponent,
)
from tools.jsx_migration.pattern_detector import detect

SECTION_HEADINGS = [
    "## Higher-Order Components (HOCs)",
    "## Render Props",
    "## React.memo",
    "## React.forwardRef",
    "## List Rendering",
    "## Fragments",
    "## Conditional Rendering",
]


def _catalog(*occurrences):
    builder = CatalogBuilder()
    for occ in occurrences:
        builder = builder.add(occ)
    return builder.build()


class TestDescribe:
    def test_empty_catalog_is_title_only(self, empty_tree):
        guide = describe(detect(empty_tree))
        assert guide == GUIDE_TITLE + "\n"
        assert guide.strip().splitlines() == ["# JSX Pattern Conversion Guide"]

    def test_sections_follow_canonical_order(self):
        # Added in reverse canonical order on purpose
        catalog = _catalog(
            ConditionalBranch(True),
            MultiRootGrouping(2),
            IterationRendering("items"),
            RefForwarding(),
            MemoizationMarker("Card"),
            DeferredRenderCallback("DataProvider", "render"),
            WrappedComponent("withAuth", "Profile", "AuthMixin"),
        )
        guide = describe(catalog)
        positions = [guide.index(h) for h in SECTION_HEADINGS]
        assert positions == sorted(positions)
        assert guide.startswith(GUIDE_TITLE)

    def test_empty_categories_have_no_section(self):
        guide = describe(_catalog(MemoizationMarker("Card")))
        assert "## React.memo" in guide
        for heading in SECTION_HEADINGS:
            if heading != "## React.memo":
                assert heading not in guide

    def test_every_occurrence_listed_with_fields(self):
        guide = describe(_catalog(
            WrappedComponent("withAuth", "Profile", "AuthMixin"),
            WrappedComponent("withTheme", "Component", "ThemeMixin"),
            DeferredRenderCallback("ListComponent", "renderItem"),
            IterationRendering("posts"),
            IterationRendering("comments"),
        ))
        assert "### withAuth" in guide
        assert "- **Wraps**: `Profile`" in guide
        assert "- **Flutter**: `AuthMixin`" in guide
        assert "### withTheme" in guide
        assert "`ThemeMixin`" in guide
        assert "### ListComponent.renderItem" in guide
        assert "### posts" in guide
        assert "### comments" in guide
        assert "itemCount: comments.length" in guide

    def test_forward_ref_section_reports_count(self):
        guide = describe(_catalog(RefForwarding(), RefForwarding()))
        assert "- **Occurrences**: 2" in guide
        assert "GlobalKey" in guide

    def test_fragment_and_conditional_details(self):
        guide = describe(_catalog(MultiRootGrouping(3), ConditionalBranch(False)))
        assert "- **Element children**: 3" in guide
        assert "- **Has alternate**: no" in guide
        assert "`if (condition) Widget1()`" in guide

    def test_detection_order_does_not_change_guide(self, babel):
        first = babel.program(babel.call("memo", "A"), babel.call("withAuth", "B"))
        second = babel.program(babel.call("withAuth", "B"), babel.call("memo", "A"))
        assert describe(detect(first)) == describe(detect(second))

    def test_guide_for_mixed_source(self, babel):
        tree = babel.program(
            babel.const("Enhanced", babel.call("withAuth", babel.call(babel.member("React", "memo"),
                                                                      "MyComponent"))),
            babel.element("DataProvider", [babel.attr("render", babel.arrow(params=("data",)))]),
            babel.container(babel.method_call("items", "map", babel.arrow())),
        )
        guide = describe(detect(tree))
        assert "# JSX Pattern Conversion Guide" in guide
        assert "## Higher-Order Components" in guide
        assert "## React.memo" in guide
        assert "## Render Props" in guide
        assert "## List Rendering" in guide

    def test_describe_is_pure(self):
        catalog = _catalog(IterationRendering("rows"), ConditionalBranch(True))
        assert describe(catalog) == describe(catalog)
        assert describe(PatternCatalog()) == describe(PatternCatalog())
