# CUI // SP-CTI
"""Code Synthesizer - Flutter skeletons for a PatternCatalog.

Each category maps to one fixed skeleton shape:

  WrappedComponent        -> mixin on State<T>, one per occurrence
  MemoizationMarker       -> StatelessWidget with const constructor, one per occurrence
  RefForwarding           -> a single shared GlobalKey snippet
  DeferredRenderCallback  -> Builder(builder: ...), one per occurrence
  IterationRendering      -> ListView.builder, one per occurrence
  MultiRootGrouping       -> advisory comment only
  ConditionalBranch       -> advisory comment only

Skeletons are intentionally partial; every code block carries a TODO marker
for the developer finishing the port. Output depends on catalog content
only, so equal catalogs give byte-identical skeleton sets.
"""

import re
import textwrap
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Tuple

from tools.jsx_migration.pattern_catalog import (
    CANONICAL_ORDER,
    Category,
    PatternCatalog,
    require_exhaustive,
)

TODO_MARKER = "TODO"

_NON_IDENT = re.compile(r"[^A-Za-z0-9_$]")

# Dart reserved words plus built-in identifiers that cannot name a type
DART_RESERVED = frozenset({
    "abstract", "as", "assert", "async", "await", "break", "case", "catch",
    "class", "const", "continue", "covariant", "default", "deferred", "do",
    "dynamic", "else", "enum", "export", "extends", "extension", "external",
    "factory", "false", "final", "finally", "for", "Function", "get", "if",
    "implements", "import", "in", "interface", "is", "late", "library",
    "mixin", "new", "null", "on", "operator", "part", "required", "rethrow",
    "return", "set", "static", "super", "switch", "this", "throw", "true",
    "try", "typedef", "var", "void", "while", "with", "yield",
})


@dataclass(frozen=True)
class CodeSkeletonSet:
    """Generated text blocks per category; empty categories have no entry."""

    entries: Tuple[Tuple[Category, Tuple[str, ...]], ...] = ()

    def get(self, category: Category) -> Tuple[str, ...]:
        for cat, blocks in self.entries:
            if cat is category:
                return blocks
        return ()

    def categories(self) -> Tuple[Category, ...]:
        return tuple(cat for cat, _ in self.entries)

    def __contains__(self, category) -> bool:
        return category in self.categories()

    def __iter__(self) -> Iterator[Tuple[Category, Tuple[str, ...]]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def render(self) -> str:
        """All blocks joined in canonical order, for the file generator."""
        return "\n".join(block for _, blocks in self.entries for block in blocks)

    def to_dict(self) -> Dict[str, list]:
        return {cat.value: list(blocks) for cat, blocks in self.entries}


def synthesize(catalog: PatternCatalog) -> CodeSkeletonSet:
    """Map a catalog to Flutter skeletons, one entry per non-empty category."""
    entries = []
    for category in CANONICAL_ORDER:
        occurrences = catalog.get(category)
        if not occurrences:
            continue
        entries.append((category, SKELETON_BUILDERS[category](occurrences)))
    return CodeSkeletonSet(entries=tuple(entries))


def _dart_identifier(name, fallback="Widget"):
    """Coerce *name* into a Dart type identifier."""
    cleaned = _NON_IDENT.sub("_", name or "")
    if not cleaned or cleaned[0].isdigit():
        cleaned = f"{fallback}{cleaned}"
    if cleaned in DART_RESERVED:
        cleaned = f"{cleaned}_"
    return cleaned


# ---------------------------------------------------------------------------
# Per-category skeletons
# ---------------------------------------------------------------------------

def _mixins(occurrences):
    blocks = []
    for hoc in occurrences:
        mixin = _dart_identifier(hoc.generated_name, "Generated")
        widget = _dart_identifier(hoc.component_name)
        blocks.append(textwrap.dedent(f"""\
            // Mixin converted from HOC: {hoc.wrapper_name} (wrapped component: {hoc.component_name})
            mixin {mixin}<T extends StatefulWidget> on State<T> {{
              // {TODO_MARKER}: Implement {hoc.wrapper_name} logic here
            }}

            // Usage: class {widget}State extends State<{widget}> with {mixin} {{ }}
        """))
    return tuple(blocks)


def _memoized_widgets(occurrences):
    blocks = []
    for memo in occurrences:
        widget = _dart_identifier(memo.component_name)
        blocks.append(textwrap.dedent(f"""\
            // Memoized widget (converted from React.memo)
            class {widget} extends StatelessWidget {{
              const {widget}({{Key? key}}) : super(key: key); // Use const constructor

              @override
              Widget build(BuildContext context) {{
                // {TODO_MARKER}: Port the render output of {memo.component_name}
                return Container();
              }}
            }}
        """))
    return tuple(blocks)


def _global_key(occurrences):
    return (textwrap.dedent(f"""\
        // ForwardRef pattern using GlobalKey
        final myWidgetKey = GlobalKey<MyWidgetState>();

        // Access widget state from parent:
        // myWidgetKey.currentState?.someMethod();
        // {TODO_MARKER}: Replace MyWidgetState with the State class of the forwarded widget
    """),)


def _builders(occurrences):
    blocks = []
    for rp in occurrences:
        blocks.append(textwrap.dedent(f"""\
            // Builder pattern converted from render prop: {rp.host_name}.{rp.callback_prop_name}
            Builder(
              builder: (BuildContext context) {{
                // {TODO_MARKER}: Implement builder logic
                // Original render prop: {rp.callback_prop_name}
                return Container();
              }},
            )
        """))
    return tuple(blocks)


def _list_builders(occurrences):
    blocks = []
    for lst in occurrences:
        name = lst.collection_name
        blocks.append(textwrap.dedent(f"""\
            // List rendering (converted from {name}.map)
            ListView.builder(
              itemCount: {name}.length,
              itemBuilder: (BuildContext context, int index) {{
                final item = {name}[index];
                // {TODO_MARKER}: Build the widget for each item
                return ItemWidget(item: item);
              }},
            )
        """))
    return tuple(blocks)


def _fragment_advice(occurrences):
    counts = ", ".join(str(f.structural_child_count) for f in occurrences)
    return (
        "// Fragments: In Flutter, return a list of widgets or wrap them in a Column/Row\n"
        f"// {len(occurrences)} fragment(s) detected; element children per fragment: {counts}\n",
    )


def _conditional_advice(occurrences):
    without_alternate = sum(1 for c in occurrences if not c.has_alternate)
    lines = [
        "// Conditionals: Use ternary (condition ? Widget1() : Widget2()) or if statements",
        f"// {len(occurrences)} conditional(s) detected",
    ]
    if without_alternate:
        lines.append(
            f"// {without_alternate} without an alternate: use collection-if "
            "(if (condition) Widget1()) inside a children list"
        )
    return ("\n".join(lines) + "\n",)


SKELETON_BUILDERS: Dict[Category, Callable[[tuple], Tuple[str, ...]]] = {
    Category.WRAPPED_COMPONENT: _mixins,
    Category.DEFERRED_RENDER_CALLBACK: _builders,
    Category.MEMOIZATION_MARKER: _memoized_widgets,
    Category.REF_FORWARDING: _global_key,
    Category.ITERATION_RENDERING: _list_builders,
    Category.MULTI_ROOT_GROUPING: _fragment_advice,
    Category.CONDITIONAL_BRANCH: _conditional_advice,
}
require_exhaustive(SKELETON_BUILDERS, "SKELETON_BUILDERS")
