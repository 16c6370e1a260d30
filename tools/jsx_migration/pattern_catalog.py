# CUI // SP-CTI
"""Pattern Catalog - typed record of the JSX idioms found in one syntax tree.

Seven closed categories, one frozen dataclass each. Occurrences compare by
their recovered fields only; source locations ride along for diagnostics and
never take part in equality.

The catalog is built through CatalogBuilder, a persistent builder: ``add``
returns a new builder and leaves the old one untouched, so detection threads
a value through the traversal instead of mutating shared lists.

Usage:
    builder = CatalogBuilder().add(MemoizationMarker("Profile"))
    catalog = builder.build()
    catalog.get(Category.MEMOIZATION_MARKER)
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import ClassVar, Dict, Iterator, Mapping, Optional, Tuple

from tools.jsx_migration.syntax_tree import SourceLocation


class Category(Enum):
    """Closed set of idiom categories, declared in canonical rendering order."""

    WRAPPED_COMPONENT = "WrappedComponent"
    DEFERRED_RENDER_CALLBACK = "DeferredRenderCallback"
    MEMOIZATION_MARKER = "MemoizationMarker"
    REF_FORWARDING = "RefForwarding"
    ITERATION_RENDERING = "IterationRendering"
    MULTI_ROOT_GROUPING = "MultiRootGrouping"
    CONDITIONAL_BRANCH = "ConditionalBranch"


CANONICAL_ORDER: Tuple[Category, ...] = tuple(Category)


def require_exhaustive(table: Mapping, table_name: str) -> None:
    """Fail at import time when a per-category table misses or invents a category."""
    missing = [c.value for c in Category if c not in table]
    extra = [repr(k) for k in table if not isinstance(k, Category)]
    if missing or extra:
        raise RuntimeError(
            f"{table_name} is not exhaustive over Category "
            f"(missing: {missing or 'none'}, unexpected: {extra or 'none'})"
        )


_NO_LOCATION = SourceLocation()


# ---------------------------------------------------------------------------
# Occurrences
# ---------------------------------------------------------------------------

class _Occurrence:
    category: ClassVar[Category]
    target_idiom: ClassVar[str]

    def to_dict(self) -> dict:
        data = {"category": self.category.value, "target_idiom": self.target_idiom}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "location":
                data["location"] = {"line": value.line, "column": value.column,
                                    "offset": value.offset}
            else:
                data[f.name] = value
        return data


@dataclass(frozen=True)
class WrappedComponent(_Occurrence):
    """``withAuth(Profile)`` - a higher-order component call."""
    category: ClassVar[Category] = Category.WRAPPED_COMPONENT
    target_idiom: ClassVar[str] = "Mixin"

    wrapper_name: str
    component_name: str
    generated_name: str
    location: SourceLocation = field(default=_NO_LOCATION, compare=False)


@dataclass(frozen=True)
class MemoizationMarker(_Occurrence):
    """``React.memo(Profile)``."""
    category: ClassVar[Category] = Category.MEMOIZATION_MARKER
    target_idiom: ClassVar[str] = "const constructor"

    component_name: str
    location: SourceLocation = field(default=_NO_LOCATION, compare=False)


@dataclass(frozen=True)
class RefForwarding(_Occurrence):
    """``React.forwardRef(...)``; only the count matters."""
    category: ClassVar[Category] = Category.REF_FORWARDING
    target_idiom: ClassVar[str] = "GlobalKey"

    location: SourceLocation = field(default=_NO_LOCATION, compare=False)


@dataclass(frozen=True)
class DeferredRenderCallback(_Occurrence):
    """Render prop or function-as-children on a JSX element."""
    category: ClassVar[Category] = Category.DEFERRED_RENDER_CALLBACK
    target_idiom: ClassVar[str] = "Builder"

    host_name: str
    callback_prop_name: str
    location: SourceLocation = field(default=_NO_LOCATION, compare=False)


@dataclass(frozen=True)
class MultiRootGrouping(_Occurrence):
    """``<>...</>`` or ``<Fragment>``; counts element children only."""
    category: ClassVar[Category] = Category.MULTI_ROOT_GROUPING
    target_idiom: ClassVar[str] = "multiple children"

    structural_child_count: int
    location: SourceLocation = field(default=_NO_LOCATION, compare=False)


@dataclass(frozen=True)
class ConditionalBranch(_Occurrence):
    """Ternary inside a JSX ``{...}`` slot."""
    category: ClassVar[Category] = Category.CONDITIONAL_BRANCH
    target_idiom: ClassVar[str] = "ternary"

    has_alternate: bool
    location: SourceLocation = field(default=_NO_LOCATION, compare=False)


@dataclass(frozen=True)
class IterationRendering(_Occurrence):
    """``items.map(item => <Item />)``."""
    category: ClassVar[Category] = Category.ITERATION_RENDERING
    target_idiom: ClassVar[str] = "ListView.builder"

    collection_name: str
    location: SourceLocation = field(default=_NO_LOCATION, compare=False)


OCCURRENCE_TYPES = {
    Category.WRAPPED_COMPONENT: WrappedComponent,
    Category.DEFERRED_RENDER_CALLBACK: DeferredRenderCallback,
    Category.MEMOIZATION_MARKER: MemoizationMarker,
    Category.REF_FORWARDING: RefForwarding,
    Category.ITERATION_RENDERING: IterationRendering,
    Category.MULTI_ROOT_GROUPING: MultiRootGrouping,
    Category.CONDITIONAL_BRANCH: ConditionalBranch,
}
require_exhaustive(OCCURRENCE_TYPES, "OCCURRENCE_TYPES")


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal note produced during detection (e.g. a render fallback)."""
    severity: str
    message: str
    location: SourceLocation = _NO_LOCATION

    def to_dict(self) -> dict:
        return {"severity": self.severity, "message": self.message,
                "line": self.location.line, "column": self.location.column}


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PatternCatalog:
    """Occurrences grouped by category, in pre-order traversal order.

    ``entries`` holds only non-empty categories, in canonical order, so two
    catalogs with the same content compare equal.
    """

    entries: Tuple[Tuple[Category, Tuple[_Occurrence, ...]], ...] = ()
    diagnostics: Tuple[Diagnostic, ...] = field(default=(), compare=False)

    def get(self, category: Category) -> Tuple[_Occurrence, ...]:
        for cat, occurrences in self.entries:
            if cat is category:
                return occurrences
        return ()

    def categories(self) -> Tuple[Category, ...]:
        """Non-empty categories in canonical order."""
        return tuple(cat for cat, _ in self.entries)

    def __iter__(self) -> Iterator[Tuple[Category, Tuple[_Occurrence, ...]]]:
        return iter(self.entries)

    def __contains__(self, category) -> bool:
        return category in self.categories()

    def count(self, category: Category) -> int:
        return len(self.get(category))

    @property
    def total(self) -> int:
        return sum(len(occ) for _, occ in self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def summary(self) -> Dict[str, int]:
        return {cat.value: len(occ) for cat, occ in self.entries}

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "categories": {
                cat.value: [o.to_dict() for o in occ] for cat, occ in self.entries
            },
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


# Persistent singly-linked list cell: (item, previous_cell)
_Cell = Optional[Tuple[object, "_Cell"]]


@dataclass(frozen=True)
class CatalogBuilder:
    """Immutable accumulator threaded through detection."""

    _occurrences: _Cell = None
    _diagnostics: _Cell = None

    def add(self, occurrence: _Occurrence) -> "CatalogBuilder":
        return CatalogBuilder((occurrence, self._occurrences), self._diagnostics)

    def note(self, diagnostic: Diagnostic) -> "CatalogBuilder":
        return CatalogBuilder(self._occurrences, (diagnostic, self._diagnostics))

    def build(self) -> PatternCatalog:
        grouped = {cat: [] for cat in CANONICAL_ORDER}
        for occurrence in _unwind(self._occurrences):
            grouped[occurrence.category].append(occurrence)
        entries = tuple(
            (cat, tuple(grouped[cat])) for cat in CANONICAL_ORDER if grouped[cat]
        )
        return PatternCatalog(entries=entries, diagnostics=tuple(_unwind(self._diagnostics)))


def _unwind(cell):
    """Items of a linked cell chain, oldest first."""
    items = []
    while cell is not None:
        item, cell = cell
        items.append(item)
    items.reverse()
    return items
