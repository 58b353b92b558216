"""
TopologyReport

Tallies a built URL space by page kind and city and prints a summary.
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Iterable

from ..models import PageKind

if TYPE_CHECKING:
    from ..models import PageDescriptor, SitemapDocument


class TopologyReport:
    """
    Aggregate counts for one generator run.

    Usage::

        report = TopologyReport()
        report.record_all(document.entries)
        report.print_final_report()
    """

    def __init__(self) -> None:
        self.total: int = 0
        self.by_kind: Counter = Counter()
        self.by_city: Counter = Counter()

    def record(self, descriptor: "PageDescriptor") -> None:
        """Record one page."""
        self.total += 1
        self.by_kind[descriptor.kind] += 1
        if descriptor.city is not None:
            self.by_city[descriptor.city.key] += 1

    def record_all(self, descriptors: Iterable["PageDescriptor"]) -> None:
        for descriptor in descriptors:
            self.record(descriptor)

    @classmethod
    def from_document(cls, document: "SitemapDocument") -> "TopologyReport":
        report = cls()
        report.record_all(entry.descriptor for entry in document)
        return report

    def print_final_report(self) -> None:
        """Print per-kind and per-city counts to stdout."""
        print("\n" + "=" * 60)
        print("Site topology")
        print("=" * 60)
        for kind in PageKind:
            if self.by_kind[kind]:
                print(f"  {kind.value:<16} {self.by_kind[kind]:>7}")
        print("-" * 60)
        print(f"  {'cities':<16} {len(self.by_city):>7}")
        if self.by_city:
            largest = self.by_city.most_common(1)[0]
            print(f"  {'largest city':<16} {largest[1]:>7}  ({largest[0]})")
        print(f"  {'total urls':<16} {self.total:>7}")
        print("=" * 60)
