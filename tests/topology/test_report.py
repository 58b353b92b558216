"""Tests for sitegen/topology/report.py"""

from sitegen.models import PageKind
from sitegen.sitemap import assemble
from sitegen.topology.report import TopologyReport
from sitegen.topology.url_space import build


class TestTopologyReport:
    def test_counts_by_kind(self, sample_registry):
        report = TopologyReport()
        report.record_all(build(sample_registry))
        assert report.by_kind[PageKind.CITY_HOME] == 2
        assert report.by_kind[PageKind.UTILITY] == 10
        assert report.by_kind[PageKind.HOSPITAL] == 3

    def test_counts_by_city(self, sample_registry):
        report = TopologyReport()
        report.record_all(build(sample_registry))
        assert report.by_city["ca/fresno"] == 17
        assert report.total == sum(report.by_city.values())

    def test_from_document_includes_home(self, sample_registry, build_date):
        document = assemble(build(sample_registry), site_url="https://example.com", build_date=build_date)
        report = TopologyReport.from_document(document)
        assert report.total == len(document)
        assert report.by_kind[PageKind.HOME] == 1
        assert "" not in report.by_city

    def test_print_final_report(self, sample_registry, capsys):
        report = TopologyReport()
        report.record_all(build(sample_registry))
        report.print_final_report()
        out = capsys.readouterr().out
        assert "Site topology" in out
        assert "city_home" in out
        assert "venue" not in out
