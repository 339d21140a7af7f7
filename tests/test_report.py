"""Tests for the per-command report."""
from authortool.report import Report


class TestReport:
    """Tests for Report class."""

    def test_new_report_is_empty(self):
        report = Report()

        assert report.is_empty() is True
        assert report.to_text() == ""

    def test_skips_only_are_not_empty(self):
        """Test a report with only skipped entries still renders."""
        report = Report(not_added=["alice"], not_removed=["bob"])

        assert report.is_empty() is False

    def test_render_order(self):
        """Test categories render added, not-added, removed, not-removed."""
        report = Report(
            added=["alice"],
            not_added=["bob"],
            removed=["carol"],
            not_removed=["dave"],
        )

        assert report.to_text().splitlines() == [
            "[+] Added alice",
            "[=] Already listed: bob",
            "[-] Removed carol",
            "[!] Not listed: dave",
        ]

    def test_entries_keep_insertion_order(self):
        report = Report()
        report.added.extend(["zed", "amy"])

        assert report.to_text() == "[+] Added zed\n[+] Added amy"

    def test_get_summary(self):
        report = Report(added=["a", "b"], not_removed=["c"])

        assert report.get_summary() == {
            'added': 2,
            'not_added': 0,
            'removed': 0,
            'not_removed': 1,
        }
