"""
Report generation for the baseline compatibility checker.
"""

from deps import Dict, Sequence

from .evaluator import score_grade
from .issue import CompatibilityIssue, CompatibilityResult, Severity, SupportStatus
from .utils import TRACKED_BROWSERS

_SECTION_TITLES = {
    Severity.HIGH: "HIGH",
    Severity.MEDIUM: "MEDIUM",
    Severity.LOW: "LOW",
}


class ReportGenerator:
    """Generate reports from analysis results."""

    @staticmethod
    def generate_text_report(result: CompatibilityResult) -> str:
        """Generate a text report."""
        grade = score_grade(result.score)
        report = [f"{'='*80}"]
        report.append(f"Baseline Compatibility Report: score {result.score}/100, grade {grade}")
        report.append(f"{'='*80}")
        report.append(result.summary)

        if not result.issues:
            report.append("")
            report.append("✓ No compatibility issues found")
            report.append("="*80)
            return "\n".join(report)

        counts = ReportGenerator.generate_summary(result.issues)
        report.append("By severity: " + ", ".join(f"{name} {count}" for name, count in counts.items()))
        report.append("")
        for severity in Severity:
            group = [i for i in result.issues if i.severity is severity]
            if not group:
                continue
            report.append(f"{_SECTION_TITLES[severity]} ({len(group)}):")
            report.append("-" * 80)
            for issue in group:
                where = f"Line {issue.line_number}" if issue.line_number is not None else "Stylesheet"
                report.append(f"  {where}: {issue.feature_name} [{issue.baseline_status.value}]")
                if issue.description:
                    report.append(f"    {issue.description}")
                if issue.browsers_unsupported:
                    browsers = ", ".join(
                        f"{b.name} {b.version} ({b.support_status.value})"
                        for b in issue.browsers_unsupported
                    )
                    report.append(f"    Browsers: {browsers}")
                report.append(f"    Fix: {issue.suggested_fix}")
                if issue.mdn_link:
                    report.append(f"    Docs: {issue.mdn_link}")
                report.append("")

        overview = ReportGenerator.browser_overview(result.issues)
        report.append("Browser support:")
        for browser, counts in overview.items():
            report.append(
                f"  {browser:<8} {counts['percentage']:>3}% supported "
                f"({counts['partial']} partial, {counts['unsupported']} unsupported)"
            )

        if result.fixed_code is not None:
            report.append("")
            report.append("An automatically fixed version of the code is available.")
        report.append("="*80)

        return "\n".join(report)

    @staticmethod
    def browser_overview(issues: Sequence[CompatibilityIssue]) -> Dict[str, Dict[str, int]]:
        """Count, per tracked browser, how many issues it supports.

        Flagged support counts as partial.
        """
        overview: Dict[str, Dict[str, int]] = {}
        for browser in TRACKED_BROWSERS:
            partial = unsupported = 0
            for issue in issues:
                status = _status_for(issue, browser)
                if status is SupportStatus.UNSUPPORTED:
                    unsupported += 1
                elif status is not None:
                    partial += 1
            supported = len(issues) - partial - unsupported
            overview[browser] = {
                'supported': supported,
                'partial': partial,
                'unsupported': unsupported,
                'percentage': round(supported / max(len(issues), 1) * 100),
            }
        return overview

    @staticmethod
    def generate_summary(issues: Sequence[CompatibilityIssue]) -> Dict[str, int]:
        """Generate a summary count by severity."""
        summary = {}
        for issue in issues:
            summary[issue.severity.value] = summary.get(issue.severity.value, 0) + 1
        return summary


def _status_for(issue: CompatibilityIssue, browser: str):
    for entry in issue.browsers_unsupported:
        if entry.name == browser:
            return entry.support_status
    return None
