"""Report formatting utilities for batch EDI runs."""

from typing import Any, Dict, List, Sequence

from src.edi.models import DocumentStatus
from src.edi.pipeline import BatchItemResult


class ReportFormatter:
    """
    Utilities for formatting batch reports.

    Provides consistent status icons, batch aggregation and console
    summaries for the CLI.
    """

    @staticmethod
    def format_status_icon(status: str) -> str:
        """
        Convert status to consistent icon format.

        Args:
            status: Status string ('PASS', 'WARN', 'FAIL', 'ERROR')

        Returns:
            Formatted icon string (e.g., '[PASS]', '[FAIL]')

        Example:
            >>> ReportFormatter.format_status_icon('PASS')
            '[PASS]'
            >>> ReportFormatter.format_status_icon('FAIL')
            '[FAIL]'
        """
        icons = {
            'PASS': '[PASS]',
            'WARN': '[WARN]',
            'FAIL': '[FAIL]',
            'ERROR': '[ERR ]'
        }
        return icons.get(status, '[----]')

    @staticmethod
    def item_status(result: BatchItemResult) -> str:
        """
        PASS / WARN / FAIL for a parsed document, ERROR for an unreadable file.
        """
        if result.status == 'failed' or result.document is None:
            return 'ERROR'
        if result.document.status is DocumentStatus.ERROR:
            return 'FAIL'
        if result.document.warning_count:
            return 'WARN'
        return 'PASS'

    @classmethod
    def build_batch_report(cls, results: Sequence[BatchItemResult]) -> Dict[str, Any]:
        """
        Aggregate batch results into a report dict.

        Report structure:
            {
                "status": "PASS" | "WARN" | "FAIL",
                "total_files": 3,
                "files_parsed": 2,
                "overall_summary": {"passed": 1, "warned": 0, "failed": 1, "errors": 1},
                "per_file_results": [...]
            }
        """
        per_file: List[Dict[str, Any]] = []
        summary = {'passed': 0, 'warned': 0, 'failed': 0, 'errors': 0}
        counter_keys = {'PASS': 'passed', 'WARN': 'warned', 'FAIL': 'failed', 'ERROR': 'errors'}

        for result in results:
            status = cls.item_status(result)
            summary[counter_keys[status]] += 1
            entry: Dict[str, Any] = {
                'file': result.file,
                'overall_status': status,
                'elapsed_time': round(result.elapsed_time, 4),
            }
            if result.document is not None:
                entry.update({
                    'transaction_type': result.document.transaction_type,
                    'segments': len(result.document),
                    'errors': result.document.error_count,
                    'warnings': result.document.warning_count,
                })
            else:
                entry['error'] = result.error
            per_file.append(entry)

        if summary['failed'] or summary['errors']:
            overall = 'FAIL'
        elif summary['warned']:
            overall = 'WARN'
        else:
            overall = 'PASS'

        return {
            'status': overall,
            'total_files': len(results),
            'files_parsed': sum(1 for r in results if r.status == 'parsed'),
            'overall_summary': summary,
            'per_file_results': per_file,
        }

    @staticmethod
    def print_summary(
        report: Dict[str, Any],
        title: str = "EDI Batch Report",
        verbose: bool = False
    ) -> None:
        """
        Print human-readable summary to console.

        Args:
            report: Report dict from build_batch_report
            title: Report title
            verbose: Show per-file results
        """
        print(f"\n{'='*60}")
        print(f"{title}: {report['status']}")
        print(f"{'='*60}")
        print(f"  Total files: {report['total_files']}")
        print(f"  Parsed: {report['files_parsed']}")

        summary = report['overall_summary']
        print(f"\n  File Status:")
        print(f"    Passed: {summary['passed']}")
        print(f"    Warned: {summary['warned']}")
        print(f"    Failed: {summary['failed']}")
        print(f"    Errors: {summary['errors']}")

        if verbose and report.get('per_file_results'):
            print(f"\n{'='*60}")
            print("Per-File Results:")
            print(f"{'='*60}")

            for result in report['per_file_results']:
                status_icon = ReportFormatter.format_status_icon(result['overall_status'])
                print(f"  {status_icon} {result['file']}")
                if result.get('error'):
                    print(f"         Error: {result['error']}")

        print(f"\n{'='*60}")
        if report['status'] == 'PASS':
            print("Result: ALL DOCUMENTS VALID")
        elif report['status'] == 'WARN':
            print("Result: VALID WITH WARNINGS")
        else:
            print("Result: VALIDATION FAILED")
        print(f"{'='*60}")
