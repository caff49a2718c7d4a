"""Text rendering of a ParsedDocument."""

from .models import ParsedDocument


def summarize(doc: ParsedDocument) -> str:
    """
    Render the fixed-format summary report

    Example:
        EDI File Summary:
        - Transaction Type: Purchase Order
        - Total Segments: 6
        - Validation Status: validated
        - Errors: 0
        - Warnings: 0
        - File Size: 0.25 KB
    """
    return "\n".join([
        "EDI File Summary:",
        f"- Transaction Type: {doc.transaction_type}",
        f"- Total Segments: {len(doc.segments)}",
        f"- Validation Status: {doc.status.value}",
        f"- Errors: {doc.error_count}",
        f"- Warnings: {doc.warning_count}",
        f"- File Size: {doc.file_size_bytes / 1024:.2f} KB",
    ])


def format_diagnostics(doc: ParsedDocument) -> str:
    """One line per diagnostic, in document order ("No issues found." if none)"""
    if not doc.diagnostics:
        return "No issues found."
    return "\n".join(str(d) for d in doc.diagnostics)
