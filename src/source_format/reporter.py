"""Report formatting and output."""
import json

from source_format.types import ResultSet


def format_detailed_report(result_set: ResultSet, stop_after_first_check: bool = False) -> str:
    """Format results as detailed human-readable report.

    Args:
        result_set: Results of a formatter run
        stop_after_first_check: Render only the first check when violations exist

    Returns:
        Formatted report string
    """
    if result_set.violations_count == 0:
        return "No violations found 🌱"

    lines = [f"Number of violations: {result_set.violations_count}", ""]

    for result in result_set.results:
        lines.append(f"Check: {result.name}")
        for violation in result.violations:
            if violation.has_line_number:
                lines.append(
                    f"\t{violation.file_name}: {violation.message} "
                    f"(line: {violation.line_number})"
                )
            else:
                lines.append(f"\t{violation.file_name}: {violation.message}")

        if stop_after_first_check:
            break

    return "\n".join(lines)


def format_json_report(result_set: ResultSet) -> str:
    """Format results as JSON.

    Args:
        result_set: Results of a formatter run

    Returns:
        JSON string using the formatter's own keys plus a summary
    """
    report = result_set.model_dump(by_alias=True)
    report["summary"] = get_summary(result_set)
    return json.dumps(report, indent=2, ensure_ascii=False)


def get_exit_code(result_set: ResultSet) -> int:
    """Get exit code based on results.

    Args:
        result_set: Results of a formatter run

    Returns:
        0 if no violations, 1 if violations found
    """
    return 1 if result_set.violations_count else 0


def get_summary(result_set: ResultSet) -> dict[str, int]:
    """Get summary statistics.

    Args:
        result_set: Results of a formatter run

    Returns:
        Dict with summary counts
    """
    return {
        "total_checks": len(result_set.results),
        "checks_with_violations": sum(1 for r in result_set.results if r.violations),
        "total_violations": result_set.violations_count,
        "modified_files": len(result_set.modified_file_names),
    }
