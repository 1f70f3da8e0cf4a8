"""
Result formatting — turns Schedules into text for the terminal.

format_schedule produces the classic two-part report:

    The jobs are scheduled in the following order:
    B,A,C
    The total cost is: -1.0

format_comparison lays out several policy runs as a table. The costs sit in
one column for convenience only; each row's cost is measured by that row's
own objective, so the table is never sorted by cost.
"""

from typing import Iterable

from models.job import Schedule


def format_schedule(schedule: Schedule) -> str:
    return (
        "The jobs are scheduled in the following order:\n"
        f"{schedule.order}\n"
        f"The total cost is: {schedule.cost}"
    )


def format_comparison(results: Iterable[dict]) -> str:
    """Render PolicyComparison results (see benchmarks/comparison.py)."""
    lines = [
        "{:<10} {:>16} {:>12}  {}".format("Policy", "Cost", "Time (ms)", "Order"),
        "-" * 60,
    ]
    for r in results:
        lines.append("{:<10} {:>16.3f} {:>12.3f}  {}".format(
            r["policy"], r["cost"], r["elapsed_ms"], r["order"]
        ))
    return "\n".join(lines)
