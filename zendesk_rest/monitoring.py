"""
Monitoring module for the Zendesk REST client.

This module counts API calls per category and records their timing.
"""

import time
import datetime
import functools
import threading
from typing import Dict, Any, Callable, List

CATEGORIES = (
    "authentication",
    "users",
    "tickets",
    "job_statuses",
    "other",
    "total",
)

# Initialize the API call counters
api_calls: Dict[str, int] = {category: 0 for category in CATEGORIES}

# Store timing information
api_timing: Dict[str, List[float]] = {category: [] for category in CATEGORIES}

_lock = threading.Lock()


def track_api_call(category: str, execution_time: float) -> None:
    """
    Track an API call with its category and execution time.

    Args:
        category: The category of API call (authentication, users, etc.)
        execution_time: The execution time in seconds
    """
    if category not in api_calls or category == "total":
        category = "other"

    with _lock:
        api_calls[category] += 1
        api_timing[category].append(execution_time)
        api_calls["total"] += 1
        api_timing["total"].append(execution_time)


def timed_api_call(category: str) -> Callable:
    """
    Decorator to time and track API calls.

    Args:
        category: The category of API call

    Returns:
        Callable: A decorator function
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                return func(*args, **kwargs)
            finally:
                track_api_call(category, time.time() - start_time)
        return wrapper
    return decorator


def get_api_usage_report() -> Dict[str, Any]:
    """
    Generate a report of API usage.

    Returns:
        Dict[str, Any]: A report with call counts and timing information
    """
    with _lock:
        calls = dict(api_calls)
        timing = {k: list(v) for k, v in api_timing.items()}

    return {
        "calls": calls,
        "timing": {
            k: {
                "total": sum(v),
                "average": sum(v) / len(v) if v else 0,
                "min": min(v) if v else 0,
                "max": max(v) if v else 0,
                "count": len(v)
            } for k, v in timing.items()
        },
        "timestamp": datetime.datetime.now().isoformat(),
    }


def print_api_usage_report() -> None:
    """Print a formatted API usage report to the console."""
    report = get_api_usage_report()

    print("\n" + "=" * 60)
    print("ZENDESK API USAGE REPORT")
    print("=" * 60)

    print("\nAPI CALLS BY CATEGORY:")
    for category, count in report["calls"].items():
        if category != "total" and count > 0:
            print(f"  - {category.replace('_', ' ').title()}: {count} calls")
    print(f"  TOTAL: {report['calls']['total']} calls")

    print("\nTIMING INFORMATION (seconds):")
    for category, timing in report["timing"].items():
        if category != "total" and timing["count"] > 0:
            print(f"  - {category.replace('_', ' ').title()}:")
            print(f"    * Total: {timing['total']:.2f}s")
            print(f"    * Average: {timing['average']:.4f}s")
            print(f"    * Range: {timing['min']:.4f}s - {timing['max']:.4f}s")

    print(f"\nOVERALL API TIME: {report['timing']['total']['total']:.2f} seconds")
    print(f"AVERAGE TIME PER API CALL: {report['timing']['total']['average']:.4f} seconds")
    print("=" * 60)


def reset_api_tracking() -> None:
    """Reset all API tracking counters and timers."""
    with _lock:
        for key in api_calls:
            api_calls[key] = 0
        for key in api_timing:
            api_timing[key] = []
