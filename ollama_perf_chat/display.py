"""Console rendering of measurements and session statistics."""

from typing import List

from .models.measurement import Measurement, SessionStatistics

NO_REQUESTS_MESSAGE = "No requests made yet."


def format_measurement(measurement: Measurement) -> List[str]:
    """Lines describing one exchange's performance."""
    lines = [
        "",
        "⏱️  Performance Metrics:",
        f"   Total Time: {measurement.elapsed_ms:,} ms ({measurement.elapsed_seconds:.2f}s)",
    ]

    tokens_per_second = measurement.tokens_per_second
    if tokens_per_second is not None:
        lines.append(f"   Est. Tokens: ~{measurement.estimated_tokens}")
        lines.append(f"   Speed: ~{tokens_per_second:.1f} tokens/sec")

    lines.append(
        f"   Time: {measurement.start_time:%H:%M:%S} - {measurement.end_time:%H:%M:%S}"
    )
    return lines


def format_statistics(stats: SessionStatistics) -> List[str]:
    """Lines describing a statistics snapshot."""
    if stats.total_requests == 0:
        return [NO_REQUESTS_MESSAGE]

    return [
        "",
        "📈 Session Statistics:",
        f"   Total Requests: {stats.total_requests}",
        f"   Successful: {stats.successful_requests}",
        f"   Failed: {stats.failed_requests}",
        f"   Average Response Time: {stats.average_response_seconds:.2f}s",
        f"   Fastest Response: {stats.fastest_response_seconds:.2f}s",
        f"   Slowest Response: {stats.slowest_response_seconds:.2f}s",
        f"   Average Speed: ~{stats.average_tokens_per_second:.1f} tokens/sec",
        f"   Total Session Time: {stats.total_session_seconds:.1f}s",
    ]
