from typing_extensions import Protocol


class MetricsPort(Protocol):
    """Protocol for metrics operations."""
    
    def increment_seed_total(self, outcome: str) -> None:
        """
        Increment the seed_runs_total counter.
        
        Args:
            outcome: One of "success", "source_error" or "store_error"
        """
        ...
    
    def increment_store_failure(self, operation: str) -> None:
        """
        Increment the store_query_failures_total counter.
        
        Args:
            operation: Repository operation that failed (e.g. "statistics")
        """
        ...

    def observe_report_latency(self, report: str, seconds: float) -> None:
        """
        Record how long a report took to build.
        
        Args:
            report: Report name ("list", "statistics", "barchart", "piechart", "combined")
            seconds: Elapsed wall time
        """
        ...
