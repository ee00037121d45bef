"""Memory usage monitoring and warning system."""

import logging

import psutil

__all__ = ["MemoryMonitor"]


class MemoryMonitor:
    """Utility class for monitoring memory usage and providing warnings."""

    # Dynamic threshold percentages of total system memory
    WARNING_THRESHOLD_PERCENT = 50.0
    CRITICAL_THRESHOLD_PERCENT = 90.0

    # Rough per-profile footprint: object, two strings, composition tuple, list
    PROFILE_OVERHEAD_BYTES = 600

    def __init__(self, logger: logging.Logger):
        """Initialize memory monitor with logger and dynamic thresholds.

        Args:
            logger: Logger instance for output

        Example:
            >>> from asosim.utils.logging_setup import setup_logger
            >>> monitor = MemoryMonitor(setup_logger("asosim"))
            >>> print(f"Warning threshold: {monitor.warning_threshold_mb:.1f}MB")
            Warning threshold: 8192.0MB
        """
        self.logger = logger
        self.process = psutil.Process()

        total_memory_mb = psutil.virtual_memory().total / 1024 / 1024
        self.warning_threshold_mb = total_memory_mb * (
            self.WARNING_THRESHOLD_PERCENT / 100
        )
        self.critical_threshold_mb = total_memory_mb * (
            self.CRITICAL_THRESHOLD_PERCENT / 100
        )

        self.logger.debug(
            f"Memory thresholds calculated: Warning={self.warning_threshold_mb:.1f}MB "
            f"({self.WARNING_THRESHOLD_PERCENT}%), Critical={self.critical_threshold_mb:.1f}MB "
            f"({self.CRITICAL_THRESHOLD_PERCENT}%) of {total_memory_mb:.1f}MB total"
        )

    def get_memory_usage_mb(self) -> float:
        """Get current resident memory of this process in MB."""
        rss: int = self.process.memory_info().rss
        return float(rss / 1024 / 1024)

    def get_available_memory_mb(self) -> float:
        """Get available system memory in MB."""
        available: int = psutil.virtual_memory().available
        return float(available / 1024 / 1024)

    def check_memory_and_warn(self, operation: str = "operation") -> None:
        """Check current memory usage and warn if approaching limits.

        Args:
            operation: Name of operation being performed (for logging context)

        Example:
            >>> monitor.check_memory_and_warn("library loading")
            >>> # Logs a warning only if usage exceeds a threshold
        """
        current_mb = self.get_memory_usage_mb()

        if current_mb > self.critical_threshold_mb:
            self.logger.warning(
                f"CRITICAL: High memory usage during {operation}: {current_mb:.1f}MB "
                f"(>{self.critical_threshold_mb:.1f}MB threshold). "
                f"Available: {self.get_available_memory_mb():.1f}MB. "
                "Consider splitting the library or query file."
            )
        elif current_mb > self.warning_threshold_mb:
            self.logger.warning(
                f"WARNING: Elevated memory usage during {operation}: {current_mb:.1f}MB "
                f"(>{self.warning_threshold_mb:.1f}MB threshold). "
                f"Available: {self.get_available_memory_mb():.1f}MB."
            )
        else:
            self.logger.debug(f"Memory usage during {operation}: {current_mb:.1f}MB")

    def estimate_profiles_memory_mb(self, num_profiles: int, mean_length: float) -> float:
        """Estimate memory needed to hold ``num_profiles`` sequence profiles in MB."""
        per_profile = self.PROFILE_OVERHEAD_BYTES + 2 * mean_length
        return num_profiles * per_profile / 1024 / 1024

    def warn_for_large_screen(self, num_profiles: int, mean_length: float) -> None:
        """Warn if the profiles about to be built may not fit in memory.

        Args:
            num_profiles: Total number of query and library rows
            mean_length: Mean sequence length across rows
        """
        estimated_mb = self.estimate_profiles_memory_mb(num_profiles, mean_length)
        available_mb = self.get_available_memory_mb()

        if estimated_mb > available_mb * 0.8:
            self.logger.warning(
                f"MEMORY WARNING: {num_profiles} ASO profiles may require "
                f"~{estimated_mb:.1f}MB memory, but only {available_mb:.1f}MB available."
            )
        elif estimated_mb > self.warning_threshold_mb * 0.5:
            self.logger.info(
                f"Large screen detected ({num_profiles} ASO profiles). "
                f"Estimated memory usage: ~{estimated_mb:.1f}MB"
            )
