"""Performance profiler for YAML Transcoder operations."""

import json
import time
import psutil
import logging
from typing import Dict, Any, Optional, List
from dataclasses import dataclass, asdict
from contextlib import contextmanager


@dataclass
class PerformanceMetrics:
    """Performance metrics for a conversion operation."""
    operation_name: str
    start_time: float
    end_time: float
    duration: float
    input_size: int
    output_size: int
    memory_peak_mb: float
    memory_start_mb: float
    memory_end_mb: float
    throughput_mbps: float
    expansion_ratio: float


class PerformanceProfiler:
    """
    Performance profiler for conversion operations.

    Records duration, resident memory, throughput and the ratio of
    output size to input size for each profiled operation.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the performance profiler.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.metrics_history: List[PerformanceMetrics] = []
        self.current_operation: Optional[str] = None
        self.start_time: Optional[float] = None
        self.start_memory: Optional[float] = None
        self.peak_memory: float = 0
        self.input_size: int = 0
        self.output_size: int = 0

    @contextmanager
    def profile_operation(self, operation_name: str, input_size: int = 0):
        """
        Context manager for profiling operations.

        The body may call ``record_output`` to report the produced size.

        Args:
            operation_name: Name of the operation being profiled
            input_size: Size of input data in bytes
        """
        self.start_profiling(operation_name, input_size)
        try:
            yield self
        finally:
            self.stop_profiling(self.output_size)

    def start_profiling(self, operation_name: str, input_size: int = 0):
        """
        Start profiling an operation.

        Args:
            operation_name: Name of the operation
            input_size: Size of input data in bytes
        """
        self.current_operation = operation_name
        self.start_time = time.perf_counter()
        self.input_size = input_size
        self.output_size = 0

        self.start_memory = self._current_memory_mb()
        self.peak_memory = self.start_memory

        self.logger.debug(f"Started profiling: {operation_name}")

    def record_output(self, output_size: int):
        """Record the size of the produced output in bytes."""
        self.output_size = output_size
        self.sample_performance()

    def sample_performance(self):
        """Sample current memory usage."""
        if not self.current_operation:
            return

        try:
            self.peak_memory = max(self.peak_memory, self._current_memory_mb())
        except psutil.Error as e:
            self.logger.warning(f"Performance sampling failed: {e}")

    def stop_profiling(self, output_size: int = 0) -> PerformanceMetrics:
        """
        Stop profiling and return metrics.

        Args:
            output_size: Size of output data in bytes

        Returns:
            PerformanceMetrics object with collected data
        """
        if not self.current_operation or self.start_time is None:
            raise ValueError("No active profiling session")

        end_time = time.perf_counter()
        duration = end_time - self.start_time

        try:
            end_memory = self._current_memory_mb()
        except psutil.Error:
            end_memory = self.start_memory
        self.peak_memory = max(self.peak_memory, end_memory)

        throughput = (self.input_size / 1024 / 1024) / duration if duration > 0 else 0  # MB/s
        expansion_ratio = output_size / self.input_size if self.input_size > 0 else 1.0

        metrics = PerformanceMetrics(
            operation_name=self.current_operation,
            start_time=self.start_time,
            end_time=end_time,
            duration=duration,
            input_size=self.input_size,
            output_size=output_size,
            memory_peak_mb=self.peak_memory,
            memory_start_mb=self.start_memory,
            memory_end_mb=end_memory,
            throughput_mbps=throughput,
            expansion_ratio=expansion_ratio
        )

        self.metrics_history.append(metrics)

        self.logger.info(f"Performance Summary - {self.current_operation}:")
        self.logger.info(f"  Duration: {duration * 1000:.2f}ms")
        self.logger.info(f"  Throughput: {throughput:.2f} MB/s")
        self.logger.info(f"  Memory Peak: {self.peak_memory:.1f} MB")
        self.logger.info(f"  Expansion Ratio: {expansion_ratio:.2f}")

        # Reset state
        self.current_operation = None
        self.start_time = None
        self.start_memory = None

        return metrics

    def get_performance_summary(self) -> Dict[str, Any]:
        """
        Get summary of all performance metrics.

        Returns:
            Dictionary with performance summary
        """
        if not self.metrics_history:
            return {"total_operations": 0}

        total_duration = sum(m.duration for m in self.metrics_history)
        total_input = sum(m.input_size for m in self.metrics_history)
        total_output = sum(m.output_size for m in self.metrics_history)

        avg_throughput = sum(m.throughput_mbps for m in self.metrics_history) / len(self.metrics_history)
        avg_memory = sum(m.memory_peak_mb for m in self.metrics_history) / len(self.metrics_history)

        return {
            "total_operations": len(self.metrics_history),
            "total_duration": total_duration,
            "total_input_bytes": total_input,
            "total_output_bytes": total_output,
            "average_throughput_mbps": avg_throughput,
            "average_memory_peak_mb": avg_memory,
            "overall_expansion_ratio": total_output / total_input if total_input > 0 else 1.0,
            "operations": [
                {
                    "name": m.operation_name,
                    "duration": m.duration,
                    "throughput": m.throughput_mbps,
                    "memory_peak": m.memory_peak_mb
                }
                for m in self.metrics_history
            ]
        }

    def export_metrics(self, format: str = "json") -> str:
        """
        Export performance metrics in specified format.

        Args:
            format: Export format ("json", "csv", "summary")

        Returns:
            Formatted metrics string
        """
        if format == "json":
            return json.dumps([asdict(m) for m in self.metrics_history], indent=2)

        elif format == "csv":
            lines = ["operation,duration,input_size,output_size,memory_peak_mb,throughput_mbps,expansion_ratio"]
            for m in self.metrics_history:
                lines.append(f"{m.operation_name},{m.duration},{m.input_size},{m.output_size},"
                             f"{m.memory_peak_mb},{m.throughput_mbps},{m.expansion_ratio}")
            return "\n".join(lines)

        elif format == "summary":
            summary = self.get_performance_summary()
            if summary["total_operations"] == 0:
                return "Performance Summary:\n  Total Operations: 0"
            lines = [
                "Performance Summary:",
                f"  Total Operations: {summary['total_operations']}",
                f"  Total Duration: {summary['total_duration'] * 1000:.2f}ms",
                f"  Total Input: {summary['total_input_bytes']} bytes",
                f"  Total Output: {summary['total_output_bytes']} bytes",
                f"  Average Throughput: {summary['average_throughput_mbps']:.2f} MB/s",
                f"  Average Memory Peak: {summary['average_memory_peak_mb']:.1f} MB"
            ]
            return "\n".join(lines)

        else:
            raise ValueError(f"Unsupported export format: {format}")

    @staticmethod
    def _current_memory_mb() -> float:
        return psutil.Process().memory_info().rss / 1024 / 1024
