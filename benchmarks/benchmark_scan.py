"""Benchmark scanning throughput.

Run with:
    pytest benchmarks/benchmark_scan.py --benchmark-only
"""

try:
    import pytest

    from tessera import DictScanCache, scan, scan_pieces

    @pytest.mark.benchmark(group="scan")
    def test_benchmark_scan(benchmark, large_template):
        """Benchmark a cold scan of a large template."""
        benchmark(scan, large_template)

    @pytest.mark.benchmark(group="scan")
    def test_benchmark_scan_cached(benchmark, large_template):
        """Benchmark cache hits on the same template."""
        cache = DictScanCache()
        scan_pieces(large_template, cache=cache)
        benchmark(scan_pieces, large_template, cache=cache)

except ImportError:
    pass
