"""Dispatch benchmarks — uses pytest-benchmark.

Not collected by the default ``testpaths``; run explicitly::

    pytest tests/benchmarks/ -v --benchmark-sort=median
    pytest tests/benchmarks/ --benchmark-disable   # as plain functional tests
"""
