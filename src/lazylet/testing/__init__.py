"""Example groups and a runner driving lazylet's per-example and shared phases."""

from .groups import ExampleBody, ExampleGroup, describe
from .runner import ExampleResult, Runner, RunResult, TestStatus, run


__all__ = [
    "ExampleBody",
    "ExampleGroup",
    "describe",
    "ExampleResult",
    "Runner",
    "RunResult",
    "TestStatus",
    "run",
]
