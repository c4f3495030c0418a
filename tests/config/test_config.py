"""Tests for `flowgraph.config` focusing on behavior and correctness."""

from flowgraph.config import FLOW_CONFIG, MATRIX_CONFIG, FlowConfig, MatrixConfig


def test_default_instances() -> None:
    assert FLOW_CONFIG.min_residual == 0
    assert FLOW_CONFIG.max_augmentations is None
    assert MATRIX_CONFIG.initial_size == 0


def test_has_capacity_threshold() -> None:
    config = FlowConfig(min_residual=0.5)
    assert config.has_capacity(0.6)
    assert not config.has_capacity(0.5)
    assert not config.has_capacity(0.0)
    assert config.has_capacity(float("inf"))


def test_next_size_never_shrinks_and_covers_required() -> None:
    """Growth covers the requested index and is monotonic in the requirement."""
    config = MatrixConfig(growth_factor=1.5)
    sizes = [config.next_size(required, 10) for required in range(0, 40)]
    assert all(size >= 10 for size in sizes)
    assert all(size >= required for required, size in zip(range(0, 40), sizes))
    assert sizes == sorted(sizes)


def test_next_size_from_empty_matrix() -> None:
    assert MatrixConfig().next_size(1, 0) == 1
    assert MatrixConfig(growth_factor=3.0).next_size(2, 2) == 2


def test_default_flow_config_keeps_tiny_capacities() -> None:
    assert FLOW_CONFIG.has_capacity(1e-9)
    assert not FLOW_CONFIG.has_capacity(0.0)
    assert not FlowConfig().has_capacity(0)
