"""Tests for tdrl.metrics."""

from __future__ import annotations

import logging
from pathlib import Path

import jax.numpy as jnp
import numpy as np
import pytest

from tdrl.metrics import MetricsLogger, log_episode_progress, read_metrics, setup_logging


@pytest.fixture
def restore_tdrl_logger():
    logger = logging.getLogger("tdrl")
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


class TestMetricsLogger:
    def test_write_and_read(self, tmp_path: Path) -> None:
        path = tmp_path / "metrics.jsonl"
        with MetricsLogger(path) as sink:
            sink.write({"episode": 0, "total_reward": -5.0})
            sink.write({"episode": 1, "total_reward": -3.0, "steps": 4})

        records = read_metrics(path)
        assert len(records) == 2
        assert records[0]["episode"] == 0
        assert records[1]["steps"] == 4

    def test_auto_wall_time(self, tmp_path: Path) -> None:
        path = tmp_path / "metrics.jsonl"
        with MetricsLogger(path) as sink:
            sink.write({"episode": 0})
        assert isinstance(read_metrics(path)[0]["wall_time"], float)

    def test_explicit_wall_time_not_overwritten(self, tmp_path: Path) -> None:
        path = tmp_path / "metrics.jsonl"
        with MetricsLogger(path) as sink:
            sink.write({"episode": 0, "wall_time": 99.9})
        assert read_metrics(path)[0]["wall_time"] == 99.9

    def test_scalar_conversion(self, tmp_path: Path) -> None:
        path = tmp_path / "metrics.jsonl"
        with MetricsLogger(path) as sink:
            sink.write({"a": jnp.float32(0.5), "b": np.int64(3), "c": np.bool_(True)})
        record = read_metrics(path)[0]
        assert record["a"] == 0.5
        assert record["b"] == 3
        assert record["c"] is True

    def test_creates_parent_dirs(self, tmp_path: Path) -> None:
        path = tmp_path / "a" / "b" / "metrics.jsonl"
        with MetricsLogger(path) as sink:
            sink.write({"episode": 0})
        assert path.exists()
        assert sink.path == path

    def test_appends(self, tmp_path: Path) -> None:
        path = tmp_path / "metrics.jsonl"
        for i in range(2):
            with MetricsLogger(path) as sink:
                sink.write({"episode": i})
        assert [r["episode"] for r in read_metrics(path)] == [0, 1]

    def test_read_missing(self, tmp_path: Path) -> None:
        assert read_metrics(tmp_path / "missing.jsonl") == []


class TestLogging:
    def test_setup_logging_idempotent(self, restore_tdrl_logger) -> None:
        setup_logging()
        setup_logging(logging.DEBUG)
        assert len(restore_tdrl_logger.handlers) == 1
        assert restore_tdrl_logger.level == logging.DEBUG

    def test_log_episode_progress(self, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="tdrl"):
            log_episode_progress(
                {"episode": 49, "total_reward": -212.0, "steps": 213, "wall_time": 1.0},
                total_episodes=100,
            )
        assert "episode 50/100 (50.0%)" in caplog.text
        assert "total_reward=-212" in caplog.text
        assert "steps=213" in caplog.text
        assert "wall_time" not in caplog.text
