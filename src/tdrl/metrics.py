"""Episode logging: console formatting plus an append-only JSONL sink.

The runner reports every finished episode two ways:

- through the ``"tdrl"`` logger hierarchy (``setup_logging`` installs a
  compact console formatter), every ``log_interval`` episodes;
- to an optional sink, any object with ``write(record: dict)``.
  ``MetricsLogger`` is the bundled one: one JSON object per line.

Usage::

    from tdrl.metrics import MetricsLogger, setup_logging

    setup_logging()
    with MetricsLogger("runs/sarsa/metrics.jsonl") as sink:
        run(experiment, 1000, logger=sink)
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import IO, Any, Protocol

import jax.numpy as jnp
import numpy as np


class MetricsSink(Protocol):
    """Anything that accepts one structured record per episode."""

    def write(self, record: dict[str, Any]) -> None: ...


# ---------------------------------------------------------------------------
# Structured console logging
# ---------------------------------------------------------------------------

_LEVEL_ABBREV = {
    logging.DEBUG: "D",
    logging.INFO: "I",
    logging.WARNING: "W",
    logging.ERROR: "E",
    logging.CRITICAL: "C",
}


class _EpisodeFormatter(logging.Formatter):
    """Compact formatter: abbreviated level + millisecond timestamp.

    Example output::

        I 2026-02-15 14:30:22.123 [tdrl.runner.experiment] episode 100 | reward=-153 steps=154
    """

    def format(self, record: logging.LogRecord) -> str:
        lvl = _LEVEL_ABBREV.get(record.levelno, "?")
        ts = self.formatTime(record, "%Y-%m-%d %H:%M:%S")
        ms = int(record.msecs)
        msg = record.getMessage()
        return f"{lvl} {ts}.{ms:03d} [{record.name}] {msg}"


def setup_logging(level: int = logging.INFO) -> None:
    """Configure the ``tdrl`` logger with compact formatting.

    Safe to call multiple times: existing handlers are replaced.
    """
    logger = logging.getLogger("tdrl")
    logger.setLevel(level)

    for h in logger.handlers[:]:
        logger.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(_EpisodeFormatter())
    logger.addHandler(handler)
    logger.propagate = False


def log_episode_progress(
    record: dict[str, Any],
    total_episodes: int | None = None,
    logger_name: str = "tdrl",
) -> None:
    """Log a one-line summary of an episode record.

    Example output::

        I 2026-02-15 14:30:22.123 [tdrl] episode 50/1000 (5.0%) | total_reward=-212 steps=213
    """
    episode = record.get("episode", 0)
    if total_episodes:
        pct = 100.0 * (episode + 1) / total_episodes
        parts = [f"episode {episode + 1}/{total_episodes} ({pct:.1f}%)"]
    else:
        parts = [f"episode {episode + 1}"]
    kv = " ".join(
        f"{k}={v:.4g}" if isinstance(v, float) else f"{k}={v}"
        for k, v in ((k, _to_python(v)) for k, v in record.items())
        if k not in ("episode", "wall_time")
    )
    if kv:
        parts.append(kv)
    logging.getLogger(logger_name).info(" | ".join(parts))


# ---------------------------------------------------------------------------
# JSONL sink
# ---------------------------------------------------------------------------


class MetricsLogger:
    """Append-only JSONL episode sink.

    Parameters
    ----------
    path:
        Path to the JSONL file.  Parent directories are created
        automatically.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file: IO[str] = open(self._path, "a")  # noqa: SIM115
        self._start_time = time.monotonic()

    def write(self, record: dict[str, Any]) -> None:
        """Write a single record as one JSON line.

        Adds ``wall_time`` (seconds since the logger was created) unless
        present; numpy/JAX scalars are converted to Python numbers.
        """
        row = {k: _to_python(v) for k, v in record.items()}
        if "wall_time" not in row:
            row["wall_time"] = round(time.monotonic() - self._start_time, 3)
        self._file.write(json.dumps(row, default=str) + "\n")
        self._file.flush()

    def close(self) -> None:
        self._file.close()

    @property
    def path(self) -> Path:
        return self._path

    def __enter__(self) -> MetricsLogger:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"MetricsLogger({self._path})"


def read_metrics(path: str | Path) -> list[dict[str, Any]]:
    """Read all records from a JSONL metrics file."""
    p = Path(path)
    if not p.exists():
        return []
    records = []
    for line in p.read_text().splitlines():
        line = line.strip()
        if line:
            records.append(json.loads(line))
    return records


def _to_python(val: Any) -> Any:
    """Convert JAX/numpy scalars to plain Python types for JSON."""
    if isinstance(val, (jnp.ndarray, np.ndarray)):
        return val.item()
    if isinstance(val, (np.integer, np.floating, np.bool_)):
        return val.item()
    return val
