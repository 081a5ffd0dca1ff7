"""K-means clustering of fixed-dimension samples."""

from __future__ import annotations

import enum
import math
import random
import struct
from collections.abc import Sequence
from pathlib import Path

_HEADER = struct.Struct("=ii")
_INT = struct.Struct("=i")


class InitMode(enum.Enum):
    """How the initial means are chosen."""

    RANDOM = "random"
    MANUAL = "manual"
    UNIFORM = "uniform"


def _distance(x: Sequence[float], u: Sequence[float]) -> float:
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(x, u)))


class KMeans:
    """Partition samples of ``dim`` values into ``clusters`` groups.

    ``init_mode``, ``max_iter``, ``end_error`` and ``rng`` are plain
    attributes that may be changed before clustering.
    """

    def __init__(self, dim: int = 1, clusters: int = 1) -> None:
        if dim < 1 or clusters < 1:
            raise ValueError("dimension and cluster count must be positive")
        self.dim = dim
        self.clusters = clusters
        self._means = [[0.0] * dim for _ in range(clusters)]
        self.init_mode = InitMode.RANDOM
        self.max_iter = 100
        self.end_error = 0.001
        self.rng = random.Random()

    def set_mean(self, index: int, mean: Sequence[float]) -> None:
        """Set the mean of cluster ``index``."""
        if len(mean) != self.dim:
            raise ValueError(f"mean must have {self.dim} values")
        self._means[index] = [float(v) for v in mean]

    def mean(self, index: int) -> list[float]:
        """Return a copy of the mean of cluster ``index``."""
        return list(self._means[index])

    def _check(self, data: Sequence[Sequence[float]]) -> list[list[float]]:
        samples = [[float(v) for v in sample] for sample in data]
        if len(samples) < self.clusters:
            raise ValueError("fewer samples than clusters")
        for sample in samples:
            if len(sample) != self.dim:
                raise ValueError(f"every sample must have {self.dim} values")
        return samples

    def initialise(self, data: Sequence[Sequence[float]]) -> None:
        """Pick starting means from ``data`` according to ``init_mode``."""
        samples = self._check(data)
        size = len(samples)
        if self.init_mode is InitMode.RANDOM:
            interval = size // self.clusters
            for i in range(self.clusters):
                select = interval * i + self.rng.randint(0, interval - 1)
                self._means[i] = list(samples[select])
        elif self.init_mode is InitMode.UNIFORM:
            for i in range(self.clusters):
                self._means[i] = list(samples[i * size // self.clusters])

    def _label(self, sample: Sequence[float]) -> tuple[int, float]:
        best_label, best_dist = 0, -1.0
        for i, mean in enumerate(self._means):
            dist = _distance(sample, mean)
            if best_dist == -1.0 or dist < best_dist:
                best_label, best_dist = i, dist
        return best_label, best_dist

    def cluster(self, data: Sequence[Sequence[float]]) -> list[int]:
        """Cluster ``data`` and return the cluster index of each sample."""
        samples = self._check(data)
        self.initialise(samples)
        size = len(samples)
        iterations = 0
        unchanged = 0
        curr_cost = 0.0
        while True:
            counts = [0] * self.clusters
            sums = [[0.0] * self.dim for _ in range(self.clusters)]
            last_cost, curr_cost = curr_cost, 0.0
            for sample in samples:
                label, dist = self._label(sample)
                curr_cost += dist
                counts[label] += 1
                sums[label] = [s + v for s, v in zip(sums[label], sample)]
            curr_cost /= size
            for i, (n, total) in enumerate(zip(counts, sums)):
                if n > 0:
                    self._means[i] = [v / n for v in total]
            iterations += 1
            if abs(last_cost - curr_cost) < self.end_error * last_cost:
                unchanged += 1
            if iterations >= self.max_iter or unchanged >= 3:
                break
        return [self._label(sample)[0] for sample in samples]

    def cluster_file(self, sample_path: str | Path, label_path: str | Path) -> list[int]:
        """Cluster a binary sample file and write a binary label file.

        The sample file holds an int count, an int dimension and then the
        samples as doubles; the label file holds the count and one int
        label per sample. The labels are also returned.
        """
        raw = Path(sample_path).read_bytes()
        if len(raw) < _HEADER.size:
            raise ValueError("sample file is too short")
        size, dim = _HEADER.unpack_from(raw)
        if dim != self.dim:
            raise ValueError(f"sample dimension {dim} does not match {self.dim}")
        if size < self.clusters:
            raise ValueError("fewer samples than clusters")
        body = struct.Struct(f"={size * dim}d")
        if len(raw) < _HEADER.size + body.size:
            raise ValueError("sample file is truncated")
        values = body.unpack_from(raw, _HEADER.size)
        samples = [values[i * dim:(i + 1) * dim] for i in range(size)]
        labels = self.cluster(samples)
        with open(label_path, "wb") as out:
            out.write(_INT.pack(size))
            out.write(b"".join(_INT.pack(label) for label in labels))
        return labels

    def __str__(self) -> str:
        lines = [
            "<KMeans>",
            f"<DimNum> {self.dim} </DimNum>",
            f"<ClusterNum> {self.clusters} </ClusterNum>",
            "<Mean>",
        ]
        lines.extend("".join(f"{v:g} " for v in mean) for mean in self._means)
        lines.extend(["</Mean>", "</KMeans>"])
        return "\n".join(lines) + "\n"