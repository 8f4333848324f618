"""Kord samples on disk, training configuration, and bit-vector helpers."""

from __future__ import annotations

import hashlib
import json
import struct
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Sequence

# Covers up to C9, beyond the range of a standard 88-key piano.
FREQUENCY_SPACE_SIZE = 8192
MEL_SPACE_SIZE = 512
INPUT_SPACE_SIZE = MEL_SPACE_SIZE + 128
NUM_CLASSES = 128

_LABEL_BYTES = 16
_FREQUENCY_FORMAT = f">{FREQUENCY_SPACE_SIZE}f"
_FREQUENCY_BYTES = struct.calcsize(_FREQUENCY_FORMAT)


@dataclass
class KordItem:
    """A single sample: a frequency space and the note-ID mask of the notes played."""

    path: Path = field(default_factory=Path)
    frequency_space: list[float] = field(
        default_factory=lambda: [0.0] * FREQUENCY_SPACE_SIZE
    )
    label: int = 0

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.frequency_space = [float(v) for v in self.frequency_space]
        if len(self.frequency_space) != FREQUENCY_SPACE_SIZE:
            raise ValueError(
                f"A frequency space holds {FREQUENCY_SPACE_SIZE} values, "
                f"not {len(self.frequency_space)}."
            )
        if not 0 <= self.label < 1 << (8 * _LABEL_BYTES):
            raise ValueError(f"Label out of range: {self.label}.")


@dataclass
class TrainConfig:
    """Settings for training the kord model."""

    source: str
    destination: str
    log: str
    simulation_size: int
    mlp_layers: int
    mlp_size: int
    mlp_dropout: float
    model_epochs: int
    model_batch_size: int
    model_workers: int
    model_seed: int
    adam_learning_rate: float
    adam_weight_decay: float
    adam_beta1: float
    adam_beta2: float
    adam_epsilon: float
    sigmoid_strength: float

    def save(self, path) -> None:
        """Write the configuration to a JSON file."""
        Path(path).write_text(json.dumps(asdict(self), indent=2), encoding="utf-8")

    @classmethod
    def load(cls, path) -> TrainConfig:
        """Read a configuration from a JSON file."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls(**data)


def _encode(item: KordItem) -> bytes:
    return struct.pack(_FREQUENCY_FORMAT, *item.frequency_space) + item.label.to_bytes(
        _LABEL_BYTES, "big"
    )


def load_kord_item(path) -> KordItem:
    """Load a sample: big-endian f32 frequency space followed by a big-endian u128 label."""
    path = Path(path)
    data = path.read_bytes()
    if len(data) < _FREQUENCY_BYTES + _LABEL_BYTES:
        raise ValueError(f"{path} is too short to hold a kord sample.")
    frequency_space = list(struct.unpack_from(_FREQUENCY_FORMAT, data))
    label = int.from_bytes(data[_FREQUENCY_BYTES : _FREQUENCY_BYTES + _LABEL_BYTES], "big")
    return KordItem(path=path, frequency_space=frequency_space, label=label)


def save_kord_item(destination, prefix: str, note_names: str, item: KordItem) -> Path:
    """Save a sample into destination, named after the notes and a hash of its content."""
    data = _encode(item)
    digest = int.from_bytes(hashlib.blake2b(data, digest_size=8).digest(), "big")
    path = Path(destination) / f"{prefix}{note_names}_{digest}.bin"
    path.write_bytes(data)
    return path


def linspace(start: float, end: float, num_points: int) -> list[float]:
    """Return num_points evenly spaced values from start to end inclusive."""
    if num_points < 2:
        raise ValueError("linspace needs at least two points.")
    step = (end - start) / (num_points - 1)
    return [start + i * step for i in range(num_points)]


def u128_to_binary(num: int) -> list[float]:
    """Return the 128 bits of num as 0.0/1.0, most significant first."""
    if not 0 <= num < 1 << 128:
        raise ValueError(f"Value out of range for 128 bits: {num}.")
    return [float(num >> (127 - i) & 1) for i in range(128)]


def binary_to_u128(binary: Sequence[float]) -> int:
    """Return the integer whose bits, most significant first, are the first 128 values."""
    if len(binary) < 128:
        raise ValueError("A binary vector needs 128 values.")
    num = 0
    for i, value in enumerate(binary[:128]):
        num += max(0, int(value)) << (127 - i)
    return num


def fold_binary(binary: Sequence[float]) -> list[float]:
    """Fold the first ten 12-value octaves of a binary vector onto one octave by maximum."""
    if len(binary) < 120:
        raise ValueError("A binary vector needs 128 values.")
    folded = [0.0] * 12
    for k in range(10):
        octave = binary[k * 12 : (k + 1) * 12]
        folded = [max(a, b) for a, b in zip(octave, folded)]
    return folded