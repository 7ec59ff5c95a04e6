"""
Sample data model.

A Sample is one named numeric observation with a timestamp and a set of
labels. Inputs turn their per-cycle observation maps into lists of samples
with ``new_samples`` before handing them to a writer.
"""

import time
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional


@dataclass
class Sample:
    """
    A single metric data point.

    Attributes:
        metric: Full metric name, e.g. "kernel_interrupts".
        value: Integer value of the observation.
        timestamp: Unix epoch seconds at which the sample was taken.
        labels: Extra dimensions attached to the sample.
    """

    metric: str
    value: int
    timestamp: float
    labels: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, object]:
        """Flatten the sample into a single row, labels included as columns."""
        row: Dict[str, object] = {
            "timestamp": self.timestamp,
            "metric": self.metric,
            "value": self.value,
        }
        row.update(self.labels)
        return row


def new_samples(
    fields: Mapping[str, int],
    prefix: str = "",
    labels: Optional[Mapping[str, str]] = None,
    timestamp: Optional[float] = None,
) -> List[Sample]:
    """
    Convert an observation map into samples sharing one timestamp.

    Args:
        fields: Mapping of field name to value.
        prefix: Prepended to each field name with an underscore separator.
        labels: Labels copied onto every sample.
        timestamp: Sample time; defaults to now.

    Returns:
        One Sample per field, ordered by field name.
    """
    ts = time.time() if timestamp is None else timestamp
    base_labels = dict(labels or {})
    samples = []
    for name in sorted(fields):
        metric = f"{prefix}_{name}" if prefix else name
        samples.append(
            Sample(metric=metric, value=fields[name], timestamp=ts, labels=dict(base_labels))
        )
    return samples
