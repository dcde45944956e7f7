from __future__ import annotations
"""YAML sample files for the law checker.

Example YAML:

```yaml
values:
  - 1
  - hello
  - [1, 2]
fallback: 0
```

Usage:
    from optionette.samples import load_samples
    samples = load_samples("samples.yml")
"""
from pathlib import Path
from typing import Any, List

import yaml
from pydantic import BaseModel, Field

__all__ = ["SampleSet", "DEFAULT_SAMPLES", "load_samples"]


class SampleSet(BaseModel):  # noqa: D101
    values: List[Any] = Field(min_length=1)
    fallback: Any = None


DEFAULT_SAMPLES = SampleSet(values=[0, 1, -7, 3.5, "", "text", [1, 2], {"k": "v"}, True], fallback=42)


def load_samples(path: str | Path) -> SampleSet:  # noqa: D401
    """Load and validate the YAML file at *path*.

    Raises ``pydantic.ValidationError`` when the content does not match
    :class:`SampleSet`.
    """
    data = yaml.safe_load(Path(path).read_text())
    return SampleSet.model_validate(data or {})
