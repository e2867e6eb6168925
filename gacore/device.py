# gacore: Dense Clifford Algebra Kernel (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0

"""Device resolution for the product tables."""

import torch


def resolve_device(device: str = "auto") -> str:
    """Resolve ``'auto'`` to the best available device.

    Priority: cuda > cpu. MPS is never picked since it has no float64
    support. Any value other than ``'auto'`` is returned unchanged.
    """
    if device != "auto":
        return device
    if torch.cuda.is_available():
        return "cuda"
    return "cpu"
