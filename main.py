# gacore: Dense Clifford Algebra Kernel
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""gacore CLI Entry Point.

Dispatches small algebra tasks:
    python main.py name=cayley algebra.p=3
    python main.py name=product algebra.p=2 product.op=wedge
"""

import hydra
from omegaconf import DictConfig

from tasks import TASKS


def run(cfg: DictConfig):
    """Builds the task named by ``cfg.name`` and runs it.

    Args:
        cfg (DictConfig): The plan.

    Returns:
        Whatever the task computed.
    """
    task_name = cfg.name

    if task_name not in TASKS:
        raise ValueError(f"Unknown task: {task_name}. Available: {list(TASKS.keys())}")

    TaskClass = TASKS[task_name]
    task = TaskClass(cfg)
    return task.run()


@hydra.main(version_base=None, config_path="conf", config_name="config")
def main(cfg: DictConfig):
    run(cfg)


if __name__ == "__main__":
    main()
