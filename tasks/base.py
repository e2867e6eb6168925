# gacore: Dense Clifford Algebra Kernel
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

from abc import ABC, abstractmethod

from omegaconf import DictConfig

from log import get_logger
from gacore.algebra import CliffordAlgebra

logger = get_logger(__name__)


class BaseTask(ABC):
    """Abstract base class for all CLI tasks.

    Lifecycle: setup_algebra → execute → report.

    Attributes:
        cfg (DictConfig): Hydra configuration.
        algebra (CliffordAlgebra): Clifford algebra kernel.
    """

    def __init__(self, cfg: DictConfig):
        """Sets up the task.

        Args:
            cfg (DictConfig): Hydra config.
        """
        self.cfg = cfg
        self.algebra = self.setup_algebra()

    def setup_algebra(self) -> CliffordAlgebra:
        """Build ``Cl(p, q, r)`` from the ``algebra`` config group."""
        alg_cfg = self.cfg.algebra
        return CliffordAlgebra(
            p=alg_cfg.p,
            q=alg_cfg.get('q', 0),
            r=alg_cfg.get('r', 0),
            device=alg_cfg.get('device', 'cpu'),
        )

    @abstractmethod
    def execute(self):
        """Compute the task result."""
        pass

    @abstractmethod
    def report(self, result):
        """Log the result."""
        pass

    def run(self):
        """Execute the task and return its result."""
        logger.info("Starting Task: %s on %s", self.cfg.name, self.algebra)
        result = self.execute()
        self.report(result)
        return result
