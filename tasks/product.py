# gacore: Dense Clifford Algebra Kernel
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

import operator

from omegaconf import OmegaConf

from log import get_logger
from gacore.multivector import Multivector
from tasks.base import BaseTask

logger = get_logger(__name__)

OPERATORS = {
    'geometric': operator.mul,
    'wedge': operator.xor,
    'inner': operator.or_,
}


def build_multivector(algebra, terms) -> Multivector:
    """Sum ``coefficient * blade`` over a ``{blade name: coefficient}`` mapping."""
    result = Multivector(algebra)
    for name, coefficient in terms.items():
        result = result + float(coefficient) * Multivector.from_name(algebra, str(name))
    return result


class ProductTask(BaseTask):
    """Evaluates ``left <op> right`` for two multivectors given by blade names.

    Config (``product`` group)::

        op: geometric | wedge | inner
        left: {e1: 1.0, e2: 2.0}
        right: {e12: 1.0}
    """

    def execute(self):
        prod_cfg = self.cfg.product
        op_name = prod_cfg.get('op', 'geometric')
        if op_name not in OPERATORS:
            raise ValueError(f"Unknown product: {op_name}. Available: {list(OPERATORS.keys())}")

        left = build_multivector(self.algebra, OmegaConf.to_container(prod_cfg.left))
        right = build_multivector(self.algebra, OmegaConf.to_container(prod_cfg.right))
        return left, right, OPERATORS[op_name](left, right)

    def report(self, result):
        left, right, value = result
        logger.info("left   = %s", left)
        logger.info("right  = %s", right)
        logger.info("%s product = %s", self.cfg.product.get('op', 'geometric'), value)
