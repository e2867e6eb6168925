# gacore: Dense Clifford Algebra Kernel
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

from log import get_logger
from gacore.blades import blade_name
from tasks.base import BaseTask

logger = get_logger(__name__)


def signed_name(sign: int, blade: int) -> str:
    """``"e12"``, ``"-e12"`` or ``"0"`` for one Cayley table entry."""
    if sign == 0:
        return "0"
    name = blade_name(blade)
    return name if sign > 0 else f"-{name}"


class CayleyTableTask(BaseTask):
    """Dumps the signed multiplication table of the basis blades.

    Row ``a``, column ``b`` holds ``blade_a * blade_b``.
    """

    def execute(self):
        """Rows of signed blade names, with a header row of blade names."""
        dim = self.algebra.dim
        header = [blade_name(b) for b in range(dim)]
        signs = self.algebra.cayley_signs.tolist()
        masks = self.algebra.cayley_indices.tolist()
        rows = [
            [signed_name(signs[a][b], masks[a][b]) for b in range(dim)]
            for a in range(dim)
        ]
        return header, rows

    def report(self, result):
        header, rows = result
        width = max(len(cell) for row in rows + [header] for cell in row)

        def fmt(cells):
            return " ".join(cell.rjust(width) for cell in cells)

        logger.info("Cayley table of %s (%d blades)", self.algebra, self.algebra.dim)
        logger.info("%s | %s", " " * width, fmt(header))
        for name, row in zip(header, rows):
            logger.info("%s | %s", name.rjust(width), fmt(row))
