# -*- coding: utf-8 -*-
"""
セル同士の「異なる値でなければならない」関係（制約グラフ）を扱うモジュールです。

数独の制約はすべて all-different なので、
あるセルと同じ行・同じ列・同じ 3×3 ブロックにあるセル（計 20 個）が
そのセルの「隣接セル」になります。

隣接関係は盤面の中身に依存しないので、import 時に一度だけ計算します。
"""

from __future__ import annotations

from typing import List, Set, Tuple

from ..config import BLOCK_SIZE, BOARD_SIZE, NUM_CELLS
from ..types import Arc, CellCoord
from .domains import cell_coord, cell_index


def _compute_neighbors(row: int, col: int) -> Set[CellCoord]:
    neighbors: Set[CellCoord] = set()

    # 同じ行
    for j in range(BOARD_SIZE):
        if j != col:
            neighbors.add((row, j))

    # 同じ列
    for i in range(BOARD_SIZE):
        if i != row:
            neighbors.add((i, col))

    # 同じブロック
    block_row = row // BLOCK_SIZE * BLOCK_SIZE
    block_col = col // BLOCK_SIZE * BLOCK_SIZE
    for i in range(block_row, block_row + BLOCK_SIZE):
        for j in range(block_col, block_col + BLOCK_SIZE):
            if (i, j) != (row, col):
                neighbors.add((i, j))

    return neighbors


# NEIGHBORS[index] = そのセルの隣接セルの線形インデックス（昇順）
NEIGHBORS: Tuple[Tuple[int, ...], ...] = tuple(
    tuple(sorted(cell_index(i, j) for i, j in _compute_neighbors(*cell_coord(idx))))
    for idx in range(NUM_CELLS)
)


def neighbors_of(row: int, col: int) -> Set[CellCoord]:
    """
    (row, col) と同じ行・列・ブロックにある他のセルの集合を返します。

    戻り値の要素数は常に 20 で、関係は対称です
    （A が B の隣接なら B も A の隣接）。
    """
    return {cell_coord(idx) for idx in NEIGHBORS[cell_index(row, col)]}


def generate_arcs() -> List[Arc]:
    """
    すべての有向弧 (xi, xj) を返します。

    xi を行優先で走査し、その隣接セル xj ごとに 1 本ずつ作るので、
    81 × 20 = 1620 本になります。隣接関係が対称なので両向きがそろいます。
    """
    return [(xi, xj) for xi in range(NUM_CELLS) for xj in NEIGHBORS[xi]]
