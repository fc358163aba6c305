# -*- coding: utf-8 -*-
"""
探索結果をもとに表示用の情報を構築するモジュールです。
"""

from __future__ import annotations

from typing import Any, Dict

import numpy as np
import pandas as pd

from ..config import BLOCK_SIZE, BOARD_SIZE, DIGITS, EMPTY
from ..csp.domains import value_of
from ..types import Domains, SolveResult


def domains_to_grid(domains: Domains) -> np.ndarray:
    """
    全セル確定済みのドメインから 9×9 の完成グリッドを作ります。

    Parameters
    ----------
    domains : list[set[int]]
        すべて要素 1 個のドメイン。

    Returns
    -------
    numpy.ndarray
        shape = (9, 9) の完成グリッド。
    """
    values = [value_of(domains, idx) for idx in range(len(domains))]
    if EMPTY in values:
        raise ValueError("cannot build a grid from an incomplete domain map")
    return np.array(values, dtype=int).reshape(BOARD_SIZE, BOARD_SIZE)


def is_valid_solution(grid) -> bool:
    """
    行・列・3×3 ブロックがすべて 1〜9 の並べ替えになっているかを確認します。
    """
    arr = np.asarray(grid, dtype=int)
    if arr.shape != (BOARD_SIZE, BOARD_SIZE):
        return False

    units = [arr[i, :] for i in range(BOARD_SIZE)]
    units += [arr[:, j] for j in range(BOARD_SIZE)]
    units += [
        arr[r:r + BLOCK_SIZE, c:c + BLOCK_SIZE].ravel()
        for r in range(0, BOARD_SIZE, BLOCK_SIZE)
        for c in range(0, BOARD_SIZE, BLOCK_SIZE)
    ]
    return all(set(unit.tolist()) == DIGITS for unit in units)


def preserves_givens(board, grid) -> bool:
    """入力でヒントだったセルが、解でも同じ数字になっているか。"""
    src = np.asarray(board, dtype=int)
    out = np.asarray(grid, dtype=int)
    mask = src != 0
    return bool(np.array_equal(src[mask], out[mask]))


def build_result(result: SolveResult) -> Dict[str, Any]:
    """
    SolveResult を JSON にそのまま出せる dict に変換します。
    """
    solved_board = None
    if result.solution is not None:
        solved_df = pd.DataFrame(
            result.solution,
            index=range(1, BOARD_SIZE + 1),
            columns=range(1, BOARD_SIZE + 1),
        )
        solved_board = solved_df.values.tolist()  # JSON で返せるよう list に戻す

    return {
        "status": result.status,
        "solved_board": solved_board,
        "shape": (BOARD_SIZE, BOARD_SIZE),
        "stats": {
            "nodes_visited": result.nodes_visited,
            "backtracks": result.backtracks,
            "solved_by_propagation": result.solved_by_propagation,
            "duration_ms": result.duration_ms,
        },
    }
