# -*- coding: utf-8 -*-
"""
セルごとの初期ドメイン（候補数字集合）を計算するモジュールです。

- ヒントとして数字が入っているセルは、その数字だけのドメイン
- 空きセル（0）は {1, ..., 9} のドメイン

ドメインは長さ 81 のリストで、row * 9 + col の線形インデックスで引きます。
探索の各ノードは、このリストを丸ごとコピーして独立に持ちます。
"""

from __future__ import annotations

from typing import Sequence

from ..config import BOARD_SIZE, DIGITS, EMPTY
from ..types import CellCoord, Domains


def cell_index(row: int, col: int) -> int:
    """(row, col) を線形インデックスに変換します。"""
    return row * BOARD_SIZE + col


def cell_coord(index: int) -> CellCoord:
    """線形インデックスを (row, col) に戻します。"""
    return divmod(index, BOARD_SIZE)


def initialize_domains(board: Sequence[Sequence[int]]) -> Domains:
    """
    盤面から初期ドメインを構築します。

    Parameters
    ----------
    board : 9×9 の盤面
        0 は未確定、1〜9 はヒント。値の範囲チェックは呼び出し側の責任。

    Returns
    -------
    domains : list[set[int]]
        各セルの候補数字集合。
    """
    domains: Domains = []
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            value = int(board[row][col])
            if value != EMPTY:
                domains.append({value})
            else:
                domains.append(set(DIGITS))
    return domains


def copy_domains(domains: Domains) -> Domains:
    """親ノードと共有しない、独立したコピーを作ります。"""
    return [set(dom) for dom in domains]


def is_complete(domains: Domains) -> bool:
    """すべてのドメインが要素 1 個なら True。"""
    return all(len(dom) == 1 for dom in domains)


def is_failed(domains: Domains) -> bool:
    """空のドメインが 1 つでもあれば True。"""
    return any(not dom for dom in domains)


def value_of(domains: Domains, index: int) -> int:
    """確定していればその数字、未確定なら 0 を返します。"""
    dom = domains[index]
    return next(iter(dom)) if len(dom) == 1 else EMPTY
