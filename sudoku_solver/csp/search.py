# -*- coding: utf-8 -*-
"""
バックトラック探索を行うモジュールです。

ざっくり流れ
------------
1. 全セルのドメインが要素 1 個なら完成
2. MRV で次に値を決めるセルを選ぶ（候補が最も少ないセル、同数なら行優先で最初）
3. そのセルの候補値を小さい順に試す
   - ドメイン全体をコピーし、そのセルを {値} に固定
   - AC-3 で制約伝播し、矛盾しなければ再帰
   - 解が見つかったら、残りの候補や兄弟ノードは試さずにすぐ返す
4. すべての候補が失敗したら None（親が次の候補を試す）

親のドメインは一切書き換えないので、明示的な「元に戻す」処理は不要です。
枝を捨てることが、そのままバックトラックになります。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..config import LOG_PROGRESS_EVERY
from ..logging_utils import get_logger
from ..types import Domains, PropagationStats
from .domains import cell_coord, copy_domains, is_complete, is_failed
from .propagation import ac3

logger = get_logger()


class SearchAborted(RuntimeError):
    """探索ノード数が上限に達したときに送出されます。"""


@dataclass
class SearchContext:
    """
    探索全体で共有する情報をまとめたクラスです。
    """

    max_nodes: Optional[int] = None

    nodes_visited: int = 0
    backtracks: int = 0
    propagation: Optional[PropagationStats] = None


def select_unassigned_variable(domains: Domains) -> Optional[int]:
    """
    次に値を決めるセルを選びます。

    MRV（Minimum Remaining Values）：
    - ドメインサイズが 2 以上のセルのうち、最も小さいもの
    - 同じなら行優先で最初に見つかったもの

    すべて確定済みなら None を返します。
    """
    best: Optional[int] = None
    best_size = 0
    for idx, dom in enumerate(domains):
        size = len(dom)
        if size > 1 and (best is None or size < best_size):
            best = idx
            best_size = size
            if size == 2:
                # 2 より小さい未確定ドメインは無い
                break
    return best


def search(domains: Domains, ctx: Optional[SearchContext] = None) -> Optional[Domains]:
    """
    深さ優先のバックトラック探索で、最初に見つかった解を返します。

    Parameters
    ----------
    domains : list[set[int]]
        弧整合済みのドメイン。この関数は書き換えません。
    ctx : SearchContext, optional
        ノード数の集計や上限チェックに使います。

    Returns
    -------
    list[set[int]] or None
        全セルが確定したドメイン。解が無ければ None。

    Raises
    ------
    SearchAborted
        ctx.max_nodes を超えてノードを展開しようとした場合。
    """
    if ctx is None:
        ctx = SearchContext()

    # 空のドメインがある状態からは何も確定できない
    if is_failed(domains):
        return None

    if is_complete(domains):
        return domains

    var = select_unassigned_variable(domains)
    if var is None:
        return None

    ctx.nodes_visited += 1
    if ctx.max_nodes is not None and ctx.nodes_visited > ctx.max_nodes:
        raise SearchAborted(f"search node limit exceeded: {ctx.max_nodes}")

    if ctx.nodes_visited % LOG_PROGRESS_EVERY == 0:
        logger.info(
            "[search] nodes_visited = %d, backtracks = %d",
            ctx.nodes_visited,
            ctx.backtracks,
        )

    row, col = cell_coord(var)
    for value in sorted(domains[var]):
        new_domains = copy_domains(domains)
        new_domains[var] = {value}

        if not ac3(new_domains, stats=ctx.propagation):
            ctx.backtracks += 1
            logger.debug("Backtrack: r%dc%d != %d", row + 1, col + 1, value)
            continue

        logger.debug("Guess: r%dc%d = %d", row + 1, col + 1, value)
        result = search(new_domains, ctx)
        if result is not None:
            return result

    return None
