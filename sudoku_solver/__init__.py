# sudoku_solver/__init__.py
# -*- coding: utf-8 -*-
"""
sudoku_solver パッケージの入口となるモジュールです。

api_proto/local_api.py などから:

    from sudoku_solver import solve

と呼び出されることを想定しています。

ここでは、盤面（9×9 の list / numpy 配列 / pandas.DataFrame）を受け取り、
1. 盤面の正規化
2. 初期ドメインの構築
3. AC-3 による初期の制約伝播
4. バックトラック探索（伝播だけで確定しなかった場合）
5. 完成盤面の構築
を順番に呼び出します。
"""

from __future__ import annotations

import time
from typing import Optional

from .config import MAX_SEARCH_NODES
from .logging_utils import get_logger
from .grid.parser import BoardLike, format_board, normalize_board
from .csp.domains import initialize_domains, is_complete
from .csp.propagation import ac3
from .csp.search import SearchAborted, SearchContext, search
from .postprocess.render_result import domains_to_grid, is_valid_solution, preserves_givens
from .types import (
    STATUS_CONTRADICTION,
    STATUS_EXHAUSTED,
    STATUS_SOLVED,
    Grid,
    PropagationStats,
    SolveResult,
)

__all__ = ["solve", "solve_board", "SolveResult", "SearchAborted"]

logger = get_logger()


def _elapsed_ms(start: float) -> int:
    return int((time.time() - start) * 1000)


def solve_board(
    board: BoardLike,
    max_nodes: Optional[int] = MAX_SEARCH_NODES,
) -> SolveResult:
    """
    数独を解き、統計情報つきの結果を返すメイン関数。

    Parameters
    ----------
    board : 9×9 の盤面
        0 は未確定、1〜9 はヒント。入力は書き換えません。
    max_nodes : int, optional
        探索ノード数の上限。None なら無制限。

    Returns
    -------
    SolveResult
        status は "solved" / "contradiction" / "exhausted" のいずれか。

    Raises
    ------
    ValueError
        盤面が 9×9 でない、または範囲外の値を含む場合。
    SearchAborted
        max_nodes を超えた場合。
    """
    start = time.time()
    logger.info("=== solve() START ===")

    # 1) 盤面の正規化
    grid = normalize_board(board)
    logger.info("Givens: %d", int((grid != 0).sum()))
    logger.debug("Input board:\n%s", format_board(grid))

    # 2) 初期ドメイン
    domains = initialize_domains(grid)

    # 3) 初期の制約伝播
    prop_stats = PropagationStats()
    if not ac3(domains, stats=prop_stats):
        logger.info("Initial propagation found a contradiction.")
        logger.info("=== solve() END === (%s)", STATUS_CONTRADICTION)
        return SolveResult(
            status=STATUS_CONTRADICTION,
            solution=None,
            duration_ms=_elapsed_ms(start),
        )

    solved_by_propagation = is_complete(domains)
    logger.info(
        "Initial propagation: revisions=%d, removals=%d, complete=%s",
        prop_stats.revisions,
        prop_stats.removals,
        solved_by_propagation,
    )

    # 4) バックトラック探索
    ctx = SearchContext(max_nodes=max_nodes, propagation=prop_stats)
    result = search(domains, ctx)

    if result is None:
        logger.info(
            "Search exhausted after %d nodes (%d backtracks).",
            ctx.nodes_visited,
            ctx.backtracks,
        )
        logger.info("=== solve() END === (%s)", STATUS_EXHAUSTED)
        return SolveResult(
            status=STATUS_EXHAUSTED,
            solution=None,
            nodes_visited=ctx.nodes_visited,
            backtracks=ctx.backtracks,
            duration_ms=_elapsed_ms(start),
        )

    # 5) 完成盤面の構築
    solved = domains_to_grid(result)

    # 最終確認（All-Different 制約がすべて満たされているか）
    if not is_valid_solution(solved):
        logger.warning("[WARNING] Solved grid violates a row/column/block constraint!")
    if not preserves_givens(grid, solved):
        logger.warning("[WARNING] Solved grid does not keep the given digits!")

    duration_ms = _elapsed_ms(start)
    logger.info(
        "Solved in %d ms; nodes=%d, backtracks=%d",
        duration_ms,
        ctx.nodes_visited,
        ctx.backtracks,
    )
    logger.debug("Solution:\n%s", format_board(solved))
    logger.info("=== solve() END === (%s)", STATUS_SOLVED)

    return SolveResult(
        status=STATUS_SOLVED,
        solution=solved.tolist(),
        nodes_visited=ctx.nodes_visited,
        backtracks=ctx.backtracks,
        solved_by_propagation=solved_by_propagation,
        duration_ms=duration_ms,
    )


def solve(board: BoardLike) -> Optional[Grid]:
    """
    数独を解きます。

    解けた場合は 9×9 の完成盤面（list of list）、
    解が無い場合（伝播で矛盾・探索で全滅のどちらでも）は None を返します。
    """
    return solve_board(board).solution
