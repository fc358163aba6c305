# -*- coding: utf-8 -*-
"""
数独 solver で使う主なデータ構造（型）をまとめたモジュールです。

dataclass を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

# グリッド上の座標を表す型 (row, col)
CellCoord = Tuple[int, int]

# 9×9 の盤面（0 = 未確定、1〜9 = 数字）
Grid = List[List[int]]

# 各セルの候補数字集合。row * 9 + col の線形インデックスで引く。
Domains = List[Set[int]]

# 「xi の値は xj の値と異なる」という有向の弧（線形インデックスの組）
Arc = Tuple[int, int]

# solve の結果ステータス
STATUS_SOLVED = "solved"
STATUS_CONTRADICTION = "contradiction"  # 制約伝播でドメインが空になった
STATUS_EXHAUSTED = "exhausted"  # 探索で全候補を試しても解がなかった


@dataclass
class PropagationStats:
    """
    AC-3 の実行統計です。

    Attributes
    ----------
    revisions : int
        revise を呼び出した回数。
    removals : int
        ドメインから取り除いた候補値の総数。
    """

    revisions: int = 0
    removals: int = 0


@dataclass
class SolveResult:
    """
    solve_board() の結果を表すクラスです。

    Attributes
    ----------
    status : str
        "solved" / "contradiction" / "exhausted" のいずれか。
    solution : Grid or None
        解けた場合の 9×9 盤面。解けなければ None。
    nodes_visited : int
        探索で展開したノード数（初期伝播だけで解けた場合は 0）。
    backtracks : int
        AC-3 が矛盾を返して捨てた枝の数。
    solved_by_propagation : bool
        初期の制約伝播だけで全セルが確定したかどうか。
    duration_ms : int
        solve にかかった時間（ミリ秒）。
    """

    status: str
    solution: Optional[Grid]
    nodes_visited: int = 0
    backtracks: int = 0
    solved_by_propagation: bool = False
    duration_ms: int = 0

    @property
    def solved(self) -> bool:
        return self.status == STATUS_SOLVED
