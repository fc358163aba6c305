# -*- coding: utf-8 -*-
"""
solver 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- 探索ノード数の上限
- 制約伝播キューの重複排除の有無
- 進捗ログの出力間隔
などを簡単に変更できます。
"""

from __future__ import annotations

from typing import FrozenSet, List, Optional

# ==== 盤面サイズ ===========================================================

# 9×9 の盤面のみを扱う（他サイズは対象外）
BOARD_SIZE: int = 9

# 3×3 ブロックの一辺
BLOCK_SIZE: int = 3

# セルの総数
NUM_CELLS: int = BOARD_SIZE * BOARD_SIZE

# 各セルが取り得る数字
DIGITS: FrozenSet[int] = frozenset(range(1, BOARD_SIZE + 1))

# 未確定セルを表す値
EMPTY: int = 0

# ==== 制約伝播関連 =========================================================

# AC-3 の作業キューで、同じ弧が重複して積まれないようにするかどうか。
# 重複を許しても結果は変わらない（revise は冪等）ので、速度だけの違いです。
DEDUPLICATE_ARC_QUEUE: bool = True

# ==== 探索関連 =============================================================

# バックトラック探索で訪問するノード数の上限。
# None なら無制限（通常はこれで十分速く解けます）。
MAX_SEARCH_NODES: Optional[int] = None

# 何ノードごとに進捗ログを出すか
LOG_PROGRESS_EVERY: int = 1000

# ==== ログ関連 =============================================================

# sudoku_solver ロガーのレベル（"DEBUG" にすると仮置き・バックトラックも出力）
LOG_LEVEL: str = "INFO"

# ==== サンプル盤面 =========================================================

# 「例題を読み込む」ボタンで使う有名な問題
EXAMPLE_PUZZLE: List[List[int]] = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]
