# -*- coding: utf-8 -*-
"""
制約伝播（propagation）を行うモジュールです。

ここでの制約伝播は AC-3（弧整合）アルゴリズムを
数独の all-different 制約向けに特化したものです。

- revise(xi, xj): xi の候補値 v のうち、xj 側に「v と異なる値」が
  1 つも無いもの（= xj のドメインがちょうど {v}）を取り除く
- ac3: すべての弧をキューに積み、ドメインが縮んだら
  影響を受ける弧を積み直す、を収束するまで繰り返す

ドメインが空になった時点で矛盾とみなし、即座に False を返します。
その枝は search 側で捨てられます。
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Optional, Set

from ..config import DEDUPLICATE_ARC_QUEUE
from ..types import Arc, Domains, PropagationStats
from .constraint_graph import NEIGHBORS, generate_arcs


def revise(domains: Domains, xi: int, xj: int) -> bool:
    """
    弧 (xi, xj) について xi のドメインを絞り込みます。

    一般の AC-3 では「x と制約を満たす y が存在するか」を調べますが、
    all-different では「y != x となる y が存在するか」になります。

    Returns
    -------
    bool
        1 つでも値を取り除いたら True。
    """
    dom_j = domains[xj]
    to_remove = [x for x in domains[xi] if not any(x != y for y in dom_j)]
    if not to_remove:
        return False

    domains[xi].difference_update(to_remove)
    return True


def ac3(
    domains: Domains,
    stats: Optional[PropagationStats] = None,
    deduplicate: bool = DEDUPLICATE_ARC_QUEUE,
) -> bool:
    """
    domains をその場で弧整合な状態まで絞り込みます。

    Parameters
    ----------
    domains : list[set[int]]
        各セルのドメイン。この関数の中で直接書き換えられます。
    stats : PropagationStats, optional
        渡された場合、revise 回数と削除数を加算します。
    deduplicate : bool
        True なら、すでにキューに積まれている弧は積み直しません。
        結果（最終的なドメイン）はどちらでも同じです。

    Returns
    -------
    bool
        矛盾なく収束したら True、どこかのドメインが空になったら False。
        True でも、候補が 2 個以上残るセルがあり得ます。
    """
    queue: Deque[Arc] = deque(generate_arcs())
    pending: Set[Arc] = set(queue) if deduplicate else set()

    while queue:
        arc = queue.popleft()
        if deduplicate:
            pending.discard(arc)
        xi, xj = arc

        before = len(domains[xi])
        revised = revise(domains, xi, xj)
        if stats is not None:
            stats.revisions += 1
            stats.removals += before - len(domains[xi])

        if not revised:
            continue

        if not domains[xi]:
            return False

        # xi が縮んだので、xi を支えにしていた隣接セルを再確認する
        for xk in NEIGHBORS[xi]:
            if xk == xj:
                continue
            new_arc = (xk, xi)
            if deduplicate:
                if new_arc in pending:
                    continue
                pending.add(new_arc)
            queue.append(new_arc)

    return True
