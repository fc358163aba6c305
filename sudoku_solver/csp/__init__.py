# -*- coding: utf-8 -*-
"""
sudoku_solver.csp パッケージ

CSP（制約充足問題）としての数独に関する処理をまとめています。

主に以下の役割を持つモジュールから構成されています。
- domains.py          : セルごとのドメイン（候補数字集合）の初期計算
- constraint_graph.py : 行・列・ブロックの隣接関係と弧の生成
- propagation.py      : AC-3 による制約伝播（ドメインの絞り込み）
- search.py           : MRV + 深さ優先のバックトラック探索
"""
