# -*- coding: utf-8 -*-
"""
sudoku_solver.grid パッケージ

盤面（グリッド）に関する処理をまとめたサブパッケージです。
- parser.py : list / DataFrame / 文字列などから内部表現への変換
"""
