# -*- coding: utf-8 -*-
"""
sudoku_solver.postprocess パッケージ

探索結果（ドメイン）から完成盤面や API 向けの結果 dict を作ります。
"""
