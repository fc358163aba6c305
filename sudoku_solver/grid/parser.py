# -*- coding: utf-8 -*-
"""
盤面のセルを内部表現に正規化するモジュールです。

主な役割:
- list / numpy 配列 / pandas.DataFrame を 9×9 の numpy 配列（int）に変換
- 各セルの値を 0（未確定）または 1〜9 の数字に正規化
- 81 文字の文字列表現との相互変換
"""

from __future__ import annotations

from typing import Any, Sequence, Union

import numpy as np
import pandas as pd

from ..config import BLOCK_SIZE, BOARD_SIZE, EMPTY

BoardLike = Union[Sequence[Sequence[Any]], np.ndarray, pd.DataFrame]

# 空きマスとして扱う文字
BLANK_CHARS = {"", ".", "0"}


def normalize_cell(x: Any) -> int:
    """
    個々のセルの値を、内部表現（0〜9 の int）に変換します。

    変換ルール
    ----------
    - None / NaN / pd.NA / 空文字 / ".": 0（未確定）
    - 数字または数字文字列: int に変換
    - それ以外、または 0〜9 の範囲外: ValueError
    """
    if pd.api.types.is_scalar(x) and pd.isna(x):
        return EMPTY

    s = str(x).strip()
    if s in BLANK_CHARS:
        return EMPTY

    try:
        value = int(float(s))
    except (ValueError, OverflowError):
        raise ValueError(f"invalid cell value: {x!r}") from None

    if value != float(s) or not 0 <= value <= BOARD_SIZE:
        raise ValueError(f"cell value out of range [0, {BOARD_SIZE}]: {x!r}")
    return value


def normalize_board(board: BoardLike) -> np.ndarray:
    """
    入力盤面を 9×9 の numpy 配列に変換し、
    各セルを :func:`normalize_cell` によって正規化します。

    入力盤面そのものは変更しません（常に新しい配列を返します）。

    Parameters
    ----------
    board : list of list / numpy.ndarray / pandas.DataFrame
        入力の盤面データ。0 や空欄は未確定セル。

    Returns
    -------
    numpy.ndarray
        shape = (9, 9), dtype = int の 2次元配列。

    Raises
    ------
    ValueError
        形が 9×9 でない、または範囲外の値が含まれている場合。
    """
    if isinstance(board, pd.DataFrame):
        rows, cols = board.shape
        if (rows, cols) != (BOARD_SIZE, BOARD_SIZE):
            raise ValueError(f"board must be {BOARD_SIZE}x{BOARD_SIZE}, got {rows}x{cols}")
        cells = [[board.iat[i, j] for j in range(cols)] for i in range(rows)]
    else:
        arr = np.asarray(board, dtype=object)
        if arr.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ValueError(f"board must be {BOARD_SIZE}x{BOARD_SIZE}, got shape {arr.shape}")
        cells = arr.tolist()

    grid = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=int)
    for i in range(BOARD_SIZE):
        for j in range(BOARD_SIZE):
            grid[i, j] = normalize_cell(cells[i][j])

    return grid


def parse_board_string(text: str) -> np.ndarray:
    """
    "53..7...." のような文字列から盤面を作ります。

    数字と "." 以外の文字（改行や区切り記号）は無視します。
    "0" と "." は未確定セルです。
    """
    chars = [ch for ch in text if ch.isdigit() or ch == "."]
    if len(chars) != BOARD_SIZE * BOARD_SIZE:
        raise ValueError(
            f"expected {BOARD_SIZE * BOARD_SIZE} cells, got {len(chars)}"
        )
    values = [EMPTY if ch == "." else int(ch) for ch in chars]
    return np.array(values, dtype=int).reshape(BOARD_SIZE, BOARD_SIZE)


def empty_board() -> np.ndarray:
    """全セルが未確定の盤面を返します（「クリア」ボタン相当）。"""
    return np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=int)


def format_board(grid: BoardLike) -> str:
    """
    盤面をログ表示用の文字列にします。

    例::

        5 3 . | . 7 . | . . .
        6 . . | 1 9 5 | . . .
        ...
    """
    arr = normalize_board(grid)
    lines = []
    for i in range(BOARD_SIZE):
        if i and i % BLOCK_SIZE == 0:
            lines.append("------+-------+------")
        parts = []
        for j in range(BOARD_SIZE):
            if j and j % BLOCK_SIZE == 0:
                parts.append("|")
            v = int(arr[i, j])
            parts.append(str(v) if v else ".")
        lines.append(" ".join(parts))
    return "\n".join(lines)
