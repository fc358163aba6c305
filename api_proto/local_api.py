from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from sudoku_solver import SearchAborted, solve_board
from sudoku_solver.config import EXAMPLE_PUZZLE
from sudoku_solver.grid.parser import empty_board
from sudoku_solver.logging_utils import get_logger
from sudoku_solver.postprocess.render_result import build_result

logger = get_logger()

app = FastAPI()


class SolveRequest(BaseModel):
    board: list[list[int | None]]  # 9x9, 0 or null = unknown


@app.post("/api/solve")
def api_solve(request: SolveRequest):
    """
    Solver API endpoint.
    Receives the grid (2D array) and returns the solved board, or
    status "contradiction" / "exhausted" when no solution exists.

    Declared as a plain def so FastAPI runs the solver in its threadpool.
    """
    try:
        result = solve_board(request.board)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SearchAborted as e:
        logger.warning("Search aborted: %s", e)
        raise HTTPException(status_code=503, detail=str(e))
    return build_result(result)


@app.get("/api/example")
def api_example():
    """Returns the example puzzle used by the board's "load example" button."""
    return {"board": [list(row) for row in EXAMPLE_PUZZLE]}


@app.get("/api/empty")
def api_empty():
    """Returns a cleared board."""
    return {"board": empty_board().tolist()}
