# sudoku_tool_api.py
# FastAPI wrapper for the solver.
# Run with: python -m apps.api.sudoku_tool_api --config api.yaml
#       or: uvicorn apps.api.sudoku_tool_api:app --reload
from __future__ import annotations

import argparse
import logging
from typing import Annotated

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field, StrictInt
from starlette.exceptions import HTTPException as StarletteHTTPException

from apps.api.config import load_config
from apps.log_setup import setup_logging
from solver.sudoku_tools import jsolve

SOLVE_ROUTE = "/sudoku/solve"

USAGE = """Sudoku Solver API.

Invoke at this endpoint using POST, Content-Type application/json,
and with body containing the following JSON object representing
the Sudoku game to solve:

{"solution": [[...9 ints...], ...9 rows...], "status": ""}

Each value is 0..9 with 0 representing a blank cell.

The service will populate the status field with a status string.  If a solution
is possible, the solution grid will contain a solved Sudoku puzzle.
"""

logger = logging.getLogger("SudokuToolApi")

app = FastAPI(title="Sudoku Solver API")

# Wire format is a byte per cell. Values 10..255 decode and are reported in status.
WireCell = Annotated[StrictInt, Field(ge=0, le=255)]


class JsonGridModel(BaseModel):
    solution: list[list[WireCell]]
    status: str = ""


@app.exception_handler(RequestValidationError)
async def bad_request(request: Request, exc: RequestValidationError):
    logger.warning("Can't decode JSON: %s", exc.errors())
    return PlainTextResponse("400 - Bad Request", status_code=400)


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed(request: Request, exc: StarletteHTTPException):
    if exc.status_code != 405:
        return await http_exception_handler(request, exc)
    logger.warning("Method %s not allowed on %s", request.method, request.url.path)
    return PlainTextResponse("405 - Method Not Allowed\n", status_code=405, headers=exc.headers)


@app.get(SOLVE_ROUTE, response_class=PlainTextResponse)
def api_usage():
    return USAGE


@app.post(SOLVE_ROUTE)
def api_solve(payload: JsonGridModel):
    return jsolve({"solution": payload.solution, "status": payload.status})


def main(argv=None):
    ap = argparse.ArgumentParser(description="Serve the Sudoku solver over HTTP.")
    ap.add_argument("--config", type=str, default=None, help="YAML file with host, port and log_level")
    ap.add_argument("--host", type=str, default=None)
    ap.add_argument("--port", type=int, default=None)
    ap.add_argument("--log-level", dest="log_level", type=str, default=None)
    args = ap.parse_args(argv)

    cfg = load_config(args.config, host=args.host, port=args.port, log_level=args.log_level)
    setup_logging(cfg.log_level)
    logger.info("Serving %s on %s:%d", SOLVE_ROUTE, cfg.host, cfg.port)
    uvicorn.run(app, host=cfg.host, port=cfg.port, log_level=cfg.log_level.lower())


if __name__ == "__main__":
    main()
