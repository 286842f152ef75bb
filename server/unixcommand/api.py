from __future__ import annotations

import io
import logging
import os
from typing import Any, Dict, FrozenSet, List, Mapping, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from . import COMMANDS, run_command
from .limits import CappedBuffer, check_args_limit, check_input_limit, truncate_output

logger = logging.getLogger(__name__)


# -----------------------------
# App setup
# -----------------------------
app = FastAPI(title="unixcommand API", version="0.1.0")

# cat and cp reach the host filesystem, so they are opt-in
DEFAULT_ALLOWED = frozenset({"echo", "printf", "pwd", "seq", "whoami"})
ALLOWED_ENV_VAR = "UNIXCOMMAND_ALLOWED_COMMANDS"


def allowed_from_env(environ: Mapping[str, str] = os.environ) -> FrozenSet[str]:
    """Read the comma separated allow-list, ignoring unregistered names."""
    raw = environ.get(ALLOWED_ENV_VAR)
    if raw is None:
        return DEFAULT_ALLOWED
    names = {name.strip() for name in raw.split(",")}
    return frozenset(name for name in names if name in COMMANDS)


ALLOWED_COMMANDS = allowed_from_env()


# -----------------------------
# Error handling (envelope)
# -----------------------------
class APIError(Exception):
    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}


@app.exception_handler(APIError)
async def api_error_handler(_, exc: APIError):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "ok": False,
            "error": {"code": exc.code, "message": exc.message, "details": exc.details},
        },
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content={
            "ok": False,
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "command request must be {\"args\": [str], \"stdin\": str}",
                "details": {
                    "command": request.path_params.get("name"),
                    "errors": exc.errors(),
                },
            },
        },
    )


def ok(data: Any):
    return {"ok": True, "data": data}


# -----------------------------
# Request models
# -----------------------------
class CommandExecReq(BaseModel):
    args: List[str] = Field(default_factory=list)
    stdin: str = ""


# -----------------------------
# Routes
# -----------------------------
@app.get("/")
def root():
    return ok(
        {
            "service": "unixcommand API",
            "docs": "/docs",
            "openapi": "/openapi.json",
            "health": "/api/v1/health",
        }
    )


@app.get("/api/v1/health")
def health():
    return ok({"status": "ok"})


@app.get("/api/v1/commands")
def list_commands():
    return ok({"commands": sorted(ALLOWED_COMMANDS)})


@app.post("/api/v1/commands/{name}")
def exec_command(name: str, req: CommandExecReq = CommandExecReq()):
    if name not in COMMANDS:
        raise APIError("NOT_FOUND", f"unknown command: {name}", 404)
    if name not in ALLOWED_COMMANDS:
        raise APIError("FORBIDDEN", f"command not allowed: {name}", 403)

    try:
        check_args_limit(req.args)
        check_input_limit(req.stdin)
    except ValueError as exc:
        logger.info("rejected %s request: %s", name, exc)
        raise APIError("INPUT_TOO_LARGE", str(exc), 413) from exc

    stdin = io.BytesIO(req.stdin.encode("utf-8"))
    stdout = CappedBuffer()
    stderr = CappedBuffer()
    code = run_command(name, req.args, stdin, stdout, stderr, allowed=ALLOWED_COMMANDS)

    safe_stdout, out_truncated = truncate_output(stdout.getvalue(), stdout.overflowed)
    safe_stderr, err_truncated = truncate_output(stderr.getvalue(), stderr.overflowed)
    return ok(
        {
            "stdout": safe_stdout,
            "stderr": safe_stderr,
            "exitCode": code,
            "truncated": out_truncated or err_truncated,
        }
    )
