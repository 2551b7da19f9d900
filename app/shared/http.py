from fastapi import HTTPException
from typing import Any, NoReturn, Optional

def ok(data: Any = None, **extra):
    return {"ok": True, "data": data, **extra}

def err(message: str, code: str = "bad_request", status: int = 400, details: Optional[Any] = None) -> NoReturn:
    # always raises, so routes can `return err(...)` to short-circuit
    raise HTTPException(status_code=status, detail={"ok": False, "error": {"code": code, "message": message, "details": details}})
