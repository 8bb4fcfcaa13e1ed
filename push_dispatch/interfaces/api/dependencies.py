"""FastAPI dependency utilities."""

from collections.abc import Generator

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from push_dispatch.runtime import PushRuntime


def get_runtime(request: Request) -> PushRuntime:
    """Return the runtime attached to the application by its lifespan."""

    runtime = getattr(request.app.state, "runtime", None)
    if runtime is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Push runtime not initialized",
        )
    return runtime


def get_db(runtime: PushRuntime = Depends(get_runtime)) -> Generator[Session, None, None]:
    """Yield a session from the runtime's factory and close it afterwards."""

    db = runtime.session_factory()
    try:
        yield db
    finally:
        db.close()
