"""FastAPI application entrypoint and HTTP controllers.

This module defines the HTTP endpoints of the resource store API.
Controllers are intentionally thin: they accept requests, delegate to
services, and map store errors to status codes.

Endpoints implemented for each resource (`customers`, `products`, `books`):
- POST /{resource}
- GET /{resource}
- GET /{resource}/statistics
- GET /{resource}/{id}
- PUT /{resource}/{id}
- DELETE /{resource}/{id}

plus GET /, GET /health and GET /resources.
"""

from fastapi import FastAPI, APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse, HTMLResponse, Response
from fastapi.middleware.cors import CORSMiddleware
from typing import List, Optional
import json
import logging
import time
import uuid
from .config import settings
from .errors import StoreError
from .services import RESOURCE_KINDS, ResourceKind
from .models import Statistics
from .storage import StoreRegistry, get_registry, registry, seed_registry

app = FastAPI(title="Resource Store API")
logger = logging.getLogger("app.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

# Wide-open CORS keeps local HTML testers working without extra config in dev.
if settings.ALLOW_DEV_CORS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

if settings.SEED_ON_STARTUP:
    seed_registry(registry, settings.SEED_FILE)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    response: Response
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
        logger.exception(
            "request_failed %s",
            json.dumps(
                {
                    "request_id": req_id,
                    "path": request.url.path,
                    "method": request.method,
                    "duration_ms": elapsed_ms,
                    "client": request.client.host if request.client else "unknown",
                },
                ensure_ascii=True,
            ),
        )
        raise
    response.headers["X-Request-ID"] = req_id
    elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
    logger.info(
        "request_done %s",
        json.dumps(
            {
                "request_id": req_id,
                "path": request.url.path,
                "method": request.method,
                "status_code": response.status_code,
                "duration_ms": elapsed_ms,
                "client": request.client.host if request.client else "unknown",
            },
            ensure_ascii=True,
        ),
    )
    return response


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    """Answer NotFound/EmptyStore with the status each error carries."""
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


def build_resource_router(kind: ResourceKind) -> APIRouter:
    """Return a router exposing CRUD and statistics for one resource kind.

    The statistics route is registered before `/{record_id}` so that
    `statistics` is never taken for an identifier.
    """
    router = APIRouter(tags=[kind.name])
    base = f"/{kind.name}"
    payload_schema = kind.schema

    @router.post(base, status_code=201, response_model=kind.model, name=f"create_{kind.name}")
    def create_record(payload: payload_schema, reg: StoreRegistry = Depends(get_registry)):
        """Create a record; the identifier is always assigned by the store."""
        return reg.service(kind.name).create(payload)

    @router.get(base, response_model=List[kind.model], name=f"list_{kind.name}")
    def list_records(reg: StoreRegistry = Depends(get_registry)):
        """List all records in insertion order (possibly empty)."""
        return reg.service(kind.name).list()

    @router.get(f"{base}/statistics", response_model=Statistics, name=f"{kind.name}_statistics")
    def record_statistics(field: Optional[str] = None, reg: StoreRegistry = Depends(get_registry)):
        """Return count and the min/max record labels for `field`.

        An empty collection answers 404; an unknown field answers 400.
        """
        try:
            return reg.service(kind.name).statistics(field)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

    @router.get(f"{base}/{{record_id}}", response_model=kind.model, name=f"get_{kind.name}")
    def get_record(record_id: str, reg: StoreRegistry = Depends(get_registry)):
        return reg.service(kind.name).get(record_id)

    @router.put(f"{base}/{{record_id}}", response_model=kind.model, name=f"replace_{kind.name}")
    def replace_record(record_id: str, payload: payload_schema, reg: StoreRegistry = Depends(get_registry)):
        """Replace all fields of an existing record; unknown ids answer 404."""
        return reg.service(kind.name).replace(record_id, payload)

    @router.delete(f"{base}/{{record_id}}", status_code=204, response_class=Response, name=f"delete_{kind.name}")
    def delete_record(record_id: str, reg: StoreRegistry = Depends(get_registry)):
        reg.service(kind.name).delete(record_id)
        return Response(status_code=204)

    return router


for _kind in RESOURCE_KINDS.values():
    app.include_router(build_resource_router(_kind))


@app.get("/resources")
def list_resources(reg: StoreRegistry = Depends(get_registry)):
    """Return each resource kind with its current record count."""
    counts = reg.counts()
    return [
        {"name": name, "label_field": kind.label_field, "stat_field": kind.stat_field, "count": counts[name]}
        for name, kind in RESOURCE_KINDS.items()
    ]


@app.get("/", response_class=HTMLResponse)
def home():
    """Minimal homepage for quick manual testing."""
    links = "\n".join(f'          <li><a href="/{name}">/{name}</a></li>' for name in RESOURCE_KINDS)
    return f"""
    <!DOCTYPE html>
    <html>
    <head>
      <meta charset="UTF-8" />
      <title>Resource Store API</title>
      <style>
        body {{ font-family: Arial, sans-serif; margin: 32px; }}
        a {{ color: #0a6; }}
        .card {{ max-width: 640px; padding: 16px; border: 1px solid #ddd; border-radius: 8px; }}
      </style>
    </head>
    <body>
      <div class="card">
        <h1>Resource Store API</h1>
        <p>Quick links for local testing:</p>
        <ul>
          <li><a href="/docs">Swagger UI</a></li>
{links}
        </ul>
        <p>Records live in memory only and are lost on restart.</p>
      </div>
    </body>
    </html>
    """


@app.get("/health")
def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok"}
