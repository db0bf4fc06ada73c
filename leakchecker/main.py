from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request
from starlette.responses import JSONResponse, Response

from leakchecker import config
from leakchecker.errors import ProxyError
from leakchecker.proxy import router as proxy_router
from leakchecker.web import router as page_router

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s | %(levelname)s | %(message)s",
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Password Leak Checker", version=config.APP_VERSION)


# Same permissive CORS headers on every response, pre-flight and errors included.
@app.middleware("http")
async def cors_and_access_log(request: Request, call_next):
    start = time.time()
    resp: Response = await call_next(request)
    resp.headers.update(config.CORS_HEADERS)
    logger.info(
        "%s %s -> %s (%dms)",
        request.method,
        request.url.path,
        resp.status_code,
        int((time.time() - start) * 1000),
    )
    return resp


@app.exception_handler(ProxyError)
async def proxy_error_handler(request: Request, exc: ProxyError):
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(exc.to_dict(), status_code=exc.status_code)


@app.get("/health")
def health():
    return {
        "status": "ok",
        "service": "leakchecker",
        "version": app.version,
        "has_hibp_key": bool(config.HIBP_API_KEY),
    }


app.include_router(proxy_router)
app.include_router(page_router)
