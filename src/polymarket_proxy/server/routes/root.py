from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse

router = APIRouter(tags=["health"])

GREETING = "Hello, World! Welcome to the polymarket proxy server."


@router.api_route("/", methods=["GET", "HEAD"])
def root():
    return PlainTextResponse(GREETING)


@router.api_route("/health", methods=["GET", "HEAD"])
def health():
    return JSONResponse({"status": "ok"})
