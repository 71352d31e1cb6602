import logging

from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .models.schemas import (
    ColorLookupRequest,
    ColorLookupResponse,
    ColorResult,
    ColorTableResponse,
    ErrorResponse,
)
from .service.palette import (
    COLOR_TABLE,
    INVALID_COLOR_CODE,
    InvalidColorCode,
    lookup_colors,
    return_color,
)

logger = logging.getLogger(settings.SERVICE_NAME + ".api")

router = APIRouter(prefix=f"/{settings.API_VERSION}")


@router.get(
    "/colors",
    response_model=ColorTableResponse,
    summary="List known colors",
    description="Returns every known color code with its hex color string.",
)
async def list_colors() -> ColorTableResponse:
    return ColorTableResponse(colors=dict(COLOR_TABLE))


@router.get(
    "/colors/{code}",
    response_model=ColorResult,
    responses={404: {"model": ErrorResponse}},
    summary="Look up a single color",
    description="Returns the hex color string for a color code, or 404 if the code is unknown.",
)
async def get_color(code: str) -> ColorResult:
    """
    Look up one color code.

    Args:
        code: Color code taken from the path

    Returns:
        ColorResult with the hex color string
    """
    hex_value = return_color(code)
    return ColorResult(code=code, status="ok", hex=hex_value)


@router.post(
    "/colors/lookup",
    response_model=ColorLookupResponse,
    summary="Look up several colors",
    description="Resolves a list of color codes. Unknown codes are reported per entry instead of failing the request.",
)
async def lookup_many(request: ColorLookupRequest) -> ColorLookupResponse:
    """
    Resolve a batch of color codes.

    Args:
        request: ColorLookupRequest with the codes to resolve

    Returns:
        ColorLookupResponse with one result per requested code
    """
    logger.info(f"Received lookup request for {len(request.codes)} codes")

    try:
        results = lookup_colors(request.codes)
    except Exception as e:
        logger.error(f"Error processing lookup request: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Error processing lookup request: {str(e)}"
        )

    found = sum(1 for r in results if r.ok)
    return ColorLookupResponse(results=results, found=found, missing=len(results) - found)


@router.get(
    "/healthz",
    response_model=dict,
    summary="Health check endpoint",
    description="Returns the health status of the Color Lookup service.",
)
async def health_check() -> dict:
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "colors_count": len(COLOR_TABLE),
    }


async def invalid_color_handler(request: Request, exc: InvalidColorCode) -> JSONResponse:
    logger.info(f"Rejected unknown color code: {exc.code!r}")
    body = ErrorResponse(error=INVALID_COLOR_CODE, code=str(exc.code), message=str(exc))
    return JSONResponse(status_code=404, content=body.model_dump())


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application for the Color Lookup service.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Color Lookup Service",
        description="Maps color names to hex color strings.",
        version="0.1.0",
        docs_url=f"/{settings.API_VERSION}/docs",
        redoc_url=f"/{settings.API_VERSION}/redoc",
        openapi_url=f"/{settings.API_VERSION}/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidColorCode, invalid_color_handler)
    app.include_router(router, tags=["Color Lookup"])

    @app.on_event("startup")
    async def startup_event():
        logger.info(f"Starting Color Lookup service with {len(COLOR_TABLE)} colors")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Shutting down Color Lookup service")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info("Running Color Lookup API directly")
    uvicorn.run(
        "color_lookup.api:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
