from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .catalog.loader import load_catalog
from .config import DEFAULT_APP_CONFIG, AppConfig
from .recommendations.errors import INVALID_INPUT_MESSAGE, InternalError, InvalidInputError
from .recommendations.models import ErrorResponse, RecommendRequest
from .recommendations.strategies import Recommender, build_recommender

logger = logging.getLogger(__name__)


def get_recommender(request: Request) -> Recommender:
    """Recommender built at startup; shared read-only by every request."""
    recommender = getattr(request.app.state, "recommender", None)
    if recommender is None:
        logger.error("Recommend request received before the catalog was loaded")
        raise InternalError()
    return recommender


def create_app(config: AppConfig = DEFAULT_APP_CONFIG) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Any load failure aborts startup.
        catalog = load_catalog(config.csv_path)
        app.state.catalog = catalog
        app.state.recommender = build_recommender(
            catalog,
            config.strategy,
            similarity_top_n=config.similarity_top_n,
        )
        logger.info(
            "Serving %s recommendations over %d bourbons",
            app.state.recommender.name.value,
            len(catalog),
        )
        yield

    app = FastAPI(title="Distillery Recommendation API", version="1.0.0", lifespan=lifespan)

    # ── Error mapping ────────────────────────────────────────────────────

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Invalid recommend payload: %s", exc.errors())
        return JSONResponse(status_code=400, content={"error": INVALID_INPUT_MESSAGE})

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(InternalError)
    async def internal_error_handler(request: Request, exc: InternalError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": exc.message})

    # ── Endpoints ────────────────────────────────────────────────────────

    @app.post(
        "/recommend",
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    def recommend(
        body: RecommendRequest,
        recommender: Recommender = Depends(get_recommender),
    ) -> list[dict]:
        logger.info("Recommend endpoint hit with bourbon ids: %s", body.bourbon_ids)
        try:
            recommendations = recommender.recommend(body.bourbon_ids)
            payload = [r.model_dump(by_alias=True) for r in recommendations]
        except InvalidInputError:
            raise
        except Exception as exc:
            logger.exception("Error in recommend endpoint")
            raise InternalError() from exc
        return payload

    return app


app = create_app()
