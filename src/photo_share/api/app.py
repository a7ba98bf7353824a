"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from photo_share.api.schemas import PhotoOut, UserDetailOut, UserSummaryOut
from photo_share.app_logging import configure_logging
from photo_share.containers import AppContainer
from photo_share.domain.errors import NotFoundError, UpstreamFailureError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(NotFoundError)
    async def not_found_handler(
        request: Request, exc: NotFoundError
    ) -> PlainTextResponse:
        logger.info("Not found on %s: %s", request.url.path, exc)
        return PlainTextResponse(str(exc), status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(UpstreamFailureError)
    async def upstream_failure_handler(
        request: Request, exc: UpstreamFailureError
    ) -> PlainTextResponse:
        logger.error("Upstream failure on %s: %s", request.url.path, exc)
        return PlainTextResponse(
            str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/user/list", response_model=list[UserSummaryOut])
    def list_users(request: Request) -> list[UserSummaryOut]:
        """Return the public identity of every user."""
        state_container: AppContainer = request.app.state.container
        users = state_container.user_service.list_users()
        return [UserSummaryOut.from_domain(user) for user in users]

    @app.get("/user/{user_id}", response_model=UserDetailOut)
    def user_detail(user_id: str, request: Request) -> UserDetailOut:
        """Return a user's profile."""
        state_container: AppContainer = request.app.state.container
        detail = state_container.user_service.get_user(user_id)
        return UserDetailOut.from_detail(detail)

    @app.get("/photosOfUser/{user_id}", response_model=list[PhotoOut])
    async def photos_of_user(user_id: str, request: Request) -> list[PhotoOut]:
        """Return a user's photos with comment authors embedded."""
        state_container: AppContainer = request.app.state.container
        photos = await state_container.photo_aggregator.fetch_photos_with_authors(
            user_id
        )
        return [PhotoOut.from_domain(photo) for photo in photos]

    return app
