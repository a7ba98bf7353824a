"""Error types raised by photo share services."""


class PhotoShareError(Exception):
    """Base error for the photo share service."""


class NotFoundError(PhotoShareError):
    """A requested or referenced record does not exist."""


class PhotosNotFoundError(NotFoundError):
    """The user has no photos."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"No photos found for user {user_id}")
        self.user_id = user_id


class CommentAuthorNotFoundError(NotFoundError):
    """A comment references a user that does not exist."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"Comment author {user_id} not found")
        self.user_id = user_id


class UserNotFoundError(NotFoundError):
    """The requested user does not exist."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class UpstreamFailureError(PhotoShareError):
    """The storage layer failed or returned unusable data."""
