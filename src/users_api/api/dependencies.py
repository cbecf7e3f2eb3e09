"""Shared FastAPI dependencies."""

from fastapi import Request

from users_api.repositories.base import UserRepository


def get_user_repository(request: Request) -> UserRepository:
    """Return the repository the application was built with."""

    return request.app.state.user_repository
