"""Dependency injection factories."""

from functools import lru_cache
from typing import Callable

from core.logging import setup_logging
from domain.services.signup_service import SignupService
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from infrastructure.email.http_sender import HttpEmailSender


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_email_sender() -> HttpEmailSender:
    """Get the configured email sender."""
    return HttpEmailSender()


@lru_cache
def get_signup_service() -> SignupService:
    """Get Signup service instance.

    The first call also configures structured logging for the process.
    """
    setup_logging()
    return SignupService(
        get_uow_factory(),
        email_sender=get_email_sender(),
    )
