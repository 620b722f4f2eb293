"""Interface layer DI providers."""

from dishka import Scope, provide
from fastapi import Request

from anonboard.domain.service import JWTService
from anonboard.interface.api.identity import Caller, resolve_caller
from anonboard.util.di.base import ProviderBase


class ProdInterfaceProvider(ProviderBase):
    """Per-request values derived from the HTTP request - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_caller(self, request: Request, jwt_service: JWTService) -> Caller:
        """Provide the identity of the current caller."""
        return resolve_caller(request, jwt_service)
