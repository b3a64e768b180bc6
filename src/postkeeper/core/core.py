from __future__ import annotations

import importlib
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any, cast
from urllib.parse import urlparse

import structlog
from pymongo import AsyncMongoClient

from postkeeper.config import Config
from postkeeper.core.modules.token.service import TokenService
from postkeeper.core.modules.user.password import PasswordHasher
from postkeeper.core.modules.user.store import MongoUserStore, UserStore

if TYPE_CHECKING:
    from postkeeper.core.modules.post.service import PostService
    from postkeeper.core.modules.session.service import SessionService
    from postkeeper.core.modules.user.service import UserService

logger = structlog.get_logger(__name__)


class Service:
    """Base class for services with direct store access."""

    def __init__(self, store: UserStore) -> None:
        self.store = store
        self._core: Core | None = None

    async def on_start(self) -> None:
        """Initialize service on application startup."""

    async def on_stop(self) -> None:
        """Cleanup service on application shutdown."""

    @property
    def core(self) -> Core:
        """Get the core application context."""
        if self._core is None:
            raise RuntimeError("Core not set for service")
        return self._core

    def set_core(self, core: Core) -> None:
        """Set the core application context."""
        self._core = core


class Services:
    """Service registry that automatically discovers and initializes services."""

    user: UserService
    session: SessionService
    post: PostService

    def __init__(self, store: UserStore) -> None:
        """Initialize all services automatically using service configuration."""
        self._services: list[Service] = []

        # Service configuration: (attribute_name, module_path, class_name)
        service_configs = [
            ("user", "postkeeper.core.modules.user.service", "UserService"),
            ("session", "postkeeper.core.modules.session.service", "SessionService"),
            ("post", "postkeeper.core.modules.post.service", "PostService"),
        ]

        for attr_name, module_path, class_name in service_configs:
            module = importlib.import_module(module_path)
            service_class = cast(type[Service], getattr(module, class_name))
            service_instance = service_class(store)
            setattr(self, attr_name, service_instance)
            self._services.append(service_instance)

    def set_core(self, core: Core) -> None:
        """Set core reference for all services."""
        for service in self._services:
            service.set_core(core)

    async def start_all(self) -> None:
        for service in self._services:
            await service.on_start()

    async def stop_all(self) -> None:
        for service in self._services:
            await service.on_stop()


class Core:
    """Container providing config, store, stateless helpers and all service instances."""

    config: Config
    mongo_client: AsyncMongoClient[dict[str, Any]] | None
    store: UserStore
    password_hasher: PasswordHasher
    token_service: TokenService
    services: Services

    def __init__(self, config: Config, store: UserStore | None = None) -> None:
        """Initialize core with config and a store (MongoDB unless one is given)."""
        self.config = config
        self.mongo_client = None
        if store is None:
            self.mongo_client = AsyncMongoClient(config.database_url, uuidRepresentation="standard")
            database = self.mongo_client.get_database(urlparse(config.database_url).path[1:])
            store = MongoUserStore(database.get_collection("users"))
        self.store = store
        self.password_hasher = PasswordHasher(config.bcrypt_rounds)
        self.token_service = TokenService(config.token_secret_key, config.token_ttl_seconds)
        self.services = Services(store)
        self.services.set_core(self)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Manage application lifecycle - startup and shutdown."""
        await self.on_start()
        try:
            yield
        finally:
            await self.on_stop()

    async def on_start(self) -> None:
        await self.store.on_start()
        await self.services.start_all()
        logger.debug("core_started", token_ttl_seconds=self.config.token_ttl_seconds)

    async def on_stop(self) -> None:
        """Stop services and close MongoDB connection on shutdown."""
        await self.services.stop_all()
        await self.store.on_stop()
        if self.mongo_client is not None:
            await self.mongo_client.aclose()
