# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
import structlog
import uvicorn

from netapiserver.api.handlers import APIv1
from netapiserver.middlewares.context import ContextMiddleware
from netapiserver.middlewares.exceptions import (
    ExceptionHandlers,
    ExceptionMiddleware,
)
from netapiserver.middlewares.services import ServicesMiddleware
from netapiserver.settings import Config, read_config
from netservicelayer.apiclient.directory import DirectoryClient
from netservicelayer.apiclient.napi import NapiClient
from netservicelayer.logging.configure import configure_logging
from netservicelayer.services import BackendClients

logger = structlog.getLogger()


class MiddlewareHandler:
    def __init__(self, middleware_class, **kwargs):
        self.middleware_class = middleware_class
        self.kwargs = kwargs

    def get_middleware(self):
        return self.middleware_class

    def get_kwargs(self):
        return self.kwargs


def config_uvicorn_logging(level=logging.INFO) -> None:
    logging.getLogger("uvicorn.error").setLevel(level)
    logging.getLogger("uvicorn.asgi").setLevel(level)
    # The context middleware already logs every request: log only ERROR
    # unless debug is enabled.
    logging.getLogger("uvicorn.access").setLevel(
        logging.ERROR if level == logging.INFO else level
    )


def build_clients(config: Config) -> BackendClients:
    return BackendClients(
        napi=NapiClient(config.napi_url, timeout=config.backend_timeout),
        directory=DirectoryClient(
            config.directory_url, timeout=config.backend_timeout
        ),
    )


def create_app(
    config: Config,
    clients: BackendClients | None = None,
    # Resolves the account of the request into `request.state.account`.
    authentication_middlewares: list[MiddlewareHandler] | None = None,
) -> FastAPI:
    """Create the FastAPI application."""
    if clients is None:
        clients = build_clients(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await clients.close()

    app = FastAPI(
        title="NetAPIServer",
        name="netapiserver",
        lifespan=lifespan,
    )
    app.state.config = config

    # The order here is important: the last middleware added is the first
    # one processing the request.
    app.add_middleware(
        ServicesMiddleware,
        clients=clients,
        datacenter_name=config.datacenter_name,
    )
    for middleware in authentication_middlewares or []:
        app.add_middleware(
            middleware.get_middleware(), **middleware.get_kwargs()
        )
    app.add_middleware(ExceptionMiddleware)
    app.add_middleware(ContextMiddleware)

    app.add_exception_handler(
        RequestValidationError, ExceptionHandlers.validation_exception_handler
    )

    APIv1.register(app.router)
    return app


def run(
    app_config: Config | None = None,
    authentication_middlewares: list[MiddlewareHandler] | None = None,
):
    if app_config is None:
        app_config = read_config()

    configure_logging(
        level=logging.DEBUG if app_config.debug else logging.INFO,
        http_client_level=(
            logging.DEBUG if app_config.debug_http else logging.WARNING
        ),
    )
    config_uvicorn_logging(
        logging.DEBUG if app_config.debug_http else logging.INFO
    )

    if not app_config.fabrics_enabled:
        logger.info(
            "Fabrics are disabled", datacenter=app_config.datacenter_name
        )

    app = create_app(
        app_config, authentication_middlewares=authentication_middlewares
    )
    server_config = uvicorn.Config(
        app,
        host=app_config.host,
        port=app_config.port,
        loop="asyncio",
        proxy_headers=True,
        # We configure the logging OUTSIDE the library in order to use our custom json formatter.
        log_config=None,
    )
    server = uvicorn.Server(server_config)
    server.run()
