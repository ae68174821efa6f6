# template_resolver/main.py
from fastapi import FastAPI
from contextlib import asynccontextmanager
from .api import templates as templates_api
from .api import system as system_api
from .config import settings
from .middleware.error_handlers import register_error_handlers
from .registry import get_store
from .utils.logging import setup_logging
from .utils.logging_tools import info, warning

setup_logging(settings.LOG_LEVEL.upper())

@asynccontextmanager
async def custom_lifespan(app: FastAPI):
    # Startup: bind the shared store and do the first load
    store = get_store(settings.TEMPLATE_FILE)
    if store.is_loaded:
        info("custom_lifespan: serving templates from %s", store.path)
    else:
        warning("custom_lifespan: no templates loaded from %s yet", store.path)

    yield

    info("custom_lifespan: Shutdown")

app = FastAPI(title="Template Resolver", lifespan=custom_lifespan)

register_error_handlers(app)

app.include_router(templates_api.router)
app.include_router(system_api.router)
