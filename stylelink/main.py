import logging

from fastapi import FastAPI

from stylelink.config import settings
from stylelink.routers import brands, essentials, product_link

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title=settings.app_name, debug=settings.debug)

# routers
app.include_router(product_link.router)
app.include_router(brands.router)
app.include_router(essentials.router)
