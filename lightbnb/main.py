import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lightbnb.controllers import health_controller, property_controller, user_controller
from lightbnb.core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# O schema é externo: nada de create_all aqui
app = FastAPI(title="LightBnB")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Endpoints ---
app.include_router(health_controller.router)
app.include_router(user_controller.router)
app.include_router(property_controller.router)
