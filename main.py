from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware
from core.config_loader import settings
from core.logging import setup_logging

from employee.router import employee_router
from food_invoice.router import food_invoice_router
from seat_type.router import seat_type_router
import models_bootstrap

setup_logging()

openapi_tags = [
    {
        "name": "Employees",
        "description": "Employees and their login accounts",
    },
    {
        "name": "Food orders",
        "description": "Food lines of an invoice",
    },
    {
        "name": "Health Checks",
        "description": "Application health checks",
    }
]

app = FastAPI(openapi_tags=openapi_tags)

if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            str(origin).strip("/") for origin in settings.BACKEND_CORS_ORIGINS
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(employee_router, prefix="/api")
app.include_router(food_invoice_router, prefix="/api")
app.include_router(seat_type_router, prefix="/api")


@app.get("/health", tags=['Health Checks'])
def read_root():
    return {"health": "true"}
