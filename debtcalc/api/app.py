"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from debtcalc.api.routes import amortization
from debtcalc.config import settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=settings.log_level)
    yield


app = FastAPI(
    title="Debt Calc",
    description="Amortized debt repayment schedules",
    version="0.1.0",
    debug=settings.debug,
    lifespan=lifespan,
)

app.include_router(amortization.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
