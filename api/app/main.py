"""FastAPI app with Strawberry GraphQL."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter

from app.schema import schema
from app.settings import API_VERSION, get_settings

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure root logging once the server starts."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    yield


app = FastAPI(title=settings.api_title, version=API_VERSION, lifespan=lifespan)
graphql_app = GraphQLRouter(schema)
app.include_router(graphql_app, prefix="/graphql")


@app.get("/health")
def health() -> dict[str, str]:
    """Health check for load balancers and Docker."""
    return {"status": "ok"}
