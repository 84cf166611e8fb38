"""
Main entrypoint for the FastAPI server
"""

from fastapi import FastAPI
from fastapi.routing import APIRoute
from core.lifespan import lifespan
from core.config import get_settings
from core.models import PingResponse

from api.files.routes import router as files_router


# Customize route id's
# Helpful for creating sensible names in the client
def custom_generate_unique_id(route: APIRoute):
    """ Generate unique route IDs based on route name """
    return f"{route.name}"  # these must be unique


# Create schema & router
app = FastAPI(
    title=get_settings().APP_NAME,
    lifespan=lifespan,
    generate_unique_id_function=custom_generate_unique_id
)

app.include_router(files_router)


# Health check endpoint for monitoring
@app.get("/ping", response_model=PingResponse, tags=["health"])
def ping() -> PingResponse:
    return PingResponse(message="pong")


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT)
