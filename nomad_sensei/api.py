"""HTTP API for the travel concierge"""

import logging
from typing import List, Optional

from fastapi import FastAPI, File, Form, HTTPException, Request, UploadFile
from pydantic import BaseModel, Field

from .config.config_loader import ConfigLoader, setup_logging
from .services.travel_agent import TravelAgent, create_travel_agent

logger = logging.getLogger(__name__)


# Pydantic models for API request and response
class SourceModel(BaseModel):
    number: int = Field(..., description="Citation number, starting at 1.")
    title: str = Field(..., description="Title of the source page.")
    url: str = Field(..., description="URL of the source page.")


class ActionModel(BaseModel):
    label: str = Field(..., description="Button label for the action.")
    url: str = Field(..., description="Target of the action.")


class AskResponse(BaseModel):
    title: str = Field(..., description="Headline for the answer.")
    answer: str = Field(..., description="Generated answer with citation markers.")
    sources: List[SourceModel] = Field(..., description="Numbered sources backing the citations.")
    actions: List[ActionModel] = Field(..., description="Suggested follow-up actions.")


def create_app(agent: Optional[TravelAgent] = None) -> FastAPI:
    """Build the API; the agent is created from the environment on startup when not given"""
    app = FastAPI(
        title="NomadSensei API",
        description="Travel answers with citations for questions and photos",
        version="1.0.0",
    )
    app.state.agent = agent

    @app.on_event("startup")
    async def startup_event():
        if app.state.agent is None:
            config = ConfigLoader.load_config()
            setup_logging(config.log_level)
            app.state.agent = create_travel_agent(config)
            logger.info("Travel agent initialized.")

    @app.get("/")
    async def root():
        return {"message": "NomadSensei API is running"}

    @app.post("/ask", response_model=AskResponse)
    async def ask_endpoint(
        request: Request,
        query: str = Form("", description="The travel question."),
        image: Optional[UploadFile] = File(None, description="Optional photo to identify."),
    ):
        image_bytes = None
        if image is not None and image.filename:
            image_bytes = await image.read()

        if not query.strip() and image_bytes is None:
            raise HTTPException(status_code=400, detail="Provide a question or an image.")

        logger.info(f"Received travel query: {query!r} (image: {image_bytes is not None})")
        response = await request.app.state.agent.process_query(query, image_bytes)
        return response.to_dict()

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
