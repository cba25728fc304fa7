import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from planwizard.api.relay import relay_controller
from planwizard.api.wizard import session_controller, wizard_controller
from planwizard.config import CORS_ORIGINS, LOG_LEVEL, OPENAI_API_KEY
from planwizard.run_utils.llm import ConfigurationError, PromptRelay
from planwizard.run_utils.store import NullPlanStore

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        app.state.prompt_relay = PromptRelay(OPENAI_API_KEY)
    except ConfigurationError as e:
        logger.error("Prompt relay disabled: %s", e)
        app.state.prompt_relay = None
    app.state.plan_store = NullPlanStore()
    yield


app = FastAPI(
    title="AI Business Plan Wizard API",
    version="1.0.0",
    description="Business wizard, plan generation and completion relay",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(wizard_controller.router)
app.include_router(session_controller.router)
app.include_router(relay_controller.router)
