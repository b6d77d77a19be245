import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from roster import config
from roster.middleware import ErrorHandlingMiddleware, RequestLoggingMiddleware
from roster.modules.users.api import user_router, get_user_service, register_error_handlers
from roster.modules.users.auth import TokenAuthMiddleware
from roster.modules.users.services import seed_users

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
logger = logging.getLogger("roster")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    if config.SEED_USERS:
        created = seed_users(get_user_service())
        logger.info(f"Roster ready ({created} seed users created)")
    yield


app = FastAPI(title="Roster User Management API", version="0.1.0", lifespan=lifespan)

# Registered innermost first: logging sees only authenticated traffic,
# and the error handler wraps everything below it.
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(TokenAuthMiddleware, token=config.API_TOKEN, protected_paths=["/api/"])
app.add_middleware(ErrorHandlingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(user_router)


@app.get("/")
async def root():
    return {"status": "online", "system": "Roster"}


@app.get("/health")
async def health():
    return {"status": "healthy", "users": get_user_service().count_users()}
