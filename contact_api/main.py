#run it with uvicorn contact_api.main:app --reload
from contextlib import asynccontextmanager
import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from contact_api.api.api_router import api_router
from contact_api.core.config import get_settings
from contact_api.core.submission_handler import MSG_FIELDS_REQUIRED, SubmissionHandler
from contact_api.db.contact_store import MongoContactStore
from contact_api.db.init_db import initialize_database
from contact_api.db.mongo import connect
from contact_api.services.mailer import SmtpMailNotifier

# Load environment variables from .env file
load_dotenv()

settings = get_settings()

# Set up logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting contact backend with settings: {settings.redacted()}")

    mongo_uri = settings.effective_mongo_uri
    mailbox = settings.mailbox

    client, db = connect(mongo_uri, settings.mongo_db_name)
    if not await initialize_database(db):
        logger.warning("Database initialization completed with warnings")

    notifier = SmtpMailNotifier.from_settings(settings)
    await notifier.verify()

    app.state.submission_handler = SubmissionHandler(
        store=MongoContactStore(db),
        notifier=notifier,
        mailbox=mailbox,
    )
    logger.info("Contact backend ready")

    yield

    client.close()
    logger.info("MongoDB connections closed")


app = FastAPI(title="Contact Backend", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # A body that is not an object of strings is treated like missing fields
    logger.warning(f"Rejected request body on {request.url.path}: {[error['loc'] for error in exc.errors()]}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": MSG_FIELDS_REQUIRED},
    )


@app.get("/", response_class=PlainTextResponse)
def root():
    return "Backend is running"
