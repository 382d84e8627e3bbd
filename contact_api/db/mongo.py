import motor.motor_asyncio
import logging
from typing import Optional, Tuple
from urllib.parse import urlsplit, urlunsplit

# Set up logger
logger = logging.getLogger(__name__)


def mask_uri(uri: str) -> str:
    """Mask the password in a connection string for logging"""
    parts = urlsplit(uri)
    if parts.password is None:
        return uri
    netloc = parts.netloc.replace(
        f":{parts.password}@", f":{'*' * len(parts.password)}@", 1
    )
    return urlunsplit(parts._replace(netloc=netloc))


def split_database_name(uri: str) -> Tuple[str, Optional[str]]:
    """
    Split the database name off a MongoDB URI.

    The database is selected after connecting rather than passed in the URI,
    so that it is not also used as the authentication database.

    Returns:
        tuple: (connection URI without the database path, database name or None)
    """
    parts = urlsplit(uri)
    db_name = parts.path.strip("/") or None
    connection_uri = urlunsplit(parts._replace(path="/"))
    return connection_uri, db_name


def connect(uri: str, default_db_name: Optional[str] = None):
    """
    Create the shared Motor client and select the application database.

    Args:
        uri: MongoDB connection string, optionally with a database path
        default_db_name: Database used when the URI does not name one

    Returns:
        tuple: (AsyncIOMotorClient, AsyncIOMotorDatabase)
    """
    logger.info(f"MongoDB URI configured: {mask_uri(uri)}")

    connection_uri, db_name = split_database_name(uri)
    db_name = db_name or default_db_name
    if not db_name:
        raise ValueError("Database name not found in MongoDB URI. Please include it in MONGODB_URL or set MONGO_DB_NAME.")

    logger.info(f"Connecting to MongoDB server: {mask_uri(connection_uri)}")
    client = motor.motor_asyncio.AsyncIOMotorClient(
        connection_uri,
        maxPoolSize=10,
        minPoolSize=0,
        maxIdleTimeMS=30000,
        serverSelectionTimeoutMS=5000,
        connectTimeoutMS=10000
    )

    db = client[db_name]
    logger.info(f"MongoDB client created for database: {db_name}")
    return client, db
